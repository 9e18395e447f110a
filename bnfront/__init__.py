# bnfront/__init__.py
"""bnfront: BNF-like grammar definitions -> in-memory Grammar.

    >>> from bnfront import parse_grammar
    >>> g = parse_grammar("Digit -> [0-9]")
    >>> g[0].name
    'Digit'
"""

from .grammar import (
    Literal, Range, Choice, NonTerminal, Rule, Grammar,
    CharacterStream, Position, GrammarParser, GrammarError, GrammarSyntaxError,
    parse_grammar, format_grammar, format_rule,
)

__version__ = "0.1.0"
