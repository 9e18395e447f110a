"""Grammar-definition front end: model, character stream, parser."""

from .ast import (
    Literal, Range, Choice, NonTerminal, Rule, Grammar,
)
from .stream import EOF, CharacterStream, Position, StateGuard
from .parser import GrammarParser, GrammarError, GrammarSyntaxError, parse_grammar
from .printer import format_grammar, format_rule
