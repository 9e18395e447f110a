# bnfront/grammar/printer.py
"""Grammar -> 문법 정의 문법(surface syntax) 텍스트.

출력은 다시 파싱하면 같은 Grammar 가 되도록 이스케이프한다.
"""

from __future__ import annotations
from typing import List

from .ast import Choice, Grammar, Literal, NonTerminal, Range, Rule, Symbol

_QUOTED_ESCAPES = {"\n": "\\n", "\\": "\\\\", "'": "\\'"}
_CLASS_ESCAPES = {"\n": "\\n", "\\": "\\\\", "]": "\\]", "-": "\\-"}


def _escape(c: str, table) -> str:
    return table.get(c, c)

def format_symbol(sym: Symbol) -> str:
    if isinstance(sym, NonTerminal):
        return sym.name
    if isinstance(sym, Literal):
        return "'" + _escape(sym.value, _QUOTED_ESCAPES) + "'"
    if isinstance(sym, Choice):
        parts: List[str] = []
        for item in sym.items:
            if isinstance(item, Range):
                parts.append(f"{_escape(item.start, _CLASS_ESCAPES)}-{_escape(item.end, _CLASS_ESCAPES)}")
            else:
                parts.append(_escape(item.value, _CLASS_ESCAPES))
        return "[" + "".join(parts) + "]"
    raise TypeError(f"not a grammar symbol: {sym!r}")

def format_rule(rule: Rule) -> str:
    if not rule.symbols:
        return f"{rule.name} ->"
    return f"{rule.name} -> " + " ".join(format_symbol(s) for s in rule.symbols)

def format_grammar(grammar: Grammar) -> str:
    return "\n".join(format_rule(r) for r in grammar)
