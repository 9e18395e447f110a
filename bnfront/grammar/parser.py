# bnfront/grammar/parser.py
"""bnfront 문법 정의 파서 (recursive descent)

    Document := Rule*
    Rule     := Ident "->" Alt ("|" Alt)*
    Alt      := Symbol*
    Symbol   := Ident | "'" LitChar* "'" | "[" (LitChar | LitChar "-" LitChar)* "]"

- 규칙 종결자가 없다. 기호 하나를 파싱한 직후 `->` 가 보이면 그 기호는 새 규칙의
  이름이므로, 기호를 지우고 그 앞으로 되감은 뒤 현재 규칙을 끝낸다.
- '...' 와 [...] 내부는 공백을 건너뛰지 않는다.
- 오류는 처음 한 번만 기록(sticky). 하위 헬퍼의 실패는 백트래킹용이라 조용하다.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .ast import Choice, ChoiceItem, Grammar, Literal, NonTerminal, Range, Rule
from .diagnostics import render_error, source_line
from .stream import EOF, CharacterStream, Position

ERR_NON_TERMINAL = "Expected a non-terminal symbol"
ERR_RULE_ASSIGN = "Expected `->`"
ERR_SYMBOL = "Expected Non-Terminal Symbol or Terminal Symbol"
ERR_LITERAL = "Expected `]` or a valid character literal"


@dataclass(frozen=True)
class GrammarError:
    position: Position
    message: str

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def offset(self) -> int:
        return self.position.offset


class GrammarSyntaxError(SyntaxError):
    """parse_grammar() 경계에서 GrammarError 를 예외로 바꾼 것"""

    def __init__(self, error: GrammarError, src: str, filename: str = "<string>"):
        self.error = error
        super().__init__(
            render_error(src, error),
            (filename, error.line + 1, error.column + 1, source_line(src, error.line)),
        )

    def __str__(self) -> str:
        # 기본 __str__ 의 "(file, line N)" 접미사 없이 스니펫만
        return self.msg


class GrammarParser:
    def __init__(self, stream: CharacterStream, grammar: Optional[Grammar] = None):
        self.stream = stream
        self.grammar = grammar if grammar is not None else Grammar()
        self.error: Optional[GrammarError] = None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def _set_error(self, message: str) -> None:
        if self.error is None:
            self.error = GrammarError(self.stream.position, message)

    @property
    def _rule(self) -> Rule:
        return self.grammar.rules[-1]

    # ---- productions ----

    def parse_eof(self) -> bool:
        return self.stream.consume_eof()

    def parse_non_terminal(self) -> bool:
        ident = self.stream.consume_identifier()
        if ident is None:
            return False
        rule = self._rule
        if not rule.name:
            rule.name = ident
        else:
            rule.symbols.append(NonTerminal(ident))
        return True

    def parse_literal_char(self) -> Optional[str]:
        """LitChar 하나. 날것의 개행 / 이스케이프된 개행 / EOF 는 거부"""
        with self.stream.guard() as g:
            c = self.stream.consume()
            if c == "\n":
                return None
            if c == "\\":
                c = self.stream.consume()
                if c == "\n":
                    return None
                if c == "n":
                    c = "\n"
            if c is EOF:
                return None
            g.commit()
            return c

    def _parse_char_class(self) -> bool:
        items: List[ChoiceItem] = []
        while not self.stream.consume_char("]", skip_ws=False):
            c = self.parse_literal_char()
            if c is None:
                self._set_error(ERR_LITERAL)
                return False

            if not self.stream.peek_str("-]", skip_ws=False) and self.stream.consume_char("-", skip_ws=False):
                c2 = self.parse_literal_char()
                if c2 is None:
                    self._set_error(ERR_LITERAL)
                    return False
                items.append(Range(c, c2))
            else:
                items.append(Literal(c))

        self._rule.symbols.append(Choice(tuple(items)))
        return True

    def _parse_quoted(self) -> bool:
        # 'abc' -> Literal('a') Literal('b') Literal('c')
        rule = self._rule
        while not self.stream.consume_char("'", skip_ws=False):
            c = self.parse_literal_char()
            if c is None:
                self._set_error(ERR_LITERAL)
                return False
            rule.symbols.append(Literal(c))
        return True

    def parse_terminal(self) -> bool:
        if self.stream.consume_char("["):
            return self._parse_char_class()
        if self.stream.consume_char("'"):
            return self._parse_quoted()
        return False

    def parse_symbol(self) -> bool:
        return self.parse_non_terminal() or self.parse_terminal()

    def parse_rule_assign(self) -> bool:
        return self.stream.consume_str("->")

    def parse_rule(self) -> bool:
        self.grammar.rules.append(Rule())

        if not self.parse_non_terminal():
            self._set_error(ERR_NON_TERMINAL)
            return False

        if not self.parse_rule_assign():
            self._set_error(ERR_RULE_ASSIGN)
            return False

        while True:
            with self.stream.guard() as g:
                if self.parse_eof():
                    break

                if self.stream.consume_char("|"):
                    self.grammar.rules.append(Rule(self._rule.name))
                    g.commit()
                    continue

                mark = len(self._rule.symbols)
                if not self.parse_symbol():
                    self._set_error(ERR_SYMBOL)
                    return False

                if self.parse_rule_assign():
                    # 방금 읽은 기호는 다음 규칙의 이름이었다
                    del self._rule.symbols[mark:]
                    g.restore()
                    break

                g.commit()

        return True

    def parse_grammar(self) -> bool:
        while True:
            if self.parse_eof():
                return True
            if not self.parse_rule():
                return False


def parse_grammar(src: str, filename: str = "<string>") -> Grammar:
    """src 를 파싱해 Grammar 를 돌려준다. 실패하면 GrammarSyntaxError."""
    parser = GrammarParser(CharacterStream(src))
    if not parser.parse_grammar():
        assert parser.error is not None
        raise GrammarSyntaxError(parser.error, src, filename)
    return parser.grammar
