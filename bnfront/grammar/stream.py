# bnfront/grammar/stream.py
"""Backtracking character stream.

A `CharacterStream` reads code points one at a time and tracks the position
(offset, line, column) of the next one. Parse attempts save the position on a
LIFO checkpoint stack and either rewind to it (restore) or drop it (commit):

    with stream.guard() as g:
        if not stream.consume_str("->"):
            return False        # guard exits -> rewind
        g.commit()
        return True

Every `peek_*` / `consume_*` helper follows that discipline, so a failed match
never moves the stream.
"""

from __future__ import annotations
import regex as re
from dataclasses import dataclass
from typing import List, Optional, TextIO

EOF = None

_IDENT_START_RE = re.compile(r"[A-Za-z_\-]")
_IDENT_CONTINUE_RE = re.compile(r"[A-Za-z0-9_\-]")


@dataclass(frozen=True)
class Position:
    # 0-based. 개행을 소비하면 line += 1, column = 0
    offset: int = 0
    line: int = 0
    column: int = 0


def is_whitespace(c: Optional[str]) -> bool:
    if c is None:
        return False
    code = ord(c)
    return code <= 32 or code == 127

def is_identifier(c: Optional[str], first_char: bool = False) -> bool:
    if c is None:
        return False
    pattern = _IDENT_START_RE if first_char else _IDENT_CONTINUE_RE
    return pattern.fullmatch(c) is not None


class StateGuard:
    """Checkpoint owned by one parse attempt; restores on exit unless committed."""

    def __init__(self, stream: "CharacterStream"):
        self.stream = stream
        self.depth = stream.depth
        self.released = False
        stream.push_state()

    def _check_top(self) -> None:
        if self.stream.depth != self.depth + 1:
            raise RuntimeError(
                f"checkpoint released out of order (depth {self.depth}, stack {self.stream.depth})"
            )

    def restore(self) -> None:
        if self.released:
            return
        self._check_top()
        self.stream.pop_state()
        self.released = True

    def commit(self) -> None:
        if self.released:
            return
        self._check_top()
        self.stream.free_state()
        self.released = True

    def __enter__(self) -> "StateGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()


class CharacterStream:
    def __init__(self, source: str):
        self.source = source
        self._n = len(source)
        self._state = Position()
        self._states: List[Position] = []

    @classmethod
    def from_file(cls, fp: TextIO) -> "CharacterStream":
        return cls(fp.read())

    # ---- 위치 / 체크포인트 ----

    @property
    def position(self) -> Position:
        return self._state

    @property
    def depth(self) -> int:
        return len(self._states)

    def push_state(self) -> None:
        self._states.append(self._state)

    def pop_state(self) -> None:
        self._state = self._states.pop()

    def free_state(self) -> None:
        self._states.pop()

    def guard(self) -> StateGuard:
        return StateGuard(self)

    # ---- 단일 문자 ----

    def at_eof(self) -> bool:
        return self._state.offset >= self._n

    def peek(self) -> Optional[str]:
        if self.at_eof():
            return EOF
        return self.source[self._state.offset]

    def consume(self) -> Optional[str]:
        """다음 문자를 반환하고 위치를 갱신. EOF 에서는 움직이지 않는다."""
        c = self.peek()
        if c is EOF:
            return EOF
        s = self._state
        if c == "\n":
            self._state = Position(s.offset + 1, s.line + 1, 0)
        else:
            self._state = Position(s.offset + 1, s.line, s.column + 1)
        return c

    def consume_whitespace(self) -> None:
        while is_whitespace(self.peek()):
            self.consume()

    # ---- 토큰 헬퍼 ----

    def _match_str(self, s: str, skip_ws: bool) -> bool:
        if skip_ws:
            self.consume_whitespace()
        for c in s:
            if self.consume() != c:
                return False
        return True

    def peek_str(self, s: str, skip_ws: bool = True) -> bool:
        with self.guard():
            return self._match_str(s, skip_ws)

    def consume_str(self, s: str, skip_ws: bool = True) -> bool:
        with self.guard() as g:
            if not self._match_str(s, skip_ws):
                return False
            g.commit()
            return True

    def peek_char(self, c: str, skip_ws: bool = True) -> bool:
        with self.guard():
            if skip_ws:
                self.consume_whitespace()
            return self.peek() == c

    def consume_char(self, c: str, skip_ws: bool = True) -> bool:
        with self.guard() as g:
            if skip_ws:
                self.consume_whitespace()
            if self.peek() != c:
                return False
            self.consume()
            g.commit()
            return True

    def consume_eof(self, skip_ws: bool = True) -> bool:
        with self.guard() as g:
            if skip_ws:
                self.consume_whitespace()
            if not self.at_eof():
                return False
            g.commit()
            return True

    def consume_identifier(self, skip_ws: bool = True) -> Optional[str]:
        """식별자 1개 이상 문자. 실패하면 None (위치 그대로)"""
        with self.guard() as g:
            if skip_ws:
                self.consume_whitespace()
            if not is_identifier(self.peek(), first_char=True):
                return None
            out = [self.consume()]
            while is_identifier(self.peek()):
                out.append(self.consume())
            g.commit()
            return "".join(out)

    # ---- 진단용 ----

    def line_text(self, line: int) -> str:
        lines = self.source.split("\n")
        if 0 <= line < len(lines):
            return lines[line]
        return ""
