# bnfront/grammar/diagnostics.py
"""오류 위치 표시: 메시지 + 해당 소스 라인 + 캐럿"""

from __future__ import annotations
from typing import Tuple


def line_bounds(src: str, pos: int) -> Tuple[int, int]:
    """pos가 속한 라인의 [시작, 끝) 범위"""
    start = src.rfind("\n", 0, pos)
    if start == -1:
        start = 0
    else:
        start += 1
    end = src.find("\n", pos)
    if end == -1:
        end = len(src)
    return start, end

def source_line(src: str, line: int) -> str:
    lines = src.split("\n")
    return lines[line] if 0 <= line < len(lines) else ""

def snippet_with_caret(src: str, offset: int) -> str:
    start, end = line_bounds(src, offset)
    line_text = src[start:end]
    caret = " " * (offset - start) + "^"
    return f"{line_text}\n{caret}"

def render_error(src: str, error) -> str:
    """
    error: position(offset/line/column, 0-based) 과 message 를 가진 객체.
    출력의 line:col 은 1-based.
    """
    pos = error.position
    return f"{error.message} at {pos.line + 1}:{pos.column + 1}\n{snippet_with_caret(src, pos.offset)}"
