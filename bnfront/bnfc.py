# bnfront/bnfc.py
"""bnfc – bnfront CLI

사용 예)
    $ python -m bnfront.bnfc check expr.bnf -D
    $ python -m bnfront.bnfc dump expr.bnf
    $ cat expr.bnf | python -m bnfront.bnfc dump -
    $ python -m bnfront.bnfc demo

기능
----
- check : 문법 정의를 파싱해 규칙/비단말 개수 요약 출력
- dump  : 파싱한 Grammar 를 한 줄에 규칙 하나씩 출력
- demo  : 내장 예제 문법(사칙연산)을 파싱해 출력

디버그 모드(-D/--debug)를 켜면 진행 상황과 AST 를 stderr 로 출력합니다.
문법 오류는 메시지 + 해당 라인 + 캐럿으로 보여주고 종료 코드 2 를 돌려줍니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _load(path: Optional[str], debug: bool):
    """path 가 None 이면 내장 데모 문법"""
    from .grammar.loader import load_grammar_text
    from .grammar.examples import DEMO_GRAMMAR
    from .grammar.parser import parse_grammar

    if path is None:
        src, name = DEMO_GRAMMAR, "<demo>"
    else:
        src, name = load_grammar_text(path), ("<stdin>" if path == "-" else path)
    if debug: _eprint(f"[DEBUG] source loaded | {name} chars={len(src)}")

    g = parse_grammar(src, filename=name)
    if debug:
        _eprint(f"[DEBUG] grammar ready | rules={len(g)} nonterms={len(g.names())}")
        _eprint("\n[AST]\n" + repr(g))
    return g

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_check(args) -> int:
    try:
        g = _load(args.file, debug=args.debug)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    print(f"[CHECK OK] rules={len(g)} nonterminals={len(g.names())}")
    return 0


def cmd_dump(args) -> int:
    from .grammar.printer import format_grammar
    try:
        g = _load(getattr(args, "file", None), debug=args.debug)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    text = format_grammar(g)
    if text:
        print(text)
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="bnfc", description="bnfront grammar-definition CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="문법 정의를 검사하고 요약을 출력합니다")
    p_check.add_argument("file", help="문법 정의 파일 (- 이면 stdin)")
    p_check.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_check.set_defaults(func=cmd_check)

    p_dump = sub.add_parser("dump", help="파싱한 규칙을 출력합니다")
    p_dump.add_argument("file", help="문법 정의 파일 (- 이면 stdin)")
    p_dump.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_dump.set_defaults(func=cmd_dump)

    p_demo = sub.add_parser("demo", help="내장 예제 문법을 파싱해 출력합니다")
    p_demo.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_demo.set_defaults(func=cmd_dump)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
