# tablex/tablexc.py
"""tablexc – tablex CLI

사용 예)
    $ python -m tablex.tablexc lex _temp5x computeValueFn loop_main01:
    $ python -m tablex.tablexc lex --stdin --sentinel END < words.txt
    $ python -m tablex.tablexc parse "id + id"
    $ python -m tablex.tablexc parse "id + + id" --json
    $ python -m tablex.tablexc check --max-len 5 -D

기능
----
- lex   : 단어들을 패턴 레지스트리(VARIABLE/FUNCTION/LOOP_LABEL)로 분류
- parse : 고정 산술 문법으로 LL(1) 파싱하고 스택 트레이스 출력
- check : DFA ↔ 동치 정규식, 수작성 LL(1) 테이블 ↔ 유도 테이블 교차검증

디버그 모드(-D/--debug)를 켜면 DFA 방문 경로, 문법/테이블 요약을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import json
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_until_sentinel(stream: TextIO, sentinel: str) -> Iterator[str]:
    """sentinel을 포함한 줄(또는 EOF)이 나올 때까지 줄을 돌려준다."""
    for line in stream:
        if sentinel in line:
            return
        yield line


def _select_patterns(name: Optional[str]):
    from .dfa.registry import PATTERNS, get_pattern
    if name is None:
        return PATTERNS
    return (get_pattern(name),)

# ------------------------------
# 디버그 출력 헬퍼
# ------------------------------

def _print_grammar_summary(g) -> None:
    _eprint("\n[Grammar]")
    _eprint(f"Start: {g.start}")
    _eprint("Terminals:")
    _eprint("  " + ", ".join(g.terms))
    _eprint("Nonterminals:")
    _eprint("  " + ", ".join(g.nonterms))
    _eprint("Productions:")
    for i, p in enumerate(g.prods):
        _eprint(f"  #{i}: {p}")
    _eprint("\n[Parse Table]")
    for A, row in g.rows().items():
        cells = ", ".join(f"{a}->#{idx}" for a, idx in row.items())
        _eprint(f"  {A:>3} : {cells}")

# ------------------------------
# 커맨드 구현
# ------------------------------

def _classify_words(words: Iterable[str], patterns, debug: bool) -> None:
    from .dfa import run, format_path
    from .dfa.registry import classify
    for w in words:
        if debug:
            for p in patterns:
                _eprint(f"[DEBUG] {p.name:<10} {w!r}: {format_path(run(p, w).path)}")
        matched = classify(w, patterns)
        print(f"{w:<16} -> {matched or 'Rejected'}")


def cmd_lex(args) -> int:
    try:
        patterns = _select_patterns(args.pattern)
        if args.stdin:
            words: List[str] = []
            for line in _read_until_sentinel(sys.stdin, args.sentinel):
                words.extend(line.split())
            if args.debug:
                _eprint(f"[DEBUG] read {len(words)} word(s) before sentinel {args.sentinel!r}")
        else:
            words = list(args.words)
        if not words:
            _eprint("[ERROR] no words to classify")
            return 2
        _classify_words(words, patterns, args.debug)
        return 0
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2


def cmd_parse(args) -> int:
    try:
        from .ll1.expr import EXPR
        from .ll1.runtime import format_trace, parse, tokenize

        if args.debug:
            _print_grammar_summary(EXPR)

        tokens = tokenize(args.sentence)
        if args.debug:
            _eprint(f"[DEBUG] tokens={tokens}")
        result = parse(EXPR, tokens)
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.json:
        print(json.dumps(result.to_dict(EXPR), indent=2, ensure_ascii=False))
    else:
        print(f"Input string: {args.sentence}")
        print(format_trace(result, EXPR))
    return 0 if result.accepted else 1


def cmd_check(args) -> int:
    try:
        from .dfa.check import find_counterexamples
        from .ll1.expr import EXPR
        from .ll1.table import build_ll1_table

        failed = False
        for p in _select_patterns(args.pattern):
            alphabet = args.alphabet or _default_alphabet(p.name)
            prefix = args.prefix if args.prefix is not None else _default_prefix(p.name)
            if args.debug:
                _eprint(f"[DEBUG] {p.name}: alphabet={alphabet!r} prefix={prefix!r} max_len={args.max_len}")
            bad = find_counterexamples(p, alphabet, args.max_len, prefix=prefix, limit=10)
            if bad:
                failed = True
                print(f"[MISMATCH] {p.name}: {', '.join(repr(s) for s in bad)}")
            else:
                print(f"[CHECK OK] {p.name} ~ /{p.reference}/")

        built = build_ll1_table(EXPR.nonterms, EXPR.terms, EXPR.prods)
        if args.debug:
            _print_grammar_summary(built.grammar)
        if built.conflicts:
            failed = True
            print("[CONFLICTS]")
            print(built.pretty_conflicts())
        if dict(built.grammar.table) != dict(EXPR.table):
            failed = True
            print("[MISMATCH] LL(1) table differs from the table derived from FIRST/FOLLOW")
        else:
            print(f"[CHECK OK] LL(1) table prods={len(EXPR.prods)} conflicts={len(built.conflicts)}")
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    return 1 if failed else 0


# 패턴별 기본 교차검증 입력: 분류 열마다 대표 문자 하나 + 고정 접두사
_DEFAULT_ALPHABETS = {
    "VARIABLE": "_a5-",
    "FUNCTION": "Fnx_",
    "LOOP_LABEL": "lopa_:5-",
}
_DEFAULT_PREFIXES = {
    "LOOP_LABEL": "loop",
}


def _default_alphabet(name: str) -> str:
    return _DEFAULT_ALPHABETS.get(name, "a0_")


def _default_prefix(name: str) -> str:
    return _DEFAULT_PREFIXES.get(name, "")

# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    from .dfa.registry import pattern_names
    names = pattern_names()

    ap = argparse.ArgumentParser(prog="tablexc", description="tablex DFA / LL(1) CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_lex = sub.add_parser("lex", help="단어를 DFA 패턴으로 분류합니다")
    p_lex.add_argument("words", nargs="*", help="분류할 단어")
    p_lex.add_argument("--pattern", type=str.upper, choices=names,
                       help="이 패턴 하나로만 검사 (" + "/".join(names) + ")")
    p_lex.add_argument("--stdin", action="store_true", help="sentinel 줄까지 표준입력에서 단어를 읽음")
    p_lex.add_argument("--sentinel", default="END", help="--stdin 종료 표식 (기본: END)")
    p_lex.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_lex.set_defaults(func=cmd_lex)

    p_parse = sub.add_parser("parse", help="고정 산술 문법으로 LL(1) 파싱합니다")
    p_parse.add_argument("sentence", nargs="?", default="id + id", help="공백 구분 토큰열 (기본: 'id + id')")
    p_parse.add_argument("--json", action="store_true", help="구조화된 결과를 JSON으로 출력")
    p_parse.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_parse.set_defaults(func=cmd_parse)

    p_check = sub.add_parser("check", help="DFA와 LL(1) 테이블을 교차검증합니다")
    p_check.add_argument("--pattern", type=str.upper, choices=names, help="이 패턴 하나만 검사")
    p_check.add_argument("--alphabet", help="검사할 문자 집합 (기본: 패턴별)")
    p_check.add_argument("--prefix", help="모든 검사 문자열 앞에 붙일 접두사 (기본: 패턴별)")
    p_check.add_argument("--max-len", type=int, default=6, help="접두사 뒤 최대 길이 (기본: 6)")
    p_check.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_check.set_defaults(func=cmd_check)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
