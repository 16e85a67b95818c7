# tablex/dfa/registry.py
"""패턴 레지스트리 — 세 가지 고정 DFA(변수명, 함수명, 루프 라벨).

각 패턴은 (classifier, table, accept_states) 데이터일 뿐이며
모두 `tablex.dfa.run`/`recognize` 하나로 구동된다.
문자 분류는 ASCII 범위 비교만 사용한다(비 ASCII 문자는 "other").
"""

from __future__ import annotations
from typing import Dict, Optional, Sequence

from . import DEAD, DfaDef, recognize

_D = DEAD


def _is_letter(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


# ------------------------------
# VARIABLE: _ [letters]+ [digit] [letter]
# ------------------------------

# '_' -> 0, letter -> 1, digit -> 2, other -> 3
def _classify_var(c: str) -> int:
    if c == "_":
        return 0
    if _is_letter(c):
        return 1
    if _is_digit(c):
        return 2
    return 3


_VAR_TABLE = (
    #   _   L   D   ?
    (   1, _D, _D, _D),   # S0 start
    (  _D,  2, _D, _D),   # S1 after '_'
    (  _D,  2,  3, _D),   # S2 letters loop, digit -> S3
    (  _D,  4, _D, _D),   # S3 digit seen
    (  _D, _D, _D, _D),   # S4 accept (strict end)
)

VARIABLE = DfaDef(
    name="VARIABLE",
    classifier=_classify_var,
    table=_VAR_TABLE,
    accept_states={4},
    reference=r"_[A-Za-z]+[0-9][A-Za-z]",
    description="_letters+[0-9][letter]",
)


# ------------------------------
# FUNCTION: [letters]+ F n
# ------------------------------

# 'F' -> 0, 'n' -> 1, other letter -> 2, other -> 3
def _classify_func(c: str) -> int:
    if c == "F":
        return 0
    if c == "n":
        return 1
    if _is_letter(c):
        return 2
    return 3


# S1: 몸통 누적, 마지막 문자가 'F'가 아님
# S2: 몸통 누적, 마지막 문자가 'F' (다음 'n'이면 완성)
# S0은 일반 문자로만 시작할 수 있고, S1에서 단독 'n'은 거절된다.
_FUNC_TABLE = (
    #   F   n   L   ?
    (  _D, _D,  1, _D),   # S0 start
    (   2, _D,  1, _D),   # S1
    (   2,  3,  1, _D),   # S2
    (  _D, _D, _D, _D),   # S3 accept (strict end)
)

FUNCTION = DfaDef(
    name="FUNCTION",
    classifier=_classify_func,
    table=_FUNC_TABLE,
    accept_states={3},
    reference=r"[A-EG-Za-mo-z][A-Za-mo-z]*Fn",
    description="letters+Fn",
)


# ------------------------------
# LOOP_LABEL: loop_ [letters]+ [digit][digit] :
# ------------------------------

# 'l' -> 0, 'o' -> 1, 'p' -> 2, '_' -> 3, ':' -> 4, digit -> 5, other letter -> 6, other -> 7
def _classify_loop(c: str) -> int:
    if c == "l":
        return 0
    if c == "o":
        return 1
    if c == "p":
        return 2
    if c == "_":
        return 3
    if c == ":":
        return 4
    if _is_digit(c):
        return 5
    if _is_letter(c):
        return 6
    return 7


_LOOP_TABLE = (
    #   l   o   p   _   :   D   L   ?
    (   1, _D, _D, _D, _D, _D, _D, _D),   # S0 start
    (  _D,  2, _D, _D, _D, _D, _D, _D),   # S1 "l"
    (  _D,  3, _D, _D, _D, _D, _D, _D),   # S2 "lo"
    (  _D, _D,  4, _D, _D, _D, _D, _D),   # S3 "loo"
    (  _D, _D, _D,  5, _D, _D, _D, _D),   # S4 "loop"
    (   6,  6,  6, _D, _D, _D,  6, _D),   # S5 "loop_", a letter must follow
    (   6,  6,  6, _D, _D,  7,  6, _D),   # S6 letters loop; l/o/p are letters here too
    (  _D, _D, _D, _D, _D,  8, _D, _D),   # S7 1st digit
    (  _D, _D, _D, _D,  9, _D, _D, _D),   # S8 2nd digit, ':' next
    (  _D, _D, _D, _D, _D, _D, _D, _D),   # S9 accept
)

LOOP_LABEL = DfaDef(
    name="LOOP_LABEL",
    classifier=_classify_loop,
    table=_LOOP_TABLE,
    accept_states={9},
    reference=r"loop_[A-Za-z]+[0-9]{2}:",
    description="loop_[letters]+[0-9][0-9]:",
)


PATTERNS = (VARIABLE, FUNCTION, LOOP_LABEL)

_BY_NAME: Dict[str, DfaDef] = {p.name: p for p in PATTERNS}


def pattern_names() -> Sequence[str]:
    return [p.name for p in PATTERNS]


def get_pattern(name: str) -> DfaDef:
    """이름(대소문자 무시)으로 패턴을 찾는다. 없으면 KeyError."""
    try:
        return _BY_NAME[name.upper()]
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}; expected one of {', '.join(_BY_NAME)}") from None


def classify(text: str, patterns: Sequence[DfaDef] = PATTERNS) -> Optional[str]:
    """`text`를 처음으로 수락하는 패턴의 이름. 아무도 수락하지 않으면 None."""
    for p in patterns:
        if recognize(p, text):
            return p.name
    return None
