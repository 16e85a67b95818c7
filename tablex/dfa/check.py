# tablex/dfa/check.py
"""DFA ↔ 동치 정규식 교차검증.

각 패턴의 `reference`(정규식 원문)를 `regex`로 컴파일해 두고,
유한 알파벳 위의 모든 짧은 문자열에 대해 DFA 판정과 비교한다.
"""

from __future__ import annotations
from functools import lru_cache
from itertools import product
from typing import Iterator, List, Optional

import regex

from . import DfaDef, recognize


@lru_cache(maxsize=None)
def _compile(src: str):
    return regex.compile(src)


def reference_match(dfa: DfaDef, text: str) -> bool:
    """`text`가 패턴의 동치 정규식에 완전일치하면 True."""
    if dfa.reference is None:
        raise ValueError(f"DFA {dfa.name!r} has no reference expression")
    return _compile(dfa.reference).fullmatch(text) is not None


def iter_strings(alphabet: str, max_len: int, prefix: str = "") -> Iterator[str]:
    """길이 0..max_len 인 alphabet 위의 모든 문자열(앞에 prefix를 붙여서)."""
    for n in range(max_len + 1):
        for chars in product(alphabet, repeat=n):
            yield prefix + "".join(chars)


def find_counterexamples(dfa: DfaDef,
                         alphabet: str,
                         max_len: int,
                         prefix: str = "",
                         limit: Optional[int] = None) -> List[str]:
    """DFA와 정규식의 판정이 갈리는 입력 목록. 비어 있으면 두 정의가 (이 범위에서) 동치."""
    if dfa.reference is None:
        raise ValueError(f"DFA {dfa.name!r} has no reference expression")
    out: List[str] = []
    for s in iter_strings(alphabet, max_len, prefix):
        if recognize(dfa, s) != reference_match(dfa, s):
            out.append(s)
            if limit is not None and len(out) >= limit:
                break
    return out
