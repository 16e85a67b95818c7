# table.py
"""
FIRST/FOLLOW 로부터 LL(1) 예측 파싱 테이블을 유도합니다.

고정 문법(`tablex.ll1.expr.EXPR`)의 손으로 작성한 테이블이
실제로 자기 프로덕션의 LL(1) 테이블과 같은지 교차검증하는 데 씁니다.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .first_follow import FFResult, compute_nullable_first_follow
from .symbols import Grammar, Production


@dataclass
class LL1Build:
    """
    LL1Build
    ========
    - grammar  : 유도된 테이블을 담은 Grammar
    - ff       : 계산에 사용한 FIRST/FOLLOW/NULLABLE
    - conflicts: (비단말, 단말, (유지된 인덱스, 버려진 인덱스)) 목록.
                 충돌 시 더 작은 프로덕션 인덱스를 유지합니다.
    """
    grammar: Grammar
    ff: FFResult
    conflicts: List[Tuple[str, str, Tuple[int, int]]]

    def pretty_conflicts(self) -> str:
        if not self.conflicts:
            return "(no conflicts)"
        prods = self.grammar.prods
        lines: List[str] = []
        for A, a, (kept, dropped) in self.conflicts:
            lines.append(f"M[{A}, {a}]: #{kept} ({prods[kept]}) / #{dropped} ({prods[dropped]})")
        return "\n".join(lines)


def build_ll1_table(nonterms: Sequence[str],
                    terms: Sequence[str],
                    prods: Sequence[Production]) -> LL1Build:
    """
    각 프로덕션 i: A -> α 에 대해
      - FIRST(α) 의 모든 단말 a 에 M[A, a] = i
      - α 가 nullable 이면 FOLLOW(A) 의 모든 단말 b 에 M[A, b] = i
    """
    prods = list(prods)
    start = nonterms[0]
    ff = compute_nullable_first_follow(nonterms, terms, prods, start)

    table: Dict[Tuple[str, str], int] = {}
    conflicts: List[Tuple[str, str, Tuple[int, int]]] = []

    def put(A: str, a: str, idx: int) -> None:
        key = (A, a)
        prev = table.get(key)
        if prev is None:
            table[key] = idx
        elif prev != idx:
            kept, dropped = min(prev, idx), max(prev, idx)
            conflicts.append((A, a, (kept, dropped)))
            table[key] = kept

    for idx, p in enumerate(prods):
        f_alpha, alpha_nullable = ff.first_of_sequence(p.rhs)
        for a in sorted(f_alpha):
            put(p.lhs, a, idx)
        if alpha_nullable:
            for b in sorted(ff.follow[p.lhs]):
                put(p.lhs, b, idx)

    g = Grammar(nonterms=tuple(nonterms), terms=tuple(terms), prods=tuple(prods), table=table)
    return LL1Build(grammar=g, ff=ff, conflicts=conflicts)
