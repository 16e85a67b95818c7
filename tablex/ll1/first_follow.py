from __future__ import annotations
from typing import Dict, Iterable, List, Set, Tuple
from dataclasses import dataclass
from .symbols import EOF, Production


@dataclass
class FFResult:
    """
    FFResult
    ========
    FIRST/FOLLOW/NULLABLE 계산 결과를 담는 단순 컨테이너입니다.

    - nullable: ε-생산 가능한 비단말 집합 (이름 기반)
    - first: 각 **심볼 이름** → FIRST 집합(단말 이름들의 집합)
      * 비단말 A: FIRST(A)
      * 단말 a: FIRST(a) = { a }
    - follow: 각 **비단말 이름** → FOLLOW 집합(단말 이름들의 집합)
      * 시작 기호 S 에는 항상 '$'가 포함됩니다.
    """
    nullable: Set[str]
    first: Dict[str, Set[str]]
    follow: Dict[str, Set[str]]

    def first_of_sequence(self, seq: Iterable[str]) -> Tuple[Set[str], bool]:
        """
        심볼 시퀀스 seq 의 FIRST 집합과 'seq 자체가 nullable인지' 여부.
        단말은 first[a] = {a} 이므로 별도 분기 없이 처리됩니다.
        """
        out: Set[str] = set()
        for X in seq:
            out |= self.first[X]
            if X not in self.nullable:
                return out, False
        return out, True


def compute_nullable_first_follow(nonterms: Iterable[str],
                                  terms: Iterable[str],
                                  prods: List[Production],
                                  start: str) -> FFResult:
    """
    compute_nullable_first_follow
    =============================
    문법에 대해 NULLABLE/FIRST/FOLLOW 집합을 계산합니다.
    반환 값은 **모두 이름 기반**(문자열)입니다.

    알고리즘 개요
    ------------
    1) NULLABLE
       - ε-프로덕션(A -> ε)이 있으면 A를 nullable에 추가
       - A -> X1 X2 ... Xn 에서 모든 Xi가 nullable이면 A도 nullable
       - 더 이상 변화가 없을 때까지 반복

    2) FIRST
       - 단말 a: FIRST(a) = { a }
       - 비단말 A: 모든 프로덕션 A -> α 에 대해 FIRST(α)를 합집합
       - 별도의 ε 기호는 넣지 않고 **nullable**이 이를 대변합니다.

    3) FOLLOW
       - FOLLOW(start) 에 '$' 추가
       - 모든 프로덕션 A -> X1 X2 ... Xn 에 대해, 오른쪽에서 왼쪽으로 훑으며
           - trailer := FOLLOW(A)로 시작
           - Xi가 비단말이면 FOLLOW(Xi)에 trailer를 더함
           - 이후 trailer := FIRST(Xi) ∪ (Xi가 nullable이면 trailer 포함)
         변화가 없을 때까지 반복
    """
    terms = set(terms)
    nonterms = set(nonterms)

    # ---------- 0) 준비 ----------
    nullable: Set[str] = set()
    first: Dict[str, Set[str]] = {t: {t} for t in terms}
    for A in nonterms:
        first[A] = set()

    # ---------- 1) NULLABLE 고정점 ----------
    changed = True
    while changed:
        changed = False
        for p in prods:
            if p.lhs in nullable:
                continue
            # 빈 rhs 이면 all() 은 True
            if all(X in nullable for X in p.rhs):
                nullable.add(p.lhs)
                changed = True

    ff = FFResult(nullable=nullable, first=first, follow={})

    # ---------- 2) FIRST 고정점 ----------
    changed = True
    while changed:
        changed = False
        for p in prods:
            f_alpha, _ = ff.first_of_sequence(p.rhs)
            before = len(first[p.lhs])
            first[p.lhs] |= f_alpha
            if len(first[p.lhs]) != before:
                changed = True

    # ---------- 3) FOLLOW 고정점 ----------
    follow: Dict[str, Set[str]] = {A: set() for A in nonterms}
    follow[start].add(EOF)

    changed = True
    while changed:
        changed = False
        for p in prods:
            trailer: Set[str] = set(follow[p.lhs])
            for X in reversed(p.rhs):
                if X in nonterms:
                    before = len(follow[X])
                    follow[X] |= trailer
                    if len(follow[X]) != before:
                        changed = True
                    trailer = set(first[X]) | (trailer if X in nullable else set())
                else:
                    trailer = {X}

    ff.follow = follow
    return ff
