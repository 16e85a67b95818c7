"""문법 정의: 프로덕션, 단말/비단말, LL(1) 파싱 테이블."""
from __future__     import annotations
from dataclasses    import dataclass, field
from types          import MappingProxyType
from typing         import Dict, Mapping, Optional, Sequence, Tuple

EOF = "$"


@dataclass(frozen=True)
class Production:
    """
    프로덕션 1개.
    - lhs: 좌변 비단말 이름
    - rhs: 우변 심볼 이름 튜플(터미널/비단말)
    """
    lhs: str
    rhs: Tuple[str, ...]      # ε는 빈 튜플(())로 표현

    def __str__(self) -> str:
        rhs = " ".join(self.rhs) if self.rhs else "ε"
        return f"{self.lhs} -> {rhs}"


@dataclass(frozen=True)
class Grammar:
    """
    Grammar
    =======
    LL(1) 예측 파서가 사용하는 **고정 문법 + 파싱 테이블** 묶음입니다.

    설계 원칙
    --------
    - nonterms 의 첫 번째 원소가 시작 기호입니다.
    - terms 에는 EOF('$')가 반드시 포함됩니다.
    - table: (비단말, 단말) -> 프로덕션 인덱스. 키가 없으면 "규칙 없음".
      매핑이므로 한 칸에 인덱스는 최대 하나(결정성)입니다.
      읽기 전용 뷰(MappingProxyType)로 보관하므로 생성 후 수정할 수 없습니다.
      충돌 없는 테이블인지(LL(1) 성질)는 여기서 검사하지 않습니다
      (`tablex.ll1.table.build_ll1_table` 참고).
    - 생성 후에는 불변입니다. 정적 데이터의 오류는 ValueError 로 즉시 보고합니다.
    """
    nonterms: Tuple[str, ...]
    terms: Tuple[str, ...]
    prods: Tuple[Production, ...]
    table: Mapping[Tuple[str, str], int] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nonterms", tuple(self.nonterms))
        object.__setattr__(self, "terms", tuple(self.terms))
        object.__setattr__(self, "prods", tuple(self.prods))
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))
        self._validate()

    def _validate(self) -> None:
        if not self.nonterms:
            raise ValueError("Grammar needs at least one nonterminal (the start symbol)")
        if EOF not in self.terms:
            raise ValueError(f"Grammar terminals must include the end marker {EOF!r}")
        both = set(self.terms) & set(self.nonterms)
        if both:
            raise ValueError(f"Symbols declared as both terminal and nonterminal: {sorted(both)}")

        for i, p in enumerate(self.prods):
            if not self.is_nonterm(p.lhs):
                raise ValueError(f"Production #{i} ({p}): unknown lhs {p.lhs!r}")
            for X in p.rhs:
                if not (self.is_term(X) or self.is_nonterm(X)):
                    raise ValueError(f"Production #{i} ({p}): unknown symbol {X!r}")

        for (A, a), idx in self.table.items():
            if not self.is_nonterm(A):
                raise ValueError(f"Parse table row {A!r} is not a nonterminal")
            if not self.is_term(a):
                raise ValueError(f"Parse table column {a!r} is not a terminal")
            if not (0 <= idx < len(self.prods)):
                raise ValueError(
                    f"Parse table entry ({A}, {a}) -> #{idx} references a non-existent production")
            if self.prods[idx].lhs != A:
                raise ValueError(
                    f"Parse table entry ({A}, {a}) -> #{idx} expands {self.prods[idx].lhs!r}, not {A!r}")

    # ----- 조회 / 유틸 -----
    @property
    def start(self) -> str:
        return self.nonterms[0]

    def is_term(self, name: str) -> bool:
        return name in self.terms

    def is_nonterm(self, name: str) -> bool:
        return name in self.nonterms

    def lookup(self, A: str, a: str) -> Optional[int]:
        """(비단말, 단말) 칸의 프로덕션 인덱스. 비어 있으면 None."""
        return self.table.get((A, a))

    def format_production(self, idx: int) -> str:
        return str(self.prods[idx])

    def rows(self) -> Dict[str, Dict[str, int]]:
        """디버그 출력용: 비단말별 {단말: 인덱스}."""
        out: Dict[str, Dict[str, int]] = {A: {} for A in self.nonterms}
        for (A, a), idx in self.table.items():
            out[A][a] = idx
        return out

    def __repr__(self) -> str:
        return (f"Grammar(terms={list(self.terms)}, nonterms={list(self.nonterms)}, "
                f"prods={len(self.prods)}, start={self.start})")


def make_production(lhs: str, rhs: Sequence[str]) -> Production:
    return Production(lhs, tuple(rhs))
