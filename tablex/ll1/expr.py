"""고정 산술 문법(4개 프로덕션)과 그 LL(1) 테이블.

    0: E  -> T E'
    1: E' -> + T E'
    2: E' -> ε
    3: T  -> id

           id    +     $
    E      0
    E'           1     2
    T      3
"""

from __future__ import annotations

from .symbols import EOF, Grammar, make_production

NONTERMS = ("E", "E'", "T")
TERMS = ("id", "+", EOF)

PRODS = (
    make_production("E", ["T", "E'"]),
    make_production("E'", ["+", "T", "E'"]),
    make_production("E'", []),
    make_production("T", ["id"]),
)

EXPR = Grammar(
    nonterms=NONTERMS,
    terms=TERMS,
    prods=PRODS,
    table={
        ("E", "id"): 0,
        ("E'", "+"): 1,
        ("E'", EOF): 2,
        ("T", "id"): 3,
    },
)
