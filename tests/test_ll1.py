import pytest

from tablex.ll1.expr import EXPR
from tablex.ll1.first_follow import compute_nullable_first_follow
from tablex.ll1.symbols import EOF, Grammar, Production
from tablex.ll1.table import build_ll1_table


def test_expr_shape():
    assert EXPR.start == "E"
    assert EXPR.terms == ("id", "+", "$")
    assert [str(p) for p in EXPR.prods] == [
        "E -> T E'",
        "E' -> + T E'",
        "E' -> ε",
        "T -> id",
    ]
    assert EXPR.lookup("E", "id") == 0
    assert EXPR.lookup("E'", "+") == 1
    assert EXPR.lookup("E'", EOF) == 2
    assert EXPR.lookup("T", "id") == 3
    assert EXPR.lookup("T", "+") is None


def test_first_follow():
    ff = compute_nullable_first_follow(EXPR.nonterms, EXPR.terms, list(EXPR.prods), EXPR.start)
    assert ff.nullable == {"E'"}
    assert ff.first["E"] == {"id"}
    assert ff.first["E'"] == {"+"}
    assert ff.first["T"] == {"id"}
    assert ff.follow["E"] == {"$"}
    assert ff.follow["E'"] == {"$"}
    assert ff.follow["T"] == {"+", "$"}


def test_derived_table_matches_shipped_table():
    built = build_ll1_table(EXPR.nonterms, EXPR.terms, EXPR.prods)
    assert built.conflicts == []
    assert built.pretty_conflicts() == "(no conflicts)"
    assert dict(built.grammar.table) == dict(EXPR.table)


def test_conflicts_are_reported():
    # S -> a | a b  is not LL(1)
    prods = [Production("S", ("a",)), Production("S", ("a", "b"))]
    built = build_ll1_table(["S"], ["a", "b", EOF], prods)
    assert built.conflicts == [("S", "a", (0, 1))]
    assert built.grammar.lookup("S", "a") == 0
    assert "M[S, a]" in built.pretty_conflicts()


def _grammar(**overrides):
    kw = dict(nonterms=EXPR.nonterms, terms=EXPR.terms, prods=EXPR.prods, table=dict(EXPR.table))
    kw.update(overrides)
    return Grammar(**kw)


def test_validation_rejects_missing_end_marker():
    with pytest.raises(ValueError, match="end marker"):
        _grammar(terms=("id", "+"), table={})


def test_validation_rejects_bad_production_index():
    with pytest.raises(ValueError, match="non-existent production"):
        _grammar(table={("E", "id"): 9})


def test_validation_rejects_wrong_lhs():
    with pytest.raises(ValueError, match="expands"):
        _grammar(table={("E", "id"): 3})


def test_validation_rejects_unknown_symbols():
    with pytest.raises(ValueError, match="not a terminal"):
        _grammar(table={("E", "x"): 0})
    with pytest.raises(ValueError, match="not a nonterminal"):
        _grammar(table={("X", "id"): 0})
    with pytest.raises(ValueError, match="unknown symbol"):
        _grammar(prods=EXPR.prods + (Production("T", ("(",)),))


def test_validation_rejects_overlapping_symbols():
    with pytest.raises(ValueError, match="both terminal and nonterminal"):
        _grammar(terms=("id", "+", "$", "T"))


def test_grammar_is_immutable():
    with pytest.raises(TypeError):
        EXPR.table[("T", "$")] = 2
    with pytest.raises(Exception):
        EXPR.table = {}
    assert EXPR.lookup("T", "$") is None
    assert hash(EXPR) == hash(EXPR)

    # the caller's dict is copied, later edits do not leak in
    source = dict(EXPR.table)
    g = _grammar(table=source)
    source[("T", "$")] = 3
    assert g.lookup("T", "$") is None
    assert g == EXPR
