import pytest

from tablex.dfa import DEAD, DfaDef
from tablex.dfa.check import find_counterexamples, iter_strings, reference_match
from tablex.dfa.registry import FUNCTION, LOOP_LABEL, VARIABLE


def test_iter_strings_counts_and_prefix():
    out = list(iter_strings("ab", 2, prefix="x"))
    assert out == ["x", "xa", "xb", "xaa", "xab", "xba", "xbb"]


def test_reference_match_is_full_match():
    assert reference_match(VARIABLE, "_temp5x")
    assert not reference_match(VARIABLE, "_temp5xy")
    assert not reference_match(VARIABLE, "a_temp5x")


# One representative character per classifier column, plus a few extras.
@pytest.mark.parametrize("dfa, alphabet, max_len, prefix", [
    (VARIABLE, "_aZ5-", 6, ""),
    (FUNCTION, "FnxQ_", 6, ""),
    (LOOP_LABEL, "lopa_:5-", 6, "loop"),
    (LOOP_LABEL, "lop_:9z", 5, ""),
])
def test_dfa_agrees_with_reference(dfa, alphabet, max_len, prefix):
    assert find_counterexamples(dfa, alphabet, max_len, prefix=prefix) == []


def test_counterexamples_are_reported():
    # a too-permissive table: '_' followed by anything of class letter
    loose = DfaDef(
        name="LOOSE",
        classifier=VARIABLE.classifier,
        table=[[1, DEAD, DEAD, DEAD], [DEAD, 2, DEAD, DEAD], [DEAD, 2, 2, DEAD]],
        accept_states={2},
        reference=VARIABLE.reference,
    )
    bad = find_counterexamples(loose, "_a5", 4, limit=3)
    assert len(bad) == 3
    assert "_a" in bad


def test_missing_reference_raises():
    bare = DfaDef(name="BARE", classifier=lambda c: 0, table=[[DEAD]], accept_states=set())
    with pytest.raises(ValueError, match="no reference"):
        find_counterexamples(bare, "a", 1)
    with pytest.raises(ValueError):
        reference_match(bare, "a")
