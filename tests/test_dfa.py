import pytest

from tablex.dfa import DEAD, DfaDef, format_path, recognize, run


def _ab_classifier(c):
    if c == "a":
        return 0
    if c == "b":
        return 1
    return 2


# a b* : S0 -a-> S1, S1 -b-> S1
AB_STAR = DfaDef(
    name="AB_STAR",
    classifier=_ab_classifier,
    table=[[1, DEAD, DEAD], [DEAD, 1, DEAD]],
    accept_states=[1],
)


def test_accepts_and_rejects():
    assert recognize(AB_STAR, "a")
    assert recognize(AB_STAR, "abbb")
    assert not recognize(AB_STAR, "")
    assert not recognize(AB_STAR, "ba")
    assert not recognize(AB_STAR, "aba")


def test_unclassified_characters_reject_instead_of_raising():
    assert not recognize(AB_STAR, "a?")
    assert not recognize(AB_STAR, "abé")


def test_dead_state_short_circuits():
    rec = run(AB_STAR, "bbbbbb")
    assert not rec.accepted
    assert rec.final_state == DEAD
    # S0 -> DEAD, then the run stops
    assert rec.path == (0, DEAD)
    assert format_path(rec.path) == "S0 -> DEAD"


def test_path_records_every_state():
    rec = run(AB_STAR, "abb")
    assert rec.accepted
    assert rec.path == (0, 1, 1, 1)


def test_empty_input_accepted_only_when_start_accepts():
    eps = DfaDef(name="EPS", classifier=_ab_classifier, table=[[DEAD, DEAD, DEAD]], accept_states={0})
    assert recognize(eps, "")
    assert not recognize(eps, "a")


def test_definition_is_immutable():
    assert isinstance(AB_STAR.table, tuple)
    assert isinstance(AB_STAR.table[0], tuple)
    assert isinstance(AB_STAR.accept_states, frozenset)
    with pytest.raises(Exception):
        AB_STAR.name = "other"


def test_ragged_rows_rejected():
    with pytest.raises(ValueError, match="row S1"):
        DfaDef(name="X", classifier=_ab_classifier, table=[[1, DEAD, DEAD], [DEAD, 1]], accept_states={1})


def test_out_of_range_target_rejected():
    with pytest.raises(ValueError, match="out of range"):
        DfaDef(name="X", classifier=_ab_classifier, table=[[5, DEAD, DEAD]], accept_states={0})


def test_out_of_range_accept_state_rejected():
    with pytest.raises(ValueError, match="accept state 3"):
        DfaDef(name="X", classifier=_ab_classifier, table=[[DEAD, DEAD, DEAD]], accept_states={3})


def test_classifier_outside_columns_rejected():
    with pytest.raises(ValueError, match="classifier"):
        DfaDef(name="X", classifier=lambda c: 7, table=[[DEAD, DEAD, DEAD]], accept_states={0})


def test_empty_table_rejected():
    with pytest.raises(ValueError, match="empty"):
        DfaDef(name="X", classifier=_ab_classifier, table=[], accept_states=set())
