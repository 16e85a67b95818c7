import pytest

from tablex.dfa import recognize, run
from tablex.dfa.registry import (
    FUNCTION, LOOP_LABEL, PATTERNS, VARIABLE, classify, get_pattern, pattern_names,
)


@pytest.mark.parametrize("word, expected", [
    ("_temp5x", True),
    ("_abc9z", True),
    ("_x1y", True),
    ("_value", False),
    ("_val1", False),
    ("valla", False),
    ("_5x", False),
    ("_ab12x", False),
    ("_ab1xy", False),
    ("", False),
])
def test_variable(word, expected):
    assert recognize(VARIABLE, word) is expected


def test_variable_path_for_temp5x():
    # marker, four letters collapse into the loop, digit, trailing letter
    assert run(VARIABLE, "_temp5x").path == (0, 1, 2, 2, 2, 2, 3, 4)


@pytest.mark.parametrize("word, expected", [
    ("computeValueFn", True),
    ("getFn", True),
    ("processFn", True),
    ("xFn", True),
    ("computeFn", True),
    ("xFFn", True),
    ("Fn", False),
    ("getValue", False),
    ("getFnx", False),
    ("get_Fn", False),
    ("FooFn", False),     # may not start with the suffix letter F
    ("runFn", False),     # a bare n in the body rejects
    ("", False),
])
def test_function(word, expected):
    assert recognize(FUNCTION, word) is expected


def test_function_suffix_loop_states():
    # S1 for ordinary letters, S2 after F, back to S1 on an ordinary letter
    assert run(FUNCTION, "aFbFn").path == (0, 1, 2, 1, 2, 3)


@pytest.mark.parametrize("word, expected", [
    ("loop_main01:", True),
    ("loop_outer99:", True),
    ("loop_inner00:", True),
    ("loop_pool42:", True),
    ("loop_abc1:", False),
    ("loop_abc123:", False),
    ("loop_01:", False),
    ("loop_main01", False),
    ("loop_main01::", False),
    ("lop_main01:", False),
    ("Loop_main01:", False),
    ("loopmain01:", False),
])
def test_loop_label(word, expected):
    assert recognize(LOOP_LABEL, word) is expected


def test_accept_states_are_strict_ends():
    for p in PATTERNS:
        for a in p.accept_states:
            assert all(t == -1 for t in p.table[a])


def test_repeated_calls_are_deterministic():
    for p in PATTERNS:
        for w in ("_temp5x", "computeValueFn", "loop_main01:", "getValue", "loop_abc1:"):
            assert recognize(p, w) == recognize(p, w)


def test_classify_reports_pattern_names():
    assert classify("_temp5x") == "VARIABLE"
    assert classify("computeValueFn") == "FUNCTION"
    assert classify("loop_main01:") == "LOOP_LABEL"
    assert classify("getValue") is None
    assert classify("_temp5x", patterns=[FUNCTION]) is None


def test_get_pattern_is_case_insensitive():
    assert get_pattern("loop_label") is LOOP_LABEL
    assert get_pattern("VARIABLE") is VARIABLE
    with pytest.raises(KeyError):
        get_pattern("keyword")


def test_pattern_names_in_registry_order():
    assert pattern_names() == ["VARIABLE", "FUNCTION", "LOOP_LABEL"]


def test_non_ascii_letters_are_other():
    assert not recognize(VARIABLE, "_tëmp5x")
    assert not recognize(FUNCTION, "éFn")
