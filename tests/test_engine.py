import pytest
from packages.engine import (Evaluation, aggregate, evaluate, evaluate_strict, get_rule,
                             is_letter, pattern_string, validate_guess)

W, C, G = Evaluation.WRONG, Evaluation.CLOSE, Evaluation.CORRECT


# --- containment rule golden tests (no multiplicity accounting) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("react", "crane", [C, C, G, C, W]),
    ("crane", "crane", [G, G, G, G, G]),
    ("eerie", "genie", [C, G, W, G, G]),
    ("belle", "level", [W, G, C, C, C]),
    ("lemon", "level", [G, G, W, W, W]),
    ("stump", "crane", [W, W, W, W, W]),
])
def test_evaluate_containment_golden(guess, secret, expected):
    assert evaluate(guess, secret) == expected


# --- multiset rule: duplicates capped by the secret ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("react", "crane", "YYGY-"),
    ("eerie", "genie", "-G-GG"),
    ("belle", "level", "-GYYY"),
    ("cools", "scoop", "YYG-Y"),
])
def test_evaluate_strict_golden(guess, secret, expected):
    assert pattern_string(evaluate_strict(guess, secret)) == expected


def test_evaluate_normalizes_case():
    assert evaluate("CRANE", "crane") == [G] * 5


def test_evaluate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        evaluate("cranes", "crane")


def test_get_rule():
    assert get_rule("containment") is evaluate
    assert get_rule("multiset") is evaluate_strict
    with pytest.raises(ValueError, match="Available"):
        get_rule("nope")


def test_evaluation_codes_are_persisted_ints():
    assert (int(W), int(C), int(G)) == (1, 2, 3)
    assert W < C < G


def test_aggregate_max_severity_wins():
    rows = ["stare", "crane", "", "", "", ""]
    evals = [evaluate("stare", "crane"), evaluate("crane", "crane"), None, None, None, None]
    states = aggregate(rows, evals)
    # 'a' is CORRECT in both, 'r' is CLOSE in row 0 but CORRECT in row 1
    assert states["r"] == G
    assert states["s"] == W
    assert states["c"] == G


def test_aggregate_wrong_then_correct():
    states = aggregate(["abcde", "xyzwa"], [[W, W, W, W, W], [W, W, W, W, G]])
    assert states["a"] == G


def test_aggregate_ignores_unsubmitted_rows():
    states = aggregate(["crane", "sto"], [[G, G, G, G, G], None])
    assert set(states) == set("crane")


def test_aggregate_accepts_persisted_int_codes():
    states = aggregate(["crane"], [[1, 2, 3, 1, 1]])
    assert states == {"c": W, "r": C, "a": G, "n": W, "e": W}


@pytest.mark.parametrize("token,expected", [
    ("a", True), ("Z", True), ("1", False), ("ab", False), ("", False), ("é", False),
])
def test_is_letter(token, expected):
    assert is_letter(token) is expected


def test_validate_guess_n5():
    allowed = frozenset(["crane", "raise", "stare"])
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False
    assert validate_guess("trace", allowed, N=5) is False
