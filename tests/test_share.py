import pytest
from packages.game import Session, submit, type_letter
from packages.share import GLYPHS, TRAILER, encode

WORDS = frozenset(["crane", "react", "stare", "trace", "cared", "genie", "level"])


def _play(words, secret="crane") -> Session:
    s = Session.fresh(secret)
    for w in words:
        for ch in w:
            s = type_letter(s, ch)
        s, _ = submit(s, WORDS)
    return s


@pytest.mark.parametrize("guesses", [
    ["crane"],
    ["react", "crane"],
    ["react", "stare", "trace", "cared", "crane"],
])
def test_won_line_count_and_header(guesses):
    s = _play(guesses)
    lines = encode(s).splitlines()
    k = len(guesses)
    assert len(lines) == k + 2
    assert lines[0].endswith(f"won in {k} guess" + ("" if k == 1 else "es"))
    assert lines[-1] == TRAILER


def test_lost_text():
    s = _play(["react", "stare", "trace", "cared", "genie", "level"])
    lines = encode(s, title="Puzzle").splitlines()
    assert lines[0] == "Puzzle X/6: lost"
    assert len(lines) == 6 + 2


def test_glyph_rows_match_evaluations():
    s = _play(["react", "crane"])
    lines = encode(s).splitlines()
    c, y, w = GLYPHS.values()
    assert lines[1] == y + y + c + y + w
    assert lines[2] == c * 5


def test_letters_never_leak():
    text = encode(_play(["react", "crane"]))
    assert "react" not in text.lower() and "crane" not in text.lower()


def test_encode_does_not_mutate():
    s = _play(["crane"])
    before = s.copy()
    encode(s)
    assert s == before


def test_encode_requires_finished_game():
    with pytest.raises(ValueError):
        encode(_play(["react"]))
