from pathlib import Path
from packages.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["count"] == 5 and rep["unique_count"] == 5
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    # wrong length, bad chars, uppercase and a blank line are all invalid
    words.write_text("crane\nraiser\n???\nSTARE\n\n", encoding="utf-8")

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "stare", "crane"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is False
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)
