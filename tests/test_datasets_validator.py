from pathlib import Path

import pytest

from wordlerank.datasets import (
    load_frequencies,
    load_words,
    pretty_summary,
    read_lines,
    validate_wordlists,
    write_lines,
)
from wordlerank.engine import expected_value, feedback_from_pattern, filter_candidates
from wordlerank.errors import FrequencyParseError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    sol = tmp_path / "possible_words.txt"
    allw = tmp_path / "allowed_words.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(allw, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(str(sol), str(allw))
    assert rep["passed"] is True
    assert rep["solutions_subset_allowed"] is True
    assert rep["solutions"]["count"] == 3
    assert len(rep["allowed"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "solutions=3" in s and "solutions⊆allowed=True" in s and s.endswith("OK")


def test_validate_wordlists_reports_invalid_lines(tmp_path: Path):
    sol = tmp_path / "possible_words.txt"
    allw = tmp_path / "allowed_words.txt"
    sol.write_text("crane\ncranes\n???\nCRANE\n", encoding="utf-8")
    allw.write_text("crane\ncrane\n", encoding="utf-8")

    rep = validate_wordlists(str(sol), str(allw))
    assert rep["solutions"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    sol = tmp_path / "possible_words.txt"
    allw = tmp_path / "allowed_words.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare"])

    rep = validate_wordlists(str(sol), str(allw))
    assert rep["passed"] is False
    assert rep["solutions_subset_allowed"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "nope.txt"), str(tmp_path / "nada.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2
    assert pretty_summary(rep).endswith("FAIL")


def test_load_words_skips_wrong_length(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\r\ncranes\n\nCRATE\nab\ntrace\n", encoding="utf-8")
    assert load_words(p) == ["crane", "crate", "trace"]


def test_load_words_skips_non_letters(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crony\nab-cd\n[[[[[\ncr4ne\ncrâne\nslate\n", encoding="utf-8")
    words = load_words(p)
    assert words == ["crony", "slate"]
    # everything loaded is safe to score
    fb = feedback_from_pattern("slate", "BBBBB")
    assert filter_candidates(words, [fb]) == ["crony"]
    assert expected_value("crony", words) == 1.0


def test_load_frequencies_skips_non_letter_words(tmp_path: Path):
    p = tmp_path / "unigram_freq.csv"
    _write(p, ["ab-cd,12", "crane,5"])
    assert load_frequencies(p) == {"crane": 5}


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "missing.txt")


def test_load_frequencies(tmp_path: Path):
    p = tmp_path / "unigram_freq.csv"
    _write(p, ["word,count", "crane,1200", "the,23135851162", "Slate,77", "no comma here", "about,1226734006"])
    assert load_frequencies(p) == {"crane": 1200, "slate": 77, "about": 1226734006}


def test_load_frequencies_bad_number_is_fatal(tmp_path: Path):
    p = tmp_path / "unigram_freq.csv"
    _write(p, ["crane,1200", "slate,lots"])
    with pytest.raises(FrequencyParseError, match=":2:"):
        load_frequencies(p)


def test_load_frequencies_ignores_bad_number_on_skipped_row(tmp_path: Path):
    p = tmp_path / "unigram_freq.csv"
    _write(p, ["word,count", "cranes,oops", "crane,5"])
    assert load_frequencies(p) == {"crane": 5}


def test_read_write_lines_roundtrip(tmp_path: Path):
    p = write_lines(["crane", "slate"], tmp_path / "sub" / "out.txt")
    assert read_lines(p) == ["crane", "slate"]
