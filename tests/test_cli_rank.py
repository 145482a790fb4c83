import json
from pathlib import Path

import pytest

from apps.cli.rank import main

SOLUTIONS = ["crane", "crate", "trace", "cater", "react"]
ALLOWED = SOLUTIONS + ["slate", "jazzy", "dumpy", "crony"]


@pytest.fixture
def lists(tmp_path: Path):
    sol = tmp_path / "possible_words.txt"
    allw = tmp_path / "allowed_words.txt"
    freq = tmp_path / "unigram_freq.csv"
    sol.write_text("\n".join(SOLUTIONS) + "\n", encoding="utf-8")
    allw.write_text("\n".join(ALLOWED) + "\n", encoding="utf-8")
    freq.write_text("word,count\ncrony,50\ndumpy,900\n", encoding="utf-8")
    return ["--solutions", str(sol), "--allowed", str(allw), "--frequencies", str(freq),
            "--progress", "off"]


def test_cli_ranks_with_history(lists, capsys):
    rc = main(lists + ["--workers", "2", "--backend", "thread", "slate", "BBGBG"])
    assert rc == 0
    out = capsys.readouterr()
    assert out.out.splitlines() == ["crane -> 0.0"]
    assert "candidates=1 guesses=1" in out.err


def test_cli_frequency_tiebreak_and_reverse(lists, capsys):
    assert main(lists + ["--workers", "0", "slate", "BBBBB"]) == 0
    assert capsys.readouterr().out.splitlines() == ["dumpy -> 0.0", "crony -> 0.0"]
    assert main(lists + ["--workers", "0", "--reverse", "slate", "BBBBB"]) == 0
    assert capsys.readouterr().out.splitlines() == ["crony -> 0.0", "dumpy -> 0.0"]
    assert main(lists + ["--workers", "0", "--no-frequency", "slate", "BBBBB"]) == 0
    assert capsys.readouterr().out.splitlines() == ["crony -> 0.0", "dumpy -> 0.0"]


def test_cli_full_ranking_and_top(lists, capsys):
    assert main(lists + ["--workers", "3", "--backend", "thread", "--progress", "plain"]) == 0
    out = capsys.readouterr()
    lines = out.out.splitlines()
    assert len(lines) == len(ALLOWED)
    assert lines[-1].startswith("dumpy -> ")
    assert f"{len(ALLOWED)}/{len(ALLOWED)}" in out.err

    assert main(lists + ["--workers", "0", "--top", "2"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_cli_writes_outputs(lists, tmp_path, capsys):
    outdir = tmp_path / "reports"
    assert main(lists + ["--workers", "0", "--outdir", str(outdir), "slate", "BBBBB"]) == 0
    csvs = list(outdir.glob("rank_*.csv"))
    manifests = list(outdir.glob("rank_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1
    rows = csvs[0].read_text(encoding="utf-8").splitlines()
    assert rows[0] == "rank,guess,score,is_solution,frequency"
    assert rows[1] == "1,dumpy,0.0,False,900"
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["history"] == [["slate", "BBBBB"]]
    assert manifest["num_guesses"] == 2


def test_cli_warns_on_unknown_history_guess(lists, capsys):
    assert main(lists + ["--workers", "0", "zzzzz", "BBBBB"]) == 0
    assert "not in the allowed list" in capsys.readouterr().err


@pytest.mark.parametrize("history", [
    ["slate"],
    ["slate", "BBQBB"],
    ["slate", "bbbbb"],
    ["slates", "BBBBB"],
])
def test_cli_rejects_bad_history(lists, history):
    with pytest.raises(SystemExit) as exc:
        main(lists + history)
    assert exc.value.code == 2


@pytest.mark.parametrize("flags", [["--top", "0"], ["--top", "-1"], ["--workers", "-2"]])
def test_cli_rejects_bad_counts(lists, flags):
    with pytest.raises(SystemExit) as exc:
        main(lists + flags)
    assert exc.value.code == 2


def test_cli_rejects_yellow_without_present(lists):
    with pytest.raises(SystemExit) as exc:
        main(lists + ["--no-present", "slate", "BYBBB"])
    assert exc.value.code == 2


def test_cli_missing_word_list_is_fatal(tmp_path, capsys):
    rc = main(["--solutions", str(tmp_path / "nope.txt"), "--allowed", str(tmp_path / "nada.txt"),
               "--progress", "off"])
    assert rc == 1
    assert "error:" in capsys.readouterr().err


def test_cli_bad_frequency_table_is_fatal(lists, tmp_path, capsys):
    bad = tmp_path / "bad.csv"
    bad.write_text("crane,many\n", encoding="utf-8")
    rc = main(lists + ["--frequencies", str(bad)])
    assert rc == 1
    err = capsys.readouterr()
    assert "bad frequency" in err.err
    assert err.out == ""
