"""
I/O utilities for ranking runs.

Responsibilities:
- write_csv:     one row per ranked guess (rank, guess, score, flags).
- write_manifest:dump a JSON manifest with config, history and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Collection, Dict, Iterable, Mapping, Optional

from wordlerank.engine.scoring import ScoreRecord

CSV_FIELDS = ["rank", "guess", "score", "is_solution", "frequency"]


def write_csv(
        ranking: Iterable[ScoreRecord],
        path: str,
        *,
        solutions: Collection[str],
        frequencies: Optional[Mapping[str, int]] = None,
) -> str:
    """
    Serialize a ranking to CSV.

    Schema (columns):
      rank, guess, score, is_solution, frequency

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    freqs = frequencies or {}
    solution_set = set(solutions)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for i, r in enumerate(ranking, start=1):
            w.writerow({
                "rank": i,
                "guess": r.guess,
                "score": round(float(r.score), 6),
                "is_solution": r.guess in solution_set,
                "frequency": freqs.get(r.guess, 0),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (paths, workers, flags)
      - history: [[guess, pattern], ...]
      - wordlists: output of datasets.validate_wordlists(...)
      - num_candidates, num_guesses, elapsed_ms
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
