"""
Dataset validator for wordlerank.

What this module does:
- Validate a pair of word lists: the possible solutions (answer space) and
  the allowed guesses (guess universe).
- Apply the strict formatting rules (lowercase, a–z only, exactly 5 letters,
  one per line) and count the lines that break them.
- Detect duplicates; compute SHA-256 of the raw files.
- Check that solutions ⊆ allowed.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

The loaders in datasets.io are permissive and just skip bad lines; this
report is how a user finds out how many were skipped.

Typical use:
    from wordlerank.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/possible_words.txt", "data/allowed_words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from wordlerank.engine.feedback import WORD_LENGTH


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (solutions, allowed) pair."""
    solutions: FileReport
    allowed: FileReport
    solutions_subset_allowed: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines are skipped without
    being counted (a trailing newline is not a defect).
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w.islower() and w.isascii() and w.isalpha() and len(w) == WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def validate_wordlists(solutions_path: str, allowed_path: str) -> Dict:
    """
    Validate the solutions/allowed word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, invalid/duplicate diagnostics, the subset check,
        `passed` (non-empty, subset OK) and `issues`.
        Invalid lines are reported but do not fail validation, since the
        loaders skip them anyway.
    """
    issues: List[str] = []
    sol_p = Path(solutions_path)
    all_p = Path(allowed_path)

    if not sol_p.exists() or not all_p.exists():
        if not sol_p.exists():
            issues.append(f"solutions file not found: {solutions_path}")
        if not all_p.exists():
            issues.append(f"allowed file not found: {allowed_path}")
        rep = ValidationReport(
            solutions=FileReport(solutions_path, sol_p.exists(), 0, "", 0, 0),
            allowed=FileReport(allowed_path, all_p.exists(), 0, "", 0, 0),
            solutions_subset_allowed=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    solutions, sol_invalid = _load_and_check(sol_p)
    allowed, all_invalid = _load_and_check(all_p)
    sol_report = _file_report(sol_p, solutions, sol_invalid)
    all_report = _file_report(all_p, allowed, all_invalid)

    missing = set(solutions) - set(allowed)
    subset_ok = not missing
    if missing:
        # Surface a few examples to debug quickly
        issues.append(f"solutions not subset of allowed (e.g., {sorted(missing)[:5]})")

    if sol_report.count == 0:
        issues.append("solutions file contains 0 valid words")
    if all_report.count == 0:
        issues.append("allowed file contains 0 valid words")
    if sol_invalid:
        issues.append(f"solutions has {sol_invalid} invalid line(s)")
    if all_invalid:
        issues.append(f"allowed has {all_invalid} invalid line(s)")
    if sol_report.count != sol_report.unique_count:
        issues.append("solutions contains duplicate lines")
    if all_report.count != all_report.unique_count:
        issues.append("allowed contains duplicate lines")

    passed = subset_ok and sol_report.count > 0 and all_report.count > 0

    rep = ValidationReport(
        solutions=sol_report,
        allowed=all_report,
        solutions_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        solutions=2315 (uniq=2315, sha=abc123...) | allowed=12972 (uniq=12972, sha=def456...) | solutions⊆allowed=True | OK
    """
    a = report["solutions"]
    b = report["allowed"]
    subset = report["solutions_subset_allowed"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"solutions={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| solutions⊆allowed={subset} | {status}"
    )
