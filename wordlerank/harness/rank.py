"""
Ranking of scored guesses.

Order:
  1) ascending expected value (lower = fewer candidates left = better)
  2) on exact ties, guesses that could themselves be the solution first
  3) then higher corpus frequency (words missing from the table count as 0)
  4) then alphabetical, so equal inputs always give the same list
"""

from __future__ import annotations

from typing import Collection, Iterable, List, Mapping, Optional

from wordlerank.engine.scoring import ScoreRecord


def rank(
        records: Iterable[ScoreRecord],
        *,
        solutions: Collection[str],
        frequencies: Optional[Mapping[str, int]] = None,
        frequency_tiebreak: bool = True,
) -> List[ScoreRecord]:
    solution_set = solutions if isinstance(solutions, (set, frozenset)) else set(solutions)
    freqs = frequencies if (frequencies is not None and frequency_tiebreak) else {}

    def key(r: ScoreRecord):
        return (r.score, r.guess not in solution_set, -freqs.get(r.guess, 0), r.guess)

    return sorted(records, key=key)


def format_ranking(records: Iterable[ScoreRecord]) -> List[str]:
    """One `<word> -> <score>` line per record."""
    return [f"{r.guess} -> {r.score}" for r in records]
