"""
Expected Remaining Candidates (ERC) by brute-force simulation.

Idea:
  For guess g and every other candidate s in the pool, pretend s is the
  hidden word: compute feedback(g, s) and count how many pool words would
  survive it. Bucket those survivor counts and take the frequency-weighted
  average:
      E[left | g] = sum_k ( occ_k / total ) * k
  Lower is better (fewer words expected to remain).

This is a proxy for information gain, not Shannon entropy. Each simulation
re-validates the whole pool, so a guess costs O(|pool|^2) and a full ranking
O(|allowed| * |pool|^2); see harness.pool for the parallel driver.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, NamedTuple, Sequence

from .constraints import count_valid
from .feedback import compute_feedback


class ScoreRecord(NamedTuple):
    guess: str
    score: float


def remaining_count(guess: str, solution: str, pool: Sequence[str], *,
                    present_status: bool = True) -> int:
    """How many pool words remain if `solution` is hidden and `guess` is played."""
    fb = compute_feedback(guess, solution, present_status=present_status)
    return count_valid(pool, fb)


def expected_value(guess: str, pool: Sequence[str], *, present_status: bool = True) -> float:
    """
    Average number of candidates left after playing `guess`, over every
    other candidate in `pool` taken as the solution.

    Returns 0.0 when the pool holds no candidate other than the guess.
    """
    buckets: Counter = Counter()
    total = 0
    for solution in pool:
        if solution == guess:
            continue
        total += 1
        buckets[remaining_count(guess, solution, pool, present_status=present_status)] += 1

    if total == 0:
        return 0.0
    # Integer numerator keeps equal distributions bit-identical for tie-breaks.
    return sum(left * occ for left, occ in buckets.items()) / total


def score_guesses(guesses: Iterable[str], pool: Sequence[str], *,
                  present_status: bool = True) -> List[ScoreRecord]:
    """Score each guess serially, in input order."""
    pool = tuple(pool)
    return [
        ScoreRecord(g, expected_value(g, pool, present_status=present_status))
        for g in guesses
    ]
