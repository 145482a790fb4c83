"""
Ranking pipeline.

- EngineConfig:  the knobs (Present status, frequency tie-break, workers).
- rank_guesses:  history -> filtered candidates -> scored guesses -> ranking.

These functions are intentionally UI-agnostic so they can be reused by
the CLI, a notebook, or tests without changes.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence

from wordlerank.engine import Feedback, filter_candidates, score_guesses
from wordlerank.engine.scoring import ScoreRecord
from .pool import DEFAULT_WORKERS, ProgressFn, WorkerPool
from .rank import rank


@dataclass(frozen=True)
class EngineConfig:
    """
    present_status:     color misplaced letters Present (False = green/gray only)
    frequency_tiebreak: break exact score ties by corpus frequency
    workers:            worker count; 0 scores serially in-process
    backend:            "process" or "thread"
    timeout:            seconds to wait for any single result (None = forever)
    """
    present_status: bool = True
    frequency_tiebreak: bool = True
    workers: int = DEFAULT_WORKERS
    backend: str = "process"
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.workers < 0:
            raise ValueError(f"workers must be >= 0; got {self.workers}")


@dataclass
class RankResult:
    candidates: List[str]                 # possible solutions still consistent
    guesses: List[str]                    # allowed guesses still consistent
    ranking: List[ScoreRecord] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def best(self) -> Optional[ScoreRecord]:
        return self.ranking[0] if self.ranking else None


def rank_guesses(
        history: Iterable[Feedback],
        *,
        solutions: Sequence[str],
        allowed: Sequence[str],
        frequencies: Optional[Mapping[str, int]] = None,
        config: EngineConfig = EngineConfig(),
        progress: Optional[ProgressFn] = None,
) -> RankResult:
    """
    Filter both word lists by `history` and rank every surviving guess.

    Args:
        history:     Feedback objects for the guesses played so far
        solutions:   possible-solutions list (the answer space)
        allowed:     allowed-guesses list (every acceptable guess)
        frequencies: word -> corpus frequency, for the tie-break
        config:      EngineConfig
        progress:    optional callable(done, total) fired per scored guess
    """
    history = list(history)
    t0 = time.time()

    # Shrink both collections with the feedback seen so far
    candidates = filter_candidates(solutions, history)
    guesses = filter_candidates(allowed, history)

    if not guesses:
        records: List[ScoreRecord] = []
    elif config.workers == 0:
        records = []
        for g in guesses:
            records.extend(score_guesses([g], candidates, present_status=config.present_status))
            if progress is not None:
                progress(len(records), len(guesses))
    else:
        with WorkerPool(
                candidates,
                workers=config.workers,
                backend=config.backend,
                present_status=config.present_status,
                timeout=config.timeout,
        ) as wp:
            records = wp.map(guesses, progress=progress)

    ranking = rank(
        records,
        solutions=set(candidates),
        frequencies=frequencies,
        frequency_tiebreak=config.frequency_tiebreak,
    )
    dt = (time.time() - t0) * 1000.0
    return RankResult(candidates=candidates, guesses=guesses, ranking=ranking, elapsed_ms=dt)
