"""
Fixed-size worker pool for scoring guesses in parallel.

Layout:
  - N long-lived workers, each with its own copy of the candidate pool and
    its own input queue.
  - The coordinator hands out guesses round-robin without waiting.
  - Every worker puts (guess, score) on ONE shared results queue.
  - The coordinator stops receiving after exactly as many results as it
    dispatched guesses; arrival order is irrelevant (the Ranker re-sorts).

Backends:
  - "process": multiprocessing workers (real parallelism for the CPU-bound
               simulation; the pool is pickled into each child once).
  - "thread":  threading workers sharing the interpreter (cheap to start,
               handy for tests and tiny pools).

Failure handling: a worker that raises reports the error over the results
queue and the coordinator raises WorkerPoolError. There is no partial
result. With timeout=None a worker that hangs blocks the coordinator
forever; pass a timeout (seconds per result) to turn that into an error.
"""

from __future__ import annotations

import multiprocessing as mp
import queue
import threading
from typing import Callable, Iterable, List, Optional, Sequence

from wordlerank.engine.scoring import ScoreRecord, expected_value
from wordlerank.errors import WorkerPoolError

DEFAULT_WORKERS = 10
BACKENDS = ("process", "thread")

# Job sentinel: tells a worker to exit its loop.
_STOP = None

ProgressFn = Callable[[int, int], None]


def _worker_loop(jobs, results, pool: Sequence[str], present_status: bool) -> None:
    """Receive a guess, score it against the private pool, send the result."""
    for guess in iter(jobs.get, _STOP):
        try:
            value = expected_value(guess, pool, present_status=present_status)
        except Exception as e:  # reported to the coordinator, which aborts the run
            results.put(("error", guess, f"{type(e).__name__}: {e}"))
            return
        results.put(("ok", guess, value))


class WorkerPool:
    """
    Usage:
        with WorkerPool(candidates, workers=8) as wp:
            records = wp.map(guesses)
    """

    def __init__(
            self,
            pool: Iterable[str],
            *,
            workers: int = DEFAULT_WORKERS,
            backend: str = "process",
            present_status: bool = True,
            timeout: Optional[float] = None,
    ):
        if workers < 1:
            raise ValueError(f"workers must be >= 1; got {workers}")
        if backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}; got {backend!r}")
        self.pool = tuple(pool)
        self.workers = int(workers)
        self.backend = backend
        self.present_status = present_status
        self.timeout = timeout

        self._jobs: list = []
        self._handles: list = []
        self._results = None

    # ---- lifecycle ----

    @property
    def started(self) -> bool:
        return bool(self._handles)

    def start(self) -> "WorkerPool":
        if self.started:
            return self
        if self.backend == "process":
            ctx = mp.get_context()
            self._results = ctx.Queue()
            for k in range(self.workers):
                jobs = ctx.Queue()
                p = ctx.Process(
                    target=_worker_loop,
                    args=(jobs, self._results, self.pool, self.present_status),
                    name=f"wordlerank-worker-{k}",
                    daemon=True,
                )
                self._jobs.append(jobs)
                self._handles.append(p)
        else:
            self._results = queue.Queue()
            for k in range(self.workers):
                jobs = queue.Queue()
                t = threading.Thread(
                    target=_worker_loop,
                    args=(jobs, self._results, list(self.pool), self.present_status),
                    name=f"wordlerank-worker-{k}",
                    daemon=True,
                )
                self._jobs.append(jobs)
                self._handles.append(t)
        for h in self._handles:
            h.start()
        return self

    def close(self) -> None:
        """
        Stop every worker. Guesses still queued are dropped, so after a
        failed map() no worker keeps scoring. Processes that do not exit
        promptly are terminated.
        """
        if not self.started:
            return
        for jobs in self._jobs:
            while True:
                try:
                    jobs.get_nowait()
                except queue.Empty:
                    break
            jobs.put(_STOP)
        for h in self._handles:
            h.join(timeout=1.0)
            if self.backend == "process" and h.is_alive():
                h.terminate()
                h.join()
        if self.backend == "process":
            for q in self._jobs + [self._results]:
                q.close()
        self._jobs, self._handles, self._results = [], [], None

    def __enter__(self) -> "WorkerPool":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- work ----

    def _receive(self):
        try:
            return self._results.get(timeout=self.timeout)
        except queue.Empty:
            dead = [h.name for h in self._handles if not h.is_alive()]
            detail = f"; dead workers: {dead}" if dead else ""
            raise WorkerPoolError(f"no result within {self.timeout}s{detail}") from None

    def map(self, guesses: Iterable[str], progress: Optional[ProgressFn] = None) -> List[ScoreRecord]:
        """
        Score every guess; returns records in completion order.

        `progress(done, total)` is called after each received result.
        """
        if not self.started:
            raise RuntimeError("WorkerPool.map() called before start()")
        guesses = list(guesses)
        total = len(guesses)

        n = len(self._jobs)
        for i, g in enumerate(guesses):
            self._jobs[i % n].put(g)

        out: List[ScoreRecord] = []
        while len(out) < total:
            kind, guess, payload = self._receive()
            if kind == "error":
                raise WorkerPoolError(f"worker failed scoring {guess!r}: {payload}")
            out.append(ScoreRecord(guess, payload))
            if progress is not None:
                progress(len(out), total)
        return out
