# apps/cli/rank.py
"""
CLI entry point: rank the next guess given the game so far.

This script:
  1) Validates the word lists (prints counts + SHA, checks solutions ⊆ allowed).
  2) Loads the lists and the optional frequency table.
  3) Decodes the (GUESS PATTERN) pairs given on the command line, filters
     both lists, scores every surviving guess on a worker pool with a live
     progress indicator, and prints `<word> -> <score>` lines, best first.
  4) Optionally writes a CSV of the ranking + a JSON manifest.

Example:
    python -m apps.cli.rank --solutions data/possible_words.txt \
        --allowed data/allowed_words.txt slate BBYBG crony BGBBB
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordlerank.datasets import load_frequencies, load_words, pretty_summary, validate_wordlists
from wordlerank.engine import history_from_pairs, validate_guess
from wordlerank.errors import FrequencyParseError, InvalidWordError, PatternError, WorkerPoolError
from wordlerank.harness import EngineConfig, format_ranking, rank_guesses, write_csv, write_manifest
from wordlerank.harness.io import git_commit_or_unknown, timestamp_id
from wordlerank.harness.pool import BACKENDS, DEFAULT_WORKERS

DEFAULT_SOLUTIONS = "data/possible_words.txt"
DEFAULT_ALLOWED = "data/allowed_words.txt"


class _Progress:
    """progress(done, total) callback rendering a tqdm bar or a plain counter."""

    def __init__(self, mode: str):
        self.mode = mode
        self.bar = None
        self.wrote = False

    def __call__(self, done: int, total: int) -> None:
        if self.mode == "bar":
            if self.bar is None:
                self.bar = tqdm(total=total, ncols=80, desc="Scoring", unit="guess")
            self.bar.update(done - self.bar.n)
        elif self.mode == "plain":
            sys.stderr.write(f"\r{done}/{total}")
            sys.stderr.flush()
            self.wrote = True

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
        if self.wrote:
            sys.stderr.write("\n")
            sys.stderr.flush()


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordlerank",
        description="wordlerank: rank next guesses by expected remaining candidates",
    )
    ap.add_argument("history", nargs="*", metavar="PAIR",
                    help="GUESS PATTERN pairs: a played guess and its B/Y/G feedback, e.g. slate BBYBG")
    ap.add_argument("--solutions", default=DEFAULT_SOLUTIONS,
                    help="path to the possible-solutions list (one word per line)")
    ap.add_argument("--allowed", default=DEFAULT_ALLOWED,
                    help="path to the allowed-guesses list (superset of solutions)")
    ap.add_argument("--frequencies",
                    help="optional word,frequency CSV used to break score ties")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                    help="number of scoring workers (0 = score in-process)")
    ap.add_argument("--backend", choices=BACKENDS, default="process",
                    help="worker type")
    ap.add_argument("--timeout", type=float,
                    help="abort if no result arrives within this many seconds")
    ap.add_argument("--no-present", action="store_true",
                    help="green/gray feedback only (patterns may not use Y)")
    ap.add_argument("--no-frequency", action="store_true",
                    help="do not break ties by word frequency")
    ap.add_argument("--top", type=int, help="print only the best K guesses")
    ap.add_argument("--reverse", action="store_true",
                    help="print the best guess last")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="show scoring progress (auto=bar on a terminal, else plain text)")
    ap.add_argument("--outdir", help="also write rank_<timestamp>.csv and a manifest here")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    # 1) Decode history first: bad input should fail before any file is read
    if args.workers < 0:
        ap.error("--workers must be >= 0")
    if args.top is not None and args.top < 1:
        ap.error("--top must be >= 1")
    if len(args.history) % 2:
        ap.error("history must be GUESS PATTERN pairs")
    pairs = list(zip(args.history[0::2], args.history[1::2]))
    present_status = not args.no_present
    try:
        history = history_from_pairs(pairs, present_status=present_status)
    except (InvalidWordError, PatternError) as e:
        ap.error(str(e))

    # 2) Validate and load; any load failure aborts before computation
    rep = validate_wordlists(args.solutions, args.allowed)
    print(pretty_summary(rep), file=sys.stderr)
    try:
        solutions = load_words(args.solutions)
        allowed = load_words(args.allowed)
        frequencies = load_frequencies(args.frequencies) if args.frequencies else {}
    except (OSError, FrequencyParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    allowed_set = set(allowed)
    for fb in history:
        if not validate_guess(fb.guess, allowed_set):
            print(f"warning: {fb.guess!r} is not in the allowed list", file=sys.stderr)

    # 3) Rank
    config = EngineConfig(
        present_status=present_status,
        frequency_tiebreak=not args.no_frequency,
        workers=args.workers,
        backend=args.backend,
        timeout=args.timeout,
    )
    progress = _Progress(_progress_mode(args.progress))
    try:
        result = rank_guesses(
            history,
            solutions=solutions,
            allowed=allowed,
            frequencies=frequencies,
            config=config,
            progress=progress,
        )
    except WorkerPoolError as e:
        print(f"\nerror: {e}", file=sys.stderr)
        return 1
    finally:
        progress.close()

    print(f"candidates={len(result.candidates)} guesses={len(result.guesses)} "
          f"time={result.elapsed_ms / 1000.0:.1f}s", file=sys.stderr)

    shown = result.ranking if args.top is None else result.ranking[: args.top]
    lines = format_ranking(shown)
    if args.reverse:
        lines.reverse()
    for ln in lines:
        print(ln)

    # 4) Optional outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv(result.ranking, str(outdir / f"rank_{run_id}.csv"),
                             solutions=result.candidates, frequencies=frequencies)
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "history": [[fb.guess, fb.pattern] for fb in history],
            "wordlists": rep,
            "num_candidates": len(result.candidates),
            "num_guesses": len(result.guesses),
            "elapsed_ms": round(result.elapsed_ms, 3),
        }
        manifest_path = write_manifest(manifest, str(outdir / f"rank_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}", file=sys.stderr)
        print(f"Wrote: {manifest_path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
