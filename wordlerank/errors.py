"""
Exception types raised by wordlerank.

Library code raises these; only the CLI turns them into exit codes.
Nothing is retried: every one of them is terminal for a run.
"""


class WordleRankError(Exception):
    """Base class for all wordlerank errors."""


class InvalidWordError(WordleRankError, ValueError):
    """A word is not exactly 5 ASCII letters."""


class PatternError(WordleRankError, ValueError):
    """A feedback pattern string could not be decoded."""


class FrequencyParseError(WordleRankError, ValueError):
    """A frequency table row carries a frequency that is not an integer."""


class WorkerPoolError(WordleRankError, RuntimeError):
    """A scoring worker failed, died, or stopped answering."""
