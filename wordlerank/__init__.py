"""wordlerank: candidate filtering and next-guess ranking for 5-letter word puzzles."""

__version__ = "0.1.0"
