"""
Candidate filtering given game history.

Given:
  - a pool of words (the possible solutions, or the allowed guesses)
  - a history of Feedback objects (one per guess played so far)

Return:
  - words that are consistent with ALL feedback seen so far.

Each Feedback is checked independently and statelessly, so filtering by a
history is the same as filtering pass-by-pass; ConstraintSet is the merged
"all of these at once" view of the same thing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .feedback import (
    ABSENT_SENTINEL,
    ALPHABET_SIZE,
    WORD_LENGTH,
    Feedback,
    LetterStatus,
    feedback_from_pattern,
)
from .validation import normalize_word

_A = ord("a")
_CORRECT = LetterStatus.CORRECT

# History is a sequence of Feedback objects, oldest first.
History = Iterable[Feedback]


def is_valid(word: str, feedback: Feedback) -> bool:
    """
    Return True if `word` could still be the solution after `feedback`.

    Per position:
      - Correct: the word must have the guessed letter there.
      - Present/Absent: the word must NOT have the guessed letter there, and
        its own letter must not be one proven absent.
    Every letter of the word counts as one observed occurrence; afterwards
    each exact count must match and each lower bound must be reached.

    Note: the gray-square check is stricter than counts alone. A word with a
    capped letter on a gray square is rejected even when its count matches,
    so survivor counts (and scores) are lower than a count-only check gives.
    """
    guess = feedback.guess
    statuses = feedback.statuses
    counts = feedback.counts
    seen = [0] * ALPHABET_SIZE

    for i in range(WORD_LENGTH):
        ch = word[i]
        c = ord(ch) - _A
        if statuses[i] is _CORRECT:
            if ch != guess[i]:
                return False
        else:
            if ch == guess[i]:
                return False
            if counts[c] == ABSENT_SENTINEL:
                return False
        seen[c] += 1

    for c in range(ALPHABET_SIZE):
        want = counts[c]
        if want == 0 or want == ABSENT_SENTINEL:
            continue
        if want < 0:
            if seen[c] != -want:
                return False
        elif seen[c] < want:
            return False
    return True


def count_valid(words: Iterable[str], feedback: Feedback) -> int:
    """Number of `words` consistent with a single feedback."""
    return sum(1 for w in words if is_valid(w, feedback))


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with every feedback in `history`.

    Returns:
      List[str] of consistent words (order preserved as in `words`).
    """
    out = list(words)
    for fb in history:
        out = [w for w in out if is_valid(w, fb)]
    return out


@dataclass(frozen=True)
class ConstraintSet:
    """Conjunction of feedbacks: a word satisfies it iff it satisfies each one."""
    feedbacks: Tuple[Feedback, ...] = ()

    @classmethod
    def of(cls, *feedbacks: Feedback) -> "ConstraintSet":
        return cls(tuple(feedbacks))

    def __and__(self, other: "ConstraintSet | Feedback") -> "ConstraintSet":
        if isinstance(other, Feedback):
            return ConstraintSet(self.feedbacks + (other,))
        if isinstance(other, ConstraintSet):
            return ConstraintSet(self.feedbacks + other.feedbacks)
        return NotImplemented

    def __len__(self) -> int:
        return len(self.feedbacks)

    def is_satisfied_by(self, word: str) -> bool:
        return all(is_valid(word, fb) for fb in self.feedbacks)

    def filter(self, words: Iterable[str]) -> List[str]:
        return [w for w in words if self.is_satisfied_by(w)]


def history_from_pairs(pairs: Sequence[Tuple[str, str]], *,
                       present_status: bool = True) -> List[Feedback]:
    """
    Decode (guess, pattern) string pairs, e.g. [("slate", "BBYBG")].

    Raises InvalidWordError / PatternError on malformed input.
    """
    return [
        feedback_from_pattern(normalize_word(g), patt, present_status=present_status)
        for g, patt in pairs
    ]
