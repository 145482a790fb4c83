"""
Feedback (coloring) for a single (guess, solution) pair.

Conventions:
  - 'G' : Correct = letter in the right position
  - 'Y' : Present = letter in the solution, but not at this position
  - 'B' : Absent  = letter not in the solution (or every copy already accounted for)

Besides the per-position coloring, a Feedback carries one signed count per
letter of the alphabet describing what the coloring proves about how often
that letter occurs in the solution:

     0                no information
     n > 0            occurs at least n times
    -n (1 <= n <= 5)  occurs exactly n times
    ABSENT_SENTINEL   never occurs (outside the Correct positions of the guess)

The counts are what the constraint predicate consumes, so the duplicate-letter
rules below must match the official puzzle exactly.

Algorithm (three passes):
  1) Exact pass marks Correct positions; every unmatched solution letter is
     added to a scratch "remaining occurrences" counter. Correct positions
     also count as known occurrences of their letter.
  2) Left-to-right pass: a non-Correct position is Present while the
     solution still has an unmatched copy of its letter. Once the copies run
     out, a surplus copy turns the letter's known count negative ("exactly
     that many, no more").
  3) Sentinel pass: an Absent letter with no known occurrence at all is
     marked as never occurring.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

from wordlerank.errors import PatternError

WORD_LENGTH = 5
ALPHABET_SIZE = 26
ABSENT_SENTINEL = -(WORD_LENGTH + 1)

_A = ord("a")


class LetterStatus(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "B"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class Feedback:
    """Positional coloring plus per-letter count constraints for one guess."""
    guess: str
    statuses: Tuple[LetterStatus, ...]
    counts: Tuple[int, ...]

    @property
    def pattern(self) -> str:
        return "".join(s.symbol for s in self.statuses)

    def positions(self) -> Iterator[Tuple[str, LetterStatus]]:
        return zip(self.guess, self.statuses)

    def count_for(self, letter: str) -> int:
        return self.counts[ord(letter) - _A]

    @property
    def solved(self) -> bool:
        return all(s is LetterStatus.CORRECT for s in self.statuses)

    def __str__(self) -> str:
        return f"{self.guess} {self.pattern}"


def compute_feedback(guess: str, solution: str, *, present_status: bool = True) -> Feedback:
    """
    Compute the Feedback for `guess` if `solution` were the hidden word.

    Both words must already be normalized (5 lowercase letters).

    With present_status=False the restricted variant is produced: misplaced
    letters are colored Absent, so a gray square no longer proves anything
    about the letter's count. Only Correct letters contribute ("at least n").

    Examples:
      compute_feedback("erase", "crane").pattern -> "BGGBG"
      compute_feedback("crane", "crane").pattern -> "GGGGG"
    """
    statuses: List[LetterStatus] = [LetterStatus.ABSENT] * WORD_LENGTH
    remaining = [0] * ALPHABET_SIZE
    known = [0] * ALPHABET_SIZE

    # Pass 1: exact matches.
    for i in range(WORD_LENGTH):
        if guess[i] == solution[i]:
            statuses[i] = LetterStatus.CORRECT
            known[ord(guess[i]) - _A] += 1
        else:
            remaining[ord(solution[i]) - _A] += 1

    if not present_status:
        return Feedback(guess, tuple(statuses), tuple(known))

    # Pass 2: misplaced letters, capped by the solution's unmatched copies.
    for i in range(WORD_LENGTH):
        if statuses[i] is LetterStatus.CORRECT:
            continue
        c = ord(guess[i]) - _A
        if remaining[c] > 0:
            remaining[c] -= 1
            known[c] += 1
            statuses[i] = LetterStatus.PRESENT
        elif known[c] > 0:
            known[c] = -known[c]

    # Pass 3: letters that never matched anywhere.
    for i in range(WORD_LENGTH):
        c = ord(guess[i]) - _A
        if statuses[i] is LetterStatus.ABSENT and known[c] == 0:
            known[c] = ABSENT_SENTINEL

    return Feedback(guess, tuple(statuses), tuple(known))


def parse_pattern(pattern: str, *, present_status: bool = True) -> Tuple[LetterStatus, ...]:
    """
    Decode a 'B'/'Y'/'G' pattern string (case-sensitive) into statuses.

    Raises PatternError for a wrong length or any other character; 'Y' is
    also rejected when the Present status is disabled.
    """
    if len(pattern) != WORD_LENGTH:
        raise PatternError(f"pattern must have {WORD_LENGTH} characters; got {pattern!r}")
    out: List[LetterStatus] = []
    for ch in pattern:
        try:
            status = LetterStatus(ch)
        except ValueError:
            raise PatternError(f"invalid pattern character {ch!r} in {pattern!r} (use B, Y or G)") from None
        if status is LetterStatus.PRESENT and not present_status:
            raise PatternError(f"pattern {pattern!r} uses 'Y' but the Present status is disabled")
        out.append(status)
    return tuple(out)


def feedback_from_statuses(guess: str, statuses: Sequence[LetterStatus], *,
                           present_status: bool = True) -> Feedback:
    """
    Rebuild the count constraints a player can derive from an observed coloring.

    Per letter: n = number of Correct/Present squares. If the letter also has
    an Absent square, n is exact (sentinel when n == 0); otherwise it is a
    lower bound. The result does not depend on the order of the squares.
    """
    hits = [0] * ALPHABET_SIZE
    misses = [0] * ALPHABET_SIZE
    for ch, status in zip(guess, statuses):
        c = ord(ch) - _A
        if status is LetterStatus.ABSENT:
            misses[c] += 1
        else:
            hits[c] += 1

    counts = [0] * ALPHABET_SIZE
    for c in range(ALPHABET_SIZE):
        if not present_status or not misses[c]:
            counts[c] = hits[c]
        elif hits[c]:
            counts[c] = -hits[c]
        else:
            counts[c] = ABSENT_SENTINEL
    return Feedback(guess, tuple(statuses), tuple(counts))


def feedback_from_pattern(guess: str, pattern: str, *, present_status: bool = True) -> Feedback:
    """Feedback for a played guess and its observed 'B'/'Y'/'G' pattern."""
    statuses = parse_pattern(pattern, present_status=present_status)
    return feedback_from_statuses(guess, statuses, present_status=present_status)
