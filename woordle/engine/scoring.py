"""
Feedback for a single (guess, answer) pair.

Conventions:
  - Mark.CORRECT ('C') : right letter, right position
  - Mark.PRESENT ('P') : letter is in the answer, elsewhere
  - Mark.ABSENT  ('A') : letter not in the answer (or every occurrence is
                         already accounted for)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all exact matches and pools the answer letters that
     were NOT matched.
  2) Second pass grants PRESENT only while the pool still holds that letter,
     consuming one occurrence per grant.

Pass 1 finishes before pass 2 starts, so positional matches are always
decided before any duplicate letter can claim a PRESENT.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import List

from woordle.errors import LengthMismatchError
from .normalize import NormalizedWord


class Mark(str, Enum):
    CORRECT = "C"
    PRESENT = "P"
    ABSENT = "A"


Feedback = List[Mark]


def evaluate(guess: NormalizedWord, answer: NormalizedWord) -> Feedback:
    """
    Compute the feedback marks for `guess` against `answer`.

    Preconditions:
      - both words normalized and non-empty
      - len(guess) == len(answer)

    Raises:
      LengthMismatchError when the lengths differ (or either side is empty).

    Examples:
      pattern(evaluate("allee", "apple")) -> "CPAAC"
      pattern(evaluate("belle", "level")) -> "ACPPP"
    """
    if not guess or not answer or len(guess) != len(answer):
        raise LengthMismatchError(
            f"Guess \"{guess}\" ({len(guess or '')} letters) and answer "
            f"({len(answer or '')} letters) must be non-empty and the same length.",
            word=guess,
            length=len(answer or ""),
        )

    n = len(guess)
    if guess == answer:
        return [Mark.CORRECT] * n

    marks = [Mark.ABSENT] * n

    # Pass 1: exact matches; pool the answer's leftover letters
    pool: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            marks[i] = Mark.CORRECT
        else:
            pool[a] += 1

    # Pass 2: present only while the letter has occurrences left
    for i, g in enumerate(guess):
        if marks[i] is Mark.CORRECT:
            continue
        if pool[g] > 0:
            marks[i] = Mark.PRESENT
            pool[g] -= 1

    return marks


def pattern(feedback: Feedback) -> str:
    """Compact string form, e.g. [C, P, A] -> "CPA"."""
    return "".join(m.value for m in feedback)


def is_solved(feedback: Feedback) -> bool:
    return bool(feedback) and all(m is Mark.CORRECT for m in feedback)
