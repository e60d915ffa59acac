"""
Guess Scorer

Implements the Wordle letter evaluation algorithm. Everything here is a pure
function of its arguments.
"""

from collections import Counter
from typing import Dict, List, Mapping, Optional, Sequence

from ..models.game import GuessResult, LetterStatus, LetterVerdict

# Points awarded per verdict when rating a finished round
ACCURACY_POINTS = {
    LetterStatus.CORRECT: 2.0,
    LetterStatus.MISPLACED: 1.0,
    LetterStatus.ABSENT: -0.5,
}


def build_letter_pool(word: str) -> Dict[str, int]:
    """Count how many times each letter occurs in ``word``."""
    return dict(Counter(word))


def score(secret: str, guess: str, letter_pool: Optional[Mapping[str, int]] = None) -> GuessResult:
    """
    Score ``guess`` against ``secret``.

    Exact matches are credited first so that a letter repeated in the guess
    but present once in the secret is never reported twice. The caller must
    make sure both words have the same length.

    Args:
        secret: The word being guessed
        guess: The submitted word
        letter_pool: Precomputed letter counts of ``secret``; it is copied,
            never modified

    Returns:
        GuessResult with one verdict per letter of ``guess``
    """
    remaining = dict(letter_pool) if letter_pool is not None else build_letter_pool(secret)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if secret[i] == letter:
            statuses[i] = LetterStatus.CORRECT
            remaining[letter] -= 1

    # Second pass: letters elsewhere in the secret, bounded by what is left
    for i, letter in enumerate(guess):
        if statuses[i] is not None:
            continue
        if letter in secret and remaining.get(letter, 0) > 0:
            statuses[i] = LetterStatus.MISPLACED
            remaining[letter] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return GuessResult(tuple(
        LetterVerdict(letter, status) for letter, status in zip(guess, statuses)
    ))


def guess_accuracy(history: Sequence[GuessResult]) -> float:
    """
    Rate a round between -0.25 and 1.0.

    Each CORRECT letter is worth 2 points, MISPLACED 1 and ABSENT -0.5. The
    average per guess is divided by the best possible score of a guess.
    """
    if not history:
        return 0.0

    maximum_points = len(history[0]) * ACCURACY_POINTS[LetterStatus.CORRECT]
    if not maximum_points:
        return 0.0

    points = sum(ACCURACY_POINTS[verdict.status] for result in history for verdict in result)
    return (points / len(history)) / maximum_points
