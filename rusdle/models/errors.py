"""
Game Errors

Recoverable failures raised while submitting a guess. None of them changes
session state, so the caller can simply ask for another guess.
"""

from typing import Sequence, Tuple

from .game import GuessResult


class GameError(Exception):
    """Base class for guess submission failures."""
    error_type = "game_error"
    default_message = "Invalid guess"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class LengthMismatch(GameError):
    error_type = "length_mismatch"
    default_message = "Word length does not match guess word length"


class UnknownWord(GameError):
    error_type = "unknown_word"
    default_message = "Word not in word list"


class HardModeViolation(GameError):
    """The guess ignores letters revealed by the previous guess."""
    error_type = "hard_mode_violation"
    default_message = "Invalid word in hard mode"


class RoundNotActive(GameError):
    error_type = "round_not_active"
    default_message = "No round in progress, start a new round first"


class TriesExhausted(GameError):
    """Raised when a guess arrives after the last try was already used."""
    error_type = "tries_exhausted"
    default_message = "Maximum tries reached"

    def __init__(self, secret: str, history: Sequence[GuessResult]):
        super().__init__()
        self.secret = secret
        self.history: Tuple[GuessResult, ...] = tuple(history)
