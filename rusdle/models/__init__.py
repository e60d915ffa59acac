"""
Data Models Package

Contains all data models and errors used throughout the application.
"""

from .errors import (
    GameError,
    HardModeViolation,
    LengthMismatch,
    RoundNotActive,
    TriesExhausted,
    UnknownWord,
)
from .game import (
    GameLost,
    GameState,
    GameWon,
    GuessAccepted,
    GuessResult,
    LetterStatus,
    LetterVerdict,
    SessionStatus,
)

__all__ = [
    'GameState', 'GuessResult', 'LetterStatus', 'LetterVerdict', 'SessionStatus',
    'GuessAccepted', 'GameWon', 'GameLost',
    'GameError', 'LengthMismatch', 'UnknownWord', 'HardModeViolation',
    'RoundNotActive', 'TriesExhausted'
]
