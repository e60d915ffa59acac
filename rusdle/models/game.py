"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for one position of a guess."""
    CORRECT = "CORRECT"
    MISPLACED = "MISPLACED"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"  # keyboard summary only, never produced by the scorer


class SessionStatus(Enum):
    """Lifecycle of a game session."""
    IDLE = "idle"
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class LetterVerdict:
    """A guessed letter together with its verdict."""
    letter: str
    status: LetterStatus

    def to_pair(self) -> Tuple[str, str]:
        return (self.letter, self.status.value)


@dataclass(frozen=True)
class GuessResult:
    """Ordered verdicts for one submitted guess, one per letter."""
    verdicts: Tuple[LetterVerdict, ...]

    def __len__(self) -> int:
        return len(self.verdicts)

    def __iter__(self) -> Iterator[LetterVerdict]:
        return iter(self.verdicts)

    def __getitem__(self, index: int) -> LetterVerdict:
        return self.verdicts[index]

    @property
    def word(self) -> str:
        return ''.join(verdict.letter for verdict in self.verdicts)

    @property
    def is_win(self) -> bool:
        return bool(self.verdicts) and all(
            verdict.status == LetterStatus.CORRECT for verdict in self.verdicts
        )

    def correct_positions(self) -> List[Tuple[int, str]]:
        """(position, letter) for every CORRECT verdict."""
        return [
            (position, verdict.letter)
            for position, verdict in enumerate(self.verdicts)
            if verdict.status == LetterStatus.CORRECT
        ]

    def misplaced_letters(self) -> List[str]:
        return [
            verdict.letter for verdict in self.verdicts
            if verdict.status == LetterStatus.MISPLACED
        ]

    def to_pairs(self) -> List[Tuple[str, str]]:
        return [verdict.to_pair() for verdict in self.verdicts]


@dataclass(frozen=True)
class GuessAccepted:
    """The guess was scored and the round continues."""
    result: GuessResult
    tries: int  # try number of the next guess
    max_tries: int
    round_over: bool = field(default=False, init=False)


@dataclass(frozen=True)
class GameWon:
    """The guess matched the secret word."""
    result: GuessResult
    tries_used: int
    max_tries: int
    history: Tuple[GuessResult, ...]
    round_over: bool = field(default=True, init=False)


@dataclass(frozen=True)
class GameLost:
    """The last allowed try was used without finding the word."""
    result: GuessResult
    secret: str
    history: Tuple[GuessResult, ...]
    round_over: bool = field(default=True, init=False)


@dataclass
class GameState:
    """Serializable game state handed to the presentation layer."""
    game_id: str
    status: str
    tries: int
    max_tries: int
    hard_mode: bool
    word_length: int
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included once the round is lost
