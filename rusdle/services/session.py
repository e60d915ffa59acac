"""
Game Session

State machine for a single player's rounds: IDLE -> ACTIVE -> WON/LOST.

A win clears the round straight away and leaves the session ready for the
next ``start_round``. A loss keeps the secret word and history around so the
caller can still show them; ``reset`` or the next ``start_round`` clears them.
"""

import logging
from typing import Dict, List, Optional, Union

from ..config.game_settings import DEFAULT_HARD_MODE, DEFAULT_MAX_TRIES
from ..models.errors import (
    HardModeViolation,
    LengthMismatch,
    RoundNotActive,
    TriesExhausted,
    UnknownWord,
)
from ..models.game import GameLost, GameWon, GuessAccepted, GuessResult, SessionStatus
from .dictionary import Dictionary, normalize_word
from .scorer import build_letter_pool, score

logger = logging.getLogger('rusdle_game.session')

RoundOutcome = Union[GuessAccepted, GameWon, GameLost]


class GameSession:
    """
    One player's game: the current round plus settings kept between rounds.

    ``hard_mode`` and ``max_tries`` may be changed between guesses; they are read
    on every guess.
    """

    def __init__(self, dictionary: Dictionary,
                 hard_mode: bool = DEFAULT_HARD_MODE,
                 max_tries: int = DEFAULT_MAX_TRIES):
        self.dictionary = dictionary
        self.hard_mode = hard_mode
        self.status = SessionStatus.IDLE
        self.secret = ""
        self.history: List[GuessResult] = []
        self.tries = 1
        self.letter_pool: Dict[str, int] = {}
        self.max_tries = max_tries

    @property
    def max_tries(self) -> int:
        return self._max_tries

    @max_tries.setter
    def max_tries(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"max_tries must be a positive integer, got {value!r}")
        # a running round must keep room for the next guess
        if self.status == SessionStatus.ACTIVE and value < self.tries:
            raise ValueError(
                f"max_tries cannot drop below {self.tries} while a round is in progress"
            )
        self._max_tries = value

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def word_length(self) -> int:
        return len(self.secret)

    def start_round(self, secret: Optional[str] = None) -> str:
        """
        Begin a new round, discarding whatever the previous one left behind.

        Args:
            secret: Word to guess; a random dictionary word when omitted

        Returns:
            str: The normalized secret word
        """
        word = normalize_word(secret if secret is not None else self.dictionary.random_member())
        if not word:
            raise ValueError("Secret word cannot be empty")

        self._clear_round()
        self.secret = word
        self.letter_pool = build_letter_pool(word)
        self.status = SessionStatus.ACTIVE
        logger.debug("Round started: %d letters, %d tries, hard_mode=%s",
                     len(word), self.max_tries, self.hard_mode)
        return word

    def submit_guess(self, guess: str) -> RoundOutcome:
        """
        Validate, score and record a guess.

        Failed validation raises a GameError and changes nothing, so the
        try is not consumed.

        Returns:
            GuessAccepted while the round goes on, GameWon or GameLost when
            this guess ends it

        Raises:
            RoundNotActive: No round has been started
            LengthMismatch: Guess and secret differ in length
            UnknownWord: Guess is not in the dictionary
            TriesExhausted: The round already used its last try
            HardModeViolation: Guess ignores the previous guess' hints
        """
        if self.status not in (SessionStatus.ACTIVE, SessionStatus.LOST):
            raise RoundNotActive()

        word = normalize_word(guess)
        if len(word) != len(self.secret):
            raise LengthMismatch()
        if not self.dictionary.contains(word):
            raise UnknownWord()
        if self.status == SessionStatus.LOST or self.tries > self.max_tries:
            raise TriesExhausted(self.secret, self.history)
        if self.hard_mode and self.history:
            self._check_hard_mode(word, self.history[-1])

        result = score(self.secret, word, self.letter_pool)
        self.history.append(result)
        self.tries += 1

        if result.is_win:
            outcome = GameWon(result, len(self.history), self.max_tries, tuple(self.history))
            logger.info("Round won in %d/%d tries", outcome.tries_used, self.max_tries)
            self._clear_round()
            self.status = SessionStatus.WON
            return outcome

        if self.tries > self.max_tries:
            self.status = SessionStatus.LOST
            logger.info("Round lost after %d tries", len(self.history))
            return GameLost(result, self.secret, tuple(self.history))

        return GuessAccepted(result, self.tries, self.max_tries)

    def reset(self) -> None:
        """Drop the current round and go back to IDLE. Settings are kept."""
        self._clear_round()
        self.status = SessionStatus.IDLE

    def _check_hard_mode(self, word: str, last: GuessResult) -> None:
        for position, letter in last.correct_positions():
            if word[position] != letter:
                raise HardModeViolation(
                    f"Invalid word in hard mode: position {position + 1} must be '{letter}'"
                )
        for letter in last.misplaced_letters():
            if letter not in word:
                raise HardModeViolation(
                    f"Invalid word in hard mode: guess must contain '{letter}'"
                )

    def _clear_round(self) -> None:
        self.secret = ""
        self.history = []
        self.tries = 1
        self.letter_pool = {}
