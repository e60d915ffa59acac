"""
Game Service

Keeps track of game sessions by id and turns them into serializable state.
"""

import uuid
from typing import Dict, Iterable, Optional

from ..config.game_settings import DEFAULT_HARD_MODE, DEFAULT_MAX_TRIES
from ..models.game import GameState, GuessResult, LetterStatus, SessionStatus
from .dictionary import Dictionary
from .session import GameSession, RoundOutcome

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Higher rank wins when the same letter shows up with different verdicts
_STATUS_RANK = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.MISPLACED: 2,
    LetterStatus.CORRECT: 3,
}


def summarize_letter_status(history: Iterable[GuessResult]) -> Dict[str, str]:
    """
    Best verdict seen so far for every letter, for keyboard display.
    """
    letter_status = {letter: LetterStatus.UNUSED for letter in ALPHABET}
    for result in history:
        for verdict in result:
            current = letter_status.get(verdict.letter, LetterStatus.UNUSED)
            if _STATUS_RANK[verdict.status] > _STATUS_RANK[current]:
                letter_status[verdict.letter] = verdict.status
    return {letter: status.value for letter, status in letter_status.items()}


class GameService:
    """
    Game session registry.

    This class handles:
    - Session management with unique game IDs
    - A single dictionary shared by every session
    - Default settings applied to new sessions
    - Game state snapshots that never leak the secret of a running round
    """

    def __init__(self, dictionary: Dictionary,
                 hard_mode: bool = DEFAULT_HARD_MODE,
                 max_tries: int = DEFAULT_MAX_TRIES):
        self.dictionary = dictionary
        self.hard_mode = hard_mode
        self.max_tries = max_tries
        self.games: Dict[str, GameSession] = {}

    def create_new_game(self, hard_mode: Optional[bool] = None,
                        max_tries: Optional[int] = None,
                        secret: Optional[str] = None) -> str:
        """
        Creates a session and starts its first round.

        Args:
            hard_mode: Override of the default hard mode flag
            max_tries: Override of the default number of tries
            secret: Fixed secret word instead of a random one

        Returns:
            str: Unique game ID for this session
        """
        session = GameSession(
            self.dictionary,
            hard_mode=self.hard_mode if hard_mode is None else hard_mode,
            max_tries=self.max_tries if max_tries is None else max_tries,
        )
        session.start_round(secret)

        game_id = str(uuid.uuid4())
        self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        The answer is only included after the round was lost.
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        return GameState(
            game_id=game_id,
            status=session.status.value,
            tries=session.tries,
            max_tries=session.max_tries,
            hard_mode=session.hard_mode,
            word_length=session.word_length,
            guesses=[result.word for result in session.history],
            guess_results=[result.to_pairs() for result in session.history],
            letter_status=summarize_letter_status(session.history),
            answer=session.secret if session.status == SessionStatus.LOST else None,
        )

    def make_guess(self, game_id: str, guess: str) -> Optional[RoundOutcome]:
        """
        Submits a guess to a session.

        Returns:
            The round outcome, or None if the game does not exist

        Raises:
            GameError: If the session rejects the guess
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.submit_guess(guess)

    def new_round(self, game_id: str, secret: Optional[str] = None) -> bool:
        session = self.games.get(game_id)
        if session is None:
            return False
        session.start_round(secret)
        return True

    def reset_game(self, game_id: str) -> bool:
        session = self.games.get(game_id)
        if session is None:
            return False
        session.reset()
        return True

    def update_options(self, game_id: str, hard_mode: Optional[bool] = None,
                       max_tries: Optional[int] = None) -> bool:
        """
        Changes session settings; they apply from the next guess on.

        Raises:
            ValueError: If max_tries is not a positive integer
        """
        session = self.games.get(game_id)
        if session is None:
            return False
        if max_tries is not None:
            session.max_tries = max_tries
        if hard_mode is not None:
            session.hard_mode = bool(hard_mode)
        return True

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Dictionary,
                            hard_mode: bool = DEFAULT_HARD_MODE,
                            max_tries: int = DEFAULT_MAX_TRIES) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, hard_mode=hard_mode, max_tries=max_tries)
    return _game_service
