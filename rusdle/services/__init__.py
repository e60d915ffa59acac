"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import Dictionary, normalize_word
from .game_service import GameService, get_game_service, initialize_game_service
from .scorer import build_letter_pool, guess_accuracy, score
from .session import GameSession

__all__ = [
    'Dictionary', 'normalize_word',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession',
    'build_letter_pool', 'guess_accuracy', 'score'
]
