"""
Utilities Package

Contains logging helpers shared by the application.
"""

from .game_logger import GameLogger, game_logger

__all__ = ['GameLogger', 'game_logger']
