"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game defaults and the bundled word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_HARD_MODE,
    DEFAULT_MAX_TRIES,
    WORD_LENGTH,
    WORD_LIST,
    get_word_statistics,
    validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_HARD_MODE', 'DEFAULT_MAX_TRIES', 'WORD_LENGTH', 'WORD_LIST',
    'validate_word_list_integrity', 'get_word_statistics'
]
