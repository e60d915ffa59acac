"""
Game Configuration Constants Module

This module defines the game defaults and the bundled word list.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, Iterable, List, Optional

DEFAULT_MAX_TRIES: Final[int] = 5
"""
Number of validated guesses allowed per round unless configured otherwise.
"""

DEFAULT_HARD_MODE: Final[bool] = False
"""
Hard mode requires revealed letters to be reused on the next guess.
"""

WORD_LENGTH: Final[int] = 5
"""
Length of every word in the bundled list. Loaded dictionaries may differ.
"""


def _load_word_list() -> List[str]:
    """
    Load the bundled word list from words.json.

    Returns:
        List[str]: Uppercase words

    Raises:
        FileNotFoundError: If words.json is missing
        ValueError: If the file is malformed or the list is empty
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    return [word.strip().upper() for word in word_list]


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(words: Optional[Iterable[str]] = None) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Args:
        words: Word list to check, the bundled WORD_LIST by default

    Returns:
        bool: True if the list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    word_list = list(WORD_LIST if words is None else words)
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(word_list) != len(set(word_list)):
        seen = set()
        duplicates = sorted({word for word in word_list if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Optional[Iterable[str]] = None) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    word_list = list(WORD_LIST if words is None else words)
    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency: Dict[str, int] = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
