"""
Word Dictionary

Holds the words used both to pick secret words and to accept guesses.
"""

import json
import logging
import random
from typing import Iterable, List, Optional, Tuple

from ..config.game_settings import WORD_LIST, validate_word_list_integrity

logger = logging.getLogger('rusdle_game.dictionary')


def normalize_word(word: str) -> str:
    """Case-normalize a word the same way everywhere in the game."""
    return word.strip().upper()


class Dictionary:
    """
    Ordered, duplicate-free collection of normalized words.

    Random selection goes through an injected ``random.Random`` so tests and
    seeded servers get repeatable secret words.
    """

    def __init__(self, words: Iterable[str] = (), rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._words: List[str] = []
        self._lookup = set()
        self._replace(self._parse(list(words)))

    @classmethod
    def default(cls, rng: Optional[random.Random] = None) -> "Dictionary":
        """
        Dictionary built from the bundled word list.

        Raises:
            ValueError: If the bundled list fails its integrity check
        """
        validate_word_list_integrity(WORD_LIST)
        return cls(WORD_LIST, rng=rng)

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def contains(self, word: str) -> bool:
        return normalize_word(word) in self._lookup

    def random_member(self) -> str:
        """
        Pick a word uniformly at random.

        Raises:
            ValueError: If the dictionary is empty
        """
        if not self._words:
            raise ValueError("Dictionary is empty")
        return self._rng.choice(self._words)

    def load(self, path: str, append: bool = False) -> int:
        """
        Load words from a JSON array file.

        Args:
            path: Path to a file containing a JSON array of words
            append: Add to the current words instead of replacing them

        Returns:
            int: Number of words after loading

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON array of alphabetic words
        """
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, list):
            raise ValueError(f"{path} must contain an array of words")

        words = self._parse(data)
        if append:
            self._replace(self._words + words)
        else:
            self._replace(words)

        logger.info("Loaded %d words from %s (append=%s), dictionary now holds %d",
                    len(words), path, append, len(self._words))
        return len(self._words)

    def _parse(self, entries: List) -> List[str]:
        words = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, str):
                raise ValueError(f"Entry at index {index} is not a string: {entry!r}")
            word = normalize_word(entry)
            if not word.isalpha():
                raise ValueError(f"Entry at index {index} '{entry}' is not an alphabetic word")
            words.append(word)
        return words

    def _replace(self, words: List[str]) -> None:
        self._words = list(dict.fromkeys(words))
        self._lookup = set(self._words)
