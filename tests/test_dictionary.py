"""Tests for rusdle.services.dictionary and the bundled word list."""

import json
import random
from unittest.mock import patch

import pytest

from rusdle.config.game_settings import (
    WORD_LENGTH,
    WORD_LIST,
    get_word_statistics,
    validate_word_list_integrity,
)
from rusdle.services.dictionary import Dictionary, normalize_word


def write_words(path, words):
    path.write_text(json.dumps(words), encoding="utf-8")
    return str(path)


class TestNormalizeWord:
    def test_strips_and_uppercases(self):
        assert normalize_word("  crane\n") == "CRANE"


class TestDictionary:
    def test_membership_is_case_insensitive(self):
        dictionary = Dictionary(["crane"])
        assert dictionary.contains("CRANE")
        assert "crane" in dictionary
        assert "slate" not in dictionary

    def test_duplicates_collapsed(self):
        dictionary = Dictionary(["crane", "CRANE", " crane ", "slate"])
        assert len(dictionary) == 2
        assert dictionary.words == ("CRANE", "SLATE")

    def test_non_string_entry_rejected(self):
        with pytest.raises(ValueError):
            Dictionary(["crane", 5])

    def test_non_alphabetic_entry_rejected(self):
        with pytest.raises(ValueError):
            Dictionary(["cr4ne"])

    def test_random_member_repeatable_with_seed(self):
        words = ["crane", "slate", "heart", "lemon", "fluid"]
        picks_a = [Dictionary(words, rng=random.Random(3)).random_member() for _ in range(3)]
        picks_b = [Dictionary(words, rng=random.Random(3)).random_member() for _ in range(3)]
        assert picks_a == picks_b
        assert all(pick in words_upper(words) for pick in picks_a)

    def test_random_member_from_empty_dictionary(self):
        with pytest.raises(ValueError):
            Dictionary().random_member()

    def test_default_uses_bundled_list(self):
        dictionary = Dictionary.default()
        assert len(dictionary) == len(WORD_LIST)
        assert "CRANE" in dictionary

    def test_default_rejects_corrupt_bundled_list(self):
        with patch("rusdle.services.dictionary.WORD_LIST", ["CRANE", "CRANE"]):
            with pytest.raises(ValueError, match="Duplicate"):
                Dictionary.default()


class TestDictionaryLoad:
    def test_replace(self, tmp_path):
        dictionary = Dictionary(["crane"])
        size = dictionary.load(write_words(tmp_path / "words.json", ["slate", "heart"]))
        assert size == 2
        assert "CRANE" not in dictionary
        assert "SLATE" in dictionary

    def test_append(self, tmp_path):
        dictionary = Dictionary(["crane"])
        dictionary.load(write_words(tmp_path / "words.json", ["slate", "crane"]), append=True)
        assert dictionary.words == ("CRANE", "SLATE")

    def test_words_of_other_lengths_allowed(self, tmp_path):
        dictionary = Dictionary()
        dictionary.load(write_words(tmp_path / "words.json", ["cat", "planet"]))
        assert "PLANET" in dictionary

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Dictionary().load(str(tmp_path / "missing.json"))

    def test_invalid_json_leaves_dictionary_unchanged(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[\"crane\",", encoding="utf-8")
        dictionary = Dictionary(["heart"])
        with pytest.raises(ValueError):
            dictionary.load(str(path))
        assert dictionary.words == ("HEART",)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"crane": 1}), encoding="utf-8")
        with pytest.raises(ValueError):
            Dictionary().load(str(path))

    def test_bad_entry_leaves_dictionary_unchanged(self, tmp_path):
        dictionary = Dictionary(["heart"])
        with pytest.raises(ValueError):
            dictionary.load(write_words(tmp_path / "words.json", ["slate", "s1ate"]), append=True)
        assert dictionary.words == ("HEART",)


class TestBundledWordList:
    def test_integrity(self):
        assert validate_word_list_integrity() is True

    def test_every_word_has_expected_length(self):
        assert all(len(word) == WORD_LENGTH for word in WORD_LIST)

    def test_integrity_rejects_duplicates(self):
        with pytest.raises(ValueError, match="Duplicate"):
            validate_word_list_integrity(["CRANE", "CRANE"])

    def test_integrity_rejects_lowercase(self):
        with pytest.raises(ValueError, match="uppercase"):
            validate_word_list_integrity(["crane"])

    def test_integrity_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="characters long"):
            validate_word_list_integrity(["CRANES"])

    def test_statistics(self):
        stats = get_word_statistics(["CRANE", "SLATE"])
        assert stats["total_words"] == 2
        assert stats["avg_vowel_count"] == 2.0
        assert stats["letter_frequency"]["A"] == 2
        assert stats["most_common_letters"][0][1] == 2

    def test_statistics_empty(self):
        assert "error" in get_word_statistics([])


def words_upper(words):
    return [word.upper() for word in words]
