"""Tests for rusdle.services.game_service."""

import pytest

from rusdle.models.errors import UnknownWord
from rusdle.models.game import GameLost, GameWon, GuessAccepted
from rusdle.services.game_service import GameService, summarize_letter_status
from rusdle.services.scorer import score


@pytest.fixture
def service(dictionary):
    return GameService(dictionary)


class TestSummarizeLetterStatus:
    def test_untouched_letters_unused(self):
        summary = summarize_letter_status([])
        assert len(summary) == 26
        assert set(summary.values()) == {"UNUSED"}

    def test_best_status_wins(self):
        history = [score("CRANE", "TRACE"), score("CRANE", "CRATE")]
        summary = summarize_letter_status(history)
        assert summary["C"] == "CORRECT"
        assert summary["R"] == "CORRECT"
        assert summary["T"] == "ABSENT"
        assert summary["Z"] == "UNUSED"

    def test_status_never_downgraded(self):
        history = [score("CRANE", "CRATE"), score("CRANE", "TRACE")]
        assert summarize_letter_status(history)["C"] == "CORRECT"


class TestGameService:
    def test_create_uses_defaults(self, dictionary):
        service = GameService(dictionary, hard_mode=True, max_tries=4)
        session = service.get_session(service.create_new_game())
        assert session.hard_mode is True
        assert session.max_tries == 4
        assert session.is_active

    def test_create_with_overrides(self, service):
        game_id = service.create_new_game(hard_mode=True, max_tries=2, secret="crane")
        state = service.get_game_state(game_id)
        assert state.hard_mode is True
        assert state.max_tries == 2
        assert state.word_length == 5
        assert state.status == "active"
        assert state.answer is None

    def test_invalid_max_tries(self, service):
        with pytest.raises(ValueError):
            service.create_new_game(max_tries=0)
        assert service.games == {}

    def test_unknown_game(self, service):
        assert service.get_game_state("missing") is None
        assert service.make_guess("missing", "crane") is None
        assert service.new_round("missing") is False
        assert service.reset_game("missing") is False
        assert service.update_options("missing", hard_mode=True) is False
        assert service.delete_game("missing") is False

    def test_guess_updates_state(self, service):
        game_id = service.create_new_game(secret="crane")
        outcome = service.make_guess(game_id, "trace")
        assert isinstance(outcome, GuessAccepted)
        state = service.get_game_state(game_id)
        assert state.tries == 2
        assert state.guesses == ["TRACE"]
        assert state.guess_results[0][1] == ("R", "CORRECT")
        assert state.letter_status["T"] == "ABSENT"

    def test_errors_propagate(self, service):
        game_id = service.create_new_game(secret="crane")
        with pytest.raises(UnknownWord):
            service.make_guess(game_id, "zzzzz")

    def test_answer_revealed_only_after_loss(self, service):
        game_id = service.create_new_game(max_tries=1, secret="crane")
        assert isinstance(service.make_guess(game_id, "slate"), GameLost)
        state = service.get_game_state(game_id)
        assert state.status == "lost"
        assert state.answer == "CRANE"

    def test_won_state_is_cleared(self, service):
        game_id = service.create_new_game(secret="crane")
        assert isinstance(service.make_guess(game_id, "crane"), GameWon)
        state = service.get_game_state(game_id)
        assert state.status == "won"
        assert state.guesses == []
        assert state.answer is None

    def test_new_round_and_reset(self, service):
        game_id = service.create_new_game(secret="crane")
        service.make_guess(game_id, "slate")
        assert service.new_round(game_id, secret="heart")
        assert service.get_session(game_id).secret == "HEART"
        assert service.get_game_state(game_id).tries == 1
        assert service.reset_game(game_id)
        assert service.get_game_state(game_id).status == "idle"

    def test_update_options(self, service):
        game_id = service.create_new_game()
        assert service.update_options(game_id, hard_mode=True, max_tries=3)
        session = service.get_session(game_id)
        assert session.hard_mode is True
        assert session.max_tries == 3
        with pytest.raises(ValueError):
            service.update_options(game_id, max_tries=-2)

    def test_delete(self, service):
        game_id = service.create_new_game()
        assert service.delete_game(game_id)
        assert service.get_session(game_id) is None
