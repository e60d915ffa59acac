"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..config.game_settings import get_word_statistics
from ..models.errors import GameError, RoundNotActive, TriesExhausted
from ..models.game import GameLost, GameWon
from ..services.game_service import get_game_service
from ..services.scorer import guess_accuracy
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _history_pairs(history):
    return [result.to_pairs() for result in history]


def _outcome_payload(outcome):
    """Describe a round outcome for the client."""
    payload = {
        'result': outcome.result.to_pairs(),
        'round_over': outcome.round_over,
    }
    if isinstance(outcome, GameWon):
        payload.update({
            'outcome': 'won',
            'tries_used': outcome.tries_used,
            'max_tries': outcome.max_tries,
            'history': _history_pairs(outcome.history),
            'accuracy': guess_accuracy(outcome.history),
        })
    elif isinstance(outcome, GameLost):
        payload.update({
            'outcome': 'lost',
            'answer': outcome.secret,
            'history': _history_pairs(outcome.history),
            'accuracy': guess_accuracy(outcome.history),
        })
    else:
        payload.update({
            'outcome': 'continue',
            'tries': outcome.tries,
            'max_tries': outcome.max_tries,
        })
    return payload


def _error_payload(error: GameError):
    payload = {
        'success': False,
        'error': error.message,
        'error_type': error.error_type
    }
    if isinstance(error, TriesExhausted):
        payload['answer'] = error.secret
        payload['history'] = _history_pairs(error.history)
    return payload


def _parse_options(data):
    """Pull hard_mode/max_tries out of a request body, rejecting bad types."""
    hard_mode = data.get('hard_mode')
    max_tries = data.get('max_tries')
    if hard_mode is not None and not isinstance(hard_mode, bool):
        raise ValueError('hard_mode must be a boolean')
    if max_tries is not None and (isinstance(max_tries, bool) or not isinstance(max_tries, int)):
        raise ValueError('max_tries must be an integer')
    return hard_mode, max_tries


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session and start its first round."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        try:
            hard_mode, max_tries = _parse_options(data)
        except ValueError as e:
            error_response = {'success': False, 'error': str(e)}
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(
            request, 'new_game', hard_mode=hard_mode, max_tries=max_tries
        )

        game_id = game_service.create_new_game(hard_mode=hard_mode, max_tries=max_tries)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_tries=state.max_tries
        )
        game_logger.log_game_event(game_id, 'round_started', request.remote_addr)

        return jsonify(response_data)

    except ValueError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            tries=state.tries, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and scoring."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        if game_service.get_session(game_id) is None:
            return _game_not_found('submit_guess', game_id)

        try:
            outcome = game_service.make_guess(game_id, guess)
        except GameError as e:
            error_response = _error_payload(e)
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=e.error_type, attempted_guess=guess
            )
            status_code = 409 if isinstance(e, (TriesExhausted, RoundNotActive)) else 400
            return jsonify(error_response), status_code

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            **_outcome_payload(outcome),
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, outcome=response_data['outcome']
        )

        if isinstance(outcome, GameWon):
            game_logger.log_game_event(
                game_id, 'game_won', request.remote_addr,
                tries_used=outcome.tries_used, max_tries=outcome.max_tries,
                winning_guess=outcome.result.word
            )
        elif isinstance(outcome, GameLost):
            game_logger.log_game_event(
                game_id, 'game_lost', request.remote_addr,
                tries_used=len(outcome.history), target_word=outcome.secret,
                final_guess=outcome.result.word
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/new_round', methods=['POST'])
def new_round(game_id):
    """Start a new round in an existing session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_round', game_id)

        if not game_service.new_round(game_id):
            return _game_not_found('new_round', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'new_round', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'round_started', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_round', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_round', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Abandon the current round."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset', game_id)

        if not game_service.reset_game(game_id):
            return _game_not_found('reset', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'round_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reset', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/options', methods=['PATCH'])
def update_options(game_id):
    """Change hard mode or the number of tries."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        game_logger.log_user_action(request, 'update_options', game_id, options=data)

        try:
            hard_mode, max_tries = _parse_options(data)
            updated = game_service.update_options(game_id, hard_mode=hard_mode, max_tries=max_tries)
        except ValueError as e:
            error_response = {'success': False, 'error': str(e)}
            game_logger.log_server_response(request, 'update_options', False, error_response, game_id)
            return jsonify(error_response), 400

        if not updated:
            return _game_not_found('update_options', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'update_options', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'update_options', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'update_options', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'dictionary_size': len(game_service.dictionary) if game_service else 0,
            'dictionary_stats': get_word_statistics(game_service.dictionary.words) if game_service else {},
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
