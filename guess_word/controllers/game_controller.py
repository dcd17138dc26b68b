"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..models.game import GuessResult, describe_guess_result
from ..services.game import AnswerNotRevealable
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _error(action, message, status_code, game_id=None, **extra):
    error_response = {
        'success': False,
        'error': message,
        **extra
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status_code


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service=None):
    """Create a new game session."""
    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _error('get_state', 'Game not found', 404, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service=None):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            return _error('submit_guess', 'Guess is required', 400, game_id)

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        outcome = game_service.make_guess(game_id, guess)
        if outcome is None:
            return _error('submit_guess', 'Game not found', 404, game_id)

        state, result = outcome
        if result is not GuessResult.VALID:
            message = describe_guess_result(result, state.word_length)
            return _error(
                'submit_guess', message, 400, game_id,
                result=result.value, state=asdict(state)
            )

        response_data = {
            'success': True,
            'result': result.value,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=state.current_round, status=state.status
        )

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                rounds_used=state.current_round, target_word=state.answer,
                final_guess=state.guesses[-1]
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/answer', methods=['GET'])
@require_game_service
def get_answer(game_id, game_service=None):
    """Reveal the answer once the game is over."""
    try:
        game_logger.log_user_action(request, 'get_answer', game_id)

        try:
            answer = game_service.get_answer(game_id)
        except AnswerNotRevealable as e:
            return _error('get_answer', str(e), 403, game_id, status=e.status.value)

        if answer is None:
            return _error('get_answer', 'Game not found', 404, game_id)

        response_data = {
            'success': True,
            'answer': answer
        }
        game_logger.log_server_response(request, 'get_answer', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_answer', game_id)
        return _error('get_answer', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service=None):
    """Delete a game session."""
    try:
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
        return _error('delete_game', str(e), 500, game_id)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service=None):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        word_stats = get_word_statistics(game_service.dictionary)

        response_data = {
            'status': 'healthy',
            'games': len(game_service.games),
            'active_games': game_service.active_games_count(),
            'dictionary': {
                'total_words': word_stats.get('total_words', 0),
                'word_length': game_service.dictionary.word_length,
                'most_common_letters': word_stats.get('most_common_letters', [])
            },
            'max_rounds': game_service.max_rounds,
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
