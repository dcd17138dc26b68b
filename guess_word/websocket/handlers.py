"""
WebSocket Event Handlers

Pushes guess results to every client watching a game.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import GuessResult, describe_guess_result
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket: client {request.sid} connected")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection. Rooms are cleaned up by Flask-SocketIO."""
        game_logger.logger.debug(f"WebSocket: client {request.sid} disconnected")

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room for real-time updates."""
        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            # Deleted between the decorator check and the lookup
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        emit('game_state', {
            'success': True,
            'state': asdict(state)
        })

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        """Leave a game room."""
        leave_room(game_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, game_id=None):
        """Submit a guess via WebSocket."""
        guess = data.get('guess')
        if guess is None:
            emit('error', {'error': 'Guess is required', 'game_id': game_id})
            return

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        try:
            outcome = game_service.make_guess(game_id, guess)
        except Exception as e:
            game_logger.log_error(request, e, 'submit_guess', game_id)
            emit('error', {'error': str(e), 'game_id': game_id})
            return

        if outcome is None:
            # Deleted between the decorator check and the guess
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        state, result = outcome
        if result is not GuessResult.VALID:
            # Rejected guesses only concern the sender
            emit('guess_result', {
                'success': False,
                'game_id': game_id,
                'result': result.value,
                'error': describe_guess_result(result, state.word_length),
                'state': asdict(state)
            })
            return

        socketio.emit('guess_result', {
            'success': True,
            'game_id': game_id,
            'result': result.value,
            'state': asdict(state)
        }, room=game_room(game_id))

        if state.game_over:
            socketio.emit('game_ended', {
                'game_id': game_id,
                'status': state.status,
                'answer': state.answer
            }, room=game_room(game_id))

            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                rounds_used=state.current_round, target_word=state.answer
            )
