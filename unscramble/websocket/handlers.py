"""
WebSocket Event Handlers

Handles the WebSocket events that drive a game session and pushes every new
snapshot to the clients watching that game.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import GameUiState
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_session


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def broadcast_game_state_update(game_id: str, socketio):
    """Send the current state and screen of a game to everyone in its room."""
    game_service = get_game_service()
    if not game_service:
        return

    session = game_service.get_session(game_id)
    if session is None:
        return

    socketio.emit('game_state_update', {
        'game_id': game_id,
        **serialize_session(session)
    }, to=game_room(game_id))


def register_state_broadcaster(game_service, socketio):
    """Push each session snapshot to its room as it is published.

    Replaces the broadcaster of any earlier app built on the same service.
    """
    def on_state_change(game_id: str, state: GameUiState):
        broadcast_game_state_update(game_id, socketio)

    game_service.set_broadcaster(on_state_change)
    return on_state_change


def _emit_failure(error: Exception, action: str, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    emit('error', {'error': str(error)})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'connect')

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, session=None):
        """Join a game room for real-time state updates."""
        game_id = data['game_id']
        try:
            join_room(game_room(game_id))
            game_logger.log_user_action(request, 'join_game', game_id)

            emit('game_state_update', {
                'game_id': game_id,
                **serialize_session(session)
            })
        except Exception as e:
            _emit_failure(e, 'join_game', game_id)

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving updates for a game."""
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(game_room(game_id))
            game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('update_guess')
    @websocket_game_required
    def handle_update_guess(data, session=None):
        """Store the text currently typed in the guess field."""
        guess = data.get('guess')
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required'})
            return

        try:
            session.update_guess(guess)
        except Exception as e:
            _emit_failure(e, 'update_guess', data['game_id'])

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, session=None):
        """Submit the pending guess, optionally replacing it first."""
        game_id = data['game_id']
        guess = data.get('guess')
        if guess is not None and not isinstance(guess, str):
            emit('error', {'error': 'Guess must be a string'})
            return

        try:
            game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

            round_number = session.ui_state.current_word_count
            correct = session.submit_guess(guess)
            state = session.ui_state

            emit('guess_result', {'game_id': game_id, 'correct': correct})

            if correct:
                game_logger.log_game_event(game_id, 'round_won', request.remote_addr,
                                           round=round_number, score=state.score)
                if state.is_game_over:
                    game_logger.log_game_event(game_id, 'game_over', request.remote_addr,
                                               final_score=state.score)
        except Exception as e:
            _emit_failure(e, 'submit_guess', game_id)

    @socketio.on('skip_word')
    @websocket_game_required
    def handle_skip_word(data, session=None):
        """Skip the current word."""
        game_id = data['game_id']
        try:
            game_logger.log_user_action(request, 'skip_word', game_id)

            round_number = session.ui_state.current_word_count
            session.skip()

            game_logger.log_game_event(game_id, 'word_skipped', request.remote_addr, round=round_number)
            if session.ui_state.is_game_over:
                game_logger.log_game_event(game_id, 'game_over', request.remote_addr,
                                           final_score=session.ui_state.score)
        except Exception as e:
            _emit_failure(e, 'skip_word', game_id)

    @socketio.on('reset_game')
    @websocket_game_required
    def handle_reset_game(data, session=None):
        """Play again."""
        game_id = data['game_id']
        try:
            game_logger.log_user_action(request, 'reset_game', game_id)
            session.reset()
            game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)
        except Exception as e:
            _emit_failure(e, 'reset_game', game_id)
