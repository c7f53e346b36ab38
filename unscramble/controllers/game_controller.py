"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_game_session
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_session

game_bp = Blueprint('game', __name__)


def _read_guess():
    data = request.get_json(silent=True) or {}
    guess = data.get('guess')
    if not isinstance(guess, str):
        return None
    return guess


def _missing_guess(action, game_id):
    error_response = {
        'success': False,
        'error': 'Guess is required'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 400


def _server_error(action, error, game_id=None):
    """Log an unexpected failure and turn it into a JSON 500."""
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        session = game_service.get_session(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            **serialize_session(session)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_started', request.remote_addr,
                                   max_words=session.max_words)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_session
def get_state(game_id, session):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        response_data = {
            'success': True,
            **serialize_session(session)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_word_count=session.ui_state.current_word_count,
            is_game_over=session.ui_state.is_game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['PUT'])
@require_game_session
def update_guess(game_id, session):
    """Store the text currently typed in the guess field."""
    try:
        game_logger.log_user_action(request, 'update_guess', game_id)

        guess = _read_guess()
        if guess is None:
            return _missing_guess('update_guess', game_id)

        session.update_guess(guess)

        return jsonify({
            'success': True,
            **serialize_session(session)
        })

    except Exception as e:
        return _server_error('update_guess', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_session
def submit_guess(game_id, session):
    """Submit a guess for the current scrambled word."""
    try:
        guess = _read_guess()
        if guess is None:
            return _missing_guess('submit_guess', game_id)

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        round_number = session.ui_state.current_word_count
        correct = session.submit_guess(guess)
        state = session.ui_state

        response_data = {
            'success': True,
            'correct': correct,
            **serialize_session(session)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, correct=correct, score=state.score
        )

        if correct:
            game_logger.log_game_event(game_id, 'round_won', request.remote_addr,
                                       round=round_number, score=state.score)
            if state.is_game_over:
                game_logger.log_game_event(game_id, 'game_over', request.remote_addr,
                                           final_score=state.score)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/skip', methods=['POST'])
@require_game_session
def skip_word(game_id, session):
    """Skip the current word without scoring."""
    try:
        game_logger.log_user_action(request, 'skip_word', game_id)

        round_number = session.ui_state.current_word_count
        session.skip()
        state = session.ui_state

        response_data = {
            'success': True,
            **serialize_session(session)
        }

        game_logger.log_server_response(request, 'skip_word', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'word_skipped', request.remote_addr, round=round_number)
        if state.is_game_over:
            game_logger.log_game_event(game_id, 'game_over', request.remote_addr,
                                       final_score=state.score)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('skip_word', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game_session
def reset_game(game_id, session):
    """Play again: start the session over."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        session.reset()

        response_data = {
            'success': True,
            **serialize_session(session)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('reset_game', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session (the player exited)."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        response_data['error'] = 'Game not found'
        return jsonify(response_data), 404

    except Exception as e:
        return _server_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
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
