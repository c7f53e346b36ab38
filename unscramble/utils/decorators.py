"""
Game Session Decorators

Contains decorators that resolve a game id to its session for HTTP and
WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_session(f):
    """
    Decorator for HTTP endpoints taking a game_id URL parameter.

    The wrapped view receives the resolved session as the ``session`` keyword.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        session = game_service.get_session(game_id)
        if session is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        kwargs['session'] = session
        return f(game_id, *args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload carries a game_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args else None
        if not isinstance(data, dict) or not data.get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return

        session = game_service.get_session(data['game_id'])
        if session is None:
            emit('error', {'error': 'Game not found'})
            return

        kwargs['session'] = session
        return f(*args, **kwargs)

    return decorated_function
