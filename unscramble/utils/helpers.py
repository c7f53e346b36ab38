"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict
from flask import request
from ..services.game_session import GameSession
from ..views.game_screen import build_game_screen


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),
    }


def serialize_session(session: GameSession) -> Dict[str, Any]:
    """JSON-ready state and screen for a session."""
    state = session.ui_state
    return {
        'state': asdict(state),
        'screen': asdict(build_game_screen(state, session.user_guess, session.max_words)),
    }
