"""
Pytest configuration for the Unscramble server.

Routes the game log to a temporary directory before the application package
is imported, and provides seeded word banks, sessions and Flask clients.
"""

import os
import tempfile

# The global game logger opens its log file on import.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="unscramble-logs-"))

import pytest

from unscramble import create_app
from unscramble.config import TestingConfig
from unscramble.services.game_service import initialize_game_service
from unscramble.services.game_session import GameSession
from unscramble.services.word_bank import WordBank


def solve(session):
    """Unscrambled form of the session's current word."""
    return session.word_bank.get_unscrambled_word(session.ui_state.current_scrambled_word)


@pytest.fixture
def word_bank():
    return WordBank(rng=1234)


@pytest.fixture
def session(word_bank):
    return GameSession(word_bank)


@pytest.fixture
def game_service():
    return initialize_game_service(seed=42)


@pytest.fixture
def app(game_service):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app, client):
    socket_client = app.socketio.test_client(app, flask_test_client=client)
    yield socket_client
    if socket_client.is_connected():
        socket_client.disconnect()
