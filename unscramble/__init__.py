"""
Unscramble Game Server Application Package

A single-player word unscrambling game: the server keeps each player's game
session, checks guesses, and pushes state snapshots to the client over
HTTP and WebSocket.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance and its SocketIO extension
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers and push session snapshots to game rooms
    from .services.game_service import get_game_service, initialize_game_service
    from .websocket.handlers import register_websocket_handlers, register_state_broadcaster

    game_service = get_game_service() or initialize_game_service()
    register_websocket_handlers(socketio)
    register_state_broadcaster(game_service, socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
