"""
Unscramble Game Server - Main Entry Point

This is the main entry point for the Unscramble game server.
It validates the game configuration, initializes the game service and starts
the Flask-SocketIO application.
"""

from unscramble import create_app
from unscramble.config import Config, validate_word_list_integrity, get_word_statistics
from unscramble.services.game_service import initialize_game_service
from unscramble.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # A round limit larger than the word bank is a configuration defect
        validate_word_list_integrity()
        stats = get_word_statistics()
        print(f"✓ Word bank validated ({stats['total_words']} words)")

        game_service = initialize_game_service()
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Unscramble Server Starting")

        print(f"\nStarting Unscramble Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Unscramble Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
