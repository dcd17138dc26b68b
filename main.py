"""
Guess Word Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from guess_word import create_app
from guess_word.config import Config, validate_word_list_integrity
from guess_word.services.dictionary import Dictionary
from guess_word.services.game_service import initialize_game_service
from guess_word.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        dictionary = Dictionary.from_file(Config.WORD_LIST_PATH, Config.WORD_LENGTH)
        validate_word_list_integrity(dictionary, Config.WORD_LENGTH)
        print(f"✓ Dictionary loaded ({len(dictionary)} words of {dictionary.word_length} letters)")

        initialize_game_service(dictionary, Config.MAX_ROUNDS)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Guess Word Server Starting")

        print(f"\nStarting Guess Word Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Guess Word Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
