"""
RUSDLE Game Server - Main Entry Point

Builds the dictionary, initializes the game service and starts the Flask
application.
"""

import random
from rusdle import create_app
from rusdle.config import Config
from rusdle.services.dictionary import Dictionary
from rusdle.services.game_service import initialize_game_service
from rusdle.utils.game_logger import game_logger


def build_dictionary(config_class=Config) -> Dictionary:
    """Bundled word list, replaced or extended by WORD_DICTIONARY if set."""
    rng = random.Random(config_class.RANDOM_SEED)
    dictionary = Dictionary.default(rng=rng)
    if config_class.WORD_DICTIONARY:
        dictionary.load(config_class.WORD_DICTIONARY, append=config_class.APPEND_DICTIONARY)
    return dictionary


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        dictionary = build_dictionary(Config)
        print(f"✓ Dictionary loaded ({len(dictionary)} words)")

        initialize_game_service(dictionary, hard_mode=Config.HARD_MODE, max_tries=Config.MAX_TRIES)
        print("✓ Game service initialized successfully")

        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"RUSDLE Server Starting - {len(dictionary)} words, "
            f"hard_mode={Config.HARD_MODE}, max_tries={Config.MAX_TRIES}"
        )

        print(f"\nStarting RUSDLE Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("RUSDLE Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
