"""
RUSDLE Game Package

A Wordle-style word guessing game: guess scoring, hard mode rules and the
session state machine, served to clients as JSON over HTTP.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config

__version__ = "1.0.0"


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    CORS(app)

    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    return app
