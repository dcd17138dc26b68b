import os
import random
import tempfile

# Keep test logs out of the working tree; must run before guess_word is imported
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "guess_word_test_logs"))

import pytest

from guess_word import create_app
from guess_word.config import TestingConfig
from guess_word.services.dictionary import Dictionary
from guess_word.services.game import Game
from guess_word.services.game_service import initialize_game_service

WORDS = [
    "about", "crane", "haste", "heart", "hotel", "lemon", "level",
    "light", "raise", "sleep", "spell", "stare", "trace", "water",
]


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def make_game(dictionary):
    def _make(answer="haste", max_rounds=6):
        return Game(dictionary, answer=answer, max_rounds=max_rounds)
    return _make


@pytest.fixture
def game_service(dictionary):
    return initialize_game_service(dictionary, max_rounds=6)


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


@pytest.fixture
def rng():
    return random.Random(1234)
