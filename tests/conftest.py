import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.state_manager import GameStateStore


@pytest.fixture
def store(tmp_path):
    s = GameStateStore.open(str(tmp_path / "game.db"))
    yield s
    s.close()


@pytest.fixture
def client(tmp_path):
    from app import app
    app.config["DATABASE"] = str(tmp_path / "web.db")
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
