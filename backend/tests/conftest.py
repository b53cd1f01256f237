import os
import sys
import pytest

# Ensure the backend root (containing the `lobby` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from lobby import create_app, db
from lobby.storage import get_store


def make_config(**overrides):
    class TestConfig:
        TESTING = True
        LOBBY_STORE = 'json'
        LOBBY_DATA_DIR = 'data'
        SQLALCHEMY_DATABASE_URI = 'sqlite://'
        SQLALCHEMY_TRACK_MODIFICATIONS = False
        LOBBY_GAME_VERSION = '300'
        CORS_ORIGINS = ['*']

    for key, value in overrides.items():
        setattr(TestConfig, key, value)
    return TestConfig


@pytest.fixture(params=['json', 'sql'])
def flask_app(request, tmp_path):
    application = create_app(make_config(LOBBY_STORE=request.param, LOBBY_DATA_DIR=str(tmp_path / 'data')))
    with application.app_context():
        yield application
        db.session.remove()
        if request.param == 'sql':
            db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    return get_store()


@pytest.fixture()
def json_app(tmp_path):
    application = create_app(make_config(LOBBY_DATA_DIR=str(tmp_path / 'data')))
    with application.app_context():
        yield application


def host_payload(**overrides):
    payload = {
        'driver_name': 'Alice',
        'ip_address': '10.0.0.1',
        'game_version': '300',
        'locked': False,
        'player_count': 3,
    }
    payload.update(overrides)
    return payload


def record_payload(**overrides):
    payload = {
        'driver_name': 'A',
        'timing': 90.5,
        'track': 1,
        'layout': 1,
        'condition': 0,
        'car': 5,
    }
    payload.update(overrides)
    return payload
