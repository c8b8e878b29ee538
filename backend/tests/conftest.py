import os
import sys
import pytest

# Ensure the backend root (containing the `recapture` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config, DEFAULT_DETECTORS, parse_detectors
from recapture import create_app, socketio


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    DETECTORS = parse_detectors(DEFAULT_DETECTORS)
    DETECTION_RADIUS = 50.0
    DETECTION_TOLERANCE = 10.0
    MAP_WIDTH = 2000
    MAP_HEIGHT = 2000
    NAME_MAX_LENGTH = 20
    SPAWN_JITTER = 20.0
    LOG_LEVEL = 'DEBUG'


class FakeSocketIO:
    """Records broadcasts instead of sending them."""

    def __init__(self):
        self.emitted = []

    def emit(self, event, payload, namespace=None):
        self.emitted.append((event, payload))

    def events(self, name):
        return [payload for event, payload in self.emitted if event == name]

    def clear(self):
        self.emitted.clear()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def coordinator(flask_app):
    return flask_app.extensions['survey']


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()


@pytest.fixture()
def fake_socketio():
    return FakeSocketIO()


@pytest.fixture()
def survey_config():
    return {
        'DETECTORS': parse_detectors(DEFAULT_DETECTORS),
        'DETECTION_RADIUS': 50.0,
        'DETECTION_TOLERANCE': 10.0,
        'MAP_WIDTH': 2000,
        'MAP_HEIGHT': 2000,
        'NAME_MAX_LENGTH': 20,
        'SPAWN_JITTER': 20.0,
    }
