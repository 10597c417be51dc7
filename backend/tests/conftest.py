import os
import sys
import pytest

# Ensure the backend root (containing the `typerace` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from typerace import create_app, socketio
from typerace.services.race import (
    ChallengeGenerator,
    ConnectionRegistry,
    ResetScheduler,
    SessionCoordinator,
)


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CHALLENGE_CORPUS = ['hello world']
    CHALLENGE_CORPUS_FILE = None
    RESET_DELAY_MS = 200
    SOCKETIO_NAMESPACE = '/'
    CORS_ORIGINS = '*'


class RecordingChannel:
    """Stands in for the Socket.IO broadcast channel."""

    def __init__(self):
        self.sent = []

    def emit_all(self, event, payload):
        self.sent.append(('all', event, payload))

    def emit_one(self, connection_id, event, payload):
        self.sent.append((connection_id, event, payload))

    def events(self, name=None):
        return [s for s in self.sent if name is None or s[1] == name]

    def clear(self):
        self.sent.clear()


class ManualTimers:
    """Captures scheduler tasks so a test decides when time elapses."""

    def __init__(self):
        self.tasks = []
        self.slept = []

    def start_task(self, target, *args):
        self.tasks.append((target, args))

    def sleep(self, seconds):
        self.slept.append(seconds)

    def fire_all(self):
        tasks, self.tasks = self.tasks, []
        for target, args in tasks:
            target(*args)


@pytest.fixture()
def channel():
    return RecordingChannel()


@pytest.fixture()
def timers():
    return ManualTimers()


@pytest.fixture()
def scheduler(timers):
    return ResetScheduler(start_task=timers.start_task, sleep=timers.sleep)


@pytest.fixture()
def coordinator(channel, scheduler):
    return SessionCoordinator(
        ChallengeGenerator(['hello world']),
        ConnectionRegistry(),
        channel,
        scheduler,
        reset_delay_ms=5000,
    )


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    yield application
    application.extensions['typerace'].shutdown()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/')
    except Exception:
        pass
