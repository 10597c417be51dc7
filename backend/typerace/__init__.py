from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

from typerace.services.race import (
    BroadcastChannel,
    ChallengeGenerator,
    ConnectionRegistry,
    ResetScheduler,
    SessionCoordinator,
    load_corpus,
)

socketio = SocketIO(async_mode=None)


def build_coordinator(flask_app) -> SessionCoordinator:
    """Assemble the round coordinator from the app config."""
    cfg = flask_app.config
    corpus_file = cfg.get('CHALLENGE_CORPUS_FILE')
    corpus = load_corpus(corpus_file) if corpus_file else cfg.get('CHALLENGE_CORPUS')
    generator = ChallengeGenerator(corpus)
    channel = BroadcastChannel(socketio, namespace=cfg.get('SOCKETIO_NAMESPACE', '/'), logger=flask_app.logger)
    scheduler = ResetScheduler(
        start_task=socketio.start_background_task,
        sleep=socketio.sleep,
        logger=flask_app.logger,
    )
    return SessionCoordinator(
        generator,
        ConnectionRegistry(),
        channel,
        scheduler,
        reset_delay_ms=cfg.get('RESET_DELAY_MS', 5000),
        logger=flask_app.logger,
    )


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    origins = flask_app.config.get('CORS_ORIGINS', '*')
    CORS(flask_app, origins=origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    # Configuration errors surface here, before any connection is accepted
    coordinator = build_coordinator(flask_app)
    flask_app.extensions['typerace'] = coordinator

    from typerace.main import main
    flask_app.register_blueprint(main)

    from typerace.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    @click.command('challenges')
    def challenges_command():
        """Prints the configured challenge corpus and reset delay."""
        corpus = coordinator.challenges
        click.echo(f'{len(corpus)} challenges, reset delay {coordinator.reset_delay_ms}ms')
        for text in corpus:
            click.echo(f'  {text}')

    flask_app.cli.add_command(challenges_command)

    return flask_app
