from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One coordinator per app owns all shared survey state
    from recapture.coordinator import SessionCoordinator
    flask_app.extensions['survey'] = SessionCoordinator(
        socketio, flask_app.config, logger=flask_app.logger
    )

    # Import and register blueprints here
    from recapture.main import main
    flask_app.register_blueprint(main)

    from recapture.api.survey import survey
    flask_app.register_blueprint(survey, url_prefix='/api/survey')

    from recapture.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('detectors')
    def detectors_command():
        """Prints the configured detector stations."""
        coordinator = flask_app.extensions['survey']
        click.echo(f"radius={coordinator.detection_radius} tolerance={coordinator.detection_tolerance}")
        for det in coordinator.registry:
            click.echo(f"  detector {det.id}: x={det.x:g} y={det.y:g}")

    @click.command('estimate')
    @click.argument('marked', type=click.IntRange(min=0))
    @click.argument('second_sample', type=click.IntRange(min=0))
    @click.argument('recaptured', type=click.IntRange(min=0))
    def estimate_command(marked, second_sample, recaptured):
        """Evaluates the Lincoln-Petersen estimate for M, C and R counts."""
        if recaptured > min(marked, second_sample):
            raise click.BadParameter('recaptured cannot exceed marked or second_sample')
        from recapture.services.survey.estimator import estimate_from_counts
        result = estimate_from_counts(marked, second_sample, recaptured)
        estimate = result['estimate'] if result['estimate'] is not None else 'undefined'
        click.echo(f"N = {estimate} (chapman {result['chapman']})")

    flask_app.cli.add_command(detectors_command)
    flask_app.cli.add_command(estimate_command)

    return flask_app
