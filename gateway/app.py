import logging
import os
from flask import Flask, jsonify

from .config import config
from .exceptions import GatewayError
from .player_registry import PlayerRegistry
from .player_server_client import PlayerServerClient
from shared.pubsub import EventPublisher

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """Application factory for the player gateway."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))
    # Compact bodies ("score":493) under DEBUG too
    app.json.compact = True

    for name in ('gateway', 'shared'):
        logging.getLogger(name).setLevel(app.config['LOG_LEVEL'])

    # Initialize services
    publisher = None
    if app.config['REDIS_URL']:
        publisher = EventPublisher.from_url(app.config['REDIS_URL'])

    server_client = PlayerServerClient(
        timeout=app.config['PLAYER_SERVER_TIMEOUT'],
        enabled=app.config['NOTIFY_PLAYER_SERVERS']
    )

    # Store services on app for access in routes
    app.registry = PlayerRegistry(
        max_number_of_users=app.config['MAX_NUMBER_OF_USERS'],
        publisher=publisher,
        server_client=server_client,
        password_length=app.config['PASSWORD_LENGTH'],
        hash_method=app.config['PASSWORD_HASH_METHOD']
    )
    app.publisher = publisher

    register_error_handlers(app)
    register_routes(app)

    from .routes import players, admin
    app.register_blueprint(players.bp)
    app.register_blueprint(admin.bp)

    logger.info(
        f"Gateway created ({config_name}), max number of users {app.registry.max_number_of_users}"
    )
    return app


def register_error_handlers(app: Flask):
    """Render every GatewayError as JSON with its own status."""

    @app.errorhandler(GatewayError)
    def handle_gateway_error(error: GatewayError):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        if error.status_code == 401:
            response.headers['WWW-Authenticate'] = 'Basic realm="player-gateway"'
        return response


def register_routes(app: Flask):

    # ==================== Health Check ====================

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        redis_ok = app.publisher.ping() if app.publisher else None

        status = 'unhealthy' if redis_ok is False else 'healthy'
        code = 200 if status == 'healthy' else 503

        return jsonify({
            'status': status,
            'players': len(app.registry),
            'max_number_of_users': app.registry.max_number_of_users,
            'redis': 'disabled' if redis_ok is None else ('connected' if redis_ok else 'disconnected')
        }), code
