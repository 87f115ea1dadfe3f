from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import and register blueprints here
    from damscore.main import main
    flask_app.register_blueprint(main)

    from damscore.api.total_score import total_score
    flask_app.register_blueprint(total_score, url_prefix='/api/total-score')

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from damscore.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    flask_app.logger.info(
        f"[startup] max_time_limit={flask_app.config.get('MAX_TIME_LIMIT')} "
        f"max_time_spans={flask_app.config.get('MAX_TIME_SPANS')}"
    )
    return flask_app
