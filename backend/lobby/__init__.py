from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', '*'))

    from lobby.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Collection store backing hosts, races and the leaderboard
    from lobby.storage import init_store
    init_store(flask_app)

    # Import and register blueprints here
    from lobby.main import main
    flask_app.register_blueprint(main)

    # Game clients call these at the root, matching the paths they were built against
    from lobby.api.lobby import lobby
    flask_app.register_blueprint(lobby)

    from lobby.api.leaderboard import leaderboard
    flask_app.register_blueprint(leaderboard)

    @click.command('store-reset')
    def store_reset_command():
        """Empties the hosts, races and leaderboard collections."""
        from lobby.storage import get_store
        with flask_app.app_context():
            get_store().reset()
            print('Lobby store has been reset!')

    flask_app.cli.add_command(store_reset_command)

    return flask_app
