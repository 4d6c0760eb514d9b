from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=flask_app.config.get('CORS_ORIGINS', []))

    from poker_api.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Import and register blueprints here
    from poker_api.main import main
    flask_app.register_blueprint(main)

    base_path = flask_app.config.get('API_BASE_PATH', '/v1').rstrip('/')
    from poker_api.api.games import games
    from poker_api.api.members import members
    from poker_api.api.players import players
    flask_app.register_blueprint(games, url_prefix=f'{base_path}/games')
    # Players are nested under their game
    flask_app.register_blueprint(players, url_prefix=f'{base_path}/games/<int:game_id>/players')
    flask_app.register_blueprint(members, url_prefix=f'{base_path}/members')

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the reference data."""
        from poker_api.models import seed_reference_data
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            seed_reference_data()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
