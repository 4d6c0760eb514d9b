import os
import sys
import pytest

# Ensure the backend root (containing the `poker_api` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from poker_api import create_app, db


class TestConfig:
    TESTING = True
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    API_BASE_PATH = '/v1'
    CORS_ORIGINS = []
    LOG_LEVEL = 'DEBUG'
    # Low bcrypt cost keeps member tests fast
    BCRYPT_LOG_ROUNDS = 4


@pytest.fixture()
def flask_app(tmp_path):
    # A file database: repositories check out their own connections
    class FileDatabaseConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'poker.db'}"

    application = create_app(FileDatabaseConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        from poker_api.models import seed_reference_data
        db.create_all()
        seed_reference_data()
        db.session.remove()
        yield application
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
