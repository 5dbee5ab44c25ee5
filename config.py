import os
from dotenv import load_dotenv

load_dotenv()

# Batas waktu koneksi ke store (detik). Sengaja konstan, tidak dibaca dari env.
STORE_CONNECT_TIMEOUT = 5
STORE_SOCKET_TIMEOUT = 45


def _database_url():
    url = (
        os.environ.get('DATABASE_URL')
        or os.environ.get('MONGODB_URI')
        or os.environ.get('MONGO_URI')
        or 'sqlite:///airport_survey.db'
    )
    # SQLAlchemy 2.x tidak menerima skema "postgres://"
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def engine_options(url: str) -> dict:
    """
    Opsi create_engine sesuai driver:
    - sqlite: hanya busy timeout
    - postgres: connect_timeout + statement_timeout
    """
    if url.startswith('sqlite'):
        return {"connect_args": {"timeout": STORE_CONNECT_TIMEOUT}}

    options = {"pool_pre_ping": True, "pool_timeout": STORE_CONNECT_TIMEOUT}
    if url.startswith('postgresql'):
        options["connect_args"] = {
            "connect_timeout": STORE_CONNECT_TIMEOUT,
            "options": f"-c statement_timeout={STORE_SOCKET_TIMEOUT * 1000}",
        }
    return options


class Config:
    PORT = int(os.environ.get('PORT', '5000'))

    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Dipakai oleh CLI (flask feedback ...) untuk mengambil data lewat HTTP API
    FEEDBACK_API_URL = os.environ.get('FEEDBACK_API_URL', 'http://localhost:5000')
    FEEDBACK_API_TIMEOUT = 15

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI)
    FEEDBACK_API_URL = 'http://feedback.test'
