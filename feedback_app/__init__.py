import logging

from flask import Flask
from config import Config
from feedback_app.extensions import db, cors
from feedback_app.services.feedback_service import init_store


def _configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)

    db.init_app(app)
    cors.init_app(app)

    # Koneksi store wajib berhasil, kalau tidak -> PersistenceError
    init_store(app)

    # Register blueprints
    from feedback_app.routes.feedback_routes import feedback_bp
    from feedback_app.web.dashboard_routes import dashboard_bp

    app.register_blueprint(feedback_bp)
    app.register_blueprint(dashboard_bp)

    from feedback_app.cli import feedback_cli
    app.cli.add_command(feedback_cli)

    @app.route("/")
    def index():
        return "Airport Feedback Backend is Running!"

    return app
