import logging
import os

from flask import Flask, send_file, current_app
from flask_migrate import upgrade
from flask_swagger_ui import get_swaggerui_blueprint

from .config import config_by_name
from .extensions import db, migrate, jwt, cors
from .api import api_bp
from .api.health import health_bp
from .auth.jwt_callbacks import configure_jwt
from .errors import register_error_handlers
from .logging_setup import setup_logging
from .middleware.request_logging import request_logging_middleware

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "migrations")


def _resolve_database_uri(app):
    secret_name = app.config.get("DATABASE_SECRET_NAME")
    if not secret_name:
        return

    from .services.secrets import DatabaseSecret, get_secrets_service

    secrets = get_secrets_service(region_name=app.config.get("AWS_REGION"))
    credentials = secrets.get_secret_as(secret_name, DatabaseSecret)
    app.config["SQLALCHEMY_DATABASE_URI"] = credentials.to_uri()
    logger.info("Database credentials loaded from secret %s", secret_name)


def create_app(config_name: str | None = None, config_override: dict | None = None) -> Flask:
    config_name = config_name or os.getenv("APP_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if config_override:
        app.config.update(config_override)

    setup_logging(app)
    _resolve_database_uri(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)
    jwt.init_app(app)
    configure_jwt(app, jwt)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ALLOWED_ORIGINS"]}},
        supports_credentials=True,
    )

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    request_logging_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/portfolio.yaml", methods=["GET"], endpoint="openapi_portfolio")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "portfolio_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("portfolio_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/portfolio.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Portfolio API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    # -------------------------------------------------
    # Schema migrations (forward-only)
    # -------------------------------------------------
    if app.config.get("AUTO_MIGRATE"):
        with app.app_context():
            upgrade()
        logger.info("Database schema is up to date")

    logger.info("Portfolio API started in %s mode", config_name)
    return app
