# user_dashboard/main.py
from __future__ import annotations

import logging

from flask import Flask
from flask_cors import CORS

from user_dashboard.api.middlewares.error_handler import register_error_handlers
from user_dashboard.api.routes import register_routes
from user_dashboard.config.flask_config import configure_app
from user_dashboard.config.settings import Settings, settings as default_settings
from user_dashboard.entities.user import Role
from user_dashboard.infrastructure.database.session import EXTENSION_KEY, Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, *, database: Database | None = None) -> Flask:
    settings = settings or default_settings
    app = Flask(__name__)

    api_prefix = settings.full_api_prefix

    # CORS aplicado cedo (antes das rotas lidarem com OPTIONS)
    CORS(
        app,
        resources={rf"{api_prefix}/*": {"origins": settings.cors_origins}},
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    configure_app(app, settings)
    app.config["API_PREFIX"] = api_prefix
    app.config["USER_ROLES"] = [r.value for r in Role]

    # um único client do banco por processo, reaproveitado por todas as requests
    if database is None:
        database = Database(settings.database_url, echo=settings.db_echo)
    if settings.auto_create_tables:
        database.create_all()
    app.extensions[EXTENSION_KEY] = database

    register_routes(app, api_prefix=api_prefix, app_prefix=settings.app_prefix)
    register_error_handlers(app)

    logger.info("app ready api_prefix=%s env=%s", api_prefix, settings.environment)
    return app


if __name__ == "__main__":
    # só para execução direta; em produção use um servidor WSGI
    # ex: gunicorn "user_dashboard.main:create_app()"
    create_app().run(host="0.0.0.0", port=5000)
