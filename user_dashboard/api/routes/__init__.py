# user_dashboard/api/routes/__init__.py

from flask import Flask

from user_dashboard.api.routes.dashboard_routes import bp_dashboard
from user_dashboard.api.routes.health_routes import bp_health
from user_dashboard.api.routes.user_routes import bp_users


def register_routes(app: Flask, *, api_prefix: str, app_prefix: str) -> None:
    # health e dashboard fora de /api (mas dentro do app)
    app.register_blueprint(bp_health, url_prefix=f"{app_prefix}/health")
    app.register_blueprint(bp_dashboard, url_prefix=app_prefix or None)

    app.register_blueprint(bp_users, url_prefix=f"{api_prefix}/users")
