# user_dashboard/api/routes/dashboard_routes.py

from flask import Blueprint, current_app, render_template

bp_dashboard = Blueprint("dashboard", __name__)


@bp_dashboard.get("/")
def dashboard():
    """
    Página única; busca, formulários e contadores rodam no navegador
    contra a API de usuários.
    """
    return render_template(
        "dashboard.html",
        users_url=f"{current_app.config['API_PREFIX']}/users",
        roles=current_app.config["USER_ROLES"],
    )
