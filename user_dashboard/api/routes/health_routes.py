# user_dashboard/api/routes/health_routes.py

import logging

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from user_dashboard.infrastructure.database.session import get_database

logger = logging.getLogger(__name__)

bp_health = Blueprint("health", __name__, url_prefix="/health")


@bp_health.get("")
def health():
    return jsonify({"status": "ok"}), 200


@bp_health.get("/db")
def health_db():
    """
    Pinga o banco pela conexão compartilhada; banco fora do ar responde 503.
    """
    engine = get_database().engine

    try:
        with engine.connect() as conn:
            conn.execute(text("select 1"))
    except SQLAlchemyError:
        logger.warning("database health check failed", exc_info=True)
        return jsonify({"db": "unavailable", "dialect": engine.dialect.name}), 503

    return jsonify({"db": "ok", "dialect": engine.dialect.name}), 200
