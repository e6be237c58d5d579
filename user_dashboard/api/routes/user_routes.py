# user_dashboard/api/routes/user_routes.py

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest

from user_dashboard.api.schemas.user_schema import UserResponse, validate_user_payload
from user_dashboard.core.exceptions import BadRequestError, ValidationFailure
from user_dashboard.infrastructure.database.session import db_session
from user_dashboard.repositories.user_repository import UserRepository
from user_dashboard.services.user_service import UserService


bp_users = Blueprint("users", __name__, url_prefix="/users")

# BIGINT do Postgres
MAX_USER_ID = 2**63 - 1


# -------------------------
# Helpers
# -------------------------

def _build_service(session) -> UserService:
    return UserService(UserRepository(session))


def _parse_user_id(raw: str) -> int:
    # só dígitos ASCII: "+1", " 1", "1_000" e "١" ficam de fora
    if not raw.isascii() or not raw.isdigit():
        raise BadRequestError("Invalid user id")

    user_id = int(raw, 10)
    if user_id < 1 or user_id > MAX_USER_ID:
        raise BadRequestError("Invalid user id")
    return user_id


def _read_json() -> Any:
    # "null" é JSON válido; o schema rejeita como não-objeto
    try:
        return request.get_json(force=True)
    except BadRequest as exc:
        raise ValidationFailure("Request body must be valid JSON") from exc


# -------------------------
# Coleção
# -------------------------

@bp_users.get("")
def list_users():
    with db_session() as session:
        users = _build_service(session).list_users()

    return jsonify([UserResponse.from_entity(u).to_json() for u in users]), 200


@bp_users.post("")
def create_user():
    payload = validate_user_payload(_read_json())

    with db_session() as session:
        created = _build_service(session).create_user(**payload.to_record())

    return jsonify(UserResponse.from_entity(created).to_json()), 201


# -------------------------
# Item
# -------------------------

@bp_users.get("/<user_id>")
def get_user(user_id: str):
    uid = _parse_user_id(user_id)

    with db_session() as session:
        user = _build_service(session).get_user(user_id=uid)

    return jsonify(UserResponse.from_entity(user).to_json()), 200


@bp_users.put("/<user_id>")
def update_user(user_id: str):
    """
    Substitui o registro inteiro (sem semântica de PATCH).
    """
    uid = _parse_user_id(user_id)
    payload = validate_user_payload(_read_json())

    with db_session() as session:
        updated = _build_service(session).update_user(user_id=uid, **payload.to_record())

    return jsonify(UserResponse.from_entity(updated).to_json()), 200


@bp_users.delete("/<user_id>")
def delete_user(user_id: str):
    uid = _parse_user_id(user_id)

    with db_session() as session:
        _build_service(session).delete_user(user_id=uid)

    return jsonify({"message": "User deleted successfully"}), 200
