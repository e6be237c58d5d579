"""User service and repository tests against an in-memory SQLite database."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import OperationalError

from user_dashboard.core.exceptions import NotFoundError, StoreFailure
from user_dashboard.entities.user import Role
from user_dashboard.infrastructure.database.models.user_model import UserModel
from user_dashboard.repositories.user_repository import UserRepository
from user_dashboard.services.user_service import UserService


def _service(session, clock=None) -> UserService:
    if clock is None:
        return UserService(UserRepository(session))
    return UserService(UserRepository(session), clock=clock)


class TestCreateAndRead:
    def test_create_assigns_id_and_timestamps(self, database, ticking_clock):
        with database.session() as session:
            user = _service(session, ticking_clock).create_user(
                name="Jo", email="jo@example.com"
            )

        assert user.id >= 1
        assert user.role is Role.USER
        assert user.phone is None
        assert user.created_at == user.updated_at

    def test_get_round_trip(self, database):
        with database.session() as session:
            created = _service(session).create_user(
                name="Maria", email="maria@example.com", phone="123", role="admin"
            )

        with database.session() as session:
            fetched = _service(session).get_user(user_id=created.id)

        assert fetched.id == created.id
        assert fetched.name == "Maria"
        assert fetched.email == "maria@example.com"
        assert fetched.phone == "123"
        assert fetched.role is Role.ADMIN
        # SQLite descarta o tz
        assert fetched.created_at.replace(tzinfo=timezone.utc) == created.created_at

    def test_get_missing_raises_not_found(self, database):
        with database.session() as session:
            with pytest.raises(NotFoundError) as exc:
                _service(session).get_user(user_id=999999)
        assert str(exc.value) == "User not found"

    def test_list_empty(self, database):
        with database.session() as session:
            assert _service(session).list_users() == []

    def test_list_newest_first(self, database, ticking_clock):
        with database.session() as session:
            service = _service(session, ticking_clock)
            ids = [
                service.create_user(name=f"User {i}", email=f"u{i}@example.com").id
                for i in range(4)
            ]

        with database.session() as session:
            listed = _service(session).list_users()

        assert [u.id for u in listed] == list(reversed(ids))

    def test_list_same_timestamp_falls_back_to_id(self, database):
        fixed = datetime(2024, 1, 1, tzinfo=timezone.utc)
        with database.session() as session:
            service = _service(session, lambda: fixed)
            first = service.create_user(name="First", email="first@example.com")
            second = service.create_user(name="Second", email="second@example.com")

        with database.session() as session:
            listed = _service(session).list_users()

        assert [u.id for u in listed] == [second.id, first.id]


class TestUpdate:
    def test_replaces_all_fields(self, database, ticking_clock):
        with database.session() as session:
            created = _service(session, ticking_clock).create_user(
                name="Jo", email="jo@example.com", phone="555", role="admin"
            )

        with database.session() as session:
            updated = _service(session, ticking_clock).update_user(
                user_id=created.id, name="Joana", email="joana@example.com"
            )

        assert updated.name == "Joana"
        assert updated.email == "joana@example.com"
        assert updated.phone is None
        assert updated.role is Role.USER
        assert updated.created_at.replace(tzinfo=timezone.utc) == created.created_at
        assert updated.updated_at > created.updated_at

    def test_missing_raises_not_found(self, database):
        with database.session() as session:
            with pytest.raises(NotFoundError):
                _service(session).update_user(
                    user_id=404, name="Jo", email="jo@example.com"
                )


class TestDelete:
    def test_removes_row(self, database):
        with database.session() as session:
            created = _service(session).create_user(name="Jo", email="jo@example.com")

        with database.session() as session:
            _service(session).delete_user(user_id=created.id)

        with database.session() as session:
            with pytest.raises(NotFoundError):
                _service(session).get_user(user_id=created.id)

    def test_missing_twice_same_error(self, database):
        errors = []
        for _ in range(2):
            with database.session() as session:
                with pytest.raises(NotFoundError) as exc:
                    _service(session).delete_user(user_id=12345)
            errors.append(type(exc.value))

        assert errors == [NotFoundError, NotFoundError]


class TestStoreFailures:
    def test_store_error_becomes_safe_failure(self, database, monkeypatch):
        def boom(self):
            raise OperationalError("SELECT", {}, Exception("connection refused on 10.0.0.5"))

        monkeypatch.setattr(UserRepository, "list_all", boom)

        with database.session() as session:
            with pytest.raises(StoreFailure) as exc:
                _service(session).list_users()

        assert str(exc.value) == "Failed to fetch users"
        assert exc.value.status_code == 500
        assert isinstance(exc.value.__cause__, OperationalError)

    def test_session_rolls_back_on_error(self, database):
        with pytest.raises(RuntimeError):
            with database.session() as session:
                _service(session).create_user(name="Jo", email="jo@example.com")
                raise RuntimeError("abort")

        with database.session() as session:
            assert _service(session).list_users() == []


class TestTableColumns:
    @pytest.mark.parametrize("column", ["name", "email", "phone"])
    def test_text_columns_have_no_length_cap(self, column):
        assert UserModel.__table__.c[column].type.length is None
