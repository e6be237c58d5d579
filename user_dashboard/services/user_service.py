# user_dashboard/services/user_service.py

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator

from sqlalchemy.exc import SQLAlchemyError

from user_dashboard.core.exceptions import NotFoundError, StoreFailure
from user_dashboard.entities.user import Role, User
from user_dashboard.infrastructure.database.models.user_model import UserModel
from user_dashboard.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@contextmanager
def _store_errors(message: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s: %s", message, exc.__class__.__name__)
        raise StoreFailure(message) from exc


class UserService:
    def __init__(
        self,
        user_repository: UserRepository,
        *,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._user_repository = user_repository
        self._clock = clock

    def list_users(self) -> list[User]:
        with _store_errors("Failed to fetch users"):
            return [u.to_entity() for u in self._user_repository.list_all()]

    def get_user(self, *, user_id: int) -> User:
        with _store_errors("Failed to fetch user"):
            user = self._user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user.to_entity()

    def create_user(
        self,
        *,
        name: str,
        email: str,
        phone: str | None = None,
        role: str = Role.USER.value,
    ) -> User:
        now = self._clock()
        model = UserModel(
            name=name,
            email=email,
            phone=phone,
            role=role,
            created_at=now,
            updated_at=now,
        )

        with _store_errors("Failed to create user"):
            created = self._user_repository.add(model)

        logger.info("user created id=%s role=%s", created.id, created.role)
        return created.to_entity()

    def update_user(
        self,
        *,
        user_id: int,
        name: str,
        email: str,
        phone: str | None = None,
        role: str = Role.USER.value,
    ) -> User:
        with _store_errors("Failed to update user"):
            user = self._user_repository.get_by_id(user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

            updated = self._user_repository.replace(
                user,
                name=name,
                email=email,
                phone=phone,
                role=role,
                updated_at=self._clock(),
            )

        logger.info("user updated id=%s", user_id)
        return updated.to_entity()

    def delete_user(self, *, user_id: int) -> None:
        with _store_errors("Failed to delete user"):
            user = self._user_repository.get_by_id(user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

            self._user_repository.delete(user)

        logger.info("user deleted id=%s", user_id)
