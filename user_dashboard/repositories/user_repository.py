# user_dashboard/repositories/user_repository.py

from sqlalchemy import select
from sqlalchemy.orm import Session

from user_dashboard.core.base_repository import BaseRepository
from user_dashboard.infrastructure.database.models.user_model import UserModel


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        return self._session.execute(stmt).scalar_one_or_none()

    # mais recentes primeiro; id desempata criações no mesmo instante
    def list_all(self) -> list[UserModel]:
        stmt = select(UserModel).order_by(UserModel.created_at.desc(), UserModel.id.desc())
        return list(self._session.execute(stmt).scalars().all())

    def replace(self, model: UserModel, **values) -> UserModel:
        for key, value in values.items():
            setattr(model, key, value)
        self._session.flush()
        return model
