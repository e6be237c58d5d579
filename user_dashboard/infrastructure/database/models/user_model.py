# user_dashboard/infrastructure/database/models/user_model.py

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from user_dashboard.entities.user import Role, User
from user_dashboard.infrastructure.database.base_model import BaseModel

# SQLite só faz autoincrement em INTEGER PRIMARY KEY
_PK_TYPE = BigInteger().with_variant(Integer, "sqlite")


class UserModel(BaseModel):
    __tablename__ = "tbUsers"

    id: Mapped[int] = mapped_column(_PK_TYPE, primary_key=True, autoincrement=True)

    # sem limite de tamanho: o payload só exige name >= 2
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=Role.USER.value)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def to_entity(self) -> User:
        return User(
            id=int(self.id),
            name=self.name,
            email=self.email,
            phone=self.phone,
            role=Role(self.role),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
