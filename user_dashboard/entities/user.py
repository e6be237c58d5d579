# user_dashboard/entities/user.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"
    MODERATOR = "moderator"


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    phone: Optional[str]
    role: Role
    created_at: datetime
    updated_at: datetime
