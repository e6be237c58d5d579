# user_dashboard/api/schemas/user_schema.py
from datetime import datetime
from typing import Annotated, Any

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    field_serializer,
)

from user_dashboard.api.schemas._datetime_serializer import serialize_dt
from user_dashboard.core.exceptions import ValidationFailure
from user_dashboard.entities.user import Role, User

# ordem de declaração = ordem de prioridade da mensagem
FIELD_MESSAGES = {
    "name": "Name must be at least 2 characters",
    "email": "Invalid email address",
    "phone": "Phone must be a string",
    "role": "Role must be one of: admin, user, moderator",
}

# domínios reservados (.local, .test, ...) são endereços bem formados
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _check_email(value: str) -> str:
    # só o endereço puro: nada de "Nome <a@b.c>" nem espaços nas pontas
    if value != value.strip() or "<" in value or ">" in value:
        raise ValueError("email must be a bare address")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    # guarda como veio, sem normalizar caixa
    return value


EmailAddress = Annotated[StrictStr, AfterValidator(_check_email)]


class UserPayload(BaseModel):
    """Body accepted by POST /users and PUT /users/<id>."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=2)
    email: EmailAddress
    phone: StrictStr | None = None
    role: Role = Role.USER

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role.value,
        }


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    role: Role
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def _dump_dt(self, dt: datetime) -> str | None:
        return serialize_dt(dt)

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def validate_user_payload(data: Any) -> UserPayload:
    if not isinstance(data, dict):
        raise ValidationFailure("Request body must be a JSON object")

    try:
        return UserPayload.model_validate(data)
    except ValidationError as exc:
        failed = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        fields = tuple(f for f in FIELD_MESSAGES if f in failed)
        if not fields:
            raise ValidationFailure("Invalid request body") from exc
        first = fields[0]
        raise ValidationFailure(FIELD_MESSAGES[first], field=first, fields=fields) from exc
