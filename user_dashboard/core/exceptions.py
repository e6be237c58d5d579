# user_dashboard/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationFailure(AppError):
    """Payload rejected by the user schema.

    ``field`` is the first offending field (``None`` when the body itself is
    unusable); ``fields`` lists every field that failed.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        fields: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message, status_code=400)
        self.field = field
        self.fields = fields or ((field,) if field else ())


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(message, status_code=400)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class StoreFailure(AppError):
    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message, status_code=500)
