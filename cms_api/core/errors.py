"""Domain errors.

Every error carries a stable ``name`` and a human readable ``message``. The
HTTP layer turns them into ``{"status": "fail" | "error", "data": {...}}``
bodies, see ``cms_api.api.errors``.
"""

FORBIDDEN = "forbidden"
NOT_FOUND = "resource not found"


class ApiError(Exception):
    status_code = 500
    default_message = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def status(self) -> str:
        return "error" if self.status_code >= 500 else "fail"

    def to_dict(self) -> dict:
        return {"name": self.name, "message": self.message}


class BadRequest(ApiError):
    status_code = 400
    default_message = "bad request"


class WeakPassword(ApiError):
    status_code = 400
    default_message = "weak password"


class AuthenticationError(ApiError):
    status_code = 401
    default_message = "invalid token"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "unauthorized"


class Forbidden(ApiError):
    status_code = 403
    default_message = FORBIDDEN


class ResourceNotFound(ApiError):
    status_code = 404
    default_message = NOT_FOUND
