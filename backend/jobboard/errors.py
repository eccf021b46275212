"""Error types raised by routers and services.

Every error carries the HTTP status it is rendered with. Some operations keep
legacy status codes (for example 402 for a duplicate application), so raise
sites may pass ``status_code`` to override the class default.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.orm import Session

from jobboard.config import get_settings

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None, error=None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.error = error
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Validation Error"


class Unauthenticated(ServiceError):
    # 403 rather than 401, kept for existing clients
    status_code = 403
    default_message = "Invalid or expired token"


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "Invalid credentials"


class Forbidden(ServiceError):
    status_code = 403
    default_message = "Not allowed"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class Conflict(ServiceError):
    status_code = 409
    default_message = "Already exists"


class InvalidTransition(Conflict):
    default_message = "Invalid status transition"


class InternalError(ServiceError):
    pass


@contextmanager
def server_errors(db: Session | None, message: str):
    """Turn unexpected failures inside the block into an ``InternalError``.

    ``ServiceError`` passes through untouched. Anything else rolls back the
    session, is logged with its traceback and is re-raised as a 500 carrying
    ``message``.
    """
    try:
        yield
    except ServiceError:
        if db is not None:
            db.rollback()
        raise
    except Exception as e:
        if db is not None:
            db.rollback()
        logger.exception(message)
        detail = str(e) if get_settings().expose_error_details else None
        raise InternalError(message, error=detail) from e
