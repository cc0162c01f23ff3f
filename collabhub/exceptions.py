"""Custom exceptions for the collabhub backend.

Each exception carries an HTTP status and a machine-readable code; the
handler registered in ``collabhub.main`` renders them as ``ErrorInfo``.
"""

from asyncpg import exceptions as pg_errors
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError

from collabhub.constants.error_codes import get_error_spec, is_retryable
from collabhub.schemas.envelope import ErrorInfo


class CollabHubError(Exception):
    """Base exception for all collabhub application errors."""

    code: str = "INTERNAL_ERROR"
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status_code: int | None = None,
    ):
        self.message = message or self.__class__.message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)

    def to_error_info(self) -> ErrorInfo:
        """Convert exception to ErrorInfo for API response."""
        spec = get_error_spec(self.code)
        return ErrorInfo(
            error=self.message,
            code=self.code,
            retryable=is_retryable(self.code),
            suggested_fix=spec.get("suggested_fix"),
        )


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class ResourceNotFoundError(CollabHubError):
    """Base class for resource not found errors."""

    status_code = 404


class UserNotFoundError(ResourceNotFoundError):
    code = "USER_NOT_FOUND"
    message = "User not found"


class InviteNotFoundError(ResourceNotFoundError):
    code = "INVITE_NOT_FOUND"
    message = "Invite not found"


# =============================================================================
# Validation Errors (400)
# =============================================================================


class EmailConflictError(CollabHubError):
    """Email already bound to a different external identifier."""

    code = "EMAIL_CONFLICT"
    status_code = 400
    message = "Email is already used by another account."


# =============================================================================
# Store Errors (500 / 503)
# =============================================================================


class DatabaseOperationError(CollabHubError):
    """A query or write failed; the message is chosen by the route."""

    code = "DATABASE_ERROR"
    status_code = 500


class DatabaseUnavailableError(CollabHubError):
    code = "DATABASE_UNAVAILABLE"
    status_code = 503
    message = "Database connection failed. Please ensure PostgreSQL is running."


_CONNECTION_MARKERS = (
    "connect to the database",
    "can't reach database server",
    "connection refused",
    "could not connect",
    "connection was closed",
    "connection is closed",
    "unable to open database",
)

# Server refusals asyncpg raises during its connect handshake
_CONNECT_TIME_DRIVER_ERRORS = (
    pg_errors.PostgresConnectionError,
    pg_errors.InvalidAuthorizationSpecificationError,
    pg_errors.InvalidCatalogNameError,
    pg_errors.CannotConnectNowError,
    pg_errors.TooManyConnectionsError,
)


def is_connection_error(exc: BaseException) -> bool:
    """Tell a store-connectivity failure apart from an ordinary query failure."""
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return True
    if isinstance(exc, (OperationalError, InterfaceError)):
        text = str(exc).lower()
        return any(marker in text for marker in _CONNECTION_MARKERS)
    # Failures while opening a connection reach us unwrapped by the ORM
    return isinstance(exc, (OSError, *_CONNECT_TIME_DRIVER_ERRORS))
