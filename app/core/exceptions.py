"""
Application error taxonomy.

The service layer raises these; the API layer maps each kind to a status
code and a generic message. ``message`` is always safe to show to a client,
the chained ``__cause__`` is for logs only.
"""


class AppError(Exception):
    """Base class for all application errors."""

    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(AppError):
    """Malformed or missing request fields."""

    message = "Invalid request"

    def __init__(self, message: str | None = None, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class AlreadyExists(AppError):
    """A user with this email is already registered."""

    message = "User already exists"


class InvalidCredentials(AppError):
    """Unknown email or wrong password. The two cases are not distinguished."""

    message = "Invalid credentials"


class NotFound(AppError):
    """No live user with the requested id."""

    message = "User not found"


class StoreError(AppError):
    """Any persistence failure."""


class UniquenessViolation(StoreError):
    """Insert rejected by a unique constraint."""


class Cancelled(AppError):
    """The caller aborted the operation or its deadline passed."""

    message = "Request cancelled"
