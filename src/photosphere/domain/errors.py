"""Domain errors surfaced to API clients."""


class PhotoSphereError(Exception):
    """Base class for expected, client-facing failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(PhotoSphereError):
    """Raised when required fields are missing or malformed."""


class DuplicateUserError(InvalidInputError):
    """Raised when registering an email that already exists."""


class InvalidCredentialsError(PhotoSphereError):
    """Raised when an email/password pair does not match."""


class UnauthorizedError(PhotoSphereError):
    """Raised when a request carries no credentials."""


class ForbiddenError(PhotoSphereError):
    """Raised when an identity may not perform an action."""


class InvalidTokenError(PhotoSphereError):
    """Raised when a bearer token fails verification."""


class NotFoundError(PhotoSphereError):
    """Raised when a referenced photo does not exist."""
