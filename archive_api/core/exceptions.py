"""Domain exceptions for the archive catalog.

Every exception carries the message shown to the client and the JSON key
it is returned under. The HTTP status lives on the class so the
application handlers in ``archive_api.main`` can translate any of them.
"""


class CatalogError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, body_key: str = "error") -> None:
        """Initialize CatalogError.

        Args:
            message: Client facing description of the failure.
            body_key: Key of the JSON error body, ``error`` or ``message``.
        """
        self.message = message
        self.body_key = body_key
        super().__init__(message)


class ValidationError(CatalogError):
    """Raised when required input is missing or malformed."""

    status_code = 400


class ConflictError(CatalogError):
    """Raised when a unique value (user email) is already taken."""

    status_code = 400


class UnauthorizedError(CatalogError):
    """Raised when supplied credentials do not match."""

    status_code = 401


class NotFoundError(CatalogError):
    """Raised when a referenced row does not exist or a listing is empty."""

    status_code = 404


class StorageError(CatalogError):
    """Raised when uploaded content cannot be written to the content area."""

    status_code = 500
