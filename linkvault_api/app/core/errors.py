"""
Domain errors raised by the service layer.

Services never raise ``HTTPException`` themselves; endpoint handlers
translate ``InvalidInput`` and ``NotFound`` into 400 and 404
responses, and ``StorageError`` is turned into a 500 response by an
application-wide exception handler (see ``main.create_app``).
"""


class LinkVaultError(Exception):
    """Base class for all LinkVault domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(LinkVaultError):
    """A required field is missing or empty."""


class NotFound(LinkVaultError):
    """The requested user or link does not exist."""


class StorageError(LinkVaultError):
    """The JSON store could not be read or written."""
