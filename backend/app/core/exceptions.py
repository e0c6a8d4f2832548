"""
Typed errors raised by the will registry operations.

Each carries the human-readable message returned to callers; the HTTP
layer maps the class to a status code.
"""


class RegistryError(Exception):
    """Base class for expected operation failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    """A required field is missing or blank."""

    status_code = 400


class NotFoundError(RegistryError):
    """A referenced user, executor, will, asset or beneficiary does not exist."""

    status_code = 404


class EmptyCollectionError(RegistryError):
    """A list-all query found no records."""

    status_code = 404
