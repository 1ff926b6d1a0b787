"""
Error kinds shared by the REST and GraphQL services
"""

from typing import Any


class AlbumCollectorError(Exception):
    """Base exception for Album Collector."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class NotFoundError(AlbumCollectorError):
    """Resource not found"""

    status_code = 404

    def __init__(self, resource: str, identifier: Any):
        super().__init__(f"{resource} with id {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class DuplicateError(AlbumCollectorError):
    """Resource already exists"""

    status_code = 409

    def __init__(self, field: str, value: str):
        super().__init__(f"{field} '{value}' already exists")
        self.field = field
        self.value = value


class ValidationError(AlbumCollectorError):
    """Input failed validation; `errors` maps field names to messages."""

    status_code = 422

    def __init__(self, errors: dict[str, str]):
        details = "; ".join(f"{field}: {message}" for field, message in errors.items())
        super().__init__(f"Validation failed: {details}")
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "errors": self.errors}
