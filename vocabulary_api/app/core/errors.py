"""
Error taxonomy shared by the services and the HTTP layer.

Services raise one of the three concrete errors below; the application
turns them into JSON responses with the matching HTTP status code.
Messages name the entity kind and identifier involved.
"""

from typing import Optional


class VocabularyError(Exception):
    """Base class for all expected service failures."""

    kind = "error"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.message}


class InvalidInput(VocabularyError):
    """Malformed or missing input (empty name, wrong payload shape)."""

    kind = "invalid_input"
    status_code = 400


class NotFound(VocabularyError):
    """No record for the identifier, or a word missing from a list."""

    kind = "not_found"
    status_code = 404

    def __init__(self, entity: str, identifier: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{entity} with id={identifier} not found")
        self.entity = entity
        self.identifier = identifier


class Unauthorized(VocabularyError):
    """The caller is not the creator of the record it tried to touch."""

    kind = "unauthorized"
    status_code = 403

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"Unauthorized access to {entity} with id={identifier}")
        self.entity = entity
        self.identifier = identifier
