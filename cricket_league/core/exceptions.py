"""Errors raised by repositories and services.

Controllers never build HTTP errors themselves; the handlers registered in
``cricket_league.main`` map each class to its status code.
"""
from typing import Dict, List, Optional


class LeagueError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LeagueError):
    status_code = 404

    @classmethod
    def for_entity(cls, label: str, entity_id):
        return cls(f"{label} with ID {entity_id} does not exist.")


class ValidationError(LeagueError):
    """A field constraint failed or a referenced row does not exist."""

    status_code = 400

    def __init__(self, field: str, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or [{"field": field, "message": message}]
        self.field = self.errors[0]["field"]

    @classmethod
    def from_pydantic(cls, exc, rename: Optional[Dict[str, str]] = None):
        """Flatten a pydantic ValidationError into field/message pairs."""
        rename = rename or {}
        errors = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"] if part != "body") or "__root__"
            errors.append({"field": rename.get(field, field), "message": error["msg"]})
        first = errors[0] if errors else {"field": "__root__", "message": "Invalid input."}
        return cls(first["field"], first["message"], errors)

    def as_dict(self) -> Dict[str, str]:
        return {error["field"]: error["message"] for error in self.errors}


class BadRequestError(LeagueError):
    status_code = 400


class ConflictError(LeagueError):
    status_code = 409


class ConcurrencyConflictError(ConflictError):
    """The row changed or vanished between read and write."""


class RestrictedDeleteError(ConflictError):
    """A RESTRICT foreign key refused the delete."""
