"""Service-level exceptions shared by services and routers."""
from typing import Optional


class NotFoundError(ValueError):
    """A referenced record does not exist (or its id is malformed)."""

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class FieldValidationError(ValueError):
    """
    A locally detected rule violation, scoped to one or more fields.

    Raised before any store call is made. ``errors`` maps field name to a
    human-readable message so each field can be corrected independently.
    """

    def __init__(self, errors: dict[str, str], message: Optional[str] = None):
        super().__init__(message or "; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors
