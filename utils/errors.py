"""
utils/errors.py
---------------
Exception types shared by every layer.

    ValidationError   -> one or more field failures, answered with 400.
    PersistenceError  -> any database failure during a request, answered with 500.
    BootstrapError    -> schema creation failed at startup; the app refuses to start.
"""


class ValidationError(Exception):
    """Raised when an incoming record fails its field rules."""

    def __init__(self, errors: list[dict]):
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors)
        super().__init__(f"Invalid fields: {fields}")


class PersistenceError(Exception):
    """Raised when a statement cannot be executed against the database."""


class BootstrapError(Exception):
    """Raised when the schema cannot be created at startup."""
