from __future__ import annotations


class ValidationError(ValueError):
    """Input rejected before the store was touched."""


class PersistenceError(RuntimeError):
    """A repository could not read or write a user's tasks."""


class PersistenceWarning(UserWarning):
    """Non-fatal storage failure; the in-memory change still stands."""

    def __init__(self, operation: str, user_id: str, message: str) -> None:
        super().__init__(f"{operation} failed for {user_id!r}: {message}")
        self.operation = operation
        self.user_id = user_id
        self.message = message
