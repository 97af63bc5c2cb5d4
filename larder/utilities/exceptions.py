"""Error types shared by the store, the inventory service and the web layer.

Only StorageError ever reaches the browser (as a 500). ValidationError and
NotFoundError are swallowed by the form handlers, which redirect back to the
dashboard without changing anything.
"""
from typing import Optional


class ValidationError(Exception):
    """Raised when submitted form data cannot be applied (blank name, bad id)."""

    def __init__(self, message: str = "Invalid input", field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        return self.message


class NotFoundError(Exception):
    """Raised when an edit or delete targets a record id that does not exist."""

    def __init__(self, kind: str, record_id: int):
        self.kind = kind
        self.record_id = record_id
        self.message = f"No {kind} with id {record_id}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class StorageError(Exception):
    """Raised when the persisted store cannot be read or written.

    Attributes:
        operation: "load" or "save", used to word the error response
    """

    def __init__(self, message: str, operation: str = "load"):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        return self.message
