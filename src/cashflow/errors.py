"""Error taxonomy surfaced by the ledger core."""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError, ValueError):
    """Caller-correctable input problem (empty name, non-positive amount, ...)."""


class StorageError(LedgerError):
    """The underlying entity store failed to read or write."""


class NotFound(StorageError):
    """The targeted entity is no longer present in the store."""

    def __init__(self, kind: str, entity_id: object) -> None:
        super().__init__(f"{kind} {entity_id} no longer exists.")
        self.kind = kind
        self.entity_id = entity_id


__all__ = ["LedgerError", "NotFound", "StorageError", "ValidationError"]
