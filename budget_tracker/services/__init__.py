"""Services package."""

from budget_tracker.services.storage import (
    FlatFileLedgerStorage,
    FormatError,
    LedgerStorageInterface,
    ParseError,
    StorageError,
)

__all__ = [
    # Storage services
    "FlatFileLedgerStorage",
    "FormatError",
    "LedgerStorageInterface",
    "ParseError",
    "StorageError",
]
