"""
Storage Services Package

Provides the abstract interface and concrete implementation for ledger
persistence. Currently implements a pipe-delimited flat file, but designed
to be swappable.
"""

from budget_tracker.exceptions import FormatError, ParseError, StorageError
from budget_tracker.services.storage.interface import LedgerStorageInterface
from budget_tracker.services.storage.flat_file import (
    DELIMITER,
    LEDGER_COLUMNS,
    FlatFileLedgerStorage,
)

__all__ = [
    # Interfaces
    "LedgerStorageInterface",
    # Exceptions
    "FormatError",
    "ParseError",
    "StorageError",
    # Flat file implementation
    "DELIMITER",
    "LEDGER_COLUMNS",
    "FlatFileLedgerStorage",
]
