"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for ledger persistence.
This allows us to:
1. Swap the flat file for a structured format later
2. Use in-memory storage for testing
3. Keep the ledger store decoupled from file formats

Storage never retains records. It only transiently reads or writes
the full set handed to it.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Union

from budget_tracker.models.transaction import Transaction


PathLike = Union[str, Path]


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger persistence.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def save(self, path: PathLike, records: Iterable[Transaction]) -> int:
        """
        Write every record to storage, replacing what was there.

        Args:
            path: Where to write the ledger
            records: Transactions in the order they should be stored

        Returns:
            Number of records written

        Raises:
            StorageError: If the destination cannot be written
        """
        pass

    @abstractmethod
    def load(self, path: PathLike) -> list[Transaction]:
        """
        Read every record from storage.

        Args:
            path: Where to read the ledger from

        Returns:
            Transactions in stored order. Empty if nothing has been
            saved yet.

        Raises:
            FormatError: If a record has the wrong structure
            ParseError: If a field cannot be parsed
            StorageError: If the source exists but cannot be read
        """
        pass
