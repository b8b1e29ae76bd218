"""
Flat File Storage Implementation

One transaction per line, fields joined by a pipe:

    <description>|<amount>|<kind>|<category>|<date>

No header row, no escaping, no trailing delimiter.

TRADEOFFS:
- Human-readable and trivially diffable
- A pipe or newline inside description/category corrupts the record;
  the file will fail to reload with a FormatError. We warn on save
  rather than silently rewriting the user's text.

Loads are all-or-nothing: a single bad line aborts the whole load
so the caller never sees a partially populated ledger.
"""

from pathlib import Path
from typing import Iterable

import structlog

from budget_tracker.exceptions import FormatError, ParseError, StorageError
from budget_tracker.models.transaction import Transaction
from budget_tracker.services.storage.interface import (
    LedgerStorageInterface,
    PathLike,
)
from budget_tracker.validation.validator import parse_transaction


DELIMITER = "|"

# Field order on disk
LEDGER_COLUMNS = [
    "description",
    "amount",
    "kind",
    "category",
    "date",
]


def format_decimal(amount) -> str:
    """Plain fixed-point text: no exponent, no grouping, locale-independent."""
    return format(amount, "f")


class FlatFileLedgerStorage(LedgerStorageInterface):
    """
    Pipe-delimited text file implementation of ledger storage.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding
        self._logger = structlog.get_logger(__name__)

    def _transaction_to_line(self, transaction: Transaction) -> str:
        """Convert a Transaction to one line of the ledger file."""
        return DELIMITER.join([
            transaction.description,
            format_decimal(transaction.amount),
            transaction.kind.value,
            transaction.category,
            transaction.date.isoformat(),
        ])

    def _line_to_transaction(self, line: str, line_number: int) -> Transaction:
        """Convert one line of the ledger file to a Transaction."""
        parts = line.split(DELIMITER)
        if len(parts) != len(LEDGER_COLUMNS):
            raise FormatError(
                f"expected {len(LEDGER_COLUMNS)} fields separated by "
                f"'{DELIMITER}', found {len(parts)}",
                line_number=line_number,
            )

        description, amount, kind, category, date_text = parts
        try:
            return parse_transaction(
                description=description,
                amount=amount,
                kind=kind,
                category=category,
                date=date_text,
            )
        except ParseError as e:
            raise ParseError(str(e), line_number=line_number) from e

    def _check_round_trip(self, transaction: Transaction, index: int) -> None:
        for field in ("description", "category"):
            value = getattr(transaction, field)
            if DELIMITER in value or "\n" in value or "\r" in value:
                self._logger.warning(
                    "record_will_not_round_trip",
                    record_index=index,
                    field=field,
                    value=value,
                )

    def save(self, path: PathLike, records: Iterable[Transaction]) -> int:
        path = Path(path)
        lines = []
        for index, transaction in enumerate(records):
            self._check_round_trip(transaction, index)
            lines.append(self._transaction_to_line(transaction))

        try:
            with path.open("w", encoding=self._encoding, newline="\n") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise StorageError(f"Could not write ledger file {path}: {e}") from e

        self._logger.debug("ledger_file_written", path=str(path), records=len(lines))
        return len(lines)

    def load(self, path: PathLike) -> list[Transaction]:
        path = Path(path)
        try:
            with path.open("r", encoding=self._encoding, newline="") as f:
                content = f.read()
        except FileNotFoundError:
            # First run: nothing saved yet
            self._logger.debug("ledger_file_missing", path=str(path))
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read ledger file {path}: {e}") from e

        transactions = []
        for line_number, raw_line in enumerate(content.split("\n"), start=1):
            line = raw_line.rstrip("\r")
            if not line.strip():
                continue
            transactions.append(self._line_to_transaction(line, line_number))

        self._logger.debug("ledger_file_read", path=str(path), records=len(transactions))
        return transactions
