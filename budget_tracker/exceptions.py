"""Domain-specific exceptions for the budget tracker core."""


class LedgerError(Exception):
    """Base exception for all budget tracker errors."""


class ParseError(LedgerError, ValueError):
    """Raised when an amount, date or kind cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class FormatError(LedgerError, ValueError):
    """Raised when a ledger file line does not have the expected structure."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class StorageError(LedgerError, OSError):
    """Raised when the ledger file cannot be read or written."""


class InvalidSortKeyError(LedgerError, ValueError):
    """Raised for an unknown sort key when strict sorting is enabled."""
