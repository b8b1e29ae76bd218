"""
Transaction Input Parsing

DESIGN DECISION: Parsing is the only validation the ledger performs.
Amounts must be numbers, dates must be dates, kinds must be Income or
Expense. Nothing else is checked: negative amounts, future dates and
empty descriptions are all accepted as typed.

The same parsers are used for interactive entry and for reading the
ledger file, so a value the user can type is a value that will reload.

IMPORTANT: Parsing NEVER silently fixes values.
Anything that does not parse raises ParseError.
"""

from datetime import date as date_type
from decimal import Decimal, InvalidOperation

from pydantic import ValidationError

from budget_tracker.exceptions import ParseError
from budget_tracker.models.transaction import Transaction, TransactionKind


DATE_FORMAT_HINT = "YYYY-MM-DD"


def parse_amount(text: str) -> Decimal:
    """
    Parse a decimal amount such as "42.50".

    Only plain decimal notation with a '.' separator is accepted;
    thousands separators and currency symbols are rejected.
    """
    cleaned = text.strip()
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ParseError(f"Invalid amount: {text!r}")

    if not amount.is_finite():
        raise ParseError(f"Amount must be a finite number: {text!r}")

    return amount


def parse_kind(text: str) -> TransactionKind:
    """Parse "Income" or "Expense" in any case."""
    kind = TransactionKind.from_label(text)
    if kind is None:
        valid = "/".join(k.value for k in TransactionKind)
        raise ParseError(f"Invalid type: {text!r}. Expected {valid}")
    return kind


def parse_date(text: str) -> date_type:
    """Parse an ISO calendar date such as "2024-01-15"."""
    cleaned = text.strip()
    try:
        return date_type.fromisoformat(cleaned)
    except ValueError:
        raise ParseError(f"Invalid date: {text!r}. Expected {DATE_FORMAT_HINT}")


def parse_transaction(
    description: str,
    amount: str,
    kind: str,
    category: str,
    date: str,
) -> Transaction:
    """
    Build a Transaction from raw text fields.

    Raises:
        ParseError: If amount, kind or date is malformed
    """
    parsed_amount = parse_amount(amount)
    parsed_kind = parse_kind(kind)
    parsed_date = parse_date(date)

    try:
        return Transaction(
            description=description,
            amount=parsed_amount,
            kind=parsed_kind,
            category=category,
            date=parsed_date,
        )
    except ValidationError as e:
        raise ParseError(f"Invalid transaction: {e.errors()[0]['msg']}") from e


class TransactionParser:
    """
    Parses raw user input into transactions.

    Keeps the field being parsed on the error so the caller can
    tell the user exactly which prompt to answer again.
    """

    FIELDS = ("description", "amount", "kind", "category", "date")

    def parse_field(self, field: str, text: str):
        """
        Parse a single raw field.

        Text fields are returned stripped; typed fields go through
        the matching parser.
        """
        if field == "amount":
            return parse_amount(text)
        if field == "kind":
            return parse_kind(text)
        if field == "date":
            return parse_date(text)
        if field in ("description", "category"):
            return text.strip()
        raise KeyError(f"Unknown transaction field: {field}")

    def parse(self, raw: dict[str, str]) -> Transaction:
        """
        Parse a mapping of field name to raw text.

        Raises:
            ParseError: If a field is missing or malformed
        """
        missing = [f for f in self.FIELDS if f not in raw]
        if missing:
            raise ParseError(f"Missing fields: {', '.join(missing)}")

        return parse_transaction(
            description=raw["description"],
            amount=raw["amount"],
            kind=raw["kind"],
            category=raw["category"],
            date=raw["date"],
        )
