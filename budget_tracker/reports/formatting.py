"""Display formatting for amounts and transactions."""

from decimal import ROUND_HALF_UP, Decimal

from budget_tracker.models.transaction import Transaction


CENT = Decimal("0.01")


def format_amount(amount: Decimal, currency_symbol: str = "$") -> str:
    """
    Format an amount as currency, e.g. Decimal("-1234.5") -> "-$1,234.50".

    Rounded half-up to cents for display only; stored amounts keep
    their full precision.
    """
    rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol}{abs(rounded):,.2f}"


def format_transaction_line(transaction: Transaction, currency_symbol: str = "$") -> str:
    """
    One-line listing form: date | kind | category | amount | description
    """
    return " | ".join([
        transaction.date.isoformat(),
        transaction.kind.value,
        transaction.category,
        format_amount(transaction.amount, currency_symbol),
        transaction.description,
    ])
