"""
Console Frontend for the Budget Tracker

This is the interactive menu users work with:

    1. Add Transaction
    2. View Summary
    3. View Transactions
    4. Sort Transactions
    5. Save & Exit

DESIGN PRINCIPLES:
1. Simple numbered menu
2. Bad input is reported and asked for again, never crashes the loop
3. Nothing is written to disk until the user chooses Save & Exit
4. If the ledger file cannot be loaded we stop, rather than risk
   overwriting it with an empty ledger
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from budget_tracker.audit import configure_logging
from budget_tracker.config import get_settings
from budget_tracker.exceptions import (
    FormatError,
    InvalidSortKeyError,
    ParseError,
    StorageError,
)
from budget_tracker.models.transaction import SortKey
from budget_tracker.orchestrator import LedgerSession, create_app_components
from budget_tracker.reports import format_amount, format_transaction_line


app = typer.Typer(
    name="budget-tracker",
    help="Track income and expenses in a plain text ledger",
    add_completion=False,
)
console = Console(highlight=False)

MENU = (
    "\n1. Add Transaction\n"
    "2. View Summary\n"
    "3. View Transactions\n"
    "4. Sort Transactions\n"
    "5. Save & Exit"
)

# Prompt text and the field each answer is parsed as
ADD_PROMPTS = [
    ("description", "Description"),
    ("amount", "Amount"),
    ("kind", "Type (Income/Expense)"),
    ("category", "Category"),
    ("date", "Date (yyyy-mm-dd)"),
]


def ask(prompt: str) -> str:
    return Prompt.ask(prompt, console=console, default="", show_default=False)


def render_add_transaction(session: LedgerSession) -> None:
    """Prompt for each field, re-asking until typed fields parse."""
    raw: dict[str, str] = {}

    for field, prompt in ADD_PROMPTS:
        while True:
            text = ask(prompt)
            try:
                session.parser.parse_field(field, text)
            except ParseError as e:
                session.record_invalid_input(field, e)
                console.print(f"[red]Error:[/red] {escape(str(e))}")
                continue
            raw[field] = text
            break

    try:
        session.add_from_input(**raw)
    except ParseError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return

    console.print("Transaction added.")


def render_summary(session: LedgerSession, currency_symbol: str) -> None:
    """Totals, per-category spending, largest category and bar chart."""
    summary = session.summary()

    def money(amount):
        return format_amount(amount, currency_symbol)

    console.print(f"\nTotal Income: {money(summary.total_income)}")
    console.print(f"Total Expenses: {money(summary.total_expenses)}")
    console.print(f"Net Savings: {money(summary.net_savings)}\n")

    console.print("Spending by Category:")
    if summary.has_expenses:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Category")
        table.add_column("Spent", justify="right")
        for category, total in summary.spending_by_category.items():
            table.add_row(escape(category), money(total))
        console.print(table)
    else:
        console.print("No expenses recorded.")

    if summary.largest_category is not None:
        largest = summary.largest_category
        console.print(
            f"\nMost Spent Category: {escape(largest.category)} - {money(largest.total)}"
        )

    console.print("\n--- Expense Chart ---")
    for bar in summary.chart:
        console.print(f"{escape(bar.category)}: {escape(bar.bar)}")


def render_transactions(session: LedgerSession, currency_symbol: str) -> None:
    console.print("\n--- All Transactions ---")
    transactions = session.transactions()
    if not transactions:
        console.print("No transactions recorded.")
        return
    for transaction in transactions:
        console.print(escape(format_transaction_line(transaction, currency_symbol)))


def render_sort(session: LedgerSession) -> None:
    keys = "/".join(k.value for k in SortKey)
    key = ask(f"Sort by ({keys})")
    try:
        applied = session.sort(key)
    except InvalidSortKeyError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return

    if applied:
        console.print(f"Transactions sorted by {escape(key.strip().lower())}.")
    else:
        console.print(f"Unknown sort key {escape(repr(key))}; order unchanged.")


def render_save(session: LedgerSession) -> bool:
    """Save the ledger. Returns True if the shell should exit."""
    try:
        session.save()
    except StorageError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return False

    console.print("Data saved. Exiting...")
    return True


def run_menu(session: LedgerSession, currency_symbol: str) -> None:
    """Main loop. Returns after a successful save or end of input."""
    while True:
        console.print(MENU)
        try:
            choice = ask("Choose an option").strip()
        except EOFError:
            console.print("\nNo more input. Exiting without saving.")
            return

        try:
            if choice == "1":
                render_add_transaction(session)
            elif choice == "2":
                render_summary(session, currency_symbol)
            elif choice == "3":
                render_transactions(session, currency_symbol)
            elif choice == "4":
                render_sort(session)
            elif choice == "5":
                if render_save(session):
                    return
            else:
                console.print("Invalid option.")
        except EOFError:
            console.print("\nNo more input. Exiting without saving.")
            return


@app.command()
def main(
    file: Annotated[
        Optional[Path], typer.Option("--file", "-f", help="Ledger file to load and save")
    ] = None,
    strict_sort: Annotated[
        bool,
        typer.Option(
            "--strict-sort",
            help="Reject unknown sort keys instead of ignoring them",
        ),
    ] = False,
) -> None:
    """Run the interactive budget tracker."""
    settings = get_settings()
    app_settings = settings.app
    configure_logging(level=app_settings.effective_log_level, json=app_settings.log_json)

    session = create_app_components(
        file_path=file,
        strict_sort=True if strict_sort else None,
    )

    try:
        count = session.load()
    except (FormatError, ParseError, StorageError) as e:
        console.print(
            f"[red]Error:[/red] Could not load {escape(str(session.file_path))}: {escape(str(e))}"
        )
        raise typer.Exit(1)

    if count:
        console.print(f"Loaded {count} transactions from {escape(str(session.file_path))}.")

    run_menu(session, settings.display.currency_symbol)


if __name__ == "__main__":
    app()
