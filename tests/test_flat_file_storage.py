"""Tests for the pipe-delimited ledger file."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from budget_tracker.exceptions import FormatError, ParseError, StorageError
from budget_tracker.models.transaction import TransactionKind
from budget_tracker.services.storage import FlatFileLedgerStorage


@pytest.fixture
def storage():
    return FlatFileLedgerStorage()


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "transactions.txt"


class TestSave:
    """Tests for writing the ledger file."""

    def test_writes_one_line_per_record(self, storage, ledger_path, sample_transactions):
        """Test the pipe-delimited line layout."""
        count = storage.save(ledger_path, sample_transactions)

        lines = ledger_path.read_text(encoding="utf-8").splitlines()
        assert count == len(sample_transactions)
        assert len(lines) == len(sample_transactions)
        assert lines[0] == "Salary|2500.00|Income|Job|2024-01-01"
        assert lines[2] == "Lunch|12.50|Expense|Food|2024-01-02"

    def test_amount_has_no_exponent(self, storage, ledger_path, make_tx):
        """Test fixed-point amount output."""
        storage.save(ledger_path, [make_tx(amount="1E+3")])
        assert ledger_path.read_text(encoding="utf-8") == "Groceries|1000|Expense|Food|2024-01-15\n"

    def test_overwrites_existing_file(self, storage, ledger_path, make_tx):
        """Test that save replaces earlier content."""
        ledger_path.write_text("old content\n", encoding="utf-8")
        storage.save(ledger_path, [make_tx()])
        assert "old content" not in ledger_path.read_text(encoding="utf-8")

    def test_empty_ledger_writes_empty_file(self, storage, ledger_path):
        """Test saving an empty ledger."""
        assert storage.save(ledger_path, []) == 0
        assert ledger_path.read_text(encoding="utf-8") == ""

    def test_missing_directory_raises_storage_error(self, storage, tmp_path, make_tx):
        """Test write failures are wrapped."""
        with pytest.raises(StorageError, match="Could not write"):
            storage.save(tmp_path / "missing" / "transactions.txt", [make_tx()])

    def test_storage_error_is_an_os_error(self, storage, tmp_path, make_tx):
        """Test StorageError is still an OSError."""
        with pytest.raises(OSError):
            storage.save(tmp_path, [make_tx()])


class TestLoad:
    """Tests for reading the ledger file."""

    def test_missing_file_is_empty_ledger(self, storage, ledger_path):
        """Test that a missing file loads as empty."""
        assert storage.load(ledger_path) == []

    def test_parses_fields(self, storage, ledger_path):
        """Test field parsing from one line."""
        ledger_path.write_text("Coffee|3.20|expense|Food|2024-02-29\n", encoding="utf-8")

        [transaction] = storage.load(ledger_path)

        assert transaction.description == "Coffee"
        assert transaction.amount == Decimal("3.20")
        assert transaction.kind == TransactionKind.EXPENSE
        assert transaction.category == "Food"
        assert transaction.date == date(2024, 2, 29)

    def test_skips_blank_lines(self, storage, ledger_path):
        """Test that blank lines are ignored."""
        ledger_path.write_text(
            "A|1|Income|Job|2024-01-01\n\nB|2|Expense|Food|2024-01-02\n\n",
            encoding="utf-8",
        )
        assert [t.description for t in storage.load(ledger_path)] == ["A", "B"]

    def test_accepts_windows_line_endings(self, storage, ledger_path):
        """Test CRLF line endings."""
        ledger_path.write_bytes(b"A|1|Income|Job|2024-01-01\r\nB|2|Expense|Food|2024-01-02\r\n")
        loaded = storage.load(ledger_path)
        assert [t.date for t in loaded] == [date(2024, 1, 1), date(2024, 1, 2)]

    def test_four_fields_raises_format_error(self, storage, ledger_path):
        """Test a short line with its line number."""
        ledger_path.write_text(
            "A|1|Income|Job|2024-01-01\nLunch|12.50|Expense|Food\n",
            encoding="utf-8",
        )
        with pytest.raises(FormatError, match="line 2") as exc_info:
            storage.load(ledger_path)
        assert exc_info.value.line_number == 2

    def test_six_fields_raises_format_error(self, storage, ledger_path):
        """Test a line with an extra field."""
        ledger_path.write_text("A|1|Income|Job|2024-01-01|extra\n", encoding="utf-8")
        with pytest.raises(FormatError):
            storage.load(ledger_path)

    @pytest.mark.parametrize("line", [
        "Lunch|twelve|Expense|Food|2024-01-02",
        "Lunch|NaN|Expense|Food|2024-01-02",
        "Lunch|12.50|Expense|Food|02/01/2024",
        "Lunch|12.50|Expense|Food|2024-02-30",
        "Lunch|12.50|Transfer|Food|2024-01-02",
    ])
    def test_bad_field_raises_parse_error(self, storage, ledger_path, line):
        """Test unparseable fields on load."""
        ledger_path.write_text(line + "\n", encoding="utf-8")
        with pytest.raises(ParseError, match="line 1"):
            storage.load(ledger_path)

    def test_unreadable_path_raises_storage_error(self, storage, tmp_path):
        """Test that a directory path cannot be read."""
        with pytest.raises(StorageError, match="Could not read"):
            storage.load(tmp_path)

    def test_permission_error_raises_storage_error(self, storage, ledger_path, monkeypatch):
        """Test that errors other than a missing file are wrapped, not swallowed."""
        def deny(*args, **kwargs):
            raise PermissionError("permission denied")

        monkeypatch.setattr(Path, "open", deny)
        with pytest.raises(StorageError, match="permission denied"):
            storage.load(ledger_path)


class TestRoundTrip:
    """Tests for save followed by load."""

    def test_save_then_load_reproduces_records(self, storage, ledger_path, sample_transactions):
        """Test a plain round trip."""
        storage.save(ledger_path, sample_transactions)
        assert storage.load(ledger_path) == sample_transactions

    def test_round_trip_keeps_full_precision(self, storage, ledger_path, make_tx):
        """Test that amount precision survives."""
        records = [make_tx(amount="0.005"), make_tx(amount="-4"), make_tx(amount="1000000.10")]
        storage.save(ledger_path, records)
        assert storage.load(ledger_path) == records

    def test_round_trip_keeps_unicode(self, storage, ledger_path, make_tx):
        """Test non-ASCII text survives."""
        records = [make_tx(description="Café crème", category="Café")]
        storage.save(ledger_path, records)
        assert storage.load(ledger_path) == records

    def test_delimiter_in_description_breaks_round_trip(self, storage, ledger_path, make_tx):
        """Known limitation: fields are not escaped."""
        storage.save(ledger_path, [make_tx(description="Fish|Chips")])
        with pytest.raises(FormatError):
            storage.load(ledger_path)

    def test_delimiter_in_category_breaks_round_trip(self, storage, ledger_path, make_tx):
        """Test the same limitation for categories."""
        storage.save(ledger_path, [make_tx(category="Food|Drink")])
        with pytest.raises(FormatError):
            storage.load(ledger_path)

    def test_delimiter_is_warned_about_on_save(self, ledger_path, make_tx, recording_logger):
        """Test the save-time warning for unsafe text."""
        storage = FlatFileLedgerStorage()
        storage._logger = recording_logger

        storage.save(ledger_path, [make_tx(), make_tx(description="Fish|Chips")])

        warnings = [c for c in recording_logger.calls if c[0] == "warning"]
        assert len(warnings) == 1
        assert warnings[0][1] == "record_will_not_round_trip"
        assert warnings[0][2]["record_index"] == 1
        assert warnings[0][2]["field"] == "description"
