"""Shared pytest fixtures for ledgerimport tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
from pathlib import Path
import pytest

from ledgerimport.database.factories import create_sqlite_database
from ledgerimport.domain.entities import Direction
from ledgerimport.domain.ledger import LedgerService
from ledgerimport.domain.rule_service import RuleService
from ledgerimport.domain.statement_import import StatementImportService

ACCOUNT_ID = 1
OTHER_ACCOUNT_ID = 2


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def import_service(temp_db):
    """Create a StatementImportService with a temporary database."""
    return StatementImportService(temp_db, max_statement_bytes=1024 * 1024)


@pytest.fixture
def rule_service(temp_db):
    """Create a RuleService with a temporary database."""
    return RuleService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def add_entry(temp_db):
    """Insert a manual ledger entry and return its ID."""

    def _add_entry(
        entry_date: date,
        amount: str,
        direction: Direction = Direction.OUTFLOW,
        description: str = "Existing",
        account_id: int = ACCOUNT_ID,
        import_batch_id: int | None = None,
    ) -> int:
        return temp_db.create_ledger_entry(
            account_id=account_id,
            date=entry_date,
            amount=Decimal(amount),
            direction=direction,
            description=description,
            import_batch_id=import_batch_id,
        )

    return _add_entry


@pytest.fixture
def statement():
    """Build statement text from (YYYYMMDD, amount, memo) tuples."""

    def _statement(*records: tuple[str, str, str]) -> str:
        lines = [
            "OFXHEADER:100",
            "DATA:OFXSGML",
            "",
            "<OFX>",
            "<BANKMSGSRSV1><STMTTRNRS><STMTRS>",
            "<BANKTRANLIST>",
        ]
        for posted, amount, memo in records:
            lines += [
                "<STMTTRN>",
                "<TRNTYPE>OTHER",
                f"<DTPOSTED>{posted}120000[-3:BRT]",
                f"<TRNAMT>{amount}",
                f"<MEMO>{memo}",
                "</STMTTRN>",
            ]
        lines += ["</BANKTRANLIST>", "</STMTRS></STMTTRNRS></BANKMSGSRSV1>", "</OFX>"]
        return "\n".join(lines)

    return _statement


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
