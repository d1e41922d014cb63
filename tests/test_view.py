"""Tests for the view command."""

from datetime import date
from ledgerimport.cli.main import cli
from ledgerimport.domain.entities import Direction


def test_view_entries(cli_runner, temp_db, add_entry):
    """Test listing ledger entries with signed amounts."""
    add_entry(date(2024, 1, 5), "120.00", description="SUPERMERCADO CENTRAL")
    add_entry(date(2024, 1, 6), "500.00", Direction.INFLOW, description="PIX RECEBIDO")

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "view"])

    assert result.exit_code == 0
    assert "-120.00" in result.output
    assert "500.00" in result.output
    assert "Uncategorized" in result.output
    assert "Total: 2 transactions" in result.output


def test_view_filters(cli_runner, temp_db, add_entry):
    """Test filtering by account and import."""
    batch_id = temp_db.create_import_batch("a.ofx", 1, 1, "")
    add_entry(date(2024, 1, 5), "1.00", description="FROM IMPORT", import_batch_id=batch_id)
    add_entry(date(2024, 1, 5), "2.00", description="MANUAL")
    add_entry(date(2024, 1, 5), "3.00", description="OTHER ACCOUNT", account_id=2)

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "view", "--batch", str(batch_id)]
    )
    assert "FROM IMPORT" in result.output
    assert "MANUAL" not in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "view", "--account", "2"]
    )
    assert "OTHER ACCOUNT" in result.output
    assert "Total: 1 transactions" in result.output


def test_view_empty(cli_runner, temp_db):
    """Test viewing an empty ledger."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "view"])

    assert result.exit_code == 0
    assert "No transactions found." in result.output
