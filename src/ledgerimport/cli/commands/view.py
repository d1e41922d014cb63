"""Ledger viewing command."""

import click
from ledgerimport.cli.display import format_category, format_signed_amount
from ledgerimport.domain.ledger import LedgerService


@click.command("view")
@click.option("--account", "account_id", type=int, help="Account ID")
@click.option("--batch", "batch_id", type=int, help="Only entries created by this import")
@click.pass_context
def view_entries(ctx, account_id: int | None, batch_id: int | None):
    """View ledger entries, oldest first."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    entries = service.list_entries(account_id=account_id, import_batch_id=batch_id)
    if not entries:
        click.echo("No transactions found.")
        return

    click.echo(
        f"{'ID':>5}  {'Date':10}  {'Amount':>10}  {'Category':13}  {'Import':>6}  Description"
    )
    click.echo("-" * 80)
    for e in entries:
        source = str(e.import_batch_id) if e.import_batch_id is not None else "-"
        click.echo(
            f"{e.id:5d}  {e.date.isoformat():10}  "
            f"{format_signed_amount(e.amount, e.direction):>10}  "
            f"{format_category(e.category_id):13}  {source:>6}  {e.description or ''}"
        )
    click.echo(f"\nTotal: {len(entries)} transactions")


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_entries)
