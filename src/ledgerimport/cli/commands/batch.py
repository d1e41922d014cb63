"""Import batch history commands."""

import click
from ledgerimport.cli.error_handling import fail, handle_domain_error
from ledgerimport.domain.errors import DomainError
from ledgerimport.domain.statement_import import StatementImportService


@click.group()
def batch_group():
    """View and undo statement imports."""
    pass


@batch_group.command("list")
@click.option("--account", "account_id", type=int, help="Account ID")
@click.pass_context
def list_batches(ctx, account_id: int | None):
    """List imports, newest first."""
    db = ctx.obj["db"]
    service = StatementImportService(db)

    batches = service.list_batches(account_id=account_id)
    if not batches:
        click.echo("No imports found.")
        return

    click.echo("\nImports:")
    click.echo("-" * 80)
    for b in batches:
        click.echo(
            f"ID: {b.id:3d} | {b.created_at:%Y-%m-%d %H:%M} | Account: {b.account_id} | "
            f"{b.record_count:4d} transactions | {b.filename}"
        )


@batch_group.command("show")
@click.argument("batch_id", type=int)
@click.option("--source", is_flag=True, help="Print the archived statement text")
@click.pass_context
def show_batch(ctx, batch_id: int, source: bool):
    """Show one import."""
    db = ctx.obj["db"]
    service = StatementImportService(db)

    b = service.get_batch(batch_id)
    if b is None:
        fail(ctx, f"Import batch {batch_id} not found")

    click.echo(f"Import {b.id}")
    click.echo(f"  File: {b.filename}")
    click.echo(f"  Account: {b.account_id}")
    click.echo(f"  Imported at: {b.created_at:%Y-%m-%d %H:%M:%S}")
    click.echo(f"  Transactions: {b.record_count}")
    if source:
        click.echo("")
        click.echo(b.source_text)


@batch_group.command("delete")
@click.argument("batch_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_batch(ctx, batch_id: int, yes: bool):
    """Undo an import, deleting every transaction it created."""
    db = ctx.obj["db"]
    service = StatementImportService(db)

    if not yes:
        click.confirm(
            f"Deleting import {batch_id} removes ALL transactions created by it. Continue?",
            abort=True,
        )

    try:
        result = service.delete_batch(batch_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not result.found:
        click.echo(f"Import batch {batch_id} not found, nothing deleted.")
        return
    click.echo(f"Deleted import {batch_id} and {result.removed_entry_count} transactions")


def register_commands(cli):
    """Register batch commands with main CLI."""
    cli.add_command(batch_group, name="batch")
