"""Statement import command."""

from pathlib import Path

import click
from ledgerimport.cli.date_filters import resolve_cli_date_range
from ledgerimport.cli.display import format_category, format_signed_amount
from ledgerimport.cli.error_handling import fail, handle_domain_error
from ledgerimport.config import MAX_STATEMENT_BYTES_ENV_VAR, get_max_statement_bytes
from ledgerimport.domain.entities import ConflictDecision, ImportMetadata, ImportPreview
from ledgerimport.domain.errors import DomainError
from ledgerimport.domain.resolver import ConflictResolver
from ledgerimport.domain.rule_service import RuleService
from ledgerimport.domain.statement_import import StatementImportService


def read_statement_text(path: Path) -> str:
    """Read a statement file, falling back to Latin-1 for legacy exports."""
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def print_preview(preview: ImportPreview) -> None:
    """Show what parsing and matching found."""
    total = len(preview.clean) + len(preview.conflicts)
    click.echo(
        f"Found {total} transactions: {len(preview.clean)} new, "
        f"{len(preview.conflicts)} possible duplicates"
    )
    if preview.ignored_count:
        click.echo(f"  Ignored by date filter: {preview.ignored_count}")
    if preview.parse_errors:
        click.echo(f"  Unreadable blocks: {preview.parse_error_count}")
        for error in preview.parse_errors:
            click.echo(f"    {error}", err=True)

    if preview.conflicts:
        click.echo("\nPossible duplicates:")
        for pair in preview.conflicts:
            old, new = pair.existing, pair.candidate
            click.echo(
                f"  [{pair.key}] {new.date} {format_signed_amount(new.amount, new.direction):>10s} | "
                f"existing #{old.id} '{old.description or ''}' vs new '{new.description}' "
                f"({format_category(new.category_id)})"
            )


@click.command("import")
@click.argument("statement_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--account", "account_id", required=True, type=int, help="Account ID to import into")
@click.option("--start-date", help="Ignore transactions before this date")
@click.option("--end-date", help="Ignore transactions after this date")
@click.option("--replace-all", is_flag=True, help="Replace every possible duplicate with the new transaction")
@click.option(
    "--replace",
    "replace_keys",
    multiple=True,
    type=int,
    help="Replace the duplicate with this number (repeatable)",
)
@click.option("--ask", is_flag=True, help="Ask for each possible duplicate")
@click.option("--dry-run", is_flag=True, help="Show what would be imported without saving")
@click.option(
    "--max-size",
    envvar=MAX_STATEMENT_BYTES_ENV_VAR,
    help="Largest accepted statement in bytes (default: 5 MiB)",
)
@click.pass_context
def import_statement(
    ctx,
    statement_file: str,
    account_id: int,
    start_date: str | None,
    end_date: str | None,
    replace_all: bool,
    replace_keys: tuple[int, ...],
    ask: bool,
    dry_run: bool,
    max_size: str | None,
):
    """Import transactions from a bank statement file.

    Possible duplicates (same date, amount and direction as an existing entry)
    keep the existing entry unless --replace-all, --replace or --ask says otherwise.

    Examples:
        ledgerimport import statement.ofx --account 1
        ledgerimport import statement.ofx --account 1 --start-date 2024-01-01 --replace 0 --replace 3
    """
    db = ctx.obj["db"]

    if sum(1 for chosen in (replace_all, bool(replace_keys), ask) if chosen) > 1:
        fail(ctx, "Use only one of --replace-all, --replace and --ask.")

    date_range = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date)

    path = Path(statement_file)
    try:
        service = StatementImportService(db, max_statement_bytes=get_max_statement_bytes(max_size))
        rules = RuleService(db).list_rules(account_id=account_id)
        raw_text = read_statement_text(path)
        preview = service.parse_and_match(raw_text, account_id, rules, date_range=date_range)
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_preview(preview)

    resolver = ConflictResolver(preview.conflicts)
    try:
        if replace_all:
            resolver.set_all(ConflictDecision.REPLACE_WITH_NEW)
        for key in replace_keys:
            resolver.set(key, ConflictDecision.REPLACE_WITH_NEW)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if ask:
        for pair, _ in resolver:
            if click.confirm(f"Replace existing entry #{pair.existing.id} with new [{pair.key}]?", default=False):
                resolver.set(pair.key, ConflictDecision.REPLACE_WITH_NEW)

    replacing = resolver.count(ConflictDecision.REPLACE_WITH_NEW)
    if dry_run:
        click.echo("\nDry run, nothing saved:")
        click.echo(f"  Would insert: {len(preview.clean) + replacing} transactions")
        click.echo(f"  Would remove: {replacing} existing entries")
        return

    total = len(preview.clean) + replacing
    metadata = ImportMetadata(filename=path.name, account_id=account_id, source_text=raw_text)
    try:
        with click.progressbar(length=max(total, 1), label="Importing") as bar:
            result = service.commit(
                preview.clean,
                preview.conflicts,
                resolver.decisions,
                metadata,
                ignored_count=preview.ignored_count,
                progress=lambda done, _total: bar.update(1),
            )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if result.is_noop:
        click.echo("\nNothing to import: every transaction is already in the ledger.")
        click.echo(f"  Kept existing: {result.kept}")
        return

    click.echo("\nImport complete:")
    click.echo(f"  Batch: {result.import_batch_id}")
    click.echo(f"  Inserted: {result.inserted} transactions")
    click.echo(f"  Removed: {result.removed} replaced entries")
    click.echo(f"  Kept existing: {result.kept}")
    click.echo(f"  Ignored by date filter: {result.ignored}")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statement)
