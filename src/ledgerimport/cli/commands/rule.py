"""Categorization rule commands."""

import click
from ledgerimport.cli.error_handling import handle_domain_error
from ledgerimport.domain.entities import Direction
from ledgerimport.domain.errors import DomainError
from ledgerimport.domain.rule_service import RuleService


@click.group()
def rule_group():
    """Manage keyword categorization rules."""
    pass


@rule_group.command("create")
@click.argument("keyword")
@click.option(
    "--direction",
    required=True,
    type=click.Choice([d.value for d in Direction], case_sensitive=False),
    help="Apply to inflows or outflows",
)
@click.option("--category", "category_id", required=True, type=int, help="Category ID to assign")
@click.option("--account", "account_id", type=int, help="Limit the rule to one account ID (default: all accounts)")
@click.pass_context
def create_rule(ctx, keyword: str, direction: str, category_id: int, account_id: int | None):
    """Create a rule. Rules are evaluated in creation order; first match wins.

    Examples:
        ledgerimport rule create "UBER" --direction outflow --category 4
        ledgerimport rule create "SALARY" --direction inflow --category 1 --account 2
    """
    db = ctx.obj["db"]
    service = RuleService(db)

    try:
        rule_id = service.create_rule(
            keyword=keyword,
            direction=direction.lower(),
            category_id=category_id,
            account_id=account_id,
        )
        scope = f"account {account_id}" if account_id is not None else "all accounts"
        click.echo(f"Created rule '{keyword.strip()}' for {scope} (ID: {rule_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@rule_group.command("list")
@click.option("--account", "account_id", type=int, help="Only rules that apply to this account ID")
@click.pass_context
def list_rules(ctx, account_id: int | None):
    """List rules in evaluation order."""
    db = ctx.obj["db"]
    service = RuleService(db)

    rules = service.list_rules(account_id=account_id)
    if not rules:
        click.echo("No rules found.")
        return

    click.echo("\nRules:")
    click.echo("-" * 70)
    for r in rules:
        scope = "all accounts" if r.is_global else f"account {r.account_id}"
        click.echo(
            f"ID: {r.id:3d} | {r.keyword:20s} | {r.direction.value:7s} | "
            f"Category: {r.category_id} | {scope}"
        )


@rule_group.command("delete")
@click.argument("rule_id", type=int)
@click.pass_context
def delete_rule(ctx, rule_id: int):
    """Delete a rule."""
    db = ctx.obj["db"]
    service = RuleService(db)

    try:
        service.delete_rule(rule_id)
        click.echo(f"Deleted rule {rule_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register rule commands with main CLI."""
    cli.add_command(rule_group, name="rule")
