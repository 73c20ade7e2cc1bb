"""CLI commands for the MenuGroup aggregate."""

from __future__ import annotations

import click

from kitchenpos.application.dto import CreateMenuGroupRequest
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.infrastructure.bootstrap import menu_group_service


@click.command("create")
@click.option("--name", required=True, help="Menu group name.")
def menu_group_create(name: str) -> None:
    """Create a menu group."""
    try:
        menu_group = menu_group_service().create(CreateMenuGroupRequest(name=name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu group {menu_group.id} '{menu_group.name}' created")


@click.command("list")
def menu_group_list() -> None:
    """List all menu groups."""
    menu_groups = menu_group_service().find_all()

    if not menu_groups:
        click.echo("No menu groups found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20}")
    click.echo("-" * 57)
    for g in menu_groups:
        click.echo(f"{str(g.id):<36} {g.name:<20}")
