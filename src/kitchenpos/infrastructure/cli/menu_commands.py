"""CLI commands for the Menu aggregate."""

from __future__ import annotations

from uuid import UUID

import click

from kitchenpos.application.dto import (
    ChangePriceRequest,
    CreateMenuRequest,
    MenuProductSpec,
)
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.infrastructure.bootstrap import menu_service


def _parse_products(raw: str) -> list[MenuProductSpec]:
    """Parse '<uuid>:2,<uuid>:1' into MenuProductSpec list."""
    specs: list[MenuProductSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid product format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = UUID(id_str.strip())
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{id_str}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{id_str}'."
            )
        specs.append(MenuProductSpec(product_id=product_id, quantity=qty))
    return specs


@click.command("create")
@click.option("--name", required=True, help="Menu name.")
@click.option("--price", required=True, help="Menu price.")
@click.option("--group", "group_id", required=True, type=click.UUID, help="Menu group ID.")
@click.option("--products", required=True, help="Products as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--hidden", is_flag=True, default=False, help="Create the menu hidden.")
def menu_create(name: str, price: str, group_id: UUID, products: str, hidden: bool) -> None:
    """Create a menu from existing products."""
    request = CreateMenuRequest(
        name=name,
        price=price,
        menu_group_id=group_id,
        menu_products=_parse_products(products),
        displayed=not hidden,
    )

    try:
        menu = menu_service().create(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "displayed" if menu.displayed else "hidden"
    click.echo(f"Menu {menu.id} '{menu.name}' created at {menu.price} ({state})")


@click.command("change-price")
@click.option("--id", "menu_id", required=True, type=click.UUID, help="Menu ID.")
@click.option("--price", required=True, help="New price.")
def menu_change_price(menu_id: UUID, price: str) -> None:
    """Change a menu's price."""
    try:
        menu = menu_service().change_price(menu_id, ChangePriceRequest(price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu.id} price changed to {menu.price}")


@click.command("display")
@click.option("--id", "menu_id", required=True, type=click.UUID, help="Menu ID.")
def menu_display(menu_id: UUID) -> None:
    """Show a menu to customers."""
    try:
        menu_service().display(menu_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu_id} displayed.")


@click.command("hide")
@click.option("--id", "menu_id", required=True, type=click.UUID, help="Menu ID.")
def menu_hide(menu_id: UUID) -> None:
    """Hide a menu from customers."""
    try:
        menu_service().hide(menu_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu_id} hidden.")


@click.command("list")
def menu_list() -> None:
    """List all menus."""
    menus = menu_service().find_all()

    if not menus:
        click.echo("No menus found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10} {'Shown':>6}")
    click.echo("-" * 75)
    for m in menus:
        shown = "yes" if m.displayed else "no"
        click.echo(f"{str(m.id):<36} {m.name:<20} {str(m.price):>10} {shown:>6}")
