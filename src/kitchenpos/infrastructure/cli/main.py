import logging

import click

from kitchenpos.infrastructure.cli.menu_commands import (
    menu_change_price,
    menu_create,
    menu_display,
    menu_hide,
    menu_list,
)
from kitchenpos.infrastructure.cli.menu_group_commands import (
    menu_group_create,
    menu_group_list,
)
from kitchenpos.infrastructure.cli.product_commands import (
    product_change_price,
    product_create,
    product_list,
)
from kitchenpos.infrastructure.config import get_log_level


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """kitchenpos: products, menu groups and menus"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group("menu-group")
def menu_group() -> None:
    """Manage menu groups."""


@cli.group()
def menu() -> None:
    """Manage menus."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_change_price)
product.add_command(product_list)
menu_group.add_command(menu_group_create)
menu_group.add_command(menu_group_list)
menu.add_command(menu_create)
menu.add_command(menu_change_price)
menu.add_command(menu_display)
menu.add_command(menu_hide)
menu.add_command(menu_list)
