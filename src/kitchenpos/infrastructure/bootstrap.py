"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import click

from kitchenpos.application.menu_group_service import MenuGroupService
from kitchenpos.application.menu_service import MenuService
from kitchenpos.application.product_service import ProductService
from kitchenpos.infrastructure.config import get_data_dir
from kitchenpos.infrastructure.persistence.json_menu_group_repository import (
    JsonMenuGroupRepository,
)
from kitchenpos.infrastructure.persistence.json_menu_repository import (
    JsonMenuRepository,
)
from kitchenpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from kitchenpos.infrastructure.profanity.purgomalum_client import PurgomalumClient


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_data_dir() / "products.json")


def menu_repository() -> JsonMenuRepository:
    return JsonMenuRepository(get_data_dir() / "menus.json")


def menu_group_repository() -> JsonMenuGroupRepository:
    return JsonMenuGroupRepository(get_data_dir() / "menu_groups.json")


def profanity_checker() -> PurgomalumClient:
    """PurgoMalum client, closed together with the running click command."""
    client = PurgomalumClient()
    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        ctx.call_on_close(client.close)
    return client


def menu_group_service() -> MenuGroupService:
    return MenuGroupService(menu_group_repository())


def product_service() -> ProductService:
    return ProductService(
        product_repo=product_repository(),
        menu_repo=menu_repository(),
        profanity_checker=profanity_checker(),
    )


def menu_service() -> MenuService:
    return MenuService(
        menu_repo=menu_repository(),
        menu_group_repo=menu_group_repository(),
        product_repo=product_repository(),
        profanity_checker=profanity_checker(),
    )
