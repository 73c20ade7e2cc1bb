"""CLI commands for the Product aggregate."""

from __future__ import annotations

from uuid import UUID

import click

from kitchenpos.application.dto import ChangePriceRequest, CreateProductRequest
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.infrastructure.bootstrap import product_service


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 16000).")
def product_create(name: str, price: str) -> None:
    """Register a new product."""
    service = product_service()

    try:
        product = service.create(CreateProductRequest(name=name, price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' created at {product.price}")


@click.command("change-price")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--price", required=True, help="New price.")
def product_change_price(product_id: UUID, price: str) -> None:
    """Change a product's price (re-checks the menus that use it)."""
    service = product_service()

    try:
        product = service.change_price(product_id, ChangePriceRequest(price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} price changed to {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products."""
    products = product_service().find_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10}")
    click.echo("-" * 68)
    for p in products:
        click.echo(f"{str(p.id):<36} {p.name:<20} {str(p.price):>10}")
