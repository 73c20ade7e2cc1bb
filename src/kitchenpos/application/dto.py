"""Request objects: plain containers that cross layer boundaries.

Fields are loosely typed and optional: they carry raw
input from the outside, and the services are the ones that reject a
missing name or price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

PriceInput = str | int | float | Decimal | None


@dataclass(frozen=True)
class CreateMenuGroupRequest:
    name: str | None


@dataclass(frozen=True)
class CreateProductRequest:
    name: str | None
    price: PriceInput


@dataclass(frozen=True)
class ChangePriceRequest:
    """New price for a product or a menu."""

    price: PriceInput


@dataclass(frozen=True)
class MenuProductSpec:
    """Input: a product id and how many of it the menu includes."""

    product_id: UUID
    quantity: int


@dataclass(frozen=True)
class CreateMenuRequest:
    name: str | None
    price: PriceInput
    menu_group_id: UUID | None
    menu_products: list[MenuProductSpec] = field(default_factory=list)
    displayed: bool = True
