"""Menu aggregate: a priced bundle of products.

The Menu owns its MenuProduct entries. Each entry holds only the id of
the product it refers to; current prices are always resolved through
the product repository and handed in as a ``{product_id: Money}``
mapping, so a menu never works from a stale copy of a product.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from kitchenpos.domain.exceptions import EntityNotFoundError, ValidationError
from kitchenpos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class MenuProduct:
    """A (product, quantity) pairing inside one menu."""

    product_id: UUID
    quantity: Quantity
    seq: int | None = None

    def line_price(self, unit_price: Money) -> Money:
        return unit_price * self.quantity.value


@dataclass
class Menu:
    """Aggregate root for menus.

    Invariant:
    - ``displayed`` is False whenever ``price`` exceeds the sum of the
      current product prices times their quantities.

    The constructor does not validate so repositories can rebuild
    persisted menus as-is; ``MenuService`` checks new menus.
    """

    id: UUID
    name: str
    price: Money
    menu_group_id: UUID
    menu_products: list[MenuProduct] = field(default_factory=list)
    displayed: bool = True

    @property
    def product_ids(self) -> list[UUID]:
        return [mp.product_id for mp in self.menu_products]

    def contains_product(self, product_id: UUID) -> bool:
        return any(mp.product_id == product_id for mp in self.menu_products)

    # --- Pricing --------------------------------------------------------------

    def product_total(self, prices: dict[UUID, Money]) -> Money:
        """Sum of unit price × quantity over every entry."""
        total = Money.zero()
        for mp in self.menu_products:
            unit_price = prices.get(mp.product_id)
            if unit_price is None:
                raise EntityNotFoundError(
                    f"Product '{mp.product_id}' of menu '{self.name}' not found"
                )
            total = total + mp.line_price(unit_price)
        return total

    def is_priced_within(self, prices: dict[UUID, Money]) -> bool:
        return self.price <= self.product_total(prices)

    # --- Mutations ------------------------------------------------------------

    def refresh_displayed(self, prices: dict[UUID, Money]) -> bool:
        """Re-evaluate visibility against current product prices.

        Sets ``displayed`` explicitly in both directions: a menu hidden
        because its products got cheaper is shown again once they are
        priced back up. Returns the new value.
        """
        self.displayed = self.is_priced_within(prices)
        return self.displayed

    def change_price(self, new_price: Money, prices: dict[UUID, Money]) -> None:
        total = self.product_total(prices)
        if new_price > total:
            raise ValidationError(
                f"Menu price {new_price} exceeds the sum of its products {total}"
            )
        self.price = new_price

    def display(self, prices: dict[UUID, Money]) -> None:
        total = self.product_total(prices)
        if self.price > total:
            raise ValidationError(
                f"Cannot display menu '{self.name}': price {self.price} "
                f"exceeds the sum of its products {total}"
            )
        self.displayed = True

    def hide(self) -> None:
        self.displayed = False
