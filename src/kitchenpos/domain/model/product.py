"""Product aggregate.

Products are referenced by menus but live on their own: a price change
happens here first and is then propagated to the menus that contain it.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from kitchenpos.domain.model.value_objects import Money


@dataclass
class Product:
    """A sellable product.

    Kept mutable because a price change is a legitimate mutation on
    the aggregate; the name never changes after creation.
    """

    id: UUID
    name: str
    price: Money

    def change_price(self, new_price: Money) -> None:
        self.price = new_price
