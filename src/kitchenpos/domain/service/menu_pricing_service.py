"""Domain service: Menu Pricing.

Menus reference products by id only. This service resolves those ids to
current prices through the product repository, so every price check on
a menu sees the latest product prices rather than a copy taken when the
menu was built.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class MenuPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def prices_for(self, product_ids: Iterable[UUID]) -> dict[UUID, Money]:
        """Map every requested product id to its current price.

        Raises EntityNotFoundError if any id has no stored product.
        """
        wanted = set(product_ids)
        products = self._product_repo.find_all_by_id_in(wanted)
        prices = {p.id: p.price for p in products}

        missing = wanted - prices.keys()
        if missing:
            raise EntityNotFoundError(
                "Products not found: " + ", ".join(sorted(str(i) for i in missing))
            )
        return prices

    def prices_for_menu(self, menu: Menu) -> dict[UUID, Money]:
        return self.prices_for(menu.product_ids)

    def refresh_displayed(self, menu: Menu) -> bool:
        """Recompute ``menu.displayed`` from current product prices."""
        was_displayed = menu.displayed
        displayed = menu.refresh_displayed(self.prices_for_menu(menu))
        if was_displayed != displayed:
            logger.info(
                "Menu visibility changed",
                extra={"menu_id": str(menu.id), "displayed": displayed},
            )
        return displayed
