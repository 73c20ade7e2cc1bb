"""Application service: menu use cases.

Coordinates three aggregates: the menu group a menu is filed under, the
products it bundles, and the menu itself. Product prices are always read
through ``MenuPricingService``.
"""

from __future__ import annotations

import logging
import uuid
from uuid import UUID

from kitchenpos.application.dto import ChangePriceRequest, CreateMenuRequest
from kitchenpos.domain.exceptions import EntityNotFoundError, ValidationError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.profanity import ProfanityChecker
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService

logger = logging.getLogger(__name__)


class MenuService:

    def __init__(
        self,
        menu_repo: MenuRepository,
        menu_group_repo: MenuGroupRepository,
        product_repo: ProductRepository,
        profanity_checker: ProfanityChecker,
    ) -> None:
        self._menu_repo = menu_repo
        self._menu_group_repo = menu_group_repo
        self._pricing = MenuPricingService(product_repo)
        self._profanity_checker = profanity_checker

    def create(self, request: CreateMenuRequest) -> Menu:
        """Create a menu from existing products.

        Steps:
        1. Validate the price and resolve the menu group.
        2. Build MenuProducts; every product must exist.
        3. The price may not exceed the sum of its products.
        4. Validate the name last, since it needs the remote check.
        """
        price = Money.of(request.price)

        if request.menu_group_id is None:
            raise ValidationError("Menu group is required")
        menu_group = self._menu_group_repo.find_by_id(request.menu_group_id)
        if menu_group is None:
            raise EntityNotFoundError(f"Menu group '{request.menu_group_id}' not found")

        if not request.menu_products:
            raise ValidationError("Menu must contain at least one product")

        menu_products = [
            MenuProduct(product_id=spec.product_id, quantity=Quantity(spec.quantity), seq=seq)
            for seq, spec in enumerate(request.menu_products, start=1)
        ]

        try:
            prices = self._pricing.prices_for(mp.product_id for mp in menu_products)
        except EntityNotFoundError as exc:
            raise ValidationError(str(exc)) from exc

        menu = Menu(
            id=uuid.uuid4(),
            name=request.name or "",
            price=price,
            menu_group_id=menu_group.id,
            menu_products=menu_products,
            displayed=request.displayed,
        )
        total = menu.product_total(prices)
        if price > total:
            raise ValidationError(
                f"Menu price {price} exceeds the sum of its products {total}"
            )

        name = request.name
        if name is None or not name.strip():
            raise ValidationError("Menu name is required")
        if self._profanity_checker.contains_profanity(name):
            raise ValidationError(f"Menu name '{name}' contains profanity")

        menu = self._menu_repo.save(menu)
        logger.info(
            "Menu created",
            extra={"menu_id": str(menu.id), "price": str(menu.price)},
        )
        return menu

    def change_price(self, menu_id: UUID, request: ChangePriceRequest) -> Menu:
        price = Money.of(request.price)
        menu = self._get(menu_id)

        menu.change_price(price, self._pricing.prices_for_menu(menu))
        menu = self._menu_repo.save(menu)
        logger.info(
            "Menu price changed",
            extra={"menu_id": str(menu.id), "price": str(price)},
        )
        return menu

    def display(self, menu_id: UUID) -> Menu:
        menu = self._get(menu_id)
        menu.display(self._pricing.prices_for_menu(menu))
        return self._menu_repo.save(menu)

    def hide(self, menu_id: UUID) -> Menu:
        menu = self._get(menu_id)
        menu.hide()
        return self._menu_repo.save(menu)

    def find_all(self) -> list[Menu]:
        return self._menu_repo.find_all()

    def _get(self, menu_id: UUID) -> Menu:
        menu = self._menu_repo.find_by_id(menu_id)
        if menu is None:
            raise EntityNotFoundError(f"Menu '{menu_id}' not found")
        return menu
