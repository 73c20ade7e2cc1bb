"""Application service: product use cases.

Besides create and list, this owns the price-change cascade: after a
product's price changes, every menu that contains the product has its
visibility re-evaluated against the current prices of all its products.
"""

from __future__ import annotations

import logging
import uuid
from uuid import UUID

from kitchenpos.application.dto import ChangePriceRequest, CreateProductRequest
from kitchenpos.domain.exceptions import EntityNotFoundError, ValidationError
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.profanity import ProfanityChecker
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        menu_repo: MenuRepository,
        profanity_checker: ProfanityChecker,
    ) -> None:
        self._product_repo = product_repo
        self._menu_repo = menu_repo
        self._profanity_checker = profanity_checker
        self._pricing = MenuPricingService(product_repo)

    def create(self, request: CreateProductRequest) -> Product:
        """Register a new product.

        All checks run before anything is written.
        """
        price = Money.of(request.price)

        name = request.name
        if name is None or not name.strip():
            raise ValidationError("Product name is required")
        if self._profanity_checker.contains_profanity(name):
            raise ValidationError(f"Product name '{name}' contains profanity")

        product = self._product_repo.save(
            Product(id=uuid.uuid4(), name=name, price=price)
        )
        logger.info(
            "Product created",
            extra={"product_id": str(product.id), "price": str(product.price)},
        )
        return product

    def change_price(self, product_id: UUID, request: ChangePriceRequest) -> Product:
        """Change a product's price and re-evaluate the menus containing it.

        Steps:
        1. Validate the new price (before any lookup).
        2. Load the product, fail if absent.
        3. Update and persist the product.
        4. For each menu containing it, recompute ``displayed`` from
           current prices and persist the menu.
        """
        price = Money.of(request.price)

        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")

        product.change_price(price)
        product = self._product_repo.save(product)
        logger.info(
            "Product price changed",
            extra={"product_id": str(product.id), "price": str(price)},
        )

        menus = self._menu_repo.find_all_by_product_id(product.id)
        for menu in menus:
            self._pricing.refresh_displayed(menu)
            self._menu_repo.save(menu)
        logger.debug(
            "Re-evaluated menus after price change",
            extra={"product_id": str(product.id), "menu_count": len(menus)},
        )

        return product

    def find_all(self) -> list[Product]:
        return self._product_repo.find_all()
