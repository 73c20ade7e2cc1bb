"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path
from uuid import UUID

from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        products = self._load()
        products[product.id] = product
        self._persist(products)
        return product

    def find_by_id(self, product_id: UUID) -> Product | None:
        return self._load().get(product_id)

    def find_all(self) -> list[Product]:
        return list(self._load().values())

    def find_all_by_id_in(self, ids: Iterable[UUID] | None) -> list[Product]:
        if ids is None:
            return []
        wanted = set(ids)
        if not wanted:
            return []
        return [p for p in self._load().values() if p.id in wanted]

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[UUID, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = (
            Product(
                id=UUID(item["id"]),
                name=item["name"],
                price=Money(Decimal(item["price"])),
            )
            for item in raw
        )
        return {p.id: p for p in products}

    def _persist(self, products: dict[UUID, Product]) -> None:
        raw = [
            {"id": str(p.id), "name": p.name, "price": str(p.price.amount)}
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
