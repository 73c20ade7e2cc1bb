"""JSON-file-backed implementation of MenuRepository.

Menu products are stored as product ids with quantities; no product
data is copied into the menu file.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path
from uuid import UUID

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.menu_repository import MenuRepository


class JsonMenuRepository(MenuRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- MenuRepository interface ---------------------------------------------

    def save(self, menu: Menu) -> Menu:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(records):
            if raw["id"] == str(menu.id):
                records[i] = self._to_raw(menu)
                break
        else:
            records.append(self._to_raw(menu))

        self._persist_raw(records)
        return menu

    def find_by_id(self, menu_id: UUID) -> Menu | None:
        for raw in self._load_raw():
            if raw["id"] == str(menu_id):
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Menu]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def find_all_by_id_in(self, ids: Iterable[UUID] | None) -> list[Menu]:
        if ids is None:
            return []
        wanted = {str(i) for i in ids}
        if not wanted:
            return []
        return [self._to_domain(raw) for raw in self._load_raw() if raw["id"] in wanted]

    def find_all_by_product_id(self, product_id: UUID) -> list[Menu]:
        return [menu for menu in self.find_all() if menu.contains_product(product_id)]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(menu: Menu) -> dict:
        return {
            "id": str(menu.id),
            "name": menu.name,
            "price": str(menu.price.amount),
            "menu_group_id": str(menu.menu_group_id),
            "displayed": menu.displayed,
            "menu_products": [
                {
                    "seq": mp.seq,
                    "product_id": str(mp.product_id),
                    "quantity": mp.quantity.value,
                }
                for mp in menu.menu_products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Menu:
        return Menu(
            id=UUID(raw["id"]),
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            menu_group_id=UUID(raw["menu_group_id"]),
            menu_products=[
                MenuProduct(
                    product_id=UUID(mp["product_id"]),
                    quantity=Quantity(mp["quantity"]),
                    seq=mp.get("seq"),
                )
                for mp in raw["menu_products"]
            ],
            displayed=raw.get("displayed", True),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
