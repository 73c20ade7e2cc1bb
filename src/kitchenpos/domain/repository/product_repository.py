"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from uuid import UUID

from kitchenpos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product and return it."""

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def find_all_by_id_in(self, ids: Iterable[UUID] | None) -> list[Product]:
        """Return the products whose IDs are in *ids*.

        ``None`` and an empty collection both yield an empty list.
        """
