"""Abstract repository for the Menu aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from uuid import UUID

from kitchenpos.domain.model.menu import Menu


class MenuRepository(ABC):

    @abstractmethod
    def save(self, menu: Menu) -> Menu:
        """Persist a new or updated menu and return it."""

    @abstractmethod
    def find_by_id(self, menu_id: UUID) -> Menu | None:
        """Return a menu by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Menu]:
        """Return every menu."""

    @abstractmethod
    def find_all_by_id_in(self, ids: Iterable[UUID] | None) -> list[Menu]:
        """Return the menus whose IDs are in *ids* (empty for None/empty)."""

    @abstractmethod
    def find_all_by_product_id(self, product_id: UUID) -> list[Menu]:
        """Return every menu with an entry for *product_id*."""
