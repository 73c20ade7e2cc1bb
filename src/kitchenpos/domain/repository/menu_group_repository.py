"""Abstract repository for the MenuGroup aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from kitchenpos.domain.model.menu_group import MenuGroup


class MenuGroupRepository(ABC):

    @abstractmethod
    def save(self, menu_group: MenuGroup) -> MenuGroup:
        """Persist a menu group and return it."""

    @abstractmethod
    def find_by_id(self, menu_group_id: UUID) -> MenuGroup | None:
        """Return a menu group by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[MenuGroup]:
        """Return every menu group."""
