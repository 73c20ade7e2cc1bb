"""Application service: menu group use cases."""

from __future__ import annotations

import logging
import uuid

from kitchenpos.application.dto import CreateMenuGroupRequest
from kitchenpos.domain.exceptions import ValidationError
from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository

logger = logging.getLogger(__name__)


class MenuGroupService:

    def __init__(self, menu_group_repo: MenuGroupRepository) -> None:
        self._menu_group_repo = menu_group_repo

    def create(self, request: CreateMenuGroupRequest) -> MenuGroup:
        name = request.name
        if name is None or not name.strip():
            raise ValidationError("Menu group name is required")

        menu_group = self._menu_group_repo.save(MenuGroup(id=uuid.uuid4(), name=name))
        logger.info(
            "Menu group created",
            extra={"menu_group_id": str(menu_group.id), "menu_group_name": name},
        )
        return menu_group

    def find_all(self) -> list[MenuGroup]:
        return self._menu_group_repo.find_all()
