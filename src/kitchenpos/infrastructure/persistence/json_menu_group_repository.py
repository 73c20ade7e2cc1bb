"""JSON-file-backed implementation of MenuGroupRepository."""

from __future__ import annotations

import json
from pathlib import Path
from uuid import UUID

from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository


class JsonMenuGroupRepository(MenuGroupRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def save(self, menu_group: MenuGroup) -> MenuGroup:
        records = [r for r in self._load_raw() if r["id"] != str(menu_group.id)]
        records.append({"id": str(menu_group.id), "name": menu_group.name})
        self._persist_raw(records)
        return menu_group

    def find_by_id(self, menu_group_id: UUID) -> MenuGroup | None:
        for raw in self._load_raw():
            if raw["id"] == str(menu_group_id):
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[MenuGroup]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    @staticmethod
    def _to_domain(raw: dict) -> MenuGroup:
        return MenuGroup(id=UUID(raw["id"]), name=raw["name"])

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
