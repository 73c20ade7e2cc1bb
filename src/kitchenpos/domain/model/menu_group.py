"""MenuGroup aggregate: a named category menus are filed under."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class MenuGroup:
    id: UUID
    name: str
