"""Port for the external profanity check.

The domain only needs a yes/no answer; the HTTP adapter lives in
``kitchenpos.infrastructure.profanity``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProfanityChecker(ABC):

    @abstractmethod
    def contains_profanity(self, text: str) -> bool:
        """Return True if *text* contains a profane word."""
