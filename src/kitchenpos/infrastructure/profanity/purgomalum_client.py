"""PurgoMalum API client - implements the ProfanityChecker port.

Calls ``GET /service/containsprofanity?text=...``, which answers with a
plain-text ``true`` or ``false`` body.

Example:
    >>> with PurgomalumClient() as client:
    ...     client.contains_profanity("bulgogi burger")
    False
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from kitchenpos.domain.profanity import ProfanityChecker
from kitchenpos.infrastructure.config import get_http_timeout, get_purgomalum_url

logger = logging.getLogger(__name__)


class PurgomalumClient(ProfanityChecker):
    """
    HTTP adapter for the PurgoMalum profanity filter.

    Network errors and non-2xx answers are logged and re-raised as
    ``httpx.HTTPError``; nothing is retried here.
    """

    PATH = "/service/containsprofanity"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url or get_purgomalum_url()
        self._timeout = timeout if timeout is not None else get_http_timeout()
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "PurgomalumClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _http(self) -> httpx.Client:
        # opened on first check
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            )
        return self._client

    def contains_profanity(self, text: str) -> bool:
        logger.debug("Checking text for profanity", extra={"text": text})

        try:
            response = self._http().get(self.PATH, params={"text": text})
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning(
                "PurgoMalum request failed",
                extra={"error": str(exc)},
            )
            raise

        body = response.text.strip().lower()
        if body not in ("true", "false"):
            logger.warning(
                "Unexpected PurgoMalum response",
                extra={"body": response.text[:100]},
            )
            raise httpx.DecodingError(
                f"Unexpected response body: {response.text!r}",
                request=response.request,
            )

        return body == "true"
