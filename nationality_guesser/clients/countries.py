"""Country lookup client — demonyms for ISO alpha-2 country codes.

Backed by the REST Countries v2 ``alpha`` endpoint, queried as
``?codes=US;GB``. Codes the service does not know come back as ``null``
entries or are omitted; both are dropped silently. When none of the codes
match the service answers 404, which is an empty result.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from nationality_guesser.clients.http import UpstreamError, get_json
from nationality_guesser.models import Country
from nationality_guesser.settings import get_settings


class CountryClient:
    """Fetches country metadata for a batch of country codes."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self._base_url = base_url or settings.countries_url
        self._timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    async def fetch_countries(self, codes: Iterable[str]) -> list[Country]:
        codes = [c for c in codes if c]
        if not codes:
            return []

        data = await get_json(
            self._base_url,
            {"codes": ";".join(codes)},
            timeout=self._timeout,
            transport=self._transport,
            none_on_404=True,
        )
        return _parse_countries(data)


def _parse_countries(data: Any) -> list[Country]:
    # A single known code may come back as a bare object instead of a list.
    entries = data if isinstance(data, list) else [data]
    countries: list[Country] = []
    for entry in entries:
        if entry is None:
            continue
        if not isinstance(entry, dict):
            raise UpstreamError(f"Unexpected country entry: {entry!r}")
        try:
            countries.append(Country.model_validate(entry))
        except ValidationError as exc:
            raise UpstreamError(f"Unexpected country entry: {exc}") from exc
    logger.debug(f"Resolved {len(countries)} countries")
    return countries
