"""Shared request helpers for the upstream clients.

Every failure (network, non-2xx status, undecodable body) surfaces as
``UpstreamError``. Nothing here retries.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger


class UpstreamError(RuntimeError):
    """Raised when an upstream service cannot be reached or answers garbage."""


async def get_json(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
    none_on_404: bool = False,
) -> Any:
    """GET ``url`` and decode the JSON body.

    With ``none_on_404`` a 404 reply means "nothing matched" and yields ``None``.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            resp = await client.get(url, params=params)
            if none_on_404 and resp.status_code == 404:
                logger.debug(f"GET {resp.request.url} -> 404, no match")
                return None
            resp.raise_for_status()
            logger.debug(f"GET {resp.request.url} -> {resp.status_code} ({len(resp.content)} bytes)")
            return resp.json()
    except httpx.HTTPError as exc:
        raise UpstreamError(f"GET {url} failed: {exc}") from exc
    except ValueError as exc:
        raise UpstreamError(f"GET {url} returned malformed JSON") from exc


async def post_json(
    url: str,
    body: dict[str, Any],
    *,
    timeout: float,
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """POST ``body`` as JSON to ``url`` and decode the JSON reply."""
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            resp = await client.post(url, json=body, headers=headers)
            resp.raise_for_status()
            logger.debug(f"POST {url} -> {resp.status_code} ({len(resp.content)} bytes)")
            return resp.json()
    except httpx.HTTPError as exc:
        raise UpstreamError(f"POST {url} failed: {exc}") from exc
    except ValueError as exc:
        raise UpstreamError(f"POST {url} returned malformed JSON") from exc
