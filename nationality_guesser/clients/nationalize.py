"""Prediction client — nationality probabilities for a first name.

Backed by nationalize.io (free, no API key). The service answers with
``{"name": ..., "country": [{"country_id": "US", "probability": 0.08}, ...]}``
ordered most likely first; an unknown name yields an empty ``country`` list.
"""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import ValidationError

from nationality_guesser.clients.http import UpstreamError, get_json
from nationality_guesser.models import Prediction, PredictionsPayload
from nationality_guesser.settings import get_settings


class PredictionClient:
    """Fetches ranked nationality predictions for a name."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self._base_url = base_url or settings.nationalize_url
        self._timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    async def fetch_predictions(self, name: str) -> list[Prediction]:
        """Return predictions in the order the service ranked them (possibly empty)."""
        name = name.strip()
        if not name:
            # The service rejects an empty name; treat it as "no guesses".
            logger.info("No name to look up, skipping prediction request")
            return []

        data = await get_json(
            self._base_url,
            {"name": name},
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            payload = PredictionsPayload.model_validate(data)
        except ValidationError as exc:
            raise UpstreamError(f"Unexpected prediction payload for '{name}': {exc}") from exc

        logger.info(f"Got {len(payload.country)} predictions for '{name}'")
        return list(payload.country)
