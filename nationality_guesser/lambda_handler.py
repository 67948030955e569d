"""Function-as-a-service entrypoint: one skill event in, one response dict out."""

from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from nationality_guesser.settings import get_settings
from nationality_guesser.skill.envelope import SkillRequest
from nationality_guesser.skill.router import IntentRouter


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    request = SkillRequest.model_validate(event)
    logger.info(f"Lambda invocation for request {request.request.request_id or '-'}")
    intent_router = IntentRouter.from_settings(get_settings())
    response = asyncio.run(intent_router.dispatch(request))
    return response.to_payload()
