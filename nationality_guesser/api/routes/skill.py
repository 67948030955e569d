"""Skill webhook – the voice platform POSTs every request here."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from loguru import logger

from nationality_guesser.settings import get_settings
from nationality_guesser.skill.envelope import SkillRequest
from nationality_guesser.skill.router import IntentRouter

router = APIRouter()


# ── deps ─────────────────────────────────────────────────────────────────


def get_intent_router() -> IntentRouter:
    return IntentRouter.from_settings(get_settings())


RouterDep = Annotated[IntentRouter, Depends(get_intent_router)]


# ── routes ───────────────────────────────────────────────────────────────


@router.post("/skill")
async def handle_skill_request(body: SkillRequest, intent_router: RouterDep) -> dict[str, Any]:
    logger.info(f"Skill request {body.request.request_id or '-'} ({body.request.type})")
    response = await intent_router.dispatch(body)
    return response.to_payload()
