"""Voice-platform request/response envelope (Alexa custom skill JSON)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nationality_guesser.speech.ssml import SpokenUtterance


class _Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ── request ──────────────────────────────────────────────────────────────


class Slot(_Envelope):
    name: str = ""
    value: str | None = None  # absent when the user did not fill the slot


class Intent(_Envelope):
    name: str = ""
    slots: dict[str, Slot] = Field(default_factory=dict)


class RequestBody(_Envelope):
    type: str = "IntentRequest"
    request_id: str = Field(default="", alias="requestId")
    locale: str = ""
    intent: Intent = Field(default_factory=Intent)


class User(_Envelope):
    user_id: str = Field(default="", alias="userId")
    access_token: str = Field(default="", alias="accessToken")


class Session(_Envelope):
    session_id: str = Field(default="", alias="sessionId")
    new: bool = False
    user: User = Field(default_factory=User)


class SkillRequest(_Envelope):
    version: str = "1.0"
    session: Session = Field(default_factory=Session)
    request: RequestBody = Field(default_factory=RequestBody)

    @property
    def intent_name(self) -> str:
        return self.request.intent.name


def slot_value(slots: Mapping[str, Slot], name: str) -> str:
    """Value of the first slot whose ``name`` matches, or ``""``."""
    for slot in slots.values():
        if slot.name == name:
            return slot.value or ""
    return ""


# ── response ─────────────────────────────────────────────────────────────


class OutputSpeech(_Envelope):
    type: str
    text: str | None = None
    ssml: str | None = None


class Card(_Envelope):
    type: str = "Simple"
    title: str
    content: str


class ResponseBody(_Envelope):
    output_speech: OutputSpeech = Field(alias="outputSpeech")
    card: Card | None = None
    should_end_session: bool = Field(default=True, alias="shouldEndSession")


class SkillResponse(_Envelope):
    version: str = "1.0"
    response: ResponseBody

    @property
    def title(self) -> str:
        return self.response.card.title if self.response.card else ""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def simple_response(title: str, text: str) -> SkillResponse:
    """Plain-text speech plus a simple card."""
    return SkillResponse(
        response=ResponseBody(
            output_speech=OutputSpeech(type="PlainText", text=text),
            card=Card(title=title, content=text),
        )
    )


def ssml_response(title: str, utterance: SpokenUtterance) -> SkillResponse:
    """SSML speech plus a simple card carrying the spoken phrases."""
    return SkillResponse(
        response=ResponseBody(
            output_speech=OutputSpeech(type="SSML", ssml=utterance.to_ssml()),
            card=Card(title=title, content=utterance.plain_text),
        )
    )
