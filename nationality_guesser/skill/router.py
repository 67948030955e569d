"""Intent dispatch: one request in, one response out, no state kept.

Unknown intents (and non-intent requests such as a bare launch) get the
About answer. An upstream outage is turned into a spoken apology here
rather than failing the request.
"""

from __future__ import annotations

from loguru import logger

from nationality_guesser.clients import CountryClient, IdentityClient, PredictionClient, UpstreamError
from nationality_guesser.settings import GuesserSettings
from nationality_guesser.skill.envelope import SkillRequest, SkillResponse, slot_value
from nationality_guesser.skill.handlers import (
    handle_about,
    handle_guess,
    handle_help,
    handle_upstream_failure,
)

HELP_INTENTS = frozenset({"AMAZON.HelpIntent", "HelpIntent"})
ABOUT_INTENT = "AboutIntent"
GUESS_INTENT = "GuessIntent"
GUESS_WITH_ACCOUNT_INTENT = "GuessWithAccountIntent"
FIRST_NAME_SLOT = "first_name"


class IntentRouter:
    """Maps an intent name to its handler."""

    def __init__(
        self,
        predictions: PredictionClient,
        countries: CountryClient,
        identity: IdentityClient,
        *,
        pause_ms: int | None = None,
    ) -> None:
        self._predictions = predictions
        self._countries = countries
        self._identity = identity
        self._pause_ms = pause_ms

    @classmethod
    def from_settings(cls, settings: GuesserSettings) -> IntentRouter:
        timeout = settings.http_timeout
        return cls(
            PredictionClient(settings.nationalize_url, timeout),
            CountryClient(settings.countries_url, timeout),
            IdentityClient(settings.cognito_url, timeout, attribute=settings.given_name_attribute),
            pause_ms=settings.pause_ms,
        )

    async def dispatch(self, request: SkillRequest) -> SkillResponse:
        intent = request.intent_name
        logger.info(f"Dispatching {request.request.type} intent={intent or '-'}")

        if intent in HELP_INTENTS:
            return handle_help()
        if intent == ABOUT_INTENT:
            return handle_about()
        if intent == GUESS_INTENT:
            first_name = slot_value(request.request.intent.slots, FIRST_NAME_SLOT)
            return await self._guess(first_name)
        if intent == GUESS_WITH_ACCOUNT_INTENT:
            return await self._guess_with_account(request.session.user.access_token)
        return handle_about()

    async def _guess(self, first_name: str) -> SkillResponse:
        try:
            return await handle_guess(first_name, self._predictions, self._countries, pause_ms=self._pause_ms)
        except UpstreamError as exc:
            logger.error(f"Guess failed, upstream unavailable: {exc}")
            return handle_upstream_failure()

    async def _guess_with_account(self, access_token: str) -> SkillResponse:
        try:
            first_name = await self._identity.fetch_given_name(access_token)
        except UpstreamError as exc:
            logger.error(f"Identity lookup failed: {exc}")
            return handle_upstream_failure()
        return await self._guess(first_name)
