"""Intent handlers. Each returns a ready-to-send ``SkillResponse``."""

from __future__ import annotations

from loguru import logger

from nationality_guesser.clients import CountryClient, PredictionClient
from nationality_guesser.skill.envelope import SkillResponse, simple_response, ssml_response
from nationality_guesser.speech.assembler import build_guess_utterance, collect_country_codes
from nationality_guesser.speech.ssml import SpokenUtterance, SSMLBuilder

HELP_TITLE = "Help"
ABOUT_TITLE = "About"
GUESS_TITLE = "Nationality Guess"

ABOUT_TEXT = (
    "Thanks for using me! I can guess your nationality based on your first name. "
    "After providing me with your name, I'll list some countries where you might be from, "
    "along with a probability for each of them!"
)
UPSTREAM_FAILURE_TEXT = "Sorry, I can't reach my nationality sources right now. Please try again later."


def handle_help() -> SkillResponse:
    utterance = (
        SSMLBuilder()
        .say("You can ask me like so:")
        .pause(1000)
        .say("My name is Ethan, where am I from?")
        .build()
    )
    return ssml_response(HELP_TITLE, utterance)


def handle_about() -> SkillResponse:
    return simple_response(ABOUT_TITLE, ABOUT_TEXT)


def handle_upstream_failure() -> SkillResponse:
    return simple_response(GUESS_TITLE, UPSTREAM_FAILURE_TEXT)


async def guess_nationality(
    first_name: str,
    predictions_client: PredictionClient,
    countries_client: CountryClient,
    *,
    pause_ms: int | None = None,
) -> SpokenUtterance:
    """Predictions first, then the countries they mention; the lookups are sequential."""
    predictions = await predictions_client.fetch_predictions(first_name)
    countries = await countries_client.fetch_countries(collect_country_codes(predictions))
    logger.debug(f"Narrating {len(predictions)} guesses with {len(countries)} country records")
    return build_guess_utterance(predictions, countries, pause_ms=pause_ms)


async def handle_guess(
    first_name: str,
    predictions_client: PredictionClient,
    countries_client: CountryClient,
    *,
    pause_ms: int | None = None,
) -> SkillResponse:
    utterance = await guess_nationality(first_name, predictions_client, countries_client, pause_ms=pause_ms)
    return ssml_response(GUESS_TITLE, utterance)
