"""Guess narration: joins ranked predictions with country demonyms.

Predictions are narrated in the order the prediction service ranked them,
most likely first, and are never re-sorted here. A country code with no
matching record is narrated as ``Unknown`` so one missing record never
drops the rest of the answer.
"""

from __future__ import annotations

from collections.abc import Sequence

from nationality_guesser.models import Country, Prediction
from nationality_guesser.settings import get_settings
from nationality_guesser.speech.ssml import SpokenUtterance, SSMLBuilder

APOLOGY = (
    "Sorry, I couldn't guess your nationality based on the name you provided. "
    "Try again with your friends' names!"
)
INTRO = "There is a"
UNKNOWN_DEMONYM = "Unknown"


def collect_country_codes(predictions: Sequence[Prediction]) -> list[str]:
    """Country codes in prediction order (duplicates kept)."""
    return [p.country_id for p in predictions]


def find_demonym(countries: Sequence[Country], code: str) -> str:
    """Demonym of the first country with ``code``. ``Unknown`` when there is none or it is blank."""
    for country in countries:
        if country.code == code:
            return country.demonym or UNKNOWN_DEMONYM
    return UNKNOWN_DEMONYM


def to_percent(probability: float) -> int:
    """Fraction to whole percent, truncating: 0.499 -> 49, never rounding up."""
    return int(probability * 100)


def build_guess_utterance(
    predictions: Sequence[Prediction],
    countries: Sequence[Country],
    *,
    pause_ms: int | None = None,
) -> SpokenUtterance:
    if pause_ms is None:
        pause_ms = get_settings().pause_ms
    builder = SSMLBuilder()

    if not predictions:
        return builder.say(APOLOGY).build()

    builder.say(INTRO)
    for i, prediction in enumerate(predictions):
        if i != 0:
            builder.pause(pause_ms)
        demonym = find_demonym(countries, prediction.country_id)
        builder.say(f"{to_percent(prediction.probability)} percent chance you're {demonym}.")
    return builder.build()
