"""Speech rendering: SSML segments and the guess narration."""

from nationality_guesser.speech.assembler import build_guess_utterance, collect_country_codes, find_demonym
from nationality_guesser.speech.ssml import Pause, Phrase, SpokenUtterance, SSMLBuilder

__all__ = [
    "Pause",
    "Phrase",
    "SSMLBuilder",
    "SpokenUtterance",
    "build_guess_utterance",
    "collect_country_codes",
    "find_demonym",
]
