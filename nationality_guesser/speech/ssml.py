"""SSML narration segments and a small builder.

An utterance is an ordered run of phrases and timed pauses. Rendering joins
the segments with a space and wraps them in ``<speak>``; a pause becomes
``<break time='500ms'/>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape


@dataclass(frozen=True, slots=True)
class Phrase:
    text: str

    def to_ssml(self) -> str:
        return escape(self.text)


@dataclass(frozen=True, slots=True)
class Pause:
    milliseconds: int

    def to_ssml(self) -> str:
        return f"<break time='{self.milliseconds}ms'/>"


Segment = Phrase | Pause


@dataclass(frozen=True, slots=True)
class SpokenUtterance:
    """Immutable narration, built once per request."""

    segments: tuple[Segment, ...] = ()

    def to_ssml(self) -> str:
        return "<speak>" + " ".join(s.to_ssml() for s in self.segments) + "</speak>"

    @property
    def plain_text(self) -> str:
        """Phrases only, for cards and logs."""
        return " ".join(s.text for s in self.segments if isinstance(s, Phrase))

    @property
    def pause_count(self) -> int:
        return sum(1 for s in self.segments if isinstance(s, Pause))


class SSMLBuilder:
    """Accumulates segments; ``build()`` freezes them into a ``SpokenUtterance``."""

    def __init__(self) -> None:
        self._segments: list[Segment] = []

    def say(self, text: str) -> SSMLBuilder:
        self._segments.append(Phrase(text))
        return self

    def pause(self, milliseconds: int) -> SSMLBuilder:
        if milliseconds < 0:
            raise ValueError(f"Pause must be non-negative, got {milliseconds}ms")
        self._segments.append(Pause(milliseconds))
        return self

    def build(self) -> SpokenUtterance:
        return SpokenUtterance(tuple(self._segments))
