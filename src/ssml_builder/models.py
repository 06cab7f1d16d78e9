"""Value types for the builder's polymorphic parameters.

Immutable dataclasses forming two small sum types:

- a ``<break>`` is either a :class:`Strength` or a :class:`Duration`;
- a ``<prosody>`` attribute is either a :class:`NamedToken`, a
  :class:`NumericOffset`, or absent (``None``).

Each variant knows how to render its own attribute text.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import TypeAlias, Union


def token_text(token: str) -> str:
    """Return the attribute text for a token, unwrapping enum members."""
    if isinstance(token, Enum):
        return str(token.value)
    return token


@dataclass(frozen=True)
class Strength:
    """A named pause intensity, e.g. ``PauseStrength.WEAK`` or any string."""

    token: str

    def render(self) -> str:
        return f'<break strength="{token_text(self.token)}"/>'


@dataclass(frozen=True)
class Duration:
    """An explicit pause length."""

    span: timedelta

    @property
    def milliseconds(self) -> int:
        """Whole milliseconds in the span, truncated toward zero."""
        micros = self.span // timedelta(microseconds=1)
        whole = abs(micros) // 1000
        return whole if micros >= 0 else -whole

    def render(self) -> str:
        return f'<break time="{self.milliseconds}ms"/>'


BreakValue: TypeAlias = Union[Strength, Duration]


@dataclass(frozen=True)
class NamedToken:
    """A prosody attribute given as a word (``"x-slow"``, ``"loud"``, ...)."""

    value: str

    def render(self, attribute: str) -> str:
        return token_text(self.value)


@dataclass(frozen=True)
class NumericOffset:
    """A prosody attribute given as a number.

    Rate is a plain percentage.  Pitch (percent) and volume (decibels) are
    relative offsets and carry an explicit ``+`` when positive.
    """

    value: int

    def render(self, attribute: str) -> str:
        if attribute == "rate":
            return f"{self.value}%"
        sign = "+" if self.value > 0 else ""
        unit = "dB" if attribute == "volume" else "%"
        return f"{sign}{self.value}{unit}"


ProsodyValue: TypeAlias = Union[NamedToken, NumericOffset, None]
