"""Well-known SSML attribute tokens.

Each catalog is a ``str`` enum, so members compare equal to and render as
their underlying string.  The builder accepts any plain string wherever one
of these is expected; the catalogs only name the values TTS engines document.

  Catalog          Attribute                      Default
  ─────────────    ───────────────────────────    ────────
  AmazonEffect     <amazon:effect name>           --
  EmphasisLevel    <emphasis level>               moderate
  PauseStrength    <break strength>               medium
  ProsodyRate      <prosody rate>                 medium
  ProsodyPitch     <prosody pitch>                medium
  ProsodyVolume    <prosody volume>               medium
"""

from __future__ import annotations

from enum import Enum


class _Token(str, Enum):
    def __str__(self) -> str:
        return self.value


class AmazonEffect(_Token):
    """Alexa vendor effects for ``<amazon:effect>``."""

    WHISPERED = "whispered"


class EmphasisLevel(_Token):
    STRONG = "strong"
    MODERATE = "moderate"
    REDUCED = "reduced"
    DEFAULT = "moderate"


class PauseStrength(_Token):
    NONE = "none"
    X_WEAK = "x-weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    X_STRONG = "x-strong"
    DEFAULT = "medium"


class ProsodyRate(_Token):
    X_SLOW = "x-slow"
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    X_FAST = "x-fast"
    DEFAULT = "medium"


class ProsodyPitch(_Token):
    X_LOW = "x-low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    X_HIGH = "x-high"
    DEFAULT = "medium"


class ProsodyVolume(_Token):
    SILENT = "silent"
    X_SOFT = "x-soft"
    SOFT = "soft"
    MEDIUM = "medium"
    LOUD = "loud"
    X_LOUD = "x-loud"
    DEFAULT = "medium"
