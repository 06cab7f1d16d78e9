"""ssml_builder -- a fluent builder for Speech Synthesis Markup Language.

Public API re-exports for convenient access::

    from ssml_builder import SSMLBuilder, PauseStrength, ProsodyRate
"""

from ._version import __version__
from .builder import SSMLBuilder
from .config import Settings
from .constants import (
    AmazonEffect,
    EmphasisLevel,
    PauseStrength,
    ProsodyPitch,
    ProsodyRate,
    ProsodyVolume,
)
from .exceptions import (
    InvalidSchemeError,
    InvalidURLError,
    SSMLBuildError,
    SSMLBuilderError,
    UnsupportedTypeError,
)
from .models import Duration, NamedToken, NumericOffset, Strength

__all__ = [
    "__version__",
    # Core
    "SSMLBuilder",
    "Settings",
    # Tokens
    "AmazonEffect",
    "EmphasisLevel",
    "PauseStrength",
    "ProsodyRate",
    "ProsodyPitch",
    "ProsodyVolume",
    # Models
    "Strength",
    "Duration",
    "NamedToken",
    "NumericOffset",
    # Exceptions
    "SSMLBuilderError",
    "InvalidURLError",
    "InvalidSchemeError",
    "UnsupportedTypeError",
    "SSMLBuildError",
]
