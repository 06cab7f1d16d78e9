"""Builder configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    """Builder settings, configurable via environment variables.

    Environment variables:
        SSML_DEBUG: Log every rendered fragment at DEBUG level ("1" or "true")
    """

    debug: bool = field(
        default_factory=lambda: os.getenv("SSML_DEBUG", "").lower() in ("1", "true")
    )
