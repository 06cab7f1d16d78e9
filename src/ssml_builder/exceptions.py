"""Custom exception hierarchy for the ssml_builder package."""

from __future__ import annotations


class SSMLBuilderError(Exception):
    """Base exception for all ssml_builder errors."""


class InvalidURLError(SSMLBuilderError):
    """Raised when an audio source cannot be parsed as a URL."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"src failed to parse into a valid URL: {reason}")


class InvalidSchemeError(SSMLBuilderError):
    """Raised when an audio source is a URL but not an HTTPS one."""

    def __init__(self, source: str, scheme: str) -> None:
        self.source = source
        self.scheme = scheme
        super().__init__(f"src must be a HTTPS URL. Scheme {scheme!r} not valid")


class UnsupportedTypeError(SSMLBuilderError, TypeError):
    """Raised when a polymorphic parameter has a shape the builder cannot render."""

    def __init__(self, parameter: str, value: object, expected: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(
            f"unsupported {parameter} type {type(value).__name__!r}. must be {expected}"
        )


class SSMLBuildError(SSMLBuilderError):
    """Raised when the built markup cannot be turned into an element tree."""
