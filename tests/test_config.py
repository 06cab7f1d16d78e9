"""Tests for ssml_builder.config."""

from __future__ import annotations

import pytest

from ssml_builder.config import Settings


class TestSettings:
    def test_default_off(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SSML_DEBUG", raising=False)
        assert Settings().debug is False

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE"])
    def test_debug_from_env(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("SSML_DEBUG", raw)
        assert Settings().debug is True

    def test_other_values_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SSML_DEBUG", "yes")
        assert Settings().debug is False

    def test_explicit_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SSML_DEBUG", "1")
        assert Settings(debug=False).debug is False
