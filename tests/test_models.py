"""Tests for ssml_builder.models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from ssml_builder.constants import PauseStrength, ProsodyVolume
from ssml_builder.models import Duration, NamedToken, NumericOffset, Strength, token_text


class TestTokenText:
    def test_plain_string(self) -> None:
        assert token_text("custom") == "custom"

    def test_enum_member(self) -> None:
        assert token_text(PauseStrength.X_WEAK) == "x-weak"


class TestStrength:
    def test_render(self) -> None:
        assert Strength(PauseStrength.WEAK).render() == '<break strength="weak"/>'

    def test_immutable(self) -> None:
        s = Strength("weak")
        with pytest.raises(FrozenInstanceError):
            s.token = "strong"  # type: ignore[misc]


class TestDuration:
    def test_whole_seconds(self) -> None:
        assert Duration(timedelta(seconds=2)).milliseconds == 2000

    def test_truncates_microseconds(self) -> None:
        assert Duration(timedelta(microseconds=1_500_999)).milliseconds == 1500

    def test_sub_millisecond_is_zero(self) -> None:
        assert Duration(timedelta(microseconds=999)).milliseconds == 0

    def test_negative_truncates_toward_zero(self) -> None:
        assert Duration(timedelta(microseconds=-1_500_999)).milliseconds == -1500

    def test_render(self) -> None:
        assert Duration(timedelta(milliseconds=250)).render() == '<break time="250ms"/>'


class TestNamedToken:
    def test_render_ignores_attribute(self) -> None:
        token = NamedToken(ProsodyVolume.LOUD)
        assert token.render("volume") == "loud"
        assert token.render("rate") == "loud"


class TestNumericOffset:
    @pytest.mark.parametrize(
        ("attribute", "value", "expected"),
        [
            ("rate", 80, "80%"),
            ("rate", -5, "-5%"),
            ("pitch", 10, "+10%"),
            ("pitch", 0, "0%"),
            ("pitch", -3, "-3%"),
            ("volume", 6, "+6dB"),
            ("volume", 0, "0dB"),
            ("volume", -5, "-5dB"),
        ],
    )
    def test_render(self, attribute: str, value: int, expected: str) -> None:
        assert NumericOffset(value).render(attribute) == expected
