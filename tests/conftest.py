"""Shared test fixtures for the ssml_builder test suite."""

from __future__ import annotations

import pytest

from ssml_builder.builder import SSMLBuilder
from ssml_builder.config import Settings


@pytest.fixture()
def builder() -> SSMLBuilder:
    return SSMLBuilder(settings=Settings(debug=False))


@pytest.fixture()
def debug_builder() -> SSMLBuilder:
    return SSMLBuilder(settings=Settings(debug=True))
