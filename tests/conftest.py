"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from savebuilder.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test.

    This fixture runs automatically before each test to configure settings
    and resets them after the test completes.

    Yields:
        None
    """
    settings.configure(
        DEFAULT_COMPRESSION_LEVEL="optimal",
        JSON_INDENT=None,
        JSON_BY_ALIAS=False,
        JSON_EXCLUDE_NONE=False,
        HTTP_TIMEOUT=5.0,
        HTTP_USER_AGENT="savebuilder-tests",
        LOG_LEVEL="DEBUG",
    )
    yield
    # Reset settings after test
    settings._wrapped = None
