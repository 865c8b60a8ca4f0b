"""Test configuration and shared fixtures."""

from collections.abc import Generator
from datetime import datetime
from typing import Any

import pytest

from quotation_core.core.config import clear_settings_cache
from quotation_core.services.quote_service import QuoteService
from tests.fixtures.quote_data import FIXED_NOW, make_payload


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Settings are cached per process; reset around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """A complete, valid AUTO request for a 30 year old."""
    return make_payload()


@pytest.fixture
def quote_service() -> QuoteService:
    """Quote service pinned to a fixed clock."""
    return QuoteService(clock=lambda: FIXED_NOW)
