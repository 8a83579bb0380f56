"""Shared test fixtures for the Luxor pool client."""

import logging
from collections.abc import Iterator
from unittest.mock import AsyncMock

import pytest
import structlog

from luxor.client import LuxorClient
from luxor.config import LuxorSettings
from luxor.models import HashRateUnit, MiningProfileName
from luxor.transport.client import Transport


@pytest.fixture
def luxor_settings() -> LuxorSettings:
    """Return LuxorSettings with a dummy API key and BTC / TH defaults."""
    return LuxorSettings(
        api_key="test-api-key",  # type: ignore[arg-type]
        coin=MiningProfileName.BTC,
        units=HashRateUnit.TH,
    )


@pytest.fixture
def mock_transport() -> AsyncMock:
    """Transport whose execute() is an AsyncMock; set return_value per test."""
    transport = AsyncMock(spec=Transport)
    transport.execute.return_value = {}
    return transport


@pytest.fixture
def client(mock_transport: AsyncMock) -> LuxorClient:
    """LuxorClient wired to the mock transport with BTC / TH defaults."""
    return LuxorClient(
        api_key="test-api-key",
        transport=mock_transport,
        coin=MiningProfileName.BTC,
        units=HashRateUnit.TH,
    )


@pytest.fixture
def unconfigured_logging() -> Iterator[None]:
    """Put logging back to the state of a program that never called setup_logging."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()
    yield
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    structlog.reset_defaults()
