"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"

from polyroute.config import Settings
from polyroute.routing.calculator import SwapCalculator
from polyroute.routing.engine import QuoteEngine
from polyroute.routing.fees import VenueFeeModel
from polyroute.routing.rates import RateTable


@pytest.fixture
def rates() -> RateTable:
    """Default rate table."""
    return RateTable()


@pytest.fixture
def fees() -> VenueFeeModel:
    """Default venue fee model."""
    return VenueFeeModel()


@pytest.fixture
def calculator(rates, fees) -> SwapCalculator:
    """Step calculator over the default tables."""
    return SwapCalculator(rates, fees)


@pytest.fixture
def engine() -> QuoteEngine:
    """Engine with default tables and presentation enabled."""
    return QuoteEngine()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)
