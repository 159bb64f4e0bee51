"""
Shared test fixtures and configuration.

Environment strategy:
- All tests use .env.test (no real environment needed)
- The settings cache is cleared per test so overrides take effect
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

ENV_FILE = Path(__file__).parent.parent / ".env.test"

load_dotenv(ENV_FILE, override=True)

from isp_demo.config import get_settings
from isp_demo.domain.pricing import UnitPricedFruit, WeightPricedFruit
from isp_demo.domain.printers import (
    BlackAndWhitePrinterDevice,
    ColorPrinterDevice,
    MultiFunctionPrinterDevice,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached Settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def by_kilo_fruit() -> WeightPricedFruit:
    """Weight-priced item at 100.0 per kilo."""
    return WeightPricedFruit(name="cherry", unit_price=100.0)


@pytest.fixture
def by_unit_fruit() -> UnitPricedFruit:
    """Unit-priced item at 200.0 per unit."""
    return UnitPricedFruit(name="melon", unit_price=200.0)


@pytest.fixture
def black_and_white_printer() -> BlackAndWhitePrinterDevice:
    return BlackAndWhitePrinterDevice()


@pytest.fixture
def color_printer() -> ColorPrinterDevice:
    return ColorPrinterDevice()


@pytest.fixture
def multifunction_printer() -> MultiFunctionPrinterDevice:
    return MultiFunctionPrinterDevice()
