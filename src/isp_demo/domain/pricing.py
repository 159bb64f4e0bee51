"""Pricing Module - Fruit Sold by the Kilo or by the Unit.

A fruit shop sells some items by weight and others by count. Rather than one
pricing interface carrying both totals (forcing melons to answer "price per
kilo?"), each way of selling is its own capability grouping:

    Priced                 get_price()
    ├─ PricedByKilo        get_total_by_kilo(kilos)
    └─ PricedByUnit        get_total_by_unit(units)

Concrete fruit types inherit from exactly one of the leaf groupings, so a
unit-priced item has no get_total_by_kilo attribute at all. Consumers depend
on the narrowest grouping they need (see summarize_by_kilo/summarize_by_unit).

Catalog:
    CHERRY, SOUR_CHERRY    sold by the kilo
    MELON, LETTUCE         sold by the unit
"""

from __future__ import annotations

import logging
from abc import abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from .capability import Capability
from .domain_type import PricingMode
from .domain_value import PriceSummary, Quantity

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Capability groupings
# ---------------------------------------------------------------------------


class Priced(Capability):
    """Anything with a fixed unit price."""

    @abstractmethod
    def get_price(self) -> float:
        """Price of one kilo or one unit. Always succeeds, no side effects."""
        raise NotImplementedError


class PricedByKilo(Priced):
    """Items sold by weight."""

    @abstractmethod
    def get_total_by_kilo(self, kilos: float) -> float:
        """Total for a weight in kilograms: kilos * get_price()."""
        raise NotImplementedError


class PricedByUnit(Priced):
    """Items sold by count."""

    @abstractmethod
    def get_total_by_unit(self, units: float) -> float:
        """Total for a number of units: units * get_price()."""
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Fruit variants
# ---------------------------------------------------------------------------


class WeightPricedFruit(BaseModel, PricedByKilo):
    """Fruit sold by the kilo.

    Attributes:
        name: Display name used in console output
        unit_price: Price of one kilogram (non-negative)
    """

    name: str
    unit_price: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def get_price(self) -> float:
        return self.unit_price

    def get_total_by_kilo(self, kilos: float) -> float:
        total = Quantity(kilos).root * self.get_price()
        logger.debug("%s: %s kg x %s = %s", self.name, kilos, self.unit_price, total)
        return total


class UnitPricedFruit(BaseModel, PricedByUnit):
    """Fruit sold by the unit.

    Attributes:
        name: Display name used in console output
        unit_price: Price of one unit (non-negative)
    """

    name: str
    unit_price: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def get_price(self) -> float:
        return self.unit_price

    def get_total_by_unit(self, units: float) -> float:
        total = Quantity(units).root * self.get_price()
        logger.debug("%s: %s units x %s = %s", self.name, units, self.unit_price, total)
        return total


CHERRY = WeightPricedFruit(name="cherry", unit_price=100.0)
MELON = UnitPricedFruit(name="melon", unit_price=200.0)
SOUR_CHERRY = WeightPricedFruit(name="sour cherry", unit_price=200.0)
LETTUCE = UnitPricedFruit(name="lettuce", unit_price=100.0)


# ---------------------------------------------------------------------------
# Consumers - each depends only on the grouping it uses
# ---------------------------------------------------------------------------


def _display_name(item: Priced) -> str:
    return getattr(item, "name", type(item).__name__)


def summarize_by_kilo(item: PricedByKilo, kilos: float) -> PriceSummary:
    """Price a sale by weight.

    Args:
        item: Anything sold by the kilo
        kilos: Weight sold (non-negative)

    Returns:
        PriceSummary carrying item.get_total_by_kilo(kilos) as its total

    Raises:
        ValidationError: If kilos is negative
    """
    quantity = Quantity(kilos)
    return PriceSummary(
        name=_display_name(item),
        mode=PricingMode.BY_KILO,
        unit_price=item.get_price(),
        quantity=quantity,
        total=item.get_total_by_kilo(quantity.root),
    )


def summarize_by_unit(item: PricedByUnit, units: float) -> PriceSummary:
    """Price a sale by count. Same contract as summarize_by_kilo."""
    quantity = Quantity(units)
    return PriceSummary(
        name=_display_name(item),
        mode=PricingMode.BY_UNIT,
        unit_price=item.get_price(),
        quantity=quantity,
        total=item.get_total_by_unit(quantity.root),
    )


__all__ = [
    "CHERRY",
    "LETTUCE",
    "MELON",
    "SOUR_CHERRY",
    "Priced",
    "PricedByKilo",
    "PricedByUnit",
    "UnitPricedFruit",
    "WeightPricedFruit",
    "summarize_by_kilo",
    "summarize_by_unit",
]
