"""Domain Layer - Capability Groupings and the Types Built from Them.

Two independent illustrations of the Interface Segregation Principle:

Key Components:
    - Pricing: fruit sold by the kilo or by the unit (PricedByKilo / PricedByUnit)
    - Printers: devices composed from print, color, scan and fax capabilities
    - Capability: marker base plus check_segregated, which verifies a type only
      exposes what its declared groupings promise

Design Principles:
    - Immutable by Default: all domain models use frozen=True
    - Small Groupings: one operation (or a minimal pair) per abstract base
    - Records, not Prints: device actions return ActionRecord values
"""

from .capability import (
    Capability,
    SegregationError,
    check_segregated,
    exposed_operations,
    groupings_of,
    operations_of,
    supported_operations,
)
from .domain_type import PricingMode, PrinterAction
from .domain_value import ACTION_MESSAGES, ActionJournal, ActionRecord, PriceSummary, Quantity
from .pricing import (
    CHERRY,
    LETTUCE,
    MELON,
    SOUR_CHERRY,
    Priced,
    PricedByKilo,
    PricedByUnit,
    UnitPricedFruit,
    WeightPricedFruit,
    summarize_by_kilo,
    summarize_by_unit,
)
from .printers import (
    BlackAndWhitePrinter,
    BlackAndWhitePrinterDevice,
    ColorPrinter,
    ColorPrinterDevice,
    FaxMachine,
    MultiFunctionPrinter,
    MultiFunctionPrinterDevice,
    Scanner,
)

__all__ = [
    "ACTION_MESSAGES",
    "CHERRY",
    "LETTUCE",
    "MELON",
    "SOUR_CHERRY",
    "ActionJournal",
    "ActionRecord",
    "BlackAndWhitePrinter",
    "BlackAndWhitePrinterDevice",
    "Capability",
    "ColorPrinter",
    "ColorPrinterDevice",
    "FaxMachine",
    "MultiFunctionPrinter",
    "MultiFunctionPrinterDevice",
    "PriceSummary",
    "Priced",
    "PricedByKilo",
    "PricedByUnit",
    "PricingMode",
    "PrinterAction",
    "Quantity",
    "Scanner",
    "SegregationError",
    "UnitPricedFruit",
    "WeightPricedFruit",
    "check_segregated",
    "exposed_operations",
    "groupings_of",
    "operations_of",
    "summarize_by_kilo",
    "summarize_by_unit",
    "supported_operations",
]
