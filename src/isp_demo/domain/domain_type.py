"""Domain Type System - Core Enumerations.

Defines type-safe constants using Python's StrEnum for domain concepts.
Using StrEnum instead of plain Enum provides automatic string coercion
and readable values in log lines and console output.
"""

from enum import StrEnum


class PricingMode(StrEnum):
    """How a fruit is sold.

    The two modes are mutually exclusive: an item sold by the kilo never
    offers a per-unit total, and the other way around.

    Values double as the display word in "Price per <mode> of ...".
    """

    BY_KILO = "kilo"
    BY_UNIT = "unit"


class PrinterAction(StrEnum):
    """Operations a printing device can perform.

    One value per capability grouping in the printer module. Every
    ActionRecord carries exactly one of these.
    """

    PRINT_BLACK_AND_WHITE = "print_black_and_white"
    PRINT_COLOR = "print_color"
    SCAN = "scan"
    SEND_FAX = "send_fax"


__all__ = ["PricingMode", "PrinterAction"]
