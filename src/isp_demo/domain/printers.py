"""Printer Module - Devices Composed from Independent Capabilities.

Some printers only print in black and white, others only in color, and
multifunction devices also scan and send faxes. Each capability is its own
single-operation grouping:

    BlackAndWhitePrinter   print_black_and_white()
    ColorPrinter           print_color()
    Scanner                scan()
    FaxMachine             send_fax()

MultiFunctionPrinter is the union of the four and declares nothing extra, so
code that only needs to scan depends on Scanner and never on faxing.

Every operation returns an ActionRecord instead of writing to the console.
The demo driver decides what to do with it.
"""

from __future__ import annotations

import logging
from abc import abstractmethod

from pydantic import BaseModel, ConfigDict

from .capability import Capability
from .domain_type import PrinterAction
from .domain_value import ActionRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Capability groupings
# ---------------------------------------------------------------------------


class BlackAndWhitePrinter(Capability):
    @abstractmethod
    def print_black_and_white(self) -> ActionRecord:
        raise NotImplementedError


class ColorPrinter(Capability):
    @abstractmethod
    def print_color(self) -> ActionRecord:
        raise NotImplementedError


class Scanner(Capability):
    @abstractmethod
    def scan(self) -> ActionRecord:
        raise NotImplementedError


class FaxMachine(Capability):
    @abstractmethod
    def send_fax(self) -> ActionRecord:
        raise NotImplementedError


class MultiFunctionPrinter(BlackAndWhitePrinter, ColorPrinter, Scanner, FaxMachine):
    """Every printing capability at once. Adds no operations of its own."""


# ---------------------------------------------------------------------------
# Devices
# ---------------------------------------------------------------------------


def _perform(device: Capability, action: PrinterAction) -> ActionRecord:
    record = ActionRecord.of(action)
    logger.debug("%s: %s", type(device).__name__, record.message)
    return record


class BlackAndWhitePrinterDevice(BaseModel, BlackAndWhitePrinter):
    """Printer limited to black-and-white output."""

    model_config = ConfigDict(frozen=True)

    def print_black_and_white(self) -> ActionRecord:
        return _perform(self, PrinterAction.PRINT_BLACK_AND_WHITE)


class ColorPrinterDevice(BaseModel, ColorPrinter):
    """Printer limited to color output."""

    model_config = ConfigDict(frozen=True)

    def print_color(self) -> ActionRecord:
        return _perform(self, PrinterAction.PRINT_COLOR)


class MultiFunctionPrinterDevice(BaseModel, MultiFunctionPrinter):
    """Office device: prints both ways, scans and sends faxes."""

    model_config = ConfigDict(frozen=True)

    def print_black_and_white(self) -> ActionRecord:
        return _perform(self, PrinterAction.PRINT_BLACK_AND_WHITE)

    def print_color(self) -> ActionRecord:
        return _perform(self, PrinterAction.PRINT_COLOR)

    def scan(self) -> ActionRecord:
        return _perform(self, PrinterAction.SCAN)

    def send_fax(self) -> ActionRecord:
        return _perform(self, PrinterAction.SEND_FAX)


__all__ = [
    "BlackAndWhitePrinter",
    "BlackAndWhitePrinterDevice",
    "ColorPrinter",
    "ColorPrinterDevice",
    "FaxMachine",
    "MultiFunctionPrinter",
    "MultiFunctionPrinterDevice",
    "Scanner",
]
