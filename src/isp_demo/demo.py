"""Interface Segregation Demo

Console driver that walks through both illustrations in a fixed order:
fruit pricing first, then the printers, then a capability check proving
each device only exposes what its groupings promise.

Run with `isp-demo` or `python -m isp_demo`. Takes no arguments.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .config import get_settings
from .domain import (
    CHERRY,
    LETTUCE,
    MELON,
    SOUR_CHERRY,
    ActionJournal,
    BlackAndWhitePrinterDevice,
    ColorPrinterDevice,
    MultiFunctionPrinterDevice,
    check_segregated,
    summarize_by_kilo,
    summarize_by_unit,
    supported_operations,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _section(title: str) -> str:
    return f"\n************** {title} **************"


def run_demo(out: TextIO | None = None) -> None:
    """Write the full demonstration to `out` (stdout by default)."""
    if out is None:
        out = sys.stdout

    def emit(line: str) -> None:
        print(line, file=out)

    emit(_section("Pricing"))
    sales = (
        summarize_by_kilo(CHERRY, 2.5),
        summarize_by_unit(MELON, 2.0),
        summarize_by_kilo(SOUR_CHERRY, 2.5),
        summarize_by_unit(LETTUCE, 2.0),
    )
    for sale in sales:
        for line in sale.lines():
            emit(line)

    emit(_section("Printers"))
    emit("\nPrinters")
    journal = ActionJournal()
    journal = journal.append(BlackAndWhitePrinterDevice().print_black_and_white())
    journal = journal.append(ColorPrinterDevice().print_color())
    for message in journal.messages:
        emit(message)

    emit("\nMultifunction printer")
    multifunction = MultiFunctionPrinterDevice()
    journal = ActionJournal()
    journal = journal.append(multifunction.print_color())
    journal = journal.append(multifunction.print_black_and_white())
    journal = journal.append(multifunction.scan())
    journal = journal.append(multifunction.send_fax())
    for message in journal.messages:
        emit(message)

    emit("\nCapability check")
    for device in (BlackAndWhitePrinterDevice, ColorPrinterDevice, MultiFunctionPrinterDevice):
        check_segregated(device)
        operations = ", ".join(sorted(supported_operations(device)))
        emit(f"{device.__name__}: {operations}")


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, stream=sys.stderr)

    logger.info("Starting %s v%s (%s)", settings.app_name, settings.app_version, settings.environment)
    run_demo()
    logger.info("Demo finished")


__all__ = ["main", "run_demo"]
