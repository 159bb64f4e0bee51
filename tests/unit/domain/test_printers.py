"""
Tests for the printer module.

These tests demonstrate:
- Testing that each capability yields exactly one fixed record
- Testing that devices only expose what they can physically do
- Testing order preservation through the immutable ActionJournal
"""

import pytest

from isp_demo.domain.capability import operations_of
from isp_demo.domain.domain_type import PrinterAction
from isp_demo.domain.domain_value import ActionJournal, ActionRecord
from isp_demo.domain.printers import (
    BlackAndWhitePrinter,
    BlackAndWhitePrinterDevice,
    ColorPrinter,
    ColorPrinterDevice,
    FaxMachine,
    MultiFunctionPrinter,
    MultiFunctionPrinterDevice,
    Scanner,
)


class TestSingleCapabilityDevices:
    def test_black_and_white_printer_confirms_once(self, black_and_white_printer: BlackAndWhitePrinterDevice):
        record = black_and_white_printer.print_black_and_white()

        assert record == ActionRecord(
            action=PrinterAction.PRINT_BLACK_AND_WHITE,
            message="Printing in black and white",
        )

    def test_color_printer_confirms_once(self, color_printer: ColorPrinterDevice):
        record = color_printer.print_color()

        assert record.action == PrinterAction.PRINT_COLOR
        assert record.message == "Printing in color"

    def test_black_and_white_printer_cannot_print_color(self, black_and_white_printer: BlackAndWhitePrinterDevice):
        assert not isinstance(black_and_white_printer, ColorPrinter)
        for missing in ("print_color", "scan", "send_fax"):
            assert not hasattr(black_and_white_printer, missing)

    def test_color_printer_cannot_scan_or_fax(self, color_printer: ColorPrinterDevice):
        assert not isinstance(color_printer, (Scanner, FaxMachine, BlackAndWhitePrinter))
        for missing in ("print_black_and_white", "scan", "send_fax"):
            assert not hasattr(color_printer, missing)

    def test_repeated_calls_return_equal_records(self, color_printer: ColorPrinterDevice):
        """Stateless devices: each call is independent and identical."""
        assert color_printer.print_color() == color_printer.print_color()


class TestMultiFunctionPrinter:
    def test_is_every_single_capability(self, multifunction_printer: MultiFunctionPrinterDevice):
        assert isinstance(multifunction_printer, MultiFunctionPrinter)
        for grouping in (BlackAndWhitePrinter, ColorPrinter, Scanner, FaxMachine):
            assert isinstance(multifunction_printer, grouping)

    def test_union_declares_no_operations_of_its_own(self):
        assert operations_of(MultiFunctionPrinter) == frozenset()

    def test_four_calls_yield_four_records_in_call_order(self, multifunction_printer: MultiFunctionPrinterDevice):
        journal = ActionJournal()
        journal = journal.append(multifunction_printer.print_color())
        journal = journal.append(multifunction_printer.print_black_and_white())
        journal = journal.append(multifunction_printer.scan())
        journal = journal.append(multifunction_printer.send_fax())

        assert journal.actions == (
            PrinterAction.PRINT_COLOR,
            PrinterAction.PRINT_BLACK_AND_WHITE,
            PrinterAction.SCAN,
            PrinterAction.SEND_FAX,
        )
        assert journal.messages == (
            "Printing in color",
            "Printing in black and white",
            "Scanning",
            "Sending fax",
        )

    def test_consumer_needing_scan_accepts_multifunction(self, multifunction_printer: MultiFunctionPrinterDevice):
        """A function typed on Scanner works with any device that scans."""

        def digitize(device: Scanner) -> str:
            return device.scan().message

        assert digitize(multifunction_printer) == "Scanning"

    def test_declaring_union_without_fax_is_rejected(self):
        class NoFax(MultiFunctionPrinter):
            def print_black_and_white(self) -> ActionRecord:
                return ActionRecord.of(PrinterAction.PRINT_BLACK_AND_WHITE)

            def print_color(self) -> ActionRecord:
                return ActionRecord.of(PrinterAction.PRINT_COLOR)

            def scan(self) -> ActionRecord:
                return ActionRecord.of(PrinterAction.SCAN)

        with pytest.raises(TypeError):
            NoFax()


class TestActionJournal:
    def test_append_returns_new_instance(self, color_printer: ColorPrinterDevice):
        journal = ActionJournal()
        updated = journal.append(color_printer.print_color())

        assert updated is not journal
        assert len(updated.records) == 1
        assert journal.records == ()

    def test_records_keep_append_order(self):
        journal = ActionJournal()
        for action in (PrinterAction.SEND_FAX, PrinterAction.SCAN, PrinterAction.SEND_FAX):
            journal = journal.append(ActionRecord.of(action))

        assert journal.actions == (PrinterAction.SEND_FAX, PrinterAction.SCAN, PrinterAction.SEND_FAX)
