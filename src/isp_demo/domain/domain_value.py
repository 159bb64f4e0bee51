"""Value Layer - Immutable Values Shared by the Pricing and Printer Modules.

Architecture:
    - Quantity: validated non-negative amount (kilos or units)
    - ActionRecord: what a printing device reports after performing an action
    - ActionJournal: ordered, immutable collection of ActionRecords
    - PriceSummary: one priced sale, ready for display

Devices return ActionRecords instead of writing to the console, so the
domain stays testable without capturing output. Only the demo driver
turns records into text on stdout.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .domain_type import PricingMode, PrinterAction


class Quantity(RootModel[float]):
    """Amount of fruit being sold: kilos or units depending on the item.

    Wraps float to reject negative amounts at construction. Pydantic raises
    ValidationError (a ValueError) for anything below zero.

    Usage:
        >>> Quantity(2.5).root
        2.5
        >>> Quantity(-1)  # Raises ValidationError
    """

    root: float = Field(ge=0)
    model_config = ConfigDict(frozen=True)


# Fixed confirmation text for each action
ACTION_MESSAGES: dict[PrinterAction, str] = {
    PrinterAction.PRINT_BLACK_AND_WHITE: "Printing in black and white",
    PrinterAction.PRINT_COLOR: "Printing in color",
    PrinterAction.SCAN: "Scanning",
    PrinterAction.SEND_FAX: "Sending fax",
}


class ActionRecord(BaseModel):
    """Signal that a device performed one action.

    Attributes:
        action: Which capability was invoked
        message: Human-readable confirmation, fixed per action

    Example:
        >>> record = ActionRecord.of(PrinterAction.SCAN)
        >>> record.message
        'Scanning'
    """

    action: PrinterAction
    message: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, action: PrinterAction) -> ActionRecord:
        """Build the record for an action with its fixed confirmation text."""
        return cls(action=action, message=ACTION_MESSAGES[action])


class ActionJournal(BaseModel):
    """Ordered history of device actions.

    Immutable (frozen=True, tuple storage). append() returns a new journal
    and leaves the original unchanged, so a caller can keep snapshots.

    Example:
        >>> journal = ActionJournal()
        >>> journal = journal.append(device.scan()).append(device.send_fax())
        >>> journal.actions
        (<PrinterAction.SCAN: 'scan'>, <PrinterAction.SEND_FAX: 'send_fax'>)
    """

    records: tuple[ActionRecord, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def actions(self) -> tuple[PrinterAction, ...]:
        return tuple(record.action for record in self.records)

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(record.message for record in self.records)

    def append(self, record: ActionRecord) -> ActionJournal:
        """Append Record Immutably.

        Args:
            record: ActionRecord returned by a device call

        Returns:
            New ActionJournal with the record at the end
        """
        return self.model_copy(update={"records": (*self.records, record)})


class PriceSummary(BaseModel):
    """One priced sale: what the customer pays and why.

    Attributes:
        name: Display name of the item (e.g., "cherry")
        mode: Whether the quantity is in kilos or units
        unit_price: Price of one kilo or one unit
        quantity: Amount sold, in the unit given by mode
        total: Amount due, as reported by the item's own total operation

    The total is taken from the item, never recomputed from unit_price
    and quantity.
    """

    name: str
    mode: PricingMode
    unit_price: float = Field(ge=0)
    quantity: Quantity
    total: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def lines(self) -> tuple[str, str]:
        """Console lines for this sale: unit price first, then the total."""
        return (
            f"Price per {self.mode.value} of {self.name}: {self.unit_price}",
            f"Total to pay for {self.name}: {self.total}",
        )


__all__ = ["ACTION_MESSAGES", "ActionJournal", "ActionRecord", "PriceSummary", "Quantity"]
