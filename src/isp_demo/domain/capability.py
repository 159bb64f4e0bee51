"""Capability Groupings and the Segregation Check.

A capability grouping is a small abstract base class declaring one operation,
or a minimal related pair. Concrete types declare conformance by inheriting
from exactly the groupings they can perform. Composite groupings (e.g. a
multifunction printer) inherit from several groupings and declare nothing
of their own.

This module answers two questions about any type or instance:
    - Which groupings does it declare? (groupings_of, supported_operations)
    - Does it honor interface segregation? (check_segregated)

check_segregated rejects:
    - "fat" groupings that bundle more operations than max_operations
    - public operations exposed outside every declared grouping, i.e. a
      method a consumer could call without any interface promising it

Example:
    >>> check_segregated(ColorPrinterDevice)
    (<class 'isp_demo.domain.printers.ColorPrinter'>,)
    >>> supported_operations(ColorPrinterDevice())
    frozenset({'print_color'})
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC
from functools import cached_property
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Classes whose members are framework plumbing, not domain operations
_FRAMEWORK_BASES: frozenset[type] = frozenset({*BaseModel.__mro__, ABC})


class Capability(ABC):
    """Marker base for every capability grouping."""


class SegregationError(TypeError):
    """Raised when a type violates interface segregation."""


def _as_type(obj: Any) -> type:
    return obj if isinstance(obj, type) else type(obj)


def operations_of(grouping: type[Capability]) -> frozenset[str]:
    """Operations declared directly by one grouping (inherited ones excluded)."""
    return frozenset(
        name for name, member in vars(grouping).items() if getattr(member, "__isabstractmethod__", False)
    )


def groupings_of(obj: Any) -> tuple[type[Capability], ...]:
    """Capability groupings a type or instance declares, in MRO order.

    Composite groupings and concrete classes declare no abstract operations
    of their own, so only the groupings that contribute operations appear.
    """
    tp = _as_type(obj)
    return tuple(
        klass
        for klass in tp.__mro__
        if klass is not Capability and issubclass(klass, Capability) and operations_of(klass)
    )


def supported_operations(obj: Any) -> frozenset[str]:
    """Every operation promised by the declared groupings."""
    return frozenset().union(*(operations_of(grouping) for grouping in groupings_of(obj)))


def _is_operation(member: Any) -> bool:
    """Methods, static/class methods, properties and other callables; not nested classes."""
    if isinstance(member, (staticmethod, classmethod, property, cached_property)):
        return True
    return inspect.isfunction(member) or (callable(member) and not isinstance(member, type))


def exposed_operations(obj: Any) -> frozenset[str]:
    """Public operations a type defines anywhere in its own hierarchy.

    Plain methods, static and class methods, properties and other callable
    members all count. Members of pydantic's BaseModel and of object are
    skipped; they are not part of the domain surface.
    """
    tp = _as_type(obj)
    return frozenset(
        name
        for klass in tp.__mro__
        if klass not in _FRAMEWORK_BASES
        for name, member in vars(klass).items()
        if not name.startswith("_") and _is_operation(member)
    )


def check_segregated(obj: Any, max_operations: int = 2) -> tuple[type[Capability], ...]:
    """Verify a type honors interface segregation.

    Args:
        obj: Type or instance to check
        max_operations: Largest number of operations one grouping may declare

    Returns:
        The declared groupings, in MRO order

    Raises:
        SegregationError: If the type declares no grouping, a grouping is too
            large, or the type exposes an operation no grouping covers
    """
    tp = _as_type(obj)
    groupings = groupings_of(tp)
    if not groupings:
        raise SegregationError(f"{tp.__name__} declares no capability groupings")

    for grouping in groupings:
        operations = operations_of(grouping)
        if len(operations) > max_operations:
            raise SegregationError(
                f"{grouping.__name__} bundles {len(operations)} operations "
                f"(max {max_operations}): {sorted(operations)}"
            )

    stray = exposed_operations(tp) - supported_operations(tp)
    if stray:
        raise SegregationError(f"{tp.__name__} exposes operations outside its capabilities: {sorted(stray)}")

    logger.debug("%s conforms to %s", tp.__name__, [grouping.__name__ for grouping in groupings])
    return groupings


__all__ = [
    "Capability",
    "SegregationError",
    "check_segregated",
    "exposed_operations",
    "groupings_of",
    "operations_of",
    "supported_operations",
]
