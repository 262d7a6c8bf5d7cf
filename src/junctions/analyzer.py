"""
Junction Analyzer — read-only diagnostics for a junction.

Reports what a junction holds and how it will be evaluated:
    - Variant and element count
    - Storage strategy and whether comparisons can short-circuit
    - Extreme elements (ordered storage only)
    - Warning flags for surprising behaviour

IMPORTANT: This does NOT modify the junction or its storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from junctions.junction import Junction, JunctionType
from junctions.storage import OrderedStore


@dataclass
class JunctionReport:
    """Snapshot of a junction's shape and evaluation strategy."""

    junction_type: JunctionType
    size: int = 0
    is_empty: bool = True
    storage: str = "ordered"
    short_circuits: bool = False
    presorted: bool = False
    minimum: Optional[Any] = None
    maximum: Optional[Any] = None

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _count_duplicates(elements) -> int:
    """Count elements equal to an earlier one; quadratic, no hashing needed."""
    seen: List[Any] = []
    duplicates = 0
    for elem in elements:
        if any(elem == prev for prev in seen):
            duplicates += 1
        else:
            seen.append(elem)
    return duplicates


def analyze_junction(junction: Junction) -> JunctionReport:
    """
    Describe a junction.

    Checks for:
    - Unordered storage (every comparison is a full scan)
    - Duplicates in an aliased collection (they count separately for One)
    - Ordered storage whose elements turned out not to be totally ordered

    Returns a JunctionReport.
    """
    store = junction.store
    report = JunctionReport(junction_type=junction.junction_type)
    report.size = len(junction)
    report.is_empty = junction.is_empty()
    report.short_circuits = junction.ordered

    if isinstance(store, OrderedStore):
        report.storage = "ordered"
        report.presorted = store.presorted
        if not report.is_empty:
            report.minimum = store.first_element()
            report.maximum = store.last_element()
        if not store.ordered:
            report.add_warning("Elements are not totally ordered: comparisons scan every element")
    else:
        report.storage = "alias"
        report.add_warning("Aliased storage: comparisons scan every element")
        duplicates = _count_duplicates(store.elements)
        if duplicates:
            report.add_warning(
                f"Aliased collection holds {duplicates} duplicate element(s); "
                "they are counted separately by One-junctions"
            )

    return report
