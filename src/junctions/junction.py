"""
Junction core.

A junction is a pair (store, variant). The store holds the elements; the
variant (All, Any, None, One) decides how per-element test results collapse
into one bool. This module holds everything the four variants share:

    - element access and emptiness
    - the transform operation (map / call)
    - the six rich-comparison operators
    - the dispatch between short-circuit and full-scan evaluation

Variant-specific collapse rules live in variants.py.

IMPORTANT:
    Junctions are immutable. Nothing here changes the store after
    construction; map() always builds a new junction.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator, Sequence
from enum import Enum
from typing import Any, Callable

from .comparisons import Comparison, JunctionTag, compare
from .storage import AliasStore, ElementStore, JunctionAccessError, OrderedStore


class JunctionType(Enum):
    """Identity of a junction's variant, usable for diagnostics and dispatch."""

    NONE = "none"
    ONE = "one"
    ANY = "any"
    ALL = "all"


class Junction(JunctionTag):
    """
    Base class for the four junction variants.

    Subclasses provide:
        junction_type: their JunctionType
        _collapse(tests): reduce an iterator of bools by the quantifier
        _collapse_sorted(view): the short-circuit rule, given a SortedView
            of the extreme elements

    Variants must not inherit from one another. Python gives a right-hand
    operand's reflected operator priority when its class is a subclass of the
    left-hand operand's class, which would evaluate (any OP none) as
    (none OP' any).
    """

    junction_type: JunctionType

    def __init__(self, store: ElementStore):
        self._store = store

    # ------------------------------------------------------------------
    # Construction modes
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, *elements) -> Junction:
        """Copy mode over a literal list of elements."""
        return cls(OrderedStore(elements))

    @classmethod
    def copy(cls, elements: Iterable) -> Junction:
        """Copy mode: sorted, de-duplicated snapshot of any iterable."""
        return cls(OrderedStore(elements))

    @classmethod
    def ref(cls, container: Collection) -> Junction:
        """Alias mode: borrow a caller-owned collection without copying it."""
        return cls(AliasStore(container))

    @classmethod
    def from_sorted(cls, elements: Sequence) -> Junction:
        """Adopt an ascending, duplicate-free sequence without re-sorting."""
        return cls(OrderedStore.from_sorted(elements))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    @property
    def store(self) -> ElementStore:
        return self._store

    @property
    def elements(self) -> Collection:
        return self._store.elements

    @property
    def ordered(self) -> bool:
        return self._store.ordered

    def is_empty(self) -> bool:
        return self._store.is_empty()

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator:
        return iter(self._store.elements)

    def any_element(self) -> Any:
        return self._store.any_element()

    def _ordered_store(self) -> OrderedStore:
        if not isinstance(self._store, OrderedStore):
            raise JunctionAccessError(
                f"Positional access needs ordered storage, not {type(self._store).__name__}"
            )
        return self._store

    def first_element(self) -> Any:
        return self._ordered_store().first_element()

    def second_element(self) -> Any:
        return self._ordered_store().second_element()

    def penultimate_element(self) -> Any:
        return self._ordered_store().penultimate_element()

    def last_element(self) -> Any:
        return self._ordered_store().last_element()

    # ------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------

    def map(self, transform: Callable[[Any], Any]) -> Junction:
        """
        Apply a pure function to every element.

        Returns a new junction of the same variant backed by a fresh
        OrderedStore, whatever storage this junction uses. Results that
        compare equal collapse into one element.
        """
        if not callable(transform):
            raise TypeError(f"Junction transform must be callable, got {type(transform).__name__}")
        return type(self)(OrderedStore(transform(elem) for elem in self._store.elements))

    def __call__(self, transform: Callable[[Any], Any]) -> Junction:
        return self.map(transform)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, comparison: Comparison, rhs: Any) -> bool:
        """
        Collapse (self OP rhs) to a bool.

        rhs may be a plain value or any junction. The sorted short-cut is
        taken only when the store is ordered, the operator is monotonic and
        rhs is not a One-junction; a None-junction on the right reverses
        which end of the store is favoured.
        """
        rhs_type = rhs.junction_type if isinstance(rhs, Junction) else None

        if self.ordered and comparison.is_monotonic and rhs_type is not JunctionType.ONE:
            favours_low = comparison.favours_low
            if rhs_type is JunctionType.NONE:
                favours_low = not favours_low
            return self._collapse_sorted(SortedView(self._store, comparison, rhs, favours_low))

        return self._collapse(compare(elem, comparison, rhs) for elem in self._store.elements)

    def _collapse(self, tests: Iterator[bool]) -> bool:
        raise NotImplementedError

    def _collapse_sorted(self, view: "SortedView") -> bool:
        raise NotImplementedError

    def __lt__(self, other):
        return self.compare(Comparison.LESS_THAN, other)

    def __le__(self, other):
        return self.compare(Comparison.LESS_EQUAL, other)

    def __eq__(self, other):
        return self.compare(Comparison.EQUALS, other)

    def __ne__(self, other):
        return self.compare(Comparison.NOT_EQUALS, other)

    def __ge__(self, other):
        return self.compare(Comparison.GREATER_EQUAL, other)

    def __gt__(self, other):
        return self.compare(Comparison.GREATER_THAN, other)

    __hash__ = None

    def __repr__(self) -> str:
        mode = "ordered" if isinstance(self._store, OrderedStore) else "alias"
        return f"{type(self).__name__}({list(self._store.elements)!r}, storage={mode!r})"


class SortedView:
    """
    Lazy access to the extreme elements of a sorted store under one test.

    "Weakest" is the element most likely to pass (x OP rhs); "strongest" is
    the one least likely to. runner_up_passes() tests the element next to the
    weakest, which a One-junction needs to rule out a second match.
    """

    def __init__(self, store: OrderedStore, comparison: Comparison, rhs: Any, favours_low: bool):
        self._store = store
        self._comparison = comparison
        self._rhs = rhs
        self._favours_low = favours_low

    def is_empty(self) -> bool:
        return self._store.is_empty()

    def _passes(self, elem) -> bool:
        return compare(elem, self._comparison, self._rhs)

    def weakest_passes(self) -> bool:
        store = self._store
        return self._passes(store.first_element() if self._favours_low else store.last_element())

    def strongest_passes(self) -> bool:
        store = self._store
        return self._passes(store.last_element() if self._favours_low else store.first_element())

    def runner_up_passes(self) -> bool:
        store = self._store
        if not store.has_second_element():
            return False
        return self._passes(store.second_element() if self._favours_low else store.penultimate_element())
