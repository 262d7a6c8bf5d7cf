"""
Storage strategies for junction elements.

A junction never holds its elements directly. It owns exactly one store,
chosen at construction and never replaced:

    OrderedStore:
        Copies the input, sorts it ascending and drops duplicates.
        O(N log N) to build, O(N) space.
        Exposes first / second / penultimate / last elements, which is what
        lets comparisons short-circuit.

    AliasStore:
        Keeps a reference to a collection owned by the caller.
        O(1) to build, no copy, no sort, no deduplication.
        Every comparison scans the whole collection.

LIFETIME CONTRACT (AliasStore):
    The aliased collection is read each time the junction is compared.
    If the caller mutates it, the junction sees the mutation. Nothing here
    detects or reports that; callers that need a snapshot use copy mode.
"""

import warnings
from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable, Iterator, Sequence
from typing import Any, Tuple


class JunctionAccessError(AssertionError):
    """
    Raised when a positional accessor is called without its precondition.

    This is a programming error, not a recoverable condition: the caller
    asked for, say, the second element of a store holding fewer than two.
    """
    pass


class ElementStore(ABC):
    """
    Interface shared by both storage strategies.

    Properties:
        ordered: True if elements are known to be unique and ascending, so
            that comparisons may inspect only the extreme elements.
    """

    ordered: bool = False

    @property
    @abstractmethod
    def elements(self) -> Collection:
        """The full element view, in storage order."""

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0

    def has_second_element(self) -> bool:
        return len(self) >= 2

    def any_element(self) -> Any:
        """Return an arbitrary element. The store must not be empty."""
        for elem in self.elements:
            return elem
        raise JunctionAccessError("any_element() called on an empty store")


class OrderedStore(ElementStore):
    """
    Owns a sorted, de-duplicated snapshot of the elements.

    Only < is used for sorting and only == for de-duplication, so elements
    need not be hashable.

    If two neighbouring elements turn out to be neither equal nor ascending
    after the sort (NaN, or a type with only a partial order), the elements
    are not totally ordered. A UserWarning is issued and `ordered` is cleared,
    so every comparison falls back to a full scan instead of trusting
    positions that mean nothing.

    Properties:
        presorted: True if the store adopted an already sorted sequence
            rather than sorting one itself.
    """

    ordered = True

    def __init__(self, elements: Iterable = ()):
        self.presorted = False
        self._elements: Tuple = self._deduplicate(sorted(elements))

    @classmethod
    def from_sorted(cls, elements: Sequence) -> "OrderedStore":
        """
        Adopt an ascending, duplicate-free sequence without re-sorting it.

        The ordering is verified in a single linear pass.

        Raises:
            ValueError: If the sequence is not strictly ascending.
        """
        store = cls.__new__(cls)
        items = tuple(elements)
        for prev, elem in zip(items, items[1:]):
            if not prev < elem:
                raise ValueError(
                    f"Elements are not strictly ascending: {prev!r} then {elem!r}"
                )
        store._elements = items
        store.presorted = True
        return store

    def _deduplicate(self, ordered_items: list) -> Tuple:
        unique = []
        for elem in ordered_items:
            if unique:
                prev = unique[-1]
                if prev == elem:
                    continue
                if not prev < elem and self.ordered:
                    warnings.warn(
                        f"Junction elements are not totally ordered ({prev!r}, {elem!r}); "
                        "comparisons will scan every element",
                        UserWarning,
                    )
                    self.ordered = False
            unique.append(elem)
        return tuple(unique)

    @property
    def elements(self) -> Tuple:
        return self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def first_element(self) -> Any:
        if self.is_empty():
            raise JunctionAccessError("first_element() requires a non-empty store")
        return self._elements[0]

    def second_element(self) -> Any:
        if not self.has_second_element():
            raise JunctionAccessError("second_element() requires at least two elements")
        return self._elements[1]

    def penultimate_element(self) -> Any:
        if not self.has_second_element():
            raise JunctionAccessError("penultimate_element() requires at least two elements")
        return self._elements[-2]

    def last_element(self) -> Any:
        if self.is_empty():
            raise JunctionAccessError("last_element() requires a non-empty store")
        return self._elements[-1]


class AliasStore(ElementStore):
    """
    Borrows a caller-owned collection.

    The collection is presented in its own iteration order, duplicates and
    all. It must be sized and re-iterable: a one-shot iterator would be
    exhausted by the first comparison.
    """

    ordered = False

    def __init__(self, container: Collection):
        if isinstance(container, Iterator) or not isinstance(container, Collection):
            raise TypeError(
                f"Alias storage needs a sized, re-iterable collection, got {type(container).__name__}"
            )
        self._container = container

    @property
    def elements(self) -> Collection:
        return self._container

    def __len__(self) -> int:
        return len(self._container)
