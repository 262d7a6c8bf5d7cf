"""
Junctions Package

A junction is a collection of elements that collapses to a single bool when
compared against a value or against another junction:

    all_of(1, 3, 7, 8) < 10        # every element is below 10
    any_of(1, 3, 7, 8) > 5         # at least one element exceeds 5
    none_of(1, 3, 7, 8) == 2       # no element equals 2
    one_of(2, 5, 98, 4) < 3        # exactly one element is below 3

Comparisons work in either direction (3 > any_of(1, 7, 8)) and between
junctions (all_of(2, 3) < any_of(1, 5)).

ARCHITECTURAL GUARANTEE:
------------------------
Junctions are immutable values. Comparisons never modify them and never
raise for well-formed input; empty junctions follow vacuous truth.
"""

from .comparisons import Comparison, compare
from .construction import (
    all_copy,
    all_of,
    all_ref,
    all_sorted,
    any_copy,
    any_of,
    any_ref,
    any_sorted,
    none_copy,
    none_of,
    none_ref,
    none_sorted,
    one_copy,
    one_of,
    one_ref,
    one_sorted,
)
from .junction import Junction, JunctionType
from .storage import AliasStore, ElementStore, JunctionAccessError, OrderedStore
from .variants import AllJunction, AnyJunction, NoneJunction, OneJunction

__version__ = "0.1.0"

__all__ = [
    "AliasStore",
    "AllJunction",
    "AnyJunction",
    "Comparison",
    "ElementStore",
    "Junction",
    "JunctionAccessError",
    "JunctionType",
    "NoneJunction",
    "OneJunction",
    "OrderedStore",
    "all_copy",
    "all_of",
    "all_ref",
    "all_sorted",
    "any_copy",
    "any_of",
    "any_ref",
    "any_sorted",
    "compare",
    "none_copy",
    "none_of",
    "none_ref",
    "none_sorted",
    "one_copy",
    "one_of",
    "one_ref",
    "one_sorted",
]
