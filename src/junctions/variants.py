"""
The four junction variants.

| Variant | Collapses to true when                         | Empty |
|---------|------------------------------------------------|-------|
| All     | every element passes the test                  | True  |
| Any     | at least one element passes                    | False |
| None    | no element passes (the negation of Any)        | True  |
| One     | exactly one element passes                     | False |

Each variant has two collapse rules:

    _collapse(tests):
        Full scan. Consumes per-element results lazily and stops as soon
        as the answer is known.

    _collapse_sorted(view):
        Short-cut over a sorted store. Only the weakest element (the one
        most likely to pass), the strongest (least likely) or the runner-up
        to the weakest are inspected.

For example, in (all_of(1, 2, 3) > n) only the lowest element matters: if it
exceeds n, the others do too. In (one_of(1, 2, 3) > n) we need only check
that 3 > n and not 2 > n.

!= is not the negation of ==, nor >= the negation of <:
    all_of(1, 2) == 2 and all_of(1, 2) != 2 are both False.
    any_of(1, 2) == 2 and any_of(1, 2) != 2 are both True.
Every operator is evaluated independently through the same collapse rule.
"""

from typing import Iterator

from .junction import Junction, JunctionType, SortedView


class AllJunction(Junction):
    """Collapses to true if the test holds for all of its elements."""

    junction_type = JunctionType.ALL

    def _collapse(self, tests: Iterator[bool]) -> bool:
        return all(tests)

    def _collapse_sorted(self, view: SortedView) -> bool:
        return view.is_empty() or view.strongest_passes()


class _ExistentialJunction(Junction):
    """
    Shared logic for Any and None.

    A None-junction is an inverted Any-junction, on the basis that
    (none_of(1, 2, 3) == 3) <=> not (any_of(1, 2, 3) == 3).
    """

    _invert = False

    def _collapse(self, tests: Iterator[bool]) -> bool:
        return any(tests) ^ self._invert

    def _collapse_sorted(self, view: SortedView) -> bool:
        return (not view.is_empty() and view.weakest_passes()) ^ self._invert


class AnyJunction(_ExistentialJunction):
    """Collapses to true if the test holds for any of its elements."""

    junction_type = JunctionType.ANY


class NoneJunction(_ExistentialJunction):
    """Collapses to true if the test holds for none of its elements."""

    junction_type = JunctionType.NONE
    _invert = True


class OneJunction(Junction):
    """
    Collapses to true if the test holds for exactly one of its elements.

    Against another One-junction nothing can be predicted from position, so
    every element is tried and matches are counted.
    """

    junction_type = JunctionType.ONE

    def _collapse(self, tests: Iterator[bool]) -> bool:
        matches = 0
        for passed in tests:
            if passed:
                matches += 1
                if matches > 1:
                    return False
        return matches == 1

    def _collapse_sorted(self, view: SortedView) -> bool:
        return (
            not view.is_empty()
            and view.weakest_passes()
            and not view.runner_up_passes()
        )


JUNCTION_CLASSES = {
    JunctionType.ALL: AllJunction,
    JunctionType.ANY: AnyJunction,
    JunctionType.NONE: NoneJunction,
    JunctionType.ONE: OneJunction,
}
