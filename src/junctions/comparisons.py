"""
Comparison operators for junctions.

Every collapse performed by a junction is driven by one of six relational
operators. They are represented here as an Enum, never as strings or bare
functions, so that the engine can reason about them:

    - which operators are monotonic (and in which direction)
    - how an operator changes when its operands swap sides
    - how a single element is tested against a scalar or another junction

ARCHITECTURAL RULE:
    This module knows nothing about quantifiers.
    It only knows how to ask "does left OP right hold?".

REVERSE COMPARISONS:
    (scalar OP junction) is evaluated as (junction OP' scalar), where OP' is
    OP with its operands swapped:

        <   becomes  >
        <=  becomes  >=
        ==  stays    ==
        !=  stays    !=
        >=  becomes  <=
        >   becomes  <

    These rewrites assume conventional relationships between the operators,
    e.g. (a < b) <=> (b > a). That does not hold between two junctions, so
    the rewrite is applied only when exactly one side is a junction.
"""

import operator
from abc import ABC
from enum import Enum


class JunctionTag(ABC):
    """
    Marker base for anything that collapses under comparison.

    Lets this module recognise a junction without importing the junction
    classes themselves.
    """
    pass


class Comparison(Enum):
    """
    The six relational operators a junction understands.

    Values are the conventional operator spellings, which also serve as the
    stable names used in reports and serialized data.
    """

    LESS_THAN = "<"
    LESS_EQUAL = "<="
    EQUALS = "=="
    NOT_EQUALS = "!="
    GREATER_EQUAL = ">="
    GREATER_THAN = ">"

    @property
    def reflected(self) -> "Comparison":
        """The operator to use once the operands have swapped sides."""
        return _REFLECTED[self]

    @property
    def is_monotonic(self) -> bool:
        """False for == and !=, which have no short-cut on sorted data."""
        return self not in (Comparison.EQUALS, Comparison.NOT_EQUALS)

    @property
    def favours_low(self) -> bool:
        """
        True when (x OP rhs) holding for x implies it holds for every smaller x.

        That is the case for < and <=. For >= and > it is the larger elements
        that are favoured. Meaningless for == and !=.
        """
        return self in (Comparison.LESS_THAN, Comparison.LESS_EQUAL)

    def holds(self, left, right) -> bool:
        """Apply the operator to two plain (non-junction) values."""
        return bool(_OPERATORS[self](left, right))


_REFLECTED = {
    Comparison.LESS_THAN: Comparison.GREATER_THAN,
    Comparison.LESS_EQUAL: Comparison.GREATER_EQUAL,
    Comparison.EQUALS: Comparison.EQUALS,
    Comparison.NOT_EQUALS: Comparison.NOT_EQUALS,
    Comparison.GREATER_EQUAL: Comparison.LESS_EQUAL,
    Comparison.GREATER_THAN: Comparison.LESS_THAN,
}

_OPERATORS = {
    Comparison.LESS_THAN: operator.lt,
    Comparison.LESS_EQUAL: operator.le,
    Comparison.EQUALS: operator.eq,
    Comparison.NOT_EQUALS: operator.ne,
    Comparison.GREATER_EQUAL: operator.ge,
    Comparison.GREATER_THAN: operator.gt,
}


def is_junction(value) -> bool:
    return isinstance(value, JunctionTag)


def compare(left, comparison: Comparison, right) -> bool:
    """
    Evaluate (left OP right) where either side may be a junction.

    Rules:
        - junction on the left: the junction collapses against the right
        - junction only on the right: rewritten as (right OP' left)
        - no junction: ordinary operator semantics

    Args:
        left: Element, scalar or junction
        comparison: The operator to apply
        right: Element, scalar or junction

    Returns:
        A plain bool, never a junction.
    """
    if is_junction(left):
        return left.compare(comparison, right)
    if is_junction(right):
        return right.compare(comparison.reflected, left)
    return comparison.holds(left, right)
