"""
Tests for the comparison operators and the reverse-comparison adaptor.

These tests verify:
    - Operator metadata (reflection, monotonicity, favoured direction)
    - Plain scalar evaluation
    - (scalar OP junction) is rewritten as (junction OP' scalar)
"""

import pytest
from junctions import all_of, any_of, none_of, one_of
from junctions.comparisons import Comparison, JunctionTag, compare, is_junction


class TestComparisonEnum:
    """Test operator metadata."""

    def test_six_operators(self):
        assert {c.value for c in Comparison} == {"<", "<=", "==", "!=", ">=", ">"}

    def test_lookup_by_symbol(self):
        assert Comparison("<=") is Comparison.LESS_EQUAL

    @pytest.mark.parametrize("op, reflected", [
        (Comparison.LESS_THAN, Comparison.GREATER_THAN),
        (Comparison.LESS_EQUAL, Comparison.GREATER_EQUAL),
        (Comparison.EQUALS, Comparison.EQUALS),
        (Comparison.NOT_EQUALS, Comparison.NOT_EQUALS),
        (Comparison.GREATER_EQUAL, Comparison.LESS_EQUAL),
        (Comparison.GREATER_THAN, Comparison.LESS_THAN),
    ])
    def test_reflected(self, op, reflected):
        """Swapping operands swaps < with > and <= with >=."""
        assert op.reflected is reflected

    def test_reflection_is_an_involution(self):
        for op in Comparison:
            assert op.reflected.reflected is op

    def test_equality_operators_are_not_monotonic(self):
        assert not Comparison.EQUALS.is_monotonic
        assert not Comparison.NOT_EQUALS.is_monotonic

    def test_ordering_operators_are_monotonic(self):
        for op in (Comparison.LESS_THAN, Comparison.LESS_EQUAL,
                   Comparison.GREATER_EQUAL, Comparison.GREATER_THAN):
            assert op.is_monotonic

    def test_favours_low(self):
        assert Comparison.LESS_THAN.favours_low
        assert Comparison.LESS_EQUAL.favours_low
        assert not Comparison.GREATER_EQUAL.favours_low
        assert not Comparison.GREATER_THAN.favours_low

    def test_holds(self):
        assert Comparison.LESS_THAN.holds(1, 2)
        assert not Comparison.LESS_THAN.holds(2, 2)
        assert Comparison.LESS_EQUAL.holds(2, 2)
        assert Comparison.EQUALS.holds("a", "a")
        assert Comparison.NOT_EQUALS.holds(1, 2)
        assert Comparison.GREATER_EQUAL.holds(3, 3)
        assert Comparison.GREATER_THAN.holds(4, 3)

    def test_holds_returns_bool(self):
        assert Comparison.EQUALS.holds(1, 1) is True


class TestCompare:
    """Test the free compare() adaptor."""

    def test_scalars(self):
        assert compare(1, Comparison.LESS_THAN, 2) is True
        assert compare(2, Comparison.LESS_THAN, 1) is False

    def test_junction_is_recognised(self):
        assert is_junction(all_of(1))
        assert isinstance(any_of(), JunctionTag)
        assert not is_junction([1, 2])

    def test_junction_on_left(self):
        assert compare(all_of(1, 2), Comparison.LESS_THAN, 3) is True

    def test_junction_on_right_is_reflected(self):
        """3 > all_of(1, 2) is evaluated as all_of(1, 2) < 3."""
        assert compare(3, Comparison.GREATER_THAN, all_of(1, 2)) is True
        assert compare(2, Comparison.GREATER_THAN, all_of(1, 2)) is False

    def test_two_junctions_are_not_reflected(self):
        """Junction-vs-junction goes to the left junction as written."""
        left = one_of(1, 2)
        right = any_of(2, 3)
        assert compare(left, Comparison.LESS_THAN, right) == left.compare(Comparison.LESS_THAN, right)


class TestReverseOperators:
    """(scalar OP junction) through Python's own operators."""

    @pytest.mark.parametrize("make", [all_of, any_of, none_of, one_of])
    def test_reverse_symmetry(self, make):
        j = make(1, 2, 3)
        for x in range(5):
            assert (x < j) == (j > x)
            assert (x <= j) == (j >= x)
            assert (x == j) == (j == x)
            assert (x != j) == (j != x)
            assert (x >= j) == (j <= x)
            assert (x > j) == (j < x)

    def test_reverse_samples(self):
        assert 3 > any_of(1, 7, 8)
        assert 0 < all_of(1, 2)
        assert not (2 < all_of(1, 2))
        assert 4 == one_of(1, 4)
        assert 6 == none_of(5)
        assert not (5 == none_of(5))

    def test_string_scalar(self):
        assert "Catherine" < all_of("Fred", "Jim", "Sheila")
