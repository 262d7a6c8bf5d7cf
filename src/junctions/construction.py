"""
Helper functions to create junctions.

It's syntactically easier to call these than the class constructors.
Every variant gets the same four modes:

    X_of(*elements)      copy a literal list (sorted, de-duplicated)
    X_copy(iterable)     copy any iterable, iterator ranges included
    X_ref(collection)    alias a caller-owned collection, no copy
    X_sorted(sequence)   adopt an already ascending, unique sequence

MEMORY MANAGEMENT:
    Copy modes take a snapshot. Later changes to the source do not affect
    the junction:

        digits = [1, 1, 2, 3, 5, 8]
        any_fib = any_copy(digits)
        digits.append(13)
        assert not (13 == any_fib)

    Alias mode reads the caller's collection on every comparison, so
    changes show through:

        any_fib = any_ref(digits)
        digits.append(21)
        assert 21 == any_fib

    There is no default that guesses between the two. Choose explicitly.
"""

from .variants import AllJunction, AnyJunction, NoneJunction, OneJunction

all_of = AllJunction.of
all_copy = AllJunction.copy
all_ref = AllJunction.ref
all_sorted = AllJunction.from_sorted

any_of = AnyJunction.of
any_copy = AnyJunction.copy
any_ref = AnyJunction.ref
any_sorted = AnyJunction.from_sorted

none_of = NoneJunction.of
none_copy = NoneJunction.copy
none_ref = NoneJunction.ref
none_sorted = NoneJunction.from_sorted

one_of = OneJunction.of
one_copy = OneJunction.copy
one_ref = OneJunction.ref
one_sorted = OneJunction.from_sorted
