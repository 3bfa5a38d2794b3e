"""
Counting helpers.

Invalid requests return -1 rather than raising, so callers can test the
result the same way for every helper.
"""

import math


def factorial(n: int) -> int:
    """n!, or -1 when n is negative."""
    if n < 0:
        return -1
    return math.factorial(n)


def permutations(total: int, chosen: int) -> int:
    """
    Ordered selections of `chosen` items out of `total`.

    Returns -1 when more items are chosen than exist (or a count is
    negative).
    """
    if chosen > total or chosen < 0:
        return -1
    return math.perm(total, chosen)


def choose(total: int, chosen: int) -> int:
    """
    Unordered selections of `chosen` items out of `total`.

    Returns -1 when more items are chosen than exist.
    """
    if chosen > total or chosen < 0:
        return -1
    return math.comb(total, chosen)
