"""Counting combinations and permutations.

All functions return 0 for combinations that can not be formed, that is, when k is larger than n or when one of
the arguments is negative.
"""
import numpy as np

from specfun.lib.utils import to_integer_type

__author__ = 'Robbert Harms'
__date__ = '2024-02-16'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def comb(n, k):
    """The number of ways to choose k out of n items without repetition and without order, "n choose k".

    Args:
        n (int): the number of items
        k (int): the number of items to choose

    Returns:
        int: the binomial coefficient
    """
    n = int(n)
    k = int(k)
    if k > n or n < 0 or k < 0:
        return 0

    result = 1
    for i in range(1, min(k, n - k) + 1):
        result = result * (n + 1 - i) // i
    return result


def comb_rep(n, k):
    """The number of ways to choose k out of n items with repetition and without order.

    Args:
        n (int): the number of items
        k (int): the number of items to choose

    Returns:
        int: ``comb(n + k - 1, k)``
    """
    return comb(int(n) + int(k) - 1, k)


def perm(n, k):
    """The number of ways to choose k out of n items without repetition and with order.

    Args:
        n (int): the number of items
        k (int): the number of items to choose

    Returns:
        int: ``n! / (n - k)!``
    """
    n = int(n)
    k = int(k)
    if k > n or n < 0 or k < 0:
        return 0

    result = 1
    for value in range(n - k + 1, n + 1):
        result *= value
    return result


def checked_comb(n, k, dtype=np.int64):
    """The binomial coefficient as a value of the given numpy integer type, None if it does not fit."""
    return to_integer_type(comb(n, k), dtype)


def checked_comb_rep(n, k, dtype=np.int64):
    """The number of combinations with repetition as a value of the given integer type, None if it does not fit."""
    return to_integer_type(comb_rep(n, k), dtype)


def checked_perm(n, k, dtype=np.int64):
    """The number of permutations as a value of the given integer type, None if it does not fit."""
    return to_integer_type(perm(n, k), dtype)
