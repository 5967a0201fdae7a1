"""The factorial, the double factorial and the multifactorial for integers.

These are computed exactly as Python integers. Small values are looked up in tables, larger values are computed
as products of windows of at most sixteen factors. The ``checked_*`` variants compute the value for a fixed width
numpy integer type and return None when it does not fit.
"""
import numpy as np

from specfun.lib.utils import to_integer_type

__author__ = 'Robbert Harms'
__date__ = '2024-02-16'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


_MAX_MULTIPLICATIONS = 16

_FACTORIALS = (1, 1, 2, 6, 24, 120, 720, 5040, 40320, 362880, 3628800, 39916800, 479001600, 6227020800,
               87178291200, 1307674368000, 20922789888000)

_DOUBLE_FACTORIALS = (
    1, 1, 2, 3, 8, 15, 48, 105, 384, 945, 3840, 10395, 46080, 135135, 645120, 2027025, 10321920,
    34459425, 185794560, 654729075, 3715891200, 13749310575, 81749606400, 316234143225,
    1961990553600, 7905853580625, 51011754393600, 213458046676875, 1428329123020800,
    6190283353629375, 42849873690624000, 191898783962510625, 1371195958099968000)


def factorial(n):
    """The factorial ``n! = n (n - 1) ... 1``.

    Args:
        n (int): the argument

    Returns:
        int: n!, 1 for zero and 0 for negative n
    """
    return factorialk(n, 1)


def factorial2(n):
    """The double factorial ``n!! = n (n - 2) (n - 4) ...``, ending in one or two.

    Args:
        n (int): the argument

    Returns:
        int: n!!, 1 for zero and one, 0 for negative n
    """
    return factorialk(n, 2)


def factorialk(n, k):
    """The multifactorial ``n (n - k) (n - 2k) ...``, the product of the positive terms.

    Args:
        n (int): the argument
        k (int): the step size, a positive integer

    Returns:
        int: the k-factorial of n, 1 for zero and 0 for negative n

    Raises:
        ValueError: if k is not positive
    """
    n = int(n)
    k = int(k)
    if k <= 0:
        raise ValueError('The step of the multifactorial should be positive, {} given.'.format(k))
    if n < 0:
        return 0

    if k == 1 and n < len(_FACTORIALS):
        return _FACTORIALS[n]
    if k == 2 and n < len(_DOUBLE_FACTORIALS):
        return _DOUBLE_FACTORIALS[n]

    result = 1
    while n > 0:
        result *= _partial_product(max(n - k * _MAX_MULTIPLICATIONS, 0), n, k)
        n -= k * _MAX_MULTIPLICATIONS
    return result


def checked_factorial(n, dtype=np.int64):
    """The factorial as a value of the given integer type.

    Args:
        n (int): the argument
        dtype (np.dtype or type): the numpy integer type of the result

    Returns:
        np.integer or None: the factorial, None if it does not fit in the given type
    """
    return to_integer_type(factorial(n), dtype)


def checked_factorial2(n, dtype=np.int64):
    """The double factorial as a value of the given integer type, None if it does not fit."""
    return to_integer_type(factorial2(n), dtype)


def checked_factorialk(n, k, dtype=np.int64):
    """The multifactorial as a value of the given integer type, None if it does not fit.

    Raises:
        ValueError: if k is not positive
    """
    return to_integer_type(factorialk(n, k), dtype)


def _partial_product(start, end, step):
    """Multiply ``end (end - step) (end - 2 step) ...`` over all terms larger than start."""
    result = 1
    for term in range(end, start, -step):
        result *= term
    return result
