"""Integer and rational number sequences, the Bernoulli, tangent and secant numbers.

The tangent and secant numbers are computed with the recurrences of Knuth and Buckholtz (1967), "Computation of
Tangent, Euler, and Bernoulli Numbers", starting from the factorials.
"""
from fractions import Fraction
import numpy as np

from specfun.lib.utils import check_non_negative_int
from specfun.library_functions.combinatorics import comb

__author__ = 'Robbert Harms'
__date__ = '2024-02-17'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def bernoulli(n, exact=False):
    """Compute the Bernoulli numbers B_0 up to and including B_n.

    This uses the convention ``B_1 = -1/2``. The numbers are computed exactly with the recurrence

    .. math::

        B_m = -\\frac{1}{m + 1} \\sum_{k=0}^{m-1} \\binom{m + 1}{k} B_k

    Args:
        n (int): the index of the last Bernoulli number, non-negative
        exact (boolean): if True we return the exact fractions, else an array of floating point values

    Returns:
        list of Fraction or ndarray: the n + 1 Bernoulli numbers

    Raises:
        ValueError: if n is negative
    """
    n = check_non_negative_int(n, 'n')

    numbers = [Fraction(1)]
    for m in range(1, n + 1):
        if m > 1 and m % 2 == 1:
            numbers.append(Fraction(0))
        else:
            total = sum(comb(m + 1, k) * b_k for k, b_k in enumerate(numbers))
            numbers.append(-total / (m + 1))

    if exact:
        return numbers
    return np.array([float(b) for b in numbers], dtype=np.float64)


def tangent_numbers(n):
    """Compute the first n tangent numbers, or zag numbers, 1, 2, 16, 272, ...

    These are the coefficients ``T_k`` of the series ``tan(x) = sum_k T_k x^(2k - 1) / (2k - 1)!``.

    Args:
        n (int): the number of tangent numbers

    Returns:
        list of int: the tangent numbers

    Raises:
        ValueError: if n is negative
    """
    n = check_non_negative_int(n, 'n')
    numbers = _factorials(n)
    for k in range(1, n):
        for j in range(k, n):
            numbers[j] = (j - k) * numbers[j - 1] + (j - k + 2) * numbers[j]
    return numbers


def secant_numbers(n):
    """Compute the first n secant numbers, or zig numbers, 1, 1, 5, 61, 1385, ...

    These are the coefficients ``S_k`` of the series ``sec(x) = sum_k S_k x^(2k) / (2k)!``.

    Args:
        n (int): the number of secant numbers

    Returns:
        list of int: the secant numbers

    Raises:
        ValueError: if n is negative
    """
    n = check_non_negative_int(n, 'n')
    numbers = _factorials(n)
    for k in range(1, n):
        for j in range(k + 1, n):
            numbers[j] = (j - k) * numbers[j - 1] + (j - k + 1) * numbers[j]
    return numbers


def _factorials(n):
    factorials = [1] * n
    for k in range(1, n):
        factorials[k] = k * factorials[k - 1]
    return factorials
