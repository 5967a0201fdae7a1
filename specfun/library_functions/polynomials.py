"""Routines for evaluating polynomials and rational functions.

Ported from the Cephes polynomial helpers as shipped with Scipy
(https://github.com/scipy/scipy/blob/master/scipy/special/cephes/polevl.h). The routines are generic over the
numeric type, they work for real as well as for complex arguments.
"""

__author__ = 'Robbert Harms'
__date__ = '2024-02-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def polevl(x, coefficients, numeric_type):
    """Evaluate a polynomial using Horner's scheme.

    Evaluates the polynomial of degree N:

    .. code-block:: none

                            2          N
        y  =  C  + C x + C x  +...+ C x
               0      1     2          N

    with the coefficients stored in reverse order, ``coefficients[0] = C_N, ..., coefficients[N] = C_0``.

    Args:
        x (number): the point at which to evaluate, of the given numeric type
        coefficients (ndarray): the coefficients, highest degree first
        numeric_type (specfun.lib.numeric_types.NumericType): the type to evaluate in

    Returns:
        number: the value of the polynomial at x
    """
    cast = numeric_type.cast
    result = cast(coefficients[0])
    for coefficient in coefficients[1:]:
        result = result * x + cast(coefficient)
    return result


def ratevl(x, numerator, denominator, numeric_type):
    """Evaluate a rational function.

    For arguments larger than one in magnitude we evaluate in ``1/x`` to prevent overflow, that is, we evaluate
    the reversed polynomials in ``1/x`` and multiply with ``x^(M - N)``.

    Args:
        x (number): the point at which to evaluate, of the given numeric type
        numerator (ndarray): numerator coefficients of degree M, highest degree first
        denominator (ndarray): denominator coefficients of degree N, highest degree first
        numeric_type (specfun.lib.numeric_types.NumericType): the type to evaluate in

    Returns:
        number: the value of the rational function at x
    """
    if numeric_type.fabs(x) > 1:
        y = numeric_type.one / x
        result = polevl(y, numerator[::-1], numeric_type) / polevl(y, denominator[::-1], numeric_type)

        degree_difference = len(numerator) - len(denominator)
        if degree_difference:
            result = result * numeric_type.power(x, numeric_type.cast(degree_difference))
        return result
    return polevl(x, numerator, numeric_type) / polevl(x, denominator, numeric_type)
