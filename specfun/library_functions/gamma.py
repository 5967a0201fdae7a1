"""The Gamma function and its companions for real arguments.

All functions in this module accept Python numbers, numpy scalars and single element arrays and return a numpy
scalar of the numeric type the input is evaluated in (see :mod:`specfun.lib.numeric_types`). Numerical conditions
(poles, overflow, NaN inputs) are encoded in the return value, these functions do not raise for real inputs.

For positive arguments we use the Lanczos approximation (:mod:`specfun.library_functions.lanczos`), for arguments
below one half the reflection formula:

.. math::

    \\Gamma(x) = \\frac{\\pi}{\\sin(\\pi x) \\Gamma(1 - x)}
"""
from enum import Enum
import numpy as np

from specfun.lib.numeric_types import get_real_type
from specfun.lib.utils import as_scalar
from specfun.library_functions.lanczos import lanczos_gamma, lanczos_ln_gamma
from specfun.library_functions.trigonometric import sin_pi

__author__ = 'Robbert Harms'
__date__ = '2024-02-13'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


class GammaDomain(Enum):
    """The region of the real line a Gamma argument falls in, this determines the evaluation branch."""
    REGULAR = 'regular'
    POLE = 'pole'
    NEAR_POLE = 'near_pole'
    SATURATING_LARGE = 'saturating_large'
    NOT_A_NUMBER = 'not_a_number'


@np.errstate(all='ignore')
def classify_gamma_argument(x, numeric_type=None):
    """Determine the domain of a real Gamma function argument.

    Args:
        x (number): the argument
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        GammaDomain: the domain of the argument. ``NEAR_POLE`` is the reflected half line ``x < 0.5`` (without
            the poles themselves), ``SATURATING_LARGE`` holds the arguments for which Gamma overflows.
    """
    T = get_real_type(x, numeric_type)
    return _classify(T.cast(as_scalar(x)), T)


@np.errstate(all='ignore')
def gamma(x, numeric_type=None):
    """Compute the Gamma function.

    At the poles (the non-positive integers) this returns the infinity with the sign of the right hand limit,
    :math:`(-1)^n \\infty` at :math:`-n`. Negative zero gives negative infinity.

    Args:
        x (number): the argument
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        number: Gamma(x), infinite at the poles and for arguments beyond the overflow threshold, NaN for NaN
            and for negative infinity.
    """
    T = get_real_type(x, numeric_type)
    return real_gamma(T.cast(as_scalar(x)), T)


@np.errstate(all='ignore')
def ln_gamma(x, numeric_type=None):
    """Compute the logarithm of the absolute value of the Gamma function.

    This is computed directly in log space, such that it stays finite far beyond the point where Gamma overflows.
    Use :func:`gamma_sign` to get the sign of Gamma. Near the roots at one and two the error is absolute instead
    of relative.

    Args:
        x (number): the argument
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        number: log(|Gamma(x)|), positive infinity at the poles and for infinite arguments
    """
    T = get_real_type(x, numeric_type)
    return real_ln_gamma(T.cast(as_scalar(x)), T)


@np.errstate(all='ignore')
def gamma_sign(x, numeric_type=None):
    """The sign of the Gamma function.

    Args:
        x (number): the argument
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        number: 1 for positive x, 0 at the poles (including zero), -1 or 1 in between the negative poles and NaN
            for NaN.
    """
    T = get_real_type(x, numeric_type)
    return real_gamma_sign(T.cast(as_scalar(x)), T)


@np.errstate(all='ignore')
def rgamma(x, numeric_type=None):
    """The reciprocal Gamma function, ``1 / Gamma(x)``.

    This is an entire function, it is zero at the poles of Gamma. Where Gamma over- or underflows the result is
    computed from :func:`ln_gamma`.

    Args:
        x (number): the argument
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        number: 1 / Gamma(x)
    """
    T = get_real_type(x, numeric_type)
    x = T.cast(as_scalar(x))

    if T.isnan(x):
        return T.nan
    if T.isinf(x):
        return T.zero if x > 0 else T.nan
    if is_pole(x, T):
        return T.zero

    value = real_gamma(x, T)
    if T.isfinite(value) and T.fabs(value) >= T.tiny:
        return T.one / value
    return real_gamma_sign(x, T) * T.exp(-real_ln_gamma(x, T))


@np.errstate(all='ignore')
def poch(x, m, numeric_type=None):
    """The Pochhammer symbol, or rising factorial, ``(x)_m = Gamma(x + m) / Gamma(x)``.

    Integer parts of m are removed with the recurrence ``(x)_m = (x + m - 1) (x)_{m - 1}``, large x with small m use
    an asymptotic series, the remainder is computed from the log Gamma functions.

    Args:
        x (number): the base
        m (number): the increment
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        number: the Pochhammer symbol. Zero if only Gamma(x) has a pole, NaN if only Gamma(x + m) has one.
    """
    T = get_real_type(x, numeric_type)
    x = T.cast(as_scalar(x))
    m = T.cast(as_scalar(m))

    if T.isnan(x) or T.isnan(m):
        return T.nan

    one = T.one
    r = one

    while m >= one:
        if x + m == one:
            break
        m = m - one
        r = r * (x + m)
        if not T.isfinite(r) or r == 0:
            break

    while m <= -one:
        if x + m == T.zero:
            break
        r = r / (x + m)
        m = m + one
        if not T.isfinite(r) or r == 0:
            break

    if m == 0:
        return r

    if x > T.cast(1e4) and T.fabs(m) <= one:
        two = T.cast(2)
        three = T.cast(3)
        return r * T.power(x, m) * (
            one
            + m * (m - one) / (two * x)
            + m * (m - one) * (m - two) * (three * m - one) / (T.cast(24) * x * x)
            + m * m * (m - one) * (m - one) * (m - two) * (m - three) / (T.cast(48) * x * x * x))

    if is_pole(x + m, T) and not is_pole(x, T) and x + m != m:
        return T.nan

    if not is_pole(x + m, T) and is_pole(x, T):
        return T.zero

    return (r * T.exp(real_ln_gamma(x + m, T) - real_ln_gamma(x, T))
            * real_gamma_sign(x + m, T) * real_gamma_sign(x, T))


def real_gamma(x, numeric_type):
    """Evaluate the Gamma function for a value already of the given real numeric type.

    This is the building block of :func:`gamma`, shared with the complex Gamma evaluator.

    Args:
        x (number): the argument, of the given numeric type
        numeric_type (specfun.lib.numeric_types.RealType): the numeric type

    Returns:
        number: Gamma(x)
    """
    T = numeric_type
    domain = _classify(x, T)

    if domain is GammaDomain.NOT_A_NUMBER:
        return T.nan
    if domain is GammaDomain.POLE:
        return pole_infinity(x, T)
    if domain is GammaDomain.SATURATING_LARGE:
        return T.inf
    if domain is GammaDomain.REGULAR:
        return lanczos_gamma(x, T)

    y = T.one - x
    sine = sin_pi(x, T)
    if y > T.max_gamma_argument:
        log_value = T.log(T.pi) - T.log(T.fabs(sine)) - lanczos_ln_gamma(y, T)
        return T.copysign(T.exp(log_value), sine)
    return T.pi / (sine * lanczos_gamma(y, T))


def real_ln_gamma(x, numeric_type):
    """Evaluate ``log(|Gamma(x)|)`` for a value already of the given real numeric type.

    Args:
        x (number): the argument, of the given numeric type
        numeric_type (specfun.lib.numeric_types.RealType): the numeric type

    Returns:
        number: log(|Gamma(x)|)
    """
    T = numeric_type
    if T.isnan(x):
        return T.nan
    if T.isinf(x) or is_pole(x, T):
        return T.inf
    if x >= T.cast(0.5):
        return lanczos_ln_gamma(x, T)
    return T.log(T.pi) - T.log(T.fabs(sin_pi(x, T))) - lanczos_ln_gamma(T.one - x, T)


def real_gamma_sign(x, numeric_type):
    """Get the sign of Gamma(x) for a value already of the given real numeric type."""
    T = numeric_type
    if T.isnan(x):
        return T.nan
    if x > 0:
        return T.one
    if T.floor(x) == x:
        return T.zero
    if T.fmod(T.floor(x), T.cast(2)) != 0:
        return -T.one
    return T.one


def pole_infinity(x, numeric_type):
    """The signed infinity returned by Gamma at the pole x.

    Follows the right hand limit, :math:`(-1)^n \\infty` at :math:`-n`, with the sign of zero at zero.

    Args:
        x (number): a non-positive integer of the given numeric type
        numeric_type (specfun.lib.numeric_types.RealType): the numeric type

    Returns:
        number: positive or negative infinity
    """
    T = numeric_type
    if x == 0:
        return T.copysign(T.inf, x)
    if T.fmod(x, T.cast(2)) == 0:
        return T.inf
    return T.neg_inf


def is_pole(x, numeric_type):
    """If x is a pole of the Gamma function, that is, a finite non-positive integer."""
    return x <= 0 and numeric_type.isfinite(x) and numeric_type.floor(x) == x


def _classify(x, numeric_type):
    T = numeric_type
    if T.isnan(x):
        return GammaDomain.NOT_A_NUMBER
    if T.isinf(x):
        if x > 0:
            return GammaDomain.SATURATING_LARGE
        return GammaDomain.NOT_A_NUMBER
    if is_pole(x, T):
        return GammaDomain.POLE
    if x > T.max_gamma_argument:
        return GammaDomain.SATURATING_LARGE
    if x < T.cast(0.5):
        return GammaDomain.NEAR_POLE
    return GammaDomain.REGULAR
