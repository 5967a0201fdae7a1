"""Sine and cosine of pi times the argument.

Computing ``sin(pi * x)`` naively loses all accuracy for large x and does not give exact zeros at the integers.
The functions here first reduce the argument exactly (using ``fmod`` and exact subtractions) to a small interval
and only then multiply by pi.
"""
import numpy as np

__author__ = 'Robbert Harms'
__date__ = '2024-02-13'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def sin_pi(x, numeric_type):
    """Compute ``sin(pi * x)`` for a real x.

    Exactly zero at the integers, with the sign of x for zero itself.

    Args:
        x (number): a real number of the given type
        numeric_type (specfun.lib.numeric_types.RealType): the type of x

    Returns:
        number: sin(pi * x), NaN for non-finite x
    """
    T = numeric_type
    if not T.isfinite(x):
        return T.nan

    one = T.one
    two = T.cast(2)
    half = T.cast(0.5)

    y = T.fmod(x, two)
    if y > one:
        y = y - two
    elif y < -one:
        y = y + two

    if y > half:
        y = one - y
    elif y < -half:
        y = -one - y
    return T.sin(T.pi * y)


def cos_pi(x, numeric_type):
    """Compute ``cos(pi * x)`` for a real x.

    Exactly zero at the half integers.

    Args:
        x (number): a real number of the given type
        numeric_type (specfun.lib.numeric_types.RealType): the type of x

    Returns:
        number: cos(pi * x), NaN for non-finite x
    """
    T = numeric_type
    if not T.isfinite(x):
        return T.nan

    y = T.fabs(T.fmod(x, T.cast(2)))
    if y > T.one:
        y = T.cast(2) - y

    half = T.cast(0.5)
    if y == half:
        return T.zero
    if y < T.cast(0.25):
        return T.cos(T.pi * y)
    return T.sin(T.pi * (half - y))


def sin_pi_complex(z, numeric_type):
    """Compute ``sin(pi * z)`` for a complex z.

    Uses ``sin(pi (a + ib)) = sin(pi a) cosh(pi b) + i cos(pi a) sinh(pi b)`` with the exactly reduced real
    functions. Exact zeros of the trigonometric factors are kept as zeros when the hyperbolic factor overflows.

    Args:
        z (number): a complex number of the given type
        numeric_type (specfun.lib.numeric_types.ComplexType): the type of z

    Returns:
        number: sin(pi * z)
    """
    R = numeric_type.real_type
    a = numeric_type.real(z)
    b = numeric_type.imag(z)

    pi_b = R.pi * b
    sin_a = sin_pi(a, R)
    cos_a = cos_pi(a, R)

    real = sin_a if sin_a == 0 else sin_a * R.cosh(pi_b)
    imag = cos_a * b if cos_a == 0 else cos_a * R.sinh(pi_b)
    return numeric_type.make(real, imag)


def log_sin_pi_complex(z, numeric_type):
    """Compute the principal logarithm of ``sin(pi * z)`` for a complex z.

    Close to the real axis this is the logarithm of :func:`sin_pi_complex`. Further away ``sin(pi z)`` overflows,
    there we use, for ``b = Im(z) > 0``:

    .. code-block:: none

        log(sin(pi z)) = pi b - log(2) + log(1 - e) + i (pi/2 - pi a)     with e = exp(2 pi i z)

    where ``|e| = exp(-2 pi b)`` is small, the imaginary part is wrapped to the principal range. For ``b < 0`` we
    use the symmetry ``sin(pi conj(z)) = conj(sin(pi z))``.

    Args:
        z (number): a complex number of the given type, not a zero of the sine
        numeric_type (specfun.lib.numeric_types.ComplexType): the type of z

    Returns:
        number: Log(sin(pi * z)) with the imaginary part in (-pi, pi]
    """
    C = numeric_type
    R = C.real_type
    a = C.real(z)
    b = C.imag(z)

    if R.fabs(b) < R.one:
        return C.log(sin_pi_complex(z, C))

    if b < 0:
        result = C.conjugate(log_sin_pi_complex(C.make(a, -b), C))
        if C.imag(result) == -R.pi:
            return C.make(C.real(result), R.pi)
        return result

    two_a = R.cast(2) * a
    scale = R.exp(R.cast(-2) * R.pi * b)
    one_minus_e = C.make(R.one - scale * cos_pi(two_a, R), -scale * sin_pi(two_a, R))

    real = R.pi * b + R.log(R.fabs(one_minus_e)) - R.cast(np.log(2))
    imag = R.pi / R.cast(2) - R.pi * R.fmod(a, R.cast(2)) + R.cast(np.angle(one_minus_e))

    two_pi = R.cast(2) * R.pi
    while imag > R.pi:
        imag = imag - two_pi
    while imag <= -R.pi:
        imag = imag + two_pi
    return C.make(real, imag)
