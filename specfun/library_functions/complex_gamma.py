"""The Gamma function and its logarithm for complex arguments.

These use the same Lanczos routines as the real evaluators in :mod:`specfun.library_functions.gamma`, in complex
arithmetic. On the real axis the real evaluators are used directly, such that for a real z the complex Gamma
function gives exactly the same value as the real one.
"""
import numpy as np

from specfun.lib.numeric_types import get_complex_type
from specfun.lib.utils import as_scalar
from specfun.library_functions.gamma import real_gamma, real_ln_gamma, pole_infinity, is_pole
from specfun.library_functions.lanczos import lanczos_gamma, lanczos_ln_gamma
from specfun.library_functions.trigonometric import sin_pi_complex, log_sin_pi_complex

__author__ = 'Robbert Harms'
__date__ = '2024-02-15'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


# beyond this imaginary part the direct reflection formula over- or underflows in its intermediates
_DIRECT_REFLECTION_MAX_IMAG = 10


@np.errstate(all='ignore')
def gamma_complex(z, numeric_type=None):
    """Compute the Gamma function for a complex argument.

    Args:
        z (number): the argument, a real input is treated as a complex number with a zero imaginary part
        numeric_type (NumericType or str): the numeric type to evaluate in, real types are promoted to the complex
            type of the same precision. Inferred from z if not given.

    Returns:
        number: Gamma(z). NaN in both parts for NaN and for non-finite inputs off the real axis. At the poles both
            parts are infinite with the sign of the real Gamma function at that pole.
    """
    C = get_complex_type(z, numeric_type)
    return complex_gamma(C.cast(as_scalar(z)), C)


@np.errstate(all='ignore')
def ln_gamma_complex(z, numeric_type=None):
    """Compute the principal branch of the logarithm of the Gamma function for a complex argument.

    This is the branch that is real valued on the positive real axis and continuous in the complex plane, apart
    from the branch cut on the negative real axis. The imaginary part is therefore not limited to ``(-pi, pi]``.

    Args:
        z (number): the argument
        numeric_type (NumericType or str): the numeric type to evaluate in, real types are promoted to the complex
            type of the same precision. Inferred from z if not given.

    Returns:
        number: log(Gamma(z)), (inf, nan) at the poles
    """
    C = get_complex_type(z, numeric_type)
    return complex_ln_gamma(C.cast(as_scalar(z)), C)


def complex_gamma(z, numeric_type):
    """Evaluate the complex Gamma function for a value already of the given complex numeric type."""
    C = numeric_type
    R = C.real_type
    a = C.real(z)
    b = C.imag(z)

    if R.isnan(a) or R.isnan(b):
        return C.make(R.nan, R.nan)

    if b == 0:
        if is_pole(a, R):
            infinity = pole_infinity(a, R)
            return C.make(infinity, infinity)
        return C.make(real_gamma(a, R), R.copysign(R.zero, b))

    if not C.isfinite(z):
        return C.make(R.nan, R.nan)

    if a >= R.cast(0.5):
        result = lanczos_gamma(z, C)
        if not C.isfinite(result):
            result = C.exp(lanczos_ln_gamma(z, C))
        return result

    reflected = C.one - z
    if R.fabs(b) <= R.cast(_DIRECT_REFLECTION_MAX_IMAG):
        result = C.pi / (sin_pi_complex(z, C) * lanczos_gamma(reflected, C))
        if C.isfinite(result):
            return result
    return C.exp(C.log(C.pi) - log_sin_pi_complex(z, C) - lanczos_ln_gamma(reflected, C))


def complex_ln_gamma(z, numeric_type):
    """Evaluate the complex log Gamma function for a value already of the given complex numeric type."""
    C = numeric_type
    R = C.real_type
    a = C.real(z)
    b = C.imag(z)

    if R.isnan(a) or R.isnan(b):
        return C.make(R.nan, R.nan)

    if b == 0:
        if is_pole(a, R):
            return C.make(R.inf, R.nan)
        if a > 0:
            return C.make(real_ln_gamma(a, R), R.copysign(R.zero, b))

    if not C.isfinite(z):
        return C.make(R.nan, R.nan)

    if a >= R.cast(0.5):
        return lanczos_ln_gamma(z, C)

    # the branch correction keeps the result continuous across the jumps of log(sin(pi z))
    branch_correction = R.copysign(R.cast(2) * R.pi, b) * R.floor(R.cast(0.5) * a + R.cast(0.25))
    return (C.make(R.log(R.pi), branch_correction)
            - log_sin_pi_complex(z, C)
            - lanczos_ln_gamma(C.one - z, C))
