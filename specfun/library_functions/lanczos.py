"""The Lanczos approximation of the Gamma function.

The coefficient table is the 13 term, g = 6.02468..., table from Boost
(``lanczos13m53``) as also used in Scipy (https://github.com/scipy/scipy/blob/master/scipy/special/cephes/lanczos.c).
The rational sum is scaled by ``exp(-g)`` and absorbs the factor ``sqrt(2 pi)``, such that:

.. math::

    \\Gamma(z) = S(z) \\left(\\frac{z + g - 0.5}{e}\\right)^{z - 0.5}

The routines in this module are shared by the real and the complex Gamma evaluators.
"""
import numpy as np
from specfun.library_functions.polynomials import ratevl

__author__ = 'Robbert Harms'
__date__ = '2024-02-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


LANCZOS_G = 6.024680040776729583740234375

_lanczos_sum_expg_scaled_num = np.array([
    0.006061842346248906525783753964555936883222,
    0.5098416655656676188125178644804694509993,
    19.51992788247617482847860966235652136208,
    449.9445569063168119446858607650988409623,
    6955.999602515376140356310115515198987526,
    75999.29304014542649875303443598909137092,
    601859.6171681098786670226533699352302507,
    3481712.15498064590882071018964774556468,
    14605578.08768506808414169982791359218571,
    43338889.32467613834773723740590533316085,
    86363131.28813859145546927288977868422342,
    103794043.1163445451906271053616070238554,
    56906521.91347156388090791033559122686859
])
_lanczos_sum_expg_scaled_num.setflags(write=False)

# x (x + 1) ... (x + 11), highest degree first
_lanczos_sum_expg_scaled_denom = np.array([
    1,
    66,
    1925,
    32670,
    357423,
    2637558,
    13339535,
    45995730,
    105258076,
    150917976,
    120543840,
    39916800,
    0
], dtype=np.float64)
_lanczos_sum_expg_scaled_denom.setflags(write=False)


def lanczos_sum_expg_scaled(z, numeric_type):
    """The rational Lanczos sum scaled by ``exp(-g)``.

    Args:
        z (number): the argument, real or complex
        numeric_type (specfun.lib.numeric_types.NumericType): the type of z

    Returns:
        number: the value of the scaled Lanczos sum
    """
    return ratevl(z, _lanczos_sum_expg_scaled_num, _lanczos_sum_expg_scaled_denom, numeric_type)


def lanczos_gamma(z, numeric_type):
    """Evaluate the Gamma function using the Lanczos approximation.

    Valid for ``Re(z) >= 0.5``. The power term is computed as the square of the half power, such that it does not
    overflow before the final product does.

    Args:
        z (number): the argument, real or complex
        numeric_type (specfun.lib.numeric_types.NumericType): the type of z

    Returns:
        number: the Gamma function at z, may be infinite for large arguments
    """
    T = numeric_type
    zgh = z + T.cast(LANCZOS_G - 0.5)
    half_power = T.power(zgh / T.cast(np.e), (z - T.cast(0.5)) / T.cast(2))
    return lanczos_sum_expg_scaled(z, T) * half_power * half_power


def lanczos_ln_gamma(z, numeric_type):
    """Evaluate the logarithm of the Gamma function using the Lanczos approximation.

    Valid for ``Re(z) >= 0.5``, for complex arguments this gives the principal branch. Accuracy near the roots at
    one and two is absolute, not relative.

    Args:
        z (number): the argument, real or complex
        numeric_type (specfun.lib.numeric_types.NumericType): the type of z

    Returns:
        number: log Gamma(z)
    """
    T = numeric_type
    zgh = z + T.cast(LANCZOS_G - 0.5)
    return T.log(lanczos_sum_expg_scaled(z, T)) + (z - T.cast(0.5)) * (T.log(zgh) - T.one)
