"""The error function and the complementary error function for real arguments.

Both are evaluated with the rational minimax approximations of the Boost math library. For small arguments we
approximate ``erf(x) / x``, for larger arguments ``erfc(x) x exp(x^2)`` on the intervals [0.5, 1.5), [1.5, 2.5),
[2.5, 4.5) and [4.5, inf), where the last interval is approximated in ``1/x``.

The factor ``exp(-x^2)`` is evaluated as ``exp(-x^2) exp(-err)`` where err is the rounding error of ``x^2``, obtained
by splitting x in a high and a low part.
"""
import numpy as np

from specfun.lib.numeric_types import get_real_type
from specfun.lib.utils import as_scalar
from specfun.library_functions.polynomials import polevl

__author__ = 'Robbert Harms'
__date__ = '2024-02-14'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def _table(*coefficients):
    table = np.array(coefficients, dtype=np.float64)
    table.setflags(write=False)
    return table


# all tables store the highest degree first
_small_linear = _table(1.125, 0.003379167095512573896158903121545171688)

_offsets = _table(1.044948577880859375, 0.405935764312744140625, 0.50672817230224609375,
                  0.5405750274658203125, 0.55825519561767578125)

_erf_small_p = _table(
    -0.200305626366151877759e-4,
    -0.000489468651464798669181,
    -0.00904906346158537794396,
    -0.0509602734406067204596,
    -0.338097283075565413695,
    0.0834305892146531988966)
_erf_small_q = _table(
    0.189532519105655496778e-4,
    0.000650511752687851548735,
    0.0102722652675910031202,
    0.0916537354356241792007,
    0.455817300515875172439,
    1.0)

# erfc on [0.5, 1.5), in x - 0.5
_erfc_1_p = _table(
    0.266689068336295642561e-7,
    0.000441266654514391746428,
    0.00628431160851156719325,
    0.0384057530342762400273,
    0.127303921703577362312,
    0.222359821619935712378,
    0.159989089922969141329,
    -0.0980905922162812031672)
_erfc_1_q = _table(
    0.00279220237309449026796,
    0.0396649631833002269861,
    0.248025606990021698392,
    0.867940326293760578231,
    1.78355454954969405222,
    2.03237474985469469291,
    1.0)

# erfc on [1.5, 2.5), in x - 1.5
_erfc_2_p = _table(
    0.515917266698050027934e-4,
    0.00090807914416099524444,
    0.00669349844190354356118,
    0.0257479325917757388209,
    0.0505420824305544949541,
    0.0343522687935671451309,
    -0.024350047620769840217)
_erfc_2_q = _table(
    0.000897871370778031611439,
    0.0158027197831887485261,
    0.120902623051120950935,
    0.512371437838969015941,
    1.26409634824280366218,
    1.71657861671930336344,
    1.0)

# erfc on [2.5, 4.5), in x - 3.5
_erfc_3_p = _table(
    0.189896043050331257262e-5,
    0.523435380636174008685e-4,
    0.00059065441194877637899,
    0.00343963795976100077626,
    0.0104959584626432293901,
    0.0141853245895495604051,
    0.0029527671653097284033)
_erfc_3_q = _table(
    0.804149464190309799804e-4,
    0.00221657568292893699158,
    0.0259729870946203166468,
    0.165411142458540585835,
    0.603256964363454392857,
    1.19352160185285642574,
    1.0)

# erfc on [4.5, inf), in 1 / x
_erfc_4_p = _table(
    -16.8865774499799676937,
    -29.2545152747009461519,
    -27.1274948720539821722,
    -13.8677304660245326627,
    -5.47351527796012049443,
    -0.978088201154300548842,
    -0.141597835204583050043,
    0.0280666231009089713937,
    0.00593438793008050214106)
_erfc_4_q = _table(
    30.8365511891224291717,
    104.365251479578577989,
    182.499390505915222699,
    178.167924971283482513,
    131.766251645149522868,
    60.0021517335693186785,
    23.6750543147695749212,
    4.72948911186645394541,
    1.0)


@np.errstate(all='ignore')
def erf(x, numeric_type=None):
    """Compute the error function.

    The result is odd in x, also for signed zeros, and saturates to exactly one in magnitude for arguments
    beyond which the result rounds to one (5.95 in double precision).

    Args:
        x (number): the argument
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        number: erf(x) in [-1, 1], NaN for NaN
    """
    T = get_real_type(x, numeric_type)
    return real_erf(T.cast(as_scalar(x)), T)


@np.errstate(all='ignore')
def erfc(x, numeric_type=None):
    """Compute the complementary error function, ``1 - erf(x)``, without cancellation for large x.

    Args:
        x (number): the argument
        numeric_type (RealType or str): the numeric type to evaluate in, inferred from x if not given

    Returns:
        number: erfc(x) in [0, 2], NaN for NaN
    """
    T = get_real_type(x, numeric_type)
    return real_erfc(T.cast(as_scalar(x)), T)


def real_erf(x, numeric_type):
    """Evaluate the error function for a value already of the given real numeric type."""
    T = numeric_type
    if T.isnan(x):
        return T.nan
    if T.signbit(x):
        return -_erf_non_negative(-x, T, False)
    return _erf_non_negative(x, T, False)


def real_erfc(x, numeric_type):
    """Evaluate the complementary error function for a value already of the given real numeric type."""
    T = numeric_type
    if T.isnan(x):
        return T.nan
    if T.signbit(x):
        if x < T.cast(-0.5):
            return T.cast(2) - _erf_non_negative(-x, T, True)
        return T.one + _erf_non_negative(-x, T, False)
    return _erf_non_negative(x, T, True)


def _erf_non_negative(x, T, complement):
    """Compute erf(x), or erfc(x) if complement is set, for a non-negative x."""
    if x < T.cast(0.5):
        if x == 0:
            value = T.zero
        elif x < T.cast(1e-10):
            value = x * T.cast(_small_linear[0]) + T.cast(_small_linear[1]) * x
        else:
            x_sqr = x * x
            value = x * (T.cast(_offsets[0])
                         + polevl(x_sqr, _erf_small_p, T) / polevl(x_sqr, _erf_small_q, T))
        if complement:
            return T.one - value
        return value

    if complement and x >= T.erfc_underflow:
        return T.zero
    if not complement and x >= T.erf_saturation:
        return T.one

    tail = _erfc_tail(x, T)
    if complement:
        return tail
    return T.one - tail


def _erfc_tail(x, T):
    """Compute erfc(x) for x in [0.5, inf)."""
    if x < T.cast(1.5):
        y = x - T.cast(0.5)
        ratio = T.cast(_offsets[1]) + polevl(y, _erfc_1_p, T) / polevl(y, _erfc_1_q, T)
    elif x < T.cast(2.5):
        y = x - T.cast(1.5)
        ratio = T.cast(_offsets[2]) + polevl(y, _erfc_2_p, T) / polevl(y, _erfc_2_q, T)
    elif x < T.cast(4.5):
        y = x - T.cast(3.5)
        ratio = T.cast(_offsets[3]) + polevl(y, _erfc_3_p, T) / polevl(y, _erfc_3_q, T)
    else:
        y = T.one / x
        ratio = T.cast(_offsets[4]) + polevl(y, _erfc_4_p, T) / polevl(y, _erfc_4_q, T)

    bits = T.half_mantissa_bits
    mantissa, exponent = T.frexp(x)
    hi = T.ldexp(T.floor(T.ldexp(mantissa, bits)), exponent - bits)
    lo = x - hi
    x_sqr = x * x
    err_sqr = ((hi * hi - x_sqr) + T.cast(2) * hi * lo) + lo * lo

    return ratio * T.exp(-x_sqr) * T.exp(-err_sqr) / x
