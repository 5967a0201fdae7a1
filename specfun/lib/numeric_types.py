"""The numeric types the special functions are evaluated in.

The evaluators in :mod:`specfun.library_functions` are written once against the :class:`NumericType` interface and
work for every concrete precision. A numeric type wraps a numpy scalar type together with the elementary functions
(as numpy ufuncs, which preserve the precision of their input) and the precision dependent tuning constants.

Coefficient tables are kept in double precision, evaluators convert each coefficient with :meth:`NumericType.cast`
while evaluating.
"""
import numbers
import numpy as np

from specfun import configuration

__author__ = 'Robbert Harms'
__date__ = '2024-02-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


class NumericType:

    def __init__(self, name, dtype):
        """The common capabilities of a floating point type, real or complex.

        Args:
            name (str): the name of this type, like 'double' or 'complex128'
            dtype (np.dtype or type): the numpy scalar type we represent
        """
        self._name = name
        self._dtype = np.dtype(dtype)
        self._scalar_type = self._dtype.type

    @property
    def name(self):
        return self._name

    @property
    def dtype(self):
        return self._dtype

    @property
    def is_complex(self):
        """If this numeric type represents complex numbers."""
        raise NotImplementedError()

    def cast(self, value):
        """Convert the given value to a scalar of this numeric type.

        Args:
            value (number): the value to convert

        Returns:
            np.generic: the value as a numpy scalar of this type
        """
        return self._scalar_type(value)

    def to_double(self, value):
        """Convert a value of this type to the double precision counterpart."""
        raise NotImplementedError()

    @property
    def nan(self):
        return self.cast(np.nan)

    @property
    def inf(self):
        return self.cast(np.inf)

    @property
    def neg_inf(self):
        return self.cast(-np.inf)

    @property
    def zero(self):
        return self.cast(0)

    @property
    def one(self):
        return self.cast(1)

    @property
    def pi(self):
        return self.cast(np.pi)

    @property
    def eps(self):
        return self.cast(np.finfo(self._dtype).eps)

    def exp(self, x):
        return np.exp(x)

    def log(self, x):
        return np.log(x)

    def sqrt(self, x):
        return np.sqrt(x)

    def sin(self, x):
        return np.sin(x)

    def cos(self, x):
        return np.cos(x)

    def sinh(self, x):
        return np.sinh(x)

    def cosh(self, x):
        return np.cosh(x)

    def power(self, x, y):
        return np.power(x, y)

    def fabs(self, x):
        return np.abs(x)

    def isnan(self, x):
        return bool(np.isnan(x))

    def isinf(self, x):
        return bool(np.isinf(x))

    def isfinite(self, x):
        return bool(np.isfinite(x))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._name)


class RealType(NumericType):

    def __init__(self, name, dtype, max_gamma_argument, erf_saturation, erfc_underflow):
        """A real floating point type.

        Args:
            name (str): the name of this type
            dtype (np.dtype or type): the numpy floating point type
            max_gamma_argument (float): the largest argument for which the gamma function is finite
            erf_saturation (float): the argument from which the error function rounds to exactly one
            erfc_underflow (float): the argument from which the complementary error function underflows to zero
        """
        super().__init__(name, dtype)
        self._max_gamma_argument = self.cast(max_gamma_argument)
        self._erf_saturation = self.cast(erf_saturation)
        self._erfc_underflow = self.cast(erfc_underflow)

    @property
    def is_complex(self):
        return False

    @property
    def max_gamma_argument(self):
        return self._max_gamma_argument

    @property
    def erf_saturation(self):
        return self._erf_saturation

    @property
    def erfc_underflow(self):
        return self._erfc_underflow

    @property
    def tiny(self):
        """The smallest positive normal number."""
        return self.cast(np.finfo(self._dtype).tiny)

    @property
    def half_mantissa_bits(self):
        """Half the number of bits in the significand, rounded up, used to split a number in a high and low part."""
        return (np.finfo(self._dtype).nmant + 1) // 2

    def to_double(self, value):
        return np.float64(value)

    def floor(self, x):
        return np.floor(x)

    def fmod(self, x, y):
        return np.fmod(x, y)

    def copysign(self, x, y):
        return np.copysign(x, y)

    def signbit(self, x):
        return bool(np.signbit(x))

    def frexp(self, x):
        mantissa, exponent = np.frexp(x)
        return mantissa, int(exponent)

    def ldexp(self, x, exponent):
        return np.ldexp(x, exponent)


class ComplexType(NumericType):

    def __init__(self, name, dtype, real_type):
        """A complex floating point type whose parts are of the given real type.

        Args:
            name (str): the name of this type
            dtype (np.dtype or type): the numpy complex type
            real_type (RealType): the numeric type of the real and imaginary parts
        """
        super().__init__(name, dtype)
        self._real_type = real_type

    @property
    def is_complex(self):
        return True

    @property
    def real_type(self):
        return self._real_type

    def to_double(self, value):
        return np.complex128(value)

    def make(self, real, imag):
        """Construct a complex number from its parts.

        Unlike ``real + 1j * imag`` this preserves infinite parts and the sign of zeros.
        """
        value = np.zeros((), dtype=self._dtype)
        value.real = real
        value.imag = imag
        return value[()]

    def real(self, z):
        return self._real_type.cast(np.real(z))

    def imag(self, z):
        return self._real_type.cast(np.imag(z))

    def conjugate(self, z):
        return np.conjugate(z)

    def isnan(self, x):
        return bool(np.isnan(np.real(x)) or np.isnan(np.imag(x)))

    def isinf(self, x):
        return bool(np.isinf(np.real(x)) or np.isinf(np.imag(x)))

    def isfinite(self, x):
        return bool(np.isfinite(np.real(x)) and np.isfinite(np.imag(x)))


Float32 = RealType('float', np.float32, max_gamma_argument=35.0401,
                   erf_saturation=4.0, erfc_underflow=10.1)
Float64 = RealType('double', np.float64, max_gamma_argument=171.624376956302725,
                   erf_saturation=5.95, erfc_underflow=27.3)
Complex64 = ComplexType('complex64', np.complex64, Float32)
Complex128 = ComplexType('complex128', np.complex128, Float64)

_by_name = {'float': Float32, 'float32': Float32, 'single': Float32,
            'double': Float64, 'float64': Float64,
            'complex64': Complex64, 'cfloat': Complex64,
            'complex128': Complex128, 'cdouble': Complex128}

_by_dtype = {Float32.dtype: Float32, Float64.dtype: Float64,
             Complex64.dtype: Complex64, Complex128.dtype: Complex128}


def get_numeric_type_by_name(name):
    """Get one of the numeric types by its name.

    Args:
        name (str): one of 'float' / 'float32', 'double' / 'float64', 'complex64' or 'complex128'

    Returns:
        NumericType: the numeric type with that name

    Raises:
        ValueError: if no numeric type with that name exists
    """
    try:
        return _by_name[name.lower()]
    except KeyError:
        raise ValueError('Unknown numeric type "{}", choose one of {}.'.format(name, sorted(_by_name)))


def get_numeric_type(value):
    """Infer the numeric type to evaluate the given value in.

    Numpy scalars and arrays keep their own precision (half precision is promoted to single precision, integer arrays
    to the default precision). Python numbers use the precision set in :mod:`specfun.configuration`.

    Args:
        value (number or ndarray): the value whose type we want

    Returns:
        NumericType: the matching numeric type
    """
    dtype = getattr(value, 'dtype', None)
    if dtype is not None:
        if dtype in _by_dtype:
            return _by_dtype[dtype]
        if dtype == np.float16:
            return Float32
        if np.issubdtype(dtype, np.complexfloating):
            return Complex128
        if np.issubdtype(dtype, np.floating):
            return Float64
        if np.issubdtype(dtype, np.number) or np.issubdtype(dtype, np.bool_):
            return configuration.get_default_numeric_type()

    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return configuration.get_default_complex_type()
    return configuration.get_default_numeric_type()


def get_real_type(value, numeric_type=None):
    """Get the real numeric type for the given value, for use in the real evaluators.

    Args:
        value (number): the input value
        numeric_type (RealType or str): if given, the numeric type to use instead of inferring one

    Returns:
        RealType: the real numeric type

    Raises:
        ValueError: if a complex numeric type is requested
    """
    numeric_type = _resolve(value, numeric_type)
    if numeric_type.is_complex:
        raise ValueError('A real valued function can not be evaluated in the complex type "{}".'.format(
            numeric_type.name))
    return numeric_type


def get_complex_type(value, numeric_type=None):
    """Get the complex numeric type for the given value, for use in the complex evaluators.

    A real numeric type, given or inferred, is promoted to the complex type with parts of that precision.

    Args:
        value (number): the input value
        numeric_type (NumericType or str): if given, the numeric type to use instead of inferring one

    Returns:
        ComplexType: the complex numeric type
    """
    numeric_type = _resolve(value, numeric_type)
    if numeric_type.is_complex:
        return numeric_type
    if numeric_type is Float32:
        return Complex64
    return Complex128


def _resolve(value, numeric_type):
    if numeric_type is None:
        return get_numeric_type(value)
    if isinstance(numeric_type, str):
        return get_numeric_type_by_name(numeric_type)
    return numeric_type
