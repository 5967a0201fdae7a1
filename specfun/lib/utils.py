import numpy as np

__author__ = 'Robbert Harms'
__date__ = "2024-02-12"
__license__ = "LGPL v3"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


def as_scalar(value):
    """Get the single number out of a scalar input.

    Zero dimensional and single element arrays are unpacked, numpy and Python scalars are returned as is.

    Args:
        value: a Python number, numpy scalar or an array holding a single element

    Returns:
        number: the scalar value

    Raises:
        ValueError: if the given value holds more than one element
    """
    if isinstance(value, np.ndarray):
        if value.size != 1:
            raise ValueError('Expected a scalar value, got an array of shape {}.'.format(value.shape))
        return value.reshape(-1)[0]
    return value


def check_non_negative_int(value, name):
    """Validate a sequence length or order argument.

    Args:
        value (int): the value to check
        name (str): the name of the argument, used in the error message

    Returns:
        int: the value as a Python integer

    Raises:
        ValueError: if the value is not an integer or is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError('The argument "{}" should be an integer, "{!r}" given.'.format(name, value))
    if value < 0:
        raise ValueError('The argument "{}" should be non-negative, {} given.'.format(name, value))
    return int(value)


def cartesian(arrays, out=None):
    """Generate a cartesian product of input arrays.

    Args:
        arrays (list of array-like): 1-D arrays to form the cartesian product of.
        out (ndarray): Array to place the cartesian product in.

    Returns:
        ndarray: 2-D array of shape (M, len(arrays)) containing cartesian products formed of input arrays.

    Examples:
        >>> cartesian(([1, 2], [4, 5]))
        array([[1, 4],
               [1, 5],
               [2, 4],
               [2, 5]])
    """
    arrays = [np.asarray(x) for x in arrays]
    dtype = arrays[0].dtype

    nmr_elements = np.prod([x.size for x in arrays])
    if out is None:
        out = np.zeros([nmr_elements, len(arrays)], dtype=dtype)

    m = nmr_elements // arrays[0].size
    out[:, 0] = np.repeat(arrays[0], m)
    if arrays[1:]:
        cartesian(arrays[1:], out=out[0:m, 1:])
        for j in range(1, arrays[0].size):
            out[j*m:(j+1)*m, 1:] = out[0:m, 1:]
    return out


def to_integer_type(value, dtype):
    """Convert an exact integer to a value of the given numpy integer type.

    Args:
        value (int): the exact value
        dtype (np.dtype or type): the numpy integer type

    Returns:
        np.integer or None: the value in the given type, None if it does not fit
    """
    info = np.iinfo(dtype)
    if info.min <= value <= info.max:
        return np.dtype(dtype).type(value)
    return None
