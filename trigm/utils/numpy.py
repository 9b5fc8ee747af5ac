"""
Extra functions to extend the capabilities of Numpy.
"""
import numpy as np


def is_integer(obj):
    """Check if ``obj`` is an integer type."""
    return isinstance(obj, (int, np.integer)) and not isinstance(obj, bool)


def is_number(obj, check_complex=False):
    """Check if ``obj`` is a numeric type."""
    types = (float, complex, np.number) if check_complex else (float, np.floating)
    return is_integer(obj) or isinstance(obj, types)


def is_array(obj):
    """Check if ``obj`` is a numpy array."""
    # np.generic allows us to return true for scalars as well as true arrays
    return isinstance(obj, (np.ndarray, np.generic))


def is_array_like(obj):
    """Check if ``obj`` is an array like object."""
    # While it's possible that there are some iterables other than list/tuple
    # that can be made into arrays, it's very likely that those arrays
    # will have dtype=object, which is likely to cause unexpected issues.
    return is_array(obj) or is_number(obj, check_complex=True) or isinstance(
        obj, (list, tuple)
    )


def is_numeric_dtype(dtype):
    """Check if ``dtype`` holds booleans, integers, floats or complex numbers."""
    return np.dtype(dtype).kind in "biufc"


def as_double(A):
    """Return ``A`` as a float64 or complex128 array, copying only if needed."""
    dtype = np.complex128 if np.iscomplexobj(A) else np.float64
    return np.asarray(A).astype(dtype, copy=False)


def ident_like(A):
    """Identity matrix with the order and dtype of the square matrix ``A``."""
    return np.eye(A.shape[0], A.shape[1], dtype=A.dtype)


def is_upper_triangular(A):
    """Check if every entry below the main diagonal of ``A`` is zero."""
    return np.count_nonzero(np.tril(A, -1)) == 0


def is_lower_triangular(A):
    """Check if every entry above the main diagonal of ``A`` is zero."""
    return np.count_nonzero(np.triu(A, 1)) == 0
