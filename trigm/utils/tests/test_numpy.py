import numpy as np
import pytest

from trigm.utils.numpy import (
    as_double,
    ident_like,
    is_array_like,
    is_integer,
    is_lower_triangular,
    is_number,
    is_numeric_dtype,
    is_upper_triangular,
)


def test_is_integer():
    assert is_integer(3)
    assert is_integer(np.int32(3))
    assert not is_integer(True)
    assert not is_integer(3.0)


def test_is_number():
    assert is_number(2.5) and is_number(np.float32(1)) and is_number(4)
    assert not is_number(1j)
    assert is_number(1j, check_complex=True)
    assert not is_number("1")


def test_is_array_like():
    assert is_array_like([[1, 2]])
    assert is_array_like((1, 2))
    assert is_array_like(np.eye(2))
    assert is_array_like(3.0)
    assert not is_array_like("abc")
    assert not is_array_like(None)
    assert not is_array_like({1: 2})


@pytest.mark.parametrize(
    "dtype, expected",
    [
        (bool, True),
        (np.int8, True),
        (np.uint16, True),
        (float, True),
        (complex, True),
        (object, False),
        ("U3", False),
        ("M8[s]", False),
    ],
)
def test_is_numeric_dtype(dtype, expected):
    assert is_numeric_dtype(dtype) == expected


def test_as_double():
    A = np.eye(2)
    assert as_double(A) is A
    assert as_double(np.eye(2, dtype=np.int64)).dtype == np.float64
    assert as_double(np.eye(2, dtype=np.float32)).dtype == np.float64
    assert as_double(np.eye(2, dtype=np.complex64)).dtype == np.complex128
    assert as_double(np.array([[True]])).dtype == np.float64


def test_ident_like():
    eye = ident_like(np.zeros((3, 3), dtype=np.complex128))
    assert eye.dtype == np.complex128
    assert np.array_equal(eye, np.eye(3))


def test_triangular():
    U = np.triu(np.ones((3, 3)))
    assert is_upper_triangular(U) and not is_lower_triangular(U)
    assert is_lower_triangular(U.T) and not is_upper_triangular(U.T)
    D = np.diag([1.0, 2.0])
    assert is_upper_triangular(D) and is_lower_triangular(D)
    assert is_upper_triangular(np.zeros((1, 1)))
