import numpy as np
import pytest
import scipy.linalg

from trigm.blocks import _cos_block, _sin_block, _sinch, recompute_diag


def test_sinch():
    assert _sinch(0.0) == 1.0
    for x in (1e-8, 1e-3, 0.0134, -0.0134):
        assert abs(_sinch(x) - np.sinh(x) / x) < 1e-15
    assert _sinch(2.0) == np.sinh(2.0) / 2.0


@pytest.mark.parametrize(
    "a, b, d", [(0.3, 2.0, 0.7), (-1.2, 0.5, 3.1), (0.4, -3.0, 0.4)]
)
def test_triangular_blocks(a, b, d, allclose):
    Y = np.array([[a, b], [0.0, d]])
    if a != d:
        cos_b = b * (np.cos(a) - np.cos(d)) / (a - d)
        sin_b = b * (np.sin(a) - np.sin(d)) / (a - d)
    else:
        cos_b = -b * np.sin(a)
        sin_b = b * np.cos(a)

    C = np.array([[np.cos(a), cos_b], [0, np.cos(d)]])
    S = np.array([[np.sin(a), sin_b], [0, np.sin(d)]])
    assert allclose(_cos_block(Y), C, atol=1e-14)
    assert allclose(_sin_block(Y), S, atol=1e-14)


@pytest.mark.parametrize(
    "a, b, c", [(0.3, 2.0, -0.5), (-2.0, -0.1, 4.0), (1.0, 1e-5, -1e-5)]
)
def test_quasi_triangular_blocks(a, b, c, allclose):
    Y = np.array([[a, b], [c, a]])
    assert allclose(_cos_block(Y), scipy.linalg.cosm(Y), atol=1e-13)
    assert allclose(_sin_block(Y), scipy.linalg.sinm(Y), atol=1e-13)


def quasi_triangular(rng):
    # one 2x2 block followed by two 1x1 blocks
    T = np.triu(rng.randn(4, 4))
    T[0, 0] = T[1, 1] = 0.4
    T[0, 1], T[1, 0] = 1.5, -0.8
    return T


@pytest.mark.parametrize("func", ["cos", "sin"])
@pytest.mark.parametrize("depth", [0, 3])
def test_recompute_quasi_triangular(func, depth, rng, allclose):
    T = quasi_triangular(rng)
    ref = getattr(scipy.linalg, func + "m")(2.0**-depth * T)
    noise = 1e-6 * rng.randn(4, 4)
    X = ref + noise

    assert recompute_diag(X, T, depth, func) is X

    replaced = np.zeros((4, 4), dtype=bool)
    replaced[0:2, 0:2] = True
    replaced[2:4, 2:4] = True
    assert allclose(X[replaced], ref[replaced], atol=1e-12)
    assert np.array_equal(X[~replaced], (ref + noise)[~replaced])


@pytest.mark.parametrize("func", ["cos", "sin"])
def test_recompute_upper_triangular(func, rng, allclose):
    T = np.triu(rng.randn(5, 5))
    ref = getattr(scipy.linalg, func + "m")(0.5 * T)
    X = ref + 1e-6 * np.triu(rng.randn(5, 5))

    recompute_diag(X, T, 1, func)
    assert allclose(np.diag(X), np.diag(ref), atol=1e-12)
    assert allclose(np.diag(X, 1), np.diag(ref, 1), atol=1e-12)
    assert not np.allclose(np.diag(X, 2), np.diag(ref, 2), rtol=0, atol=1e-9)


def test_recompute_scalar():
    X = np.array([[5.0]])
    recompute_diag(X, np.array([[0.8]]), 3, "sin")
    assert X[0, 0] == np.sin(0.8 * 2.0**-3)

    recompute_diag(X, np.array([[0.8]]), 0, "cos")
    assert X[0, 0] == np.cos(0.8)


def test_recompute_complex(rng, allclose):
    A = rng.randn(4, 4) + 1j * rng.randn(4, 4)
    T, _ = scipy.linalg.schur(A, output="complex")
    ref = scipy.linalg.cosm(0.25 * T)
    X = np.zeros_like(T)

    recompute_diag(X, T, 2, "cos")
    assert allclose(np.diag(X), np.diag(ref), atol=1e-12, record_rmse=False)
    assert allclose(np.diag(X, 1), np.diag(ref, 1), atol=1e-12, record_rmse=False)
