from fractions import Fraction

import numpy as np
import pytest

from trigm.pade import (
    BLOCK_SIZE,
    COS_COEFFICIENTS,
    cos_approximant,
    cos_sin_approximant,
    matrix_polynomial,
    pade_exp_coefficients,
    sin_numerator,
    trig_pade_coefficients,
)
from trigm.powers import PowerTable
from trigm.selection import DEGREES, theta


def polyval(coeffs, y):
    return sum(c * y**k for k, c in enumerate(coeffs))


def test_tables_cover_all_degrees():
    assert tuple(sorted(COS_COEFFICIENTS)) == DEGREES
    assert tuple(sorted(BLOCK_SIZE)) == DEGREES
    for m, (p, q) in COS_COEFFICIENTS.items():
        assert len(p) == len(q) == m + 1
        assert p[0] == q[0] == 1
        assert all(c > 0 for c in q)


def test_exp_coefficients():
    assert pade_exp_coefficients(3) == (
        Fraction(1),
        Fraction(1, 2),
        Fraction(1, 10),
        Fraction(1, 120),
    )
    for m in (1, 6, 21):
        c = pade_exp_coefficients(m)
        assert len(c) == m + 1
        assert c[1] == Fraction(1, 2)


@pytest.mark.parametrize("m", DEGREES)
def test_cos_tables_match_construction(m, allclose):
    cos_num, sin_num, den = trig_pade_coefficients(m)
    p, q = COS_COEFFICIENTS[m]
    assert allclose(np.array(cos_num, dtype=float), p, rtol=1e-14, atol=0)
    assert allclose(np.array(den, dtype=float), q, rtol=1e-14, atol=0)
    assert len(sin_num) == m


def test_low_degree_sine():
    assert sin_numerator(1) == (1.0,)
    assert sin_numerator(2) == (1.0, -1 / 12)
    _, sin_num, den = trig_pade_coefficients(1)
    assert den == (1, Fraction(1, 4))


def test_sin_numerator_unknown_degree():
    with pytest.raises(KeyError):
        sin_numerator(5)


@pytest.mark.parametrize("m", DEGREES)
def test_scalar_accuracy(m):
    cos_num, sin_num, den = trig_pade_coefficients(m)
    for x in (theta(m), -theta(m) / 3):
        X = Fraction(x)
        Y = X * X
        q = polyval(den, Y)
        assert abs(float(polyval(cos_num, Y) / q) - np.cos(x)) < 1e-13
        assert abs(float(X * polyval(sin_num, Y) / q) - np.sin(x)) < 1e-13


@pytest.mark.parametrize("z", [1, 2, 3, 5])
@pytest.mark.parametrize("deg", [0, 2, 8])
def test_matrix_polynomial(z, deg, rng, allclose):
    T = 0.3 * rng.randn(5, 5)
    coeffs = rng.randn(deg + 1)
    Y = T.dot(T)
    expected = sum(c * np.linalg.matrix_power(Y, k) for k, c in enumerate(coeffs))

    powers = PowerTable(T)
    assert allclose(matrix_polynomial(coeffs, powers, z), expected, atol=1e-12)
    assert max(powers.cached) <= max(2, 2 * min(z, deg))


@pytest.mark.parametrize("m", [3, 6, 12])
def test_approximants_symmetric(m, rng, allclose):
    B = rng.randn(4, 4)
    B = B + B.T
    T = 0.9 * theta(m) * B / np.linalg.norm(B, 2)
    w, V = np.linalg.eigh(T)

    C = cos_approximant(PowerTable(T), m)
    assert allclose(C, (V * np.cos(w)).dot(V.T), atol=1e-12)

    C, S = cos_sin_approximant(PowerTable(T), m)
    assert allclose(C, (V * np.cos(w)).dot(V.T), atol=1e-12)
    assert allclose(S, (V * np.sin(w)).dot(V.T), atol=1e-12)
