import numpy as np
import pytest

from trigm.powers import PowerTable
from trigm.rc import rc


def test_lazy_powers(rng, allclose):
    A = rng.randn(5, 5)
    table = PowerTable(A)
    assert table.cached == [1]
    assert 2 not in table
    assert table[1] is A

    assert allclose(table[6], np.linalg.matrix_power(A, 6))
    assert table.cached == [1, 2, 4, 6]
    assert 2 in table
    assert len(table) == 4

    table[10]
    assert table.cached == [1, 2, 4, 6, 10]
    table[14]
    assert table.cached == [1, 2, 4, 6, 8, 10, 14]
    assert allclose(table[14], np.linalg.matrix_power(A, 14))


def test_powers_are_not_recomputed(rng):
    table = PowerTable(rng.randn(3, 3))
    T4 = table[4]
    assert table[4] is T4


@pytest.mark.parametrize("k", [0, -2, 3, 7])
def test_unsupported_powers(k, rng):
    table = PowerTable(rng.randn(3, 3))
    with pytest.raises(KeyError):
        table[k]


def test_norms(rng, allclose):
    A = rng.randn(5, 5)
    table = PowerTable(A)
    A4 = np.linalg.matrix_power(A, 4)
    assert allclose(table.onenorm(4), np.abs(A4).sum(axis=0).max())
    assert allclose(table.d_tight(4), table.onenorm(4) ** 0.25)
    assert table.onenorm(1) == np.abs(A).sum(axis=0).max()


def test_exact_mode(rng):
    table = PowerTable(rng.randn(5, 5), use_exact_onenorm=True)
    assert table.onenormest(6) == table.onenorm(6)
    assert 6 in table
    assert table.d_loose(6) == table.d_tight(6)


def test_estimate_mode(rng):
    A = rng.randn(50, 50)
    table = PowerTable(A, use_exact_onenorm=False)
    table[4]
    est = table.onenormest(6)
    assert 6 not in table
    exact = np.linalg.norm(np.linalg.matrix_power(A, 6), 1)
    assert exact / 10 <= est <= exact * (1 + 1e-10)
    assert table.onenormest(6) == est

    table[6]
    assert table.onenormest(6) == table.onenorm(6)


def test_exact_mode_from_rc(rng):
    A = rng.randn(5, 5)
    assert PowerTable(A).use_exact_onenorm

    rc.set("onenorm", "exact_max_order", "5")
    assert not PowerTable(A).use_exact_onenorm

    rc.set("onenorm", "exact", "true")
    assert PowerTable(A).use_exact_onenorm

    rc.set("onenorm", "exact", "false")
    assert not PowerTable(A).use_exact_onenorm
    assert PowerTable(A, use_exact_onenorm=True).use_exact_onenorm


def test_scaled(rng, allclose):
    A = rng.randn(4, 4)
    table = PowerTable(A, use_exact_onenorm=False)
    table[6]

    scaled = table.scaled(2)
    assert scaled.cached == table.cached
    assert not scaled.use_exact_onenorm
    assert allclose(scaled[1], A / 4)
    assert allclose(scaled[6], np.linalg.matrix_power(A / 4, 6))
    assert allclose(scaled[8], np.linalg.matrix_power(A / 4, 8))
    assert np.array_equal(table[1], A)
