"""Exact recomputation of the diagonal blocks of a triangular matrix function.

For (quasi-)upper triangular ``T`` the diagonal, and the superdiagonal next
to it, of ``cos(T)`` and ``sin(T)`` are known in closed form from the 1x1
and 2x2 diagonal blocks of ``T``. Overwriting them after every squaring step
stops the rounding errors of the approximant and of the squarings from
building up there, which matters for nonnormal matrices.
"""

import numpy as np


def _sinch(x):
    """Stably evaluate sinh(x) / x."""
    # Sixth order Taylor expansion where its relative error is below 1e-14.
    x2 = x * x
    if abs(x) < 0.0135:
        return 1 + (x2 / 6.0) * (1 + (x2 / 20.0) * (1 + (x2 / 42.0)))
    return np.sinh(x) / x


def _cos_block(Y):
    a, b, c, d = Y[0, 0], Y[0, 1], Y[1, 0], Y[1, 1]
    if c == 0:
        if a != d:
            half_sum = (a + d) / 2
            half_diff = (a - d) / 2
            b = -b * np.sin(half_sum) * np.sin(half_diff) / half_diff
        else:
            b = -b * np.sin(a)
        return np.array([[np.cos(a), b], [0, np.cos(d)]])

    # 2x2 block of a real Schur form: equal diagonal, b * c < 0
    theta = np.sqrt(-b * c)
    ch = np.cosh(theta)
    sh = np.sin(a) * _sinch(theta)
    return np.array([[np.cos(a) * ch, -b * sh], [-c * sh, np.cos(d) * ch]])


def _sin_block(Y):
    a, b, c, d = Y[0, 0], Y[0, 1], Y[1, 0], Y[1, 1]
    if c == 0:
        if a != d:
            half_sum = (a + d) / 2
            half_diff = (a - d) / 2
            b = b * np.cos(half_sum) * np.sin(half_diff) / half_diff
        else:
            b = b * np.cos(a)
        return np.array([[np.sin(a), b], [0, np.sin(d)]])

    theta = np.sqrt(-b * c)
    ch = np.cosh(theta)
    sh = np.cos(a) * _sinch(theta)
    return np.array([[np.sin(a) * ch, b * sh], [c * sh, np.sin(d) * ch]])


_FUNCS = {"cos": (np.cos, _cos_block), "sin": (np.sin, _sin_block)}


def recompute_diag(X, T, depth, func="cos"):
    """Overwrite the diagonal blocks of ``X = f(2^-depth T)`` with exact values.

    Diagonal blocks of ``T`` are found by scanning its subdiagonal: a
    nonzero ``T[j + 1, j]`` starts a 2x2 block. Windows that straddle the
    start of a 2x2 block are left alone. ``X`` is modified in place and
    returned.

    Parameters
    ----------
    X : (n, n) ndarray
        Computed approximation to ``f(2^-depth T)``.
    T : (n, n) ndarray
        The unscaled (quasi-)upper triangular working matrix.
    depth : int
        Number of halvings still to be undone.
    func : {"cos", "sin"}
        The function ``f``.
    """
    scalar, block = _FUNCS[func]
    n = T.shape[0]
    scale = 2.0**-depth
    if n == 1:
        X[0, 0] = scalar(scale * T[0, 0])
        return X

    j = 0
    while j < n - 1:
        if T[j + 1, j] != 0:
            X[j : j + 2, j : j + 2] = block(scale * T[j : j + 2, j : j + 2])
            j += 2  # skip the second row of this block
        elif j < n - 2 and T[j + 2, j + 1] != 0:
            j += 1  # next window starts a 2x2 block
        else:
            X[j : j + 2, j : j + 2] = block(scale * T[j : j + 2, j : j + 2])
            j += 1
    return X
