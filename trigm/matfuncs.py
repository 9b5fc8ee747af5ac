"""Matrix cosine and sine by scaling and squaring.

A rational approximant is evaluated at ``2^-s A`` and the scaling is undone
with the double-angle formulas

    cos(2X) = 2 cos(X)^2 - I,    sin(2X) = 2 sin(X) cos(X).

When the working matrix is (quasi-)triangular, either because ``A`` already
is or because a Schur factorization was requested, the diagonal blocks are
recomputed exactly after every step.

References
----------
.. [1] Awad H. Al-Mohy, Nicholas J. Higham and Samuel D. Relton (2015),
       "New Algorithms for the Matrix Sine and Cosine Separately or
       Simultaneously." SIAM J. Sci. Comput. 37(1), A456-A487.
"""

import logging

import numpy as np

import trigm.utils.numpy as npext
from trigm.blocks import recompute_diag
from trigm.exceptions import NotMatrixError, RectangularError
from trigm.layout import schur_mode, select_layout
from trigm.pade import cos_approximant, cos_sin_approximant
from trigm.powers import PowerTable
from trigm.rc import rc
from trigm.selection import select_parameters

logger = logging.getLogger(__name__)


def _as_matrix(A, func):
    if not npext.is_array_like(A):
        raise NotMatrixError(
            f"Input must be a finite matrix (got {type(A).__name__})",
            attr="A",
            obj=func,
        )
    try:
        A = np.asarray(A)
    except ValueError as e:
        raise NotMatrixError(
            "Input must be a finite matrix (could not convert to an array)",
            attr="A",
            obj=func,
        ) from e
    if A.ndim != 2 or not npext.is_numeric_dtype(A.dtype):
        raise NotMatrixError(
            f"Input must be a finite matrix (got {A.ndim}-d array of {A.dtype})",
            attr="A",
            obj=func,
        )
    A = npext.as_double(A)
    if not np.all(np.isfinite(A)):
        raise NotMatrixError(
            "Input must be a finite matrix (contains NaN or Inf)", attr="A", obj=func
        )
    if A.shape[0] != A.shape[1]:
        raise RectangularError(A.shape, attr="A", obj=func)
    return A


def _trigm(A, schur, func, want_sin):
    A = _as_matrix(A, func)
    if schur is None:
        schur = rc.get("trigm", "schur")
    schur = schur_mode(schur, obj=func)

    n = A.shape[0]
    if n == 0:
        return A.copy(), A.copy()

    layout = select_layout(A, schur)
    T = layout.T
    powers = PowerTable(T)
    s, m = select_parameters(powers)
    logger.debug("%s: n=%d, %r, s=%d, m=%d", func.__name__, n, layout, s, m)

    scaled = powers.scaled(s)
    if want_sin:
        C, S = cos_sin_approximant(scaled, m)
    else:
        C, S = cos_approximant(scaled, m), None

    if layout.triangular:
        C = recompute_diag(C, T, s, "cos")
        if want_sin:
            S = recompute_diag(S, T, s, "sin")

    ident = npext.ident_like(C)
    for k in range(1, s + 1):
        if want_sin:
            S = 2 * S.dot(C)
        C = 2 * C.dot(C) - ident
        if layout.triangular:
            C = recompute_diag(C, T, s - k, "cos")
            if want_sin:
                S = recompute_diag(S, T, s - k, "sin")

    C = layout.restore(C)
    if want_sin:
        S = layout.restore(S)
    if not np.iscomplexobj(A):
        # cos and sin of a real matrix are real; only the complex Schur
        # path leaves (rounding-level) imaginary parts
        C = C.real
        S = S.real if want_sin else None
    return C, S


def cosm(A, schur=None):
    """Compute the matrix cosine.

    Parameters
    ----------
    A : (N, N) array_like
        Square matrix with finite entries.
    schur : {0, 1, 2, "none", "real", "complex"}, optional
        Schur factorization used before evaluation, unless ``A`` is already
        triangular: none (0), real (1, complex where unavoidable) or complex
        (2). A Schur factorization is potentially more accurate when ``A``
        is nonnormal, and faster when ``A`` is large and nonnormal.
        If None, ``rc["trigm"]["schur"]`` is used (``"none"`` by default).

    Returns
    -------
    C : (N, N) ndarray
        Matrix cosine of `A`.

    Raises
    ------
    NotMatrixError
        If `A` is not a finite two-dimensional numeric array.
    RectangularError
        If `A` is not square.
    InvalidSchurError
        If `schur` is not a supported mode.

    Examples
    --------
    >>> import numpy as np
    >>> from trigm import cosm
    >>> np.allclose(cosm(np.zeros((2, 2))), np.eye(2))
    True
    """
    C, _ = _trigm(A, schur, cosm, want_sin=False)
    return C


def sinm(A, schur=None):
    """Compute the matrix sine.

    Takes the same arguments, and raises the same errors, as `cosm`.

    Returns
    -------
    S : (N, N) ndarray
        Matrix sine of `A`.
    """
    _, S = _trigm(A, schur, sinm, want_sin=True)
    return S


def cosmsinm(A, schur=None):
    """Compute the matrix cosine and sine together.

    Cheaper than calling `cosm` and `sinm` separately: the factorization,
    the matrix powers and the linear solve are shared. Takes the same
    arguments, and raises the same errors, as `cosm`.

    Returns
    -------
    C, S : (N, N) ndarray
        Matrix cosine and sine of `A`.
    """
    return _trigm(A, schur, cosmsinm, want_sin=True)
