"""Choice of the basis in which a matrix function is evaluated.

Triangular matrices are used as they are (lower triangular ones after a
transpose). Other matrices are either reduced to (quasi-)triangular form
with a Schur factorization, or used in full.
"""

import logging

import numpy as np
import scipy.linalg

import trigm.utils.numpy as npext
from trigm.exceptions import InvalidSchurError

logger = logging.getLogger(__name__)

SCHUR_NONE = 0
SCHUR_REAL = 1
SCHUR_COMPLEX = 2

_SCHUR_NAMES = {"none": SCHUR_NONE, "real": SCHUR_REAL, "complex": SCHUR_COMPLEX}


def schur_mode(value, obj=None):
    """Normalize a Schur factorization flag to one of the ``SCHUR_*`` values.

    Accepts the integers 0, 1 and 2 and the names ``"none"``, ``"real"``
    and ``"complex"``.
    """
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _SCHUR_NAMES:
            return _SCHUR_NAMES[key]
        if key.isdigit():
            value = int(key)
    if npext.is_integer(value) and value in _SCHUR_NAMES.values():
        return int(value)
    raise InvalidSchurError(
        f"Schur mode must be one of 0, 1, 2, 'none', 'real' or 'complex' "
        f"(got {value!r})",
        attr="schur",
        obj=obj,
    )


class Layout:
    """The working matrix of one evaluation and how to get back from it.

    Parameters
    ----------
    T : (n, n) ndarray
        The working matrix.
    Q : (n, n) ndarray, optional
        Unitary factor of a Schur factorization ``A = Q T Q^H``.
    kind : int
        Which Schur factorization produced ``T``, if any.
    transposed : bool
        Whether ``T`` is the transpose of the input.
    triangular : bool
        Whether ``T`` is (quasi-)upper triangular.
    """

    def __init__(self, T, Q=None, kind=SCHUR_NONE, transposed=False, triangular=True):
        self.T = T
        self.Q = Q
        self.kind = kind
        self.transposed = transposed
        self.triangular = triangular

    @property
    def use_schur(self):
        return self.Q is not None

    def __repr__(self):
        return "%s(n=%d, kind=%d, transposed=%s, triangular=%s)" % (
            type(self).__name__,
            self.T.shape[0],
            self.kind,
            self.transposed,
            self.triangular,
        )

    def restore(self, X):
        """Map ``f(T)`` back to ``f(A)`` in the caller's basis."""
        if self.transposed:
            X = X.T
        if self.use_schur:
            X = self.Q.dot(X).dot(self.Q.conj().T)
        return X


def select_layout(A, schur=SCHUR_NONE):
    """Choose the working matrix for ``A``.

    ``A`` is never modified. Triangular matrices skip factorization
    regardless of ``schur``.
    """
    if npext.is_lower_triangular(A):
        logger.debug("Input is lower triangular; working on its transpose")
        return Layout(A.T, transposed=True)
    if npext.is_upper_triangular(A):
        logger.debug("Input is upper triangular")
        return Layout(A)
    if schur == SCHUR_REAL:
        T, Q = scipy.linalg.schur(A, output="real")
        logger.debug("Reduced input to real Schur form")
        return Layout(T, Q=Q, kind=SCHUR_REAL)
    if schur == SCHUR_COMPLEX:
        T, Q = scipy.linalg.schur(np.asarray(A, dtype=np.complex128), output="complex")
        logger.debug("Reduced input to complex Schur form")
        return Layout(T, Q=Q, kind=SCHUR_COMPLEX)
    logger.debug("Working on the full input matrix")
    return Layout(A, triangular=False)
