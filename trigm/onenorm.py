"""Exact and estimated 1-norms of matrix products.

The estimates use the block 1-norm estimator of Higham and Tisseur, as
provided by ``scipy.sparse.linalg.onenormest``. Products are wrapped in a
linear operator so that they are only ever applied to thin blocks of vectors,
never formed explicitly.

References
----------
.. [1] Nicholas J. Higham and Francoise Tisseur (2000),
       "A Block Algorithm for Matrix 1-Norm Estimation,
       with an Application to 1-Norm Pseudospectra."
       SIAM J. Matrix Anal. Appl. Vol. 21, No. 4, pp. 1185-1201.
"""

import logging

import numpy as np
from scipy.sparse.linalg import LinearOperator, onenormest

logger = logging.getLogger(__name__)


def onenorm(A):
    """Exact 1-norm (maximum absolute column sum) of a dense matrix."""
    return float(np.linalg.norm(A, 1))


class ProductOperator(LinearOperator):
    """The product of a sequence of square matrices, applied lazily.

    ``ProductOperator(A, B, C)`` acts like ``A @ B @ C``; applying it to a
    block of vectors costs one thin product per factor.
    """

    def __init__(self, *factors):
        if not factors:
            raise ValueError("ProductOperator needs at least one factor")
        n = factors[0].shape[0]
        for A in factors:
            if A.ndim != 2 or A.shape != (n, n):
                raise ValueError(
                    "The factors of a ProductOperator must all be square "
                    "matrices of the same shape"
                )
        super().__init__(np.result_type(*factors), (n, n))
        self._factors = factors

    def _matvec(self, x):
        for A in reversed(self._factors):
            x = A.dot(x)
        return x

    def _matmat(self, X):
        for A in reversed(self._factors):
            X = A.dot(X)
        return X

    def _adjoint(self):
        return ProductOperator(*[A.conj().T for A in reversed(self._factors)])


def onenormest_product(factors, t=2, itmax=5):
    """Efficiently estimate the 1-norm of the matrix product of ``factors``.

    Parameters
    ----------
    factors : sequence of (n, n) ndarray
        Matrices whose product's 1-norm is to be estimated.
    t : int, optional
        A positive parameter controlling the tradeoff between
        accuracy versus time and memory usage.
        Larger values take longer and use more memory
        but give more accurate output.
    itmax : int, optional
        Use at most this many iterations.

    Returns
    -------
    est : float
        An underestimate of the 1-norm of the product, usually
        correct to within a factor of 3.
    """
    est = float(onenormest(ProductOperator(*factors), t=t, itmax=itmax))
    logger.debug("Estimated 1-norm of a product of %d factors: %g", len(factors), est)
    return est
