import logging

import trigm.utils.numpy as npext
from trigm.onenorm import onenorm, onenormest_product
from trigm.rc import rc

logger = logging.getLogger(__name__)


class PowerTable:
    """Lazily computed powers of a square matrix and their 1-norms.

    The idea is to not do more work than we need: a power is only formed
    when it is first asked for, and it is formed from powers that are
    already cached. Once formed, a power is never recomputed, so the
    same table can be shared by parameter selection and by the evaluation
    of the rational approximant.

    ``table[1]`` is the matrix itself; ``table[k]`` for even ``k`` is
    ``T^k``, built as ``T^(k/2) T^(k/2)`` when ``k/2`` is even and as
    ``T^(k/2 - 1) T^(k/2 + 1)`` otherwise (so ``T^6 = T^2 T^4``,
    ``T^10 = T^4 T^6``, ``T^14 = T^6 T^8``).

    Parameters
    ----------
    T : (n, n) ndarray
        The matrix whose powers are tabulated.
    use_exact_onenorm : bool, optional
        If True then only exact 1-norms of matrix powers are used, forming
        the powers as needed. Otherwise, 1-norms of powers that have not
        been formed yet are estimated. If None, ``rc`` decides.
    """

    def __init__(self, T, use_exact_onenorm=None):
        self.T = T
        self.ident = npext.ident_like(T)
        if use_exact_onenorm is None:
            use_exact_onenorm = rc.exact_onenorm(T.shape[0])
        self.use_exact_onenorm = use_exact_onenorm
        self._powers = {1: T}
        self._onenorms = {}
        self._estimates = {}

    def __contains__(self, k):
        return k in self._powers

    def __getitem__(self, k):
        if k not in self._powers:
            self._powers[k] = self._form(k)
        return self._powers[k]

    def __len__(self):
        return len(self._powers)

    @property
    def cached(self):
        """Exponents of the powers formed so far, in increasing order."""
        return sorted(self._powers)

    def _form(self, k):
        if k < 1 or k % 2 != 0:
            raise KeyError(f"Only even powers can be formed (got {k})")
        if k == 2:
            a, b = 1, 1
        elif (k // 2) % 2 == 0:
            a, b = k // 2, k // 2
        else:
            a, b = k // 2 - 1, k // 2 + 1
        logger.debug("Forming T^%d = T^%d T^%d", k, a, b)
        return self[a].dot(self[b])

    def onenorm(self, k):
        """Exact 1-norm of ``T^k``, forming the power if needed."""
        if k not in self._onenorms:
            self._onenorms[k] = onenorm(self[k])
        return self._onenorms[k]

    def onenormest(self, k):
        """1-norm of ``T^k``, estimated unless the power is already formed.

        The estimate applies a product of cached powers whose exponents add
        up to ``k``, using the largest available powers first.
        """
        if k in self._powers or self.use_exact_onenorm:
            return self.onenorm(k)
        if k not in self._estimates:
            factors = []
            remaining = k
            while remaining > 0:
                j = max(p for p in self._powers if p <= remaining)
                factors.append(self._powers[j])
                remaining -= j
            self._estimates[k] = onenormest_product(
                factors, **rc.onenormest_options()
            )
        return self._estimates[k]

    def d_tight(self, k):
        """``||T^k||_1^(1/k)``, computed exactly."""
        return self.onenorm(k) ** (1.0 / k)

    def d_loose(self, k):
        """``||T^k||_1^(1/k)``, possibly estimated."""
        return self.onenormest(k) ** (1.0 / k)

    def scaled(self, s):
        """Table for ``2^-s T``, carrying over every power formed so far."""
        table = PowerTable(self.T * 2.0**-s, use_exact_onenorm=self.use_exact_onenorm)
        for k, Tk in self._powers.items():
            if k != 1:
                table._powers[k] = Tk * 2.0 ** (-s * k)
        return table
