"""Choice of the scaling and the approximant degree.

The degree ``m`` of the rational approximant and the number ``s`` of
double-angle steps are chosen to minimize the cost of evaluating the
approximant and undoing the scaling, subject to a backward error bound of
one unit roundoff. The bound for degree ``m`` holds when the norm quantity
of the scaled matrix does not exceed ``THETA[m - 1]``.

References
----------
.. [1] Awad H. Al-Mohy, Nicholas J. Higham and Samuel D. Relton (2015),
       "New Algorithms for the Matrix Sine and Cosine Separately or
       Simultaneously." SIAM J. Sci. Comput. 37(1), A456-A487.
"""

import collections
import logging
import math

from trigm.exceptions import ParameterSelectionError

logger = logging.getLogger(__name__)

ParameterSet = collections.namedtuple("ParameterSet", ["s", "m"])

DEGREES = (1, 2, 3, 4, 6, 8, 10, 12, 15, 18, 21)

THETA = (
    3.650024139523051e-08,
    5.317232856892575e-04,
    1.495585217958291e-02,
    8.536352760102744e-02,
    2.539398330063230e-01,
    5.414660951208968e-01,
    9.504178996162932e-01,
    1.473163964234804e00,
    2.097847961257068e00,
    2.811644121620263e00,
    3.602330066265032e00,
    4.458935413036850e00,
    5.371920351148152e00,
    6.333131897833198e00,
    7.335666920593883e00,
    8.373706635544712e00,
    9.442353297358748e00,
    1.053748222747535e01,
    1.165561350236195e01,
    1.279380339874144e01,
    # Reduced from 1.373666727242812e01 so that the denominator of the
    # degree 21 approximant keeps a condition number below 10.
    13.0,
)

# Rungs tried once d10 is known: (quantity, degree, extra halvings).
# A rung is accepted when quantity <= 2**extra * theta(degree).
_UNSCALED_LADDER = (
    ("a34", 12, 0),
    ("a3", 10, 1),
    ("a3", 8, 2),
    ("a34", 15, 0),
    ("a34", 12, 1),
    ("a3", 10, 2),
    ("a3", 8, 3),
    ("a34", 18, 0),
    ("a34", 15, 1),
    ("a34", 12, 2),
    ("a3", 10, 3),
)

# Rungs tried after scaling by 2**-s so that a345 <= theta(21).
_SCALED_LADDER = (
    ("a34", 15, 0),
    ("a34", 12, 1),
    ("a3", 10, 2),
    ("a3", 8, 3),
    ("a34", 18, 0),
    ("a34", 15, 1),
    ("a34", 12, 2),
    ("a3", 10, 3),
    ("a345", 21, 0),
)


def theta(m):
    """Largest norm quantity for which the degree ``m`` approximant is accurate."""
    return THETA[m - 1]


def _walk(ladder, values, s=0):
    for name, m, extra in ladder:
        if values[name] <= 2**extra * theta(m):
            return ParameterSet(s + extra, m)
    return None


def _selected(params, reason):
    logger.debug("Selected s=%d, m=%d (%s)", params.s, params.m, reason)
    return params


def select_parameters(powers):  # noqa: C901
    """Choose the number of scalings ``s`` and the approximant degree ``m``.

    Parameters
    ----------
    powers : PowerTable
        Powers of the working matrix. Powers formed while measuring norms
        stay in the table, ready for evaluating the approximant.

    Returns
    -------
    ParameterSet
        ``(s, m)``, with ``m`` the cheapest degree that meets its bound once
        the matrix is scaled by ``2**-s``.
    """
    d2 = powers.d_tight(2)
    a1 = d2
    if a1 <= theta(1):
        return _selected(ParameterSet(0, 1), "a1=%g" % a1)

    d4 = powers.d_tight(4)
    d6 = powers.d_loose(6)
    a2 = max(d4, d6)
    if a2 <= theta(2):
        return _selected(ParameterSet(0, 2), "a2=%g" % a2)

    d6 = powers.d_tight(6)
    a2 = max(d4, d6)
    for m in (3, 4):
        if a2 <= theta(m):
            return _selected(ParameterSet(0, m), "a2=%g" % a2)

    d8 = powers.d_loose(8)
    a3 = max(d6, d8)
    if a3 <= theta(6):
        return _selected(ParameterSet(0, 6), "a3=%g" % a3)

    d8 = powers.d_tight(8)
    a3 = max(d6, d8)
    for s, m in ((0, 8), (0, 10), (1, 8)):
        if a3 <= 2**s * theta(m):
            return _selected(ParameterSet(s, m), "a3=%g" % a3)

    d10 = powers.d_loose(10)
    a4 = max(d8, d10)
    a34 = min(a3, a4)
    params = _walk(_UNSCALED_LADDER, {"a3": a3, "a34": a34})
    if params is not None:
        return _selected(params, "a3=%g, a34=%g" % (a3, a34))

    d12 = powers.d_loose(12)
    a5 = max(d10, d12)
    a345 = min(a3, a4, a5)
    if a345 <= theta(21):
        return _selected(ParameterSet(0, 21), "a345=%g" % a345)

    if not math.isfinite(a345):
        raise ParameterSelectionError(
            "Could not find parameters: matrix powers overflowed", norm=a345
        )

    s = int(math.ceil(math.log2(a345 / theta(21))))
    scale = 2.0**-s
    values = {"a3": a3 * scale, "a34": a34 * scale, "a345": a345 * scale}
    params = _walk(_SCALED_LADDER, values, s=s)
    if params is not None:
        return _selected(params, "scaled a345=%g" % values["a345"])

    raise ParameterSelectionError(
        "Could not find parameters for the scaled matrix", norm=a345
    )
