"""trigm computes the cosine and sine of a square matrix.

The algorithms are those of Al-Mohy, Higham and Relton (2015): rational
approximants derived from the Padé approximants to the exponential, combined
with scaling and squaring, optionally preceded by a Schur factorization.
"""

import logging

from trigm.version import version as __version__

# trigm namespace (API)
from trigm import exceptions
from trigm.layout import SCHUR_COMPLEX, SCHUR_NONE, SCHUR_REAL, select_layout
from trigm.matfuncs import cosm, cosmsinm, sinm
from trigm.powers import PowerTable
from trigm.rc import RC_DEFAULTS, rc
from trigm.selection import ParameterSet, select_parameters
from trigm.utils.logging import log

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__copyright__ = "2026, trigm contributors"
