"""Rational approximants to the cosine and sine of a matrix.

The approximants come from the diagonal Padé approximants ``r_m = p_m / p_m(-x)``
to the exponential: ``cos(x) ~ Re r_m(ix)`` and ``sin(x) ~ Im r_m(ix)``.
Writing ``p_m(ix) = a(x^2) + i x b(x^2)`` gives, with ``y = x^2``,

    cos(x) ~ (a^2 - y b^2) / (a^2 + y b^2)
    sin(x) ~ x (2 a b) / (a^2 + y b^2)

so both share the denominator and are polynomials in the even powers of
the matrix, apart from the final factor of ``x`` for the sine.
"""

import functools
import logging
import math
from fractions import Fraction

import numpy as np

logger = logging.getLogger(__name__)

# Cosine numerator and denominator coefficients, in increasing powers of T^2.
# fmt: off
COS_COEFFICIENTS = {
    1: (
        (1, -1 / 4),
        (1, 1 / 4),
    ),
    2: (
        (1, -5 / 12, 1 / 144),
        (1, 1 / 12, 1 / 144),
    ),
    3: (
        (1, -9 / 20, 11 / 600, -1 / 14400),
        (1, 1 / 20, 1 / 600, 1 / 14400),
    ),
    4: (
        (1, -13 / 28, 289 / 11760, -19 / 70560, 1 / 2822400),
        (1, 1 / 28, 3 / 3920, 1 / 70560, 1 / 2822400),
    ),
    6: (
        (1, -21 / 44, 533 / 17424, -533 / 914760, 169 / 43908480,
         -41 / 5269017600, 1 / 442597478400),
        (1, 1 / 44, 5 / 17424, 1 / 365904, 1 / 43908480, 1 / 5269017600,
         1 / 442597478400),
    ),
    8: (
        (1, -29 / 60, 1567 / 46800, -791 / 1029600, 9991 / 1349187840,
         -499 / 15567552000, 529 / 8904639744000, -71 / 1869974346240000,
         1 / 269276305858560000),
        (1, 1 / 60, 7 / 46800, 1 / 1029600, 1 / 192741120, 1 / 40475635200,
         1 / 8904639744000, 1 / 1869974346240000, 1 / 269276305858560000),
    ),
    10: (
        (1, -37 / 76, 10363 / 294576, -87 / 98192, 30749 / 3038060480,
         -362377 / 6187227171840, 462401 / 2598635412172800,
         -631 / 2273805985651200, 11449 / 56754197401853952000,
         -109 / 2043151106466742272000, 1 / 449493243422683299840000),
        (1, 1 / 76, 9 / 98192, 1 / 2209320, 7 / 3906077760, 7 / 1145782809600,
         7 / 371233630310400, 1 / 18190447885209600, 1 / 6306021933539328000,
         1 / 2043151106466742272000, 1 / 449493243422683299840000),
    ),
    12: (
        (1, -45 / 92, 6451 / 177744, -97939 / 101314080,
         1172939 / 96451004160, -8903 / 108507379680,
         105169 / 332967021843456, -40133 / 56604393713387520,
         7411631 / 8083107422271737856000,
         -377521 / 581983734403565125632000, 1 / 4475076773576048640000,
         -31 / 1075505941177788352167936000,
         1 / 1677789268237349829381980160000),
        (1, 1 / 92, 11 / 177744, 5 / 20262816, 5 / 6430066944,
         1 / 482255020800, 1 / 204200554521600, 1 / 94340656188979200,
         1 / 46189185270124216320, 1 / 23279349376142605025280,
         1 / 11639674688071302512640000, 1 / 5377529705888941760839680000,
         1 / 1677789268237349829381980160000),
    ),
    15: (
        (1, -57 / 116, 6793 / 181656, -114317 / 108993600,
         4540429 / 315863452800, -2093419 / 18951807168000,
         61055671 / 118827830943360000,
         -403985837 / 267384224682731520000,
         1940595983 / 676482088447310745600000,
         -17185433 / 4870671036820637368320000,
         119069 / 42976509148417388544000000,
         -1807879 / 1350150011406680678498304000000,
         57191 / 153917101300361597348806656000000,
         -6241 / 120055339014282045932069191680000000,
         239 / 85719512056197380795497402859520000000,
         -1 / 41145365786974742781838753372569600000000),
        (1, 1 / 116, 7 / 181656, 13 / 108993600, 13 / 45123350400,
         11 / 18951807168000, 11 / 10802530085760000,
         11 / 6856005761095680000, 11 / 4730643975156019200000,
         1 / 316277340053288140800000, 1 / 243533551841031868416000000,
         1 / 192878573058097239785472000000,
         1 / 153917101300361597348806656000000,
         1 / 120055339014282045932069191680000000,
         1 / 85719512056197380795497402859520000000,
         1 / 41145365786974742781838753372569600000000),
    ),
    18: (
        (1, -69 / 140, 8219 / 215600, -671 / 607600, 2193 / 137552800,
         -21920323 / 165789638784000, 134249447 / 196234645178880000,
         -3751133521 / 1613539369983340800000,
         24063924851 / 4492093606033620787200000,
         -3117272252947 / 365638451156712597594931200000,
         2278348165637 / 241321377763430314412654592000000,
         -181116301 / 24964280458285894594412544000000,
         118410671 / 31027034283869611853055590400000000,
         -12439657 / 9300809806505855411951252275200000000,
         3548761 / 11901654439670583707147802456883200000000,
         -211369 / 5400375702000527357118315364810752000000000,
         12769 / 4838736628992472511978010566870433792000000000,
         -1 / 14473640356517073202984078528468746240000000000,
         1 / 3375889771315468222156818412294164248002560000000000),
        (1, 1 / 140, 17 / 646800, 1 / 15038100, 1 / 7675446240,
         1 / 4736846822400, 13 / 44052675448320000,
         13 / 35462403735897600000, 13 / 31413242000235110400000,
         13 / 30081320539425141719040000,
         13 / 30682946950213644553420800000,
         1 / 2531343123392625675657216000000,
         1 / 2820639480351782895732326400000000,
         1 / 3226811565522439632717781401600000000,
         1 / 3740519966753612022246452200734720000000,
         1 / 4320300561600421885694652291848601600000000,
         1 / 4838736628992472511978010566870433792000000000,
         1 / 4935511361572321962217570778207842467840000000000,
         1 / 3375889771315468222156818412294164248002560000000000),
    ),
    21: (
        (1, -81 / 164, 2533 / 65559, -2664719 / 2328655680,
         14500309 / 847630667520, -2750939 / 18442952985600,
         4772125081 / 5775060311333913600,
         -7205555041 / 2344674486401568921600,
         6718682653 / 844082815104564811776000,
         -175147477 / 11902734627741789511680000,
         7557092027 / 383208908708499621408460800000,
         -511087362307 / 26455098062894992010006770483200000,
         1118382752029 / 80698631131054883627324652681953280000,
         -928111901 / 128093065287388704170356591558656000000,
         40219969879 / 14743639907643727238712214044992864256000000,
         -37692173 / 52036376144624919666043108394092462080000000,
         6811163 / 51897612474905919880266993438374882181120000000,
         -19097941 / 1238692214551054495702212599387131687898972160000000,
         131 / 121026069349746329449812955585281166776729600000000,
         -1 / 25335803850102306486488931290809460129267712000000000,
         461 / 818458448611321951708262761769450939989118460887040000000000,
         -1 / 756255606516861483378434791874972668549945457859624960000000000),
        (1, 1 / 164, 5 / 262236, 19 / 465731136, 19 / 282543555840,
         17 / 186478746854400, 17 / 160418341981497600,
         17 / 156311632426771261440, 17 / 168816563020912962355200,
         1 / 11687300516832435855360000, 1 / 14784435153793031357030400000,
         1 / 19870280846697834143848857600000,
         1 / 28088629004892058345744745103360000,
         1 / 41383913400540965962730591118950400000,
         1 / 63007008152323620678257324978601984000000,
         1 / 98290932717624848258081426966619095040000000,
         1 / 155692837424717759640800980315124646543360000000,
         1 / 247738442910210899140442519877426337579794432000000,
         1 / 390188047583582166146196968806946481688176230400000000,
         1 / 593085832327044892542219392586558652166027870208000000000,
         1 / 818458448611321951708262761769450939989118460887040000000000,
         1 / 756255606516861483378434791874972668549945457859624960000000000),
    ),
}
# fmt: on

# Paterson-Stockmeyer block size: polynomials in Y = T^2 are evaluated as
# nested polynomials in Y^z, so T^(2z) is the highest power ever formed.
BLOCK_SIZE = {1: 1, 2: 2, 3: 3, 4: 4, 6: 3, 8: 4, 10: 5, 12: 6, 15: 5, 18: 6, 21: 7}


def pade_exp_coefficients(m):
    """Exact numerator coefficients of the ``[m/m]`` Padé approximant to exp.

    ``p_m(x) = sum_j c_j x^j`` with ``c_j = (2m - j)! m! / ((2m)! j! (m - j)!)``;
    the denominator is ``p_m(-x)``.
    """
    f = math.factorial
    return tuple(
        Fraction(f(2 * m - j) * f(m), f(2 * m) * f(j) * f(m - j)) for j in range(m + 1)
    )


def _polymul(a, b):
    out = [Fraction(0)] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            out[i + j] += ai * bj
    return out


def _polyadd(a, b, sign=1):
    n = max(len(a), len(b))
    a = list(a) + [Fraction(0)] * (n - len(a))
    b = list(b) + [Fraction(0)] * (n - len(b))
    return [ai + sign * bi for ai, bi in zip(a, b)]


def trig_pade_coefficients(m):
    """Exact coefficients of the cosine and sine approximants of degree ``m``.

    Returns
    -------
    cos_num, sin_num, den : tuple of Fraction
        Coefficients in increasing powers of ``y = x^2``. The sine
        approximant is ``x sin_num(y) / den(y)``.
    """
    c = pade_exp_coefficients(m)
    a = [(-1) ** k * c[2 * k] for k in range(m // 2 + 1)]
    b = [(-1) ** k * c[2 * k + 1] for k in range((m - 1) // 2 + 1)]
    a2 = _polymul(a, a)
    yb2 = [Fraction(0)] + _polymul(b, b)
    cos_num = _polyadd(a2, yb2, sign=-1)
    den = _polyadd(a2, yb2)
    sin_num = [2 * x for x in _polymul(a, b)]
    return tuple(cos_num), tuple(sin_num), tuple(den)


@functools.lru_cache(maxsize=None)
def sin_numerator(m):
    """Sine numerator coefficients of degree ``m``, in increasing powers of T^2.

    The result shares the denominator ``COS_COEFFICIENTS[m][1]``.
    """
    if m not in COS_COEFFICIENTS:
        raise KeyError(f"No approximant of degree {m}")
    _, sin_num, _ = trig_pade_coefficients(m)
    logger.debug("Derived %d sine coefficients for degree %d", len(sin_num), m)
    return tuple(float(x) for x in sin_num)


def matrix_polynomial(coeffs, powers, z):
    """Evaluate ``sum_k coeffs[k] Y^k`` with ``Y = T^2``.

    Terms are grouped as ``B_0 + Y^z (B_1 + Y^z (B_2 + ...))``, where ``B_0``
    uses ``Y^0 .. Y^z`` and each later block uses ``Y^1 .. Y^z``.
    """
    deg = len(coeffs) - 1
    out = coeffs[0] * powers.ident
    for k in range(1, min(z, deg) + 1):
        out = out + coeffs[k] * powers[2 * k]

    tail = None
    for start in reversed(range(z + 1, deg + 1, z)):
        block = coeffs[start] * powers[2]
        for i in range(1, min(z, deg - start + 1)):
            block = block + coeffs[start + i] * powers[2 * (i + 1)]
        if tail is not None:
            block = block + powers[2 * z].dot(tail)
        tail = block
    if tail is not None:
        out = out + powers[2 * z].dot(tail)
    return out


def cos_approximant(powers, m):
    """Degree ``m`` rational approximant to ``cos(T)``.

    Parameters
    ----------
    powers : PowerTable
        Powers of the (scaled) working matrix ``T``.
    m : int
        Degree, one of the keys of ``COS_COEFFICIENTS``.
    """
    p, q = COS_COEFFICIENTS[m]
    z = BLOCK_SIZE[m]
    P = matrix_polynomial(p, powers, z)
    R = matrix_polynomial(q, powers, z)
    return np.linalg.solve(R, P)


def cos_sin_approximant(powers, m):
    """Degree ``m`` rational approximants to ``cos(T)`` and ``sin(T)``.

    Both share the denominator, so a single factorization solves for both.
    """
    p, q = COS_COEFFICIENTS[m]
    z = BLOCK_SIZE[m]
    P = matrix_polynomial(p, powers, z)
    Ps = matrix_polynomial(sin_numerator(m), powers, z)
    R = matrix_polynomial(q, powers, z)
    n = P.shape[0]
    X = np.linalg.solve(R, np.hstack([P, Ps]))
    return X[:, :n], powers[1].dot(X[:, n:])
