"""
Univariate Root Finding
Exact roots via SymPy, with a NumPy companion-matrix fallback.
"""

from typing import List, Tuple
import logging

import numpy as np
import sympy as sp
from sympy import Symbol, Expr

logger = logging.getLogger(__name__)

ZERO_TEST_DIGITS = 50


def is_zero_value(value: Expr, tolerance: float = 1e-10) -> bool:
    """
    Decide whether a constant expression vanishes.
    
    Rationals are compared exactly. Anything else is evaluated to
    ``ZERO_TEST_DIGITS`` digits and counts as zero below ``tolerance``.
    """
    value = sp.sympify(value)
    if value == 0:
        return True
    if value.is_Rational:
        return False
    return abs(complex(sp.N(value, ZERO_TEST_DIGITS))) < tolerance


def is_real_value(value: Expr, tolerance: float = 1e-10) -> bool:
    """True when ``value`` has no imaginary part (numerically, for floats)."""
    value = sp.sympify(value)
    if value.is_Rational or value.is_Float:
        return True
    return abs(complex(sp.N(value, ZERO_TEST_DIGITS)).imag) < tolerance


def _sort_key(item):
    value = complex(sp.N(item[0]))
    return (round(value.real, 12), round(value.imag, 12))


def find_roots(
    expr: Expr,
    var: Symbol,
    tolerance: float = 1e-10,
    cluster_tolerance: float = 1e-6
) -> List[Tuple[Expr, int]]:
    """
    Roots of a univariate polynomial with multiplicities.
    
    Args:
        expr: Polynomial expression in ``var`` (coefficients may be any
            numbers, including algebraic or floating values)
        var: The variable
        tolerance: Imaginary parts below this are dropped from numeric roots
        cluster_tolerance: Numeric roots closer than this are merged
    
    Returns:
        List of (root, multiplicity), sorted by real then imaginary part.
        A constant polynomial has no roots.
    """
    poly = sp.Poly(expr, var)
    degree = poly.degree()
    if degree <= 0:
        return []
    
    # Cardano and Ferrari radicals are too nested to substitute back
    exact = sp.roots(poly, cubics=False, quartics=False)
    if sum(exact.values()) == degree:
        logger.debug(f"Exact roots of degree-{degree} polynomial: {list(exact)}")
        return sorted(exact.items(), key=_sort_key)
    
    logger.debug(f"Exact root finding incomplete for degree {degree}, using numeric fallback")
    coeffs = [complex(sp.N(c)) for c in poly.all_coeffs()]
    numeric = np.roots(coeffs)
    
    clusters: List[List[complex]] = []
    for r in numeric:
        for cluster in clusters:
            if abs(cluster[0] - r) < cluster_tolerance:
                cluster.append(r)
                break
        else:
            clusters.append([r])
    
    result = []
    for cluster in clusters:
        mean = complex(np.mean(cluster))
        real = sp.Float(mean.real)
        if abs(mean.imag) < tolerance:
            value = real
        else:
            value = real + sp.I * sp.Float(mean.imag)
        result.append((value, len(cluster)))
    return sorted(result, key=_sort_key)
