"""
Gröbner Basis Kernel
Sparse polynomials, monomial orders, division and Buchberger completion.
"""

from .monomial_order import MonomialOrder, Ordering
from .polynomial import Polynomial
from .conversion import polynomial_from_expr, polynomials_from_exprs
from .s_polynomial import s_polynomial, coprime_leading_monomials
from .reduction import divide, reduce, is_reduced_against
from .basis import GroebnerBasis, BuchbergerStats
from .buchberger import BuchbergerEngine, groebner, minimalize, interreduce

__all__ = [
    "MonomialOrder",
    "Ordering",
    "Polynomial",
    "polynomial_from_expr",
    "polynomials_from_exprs",
    "s_polynomial",
    "coprime_leading_monomials",
    "divide",
    "reduce",
    "is_reduced_against",
    "GroebnerBasis",
    "BuchbergerStats",
    "BuchbergerEngine",
    "groebner",
    "minimalize",
    "interreduce",
]
