"""
S-polynomials and Buchberger's first criterion.
"""

from sympy import Rational

from . import monomial as mono
from .monomial_order import MonomialOrder
from .polynomial import Polynomial


def s_polynomial(f: Polynomial, g: Polynomial, order: MonomialOrder) -> Polynomial:
    """
    S(f, g) = (L / LT(f))·f − (L / LT(g))·g with L = lcm(LM(f), LM(g)).
    
    Leading coefficients are divided out, so the L-terms cancel and any
    nonzero result has a leading monomial strictly below L.
    
    Raises:
        EmptyPolynomialError: if f or g is zero
    """
    lc_f, lm_f = f.leading_term(order)
    lc_g, lm_g = g.leading_term(order)
    lcm = mono.lcm(lm_f, lm_g)
    
    left = f.mul_term(Rational(1) / lc_f, mono.div(lcm, lm_f))
    right = g.mul_term(Rational(1) / lc_g, mono.div(lcm, lm_g))
    return left - right


def coprime_leading_monomials(f: Polynomial, g: Polynomial, order: MonomialOrder) -> bool:
    """
    Buchberger's first criterion: when LM(f) and LM(g) share no variable,
    S(f, g) reduces to zero and the pair can be skipped.
    """
    return mono.coprime(f.leading_monomial(order), g.leading_monomial(order))
