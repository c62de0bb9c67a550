"""
Multivariate Division
Reduces a polynomial against a list of divisors.
"""

from typing import Dict, List, Sequence, Tuple

from sympy import S

from . import monomial as mono
from .monomial import Monomial
from .monomial_order import MonomialOrder
from .polynomial import Polynomial


def divide(
    poly: Polynomial,
    basis: Sequence[Polynomial],
    order: MonomialOrder
) -> Tuple[List[Polynomial], Polynomial]:
    """
    Full multivariate division of ``poly`` by ``basis``.
    
    The largest remaining term is cancelled with the first divisor whose
    leading monomial divides it; terms no divisor can cancel move to the
    remainder. Each step removes the current largest monomial, so the loop
    ends under any well-order.
    
    Returns:
        (quotients, remainder) with poly == Σ quotients[i]·basis[i] + remainder
        and no remainder term divisible by a leading monomial of the basis.
        Zero divisors get a zero quotient.
    """
    variables = poly.variables
    for g in basis:
        if g.variables != variables:
            raise ValueError(
                f"Divisor over {g.variables} does not match {variables}"
            )
    
    leads = [None if g.is_zero else g.leading_term(order) for g in basis]
    quotients: List[Dict[Monomial, object]] = [{} for _ in basis]
    remainder: Dict[Monomial, object] = {}
    work: Dict[Monomial, object] = dict(poly.terms())
    
    while work:
        m = order.max(work)
        c = work[m]
        for i, lead in enumerate(leads):
            if lead is None:
                continue
            lc_g, lm_g = lead
            shift = mono.div(m, lm_g)
            if shift is None:
                continue
            factor = c / lc_g
            q = quotients[i]
            q[shift] = q.get(shift, S.Zero) + factor
            for gm, gc in basis[i].terms():
                key = mono.mul(gm, shift)
                value = work.get(key, S.Zero) - factor * gc
                if value == 0:
                    work.pop(key, None)
                else:
                    work[key] = value
            break
        else:
            remainder[m] = c
            del work[m]
    
    quotient_polys = [
        Polynomial._raw({k: v for k, v in q.items() if v != 0}, variables)
        for q in quotients
    ]
    return quotient_polys, Polynomial._raw(remainder, variables)


def reduce(poly: Polynomial, basis: Sequence[Polynomial], order: MonomialOrder) -> Polynomial:
    """Remainder of ``poly`` on division by ``basis``."""
    return divide(poly, basis, order)[1]


def is_reduced_against(poly: Polynomial, basis: Sequence[Polynomial], order: MonomialOrder) -> bool:
    """True if no term of ``poly`` is divisible by a leading monomial of ``basis``."""
    leads = [g.leading_monomial(order) for g in basis if not g.is_zero]
    return not any(
        mono.divides(lm, m) for m in poly.monomials() for lm in leads
    )
