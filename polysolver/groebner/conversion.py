"""
Expression → Polynomial extraction.

Validates that an expression is polynomial in the unknowns before handing
it to ``Polynomial.from_expr``.
"""

from typing import List, Optional, Sequence
import logging

import sympy as sp
from sympy import Symbol, Expr

from .polynomial import Polynomial
from ..errors import NotPolynomialError, DegenerateInputError

logger = logging.getLogger(__name__)


def non_polynomial_reason(expr: Expr, unknowns: Sequence[Symbol]) -> Optional[str]:
    """
    Describe why ``expr`` is not polynomial in ``unknowns``.
    
    Returns:
        None when the expression is polynomial, else a short reason
        ("function", "denominator", "power", "derivative").
    """
    unknown_set = set(unknowns)
    
    def depends(e) -> bool:
        return bool(e.free_symbols & unknown_set)
    
    for node in sp.preorder_traversal(expr):
        if isinstance(node, sp.Derivative) and depends(node):
            return "derivative"
        if isinstance(node, sp.Function) and depends(node):
            return "function"
        if isinstance(node, sp.Pow) and depends(node):
            base, exp = node.as_base_exp()
            if depends(exp):
                return "power"
            if not exp.is_Integer:
                return "power"
            if exp.is_negative:
                return "denominator"
    return None


def polynomial_from_expr(
    expr: Expr,
    unknowns: Sequence[Symbol],
    index: Optional[int] = None
) -> Polynomial:
    """
    Convert one equation (``expr = 0``) to a Polynomial over ``unknowns``.
    
    Args:
        expr: Left-hand side of ``expr = 0``
        unknowns: Ring variables in priority order
        index: Position of the equation, reported in errors
    
    Raises:
        NotPolynomialError: transcendental call, unknown in a denominator
            or non-integer power of an unknown
        DegenerateInputError: coefficients that are not exact rationals
    """
    expr = sp.sympify(expr)
    reason = non_polynomial_reason(expr, unknowns)
    if reason is not None:
        raise NotPolynomialError(
            f"Equation {expr} = 0 is not polynomial in {list(unknowns)} ({reason})",
            stage="conversion",
            equation_index=index
        )
    try:
        return Polynomial.from_expr(sp.expand(expr), unknowns)
    except DegenerateInputError as e:
        raise DegenerateInputError(e.message, stage="conversion", equation_index=index) from e


def polynomials_from_exprs(
    exprs: Sequence[Expr],
    unknowns: Sequence[Symbol]
) -> List[Polynomial]:
    """Convert a whole system, tagging errors with the equation index."""
    polys = [polynomial_from_expr(e, unknowns, index=i) for i, e in enumerate(exprs)]
    logger.debug(f"Converted {len(polys)} equations over {list(unknowns)}")
    return polys
