"""
Quadratic Equations
Closed-form roots from the discriminant.
"""

from typing import Any, Sequence
import logging

import sympy as sp
from sympy import Expr, sqrt

from ..config import SolverOptions
from ..results import SolverResult
from ..roots import is_real_value

logger = logging.getLogger(__name__)


class QuadraticSolver:
    """Solves ``a*x**2 + b*x + c = 0`` for a single unknown."""
    
    method = "quadratic"
    
    def solve(
        self,
        exprs: Sequence[Expr],
        unknowns: Sequence[Any],
        options: SolverOptions
    ) -> SolverResult:
        x = unknowns[0]
        a, b, c = sp.Poly(sp.expand(exprs[0]), x).all_coeffs()
        discriminant = sp.simplify(b**2 - 4 * a * c)
        logger.debug(f"Quadratic in {x}: discriminant = {discriminant}")
        
        if discriminant == 0:
            roots = [sp.simplify(-b / (2 * a))]
        else:
            root = sqrt(discriminant)
            roots = [
                sp.simplify((-b - root) / (2 * a)),
                sp.simplify((-b + root) / (2 * a)),
            ]
        
        if options.real_only:
            roots = [r for r in roots if is_real_value(r, options.root_tolerance)]
            if not roots:
                return SolverResult.no_solution(
                    unknowns, message="Negative discriminant: no real roots", method=self.method
                )
        return SolverResult.exact([(r,) for r in roots], unknowns, method=self.method)
