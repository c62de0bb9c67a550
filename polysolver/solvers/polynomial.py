"""
Univariate Polynomial Equations (degree ≥ 3).
"""

from typing import Any, Sequence
import logging

import sympy as sp
from sympy import Expr

from ..config import SolverOptions
from ..results import SolverResult
from ..roots import find_roots, is_real_value

logger = logging.getLogger(__name__)


class UnivariatePolynomialSolver:
    """Roots of one polynomial in one unknown, exact where SymPy can."""
    
    method = "polynomial"
    
    def solve(
        self,
        exprs: Sequence[Expr],
        unknowns: Sequence[Any],
        options: SolverOptions
    ) -> SolverResult:
        x = unknowns[0]
        roots = find_roots(sp.expand(exprs[0]), x, options.root_tolerance)
        if options.real_only:
            roots = [(r, m) for r, m in roots if is_real_value(r, options.root_tolerance)]
        if not roots:
            return SolverResult.no_solution(unknowns, message="No roots in the requested domain", method=self.method)
        logger.debug(f"Roots with multiplicity: {roots}")
        return SolverResult.exact([(r,) for r, _ in roots], unknowns, method=self.method)
