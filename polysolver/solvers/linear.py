"""
Linear Systems
Exact Gauss-Jordan elimination on the augmented matrix.
"""

from typing import Any, Sequence
import logging

import sympy as sp
from sympy import Expr

from ..config import SolverOptions
from ..results import SolverResult

logger = logging.getLogger(__name__)


class LinearSystemSolver:
    """
    Solves systems of degree ≤ 1 in the unknowns, including degree-0
    equations such as ``0 = 0`` or ``5 = 0``. Coefficients may be symbolic.
    """
    
    method = "linear"
    
    def solve(
        self,
        exprs: Sequence[Expr],
        unknowns: Sequence[Any],
        options: SolverOptions
    ) -> SolverResult:
        unknowns = list(unknowns)
        A, b = sp.linear_eq_to_matrix(list(exprs), unknowns)
        augmented = A.row_join(b)
        rref, pivots = augmented.rref()
        n = len(unknowns)
        
        logger.debug(f"Linear system {A.shape}, rank {len(pivots)}")
        
        if n in pivots:
            return SolverResult.no_solution(
                unknowns, message="Inconsistent linear system", method=self.method
            )
        if len(pivots) < n:
            free = [unknowns[i] for i in range(n) if i not in pivots]
            return SolverResult.infinite_solutions(
                unknowns, message=f"Free unknowns: {free}", method=self.method
            )
        solution = tuple(sp.simplify(rref[i, n]) for i in range(n))
        return SolverResult.exact([solution], unknowns, method=self.method)
