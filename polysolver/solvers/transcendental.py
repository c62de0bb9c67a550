"""
Transcendental Equations
Single-unknown equations handed to ``sympy.solveset``.
"""

from typing import Any, Sequence
import logging

import sympy as sp
from sympy import Expr, S

from ..config import SolverOptions
from ..errors import UnsupportedEquationError
from ..results import SolverResult

logger = logging.getLogger(__name__)


def _is_infinite_family(solution_set) -> bool:
    if isinstance(solution_set, sp.ImageSet):
        return True
    if isinstance(solution_set, sp.Union):
        return all(isinstance(a, (sp.ImageSet, sp.FiniteSet)) for a in solution_set.args) and \
            any(isinstance(a, sp.ImageSet) for a in solution_set.args)
    return False


class TranscendentalSolver:
    """
    Finite solution sets become EXACT, periodic families become
    INFINITE_SOLUTIONS; anything SymPy cannot describe is reported as
    unsupported rather than approximated.
    """
    
    method = "transcendental"
    
    def solve(
        self,
        exprs: Sequence[Expr],
        unknowns: Sequence[Any],
        options: SolverOptions
    ) -> SolverResult:
        if len(exprs) != 1 or len(unknowns) != 1:
            raise UnsupportedEquationError(
                "Transcendental systems with several equations or unknowns are not supported",
                stage="dispatch"
            )
        x = unknowns[0]
        domain = S.Reals if options.real_only else S.Complexes
        solution_set = sp.solveset(exprs[0], x, domain=domain)
        logger.debug(f"solveset({exprs[0]}, {x}) = {solution_set}")
        
        if solution_set is S.EmptySet:
            return SolverResult.no_solution(unknowns, method=self.method)
        if isinstance(solution_set, sp.FiniteSet):
            values = sorted(solution_set, key=sp.default_sort_key)
            return SolverResult.exact([(v,) for v in values], unknowns, method=self.method)
        if _is_infinite_family(solution_set):
            return SolverResult.infinite_solutions(
                unknowns, message=f"Solution family: {solution_set}", method=self.method
            )
        raise UnsupportedEquationError(
            f"Cannot describe the solutions of {exprs[0]} = 0 exactly: {solution_set}",
            stage="dispatch",
            equation_index=0
        )
