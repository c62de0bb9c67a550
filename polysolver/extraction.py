"""
Solution Extraction
Back-substitution over a reduced lexicographic Gröbner basis.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple
import logging
import time

import sympy as sp
from sympy import Symbol, Expr

from .errors import DegenerateInputError, ResourceExceededError
from .groebner.basis import GroebnerBasis
from .groebner.monomial_order import MonomialOrder
from .results import SolverResult
from .roots import find_roots, is_zero_value, is_real_value

logger = logging.getLogger(__name__)


class _Branch(Enum):
    SOLVED = "solved"
    DEAD = "dead"
    FREE = "free"


class SolutionExtractor:
    """
    Turns a zero-dimensional lex basis into explicit solution tuples.
    
    With priority x1 > ... > xn, the generators whose highest variable is
    xn are univariate; their roots are substituted into the generators
    whose highest variable is x(n-1), and so on up to x1, branching on
    every root. Outcomes:
    
    - unit basis, or every branch inconsistent: NO_SOLUTION
    - some variable left unconstrained: INFINITE_SOLUTIONS
    - otherwise: EXACT with all solution tuples
    
    Example:
        >>> basis = groebner([f, g], MonomialOrder.LEX)
        >>> SolutionExtractor().extract(basis).solutions
        [(-sqrt(2)/2, -sqrt(2)/2), (sqrt(2)/2, sqrt(2)/2)]
    """
    
    def __init__(self, real_only: bool = False, tolerance: float = 1e-10, timeout: Optional[float] = None):
        """
        Args:
            real_only: Drop complex roots while back-substituting
            tolerance: Numeric tolerance for zero and realness checks
            timeout: Optional wall-clock budget for one extraction (seconds)
        """
        self.real_only = real_only
        self.tolerance = tolerance
        self.timeout = timeout
        self._start = 0.0
    
    def extract(self, basis: GroebnerBasis) -> SolverResult:
        """
        Extract all solutions of the system the basis describes.
        
        Raises:
            DegenerateInputError: if the basis is not lexicographic
            ResourceExceededError: if the timeout runs out while branching
        """
        if basis.order is not MonomialOrder.LEX:
            raise DegenerateInputError(
                f"Solution extraction needs a lex basis, got {basis.order.value}",
                stage="extraction"
            )
        variables = basis.variables
        self._start = time.time()
        
        if basis.is_unit:
            return SolverResult.no_solution(
                variables, message="Basis is {1}: the system is inconsistent",
                basis=basis, method="groebner"
            )
        
        if not basis.is_zero_dimensional():
            free = basis.free_variables()
            return SolverResult.infinite_solutions(
                variables, message=f"Unconstrained variables: {free}",
                basis=basis, method="groebner"
            )
        
        levels = self._levels(basis)
        solutions: List[Tuple[Expr, ...]] = []
        status = self._solve_level(len(variables) - 1, {}, levels, variables, solutions)
        
        if status is _Branch.FREE:
            return SolverResult.infinite_solutions(
                variables, message="A variable stayed unconstrained after elimination",
                basis=basis, method="groebner"
            )
        
        solutions = self._deduplicate(solutions)
        logger.info(f"Extracted {len(solutions)} solution(s) for {list(variables)}")
        if not solutions:
            reason = "No real solutions" if self.real_only else "Every branch is inconsistent"
            return SolverResult.no_solution(variables, message=reason, basis=basis, method="groebner")
        return SolverResult.exact(solutions, variables, method="groebner", basis=basis)
    
    def _levels(self, basis: GroebnerBasis) -> Dict[int, List[Expr]]:
        """Group generators by the index of their highest-priority variable."""
        levels: Dict[int, List[Expr]] = {i: [] for i in range(len(basis.variables))}
        for g in basis.generators:
            used = g.used_variables()
            if not used:
                continue
            top = min(basis.variables.index(v) for v in used)
            levels[top].append(g.to_expr())
        return levels
    
    def _univariate(self, expr: Expr, var: Symbol) -> Optional[Expr]:
        """
        Drop vanishing coefficients of ``expr`` viewed as a polynomial in
        ``var``; returns None if nothing remains.
        """
        expr = sp.expand(expr)
        if expr.free_symbols - {var}:
            raise DegenerateInputError(
                f"Back-substitution left {expr} with unassigned variables",
                stage="extraction"
            )
        poly = sp.Poly(expr, var)
        terms = [
            c * var**k for (k,), c in poly.terms()
            if not is_zero_value(c, self.tolerance)
        ]
        if not terms:
            return None
        return sp.Add(*terms)
    
    def _solve_level(
        self,
        k: int,
        assignment: Dict[Symbol, Expr],
        levels: Dict[int, List[Expr]],
        variables: Sequence[Symbol],
        out: List[Tuple[Expr, ...]]
    ) -> _Branch:
        self._check_deadline()
        if k < 0:
            out.append(tuple(assignment[v] for v in variables))
            return _Branch.SOLVED
        
        var = variables[k]
        univariate = []
        for expr in levels[k]:
            reduced = self._univariate(expr.subs(assignment) if assignment else expr, var)
            if reduced is None:
                continue
            if not reduced.has(var):
                logger.debug(f"Branch {assignment} is inconsistent at {var}")
                return _Branch.DEAD
            univariate.append(reduced)
        
        if not univariate:
            logger.debug(f"{var} is unconstrained under {assignment}")
            return _Branch.FREE
        
        pivot = min(univariate, key=lambda e: sp.degree(e, var))
        others = [u for u in univariate if u is not pivot]
        status = _Branch.DEAD
        
        for value, multiplicity in find_roots(pivot, var, self.tolerance):
            if self.real_only and not is_real_value(value, self.tolerance):
                continue
            if not all(is_zero_value(u.subs(var, value), self.tolerance) for u in others):
                continue
            assignment[var] = value
            branch = self._solve_level(k - 1, assignment, levels, variables, out)
            del assignment[var]
            if branch is _Branch.FREE:
                return _Branch.FREE
            if branch is _Branch.SOLVED:
                status = _Branch.SOLVED
        return status
    
    def _check_deadline(self) -> None:
        if self.timeout is not None and time.time() - self._start > self.timeout:
            raise ResourceExceededError(
                f"Exceeded timeout of {self.timeout}s during back-substitution",
                stage="extraction"
            )
    
    def _deduplicate(self, solutions: List[Tuple[Expr, ...]]) -> List[Tuple[Expr, ...]]:
        seen = set()
        unique = []
        for sol in solutions:
            key = tuple(
                (round(complex(sp.N(v)).real, 9), round(complex(sp.N(v)).imag, 9))
                for v in sol
            )
            if key in seen:
                continue
            seen.add(key)
            unique.append(sol)
        return unique
