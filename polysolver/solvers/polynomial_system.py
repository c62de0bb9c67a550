"""
Polynomial Systems
Gröbner basis pipeline: conversion, Buchberger, reduction, extraction.
"""

from typing import Any, List, Sequence
import logging

from sympy import Expr

from ..config import SolverOptions
from ..extraction import SolutionExtractor
from ..groebner.buchberger import BuchbergerEngine
from ..groebner.conversion import polynomials_from_exprs
from ..groebner.monomial_order import MonomialOrder
from ..results import SolverResult

logger = logging.getLogger(__name__)


class GroebnerSystemSolver:
    """
    Solves polynomial systems through a reduced Gröbner basis.
    
    With ``extract_solutions`` off the basis in the configured order is
    returned as PARTIAL, even when it is {1}. Otherwise solutions are back-substituted from a
    lex basis; for another configured order the lex basis is computed
    from the basis in that order.
    """
    
    method = "groebner"
    
    def compute_basis(self, exprs: Sequence[Expr], unknowns: Sequence[Any], options: SolverOptions):
        """Reduced basis of the system in the configured order and variable priority."""
        variables = options.ordered_unknowns(unknowns)
        polys = polynomials_from_exprs(exprs, variables)
        engine = BuchbergerEngine(order=options.monomial_order, **options.engine_options())
        return engine.compute(polys)
    
    def solve(
        self,
        exprs: Sequence[Expr],
        unknowns: Sequence[Any],
        options: SolverOptions
    ) -> SolverResult:
        basis = self.compute_basis(exprs, unknowns, options)
        stats = {'buchberger': basis.stats.to_dict()} if basis.stats else {}
        variables = list(basis.variables)
        
        if not options.extract_solutions:
            result = SolverResult.partial(
                basis, variables, message="Solution extraction disabled",
                method=self.method, stats=stats
            )
            return self._in_caller_order(result, variables, unknowns)
        
        if basis.is_unit:
            result = SolverResult.no_solution(
                variables, message="Basis is {1}: the system is inconsistent",
                basis=basis, method=self.method, stats=stats
            )
            return self._in_caller_order(result, variables, unknowns)
        
        lex_basis = basis
        if basis.order is not MonomialOrder.LEX:
            logger.debug(f"Recomputing {basis.order.value} basis in lex order for extraction")
            engine = BuchbergerEngine(order=MonomialOrder.LEX, **options.engine_options())
            lex_basis = engine.compute(basis.generators)
            stats['buchberger_lex'] = lex_basis.stats.to_dict()
        
        extractor = SolutionExtractor(
            real_only=options.real_only,
            tolerance=options.root_tolerance,
            timeout=options.timeout
        )
        result = extractor.extract(lex_basis)
        result.stats.update(stats)
        return self._in_caller_order(result, variables, unknowns)
    
    @staticmethod
    def _in_caller_order(result: SolverResult, variables: List[Any], unknowns: Sequence[Any]) -> SolverResult:
        """Report solutions and unknowns in the caller's order; the basis keeps priority order."""
        unknowns = list(unknowns)
        if variables != unknowns:
            positions = [variables.index(u) for u in unknowns]
            result.solutions = [tuple(s[p] for p in positions) for s in result.solutions]
        result.unknowns = tuple(unknowns)
        return result
