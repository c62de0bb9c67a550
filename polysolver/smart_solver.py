"""
Smart Solver - Main API
Classifies the input once and dispatches it to one branch solver.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union
import logging
import time

from sympy import Expr

from .analyzer import EquationAnalyzer, EquationKind, EquationType, normalize_equations
from .config import SolverOptions
from .errors import PolySolveError, DegenerateInputError, UnsupportedEquationError
from .results import SolverResult
from .solvers import (
    LinearSystemSolver,
    QuadraticSolver,
    UnivariatePolynomialSolver,
    GroebnerSystemSolver,
    MatrixEquationSolver,
    TranscendentalSolver,
)

logger = logging.getLogger(__name__)

Handler = Callable[[List[Expr], List[Any], SolverOptions], SolverResult]


class SmartSolver:
    """
    Unified entry point for equations and systems.
    
    Every branch returns a SolverResult; solver errors are converted into
    ERROR results carrying the failing stage and equation index.
    
    Example:
        >>> x, y = symbols('x y')
        >>> result = SmartSolver().solve([x**2 + y**2 - 1, x - y], [x, y])
        >>> result.kind
        <ResultKind.EXACT: 'exact'>
        >>> result.solutions
        [(-sqrt(2)/2, -sqrt(2)/2), (sqrt(2)/2, sqrt(2)/2)]
    """
    
    def __init__(self, options: Optional[SolverOptions] = None):
        """
        Args:
            options: Default options for every call (overridable per call)
        """
        self.options = options if options is not None else SolverOptions()
        self.analyzer = EquationAnalyzer()
        self.linear_solver = LinearSystemSolver()
        self.quadratic_solver = QuadraticSolver()
        self.polynomial_solver = UnivariatePolynomialSolver()
        self.system_solver = GroebnerSystemSolver()
        self.matrix_solver = MatrixEquationSolver(self._solve_scalar)
        self.transcendental_solver = TranscendentalSolver()
        
        self._dispatch: Dict[EquationKind, Handler] = {
            EquationKind.LINEAR: self._solve_linear,
            EquationKind.QUADRATIC: self.quadratic_solver.solve,
            EquationKind.POLYNOMIAL: self.polynomial_solver.solve,
            EquationKind.POLYNOMIAL_SYSTEM: self.system_solver.solve,
            EquationKind.MATRIX_EQUATION: self.matrix_solver.solve,
            EquationKind.TRANSCENDENTAL: self.transcendental_solver.solve,
            EquationKind.UNCLASSIFIABLE: self._unclassifiable,
        }
    
    def solve(
        self,
        equations,
        unknowns: Sequence[Any],
        options: Optional[Union[SolverOptions, Dict[str, Any]]] = None
    ) -> SolverResult:
        """
        Solve an equation or a system.
        
        Args:
            equations: Eq, expression (``expr = 0``) or a sequence of them
            unknowns: Unknowns to solve for (Symbols or MatrixSymbols)
            options: SolverOptions or a dict of option overrides
        
        Returns:
            SolverResult (never raises for solver failures)
        """
        start_time = time.time()
        unknowns = list(unknowns) if isinstance(unknowns, (list, tuple)) else [unknowns]
        
        try:
            opts = self._resolve_options(options)
            exprs = normalize_equations(equations)
            eq_type = self.analyzer.analyze(exprs, unknowns)
        except PolySolveError as e:
            logger.warning(f"Solve aborted before dispatch: {e}")
            return SolverResult.from_exception(e, unknowns)
        except ValueError as e:
            logger.warning(f"Invalid solver options: {e}")
            return SolverResult.from_exception(
                DegenerateInputError(str(e), stage="configuration"), unknowns
            )
        
        logger.debug(f"Dispatching {len(exprs)} equation(s) as {eq_type}")
        result = self._run(eq_type, exprs, unknowns, opts)
        result.equation_type = eq_type
        result.stats.setdefault('elapsed', time.time() - start_time)
        logger.info(f"Solved {eq_type} in {time.time() - start_time:.3f}s: {result.kind.value}")
        return result
    
    def solve_polynomial_system(
        self,
        equations,
        unknowns: Sequence[Any],
        options: Optional[Union[SolverOptions, Dict[str, Any]]] = None
    ) -> SolverResult:
        """
        Force the Gröbner pipeline, whatever the classification.
        
        Useful to cross-check the linear fast path or to obtain a basis
        for a linear system.
        """
        unknowns = list(unknowns) if isinstance(unknowns, (list, tuple)) else [unknowns]
        try:
            opts = self._resolve_options(options)
            exprs = normalize_equations(equations)
            result = self.system_solver.solve(exprs, unknowns, opts)
        except PolySolveError as e:
            logger.warning(f"Gröbner solve failed: {e}")
            return SolverResult.from_exception(e, unknowns, method=self.system_solver.method)
        except ValueError as e:
            return SolverResult.from_exception(
                DegenerateInputError(str(e), stage="configuration"), unknowns
            )
        return result
    
    def _resolve_options(self, options) -> SolverOptions:
        if options is None:
            return self.options
        if isinstance(options, SolverOptions):
            return options
        return self.options.replace(**options)
    
    def _run(self, eq_type: EquationType, exprs: List[Expr], unknowns: List[Any], opts: SolverOptions) -> SolverResult:
        handler = self._dispatch[eq_type.kind]
        try:
            return handler(exprs, unknowns, opts)
        except PolySolveError as e:
            logger.warning(f"{eq_type} solve failed: {e}")
            return SolverResult.from_exception(e, unknowns)
        except ValueError as e:
            return SolverResult.from_exception(
                DegenerateInputError(str(e), stage="configuration"), unknowns
            )
    
    def _solve_scalar(self, exprs: List[Expr], unknowns: List[Any], opts: SolverOptions) -> SolverResult:
        """Classify and solve a scalar system produced by another branch."""
        eq_type = self.analyzer.analyze(exprs, unknowns)
        if eq_type.kind is EquationKind.MATRIX_EQUATION:
            raise UnsupportedEquationError("Nested matrix equation", stage="dispatch")
        return self._dispatch[eq_type.kind](exprs, unknowns, opts)
    
    def _solve_linear(self, exprs: List[Expr], unknowns: List[Any], opts: SolverOptions) -> SolverResult:
        if opts.linear_fast_path:
            return self.linear_solver.solve(exprs, unknowns, opts)
        return self.system_solver.solve(exprs, unknowns, opts)
    
    def _unclassifiable(self, exprs: List[Expr], unknowns: List[Any], opts: SolverOptions) -> SolverResult:
        raise UnsupportedEquationError(
            f"Equation structure is not supported: {[str(e) for e in exprs]}",
            stage="analysis"
        )


def solve(
    equations,
    unknowns: Sequence[Any],
    options: Optional[Union[SolverOptions, Dict[str, Any]]] = None
) -> SolverResult:
    """Solve with a fresh SmartSolver."""
    return SmartSolver().solve(equations, unknowns, options)
