"""
Equation Analyzer
Classifies an equation or system into a single EquationType that the
SmartSolver dispatch table is keyed on.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass
import logging

import sympy as sp
from sympy import Symbol, Expr, S
from sympy.functions.elementary.trigonometric import (
    TrigonometricFunction, InverseTrigonometricFunction
)
from sympy.functions.elementary.hyperbolic import (
    HyperbolicFunction, InverseHyperbolicFunction
)

from .errors import DegenerateInputError
from .groebner.conversion import non_polynomial_reason

logger = logging.getLogger(__name__)

TRANSCENDENTAL_FUNCTIONS = (
    TrigonometricFunction,
    InverseTrigonometricFunction,
    HyperbolicFunction,
    InverseHyperbolicFunction,
    sp.exp,
    sp.log,
    sp.LambertW,
)


class EquationKind(Enum):
    """Classes of equations the solver distinguishes."""
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    POLYNOMIAL = "polynomial"
    POLYNOMIAL_SYSTEM = "polynomial_system"
    MATRIX_EQUATION = "matrix_equation"
    TRANSCENDENTAL = "transcendental"
    UNCLASSIFIABLE = "unclassifiable"


@dataclass(frozen=True)
class EquationType:
    """Classification tag; ``degree`` is the maximal total degree when polynomial."""
    kind: EquationKind
    degree: Optional[int] = None
    
    def __str__(self):
        if self.kind is EquationKind.POLYNOMIAL and self.degree is not None:
            return f"polynomial(degree={self.degree})"
        return self.kind.value


def normalize_equations(equations) -> List[Expr]:
    """
    Bring equations to ``expr = 0`` form.
    
    Accepts a single equation or a sequence; each may be an ``Eq``, an
    expression (meaning ``expr = 0``) or a boolean produced by an
    evaluated ``Eq``.
    
    Raises:
        DegenerateInputError: empty input or an entry that is not an equation
    """
    if isinstance(equations, (list, tuple)):
        items = list(equations)
    else:
        items = [equations]
    if not items:
        raise DegenerateInputError("No equations given", stage="analysis")
    
    exprs = []
    for index, eq in enumerate(items):
        if eq is True or eq is sp.true:
            exprs.append(S.Zero)
            continue
        if eq is False or eq is sp.false:
            exprs.append(S.One)
            continue
        if isinstance(eq, sp.Equality):
            exprs.append(eq.lhs - eq.rhs)
            continue
        try:
            expr = sp.sympify(eq)
        except (sp.SympifyError, TypeError) as e:
            raise DegenerateInputError(
                f"Cannot interpret {eq!r} as an equation: {e}",
                stage="analysis",
                equation_index=index
            ) from e
        if not isinstance(expr, (Expr, sp.MatrixExpr)):
            raise DegenerateInputError(
                f"{eq!r} is not an equation or expression",
                stage="analysis",
                equation_index=index
            )
        exprs.append(expr)
    return exprs


class EquationAnalyzer:
    """
    Pure, deterministic classifier.
    
    Checks are applied in order: matrix symbols, transcendental
    dependence on an unknown, other non-polynomial structure, then degree
    counting over the unknowns.
    
    Example:
        >>> x, y = symbols('x y')
        >>> EquationAnalyzer().analyze([x**2 + y**2 - 1, x - y], [x, y])
        EquationType(kind=<EquationKind.POLYNOMIAL_SYSTEM: 'polynomial_system'>, degree=2)
    """
    
    def analyze(self, equations, unknowns: Sequence[Any]) -> EquationType:
        exprs = normalize_equations(equations)
        unknowns = list(unknowns)
        if not unknowns:
            raise DegenerateInputError("No unknowns given", stage="analysis")
        
        result = self._classify(exprs, unknowns)
        logger.debug(f"Classified {len(exprs)} equation(s) in {unknowns} as {result}")
        return result
    
    def _classify(self, exprs: List[Expr], unknowns: List[Any]) -> EquationType:
        if self.is_matrix_equation(exprs, unknowns):
            return EquationType(EquationKind.MATRIX_EQUATION)
        
        if any(self.has_transcendental(e, unknowns) for e in exprs):
            return EquationType(EquationKind.TRANSCENDENTAL)
        
        for e in exprs:
            reason = non_polynomial_reason(e, unknowns)
            if reason is not None:
                logger.debug(f"Unclassifiable equation {e} = 0 ({reason})")
                return EquationType(EquationKind.UNCLASSIFIABLE)
        
        degree = max(self.total_degree(e, unknowns) for e in exprs)
        if degree <= 1:
            return EquationType(EquationKind.LINEAR, degree)
        if len(exprs) == 1 and len(unknowns) == 1:
            degree = self.degree_per_unknown(exprs, unknowns)[unknowns[0]]
            if degree == 2:
                return EquationType(EquationKind.QUADRATIC, 2)
            return EquationType(EquationKind.POLYNOMIAL, degree)
        return EquationType(EquationKind.POLYNOMIAL_SYSTEM, degree)
    
    @staticmethod
    def is_matrix_equation(exprs: Sequence[Expr], unknowns: Sequence[Any]) -> bool:
        if any(isinstance(u, sp.MatrixSymbol) for u in unknowns):
            return True
        return any(
            isinstance(e, sp.MatrixExpr) or bool(e.atoms(sp.MatrixSymbol))
            for e in exprs
        )
    
    @staticmethod
    def has_transcendental(expr: Expr, unknowns: Sequence[Any]) -> bool:
        """True if a transcendental function or exponent depends on an unknown."""
        unknown_set = set(unknowns)
        for node in sp.preorder_traversal(expr):
            if not (node.free_symbols & unknown_set):
                continue
            if isinstance(node, TRANSCENDENTAL_FUNCTIONS):
                return True
            if isinstance(node, sp.Pow) and node.exp.free_symbols & unknown_set:
                return True
        return False
    
    @staticmethod
    def total_degree(expr: Expr, unknowns: Sequence[Symbol]) -> int:
        """Total degree in the unknowns of a polynomial expression (0 for constants)."""
        expanded = sp.expand(expr)
        if not (expanded.free_symbols & set(unknowns)):
            return 0
        return int(sp.Poly(expanded, *unknowns).total_degree())
    
    @staticmethod
    def degree_per_unknown(exprs: Sequence[Expr], unknowns: Sequence[Symbol]) -> Dict[Symbol, int]:
        """Highest power of each unknown over all equations."""
        degrees = {u: 0 for u in unknowns}
        for e in exprs:
            expanded = sp.expand(e)
            for u in unknowns:
                if expanded.has(u):
                    degrees[u] = max(degrees[u], int(sp.degree(expanded, u)))
        return degrees


def classify(equations, unknowns: Sequence[Any]) -> EquationType:
    """Module-level shortcut for ``EquationAnalyzer().analyze``."""
    return EquationAnalyzer().analyze(equations, unknowns)
