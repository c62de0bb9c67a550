"""
Matrix Equations
Equations such as ``A*X = B`` or ``X*A = B`` with explicit matrices and
MatrixSymbol unknowns.
"""

from typing import Any, Callable, Dict, List, Sequence
import logging

import sympy as sp
from sympy import Expr

from ..config import SolverOptions
from ..errors import UnsupportedEquationError
from ..results import SolverResult, ResultKind

logger = logging.getLogger(__name__)

ScalarSolve = Callable[[List[Expr], List[Any], SolverOptions], SolverResult]


class MatrixEquationSolver:
    """
    Replaces each MatrixSymbol unknown by a matrix of scalar unknowns,
    expands the equation entry-wise and hands the scalar system to
    ``scalar_solve``. Solutions are packed back into matrices.
    """
    
    method = "matrix"
    
    def __init__(self, scalar_solve: ScalarSolve):
        self.scalar_solve = scalar_solve
    
    def solve(
        self,
        exprs: Sequence[Expr],
        unknowns: Sequence[Any],
        options: SolverOptions
    ) -> SolverResult:
        matrix_unknowns = [u for u in unknowns if isinstance(u, sp.MatrixSymbol)]
        if not matrix_unknowns or len(matrix_unknowns) != len(unknowns):
            raise UnsupportedEquationError(
                "Matrix equations need MatrixSymbol unknowns only",
                stage="dispatch"
            )
        
        entries: Dict[Any, sp.ImmutableMatrix] = {}
        for X in matrix_unknowns:
            entries[X] = sp.ImmutableMatrix(
                X.rows, X.cols, lambda i, j: sp.Symbol(f"{X.name}[{i},{j}]")
            )
        
        scalar_exprs: List[Expr] = []
        for index, e in enumerate(exprs):
            explicit = e.xreplace(entries).doit()
            if isinstance(explicit, sp.MatrixExpr):
                explicit = explicit.as_explicit()
            if explicit.atoms(sp.MatrixSymbol):
                raise UnsupportedEquationError(
                    f"Matrix equation {e} involves symbolic matrices that are not unknowns",
                    stage="dispatch",
                    equation_index=index
                )
            if isinstance(explicit, sp.MatrixBase):
                scalar_exprs.extend(explicit)
            else:
                scalar_exprs.append(explicit)
        
        scalar_unknowns = [s for X in matrix_unknowns for s in entries[X]]
        logger.debug(
            f"Matrix equation expanded to {len(scalar_exprs)} scalar equations "
            f"in {len(scalar_unknowns)} unknowns"
        )
        scalar = self.scalar_solve(scalar_exprs, scalar_unknowns, options)
        
        if scalar.kind is not ResultKind.EXACT:
            scalar.unknowns = tuple(unknowns)
            scalar.method = f"{self.method}/{scalar.method}"
            return scalar
        
        packed = []
        for values in scalar.as_dicts():
            packed.append(tuple(
                entries[X].xreplace(values) for X in matrix_unknowns
            ))
        return SolverResult.exact(
            packed, unknowns, method=f"{self.method}/{scalar.method}", basis=scalar.basis
        )
