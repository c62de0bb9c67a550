"""
Branch solvers used by the SmartSolver dispatch table.
"""

from .linear import LinearSystemSolver
from .quadratic import QuadraticSolver
from .polynomial import UnivariatePolynomialSolver
from .polynomial_system import GroebnerSystemSolver
from .matrix import MatrixEquationSolver
from .transcendental import TranscendentalSolver

__all__ = [
    "LinearSystemSolver",
    "QuadraticSolver",
    "UnivariatePolynomialSolver",
    "GroebnerSystemSolver",
    "MatrixEquationSolver",
    "TranscendentalSolver",
]
