"""
PolySolver
Gröbner-basis polynomial system solving with equation classification
and dispatch.
"""

import logging

from .errors import (
    ErrorKind,
    PolySolveError,
    NotPolynomialError,
    ResourceExceededError,
    DegenerateInputError,
    EmptyPolynomialError,
    UnsupportedEquationError,
)
from .groebner import (
    MonomialOrder,
    Ordering,
    Polynomial,
    GroebnerBasis,
    BuchbergerEngine,
    groebner,
    s_polynomial,
    reduce,
    divide,
)
from .config import SolverOptions
from .results import SolverResult, ResultKind
from .analyzer import EquationAnalyzer, EquationType, EquationKind, classify
from .extraction import SolutionExtractor
from .roots import find_roots
from .smart_solver import SmartSolver, solve

__version__ = "1.0.0"
__author__ = "PolySolver Team"

__all__ = [
    "ErrorKind",
    "PolySolveError",
    "NotPolynomialError",
    "ResourceExceededError",
    "DegenerateInputError",
    "EmptyPolynomialError",
    "UnsupportedEquationError",
    "MonomialOrder",
    "Ordering",
    "Polynomial",
    "GroebnerBasis",
    "BuchbergerEngine",
    "groebner",
    "s_polynomial",
    "reduce",
    "divide",
    "SolverOptions",
    "SolverResult",
    "ResultKind",
    "EquationAnalyzer",
    "EquationType",
    "EquationKind",
    "classify",
    "SolutionExtractor",
    "find_roots",
    "SmartSolver",
    "solve",
    "enable_debug_logging",
]


def enable_debug_logging(level: str = "DEBUG", log_file: str = None):
    """
    Enable debug logging for solver computations.
    
    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Optional file path to write logs (None = console only)
    
    Example:
        >>> import polysolver
        >>> polysolver.enable_debug_logging()  # Console output
        >>> polysolver.enable_debug_logging(log_file="polysolver.log")  # File output
    """
    log_level = getattr(logging, level.upper(), logging.DEBUG)
    
    logger = logging.getLogger("polysolver")
    logger.setLevel(log_level)
    
    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        )
        
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        
        if log_file:
            file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    
    logger.info(f"Debug logging enabled (level={level})")
    return logger
