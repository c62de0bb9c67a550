"""
Error Taxonomy
Exceptions raised by the solving kernel and the kinds they map to.

Mathematical outcomes (inconsistent or underdetermined systems) are not
errors: they are reported as ``SolverResult`` variants.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure a solve can report."""
    NOT_POLYNOMIAL = "not_polynomial"
    RESOURCE_EXCEEDED = "resource_exceeded"
    DEGENERATE_INPUT = "degenerate_input"
    EMPTY_POLYNOMIAL = "empty_polynomial"
    UNSUPPORTED = "unsupported"


class PolySolveError(Exception):
    """
    Base class for solver failures.
    
    Attributes:
        kind: The ErrorKind of this failure
        stage: Pipeline stage that raised (e.g. "conversion", "buchberger")
        equation_index: Index of the offending equation, if any
    """
    
    kind = ErrorKind.DEGENERATE_INPUT
    
    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        equation_index: Optional[int] = None
    ):
        self.message = message
        self.stage = stage
        self.equation_index = equation_index
        super().__init__(self._format())
    
    def _format(self) -> str:
        context = []
        if self.stage:
            context.append(f"stage={self.stage}")
        if self.equation_index is not None:
            context.append(f"equation={self.equation_index}")
        if context:
            return f"{self.message} ({', '.join(context)})"
        return self.message


class NotPolynomialError(PolySolveError):
    """An expression has non-polynomial structure in the unknowns."""
    kind = ErrorKind.NOT_POLYNOMIAL


class ResourceExceededError(PolySolveError):
    """A configured iteration, basis-size or time budget was exhausted."""
    kind = ErrorKind.RESOURCE_EXCEEDED


class DegenerateInputError(PolySolveError):
    """Input that cannot be solved as given (no unknowns, bad coefficients, ...)."""
    kind = ErrorKind.DEGENERATE_INPUT


class EmptyPolynomialError(PolySolveError):
    """Leading-term access on the zero polynomial."""
    kind = ErrorKind.EMPTY_POLYNOMIAL


class UnsupportedEquationError(PolySolveError):
    """The equation class has no solver in this kernel."""
    kind = ErrorKind.UNSUPPORTED
