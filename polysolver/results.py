"""
Solver Results
One tagged result shape shared by every solving branch.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass, field

from .errors import ErrorKind, PolySolveError
from .groebner.basis import GroebnerBasis


class ResultKind(Enum):
    """Outcome of a solve."""
    EXACT = "exact"
    PARTIAL = "partial"
    NO_SOLUTION = "no_solution"
    INFINITE_SOLUTIONS = "infinite_solutions"
    ERROR = "error"


@dataclass
class SolverResult:
    """
    Result of solving an equation or system.
    
    EXACT carries ``solutions`` (tuples ordered like ``unknowns``); PARTIAL
    carries the computed ``basis`` and no solutions; ERROR carries an
    ``error`` kind with message and context.
    """
    
    kind: ResultKind
    unknowns: Tuple[Any, ...] = ()
    solutions: List[Tuple[Any, ...]] = field(default_factory=list)
    basis: Optional[GroebnerBasis] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None
    stage: Optional[str] = None
    equation_index: Optional[int] = None
    equation_type: Optional[Any] = None
    method: str = ""
    stats: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def exact(cls, solutions: Sequence[Sequence[Any]], unknowns: Sequence[Any], method: str = "", **kwargs) -> 'SolverResult':
        return cls(
            kind=ResultKind.EXACT,
            unknowns=tuple(unknowns),
            solutions=[tuple(s) for s in solutions],
            method=method,
            **kwargs
        )
    
    @classmethod
    def partial(cls, basis: GroebnerBasis, unknowns: Sequence[Any], message: Optional[str] = None, **kwargs) -> 'SolverResult':
        return cls(
            kind=ResultKind.PARTIAL,
            unknowns=tuple(unknowns),
            basis=basis,
            message=message,
            **kwargs
        )
    
    @classmethod
    def no_solution(cls, unknowns: Sequence[Any], message: Optional[str] = None, **kwargs) -> 'SolverResult':
        return cls(kind=ResultKind.NO_SOLUTION, unknowns=tuple(unknowns), message=message, **kwargs)
    
    @classmethod
    def infinite_solutions(cls, unknowns: Sequence[Any], message: Optional[str] = None, **kwargs) -> 'SolverResult':
        return cls(kind=ResultKind.INFINITE_SOLUTIONS, unknowns=tuple(unknowns), message=message, **kwargs)
    
    @classmethod
    def failure(
        cls,
        error: ErrorKind,
        message: str,
        unknowns: Sequence[Any] = (),
        stage: Optional[str] = None,
        equation_index: Optional[int] = None,
        **kwargs
    ) -> 'SolverResult':
        return cls(
            kind=ResultKind.ERROR,
            unknowns=tuple(unknowns),
            error=error,
            message=message,
            stage=stage,
            equation_index=equation_index,
            **kwargs
        )
    
    @classmethod
    def from_exception(cls, exc: PolySolveError, unknowns: Sequence[Any] = (), **kwargs) -> 'SolverResult':
        return cls.failure(
            exc.kind,
            exc.message,
            unknowns=unknowns,
            stage=exc.stage,
            equation_index=exc.equation_index,
            **kwargs
        )
    
    @property
    def is_exact(self) -> bool:
        return self.kind is ResultKind.EXACT
    
    @property
    def is_partial(self) -> bool:
        return self.kind is ResultKind.PARTIAL
    
    @property
    def is_error(self) -> bool:
        return self.kind is ResultKind.ERROR
    
    def solution_count(self) -> Optional[int]:
        """Number of solutions; None when infinite or unknown."""
        if self.kind is ResultKind.EXACT:
            return len(self.solutions)
        if self.kind is ResultKind.NO_SOLUTION:
            return 0
        return None
    
    def as_dicts(self) -> List[Dict[Any, Any]]:
        """Solutions as ``{unknown: value}`` mappings."""
        return [dict(zip(self.unknowns, s)) for s in self.solutions]
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        result = {
            'kind': self.kind.value,
            'unknowns': [str(u) for u in self.unknowns],
            'method': self.method,
        }
        if self.solutions:
            result['solutions'] = [[str(v) for v in s] for s in self.solutions]
        if self.basis is not None:
            result['basis'] = self.basis.to_dict()
        if self.error is not None:
            result['error'] = self.error.value
        if self.message:
            result['message'] = self.message
        if self.stage:
            result['stage'] = self.stage
        if self.equation_index is not None:
            result['equation_index'] = self.equation_index
        if self.equation_type is not None:
            result['equation_type'] = str(self.equation_type)
        if self.stats:
            result['stats'] = dict(self.stats)
        return result
    
    def __repr__(self):
        detail = ""
        if self.kind is ResultKind.EXACT:
            detail = f", solutions={self.solutions}"
        elif self.kind is ResultKind.ERROR:
            detail = f", error={self.error.value}, message={self.message!r}"
        elif self.kind is ResultKind.PARTIAL and self.basis is not None:
            detail = f", basis={self.basis.to_exprs()}"
        return f"SolverResult({self.kind.value}{detail})"
