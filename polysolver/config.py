"""
Solver Configuration
Options shared by the dispatcher, the Buchberger engine and the extractor.
"""

from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, fields, replace as dc_replace

from .groebner.monomial_order import MonomialOrder
from .groebner.buchberger import PAIR_SELECTIONS


@dataclass
class SolverOptions:
    """
    Options for one ``solve`` call.
    
    Attributes:
        monomial_order: Order of the Gröbner basis ('lex', 'grlex', 'grevlex')
        variable_priority: Unknowns from highest to lowest priority
            (default: the order the unknowns were given in)
        extract_solutions: Back-substitute roots; False returns PARTIAL
        max_basis_size: Abort when the basis grows beyond this size
        max_iterations: Abort after this many treated pairs
        timeout: Optional wall-clock budget for each Buchberger run and for
            solution extraction (seconds)
        use_coprime_criterion: Buchberger's first criterion
        use_chain_criterion: Buchberger's second (chain) criterion
        pair_selection: 'normal' or 'fifo'
        workers: Threads for S-polynomial batches
        real_only: Discard non-real roots
        root_tolerance: Tolerance for numeric roots and zero checks
        linear_fast_path: Solve linear systems by elimination instead of Gröbner
    """
    
    monomial_order: MonomialOrder = MonomialOrder.LEX
    variable_priority: Optional[List[Any]] = None
    extract_solutions: bool = True
    max_basis_size: int = 1000
    max_iterations: int = 10000
    timeout: Optional[float] = None
    use_coprime_criterion: bool = True
    use_chain_criterion: bool = True
    pair_selection: str = "normal"
    workers: int = 1
    real_only: bool = False
    root_tolerance: float = 1e-10
    linear_fast_path: bool = True
    
    def __post_init__(self):
        self.monomial_order = MonomialOrder.from_name(self.monomial_order)
        if self.variable_priority is not None:
            self.variable_priority = list(self.variable_priority)
            if len(set(self.variable_priority)) != len(self.variable_priority):
                raise ValueError("variable_priority contains duplicates")
        if self.max_basis_size < 1:
            raise ValueError(f"max_basis_size must be positive, got {self.max_basis_size}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.pair_selection not in PAIR_SELECTIONS:
            raise ValueError(
                f"pair_selection must be one of {PAIR_SELECTIONS}, got '{self.pair_selection}'"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.root_tolerance <= 0:
            raise ValueError(f"root_tolerance must be positive, got {self.root_tolerance}")
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SolverOptions':
        """Build options from a plain mapping; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown solver options: {', '.join(sorted(unknown))}")
        return cls(**data)
    
    def replace(self, **changes) -> 'SolverOptions':
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown solver options: {', '.join(sorted(unknown))}")
        return dc_replace(self, **changes)
    
    def ordered_unknowns(self, unknowns: Sequence[Any]) -> List[Any]:
        """
        Unknowns in priority order.
        
        Raises:
            ValueError: if variable_priority is not a permutation of unknowns
        """
        if self.variable_priority is None:
            return list(unknowns)
        if set(self.variable_priority) != set(unknowns) or len(self.variable_priority) != len(unknowns):
            raise ValueError(
                f"variable_priority {self.variable_priority} is not a permutation of {list(unknowns)}"
            )
        return list(self.variable_priority)
    
    def engine_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``BuchbergerEngine``."""
        return {
            'max_iterations': self.max_iterations,
            'max_basis_size': self.max_basis_size,
            'timeout': self.timeout,
            'use_coprime_criterion': self.use_coprime_criterion,
            'use_chain_criterion': self.use_chain_criterion,
            'pair_selection': self.pair_selection,
            'workers': self.workers,
        }
    
    def to_dict(self) -> Dict[str, Any]:
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        result['monomial_order'] = self.monomial_order.value
        if self.variable_priority is not None:
            result['variable_priority'] = [str(v) for v in self.variable_priority]
        return result
