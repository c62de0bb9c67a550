"""
Gröbner Basis Value Object
Result of a Buchberger run plus the queries it supports.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass

import sympy as sp
from sympy import Symbol, Expr

from . import monomial as mono
from .monomial import Monomial
from .monomial_order import MonomialOrder
from .polynomial import Polynomial
from .reduction import reduce as reduce_poly


@dataclass
class BuchbergerStats:
    """Counters collected during one Buchberger run."""
    iterations: int = 0
    reductions: int = 0
    zero_reductions: int = 0
    coprime_skips: int = 0
    chain_skips: int = 0
    peak_basis_size: int = 0
    elapsed: float = 0.0
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'iterations': self.iterations,
            'reductions': self.reductions,
            'zero_reductions': self.zero_reductions,
            'coprime_skips': self.coprime_skips,
            'chain_skips': self.chain_skips,
            'peak_basis_size': self.peak_basis_size,
            'elapsed': self.elapsed,
        }


@dataclass
class GroebnerBasis:
    """
    A Gröbner basis of a polynomial ideal.
    
    Attributes:
        generators: Basis polynomials (descending leading monomials when reduced)
        variables: Ring variables in priority order
        order: Monomial order the basis was computed for
        is_reduced: Whether the basis is the canonical reduced basis
        stats: Buchberger counters, when produced by the engine
    """
    
    generators: List[Polynomial]
    variables: Tuple[Symbol, ...]
    order: MonomialOrder
    is_reduced: bool = False
    stats: Optional[BuchbergerStats] = None
    
    def __len__(self) -> int:
        return len(self.generators)
    
    def __iter__(self) -> Iterator[Polynomial]:
        return iter(self.generators)
    
    def __getitem__(self, index: int) -> Polynomial:
        return self.generators[index]
    
    def _as_polynomial(self, poly: Union[Polynomial, Expr]) -> Polynomial:
        if isinstance(poly, Polynomial):
            return poly
        return Polynomial.from_expr(sp.expand(poly), self.variables)
    
    def reduce(self, poly: Union[Polynomial, Expr]) -> Polynomial:
        """Normal form of ``poly`` modulo the basis."""
        return reduce_poly(self._as_polynomial(poly), self.generators, self.order)
    
    def contains(self, poly: Union[Polynomial, Expr]) -> bool:
        """Ideal membership: True iff ``poly`` reduces to zero."""
        return self.reduce(poly).is_zero
    
    def leading_monomials(self) -> List[Monomial]:
        return [g.leading_monomial(self.order) for g in self.generators]
    
    @property
    def is_unit(self) -> bool:
        """True when the ideal is the whole ring (the system is inconsistent)."""
        return any(not g.is_zero and g.is_constant for g in self.generators)
    
    def is_zero_dimensional(self) -> bool:
        """
        True if every variable has a pure power among the leading monomials,
        i.e. the system has finitely many (complex) solutions.
        """
        if self.is_unit:
            return False
        leads = self.leading_monomials()
        return all(
            any(mono.is_pure_power(m, i) for m in leads)
            for i in range(len(self.variables))
        )
    
    def free_variables(self) -> List[Symbol]:
        """Variables with no pure-power leading monomial."""
        leads = self.leading_monomials()
        return [
            v for i, v in enumerate(self.variables)
            if not any(mono.is_pure_power(m, i) for m in leads)
        ]
    
    def to_exprs(self) -> List[Expr]:
        return [g.to_expr() for g in self.generators]
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        result = {
            'generators': [str(e) for e in self.to_exprs()],
            'variables': [str(v) for v in self.variables],
            'order': self.order.value,
            'is_reduced': self.is_reduced,
        }
        if self.stats is not None:
            result['stats'] = self.stats.to_dict()
        return result
    
    def __str__(self) -> str:
        gens = ", ".join(str(e) for e in self.to_exprs())
        return f"GroebnerBasis([{gens}], order={self.order.value})"
