"""
Monomial Orderings
Total orders on exponent vectors used by the Gröbner basis machinery.

Exponent vectors are aligned with the ring's variable tuple, which is
also the variable priority (first variable is the largest).
"""

from enum import Enum
from typing import Tuple

from .monomial import Monomial


class Ordering(Enum):
    """Outcome of a monomial comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class MonomialOrder(Enum):
    """
    Standard monomial orders.
    
    LEX: first differing exponent decides.
    GRLEX: total degree, ties broken by LEX.
    GREVLEX: total degree; on ties, scan variables from the lowest
        priority upward and the monomial with the SMALLER exponent at
        the first difference is the greater one.
    """
    LEX = "lex"
    GRLEX = "grlex"
    GREVLEX = "grevlex"
    
    @classmethod
    def from_name(cls, name) -> 'MonomialOrder':
        """Resolve an order from its name ('lex', 'grlex', 'grevlex')."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(o.value for o in cls)
            raise ValueError(f"Unknown monomial order '{name}'. Expected one of: {valid}")
    
    def key(self, m: Monomial) -> Tuple:
        """Sort key: ``key(a) < key(b)`` iff a < b under this order."""
        if self is MonomialOrder.LEX:
            return tuple(m)
        if self is MonomialOrder.GRLEX:
            return (sum(m), tuple(m))
        # Negated reversed exponents: a smaller exponent in the last
        # differing variable yields the larger key.
        return (sum(m), tuple(-e for e in reversed(m)))
    
    def compare(self, m1: Monomial, m2: Monomial) -> Ordering:
        """Compare two monomials of equal length."""
        if len(m1) != len(m2):
            raise ValueError(f"Monomials over different rings: {m1} vs {m2}")
        k1, k2 = self.key(m1), self.key(m2)
        if k1 > k2:
            return Ordering.GREATER
        if k1 < k2:
            return Ordering.LESS
        return Ordering.EQUAL
    
    def max(self, monomials) -> Monomial:
        """Largest monomial of a non-empty iterable."""
        return max(monomials, key=self.key)
    
    @property
    def is_elimination(self) -> bool:
        """Whether bases in this order can be back-substituted variable by variable."""
        return self is MonomialOrder.LEX
