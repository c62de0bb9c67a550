"""
Sparse Multivariate Polynomials
Canonical map from exponent vectors to exact rational coefficients.
"""

from typing import Dict, Iterable, Iterator, Mapping, Sequence, Tuple

import sympy as sp
from sympy import Symbol, Expr, S, Rational

from . import monomial as mono
from .monomial import Monomial
from .monomial_order import MonomialOrder
from ..errors import EmptyPolynomialError, DegenerateInputError


def _as_coefficient(value) -> Expr:
    """Convert a number to an exact SymPy rational."""
    coeff = sp.sympify(value)
    if isinstance(coeff, sp.Float):
        coeff = sp.nsimplify(coeff, rational=True)
    if not coeff.is_Rational:
        raise DegenerateInputError(
            f"Coefficient {coeff} is not an exact rational number",
            stage="conversion"
        )
    return coeff


class Polynomial:
    """
    Immutable sparse polynomial over the rationals.
    
    Invariant: no stored coefficient is zero; the zero polynomial has no
    terms. Exponent vectors are aligned with ``variables``, whose order is
    the variable priority used by every monomial order.
    
    Example:
        >>> x, y = symbols('x y')
        >>> p = Polynomial.from_expr(x**2 + y - 1, (x, y))
        >>> p.leading_monomial(MonomialOrder.LEX)
        (2, 0)
    """
    
    __slots__ = ("variables", "_terms")
    
    def __init__(self, terms: Mapping[Monomial, object], variables: Sequence[Symbol]):
        self.variables: Tuple[Symbol, ...] = tuple(variables)
        nvars = len(self.variables)
        clean: Dict[Monomial, Expr] = {}
        for m, c in terms.items():
            m = tuple(int(e) for e in m)
            if len(m) != nvars:
                raise ValueError(f"Monomial {m} does not match {nvars} variables")
            if any(e < 0 for e in m):
                raise ValueError(f"Negative exponent in monomial {m}")
            c = _as_coefficient(c)
            if c != 0:
                clean[m] = c
        self._terms = clean
    
    @classmethod
    def _raw(cls, terms: Dict[Monomial, Expr], variables: Tuple[Symbol, ...]) -> 'Polynomial':
        # Trusted constructor: terms already canonical
        poly = cls.__new__(cls)
        poly.variables = variables
        poly._terms = terms
        return poly
    
    @classmethod
    def zero(cls, variables: Sequence[Symbol]) -> 'Polynomial':
        return cls._raw({}, tuple(variables))
    
    @classmethod
    def constant(cls, value, variables: Sequence[Symbol]) -> 'Polynomial':
        variables = tuple(variables)
        return cls({mono.one(len(variables)): value}, variables)
    
    @classmethod
    def from_expr(cls, expr: Expr, variables: Sequence[Symbol]) -> 'Polynomial':
        """
        Build a polynomial from a SymPy expression that is already known
        to be polynomial in ``variables``.
        
        Raises:
            DegenerateInputError: if a coefficient is not an exact rational
        """
        variables = tuple(variables)
        expr = sp.sympify(expr)
        stray = expr.free_symbols - set(variables)
        if stray:
            names = ", ".join(sorted(str(s) for s in stray))
            raise DegenerateInputError(
                f"Symbolic coefficients ({names}) are not supported by the Gröbner kernel",
                stage="conversion"
            )
        poly = sp.Poly(expr, *variables)
        return cls(dict(poly.terms()), variables)
    
    # ----- inspection -------------------------------------------------
    
    @property
    def nvars(self) -> int:
        return len(self.variables)
    
    @property
    def is_zero(self) -> bool:
        return not self._terms
    
    @property
    def is_constant(self) -> bool:
        """True for nonzero constants and for the zero polynomial."""
        return all(not any(m) for m in self._terms)
    
    def terms(self) -> Iterator[Tuple[Monomial, Expr]]:
        return iter(self._terms.items())
    
    def monomials(self) -> Iterable[Monomial]:
        return self._terms.keys()
    
    def coefficient(self, m: Monomial) -> Expr:
        return self._terms.get(tuple(m), S.Zero)
    
    def __len__(self) -> int:
        return len(self._terms)
    
    def total_degree(self) -> int:
        """Total degree; -1 for the zero polynomial."""
        if not self._terms:
            return -1
        return max(mono.total_degree(m) for m in self._terms)
    
    def degree(self, var: Symbol) -> int:
        """Degree in one variable; -1 for the zero polynomial."""
        if not self._terms:
            return -1
        idx = self.variables.index(var)
        return max(m[idx] for m in self._terms)
    
    def used_variables(self) -> Tuple[Symbol, ...]:
        """Variables that occur with a positive exponent."""
        return tuple(
            v for i, v in enumerate(self.variables)
            if any(m[i] > 0 for m in self._terms)
        )
    
    def leading_monomial(self, order: MonomialOrder) -> Monomial:
        if not self._terms:
            raise EmptyPolynomialError("Zero polynomial has no leading term")
        return order.max(self._terms)
    
    def leading_coefficient(self, order: MonomialOrder) -> Expr:
        return self._terms[self.leading_monomial(order)]
    
    def leading_term(self, order: MonomialOrder) -> Tuple[Expr, Monomial]:
        """Return (coefficient, monomial) of the largest term."""
        m = self.leading_monomial(order)
        return self._terms[m], m
    
    def sorted_terms(self, order: MonomialOrder) -> list:
        """Terms from largest to smallest monomial."""
        return sorted(self._terms.items(), key=lambda t: order.key(t[0]), reverse=True)
    
    # ----- arithmetic -------------------------------------------------
    
    def _check_ring(self, other: 'Polynomial') -> None:
        if self.variables != other.variables:
            raise ValueError(
                f"Polynomials over different variables: {self.variables} vs {other.variables}"
            )
    
    def __add__(self, other: 'Polynomial') -> 'Polynomial':
        self._check_ring(other)
        terms = dict(self._terms)
        for m, c in other._terms.items():
            total = terms.get(m, S.Zero) + c
            if total == 0:
                terms.pop(m, None)
            else:
                terms[m] = total
        return Polynomial._raw(terms, self.variables)
    
    def __neg__(self) -> 'Polynomial':
        return Polynomial._raw({m: -c for m, c in self._terms.items()}, self.variables)
    
    def __sub__(self, other: 'Polynomial') -> 'Polynomial':
        self._check_ring(other)
        terms = dict(self._terms)
        for m, c in other._terms.items():
            total = terms.get(m, S.Zero) - c
            if total == 0:
                terms.pop(m, None)
            else:
                terms[m] = total
        return Polynomial._raw(terms, self.variables)
    
    def scale(self, factor) -> 'Polynomial':
        """Multiply every coefficient by a rational scalar."""
        factor = _as_coefficient(factor)
        if factor == 0:
            return Polynomial.zero(self.variables)
        return Polynomial._raw({m: c * factor for m, c in self._terms.items()}, self.variables)
    
    def mul_term(self, coeff, m: Monomial) -> 'Polynomial':
        """Multiply by the single term ``coeff * m``."""
        coeff = _as_coefficient(coeff)
        if coeff == 0:
            return Polynomial.zero(self.variables)
        return Polynomial._raw(
            {mono.mul(k, m): c * coeff for k, c in self._terms.items()},
            self.variables
        )
    
    def __mul__(self, other) -> 'Polynomial':
        if not isinstance(other, Polynomial):
            return self.scale(other)
        self._check_ring(other)
        terms: Dict[Monomial, Expr] = {}
        for m1, c1 in self._terms.items():
            for m2, c2 in other._terms.items():
                m = mono.mul(m1, m2)
                terms[m] = terms.get(m, S.Zero) + c1 * c2
        return Polynomial._raw({m: c for m, c in terms.items() if c != 0}, self.variables)
    
    def __rmul__(self, other) -> 'Polynomial':
        return self.scale(other)
    
    def monic(self, order: MonomialOrder) -> 'Polynomial':
        """Scale so the leading coefficient is 1 (zero stays zero)."""
        if not self._terms:
            return self
        return self.scale(Rational(1) / self.leading_coefficient(order))
    
    # ----- conversion -------------------------------------------------
    
    def to_expr(self) -> Expr:
        """Convert back to a SymPy expression."""
        return sp.Add(*[
            c * sp.Mul(*[v**e for v, e in zip(self.variables, m) if e])
            for m, c in self._terms.items()
        ])
    
    def _key(self) -> frozenset:
        return frozenset(self._terms.items())
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.variables == other.variables and self._terms == other._terms
    
    def __hash__(self) -> int:
        return hash((self.variables, self._key()))
    
    def __repr__(self) -> str:
        return f"Polynomial({self.to_expr()}, vars={list(self.variables)})"
    
    def __str__(self) -> str:
        return str(self.to_expr())
