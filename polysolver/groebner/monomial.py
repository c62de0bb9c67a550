"""
Exponent-vector arithmetic.

A monomial is a tuple of non-negative ints aligned with a ring's
variable tuple.
"""

from typing import Optional, Tuple

Monomial = Tuple[int, ...]


def one(nvars: int) -> Monomial:
    return (0,) * nvars


def mul(m1: Monomial, m2: Monomial) -> Monomial:
    return tuple(a + b for a, b in zip(m1, m2))


def divides(m1: Monomial, m2: Monomial) -> bool:
    """True if m1 divides m2."""
    return all(a <= b for a, b in zip(m1, m2))


def div(m1: Monomial, m2: Monomial) -> Optional[Monomial]:
    """Return m1 / m2, or None when m2 does not divide m1."""
    result = tuple(a - b for a, b in zip(m1, m2))
    if any(e < 0 for e in result):
        return None
    return result


def lcm(m1: Monomial, m2: Monomial) -> Monomial:
    return tuple(max(a, b) for a, b in zip(m1, m2))


def coprime(m1: Monomial, m2: Monomial) -> bool:
    """True when no variable has a positive exponent in both monomials."""
    return not any(a > 0 and b > 0 for a, b in zip(m1, m2))


def total_degree(m: Monomial) -> int:
    return sum(m)


def is_pure_power(m: Monomial, index: int) -> bool:
    """True if m is x_index**k with k > 0."""
    return m[index] > 0 and all(e == 0 for i, e in enumerate(m) if i != index)
