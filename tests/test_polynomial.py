"""
Tests for sparse polynomials and expression conversion.
"""

import pytest
import sympy as sp
from sympy import symbols, Rational, sin, sqrt

import sys
sys.path.insert(0, '..')

from polysolver.groebner.polynomial import Polynomial
from polysolver.groebner.monomial_order import MonomialOrder
from polysolver.groebner.conversion import (
    polynomial_from_expr, polynomials_from_exprs, non_polynomial_reason
)
from polysolver.errors import (
    EmptyPolynomialError, DegenerateInputError, NotPolynomialError, ErrorKind
)


class TestPolynomial:
    """Tests for Polynomial arithmetic and invariants."""
    
    @pytest.fixture
    def xy(self):
        return symbols('x y')
    
    def test_from_expr_terms(self, xy):
        x, y = xy
        p = Polynomial.from_expr(x**2 + 2*x*y - 3, (x, y))
        
        assert dict(p.terms()) == {(2, 0): 1, (1, 1): 2, (0, 0): -3}
        assert len(p) == 3
    
    def test_zero_coefficients_never_stored(self, xy):
        p = Polynomial({(1, 0): 0, (0, 1): 5}, xy)
        
        assert len(p) == 1
        assert p.coefficient((1, 0)) == 0
    
    def test_subtraction_to_zero(self, xy):
        x, y = xy
        p = Polynomial.from_expr(x*y + y**3 - 7, (x, y))
        diff = p - p
        
        assert diff.is_zero
        assert len(diff) == 0
        assert diff == Polynomial.zero((x, y))
    
    def test_add_cancels_terms(self, xy):
        x, y = xy
        p = Polynomial.from_expr(x + y, (x, y))
        q = Polynomial.from_expr(x - y, (x, y))
        
        assert dict((p + q).terms()) == {(1, 0): 2}
    
    def test_multiplication(self, xy):
        x, y = xy
        p = Polynomial.from_expr(x + y, (x, y))
        q = Polynomial.from_expr(x - y, (x, y))
        
        assert p * q == Polynomial.from_expr(x**2 - y**2, (x, y))
    
    def test_scalar_multiplication(self, xy):
        x, y = xy
        p = Polynomial.from_expr(2*x + 4, (x, y))
        
        assert p * Rational(1, 2) == Polynomial.from_expr(x + 2, (x, y))
        assert 3 * p == Polynomial.from_expr(6*x + 12, (x, y))
        assert p.scale(0).is_zero
    
    def test_leading_term_depends_on_order(self):
        x, y, z = symbols('x y z')
        p = Polynomial.from_expr(x*z + y**2, (x, y, z))
        
        assert p.leading_monomial(MonomialOrder.LEX) == (1, 0, 1)
        assert p.leading_monomial(MonomialOrder.GREVLEX) == (0, 2, 0)
        assert p.leading_term(MonomialOrder.GREVLEX) == (1, (0, 2, 0))
    
    def test_leading_term_of_zero_raises(self, xy):
        zero = Polynomial.zero(xy)
        
        with pytest.raises(EmptyPolynomialError) as exc_info:
            zero.leading_term(MonomialOrder.LEX)
        assert exc_info.value.kind is ErrorKind.EMPTY_POLYNOMIAL
    
    def test_monic(self, xy):
        x, y = xy
        p = Polynomial.from_expr(3*x**2 - 6*y, (x, y))
        
        assert p.monic(MonomialOrder.LEX) == Polynomial.from_expr(x**2 - 2*y, (x, y))
    
    def test_degrees_and_variables(self):
        x, y, z = symbols('x y z')
        p = Polynomial.from_expr(x**3*y + z**2, (x, y, z))
        
        assert p.total_degree() == 4
        assert p.degree(z) == 2
        assert p.used_variables() == (x, y, z)
        assert Polynomial.from_expr(y - 1, (x, y, z)).used_variables() == (y,)
        assert Polynomial.zero((x, y, z)).total_degree() == -1
    
    def test_constant(self, xy):
        c = Polynomial.constant(5, xy)
        
        assert c.is_constant
        assert not c.is_zero
        assert not Polynomial.from_expr(xy[0], xy).is_constant
    
    def test_float_coefficients_become_rational(self, xy):
        x, y = xy
        p = Polynomial.from_expr(0.5*x + 0.25, (x, y))
        
        assert p.coefficient((1, 0)) == Rational(1, 2)
        assert p.coefficient((0, 0)) == Rational(1, 4)
    
    def test_to_expr(self, xy):
        x, y = xy
        expr = 3*x**2*y - Rational(1, 2)*y + 1
        
        assert sp.expand(Polynomial.from_expr(expr, (x, y)).to_expr() - expr) == 0
    
    def test_ring_mismatch(self):
        x, y, z = symbols('x y z')
        p = Polynomial.from_expr(x, (x, y))
        q = Polynomial.from_expr(x, (x, z))
        
        with pytest.raises(ValueError):
            p + q
    
    def test_hash_and_equality(self, xy):
        x, y = xy
        p = Polynomial.from_expr(x + y, (x, y))
        q = Polynomial.from_expr(y + x, (x, y))
        
        assert p == q
        assert len({p, q}) == 1


class TestConversion:
    """Tests for expression → Polynomial extraction."""
    
    @pytest.fixture
    def xy(self):
        return symbols('x y')
    
    def test_polynomial_expression(self, xy):
        x, y = xy
        p = polynomial_from_expr((x + y)**2 - 1, (x, y))
        
        assert p.total_degree() == 2
        assert len(p) == 4
    
    @pytest.mark.parametrize("make_expr,reason", [
        (lambda x, y: 1/x + y, "denominator"),
        (lambda x, y: sin(x) - y, "function"),
        (lambda x, y: sqrt(x) - y, "power"),
        (lambda x, y: 2**x - y, "power"),
    ])
    def test_non_polynomial_reasons(self, xy, make_expr, reason):
        x, y = xy
        assert non_polynomial_reason(make_expr(x, y), (x, y)) == reason
    
    def test_not_polynomial_carries_context(self, xy):
        x, y = xy
        
        with pytest.raises(NotPolynomialError) as exc_info:
            polynomials_from_exprs([x - y, y/x - 1], (x, y))
        
        assert exc_info.value.equation_index == 1
        assert exc_info.value.stage == "conversion"
    
    def test_parameters_rejected(self, xy):
        x, y = xy
        a = symbols('a')
        
        with pytest.raises(DegenerateInputError):
            polynomial_from_expr(a*x + y, (x, y))
    
    def test_irrational_coefficient_rejected(self, xy):
        x, y = xy
        
        with pytest.raises(DegenerateInputError):
            polynomial_from_expr(sqrt(2)*x - y, (x, y))
    
    def test_function_of_parameter_only_is_coefficient_problem(self, xy):
        x, y = xy
        a = symbols('a')
        
        assert non_polynomial_reason(sin(a)*x, (x, y)) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
