"""
Tests for the Buchberger engine and the GroebnerBasis value object.
"""

import pytest
import sympy as sp
from sympy import symbols, Rational

import sys
sys.path.insert(0, '..')

from polysolver.groebner import (
    BuchbergerEngine,
    GroebnerBasis,
    MonomialOrder,
    Polynomial,
    groebner,
    interreduce,
    minimalize,
    s_polynomial,
)
from polysolver.groebner.reduction import reduce
from polysolver.errors import DegenerateInputError, ResourceExceededError, ErrorKind


def polys(exprs, variables):
    return [Polynomial.from_expr(e, variables) for e in exprs]


@pytest.fixture
def circle_line():
    """x² + y² = 1 intersected with x = y."""
    x, y = symbols('x y')
    return polys([x**2 + y**2 - 1, x - y], (x, y)), (x, y)


@pytest.fixture
def clo_system():
    """x² + y + z = 1, x + y² + z = 1, x + y + z² = 1."""
    x, y, z = symbols('x y z')
    exprs = [x**2 + y + z - 1, x + y**2 + z - 1, x + y + z**2 - 1]
    return polys(exprs, (x, y, z)), (x, y, z)


@pytest.fixture
def twisted_cubic():
    """Parametrized curve (t, t², t³) as the ideal ⟨y − x², z − x³⟩."""
    x, y, z = symbols('x y z')
    return polys([y - x**2, z - x**3], (x, y, z)), (x, y, z)


def assert_groebner_property(basis: GroebnerBasis):
    """Every S-polynomial of the basis reduces to zero."""
    gens = basis.generators
    for i in range(len(gens)):
        for j in range(i + 1, len(gens)):
            s = s_polynomial(gens[i], gens[j], basis.order)
            assert reduce(s, gens, basis.order).is_zero


class TestBuchbergerBasics:
    
    def test_circle_line_reduced_basis(self, circle_line):
        generators, (x, y) = circle_line
        
        basis = groebner(generators, MonomialOrder.LEX)
        
        assert basis.generators == polys([x - y, y**2 - Rational(1, 2)], (x, y))
        assert basis.is_reduced
        assert basis.order is MonomialOrder.LEX
    
    def test_circle_line_stats(self, circle_line):
        generators, _ = circle_line
        
        basis = BuchbergerEngine().compute(generators)
        
        assert basis.stats.iterations == 3
        assert basis.stats.coprime_skips == 2
        assert basis.stats.reductions == 1
        assert basis.stats.peak_basis_size == 3
    
    def test_clo_system_lex(self, clo_system):
        generators, (x, y, z) = clo_system
        
        basis = groebner(generators, MonomialOrder.LEX)
        
        assert len(basis) == 4
        assert basis.generators[-1] == Polynomial.from_expr(
            z**6 - 4*z**4 + 4*z**3 - z**2, (x, y, z))
        assert basis.is_zero_dimensional()
    
    def test_twisted_cubic_grevlex(self, twisted_cubic):
        generators, (x, y, z) = twisted_cubic
        
        basis = groebner(generators, MonomialOrder.GREVLEX)
        
        expected = polys([x**2 - y, x*y - z, y**2 - x*z], (x, y, z))
        assert basis.generators == expected
        assert not basis.is_zero_dimensional()
    
    @pytest.mark.parametrize("order", list(MonomialOrder))
    def test_reduced_basis_is_monic(self, clo_system, order):
        generators, _ = clo_system
        
        basis = groebner(generators, order)
        
        for g in basis:
            assert g.leading_coefficient(order) == 1


class TestBasisProperties:
    
    @pytest.mark.parametrize("system", ["circle_line", "clo_system", "twisted_cubic"])
    @pytest.mark.parametrize("order", list(MonomialOrder))
    def test_generators_belong_to_ideal(self, request, system, order):
        generators, _ = request.getfixturevalue(system)
        
        basis = groebner(generators, order)
        
        for g in generators:
            assert basis.contains(g)
    
    @pytest.mark.parametrize("system", ["circle_line", "clo_system", "twisted_cubic"])
    @pytest.mark.parametrize("coprime,chain", [(True, True), (True, False), (False, True), (False, False)])
    def test_s_polynomials_reduce_to_zero(self, request, system, coprime, chain):
        generators, _ = request.getfixturevalue(system)
        
        basis = BuchbergerEngine(
            order=MonomialOrder.GREVLEX,
            use_coprime_criterion=coprime,
            use_chain_criterion=chain
        ).compute(generators)
        
        assert_groebner_property(basis)
    
    def test_unreduced_basis_is_groebner(self, clo_system):
        generators, _ = clo_system
        
        basis = BuchbergerEngine().compute(generators, reduced=False)
        
        assert not basis.is_reduced
        assert_groebner_property(basis)
    
    def test_idempotent(self, clo_system):
        generators, _ = clo_system
        first = groebner(generators, MonomialOrder.LEX)
        
        second = groebner(first.generators, MonomialOrder.LEX)
        
        assert second.generators == first.generators
    
    def test_membership_of_ideal_combination(self, twisted_cubic):
        generators, (x, y, z) = twisted_cubic
        basis = groebner(generators, MonomialOrder.LEX)
        combo = (x*z + 3) * (y - x**2) - y**2 * (z - x**3)
        
        assert basis.contains(combo)
        assert not basis.contains(x + y)
    
    @pytest.mark.parametrize("settings", [
        {'use_coprime_criterion': False, 'use_chain_criterion': False},
        {'pair_selection': 'fifo'},
        {'workers': 2},
        {'workers': 3, 'pair_selection': 'fifo'},
    ])
    def test_strategy_does_not_change_reduced_basis(self, clo_system, settings):
        generators, _ = clo_system
        reference = groebner(generators, MonomialOrder.LEX)
        
        basis = BuchbergerEngine(order=MonomialOrder.LEX, **settings).compute(generators)
        
        assert basis.generators == reference.generators
    
    def test_disabled_criteria_skip_nothing(self, clo_system):
        generators, _ = clo_system
        
        without = BuchbergerEngine(
            use_coprime_criterion=False, use_chain_criterion=False
        ).compute(generators)
        
        assert without.stats.coprime_skips == 0
        assert without.stats.chain_skips == 0


class TestDegenerateInputs:
    
    def test_inconsistent_pair_gives_unit(self):
        x, y = symbols('x y')
        
        basis = groebner(polys([x, x - 1], (x, y)))
        
        assert basis.is_unit
        assert basis.generators == [Polynomial.constant(1, (x, y))]
        assert not basis.is_zero_dimensional()
    
    def test_constant_generator_gives_unit(self):
        x, y = symbols('x y')
        
        basis = groebner(polys([x**2 + y, sp.Integer(3)], (x, y)))
        
        assert basis.is_unit
        assert basis.stats.iterations == 0
    
    def test_scalar_multiples_are_deduplicated(self):
        x, y = symbols('x y')
        f = x**2 + y - 1
        
        basis = groebner(polys([f, 2*f], (x, y)))
        
        assert basis.generators == polys([f], (x, y))
        assert basis.stats.iterations == 0
    
    def test_zero_generators_give_zero_ideal(self):
        x, y = symbols('x y')
        
        basis = groebner([Polynomial.zero((x, y))])
        
        assert basis.generators == []
        assert not basis.is_unit
        assert basis.free_variables() == [x, y]
    
    def test_no_generators_raises(self):
        with pytest.raises(DegenerateInputError):
            BuchbergerEngine().compute([])
    
    def test_mixed_rings_raise(self):
        x, y, z = symbols('x y z')
        
        with pytest.raises(DegenerateInputError) as exc_info:
            groebner([Polynomial.from_expr(x, (x, y)), Polynomial.from_expr(z, (x, z))])
        
        assert exc_info.value.equation_index == 1
    
    @pytest.mark.parametrize("kwargs", [
        {'pair_selection': 'random'},
        {'max_iterations': 0},
        {'max_basis_size': 0},
        {'workers': 0},
    ])
    def test_invalid_engine_settings(self, kwargs):
        with pytest.raises(ValueError):
            BuchbergerEngine(**kwargs)


class TestBudgets:
    
    def test_iteration_budget(self, clo_system):
        generators, _ = clo_system
        
        with pytest.raises(ResourceExceededError) as exc_info:
            BuchbergerEngine(max_iterations=1).compute(generators)
        
        assert exc_info.value.kind is ErrorKind.RESOURCE_EXCEEDED
        assert exc_info.value.stage == "buchberger"
    
    def test_basis_size_budget(self, clo_system):
        generators, _ = clo_system
        
        with pytest.raises(ResourceExceededError, match="max_basis_size"):
            BuchbergerEngine(max_basis_size=3).compute(generators)
    
    def test_initial_generators_exceed_basis_size(self, clo_system):
        generators, _ = clo_system
        
        with pytest.raises(ResourceExceededError, match="3 generators exceed max_basis_size=2"):
            BuchbergerEngine(max_basis_size=2).compute(generators)
    
    def test_scalar_multiples_do_not_count_toward_basis_size(self):
        x, y = symbols('x y')
        f = x**2 + y - 1
        
        basis = BuchbergerEngine(max_basis_size=1).compute(polys([f, 3*f], (x, y)))
        
        assert len(basis) == 1
    
    def test_timeout(self, clo_system):
        generators, _ = clo_system
        
        with pytest.raises(ResourceExceededError, match="timeout"):
            BuchbergerEngine(timeout=1e-9, use_coprime_criterion=False,
                             use_chain_criterion=False).compute(generators)


class TestPostProcessing:
    
    def test_minimalize_drops_redundant_leads(self):
        x, y = symbols('x y')
        gens = polys([x**2 + y, x - y, y**2 - 1], (x, y))
        
        kept = minimalize(gens, MonomialOrder.LEX)
        
        assert set(kept) == set(polys([x - y, y**2 - 1], (x, y)))
    
    def test_interreduce_clears_lower_terms(self):
        x, y = symbols('x y')
        gens = polys([2*x + 2*y**2, y**2 - 1], (x, y))
        
        reduced = interreduce(gens, MonomialOrder.LEX)
        
        assert reduced == polys([x + 1, y**2 - 1], (x, y))


class TestGroebnerBasisObject:
    
    def test_reduce_accepts_expressions(self, circle_line):
        generators, (x, y) = circle_line
        basis = groebner(generators)
        
        assert basis.reduce(x**2) == Polynomial.from_expr(Rational(1, 2), (x, y))
    
    def test_leading_monomials_and_to_exprs(self, circle_line):
        generators, (x, y) = circle_line
        basis = groebner(generators)
        
        assert basis.leading_monomials() == [(1, 0), (0, 2)]
        assert basis.to_exprs() == [x - y, y**2 - Rational(1, 2)]
    
    def test_to_dict(self, circle_line):
        generators, _ = circle_line
        
        data = groebner(generators).to_dict()
        
        assert data['order'] == 'lex'
        assert data['variables'] == ['x', 'y']
        assert data['is_reduced'] is True
        assert data['stats']['coprime_skips'] == 2
        assert len(data['generators']) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
