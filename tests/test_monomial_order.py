"""
Tests for monomial orders, including golden Grevlex comparisons.
"""

import pytest

import sys
sys.path.insert(0, '..')

from polysolver.groebner.monomial_order import MonomialOrder, Ordering

LEX = MonomialOrder.LEX
GRLEX = MonomialOrder.GRLEX
GREVLEX = MonomialOrder.GREVLEX

# Exponent vectors over x > y > z
X2Y = (2, 1, 0)
XY2 = (1, 2, 0)
XZ = (1, 0, 1)
Y2 = (0, 2, 0)
X = (1, 0, 0)
XYZ = (1, 1, 1)
X2Z = (2, 0, 1)
X3 = (3, 0, 0)
Y3 = (0, 3, 0)
XZ2 = (1, 0, 2)
ONE = (0, 0, 0)
Z = (0, 0, 1)
X2YZ = (2, 1, 1)
XY3 = (1, 3, 0)
XY2Z = (1, 2, 1)
X2Z2 = (2, 0, 2)
XYZ2 = (1, 1, 2)
Y2Z2 = (0, 2, 2)


class TestGrevlexGolden:
    """Literal Grevlex comparisons with priority x > y > z."""
    
    @pytest.mark.parametrize("m1,m2,expected", [
        (X2Y, XY2, Ordering.GREATER),    # equal degree, y: 1 < 2
        (XY2, X2Y, Ordering.LESS),
        (XZ, Y2, Ordering.LESS),         # z: 1 > 0, so y² wins
        (X, Y2, Ordering.LESS),          # degree decides
        (X2Z, XYZ, Ordering.GREATER),    # z ties, y: 0 < 1
        (X3, X2Y, Ordering.GREATER),     # y: 0 < 1
        (Y3, XZ2, Ordering.GREATER),     # z: 0 < 2
        (XYZ, XYZ, Ordering.EQUAL),
        (ONE, Z, Ordering.LESS),
        (X2YZ, XY3, Ordering.LESS),      # z: 1 > 0
        (XY2Z, X2Z2, Ordering.GREATER),  # z: 1 < 2
        (XYZ2, Y2Z2, Ordering.GREATER),  # z ties, y: 1 < 2
    ])
    def test_grevlex(self, m1, m2, expected):
        assert GREVLEX.compare(m1, m2) is expected
    
    def test_grevlex_differs_from_grlex(self):
        """Degree ties are broken differently by Grlex and Grevlex."""
        assert GRLEX.compare(X2YZ, XY3) is Ordering.GREATER
        assert GREVLEX.compare(X2YZ, XY3) is Ordering.LESS


class TestLexAndGrlex:
    
    def test_lex_first_difference_decides(self):
        assert LEX.compare(XZ, Y2) is Ordering.GREATER
        assert LEX.compare(X, Y2) is Ordering.GREATER
        assert LEX.compare(XZ2, Y3) is Ordering.GREATER
        assert LEX.compare(XY2, X2Y) is Ordering.LESS
    
    def test_grlex_degree_then_lex(self):
        assert GRLEX.compare(X, Y2) is Ordering.LESS
        assert GRLEX.compare(XZ, Y2) is Ordering.GREATER
        assert GRLEX.compare(Z, ONE) is Ordering.GREATER
    
    @pytest.mark.parametrize("order", list(MonomialOrder))
    def test_key_consistent_with_compare(self, order):
        monomials = [X2Y, XY2, XZ, Y2, X, XYZ, X2Z, X3, Y3, ONE, Z]
        for a in monomials:
            for b in monomials:
                by_key = (order.key(a) > order.key(b)) - (order.key(a) < order.key(b))
                assert order.compare(a, b).value == by_key
    
    @pytest.mark.parametrize("order", list(MonomialOrder))
    def test_multiplicative(self, order):
        """a > b implies a·c > b·c."""
        c = (1, 2, 3)
        for a, b in [(X2Y, XY2), (XZ, Y2), (X3, Y3)]:
            ac = tuple(i + j for i, j in zip(a, c))
            bc = tuple(i + j for i, j in zip(b, c))
            assert order.compare(a, b) is order.compare(ac, bc)
    
    def test_max(self):
        assert LEX.max([Y3, XZ, ONE]) == XZ
        assert GREVLEX.max([Y3, XZ2, ONE]) == Y3


class TestOrderLookup:
    
    def test_from_name(self):
        assert MonomialOrder.from_name("lex") is LEX
        assert MonomialOrder.from_name("GrevLex") is GREVLEX
        assert MonomialOrder.from_name(GRLEX) is GRLEX
    
    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown monomial order"):
            MonomialOrder.from_name("deglex")
    
    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            LEX.compare((1, 0), (1, 0, 0))
    
    def test_only_lex_is_elimination(self):
        assert LEX.is_elimination
        assert not GREVLEX.is_elimination


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
