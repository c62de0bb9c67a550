"""
Basic Usage Examples for PolySolver

This file demonstrates the core functionality of the library.
"""

import sys
sys.path.insert(0, '..')

from sympy import symbols, Eq, Matrix, MatrixSymbol, exp, pprint
from polysolver import (
    SmartSolver,
    SolverOptions,
    MonomialOrder,
    Polynomial,
    BuchbergerEngine,
    enable_debug_logging,
)


def example_1_circle_and_line():
    """
    Example 1: Intersection of a circle and a line

    System:
        x² + y² = 1
        x = y
    """
    print("=" * 60)
    print("Example 1: Circle and Line")
    print("=" * 60)

    x, y = symbols('x y')
    solver = SmartSolver()

    result = solver.solve([Eq(x**2 + y**2, 1), Eq(x, y)], [x, y])

    print(f"\nClassified as: {result.equation_type}")
    print(f"Result: {result.kind.value}")
    print("\nReduced lex basis:")
    for g in result.basis.to_exprs():
        print(f"  {g} = 0")
    print("\nSolutions:")
    for sol in result.as_dicts():
        print(f"  {sol}")

    return result


def example_2_three_variables():
    """
    Example 2: A symmetric system in three unknowns

    System:
        x² + y + z = 1
        x + y² + z = 1
        x + y + z² = 1
    """
    print("=" * 60)
    print("Example 2: Three-Variable System")
    print("=" * 60)

    x, y, z = symbols('x y z')
    system = [x**2 + y + z - 1, x + y**2 + z - 1, x + y + z**2 - 1]

    result = SmartSolver().solve(system, [x, y, z])

    print(f"\n{result.solution_count()} solutions:")
    for sol in result.solutions:
        print(f"  (x, y, z) = {sol}")

    print("\nBuchberger statistics:")
    for key, value in result.stats['buchberger'].items():
        print(f"  {key}: {value}")

    return result


def example_3_inconsistent_and_underdetermined():
    """Example 3: Systems without a finite solution set."""
    print("=" * 60)
    print("Example 3: No Solution / Infinitely Many")
    print("=" * 60)

    x, y = symbols('x y')
    solver = SmartSolver()

    parallel = solver.solve_polynomial_system([x + y - 1, x + y - 2], [x, y])
    print(f"\nx + y = 1, x + y = 2: {parallel.kind.value}")
    print(f"  basis: {parallel.basis}")

    line = solver.solve([x - y], [x, y])
    print(f"\nx = y over (x, y): {line.kind.value}")
    print(f"  {line.message}")


def example_4_groebner_basis_directly():
    """Example 4: Basis computation and ideal membership."""
    print("=" * 60)
    print("Example 4: Gröbner Basis and Ideal Membership")
    print("=" * 60)

    x, y, z = symbols('x y z')
    variables = (x, y, z)
    generators = [
        Polynomial.from_expr(y - x**2, variables),
        Polynomial.from_expr(z - x**3, variables),
    ]

    engine = BuchbergerEngine(order=MonomialOrder.GREVLEX)
    basis = engine.compute(generators)

    print(f"\n{basis}")
    print(f"Zero-dimensional: {basis.is_zero_dimensional()}")
    print(f"Free variables: {basis.free_variables()}")

    candidate = y**2 - x*z
    print(f"\n{candidate} in ideal: {basis.contains(candidate)}")
    print(f"x + y in ideal: {basis.contains(x + y)}")

    return basis


def example_5_options():
    """Example 5: Orders, variable priority and partial results."""
    print("=" * 60)
    print("Example 5: Solver Options")
    print("=" * 60)

    x, y = symbols('x y')
    system = [x - 2*y, y**2 - 1]
    solver = SmartSolver()

    partial = solver.solve(system, [x, y], {'extract_solutions': False})
    print(f"\nExtraction disabled: {partial.kind.value}")
    print(f"  basis: {partial.basis.to_exprs()}")

    reordered = solver.solve(system, [x, y], SolverOptions(
        monomial_order='grevlex',
        variable_priority=[y, x]
    ))
    print(f"\nGrevlex with y > x: {reordered.solutions}")

    complex_roots = solver.solve([x**2 + 1 - y, y], [x, y])
    real_roots = solver.solve([x**2 + 1 - y, y], [x, y], {'real_only': True})
    print(f"\nx² + 1 = y, y = 0 over C: {complex_roots.solutions}")
    print(f"over R: {real_roots.kind.value}")


def example_6_other_equation_types():
    """Example 6: Equations routed away from the Gröbner pipeline."""
    print("=" * 60)
    print("Example 6: Linear, Quadratic, Matrix and Transcendental")
    print("=" * 60)

    x, y = symbols('x y')
    solver = SmartSolver()

    linear = solver.solve([2*x + 3*y - 5, x - y - 1], [x, y])
    print(f"\nLinear ({linear.method}): {linear.solutions}")

    quadratic = solver.solve(x**2 - 5*x + 6, [x])
    print(f"Quadratic ({quadratic.method}): {quadratic.solutions}")

    cubic = solver.solve(x**3 - 2, [x])
    print(f"Cubic ({cubic.equation_type}): {cubic.solutions}")

    transcendental = solver.solve(exp(x) - 2, [x], {'real_only': True})
    print(f"Transcendental: {transcendental.solutions}")

    X = MatrixSymbol('X', 2, 1)
    A = Matrix([[2, 1], [1, 3]])
    B = Matrix([[3], [5]])
    matrix = solver.solve(A * X - B, [X])
    print(f"Matrix ({matrix.method}):")
    pprint(matrix.solutions[0][0])

    unsupported = solver.solve(x**0.5 - 2, [x])
    print(f"\nUnsupported: {unsupported.error.value} ({unsupported.message})")


def main():
    """Run all examples."""
    print("\n" + "=" * 60)
    print("PolySolver - Examples")
    print("=" * 60)

    if "--debug" in sys.argv:
        enable_debug_logging()

    example_1_circle_and_line()
    example_2_three_variables()
    example_3_inconsistent_and_underdetermined()
    example_4_groebner_basis_directly()
    example_5_options()
    example_6_other_equation_types()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
