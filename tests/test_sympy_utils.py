import sympy as sp

from symbolic_calculus import SymPyVerifier, constant, variable, add, multiply


def test_to_sympy(linear_sum):
    x = sp.Symbol('x')
    difference = sp.simplify(linear_sum.to_sympy() - 3 * x)
    assert difference.is_zero


def test_derivatives_match_sympy(sample_expressions):
    verifier = SymPyVerifier()
    for expr in sample_expressions:
        assert verifier.derivative_matches(expr), expr.render()


def test_simplification_matches_sympy(sample_expressions):
    verifier = SymPyVerifier()
    for expr in sample_expressions:
        assert verifier.simplification_preserves_value(expr), expr.render()


def test_mismatch_is_reported():
    verifier = SymPyVerifier()
    assert not verifier._equivalent(sp.Symbol('x'), sp.Integer(2), "x vs 2")


def test_latex_representation():
    verifier = SymPyVerifier()
    latex = verifier.latex_representation(add(multiply(constant(3), variable()), constant(1)))
    assert isinstance(latex, str)
    assert "x" in latex
