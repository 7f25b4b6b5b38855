import numpy as np

from symbolic_calculus import (
    ExpressionValidator, MultiplyNode, constant, variable, add, multiply
)


def test_valid_expression(linear_sum):
    assert ExpressionValidator.is_valid_expression(linear_sum)
    assert ExpressionValidator.is_valid_expression(linear_sum, np.linspace(-1, 1, 5))


def test_non_expression_is_invalid():
    assert not ExpressionValidator.is_valid_expression("x + 1")


def test_overflowing_evaluation_is_invalid():
    huge = multiply(constant(1e308), multiply(constant(10), variable()))
    assert ExpressionValidator.is_valid_expression(huge)
    assert not ExpressionValidator.is_valid_expression(huge, np.array([1.0, 2.0]))


def test_foreign_variable_name_is_invalid():
    x = variable()
    object.__setattr__(x, 'name', 'y')
    assert not ExpressionValidator.is_valid_expression(add(x, constant(1)))


def test_cyclic_tree_is_invalid():
    node = multiply(variable(), constant(2))
    object.__setattr__(node, 'left', node)
    assert not ExpressionValidator.is_valid_expression(node)


def test_check_derivative_accepts_correct_rule(square):
    assert ExpressionValidator.check_derivative(square, np.linspace(-5, 5, 11))


class _BrokenMultiply(MultiplyNode):
    __slots__ = ()

    def derivative(self):
        return constant(0.0)


def test_check_derivative_rejects_wrong_rule():
    broken = _BrokenMultiply(variable(), variable())
    assert not ExpressionValidator.check_derivative(broken, [1.0, 2.0, 3.0])


def test_subclassed_variants_are_invalid():
    broken = _BrokenMultiply(variable(), variable())
    assert not ExpressionValidator.is_valid_expression(broken)
    assert not ExpressionValidator.is_valid_expression(add(constant(1), broken))
