from typing import Optional
from ..core.node import Expression, ConstantNode, VariableNode, MultiplyNode
from ..core.operators import NodeType
from ..construction import constant, variable, add, multiply


class ExpressionSimplifier:
  """Local rewrite rules applied once per node, after its children are simplified.

  The rule set is a constant folder plus a linear-term collector for
  ``k1*x + k2*x``, ``x + k*x`` and ``k*x + x``. Linear terms are only
  recognised in the ``Multiply(Constant, Variable)`` operand order;
  ``Multiply(Variable, Constant)`` is left alone.
  """

  @staticmethod
  def simplify_multiply(left: Expression, right: Expression) -> Expression:
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return constant(left.value * right.value)
    if ExpressionSimplifier._is_constant_value(right, 0.0):
      return constant(0.0)  # x * 0 = 0
    if ExpressionSimplifier._is_constant_value(left, 0.0):
      return constant(0.0)  # 0 * x = 0
    if ExpressionSimplifier._is_constant_value(right, 1.0):
      return left  # x * 1 = x
    if ExpressionSimplifier._is_constant_value(left, 1.0):
      return right  # 1 * x = x
    return multiply(left, right)

  @staticmethod
  def simplify_add(left: Expression, right: Expression) -> Expression:
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return constant(left.value + right.value)
    if ExpressionSimplifier._is_constant_value(right, 0.0):
      return left  # x + 0 = x
    if ExpressionSimplifier._is_constant_value(left, 0.0):
      return right  # 0 + x = x

    left_coefficient = ExpressionSimplifier._linear_coefficient(left)
    right_coefficient = ExpressionSimplifier._linear_coefficient(right)

    # (c1 * x) + (c2 * x)
    if left_coefficient is not None and right_coefficient is not None:
      return multiply(constant(left_coefficient + right_coefficient), variable())

    # x + (c * x)
    if left.node_type == NodeType.VARIABLE and right_coefficient is not None:
      return multiply(constant(1.0 + right_coefficient), variable())

    # (c * x) + x
    if left_coefficient is not None and right.node_type == NodeType.VARIABLE:
      return multiply(constant(left_coefficient + 1.0), variable())

    return add(left, right)

  @staticmethod
  def _is_constant_value(node: Expression, value: float) -> bool:
    return isinstance(node, ConstantNode) and node.value == value

  @staticmethod
  def _linear_coefficient(node: Expression) -> Optional[float]:
    """Return c if node is exactly Multiply(Constant(c), Variable), else None"""
    if not isinstance(node, MultiplyNode):
      return None
    if isinstance(node.left, ConstantNode) and isinstance(node.right, VariableNode):
      return node.left.value
    return None
