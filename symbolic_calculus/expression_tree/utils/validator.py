import numpy as np
from typing import Optional
from ..core.node import Expression, ConstantNode, VariableNode, AddNode, MultiplyNode
from ..core.operators import VARIABLE_NAME
from .tree_utils import is_acyclic
from ...logging_system import log_debug, log_warning


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Expression, points: Optional[np.ndarray] = None) -> bool:
    if not isinstance(node, Expression):
      log_debug(f"Not an expression node: {type(node).__name__}")
      return False

    if not is_acyclic(node):
      log_warning("Expression tree contains a cycle")
      return False

    if not ExpressionValidator._is_structurally_valid(node):
      return False

    if points is not None:
      return ExpressionValidator._test_evaluation(node, points)

    return True

  @staticmethod
  def _is_structurally_valid(node: Expression) -> bool:
    # exact types: the variant set is closed, subclasses are not variants
    node_class = type(node)
    if node_class is ConstantNode:
      return isinstance(node.value, float)

    elif node_class is VariableNode:
      if node.name != VARIABLE_NAME:
        log_debug(f"Unexpected variable name: {node.name!r}")
        return False
      return True

    elif node_class is AddNode or node_class is MultiplyNode:
      return (ExpressionValidator._is_structurally_valid(node.left) and
              ExpressionValidator._is_structurally_valid(node.right))

    log_debug(f"Unknown node variant: {node_class.__name__}")
    return False

  @staticmethod
  def _test_evaluation(node: Expression, points: np.ndarray) -> bool:
    try:
      with np.errstate(all='ignore'):
        result = node.evaluate_array(points)

      if not isinstance(result, np.ndarray):
        return False

      if np.any(~np.isfinite(result)):
        log_debug(f"Non-finite values evaluating {node.render()}")
        return False

      return True

    except (FloatingPointError, OverflowError, ValueError) as e:
      log_debug(f"Evaluation failed for {node.render()}: {e}")
      return False

  @staticmethod
  def check_derivative(node: Expression, points, step: float = 1e-6,
                       rtol: float = 1e-5, atol: float = 1e-6) -> bool:
    """Compare the symbolic derivative against a central finite difference"""
    points = np.atleast_1d(np.asarray(points, dtype=np.float64))
    with np.errstate(all='ignore'):
      symbolic = node.derivative().evaluate_array(points)
      numeric = (node.evaluate_array(points + step) - node.evaluate_array(points - step)) / (2.0 * step)

    matches = np.allclose(symbolic, numeric, rtol=rtol, atol=atol)
    if not matches:
      worst = int(np.argmax(np.abs(symbolic - numeric)))
      log_debug(
        f"Derivative of {node.render()} disagrees at x={points[worst]}: "
        f"symbolic={symbolic[worst]}, finite difference={numeric[worst]}"
      )
    return bool(matches)
