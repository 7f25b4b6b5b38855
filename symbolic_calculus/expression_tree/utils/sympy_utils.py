import sympy as sp
from ..core.node import Expression
from ..core.operators import VARIABLE_NAME
from ...logging_system import log_debug


class SymPyVerifier:
  """Cross-checks expression tree operations against SymPy"""

  def __init__(self):
    self.symbol = sp.Symbol(VARIABLE_NAME)

  def derivative_matches(self, node: Expression) -> bool:
    """True if node.derivative() equals sympy.diff of the node"""
    expected = sp.diff(node.to_sympy(), self.symbol)
    actual = node.derivative().to_sympy()
    return self._equivalent(expected, actual, f"d/dx {node.render()}")

  def simplification_preserves_value(self, node: Expression) -> bool:
    """True if node.simplify() is algebraically equal to node"""
    return self._equivalent(node.to_sympy(), node.simplify().to_sympy(), f"simplify {node.render()}")

  def _equivalent(self, expected: sp.Expr, actual: sp.Expr, label: str) -> bool:
    difference = sp.simplify(sp.expand(expected - actual))
    if difference.is_zero:
      return True
    log_debug(f"SymPy mismatch for {label}: expected {expected}, got {actual}")
    return False

  def latex_representation(self, node: Expression) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(node.to_sympy())
