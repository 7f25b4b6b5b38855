"""Smart constructors for expression nodes.

Each helper allocates exactly one new node; none of them validate values or
simplify. Simplification is always an explicit call to ``simplify()``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from .core.node import Expression, ConstantNode, VariableNode, AddNode, MultiplyNode


def constant(value: float) -> 'ConstantNode':
  # Import here to avoid circular imports
  from .core.node import ConstantNode
  return ConstantNode(value)


def variable() -> 'VariableNode':
  from .core.node import VariableNode
  return VariableNode()


def add(left: 'Expression', right: 'Expression') -> 'AddNode':
  from .core.node import AddNode
  return AddNode(left, right)


def multiply(left: 'Expression', right: 'Expression') -> 'MultiplyNode':
  from .core.node import MultiplyNode
  return MultiplyNode(left, right)
