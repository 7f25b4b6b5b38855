import math
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from .operators import (
  NodeType, NODE_TYPE_TO_OP, VARIABLE_NAME,
  evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_binary_op_fast
)
from ..construction import constant, variable, add, multiply


def format_constant(value: float) -> str:
  """Shortest round-trip decimal text, integral values without '.0'"""
  text = repr(float(value))
  if text.endswith('.0'):
    return text[:-2]
  return text


class Expression(ABC):
  """Immutable expression node with cached size, hash and rendering"""

  __slots__ = ('_hash_cache', '_size_cache', '_string_cache')

  node_type: NodeType

  def __init__(self):
    self._set_slot('_hash_cache', None)
    self._set_slot('_size_cache', None)
    self._set_slot('_string_cache', None)

  def _set_slot(self, name: str, value):
    object.__setattr__(self, name, value)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'")

  # copy and pickle rebuild through the constructor, never by setting slots
  @abstractmethod
  def __reduce__(self):
    pass

  @abstractmethod
  def evaluate(self, x: float) -> float:
    pass

  @abstractmethod
  def derivative(self) -> 'Expression':
    pass

  @abstractmethod
  def simplify(self) -> 'Expression':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def evaluate_array(self, X) -> np.ndarray:
    """Evaluate at every point of a 1-D array"""
    X = np.atleast_1d(np.asarray(X, dtype=np.float64))
    if X.ndim != 1:
      raise ValueError(f"Expected a 1-D array of points, got shape {X.shape}")
    return self._evaluate_array(X)

  @abstractmethod
  def _evaluate_array(self, X: np.ndarray) -> np.ndarray:
    pass

  def render(self) -> str:
    if self._string_cache is None:
      self._set_slot('_string_cache', self._compute_string())
    return self._string_cache

  @abstractmethod
  def _compute_string(self) -> str:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._set_slot('_size_cache', self._compute_size())
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._set_slot('_hash_cache', self._compute_hash())
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Expression) or other.node_type != self.node_type:
      return False
    return self._structurally_equal(other)

  @abstractmethod
  def _structurally_equal(self, other: 'Expression') -> bool:
    pass

  def __str__(self) -> str:
    return self.render()


class ConstantNode(Expression):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    self._set_slot('value', float(value))

  def evaluate(self, x: float) -> float:
    return self.value

  def derivative(self) -> Expression:
    return constant(0.0)

  def simplify(self) -> Expression:
    return constant(self.value)

  def _evaluate_array(self, X: np.ndarray) -> np.ndarray:
    return evaluate_constant(X.shape[0], self.value)

  def _compute_string(self) -> str:
    return format_constant(self.value)

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value, math.copysign(1.0, self.value)))

  def _structurally_equal(self, other: 'ConstantNode') -> bool:
    # 0.0 and -0.0 render differently, so they are different constants
    return (self.value == other.value and
            math.copysign(1.0, self.value) == math.copysign(1.0, other.value))

  def to_sympy(self) -> sp.Expr:
    return sp.Float(self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"

  def __reduce__(self):
    return (ConstantNode, (self.value,))


class VariableNode(Expression):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self):
    super().__init__()
    self._set_slot('name', VARIABLE_NAME)

  def evaluate(self, x: float) -> float:
    return x

  def derivative(self) -> Expression:
    return constant(1.0)

  def simplify(self) -> Expression:
    return variable()

  def _evaluate_array(self, X: np.ndarray) -> np.ndarray:
    return evaluate_variable(X)

  def _compute_string(self) -> str:
    return self.name

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _structurally_equal(self, other: 'VariableNode') -> bool:
    return self.name == other.name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def __repr__(self) -> str:
    return "VariableNode()"

  def __reduce__(self):
    return (VariableNode, ())


class BinaryOpNode(Expression):
  """Interior node owning references to two child expressions"""

  __slots__ = ('left', 'right')

  operator: str

  def __init__(self, left: Expression, right: Expression):
    super().__init__()
    for child in (left, right):
      if not isinstance(child, Expression):
        raise TypeError(
          f"{type(self).__name__} operands must be Expression nodes, got {type(child).__name__}"
        )
    self._set_slot('left', left)
    self._set_slot('right', right)

  def evaluate(self, x: float) -> float:
    return evaluate_binary_op(self.left.evaluate(x), self.right.evaluate(x), self.operator)

  def _evaluate_array(self, X: np.ndarray) -> np.ndarray:
    left_val = self.left._evaluate_array(X)
    right_val = self.right._evaluate_array(X)
    return evaluate_binary_op_fast(left_val, right_val, int(NODE_TYPE_TO_OP[self.node_type]))

  def simplify(self) -> Expression:
    left = self.left.simplify()
    right = self.right.simplify()
    return self._simplify_children(left, right)

  @abstractmethod
  def _simplify_children(self, left: Expression, right: Expression) -> Expression:
    pass

  def _compute_string(self) -> str:
    return f"({self.left.render()} {self.operator} {self.right.render()})"

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_hash(self) -> int:
    return hash((self.node_type, hash(self.left), hash(self.right)))

  def _structurally_equal(self, other: 'BinaryOpNode') -> bool:
    return self.left == other.left and self.right == other.right

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.left!r}, {self.right!r})"

  def __reduce__(self):
    return (type(self), (self.left, self.right))


class AddNode(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.ADD
  operator = '+'

  def derivative(self) -> Expression:
    # sum rule
    return add(self.left.derivative(), self.right.derivative())

  def _simplify_children(self, left: Expression, right: Expression) -> Expression:
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_add(left, right)

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self.left.to_sympy(), self.right.to_sympy())


class MultiplyNode(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.MULTIPLY
  operator = '*'

  def derivative(self) -> Expression:
    # product rule, operands shared with this node
    return add(
      multiply(self.left.derivative(), self.right),
      multiply(self.left, self.right.derivative())
    )

  def _simplify_children(self, left: Expression, right: Expression) -> Expression:
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_multiply(left, right)

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self.left.to_sympy(), self.right.to_sympy())
