import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  ADD = 2
  MULTIPLY = 3

class OpType(IntEnum):
  ADD = 0
  MUL = 1

# Variant tag to kernel opcode
NODE_TYPE_TO_OP = {NodeType.ADD: OpType.ADD, NodeType.MULTIPLY: OpType.MUL}

# Name of the single free variable
VARIABLE_NAME = 'x'

# Plain ints so numba freezes them as compile-time constants
_OP_ADD = int(OpType.ADD)
_OP_MUL = int(OpType.MUL)

@numba.njit(cache=True, inline='always')
def evaluate_variable(X):
  return X.astype(np.float64)

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True)
def evaluate_binary_op_fast(left_val, right_val, op_type):
  # no fastmath: results must match scalar float arithmetic exactly
  if op_type == _OP_ADD:
    return left_val + right_val
  elif op_type == _OP_MUL:
    return left_val * right_val
  return np.zeros_like(left_val)

def evaluate_binary_op(left_val: float, right_val: float, operator: str) -> float:
  if operator == '+':
    return left_val + right_val
  elif operator == '*':
    return left_val * right_val
  raise ValueError(f"Unknown binary operator: {operator}")
