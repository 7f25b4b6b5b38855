"""Core expression tree components."""

from .node import (
    Expression, ConstantNode, VariableNode, BinaryOpNode, AddNode, MultiplyNode,
    format_constant
)
from .operators import (
    NodeType, OpType, NODE_TYPE_TO_OP, VARIABLE_NAME,
    evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_binary_op_fast
)

__all__ = [
    'Expression', 'ConstantNode', 'VariableNode', 'BinaryOpNode', 'AddNode', 'MultiplyNode',
    'format_constant',
    'NodeType', 'OpType', 'NODE_TYPE_TO_OP', 'VARIABLE_NAME',
    'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op', 'evaluate_binary_op_fast'
]
