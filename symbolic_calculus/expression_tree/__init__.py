"""Expression Tree Module

Immutable single-variable expression trees: evaluation, symbolic
differentiation, simplification and rendering.
"""

from .core.node import (
    Expression,
    ConstantNode,
    VariableNode,
    BinaryOpNode,
    AddNode,
    MultiplyNode,
    format_constant
)
from .core.operators import (
    NodeType,
    OpType,
    VARIABLE_NAME,
    evaluate_binary_op,
    evaluate_binary_op_fast
)
from .construction import constant, variable, add, multiply
from .utils import ExpressionSimplifier, ExpressionValidator, SymPyVerifier

__all__ = [
    "Expression",
    "ConstantNode", "VariableNode", "BinaryOpNode", "AddNode", "MultiplyNode",
    "format_constant",
    "NodeType", "OpType", "VARIABLE_NAME",
    "evaluate_binary_op", "evaluate_binary_op_fast",
    "constant", "variable", "add", "multiply",
    "ExpressionSimplifier", "ExpressionValidator", "SymPyVerifier"
]
