# Python

"""Symbolic Calculus Package

Single-variable expression trees with evaluation, symbolic differentiation
and rule-based simplification.
"""

from .expression_tree import (
  Expression, ConstantNode, VariableNode, BinaryOpNode, AddNode, MultiplyNode,
  NodeType, constant, variable, add, multiply,
  ExpressionSimplifier, ExpressionValidator, SymPyVerifier
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "ConstantNode", "VariableNode", "BinaryOpNode", "AddNode", "MultiplyNode",
  "NodeType", "constant", "variable", "add", "multiply",
  "ExpressionSimplifier", "ExpressionValidator", "SymPyVerifier",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
