"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .sympy_utils import SymPyVerifier
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_constants, get_variables, is_acyclic
)

__all__ = [
    'ExpressionSimplifier', 'SymPyVerifier', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_constants', 'get_variables', 'is_acyclic'
]
