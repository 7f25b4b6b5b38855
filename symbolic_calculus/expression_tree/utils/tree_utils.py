"""
Tree Utility Functions

Traversal and structural queries over expression trees. Trees may share
sub-expressions, so node lists can contain the same object more than once.
"""

from collections import deque
from typing import List, Set

from ..core.node import Expression, BinaryOpNode, ConstantNode, VariableNode
from ..core.operators import NodeType


def get_all_nodes(node: Expression, traversal_order: str = 'breadth_first') -> List[Expression]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Expression) -> List[Expression]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            nodes_to_visit.append(current_node.left)
            nodes_to_visit.append(current_node.right)

    return all_nodes


def _depth_first_traversal(node: Expression) -> List[Expression]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]

    if isinstance(node, BinaryOpNode):
        nodes.extend(_depth_first_traversal(node.left))
        nodes.extend(_depth_first_traversal(node.right))

    return nodes


def calculate_tree_depth(node: Expression) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, BinaryOpNode):
        return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
    return 1


def find_nodes_by_type(node: Expression, node_type: NodeType) -> List[Expression]:
    """Find all nodes tagged with the given NodeType"""
    return [n for n in get_all_nodes(node) if n.node_type == node_type]


def get_constants(node: Expression) -> List[float]:
    """Constant values in depth-first, left-to-right order"""
    return [n.value for n in _depth_first_traversal(node) if isinstance(n, ConstantNode)]


def get_variables(node: Expression) -> List[VariableNode]:
    return [n for n in _depth_first_traversal(node) if isinstance(n, VariableNode)]


def is_acyclic(node: Expression) -> bool:
    """True if no node is its own ancestor.

    Shared sub-trees are allowed; only a node reachable from itself fails.
    """
    return _is_acyclic_recursive(node, set())


def _is_acyclic_recursive(node: Expression, ancestors: Set[int]) -> bool:
    node_id = id(node)
    if node_id in ancestors:
        return False
    if not isinstance(node, BinaryOpNode):
        return True

    ancestors.add(node_id)
    try:
        return (_is_acyclic_recursive(node.left, ancestors) and
                _is_acyclic_recursive(node.right, ancestors))
    finally:
        ancestors.discard(node_id)
