import pytest

from symbolic_calculus import NodeType, constant, variable, add, multiply
from symbolic_calculus.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_constants, get_variables, is_acyclic
)


@pytest.fixture
def affine():
    """(2 * x) + 3"""
    return add(multiply(constant(2), variable()), constant(3))


def test_breadth_first_order(affine):
    nodes = get_all_nodes(affine)
    assert [n.render() for n in nodes] == ["((2 * x) + 3)", "(2 * x)", "3", "2", "x"]


def test_depth_first_order(affine):
    nodes = get_all_nodes(affine, traversal_order='depth_first')
    assert [n.render() for n in nodes] == ["((2 * x) + 3)", "(2 * x)", "2", "x", "3"]


def test_invalid_traversal_order(affine):
    with pytest.raises(ValueError):
        get_all_nodes(affine, traversal_order='sideways')


def test_tree_depth(affine):
    assert calculate_tree_depth(constant(1)) == 1
    assert calculate_tree_depth(affine) == 3


def test_find_nodes_by_type(affine):
    assert len(find_nodes_by_type(affine, NodeType.CONSTANT)) == 2
    assert len(find_nodes_by_type(affine, NodeType.VARIABLE)) == 1
    assert len(find_nodes_by_type(affine, NodeType.ADD)) == 1


def test_constants_and_variables(affine):
    assert get_constants(affine) == [2.0, 3.0]
    assert len(get_variables(affine)) == 1
    assert get_variables(constant(1)) == []


def test_shared_subtree_is_acyclic():
    shared = multiply(variable(), variable())
    assert is_acyclic(add(shared, shared))


def test_cycle_is_detected():
    node = add(variable(), constant(1))
    # bypass immutability to build an invalid tree
    object.__setattr__(node, 'right', node)
    assert not is_acyclic(node)
