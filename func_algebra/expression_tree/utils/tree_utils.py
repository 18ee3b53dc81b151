"""
Tree Utility Functions

Traversal and analysis helpers for function trees. Every node exposes its
children through ``Node.children``, so none of these need per-class cases.
"""

from collections import Counter, deque
from typing import Dict, List, Type, TypeVar

from ..core.node import Node, Constant

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
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


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children:
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return node.depth()


def find_nodes_by_type(node: Node, node_class: Type[T]) -> List[T]:
    """All nodes that are instances of node_class, in depth-first order"""
    return [n for n in _depth_first_traversal(node) if isinstance(n, node_class)]


def count_node_types(node: Node) -> Dict[str, int]:
    """Count nodes per class name"""
    return dict(Counter(type(n).__name__ for n in _depth_first_traversal(node)))


def get_constants(node: Node) -> List[float]:
    """Values of all Constant leaves, depth-first, left to right"""
    return [n.value for n in find_nodes_by_type(node, Constant)]


def clone_tree(node: Node) -> Node:
    """Structurally equal deep copy built from fresh nodes"""
    return node.copy()
