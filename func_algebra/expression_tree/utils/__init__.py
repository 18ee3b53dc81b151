"""Utilities for expression trees."""

from .validator import ExpressionValidator, DomainViolationError
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    count_node_types, get_constants, clone_tree
)

__all__ = [
    'ExpressionValidator', 'DomainViolationError',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'count_node_types', 'get_constants', 'clone_tree'
]
