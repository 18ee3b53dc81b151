# Python

"""Function Algebra Package

Composable real-valued functions of one variable, evaluable at a real argument.
"""

from .expression_tree import (
  Expression, Node, Constant, Identity, BinaryOpNode, UnaryOpNode,
  Sum, Product, Power, ExpWithBase, ExpNatural, LogWithBase, LogNatural,
  Sine, Cosine, Tangent, ArcSine, ArcCosine, ArcTangent,
  SquareRoot, CubeRoot, NthRoot,
  NodeType, OpType
)
from .expression_tree.utils import (
  ExpressionValidator, DomainViolationError,
  get_all_nodes, calculate_tree_depth, find_nodes_by_type,
  count_node_types, get_constants, clone_tree
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "Constant", "Identity", "BinaryOpNode", "UnaryOpNode",
  "Sum", "Product", "Power", "ExpWithBase", "ExpNatural", "LogWithBase", "LogNatural",
  "Sine", "Cosine", "Tangent", "ArcSine", "ArcCosine", "ArcTangent",
  "SquareRoot", "CubeRoot", "NthRoot",
  "NodeType", "OpType",
  "ExpressionValidator", "DomainViolationError",
  "get_all_nodes", "calculate_tree_depth", "find_nodes_by_type",
  "count_node_types", "get_constants", "clone_tree",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
