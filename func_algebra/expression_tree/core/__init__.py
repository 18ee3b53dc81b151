"""Core expression tree components."""

from .node import (
    Node, Constant, Identity, BinaryOpNode, UnaryOpNode,
    Sum, Product, Power, ExpWithBase, ExpNatural, LogWithBase, LogNatural,
    Sine, Cosine, Tangent, ArcSine, ArcCosine, ArcTangent,
    SquareRoot, CubeRoot, NthRoot
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
    evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Node', 'Constant', 'Identity', 'BinaryOpNode', 'UnaryOpNode',
    'Sum', 'Product', 'Power', 'ExpWithBase', 'ExpNatural', 'LogWithBase', 'LogNatural',
    'Sine', 'Cosine', 'Tangent', 'ArcSine', 'ArcCosine', 'ArcTangent',
    'SquareRoot', 'CubeRoot', 'NthRoot',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'evaluate_binary_op', 'evaluate_unary_op'
]
