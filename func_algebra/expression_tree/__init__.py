"""Expression Tree Module

Function nodes, their evaluation kernels and tree utilities.
"""

from .expression import Expression
from .core.node import (
    Node,
    Constant,
    Identity,
    BinaryOpNode,
    UnaryOpNode,
    Sum,
    Product,
    Power,
    ExpWithBase,
    ExpNatural,
    LogWithBase,
    LogNatural,
    Sine,
    Cosine,
    Tangent,
    ArcSine,
    ArcCosine,
    ArcTangent,
    SquareRoot,
    CubeRoot,
    NthRoot
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    evaluate_binary_op,
    evaluate_unary_op
)
from .utils import ExpressionValidator, DomainViolationError

__all__ = [
    "Expression",
    "Node", "Constant", "Identity", "BinaryOpNode", "UnaryOpNode",
    "Sum", "Product", "Power", "ExpWithBase", "ExpNatural", "LogWithBase", "LogNatural",
    "Sine", "Cosine", "Tangent", "ArcSine", "ArcCosine", "ArcTangent",
    "SquareRoot", "CubeRoot", "NthRoot",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP",
    "evaluate_binary_op", "evaluate_unary_op",
    "ExpressionValidator", "DomainViolationError"
]
