import math
import numbers
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Tuple, Union
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
  evaluate_binary_op, evaluate_unary_op
)

Real = Union[float, np.ndarray]


def _as_node(value) -> 'Node':
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_)):
    return Constant(value)
  raise TypeError(f"Cannot use {type(value).__name__} as an expression node")


def _as_real(x: Real) -> Real:
  # Kernels must see float64; Python ints would be typed as wrapping int64
  if isinstance(x, np.ndarray):
    return x if x.dtype == np.float64 else x.astype(np.float64)
  return float(x)


def _param_key(value: float) -> tuple:
  # Tells 0.0 from -0.0, which evaluate differently (e.g. 1 / -0.0)
  return (value, math.copysign(1.0, value))


def _check_child(child) -> 'Node':
  if not isinstance(child, Node):
    raise TypeError(f"Child must be a Node, got {type(child).__name__}")
  return child


def _format_number(value: float) -> str:
  return f"{value:g}"


class Node(ABC):
  """Immutable function node evaluable at a real argument.

  Size, depth and hash are computed once at construction; after that any
  attribute assignment raises AttributeError.
  """

  __slots__ = ('_hash_cache', '_size_cache', '_depth_cache')

  node_type: NodeType

  def _finish_init(self):
    children = self.children
    self._set('_size_cache', 1 + sum(child.size() for child in children))
    self._set('_depth_cache', 1 + max((child.depth() for child in children), default=0))
    self._set('_hash_cache', hash((type(self).__name__, self._params(), children)))

  def _set(self, name: str, value):
    object.__setattr__(self, name, value)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @abstractmethod
  def evaluate(self, x: Real) -> Real:
    pass

  def __call__(self, x: Real) -> Real:
    return self.evaluate(x)

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self, symbol: sp.Symbol) -> sp.Expr:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @property
  def children(self) -> Tuple['Node', ...]:
    return ()

  def _params(self) -> tuple:
    return ()

  def size(self) -> int:
    """Node count of the subtree"""
    return self._size_cache

  def depth(self) -> int:
    """Height of the subtree, leaves have depth 1"""
    return self._depth_cache

  def __hash__(self) -> int:
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if type(self) is not type(other) or hash(self) != hash(other):
      return False
    return (
      [_param_key(p) for p in self._params()] == [_param_key(p) for p in other._params()]
      and self.children == other.children
    )

  def __ne__(self, other) -> bool:
    return not self.__eq__(other)

  def __str__(self) -> str:
    return self.to_string()

  # Arithmetic sugar, builds Sum/Product/Power trees
  def __add__(self, other):
    return Sum(self, _as_node(other))

  def __radd__(self, other):
    return Sum(_as_node(other), self)

  def __mul__(self, other):
    return Product(self, _as_node(other))

  def __rmul__(self, other):
    return Product(_as_node(other), self)

  def __neg__(self):
    return Product(Constant(-1.0), self)

  def __sub__(self, other):
    return Sum(self, -_as_node(other))

  def __rsub__(self, other):
    return Sum(_as_node(other), -self)

  def __pow__(self, exponent):
    if isinstance(exponent, (Node, bool, np.bool_)):
      raise TypeError(f"Power exponent must be a real number, not {type(exponent).__name__}")
    return Power(self, exponent)


class Constant(Node):
  """C(x) = c"""

  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    self._set('value', float(value))
    self._finish_init()

  def evaluate(self, x: Real) -> Real:
    if isinstance(x, np.ndarray):
      return np.full(x.shape, self.value, dtype=np.float64)
    return self.value

  def _params(self) -> tuple:
    return (self.value,)

  def to_string(self) -> str:
    return _format_number(self.value)

  def to_sympy(self, symbol):
    return sp.Float(self.value)

  def copy(self) -> 'Constant':
    return Constant(self.value)

  def __repr__(self) -> str:
    return f"Constant({self.value!r})"


class Identity(Node):
  """I(x) = x"""

  __slots__ = ()

  node_type = NodeType.IDENTITY

  def __init__(self):
    self._finish_init()

  def evaluate(self, x: Real) -> Real:
    return _as_real(x)

  def to_string(self) -> str:
    return "x"

  def to_sympy(self, symbol):
    return symbol

  def copy(self) -> 'Identity':
    return Identity()

  def __repr__(self) -> str:
    return "Identity()"


class BinaryOpNode(Node):
  """Combines the results of two child nodes with an arithmetic operator"""

  __slots__ = ('left', 'right')

  node_type = NodeType.BINARY_OP
  operator: str
  op_type: OpType

  def __init__(self, left: Node, right: Node):
    self._set('left', _check_child(left))
    self._set('right', _check_child(right))
    self._finish_init()

  @property
  def children(self):
    return (self.left, self.right)

  def combine(self, left_val: Real, right_val: Real) -> Real:
    return evaluate_binary_op(_as_real(left_val), _as_real(right_val), self.op_type)

  def evaluate(self, x: Real) -> Real:
    return self.combine(self.left.evaluate(x), self.right.evaluate(x))

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def copy(self) -> 'BinaryOpNode':
    return type(self)(self.left.copy(), self.right.copy())

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.left!r}, {self.right!r})"


class Sum(BinaryOpNode):
  """S(x) = f(x) + g(x)"""

  __slots__ = ()

  operator = '+'
  op_type = BINARY_OP_MAP['+']

  def to_sympy(self, symbol):
    return sp.Add(self.left.to_sympy(symbol), self.right.to_sympy(symbol))


class Product(BinaryOpNode):
  """P(x) = f(x) * g(x)"""

  __slots__ = ()

  operator = '*'
  op_type = BINARY_OP_MAP['*']

  def to_sympy(self, symbol):
    return sp.Mul(self.left.to_sympy(symbol), self.right.to_sympy(symbol))


class UnaryOpNode(Node):
  """Applies a fixed transform to the result of a single child node.

  Subclasses taking a structural parameter (exponent, base, degree) store
  it in ``param``; the others leave it at 0.0, which the kernel ignores.
  """

  __slots__ = ('operand', 'param')

  node_type = NodeType.UNARY_OP
  operator: str
  op_type: OpType

  def __init__(self, operand: Node, param: float = 0.0):
    self._set('operand', _check_child(operand))
    self._set('param', float(param))
    self._finish_init()

  @property
  def children(self):
    return (self.operand,)

  def _params(self) -> tuple:
    return (self.param,)

  def apply(self, operand_val: Real) -> Real:
    return evaluate_unary_op(_as_real(operand_val), self.op_type, self.param)

  def evaluate(self, x: Real) -> Real:
    return self.apply(self.operand.evaluate(x))

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def copy(self) -> 'UnaryOpNode':
    return type(self)(self.operand.copy())

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.operand!r})"


class Power(UnaryOpNode):
  """P(x) = f(x) ^ n"""

  __slots__ = ()

  operator = '^'
  op_type = UNARY_OP_MAP['^']

  def __init__(self, f: Node, n: float):
    super().__init__(f, n)

  @property
  def exponent(self) -> float:
    return self.param

  def to_string(self) -> str:
    return f"({self.operand.to_string()} ^ {_format_number(self.param)})"

  def to_sympy(self, symbol):
    return sp.Pow(self.operand.to_sympy(symbol), sp.Float(self.param))

  def copy(self) -> 'Power':
    return Power(self.operand.copy(), self.param)

  def __repr__(self) -> str:
    return f"Power({self.operand!r}, {self.param!r})"


class ExpWithBase(UnaryOpNode):
  """E(x) = a ^ f(x)"""

  __slots__ = ()

  operator = 'exp_base'
  op_type = UNARY_OP_MAP['exp_base']

  def __init__(self, a: float, f: Node):
    super().__init__(f, a)

  @property
  def base(self) -> float:
    return self.param

  def to_string(self) -> str:
    return f"({_format_number(self.param)} ^ {self.operand.to_string()})"

  def to_sympy(self, symbol):
    return sp.Pow(sp.Float(self.param), self.operand.to_sympy(symbol))

  def copy(self) -> 'ExpWithBase':
    return ExpWithBase(self.param, self.operand.copy())

  def __repr__(self) -> str:
    return f"ExpWithBase({self.param!r}, {self.operand!r})"


class ExpNatural(UnaryOpNode):
  """E(x) = e ^ f(x)"""

  __slots__ = ()

  operator = 'exp'
  op_type = UNARY_OP_MAP['exp']

  def to_sympy(self, symbol):
    return sp.exp(self.operand.to_sympy(symbol))


class LogWithBase(UnaryOpNode):
  """L(x) = log_b(f(x))"""

  __slots__ = ()

  operator = 'log_base'
  op_type = UNARY_OP_MAP['log_base']

  def __init__(self, b: float, f: Node):
    super().__init__(f, b)

  @property
  def base(self) -> float:
    return self.param

  def to_string(self) -> str:
    return f"log({self.operand.to_string()}, {_format_number(self.param)})"

  def to_sympy(self, symbol):
    return sp.log(self.operand.to_sympy(symbol), sp.Float(self.param))

  def copy(self) -> 'LogWithBase':
    return LogWithBase(self.param, self.operand.copy())

  def __repr__(self) -> str:
    return f"LogWithBase({self.param!r}, {self.operand!r})"


class LogNatural(UnaryOpNode):
  """L(x) = ln(f(x))"""

  __slots__ = ()

  operator = 'log'
  op_type = UNARY_OP_MAP['log']

  def to_sympy(self, symbol):
    return sp.log(self.operand.to_sympy(symbol))


# Trigonometric family, angles in radians

class Sine(UnaryOpNode):
  __slots__ = ()

  operator = 'sin'
  op_type = UNARY_OP_MAP['sin']

  def to_sympy(self, symbol):
    return sp.sin(self.operand.to_sympy(symbol))


class Cosine(UnaryOpNode):
  __slots__ = ()

  operator = 'cos'
  op_type = UNARY_OP_MAP['cos']

  def to_sympy(self, symbol):
    return sp.cos(self.operand.to_sympy(symbol))


class Tangent(UnaryOpNode):
  __slots__ = ()

  operator = 'tan'
  op_type = UNARY_OP_MAP['tan']

  def to_sympy(self, symbol):
    return sp.tan(self.operand.to_sympy(symbol))


class ArcSine(UnaryOpNode):
  __slots__ = ()

  operator = 'asin'
  op_type = UNARY_OP_MAP['asin']

  def to_sympy(self, symbol):
    return sp.asin(self.operand.to_sympy(symbol))


class ArcCosine(UnaryOpNode):
  __slots__ = ()

  operator = 'acos'
  op_type = UNARY_OP_MAP['acos']

  def to_sympy(self, symbol):
    return sp.acos(self.operand.to_sympy(symbol))


class ArcTangent(UnaryOpNode):
  __slots__ = ()

  operator = 'atan'
  op_type = UNARY_OP_MAP['atan']

  def to_sympy(self, symbol):
    return sp.atan(self.operand.to_sympy(symbol))


# Root family

class SquareRoot(UnaryOpNode):
  __slots__ = ()

  operator = 'sqrt'
  op_type = UNARY_OP_MAP['sqrt']

  def to_sympy(self, symbol):
    return sp.sqrt(self.operand.to_sympy(symbol))


class CubeRoot(UnaryOpNode):
  __slots__ = ()

  operator = 'cbrt'
  op_type = UNARY_OP_MAP['cbrt']

  def to_sympy(self, symbol):
    return sp.real_root(self.operand.to_sympy(symbol), 3)


class NthRoot(UnaryOpNode):
  """R(x) = f(x) ^ (1 / n), n != 0"""

  __slots__ = ()

  operator = 'root'
  op_type = UNARY_OP_MAP['root']

  def __init__(self, n: float, f: Node):
    n = float(n)
    if n == 0.0:
      raise ValueError("NthRoot degree must be nonzero")
    super().__init__(f, n)

  @property
  def degree(self) -> float:
    return self.param

  def to_string(self) -> str:
    return f"root({self.operand.to_string()}, {_format_number(self.param)})"

  def to_sympy(self, symbol):
    return sp.Pow(self.operand.to_sympy(symbol), 1 / sp.Float(self.param))

  def copy(self) -> 'NthRoot':
    return NthRoot(self.param, self.operand.copy())

  def __repr__(self) -> str:
    return f"NthRoot({self.param!r}, {self.operand!r})"
