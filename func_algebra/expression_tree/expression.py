import numpy as np
import sympy as sp
from typing import Callable, Optional, Union
from .core.node import Node

Real = Union[float, np.ndarray]


class Expression:
  """Root-owning wrapper around a node tree with cached text form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, x) -> Real:
    """Evaluate at a real scalar or element-wise over an array of inputs.

    Domain violations never raise; they show up as NaN or +/-inf.
    """
    if np.ndim(x) == 0:
      return float(self.root.evaluate(float(x)))
    X = np.asarray(x, dtype=np.float64)
    with np.errstate(all='ignore'):
      return np.asarray(self.root.evaluate(X), dtype=np.float64)

  def __call__(self, x) -> Real:
    return self.evaluate(x)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def to_sympy(self, symbol: Optional[sp.Symbol] = None) -> sp.Expr:
    if symbol is None:
      symbol = sp.Symbol('x', real=True)
    return self.root.to_sympy(symbol)

  # Function: lambda x -> y, vectorised through numpy
  def lambdify(self) -> Callable:
    symbol = sp.Symbol('x', real=True)
    return sp.lambdify(symbol, self.to_sympy(symbol), modules='numpy')

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"
