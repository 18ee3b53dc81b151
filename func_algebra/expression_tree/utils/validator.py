import numpy as np
from typing import List, Optional, Sequence
from ..core.node import (
  Node, Constant, BinaryOpNode, UnaryOpNode,
  ExpWithBase, LogWithBase
)
from ...logging_system import LogLevel, log_info, log_warning, log_debug


class DomainViolationError(ValueError):
  """A node turned finite operands into a non-finite result"""

  def __init__(self, node: Node, operand_values: Sequence[float], result: float):
    self.node = node
    self.operand_values = tuple(operand_values)
    self.result = result
    operands = ", ".join(f"{v:g}" for v in self.operand_values)
    super().__init__(f"{node.to_string()} is undefined for operand(s) {operands} (got {result})")


class ExpressionValidator:
  """Opt-in checks layered on top of the unchecked evaluation core.

  Node.evaluate never consults this class; domain violations there stay
  NaN/inf. Use evaluate_checked() where an exception is wanted instead.
  """

  def __init__(self, max_magnitude: float = 1e10, sample_size: int = 10):
    self.max_magnitude = max_magnitude
    self.sample_size = sample_size

  def find_parameter_issues(self, node: Node) -> List[str]:
    issues = []
    self._collect_parameter_issues(node, issues)
    for issue in issues:
      log_warning(issue)
    return issues

  def _collect_parameter_issues(self, node: Node, issues: List[str]):
    if isinstance(node, Constant):
      if not np.isfinite(node.value):
        issues.append(f"non-finite constant {node.value}")

    elif isinstance(node, UnaryOpNode):
      if not np.isfinite(node.param):
        issues.append(f"non-finite parameter {node.param} in {node.to_string()}")
      elif isinstance(node, LogWithBase) and (node.base <= 0 or node.base == 1):
        issues.append(f"invalid logarithm base {node.base:g} in {node.to_string()}")
      elif isinstance(node, ExpWithBase) and node.base < 0:
        issues.append(f"negative exponential base {node.base:g} in {node.to_string()}")

    for child in node.children:
      self._collect_parameter_issues(child, issues)

  def is_valid_expression(self, node: Node, X: Optional[np.ndarray] = None) -> bool:
    valid = not self.find_parameter_issues(node)

    if valid and X is not None:
      valid = self._test_evaluation(node, np.asarray(X, dtype=np.float64))

    log_info(f"{node.to_string()}: {'valid' if valid else 'invalid'}", LogLevel.DETAILED)
    return valid

  def _test_evaluation(self, node: Node, X: np.ndarray) -> bool:
    X = X.ravel()
    if len(X) > self.sample_size:
      sample_indices = np.random.choice(len(X), self.sample_size, replace=False)
      X = X[sample_indices]

    with np.errstate(all='ignore'):
      result = node.evaluate(X)

    if np.any(~np.isfinite(result)):
      log_debug(f"{node.to_string()} produced non-finite values on sample inputs")
      return False

    if np.any(np.abs(result) > self.max_magnitude):
      log_debug(f"{node.to_string()} exceeded magnitude {self.max_magnitude:g}")
      return False

    return True

  def evaluate_checked(self, node: Node, x: float) -> float:
    """Evaluate node at x, raising at the innermost domain violation."""
    if isinstance(node, BinaryOpNode):
      left_val = self.evaluate_checked(node.left, x)
      right_val = self.evaluate_checked(node.right, x)
      operand_values = (left_val, right_val)
      result = float(node.combine(left_val, right_val))
    elif isinstance(node, UnaryOpNode):
      operand_val = self.evaluate_checked(node.operand, x)
      operand_values = (operand_val,)
      result = float(node.apply(operand_val))
    else:
      return float(node.evaluate(x))

    if not np.isfinite(result) and all(np.isfinite(v) for v in operand_values):
      error = DomainViolationError(node, operand_values, result)
      log_debug(str(error))
      raise error
    return result
