import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  IDENTITY = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  SUM = 0
  PRODUCT = 1
  # Unary ops
  POW = 2
  EXP_BASE = 3
  EXP = 4
  LOG_BASE = 5
  LOG = 6
  SIN = 7
  COS = 8
  TAN = 9
  ASIN = 10
  ACOS = 11
  ATAN = 12
  SQRT = 13
  CBRT = 14
  NTH_ROOT = 15

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.SUM, '*': OpType.PRODUCT}
UNARY_OP_MAP = {
    '^': OpType.POW, 'exp_base': OpType.EXP_BASE, 'exp': OpType.EXP,
    'log_base': OpType.LOG_BASE, 'log': OpType.LOG,
    'sin': OpType.SIN, 'cos': OpType.COS, 'tan': OpType.TAN,
    'asin': OpType.ASIN, 'acos': OpType.ACOS, 'atan': OpType.ATAN,
    'sqrt': OpType.SQRT, 'cbrt': OpType.CBRT, 'root': OpType.NTH_ROOT
}

# Kernels use the numpy error model and no fastmath: division by zero must
# give inf and NaN/inf must propagate instead of raising or being folded.

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.SUM:
    return left_val + right_val
  elif op_type == OpType.PRODUCT:
    return left_val * right_val
  return left_val * np.nan

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type, param):
  if op_type == OpType.POW:
    return np.power(operand_val, param)
  elif op_type == OpType.EXP_BASE:
    return np.power(param, operand_val)
  elif op_type == OpType.EXP:
    return np.exp(operand_val)
  elif op_type == OpType.LOG_BASE:
    return np.log(operand_val) / np.log(param)
  elif op_type == OpType.LOG:
    return np.log(operand_val)
  elif op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  elif op_type == OpType.TAN:
    return np.tan(operand_val)
  elif op_type == OpType.ASIN:
    return np.arcsin(operand_val)
  elif op_type == OpType.ACOS:
    return np.arccos(operand_val)
  elif op_type == OpType.ATAN:
    return np.arctan(operand_val)
  elif op_type == OpType.SQRT:
    return np.sqrt(operand_val)
  elif op_type == OpType.CBRT:
    # Real cube root, negative for negative operands
    return np.cbrt(operand_val)
  elif op_type == OpType.NTH_ROOT:
    return np.power(operand_val, 1.0 / param)
  return operand_val * np.nan
