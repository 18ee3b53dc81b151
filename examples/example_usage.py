import math

import numpy as np
from func_algebra import (
  Expression, Identity, Constant, Sum, Product, Power, Sine, ExpNatural,
  LogNatural, SquareRoot, NthRoot, ExpressionValidator, DomainViolationError
)

def build_damped_wave():
  """exp(-x^2 / 4) * sin(3x)"""
  x = Identity()
  envelope = ExpNatural(Product(Constant(-0.25), Power(x, 2.0)))
  return Expression(Product(envelope, Sine(Product(Constant(3.0), x))))

def main():
  wave = build_damped_wave()
  print(f"f(x) = {wave}")
  for x in [0.0, 0.5, 1.0, 2.0]:
    print(f"f({x}) = {wave(x):.6f}")

  xs = np.linspace(-2, 2, 5)
  print("Vectorised:", wave.evaluate(xs))
  print("SymPy form:", wave.to_sympy())

  # Operator sugar builds the same node kinds
  x = Identity()
  poly = Expression(x ** 2 - 3 * x + 2)
  print(f"{poly} at 1.5 = {poly(1.5)}")

  # Domain violations propagate as NaN unless the checked layer is used
  risky = Sum(LogNatural(Identity()), NthRoot(2.0, Identity()))
  print(f"{risky.to_string()} at -1 = {risky(-1.0)}")
  assert math.isnan(risky(-1.0))
  try:
    ExpressionValidator().evaluate_checked(SquareRoot(Identity()), -1.0)
  except DomainViolationError as e:
    print(f"Checked evaluation failed: {e}")

if __name__ == "__main__":
  main()
