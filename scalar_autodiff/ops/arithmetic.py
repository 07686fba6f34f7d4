# scalar_autodiff/ops/arithmetic.py
import numbers
import numpy as np
from typing import Optional
from ..core.var import Value
from ..core.node import OpTag


def _as_value(x):
    """Ensure x is a Value; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Value) else Value(x)


def make_node(value, name: Optional[str] = None) -> Value:
    """Leaf construction: an input or a parameter."""
    return Value(value, name=name)


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - computes out.data = f(x.data, y.data)
      - records (x, y) as ordered parents; the engine reads them back by position
    """
    x = _as_value(x)
    y = _as_value(y)
    with np.errstate(all="ignore"):
        data = f(x.data, y.data)
    return Value(data, (x, y), tag)


def add(x, y): return _binary(x, y, lambda a, b: a + b, OpTag.ADD)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, OpTag.SUB)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, OpTag.MUL)


def pow(x, exponent):
    """
    Power with a constant exponent:
      out.data = x.data ** exponent
      ∂out/∂x  = exponent * x^(exponent-1)

    The exponent is a plain number, never a node. 0 ** negative gives inf
    (NumPy semantics) instead of raising.
    """
    if isinstance(exponent, (Value, bool, np.bool_)) or not isinstance(exponent, numbers.Real):
        raise TypeError(f"pow exponent must be a plain number, but got {type(exponent)}")
    x = _as_value(x)
    exponent = float(exponent)
    with np.errstate(all="ignore"):
        data = np.power(x.data, exponent)
    return Value(data, (x,), OpTag.POW, exponent)


def neg(x):
    """Unary negation, recorded as mul(x, -1)."""
    return mul(x, -1.0)


def div(x, y):
    """Division, recorded as mul(x, pow(y, -1))."""
    return mul(x, pow(y, -1.0))
