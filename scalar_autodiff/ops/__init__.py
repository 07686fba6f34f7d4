# scalar_autodiff/ops/__init__.py

# Convenience re-exports so users can do: from scalar_autodiff.ops import mul, log, ...
from .arithmetic import make_node, add, sub, mul, pow, neg, div
from .transcendental import sigmoid, log

__all__ = [
    "make_node",
    "add", "sub", "mul", "pow", "neg", "div",
    "sigmoid", "log",
]
