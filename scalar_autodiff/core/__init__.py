# scalar_autodiff/core/__init__.py

"""
Core public API of the engine.

Exports:
    Value         : The scalar graph node.
    OpTag         : Tag of the primitive that produced a node.
    Tape          : Optional recorder of the nodes created in a forward pass.
    use_tape      : Context manager to record on a (fresh) tape.
    run_backward  : Run a single reverse pass from a scalar output.
    zero_grad     : Reset the gradients of the given nodes.
    zero_adjoints : Reset the gradients of every node on the active tape.
    grad, grads   : Convenience: gradients of a function at a point.
    value         : Convenience: extract the primal value from a Value.
"""

from .node import OpTag
from .var import Value
from .tape import Tape, use_tape
from .config import NumericsConfig, use_numerics, get_numerics
from .engine import run_backward, topological_order, zero_grad, zero_adjoints
from .seeds import grad, grads, grads_list, numerical_grad, check_grad, value
