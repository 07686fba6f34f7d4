# scalar_autodiff/core/var.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Any, Optional, Tuple

from .node import OpTag, ARITY
from . import tape as tape_mod  # module access for use_tape() compatibility


class Value:
    """
    One scalar node of the computation graph.

    Attributes
    ----------
    data : np.float64
        Forward (primal) value. Read-only once constructed.
    grad : np.float64
        Gradient accumulator, 0 on construction. The only mutable field; it is
        written by backward rules during a pass and by zero_grad.
    parents : Tuple[Value, ...]
        Operands this node was computed from, in operand order (empty for leaves).
    op : OpTag
        Primitive that produced this node.
    aux : float | None
        Per-primitive payload read by the backward rule: the exponent for pow,
        the derivative offset for log.
    name : Optional[str]
        Optional debug/pretty-print name.
    """

    __slots__ = ("_data", "grad", "_parents", "_op", "_aux", "name")

    def __init__(self, data: Any, _parents: Tuple["Value", ...] = (), _op: OpTag = OpTag.LEAF,
                 _aux: Optional[float] = None, *, name: Optional[str] = None):
        # Scalars only: vectors are out of scope for this engine
        if isinstance(data, (bool, np.bool_)) or not isinstance(data, numbers.Real):
            raise TypeError(f"Value only accepts real scalars, but got {type(data)}")
        if len(_parents) != ARITY[_op]:
            raise ValueError(f"op {_op} takes {ARITY[_op]} parents, got {len(_parents)}")

        self._data = np.float64(data)
        self.grad = np.float64(0.0)
        self._parents = tuple(_parents)
        self._op = _op
        self._aux = _aux
        self.name = name

        if tape_mod.global_tape is not None:
            tape_mod.global_tape.push_node(self)

    @property
    def data(self) -> np.float64:
        return self._data

    @property
    def parents(self) -> Tuple["Value", ...]:
        return self._parents

    @property
    def op(self) -> OpTag:
        return self._op

    @property
    def aux(self) -> Optional[float]:
        return self._aux

    @property
    def is_leaf(self) -> bool:
        return not self._parents

    def __float__(self):
        return float(self._data)

    def __repr__(self):
        label = f", name={self.name!r}" if self.name is not None else ""
        return f"Value(data={self._data:g}, grad={self.grad:g}{label})"

    def backward(self, *, verbose: bool = False):
        from .engine import run_backward
        return run_backward(self, verbose=verbose)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def sigmoid(self):
        from ..ops.transcendental import sigmoid
        return sigmoid(self)

    def log(self):
        from ..ops.transcendental import log
        return log(self)
