# scalar_autodiff/nn/neuron.py
from typing import List, Optional, Sequence

import numpy as np

from ..core.var import Value
from ..ops.arithmetic import add, mul, _as_value
from .module import Module, default_rng


class Neuron(Module):
    """
    Weighted sum of the inputs plus a bias: w·x + b.

    No activation is applied; callers apply one on the returned node if they
    want it (e.g. ``neuron(x).sigmoid()``).

    Attributes:
        w (List[Value]): one weight leaf per input, drawn from U(-1, 1)
        b (Value): bias leaf, drawn from U(-1, 1)
    """

    def __init__(self, n_inputs: int, rng: Optional[np.random.Generator] = None):
        if n_inputs < 1:
            raise ValueError(f"Neuron needs at least one input, got {n_inputs}")
        rng = default_rng(rng)
        self.n_inputs = n_inputs
        self.w = [Value(rng.uniform(-1.0, 1.0), name=f"w{i}") for i in range(n_inputs)]
        self.b = Value(rng.uniform(-1.0, 1.0), name="b")

    def __call__(self, x: Sequence) -> Value:
        if len(x) != self.n_inputs:
            raise ValueError(f"Neuron expects {self.n_inputs} inputs, got {len(x)}")
        out = mul(self.w[0], _as_value(x[0]))
        for wi, xi in zip(self.w[1:], x[1:]):
            out = add(out, mul(wi, _as_value(xi)))
        return add(out, self.b)

    def parameters(self) -> List[Value]:
        return self.w + [self.b]

    def __repr__(self):
        return f"Neuron(n_inputs={self.n_inputs})"
