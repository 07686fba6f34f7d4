# scalar_autodiff/nn/layer.py
from typing import List, Optional, Sequence

import numpy as np

from ..core.var import Value
from ..ops.arithmetic import _as_value
from .module import Module, default_rng
from .neuron import Neuron


class Layer(Module):
    """`out_feat` independent neurons applied to the same input vector."""

    def __init__(self, in_feat: int, out_feat: int, rng: Optional[np.random.Generator] = None):
        rng = default_rng(rng)
        self.in_feat = in_feat
        self.out_feat = out_feat
        self.neurons = [Neuron(in_feat, rng=rng) for _ in range(out_feat)]

    def __call__(self, x: Sequence) -> List[Value]:
        # wrap once so every neuron shares the same input leaves
        x = [_as_value(xi) for xi in x]
        return [neuron(x) for neuron in self.neurons]

    def parameters(self) -> List[Value]:
        return [p for neuron in self.neurons for p in neuron.parameters()]

    def __repr__(self):
        return f"Layer(in_feat={self.in_feat}, out_feat={self.out_feat})"
