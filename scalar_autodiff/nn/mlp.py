# scalar_autodiff/nn/mlp.py
from typing import List, Optional, Sequence

import numpy as np

from ..core.var import Value
from .module import Module, default_rng
from .layer import Layer


class MLP(Module):
    """
    Sequential chain of layers: the outputs of one layer are the inputs of
    the next.

    Example:
        MLP(3, [3, 2, 1]) has layers 3->3, 3->2, 2->1 and 23 parameters.
    """

    def __init__(self, in_feat: int, out_features: Sequence[int],
                 rng: Optional[np.random.Generator] = None):
        if len(out_features) == 0:
            raise ValueError("MLP needs at least one layer size")
        rng = default_rng(rng)
        self.in_feat = in_feat
        self.out_features = list(out_features)
        sizes = [in_feat] + self.out_features
        self.layers = [Layer(sizes[i], sizes[i + 1], rng=rng) for i in range(len(self.out_features))]

    def __call__(self, x: Sequence) -> List[Value]:
        output = list(x)
        for layer in self.layers:
            output = layer(output)
        return output

    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP(in_feat={self.in_feat}, out_features={self.out_features})"
