"""
Base abstract class for network components.

Every component owns a set of parameter leaves and exposes them as one flat,
order-stable list. Gradients are read from (and reset on) those leaves; the
components contain no graph algorithms of their own.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from ..core.var import Value
from ..core.engine import zero_grad


def default_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    """Return `rng`, or a fresh unseeded generator when none is given."""
    return rng if rng is not None else np.random.default_rng()


class Module(ABC):
    """
    Abstract base class for Neuron, Layer and MLP.
    """

    @abstractmethod
    def parameters(self) -> List[Value]:
        """Every weight/bias leaf owned by this component, in a fixed order."""

    @abstractmethod
    def __call__(self, x):
        """Forward pass over a sequence of inputs (Values or plain numbers)."""

    def zero_grad(self):
        zero_grad(self.parameters())

    def num_parameters(self) -> int:
        return len(self.parameters())
