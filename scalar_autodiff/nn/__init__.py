"""
Neural-network composition built on the scalar engine.

- Neuron: weighted sum of inputs plus bias
- Layer: parallel fan-out of neurons over one input vector
- MLP: sequential chain of layers
"""

from .module import Module
from .neuron import Neuron
from .layer import Layer
from .mlp import MLP

__all__ = ['Module', 'Neuron', 'Layer', 'MLP']
