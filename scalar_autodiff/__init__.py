# scalar_autodiff/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import OpTag
from .core.var import Value
from .core.tape import Tape, use_tape
from .core.config import NumericsConfig, use_numerics, get_numerics
from .core.engine import (
    run_backward,
    topological_order,
    zero_grad,
    zero_adjoints,
)
from .core.seeds import grad, grads, grads_list, numerical_grad, check_grad, value
from .core.graph_utils import format_graph, print_graph, get_graph_stats, print_graph_summary

from .ops import make_node, add, sub, mul, pow, neg, div, sigmoid, log

# Neural-network composition on top of the engine
from . import nn
from .nn import Module, Neuron, Layer, MLP

__version__ = "0.1.0"

__all__ = [
    # Core
    'OpTag',
    'Value',
    'Tape',
    'use_tape',
    'NumericsConfig',
    'use_numerics',
    'get_numerics',
    # Engine
    'run_backward',
    'topological_order',
    'zero_grad',
    'zero_adjoints',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'numerical_grad',
    'check_grad',
    'value',
    'format_graph',
    'print_graph',
    'get_graph_stats',
    'print_graph_summary',
    # Ops
    'make_node',
    'add',
    'sub',
    'mul',
    'pow',
    'neg',
    'div',
    'sigmoid',
    'log',
    # NN
    'nn',
    'Module',
    'Neuron',
    'Layer',
    'MLP',
]
