# scalar_autodiff/core/engine.py
from __future__ import annotations
import time
import numpy as np
from typing import Callable, Dict, Iterable, List, Optional

from .node import OpTag
from .tape import Tape
from . import tape as tape_mod
from .var import Value


def zero_grad(nodes: Iterable[Value]):
    """Set `grad` of every listed node to zero."""
    for v in nodes:
        v.grad = np.float64(0.0)


def zero_adjoints(tape: Optional[Tape] = None):
    """
    Set the gradient of every node recorded on `tape` (the active tape by
    default) to zero. Does nothing when no tape is recording.
    """
    tape = tape if tape is not None else tape_mod.global_tape
    if tape is None:
        return
    zero_grad(tape.nodes)


# ---------------- Local backward rules, one per OpTag ---------------- #
# Each rule reads out.grad (already fully accumulated) and adds into the
# gradients of out.parents, addressed by operand position.

def _backward_leaf(out: Value):
    pass


def _backward_add(out: Value):
    a, b = out.parents
    a.grad += out.grad
    b.grad += out.grad


def _backward_sub(out: Value):
    a, b = out.parents
    a.grad += out.grad
    b.grad -= out.grad


def _backward_mul(out: Value):
    a, b = out.parents
    g = out.grad
    # Read both operands before writing: in mul(x, x) a and b are the same node
    da, db = g * b.data, g * a.data
    a.grad += da
    b.grad += db


def _backward_sigmoid(out: Value):
    (a,) = out.parents
    s = out.data
    a.grad += out.grad * s * (1.0 - s)


def _backward_log(out: Value):
    (a,) = out.parents
    a.grad += out.grad / (a.data + out.aux)


def _backward_pow(out: Value):
    (a,) = out.parents
    k = out.aux
    a.grad += out.grad * k * np.power(a.data, k - 1.0)


_BACKWARD_RULES: Dict[OpTag, Callable[[Value], None]] = {
    OpTag.LEAF: _backward_leaf,
    OpTag.ADD: _backward_add,
    OpTag.SUB: _backward_sub,
    OpTag.MUL: _backward_mul,
    OpTag.SIGMOID: _backward_sigmoid,
    OpTag.LOG: _backward_log,
    OpTag.POW: _backward_pow,
}


def topological_order(root: Value) -> List[Value]:
    """
    Every node reachable from `root`, each exactly once, parents before the
    nodes built from them (root last).

    Post-order depth-first search with a visited set, iterative so that long
    chains (e.g. a neuron over many inputs) do not hit the recursion limit.
    """
    order: List[Value] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if node in visited:
            continue
        visited.add(node)
        stack.append((node, True))
        # reversed so the first operand is explored first
        for p in reversed(node.parents):
            if p not in visited:
                stack.append((p, False))
    return order


def run_backward(root: Value, *, verbose: bool = False) -> List[Value]:
    """
    Run a single reverse pass from `root`.

    Seeds root.grad = 1.0, then invokes every reachable node's rule exactly
    once, root first and leaves last, so each node has received all of its
    contributions before it propagates. Nodes that are not reachable from
    `root` are not touched. Gradients of reachable nodes accumulate on top of
    whatever they held: call zero_grad between passes that reuse nodes.

    Returns:
        The nodes in the order their rules were invoked.
    """
    start = time.perf_counter()

    order = topological_order(root)
    order.reverse()

    root.grad = np.float64(1.0)
    # non-finite values propagate silently
    with np.errstate(all="ignore"):
        for node in order:
            _BACKWARD_RULES[node.op](node)

    if verbose:
        elapsed_ms = (time.perf_counter() - start) * 1000
        n_leaves = sum(1 for v in order if v.is_leaf)
        print(f"  Backward: {len(order)} nodes ({n_leaves} leaves) in {elapsed_ms:.3f} ms")

    return order
