# scalar_autodiff/core/tape.py
from __future__ import annotations
from typing import List, Optional
from contextlib import contextmanager


class Tape:
    """
    Records every Value created while it is active, in forward order.

    Recording is optional: gradients never depend on a tape. It exists to
    inspect a forward pass (graph statistics) and to reset every node of a
    pass in one call (``engine.zero_adjoints``).
    """
    def __init__(self):
        self.nodes: List = []

    def __len__(self):
        return len(self.nodes)

    def reset(self):
        self.nodes.clear()

    def push_node(self, value):
        """Append a Value to the tape."""
        self.nodes.append(value)

    def leaves(self) -> List:
        return [v for v in self.nodes if not v.parents]


# Active tape; None means nothing is recorded.
global_tape: Optional[Tape] = None


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to record a forward pass on a tape (a fresh one by default):
        with use_tape() as tape:
            ... build computation ...
            run_backward(y)
    """
    from . import tape as _tape_mod  # module access so Value() sees the swap
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
