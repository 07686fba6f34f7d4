"""
Numerical configuration shared by the primitives and the gradient helpers.

The active configuration is module state swapped by ``use_numerics``, in the
same way the active tape is swapped by ``use_tape``.
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class NumericsConfig:
    """
    Attributes:
        log_forward_eps: offset added inside ln() in the forward value of log
        log_backward_eps: offset added to the denominator of log's derivative
        fd_step: central-difference step used by numerical_grad
        fd_tolerance: absolute tolerance used by check_grad
    """
    log_forward_eps: float = 1e-10
    log_backward_eps: float = 1e-8
    fd_step: float = 1e-6
    fd_tolerance: float = 1e-4

    def unified(self) -> "NumericsConfig":
        """Copy whose log derivative uses the same offset as the forward value."""
        return replace(self, log_backward_eps=self.log_forward_eps)


DEFAULT_NUMERICS = NumericsConfig()

numerics: NumericsConfig = DEFAULT_NUMERICS


def get_numerics() -> NumericsConfig:
    return numerics


@contextmanager
def use_numerics(config: Optional[NumericsConfig] = None, **overrides):
    """
    Temporarily switch the active numerics:
        with use_numerics(log_backward_eps=1e-10):
            y = log(x)
    """
    from . import config as _config_mod
    prev = _config_mod.numerics
    base = config if config is not None else prev
    try:
        _config_mod.numerics = replace(base, **overrides) if overrides else base
        yield _config_mod.numerics
    finally:
        _config_mod.numerics = prev
