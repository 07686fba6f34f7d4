# scalar_autodiff/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. The central-difference helpers below give an
# independent estimate of the same partials for checking.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence
import numpy as np

from .var import Value
from . import config as config_mod
from .engine import run_backward


def value(x: Any) -> Any:
    """Return the numeric value of a Value; pass through plain numbers unchanged."""
    return x.data if isinstance(x, Value) else x


def _ensure_value(v: Any, *, name: str) -> Value:
    """Wrap a plain number as a fresh leaf if needed; otherwise return the Value itself."""
    return v if isinstance(v, Value) else Value(v, name=name)


def _as_output(y: Any, caller: str) -> Value:
    if isinstance(y, (list, tuple)):
        if len(y) != 1:
            raise ValueError(f"{caller} expects scalar output, got {len(y)} outputs.")
        y = y[0]
    if not isinstance(y, Value):
        y = Value(y, name="y")
    return y


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Value], Value], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input), from one
    reverse pass over a freshly built graph.
    """
    x = _ensure_value(x0, name="x")
    y = _as_output(f(x), "grad(f, x0)")
    run_backward(y)
    return float(x.grad)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Value]], Value],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar-output function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Value} and returning a scalar Value
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    vars_v: Dict[str, Value] = {k: _ensure_value(v, name=k) for k, v in inputs.items()}
    y = _as_output(f(vars_v), "grads(f, inputs)")
    run_backward(y)
    return {k: float(vars_v[k].grad) for k in inputs.keys()}


def grads_list(f: Callable[[List[Value]], Value],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Value] = [_ensure_value(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _as_output(f(xs), "grads_list(f, x0_list)")
    run_backward(y)
    return [float(x.grad) for x in xs]


# ------------------------- finite-difference checking ------------------------- #
def numerical_grad(f: Callable[[List[Value]], Value],
                   x0_list: Sequence[float],
                   eps: Optional[float] = None) -> np.ndarray:
    """
    Central-difference estimate of ∂f/∂x_i at x0_list:

        [f(x + eps*e_i) - f(x - eps*e_i)] / (2*eps)

    `f` is called on fresh leaves for every bump (2n forward passes), so it can
    be the same function handed to grads_list().
    """
    eps = eps if eps is not None else config_mod.numerics.fd_step
    x0 = np.asarray(x0_list, dtype=np.float64)

    def _eval(x: np.ndarray) -> float:
        y = _as_output(f([Value(xi) for xi in x]), "numerical_grad(f, x0_list)")
        return float(y.data)

    out = np.zeros_like(x0)
    for i in range(x0.size):
        x_up = x0.copy()
        x_dn = x0.copy()
        x_up[i] += eps
        x_dn[i] -= eps
        out[i] = (_eval(x_up) - _eval(x_dn)) / (2 * eps)
    return out


def check_grad(f: Callable[[List[Value]], Value],
               x0_list: Sequence[float],
               tol: Optional[float] = None,
               eps: Optional[float] = None,
               verbose: bool = False) -> bool:
    """
    Compare reverse-mode partials with the central-difference estimate.

    Returns True when every component agrees within `tol` (absolute, default
    from the active numerics).
    """
    tol = tol if tol is not None else config_mod.numerics.fd_tolerance
    analytic = np.asarray(grads_list(f, x0_list), dtype=np.float64)
    numeric = numerical_grad(f, x0_list, eps=eps)
    err = np.abs(analytic - numeric)
    max_err = float(err.max()) if err.size else 0.0

    if verbose:
        print(f"  Gradient check: {analytic.size} inputs, max |AAD - FD| = {max_err:.3e} (tol={tol:g})")

    return bool(np.all(err <= tol))
