# scalar_autodiff/ops/transcendental.py
import numpy as np
from ..core.var import Value
from ..core.node import OpTag
from ..core import config as config_mod  # module access for use_numerics() compatibility
from .arithmetic import _as_value


def sigmoid(x):
    """
    Logistic function, evaluated on the branch that cannot overflow:
      x >= 0 : 1 / (1 + exp(-x))
      x <  0 : exp(x) / (1 + exp(x))
    """
    x = _as_value(x)
    if x.data >= 0:
        s = 1.0 / (1.0 + np.exp(-x.data))
    else:
        ex = np.exp(x.data)
        s = ex / (1.0 + ex)
    return Value(s, (x,), OpTag.SIGMOID)


def log(x):
    """
    Natural log with an offset guarding log(0):
      out.data = ln(x + log_forward_eps)

    The derivative offset (log_backward_eps) is captured now, so changing the
    active numerics later does not change this node's gradient. Arguments at or
    below -log_forward_eps give -inf/nan without raising.
    """
    x = _as_value(x)
    cfg = config_mod.numerics
    with np.errstate(all="ignore"):
        data = np.log(x.data + cfg.log_forward_eps)
    return Value(data, (x,), OpTag.LOG, cfg.log_backward_eps)
