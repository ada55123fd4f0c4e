# scalargrad/ops/transcendental.py
import numpy as np
from ..core.node import Node
from ..core.op import Op
from .arithmetic import _as_node


def exp(x):
    x = _as_node(x)
    with np.errstate(all="ignore"):
        ex = np.exp(x.value)
    return Node._from_op(ex, Op.EXP, (x,))


def tanh(x):
    x = _as_node(x)
    return Node._from_op(np.tanh(x.value), Op.TANH, (x,))
