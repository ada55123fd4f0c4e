# scalargrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Every helper clears the gradients of the graph
# it differentiates before seeding, so no gradient state leaks between calls,
# even when the caller passes in existing Nodes.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional
import numpy as np

from .node import Node
from .engine import seed_gradient, backward, zero_grad


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, name: str) -> Node:
    """Wrap a plain value as a labeled leaf if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else Node(v, label=name)


def _run(y: Any, mode: Optional[str]):
    if not isinstance(y, Node):
        raise ValueError(f"expected the function to return a Node, got {type(y)}")
    zero_grad(y)
    seed_gradient(y, 1.0)
    backward(y, mode=mode)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: float, *, mode: Optional[str] = None) -> float:
    """
    Gradient of a scalar function y=f(x) at x0 (single input).
    Runs one backward pass over a freshly built graph.
    """
    x = _ensure_node(x0, name="x")
    y = f(x)
    _run(y, mode)
    return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, float], *, mode: Optional[str] = None) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE backward pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: numeric}  # gradients in the same key order as `inputs`
    """
    vars_ad: Dict[str, Node] = {
        k: _ensure_node(v, name=k) for k, v in inputs.items()
    }
    y = f(vars_ad)
    _run(y, mode)
    return {k: vars_ad[k].gradient for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[float], *, mode: Optional[str] = None) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = f(xs)
    _run(y, mode)
    return [x.gradient for x in xs]


# ----------------------------- finite differences ----------------------------- #
def numerical_grads(f: Callable[[Dict[str, Node]], Node],
                    inputs: Dict[str, float], eps: float = 1e-6) -> Dict[str, float]:
    """
    Central-difference estimate of ∂y/∂var for every input:
        [f(x + eps) - f(x - eps)] / (2 eps)
    Each bump re-evaluates f on a fresh graph; only forward values are used.
    """
    def _eval(point: Dict[str, float]) -> float:
        return float(value(f({k: Node(v, label=k) for k, v in point.items()})))

    out = {}
    for k, x in inputs.items():
        up = dict(inputs, **{k: x + eps})
        dn = dict(inputs, **{k: x - eps})
        out[k] = (_eval(up) - _eval(dn)) / (2.0 * eps)
    return out


def check_grads(f: Callable[[Dict[str, Node]], Node],
                inputs: Dict[str, float], eps: float = 1e-6, tol: float = 1e-4,
                *, mode: Optional[str] = None, verbose: bool = False) -> bool:
    """
    Compare backward gradients against central differences.
    Returns True when every component matches within `tol` (absolute).
    """
    ad = grads(f, inputs, mode=mode)
    fd = numerical_grads(f, inputs, eps)
    ok = True
    for k in inputs.keys():
        err = abs(float(ad[k]) - fd[k])
        if not np.isfinite(err) or err > tol:
            ok = False
        if verbose:
            print(f"[check_grads] {k}: backward={float(ad[k]):.8f} fd={fd[k]:.8f} err={err:.2e}")
    return ok
