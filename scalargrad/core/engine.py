# scalargrad/core/engine.py
from __future__ import annotations
import numpy as np
from typing import Dict, List, Optional, Tuple

from .node import Node
from .op import Op
from . import config as config_mod


def topological_order(root: Node) -> List[Node]:
    """
    All distinct nodes reachable from `root`, operands before consumers.

    Nodes are visited once (identity based) with an explicit stack, then sorted
    by creation sequence: an operand always exists before the node that
    references it, so creation order is a valid topological order.
    """
    seen = {}
    stack = [root]
    while stack:
        v = stack.pop()
        if id(v) in seen:
            continue
        seen[id(v)] = v
        stack.extend(v.operands)
    return sorted(seen.values(), key=lambda v: v._seq)


def seed_gradient(node: Node, value: float = 1.0):
    """Assign the root gradient (dy/dy) before a backward pass."""
    node.gradient = np.float64(value)


def zero_grad(root: Node):
    """Set the gradient of every node reachable from `root` to zero."""
    for v in topological_order(root):
        v.gradient = np.float64(0.0)


def local_partials(node: Node) -> List[Tuple[Node, Optional[float]]]:
    """
    Local derivative of `node` with respect to each of its operands, in
    operand order. A partial of None means "no contribution" (the exponent
    branch of POW when the base is not positive).
    """
    op = node.op
    if op is Op.NONE:
        return []
    if op is Op.ADD:
        a, b = node.operands
        return [(a, 1.0), (b, 1.0)]
    if op is Op.MUL:
        a, b = node.operands
        return [(a, b.value), (b, a.value)]
    if op is Op.POW:
        base, expo = node.operands
        bv, ev = base.value, expo.value
        d_base = ev * np.power(bv, ev - 1.0)
        # ln(base) only defined for base > 0
        d_expo = node.value * np.log(bv) if bv > 0 else None
        return [(base, d_base), (expo, d_expo)]
    if op is Op.TANH:
        (a,) = node.operands
        return [(a, 1.0 - np.tanh(a.value) ** 2)]
    if op is Op.EXP:
        (a,) = node.operands
        return [(a, np.exp(a.value))]
    raise ValueError(f"no backward rule for operator {op}")


def backward(root: Node, mode: Optional[str] = None, verbose: Optional[bool] = None):
    """
    Propagate `root.gradient` to every node reachable from `root`.

    Args:
        root: node to differentiate; its gradient must already be seeded
              (see `seed_gradient`), otherwise ValueError is raised.
        mode: 'topological' or 'recursive'; defaults to the active EngineConfig.
        verbose: print diagnostics; defaults to the active EngineConfig.

    Notes:
        - Gradients are only ever accumulated (+=). Call `zero_grad` between
          passes to start fresh.
        - NaN/inf values propagate without raising.
    """
    cfg = config_mod.get_config()
    mode = mode or cfg.backward_mode
    verbose = cfg.verbose if verbose is None else verbose

    if root.gradient == 0:
        raise ValueError(
            "root gradient is zero; call seed_gradient(root, 1.0) before backward()"
        )

    with np.errstate(all="ignore"):
        if mode == "topological":
            _backward_topological(root, verbose)
        elif mode == "recursive":
            if verbose:
                print(f"[backward] mode=recursive seed={float(root.gradient):.6g}")
            _backward_recursive(root, verbose)
        else:
            raise ValueError(f"Unknown backward mode: {mode}")


def _backward_topological(root: Node, verbose: bool):
    order = topological_order(root)
    if verbose:
        print(f"[backward] mode=topological nodes={len(order)} seed={float(root.gradient):.6g}")

    # Adjoints produced by this pass only; added onto node.gradient at the end
    pending: Dict[int, float] = {id(root): root.gradient}
    for v in reversed(order):
        g = pending.get(id(v), 0.0)
        if g == 0:
            continue  # nothing to propagate
        for p, a in local_partials(v):
            if a is None:
                continue
            pending[id(p)] = pending.get(id(p), 0.0) + g * a

    for v in order:
        if v is root:
            continue
        v.gradient = v.gradient + pending.get(id(v), 0.0)


def _backward_recursive(node: Node, verbose: bool):
    # Reproduces the unguarded walk: a shared node is re-entered once per
    # incoming edge and re-propagates its whole accumulated gradient.
    partials = local_partials(node)
    if node.op in (Op.MUL, Op.POW):
        for p, a in partials:
            if a is not None:
                p.gradient = p.gradient + node.gradient * a
        for p, _ in partials:
            _backward_recursive(p, verbose)
    else:
        for p, a in partials:
            p.gradient = p.gradient + node.gradient * a
            _backward_recursive(p, verbose)
    if verbose and node.is_leaf:
        print(f"[backward] leaf {node.label or '?'} grad={float(node.gradient):.6g}")
