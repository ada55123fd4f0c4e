# scalargrad/core/node.py
from __future__ import annotations
import itertools
import numpy as np
from typing import Any, Optional, Tuple

from .op import Op

# Creation counter; operands always carry a smaller sequence number than the
# node that references them.
_seq_counter = itertools.count()

_NUMERIC = (int, float, np.integer, np.floating)


class Node:
    """
    A scalar value plus its provenance in the expression graph.

    Attributes
    ----------
    value : np.float64
        Forward (primal) value. Read-only once the node exists.
    gradient : np.float64
        Gradient accumulator (∂root/∂this), starts at 0.
    op : Op
        Operator that produced this node; Op.NONE for leaves.
    operands : tuple[Node, ...]
        Direct inputs in insertion order (left, right) or (base, exponent).
        The same node may appear twice, e.g. for `a * a`.
    label : str
        Optional debug/pretty-print name.
    """

    def __init__(self, value: Any, label: str = ""):
        # Only plain numeric scalars are accepted; arrays are out of scope
        if isinstance(value, bool) or not isinstance(value, _NUMERIC):
            raise TypeError(
                f"Node only accepts numeric scalars (int, float), but got {type(value)}"
            )
        self._value = np.float64(value)
        self._op = Op.NONE
        self._operands: Tuple[Node, ...] = ()
        self._seq = next(_seq_counter)
        self.gradient = np.float64(0.0)
        self.label = label

    @classmethod
    def _from_op(cls, value, op: Op, operands: Tuple["Node", ...], label: str = "") -> "Node":
        """Allocate the result node of `op` applied to `operands`."""
        if len(operands) != op.arity:
            raise ValueError(
                f"operator {op.name} expects {op.arity} operand(s), got {len(operands)}"
            )
        for operand in operands:
            if not isinstance(operand, Node):
                raise TypeError(f"operands must be Node instances, got {type(operand)}")
        out = cls(float(value), label)
        out._op = op
        out._operands = tuple(operands)
        return out

    # Forward state is fixed at creation
    @property
    def value(self) -> np.float64:
        return self._value

    @property
    def op(self) -> Op:
        return self._op

    @property
    def operands(self) -> Tuple["Node", ...]:
        return self._operands

    @property
    def is_leaf(self) -> bool:
        return self._op.is_leaf

    def __repr__(self):
        op = self._op.tag or "leaf"
        return f"Node(value={self._value:.4f}, grad={self.gradient:.4f}, op={op!r}, label={self.label!r})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def backward(self, seed: float = 1.0, mode: Optional[str] = None):
        """Seed this node's gradient and run a backward pass from it."""
        from .engine import seed_gradient, backward
        seed_gradient(self, seed)
        backward(self, mode=mode)
