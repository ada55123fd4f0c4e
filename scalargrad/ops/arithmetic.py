# scalargrad/ops/arithmetic.py
import numpy as np
from ..core.node import Node
from ..core.op import Op


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a constant leaf labeled 'scalar'."""
    return x if isinstance(x, Node) else Node(x, label="scalar")


def _binary(x, y, f, op):
    """
    Generic binary primitive:
      - promotes literal operands to leaves
      - computes out.value = f(x.value, y.value) with IEEE semantics (NaN/inf, no raise)
      - records (x, y) in that order as the operands of the new node
    """
    x = _as_node(x)
    y = _as_node(y)
    with np.errstate(all="ignore"):
        val = f(x.value, y.value)
    return Node._from_op(val, op, (x, y))


def add(x, y): return _binary(x, y, lambda a, b: a + b, Op.ADD)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Op.MUL)


def pow(x, y):
    """
    Power: out.value = x.value ** y.value

    A negative base with a non-integral exponent gives NaN, 0 ** negative
    gives inf; neither raises.
    """
    return _binary(x, y, np.power, Op.POW)


def neg(x):
    """Unary negation, recorded as x * -1."""
    return mul(x, -1.0)


def sub(x, y):
    """x - y, recorded as x + (y * -1)."""
    return add(x, neg(y))


def div(x, y):
    """x / y, recorded as x * (y ** -1)."""
    return mul(x, pow(y, -1.0))
