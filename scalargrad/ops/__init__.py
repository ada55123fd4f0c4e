# scalargrad/ops/__init__.py

# Convenience re-exports so users can do: from scalargrad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import exp, tanh

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "tanh",
]
