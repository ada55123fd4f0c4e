# scalargrad/core/__init__.py

"""
Core public API for the scalargrad package.

Exports:
    Node              : Scalar value plus its provenance in the expression graph.
    Op                : Closed set of operator tags (NONE, ADD, MUL, POW, TANH, EXP).
    EngineConfig      : Backward mode / verbosity settings.
    use_config        : Context manager to temporarily switch the active config.
    seed_gradient     : Assign the root gradient before a backward pass.
    backward          : Propagate gradients from a root to every reachable node.
    zero_grad         : Reset all gradients reachable from a root.
    topological_order : Distinct reachable nodes, operands first.
    grad, grads       : Convenience: gradients of a function at a point.
    value             : Convenience: extract the primal value from a Node.
"""

from .op import Op
from .node import Node
from .config import EngineConfig, use_config, get_config
from .engine import seed_gradient, backward, zero_grad, topological_order, local_partials
from .seeds import grad, grads, grads_list, value, numerical_grads, check_grads
from .graph_utils import render, print_graph, get_graph_stats, print_graph_summary

__all__ = [
    "Op", "Node",
    "EngineConfig", "use_config", "get_config",
    "seed_gradient", "backward", "zero_grad", "topological_order", "local_partials",
    "grad", "grads", "grads_list", "value", "numerical_grads", "check_grads",
    "render", "print_graph", "get_graph_stats", "print_graph_summary",
]
