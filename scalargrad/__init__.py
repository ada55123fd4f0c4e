# scalargrad/__init__.py
# Reverse-mode automatic differentiation over scalar expression graphs

from .core.op import Op
from .core.node import Node
from .core.config import EngineConfig, use_config
from .core.engine import (
    seed_gradient,
    backward,
    zero_grad,
    topological_order,
)
from .core.seeds import grad, grads, grads_list, value, numerical_grads, check_grads
from .core.graph_utils import render, print_graph, get_graph_stats, print_graph_summary

from . import ops
from .ops import add, sub, mul, div, neg, pow, exp, tanh

__all__ = [
    # Core
    'Node',
    'Op',
    'EngineConfig',
    'use_config',
    # Engine
    'seed_gradient',
    'backward',
    'zero_grad',
    'topological_order',
    # Functional helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'numerical_grads',
    'check_grads',
    # Diagnostics
    'render',
    'print_graph',
    'get_graph_stats',
    'print_graph_summary',
    # Ops
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'exp', 'tanh',
]
