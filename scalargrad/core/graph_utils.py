"""
Graph utilities
Printing and analysis of scalargrad expression graphs.
"""

import numpy as np
from typing import Dict, List
from collections import Counter

from .engine import topological_order


def render(node, indent: int = 2) -> str:
    """
    Text dump of the subgraph rooted at `node`.

    One line per node: `label=(value, gradient)` plus ` [op]` for non-leaves,
    followed by its operands in stored order, indented one level deeper.
    A shared sub-expression is rendered once per incoming edge.
    """
    lines: List[str] = []

    def _walk(v, depth):
        line = f"{' ' * (indent * depth)}{v.label}=({v.value:.4f}, {v.gradient:.4f})"
        if not v.is_leaf:
            line += f" [{v.op.tag}]"
        lines.append(line)
        for child in v.operands:
            _walk(child, depth + 1)

    _walk(node, 0)
    return "\n".join(lines)


def print_graph(node) -> None:
    """Print the rendering of the subgraph rooted at `node`."""
    print(render(node))


def get_graph_stats(root) -> Dict:
    """
    Statistics over the distinct nodes reachable from `root` (no printing).

    Returns:
        dict with nodes, edges, fan-in/fan-out (max and mean) and an
        operation breakdown keyed by operator name.
    """
    order = topological_order(root)
    n_nodes = len(order)
    n_edges = sum(len(v.operands) for v in order)

    # fan-in: operands consumed; fan-out: consumers (counted per edge)
    fan_ins = [len(v.operands) for v in order]
    fan_out = Counter()
    for v in order:
        for p in v.operands:
            fan_out[id(p)] += 1
    fan_outs = [fan_out[id(v)] for v in order]

    op_counter = Counter(v.op.name for v in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Returns:
        the statistics dictionary from `get_graph_stats`
    """
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("EXPRESSION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_name, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_name:12s}: {count:6,} ({pct:5.1f}%)")
    print("="*70 + "\n")

    return stats
