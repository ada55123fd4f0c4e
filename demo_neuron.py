"""
Single tanh neuron: forward, backward and graph dump.

    o = tanh(x1*w1 + x2*w2 + b), with tanh written as (e^{2n} - 1) / (e^{2n} + 1)
"""

import argparse

from scalargrad import Node, backward, seed_gradient, print_graph, print_graph_summary, use_config


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Backpropagate through a single tanh neuron',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--mode', choices=['topological', 'recursive'], default='topological',
                       help='Backward traversal mode')
    parser.add_argument('--summary', action='store_true',
                       help='Print graph statistics after the dump')
    parser.add_argument('--verbose', action='store_true',
                       help='Print backward diagnostics')
    return parser.parse_args()


def build_neuron():
    """Build the neuron graph; returns (output, leaves)."""
    x1 = Node(2.0, "x1")
    x2 = Node(0.0, "x2")
    w1 = Node(-3.0, "w1")
    w2 = Node(1.0, "w2")
    b = Node(6.8814, "b")

    x1w1 = x1 * w1
    x1w1.label = "x1w1"
    x2w2 = x2 * w2
    x2w2.label = "x2w2"
    x1w1x2w2 = x1w1 + x2w2
    x1w1x2w2.label = "x1w1 + x2w2"
    n = x1w1x2w2 + b
    n.label = "n"

    e = (2 * n).exp()
    e.label = "e"
    o = (e - 1) / (e + 1)
    o.label = "o"
    return o, {"x1": x1, "x2": x2, "w1": w1, "w2": w2, "b": b}


def main():
    args = parse_args()

    with use_config(backward_mode=args.mode, verbose=args.verbose):
        o, leaves = build_neuron()
        seed_gradient(o, 1.0)
        backward(o)

    print_graph(o)
    print()
    for name, leaf in leaves.items():
        print(f"d o / d {name:2s} = {float(leaf.gradient): .6f}")

    if args.summary:
        print_graph_summary(o)


if __name__ == "__main__":
    main()
