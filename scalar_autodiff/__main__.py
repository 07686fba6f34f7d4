"""
Demo runs of the engine.

    python -m scalar_autodiff chain          # e = log((a*b)**2), prints graph
    python -m scalar_autodiff mlp --seed 0   # MLP(3, [3, 2, 1]) forward/backward
"""

import argparse
from typing import List, Optional

import numpy as np

from .core.engine import run_backward
from .core.tape import use_tape
from .core.graph_utils import print_graph, print_graph_summary
from .ops import make_node, mul, pow, log
from .nn import MLP


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='scalar_autodiff',
        description='Scalar reverse-mode autodiff demos',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('demo', choices=['chain', 'mlp'],
                        help='which demo graph to build')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for parameter initialization (mlp demo)')
    parser.add_argument('--layers', type=str, default='3,2,1',
                        help='comma-separated layer sizes (mlp demo)')
    parser.add_argument('--in-feat', type=int, default=3,
                        help='input size (mlp demo)')
    parser.add_argument('--summary', action='store_true',
                        help='print graph statistics of the recorded forward pass')
    parser.add_argument('--verbose', action='store_true',
                        help='report the backward pass')
    return parser.parse_args(argv)


def parse_layers(layer_str):
    """Parse '3,2,1' into [3, 2, 1]."""
    return [int(s) for s in layer_str.split(',') if s.strip()]


def run_chain(args):
    a = make_node(5.0, name="a")
    b = make_node(10.0, name="b")
    c = mul(a, b)
    d = pow(c, 2)
    e = log(d)

    run_backward(e, verbose=args.verbose)

    print_graph(e)
    print()
    for label, v in (("a", a), ("b", b), ("c", c), ("d", d), ("e", e)):
        print(f"{label}: data={v.data:.6f}  grad={v.grad:.6f}")


def run_mlp(args):
    rng = np.random.default_rng(args.seed)
    mlp = MLP(args.in_feat, parse_layers(args.layers), rng=rng)
    print(mlp)
    print(f"Parameters: {mlp.num_parameters()}")

    x = [make_node(1.0) for _ in range(args.in_feat)]
    output = mlp(x)
    run_backward(output[0], verbose=args.verbose)

    print("Output:")
    for out in output:
        print_graph(out)

    print("Gradients before zero_grad:")
    for p in mlp.parameters():
        print(f"  {p!r}")

    mlp.zero_grad()

    print("Gradients after zero_grad:")
    for p in mlp.parameters():
        print(f"  {p!r}")


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    demo = run_chain if args.demo == 'chain' else run_mlp
    with use_tape() as tape:
        demo(args)
    if args.summary:
        print_graph_summary(tape)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
