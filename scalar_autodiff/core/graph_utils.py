"""
Computation graph utilities.

Printing and analysis of the graph structure, for debugging only. Nothing in
here is used by the backward engine, and the printer keeps its own visited
set.
"""

import sys
import numpy as np
from typing import Dict, List, Optional, Set, TextIO
from collections import Counter

from .var import Value


def _format_node(v: Value) -> str:
    return f"Value(data={v.data:g}, grad={v.grad:g}, op={v.op})"


def _graph_lines(root: Value) -> List[str]:
    # preorder walk on an explicit stack; deep chains would exceed the recursion limit
    lines: List[str] = []
    visited: Set[Value] = set()
    stack = [(root, 0)]
    while stack:
        v, level = stack.pop()
        if v in visited:
            continue
        visited.add(v)
        lines.append("  " * level + _format_node(v))
        for parent in reversed(v.parents):
            if parent not in visited:
                stack.append((parent, level + 1))
    return lines


def format_graph(root: Value) -> str:
    """
    One line per distinct node reachable from `root`, indented two spaces per
    level below the root. A node reached again through another path is not
    printed a second time.
    """
    return "\n".join(_graph_lines(root))


def print_graph(root: Value, file: Optional[TextIO] = None) -> None:
    """Print the graph below `root` (see format_graph)."""
    print(format_graph(root), file=file if file is not None else sys.stdout)


def get_graph_stats(tape) -> Dict:
    """
    Graph statistics of the nodes recorded on a tape (no printing).

    Returns:
        dict with node/edge counts, fan-in/fan-out and per-op counts
    """
    if not tape.nodes:
        return {
            'nodes': 0,
            'leaves': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(tape.nodes)
    n_edges = sum(len(node.parents) for node in tape.nodes)
    n_leaves = sum(1 for node in tape.nodes if node.is_leaf)

    # fan-in
    fan_ins = [len(node.parents) for node in tape.nodes]
    max_fan_in = max(fan_ins)
    avg_fan_in = float(np.mean(fan_ins))

    # fan-out, counted over nodes recorded on this tape only
    index = {id(node): i for i, node in enumerate(tape.nodes)}
    fan_outs = [0] * n_nodes
    for node in tape.nodes:
        for parent in node.parents:
            i = index.get(id(parent))
            if i is not None:
                fan_outs[i] += 1

    max_fan_out = max(fan_outs)
    avg_fan_out = float(np.mean(fan_outs))

    op_counter = Counter(str(node.op) for node in tape.nodes)

    return {
        'nodes': n_nodes,
        'leaves': n_leaves,
        'edges': n_edges,
        'max_fan_in': max_fan_in,
        'avg_fan_in': avg_fan_in,
        'max_fan_out': max_fan_out,
        'avg_fan_out': avg_fan_out,
        'operations': dict(op_counter)
    }


def print_graph_summary(tape) -> Dict:
    """
    Print a summary of the graph recorded on a tape.

    Returns:
        The statistics dict from get_graph_stats
    """
    stats = get_graph_stats(tape)
    if stats['nodes'] == 0:
        print("Empty computation graph")
        return stats

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 70 + "\n")

    return stats
