"""
Debug printer and tape statistics.
"""

import io

import numpy as np
import pytest

from scalar_autodiff import (
    Tape, use_tape, make_node, mul, add, pow, log, run_backward, zero_adjoints,
    format_graph, print_graph, get_graph_stats, print_graph_summary,
    topological_order, Neuron,
)
from scalar_autodiff.core import tape as tape_mod


def test_format_graph_chain():
    a = make_node(5.0)
    b = make_node(10.0)
    e = log(pow(mul(a, b), 2))
    run_backward(e)

    lines = format_graph(e).splitlines()

    assert len(lines) == 5
    assert lines[0] == "Value(data=7.82405, grad=1, op=log)"
    assert lines[1].startswith("  Value(data=2500, ")
    assert lines[1].endswith("op=pow)")
    assert lines[2].startswith("    Value(data=50, ")
    assert lines[3] == "      Value(data=5, grad=0.4, op=leaf)"
    assert lines[4] == "      Value(data=10, grad=0.2, op=leaf)"


def test_format_graph_prints_shared_nodes_once():
    x = make_node(3.0)
    h = mul(x, x)
    out = add(h, h)

    lines = format_graph(out).splitlines()

    assert len(lines) == 3
    assert sum("op=leaf" in line for line in lines) == 1


def test_printer_does_not_touch_gradients():
    x = make_node(2.0)
    y = mul(x, 3.0)
    print_graph(y, file=io.StringIO())
    assert x.grad == 0.0 and y.grad == 0.0


def test_print_graph_to_stdout(capsys):
    print_graph(make_node(1.0))
    assert capsys.readouterr().out == "Value(data=1, grad=0, op=leaf)\n"


def test_tape_records_only_inside_use_tape():
    make_node(1.0)
    assert tape_mod.global_tape is None

    with use_tape() as tape:
        a = make_node(1.0)
        b = make_node(2.0)
        c = mul(a, b)
        d = add(c, a)

    assert tape_mod.global_tape is None
    assert tape.nodes == [a, b, c, d]
    assert tape.leaves() == [a, b]
    assert len(tape) == 4

    tape.reset()
    assert len(tape) == 0


def test_nested_tapes_restore():
    outer = Tape()
    with use_tape(outer):
        make_node(1.0)
        with use_tape() as inner:
            make_node(2.0)
        make_node(3.0)
    assert len(outer) == 2
    assert len(inner) == 1


def test_graph_stats():
    with use_tape() as tape:
        a = make_node(1.0)
        b = make_node(2.0)
        c = mul(a, b)
        add(c, a)

    stats = get_graph_stats(tape)

    assert stats['nodes'] == 4
    assert stats['leaves'] == 2
    assert stats['edges'] == 4
    assert stats['max_fan_in'] == 2
    assert stats['max_fan_out'] == 2
    assert stats['avg_fan_in'] == pytest.approx(1.0)
    assert stats['operations'] == {'leaf': 2, 'mul': 1, 'add': 1}


def test_graph_stats_empty():
    stats = get_graph_stats(Tape())
    assert stats['nodes'] == 0
    assert stats['operations'] == {}


def test_print_graph_summary(capsys):
    with use_tape() as tape:
        a = make_node(1.0)
        mul(a, a)

    stats = print_graph_summary(tape)
    out = capsys.readouterr().out

    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "Total nodes:        2" in out
    assert stats['edges'] == 2

    print_graph_summary(Tape())
    assert "Empty computation graph" in capsys.readouterr().out


def test_zero_adjoints_on_tape():
    with use_tape() as tape:
        a = make_node(2.0)
        b = make_node(3.0)
        y = mul(a, b)
        run_backward(y)
        assert a.grad == 3.0
        zero_adjoints()

    assert all(v.grad == 0.0 for v in tape.nodes)

    run_backward(y)
    zero_adjoints(tape)
    assert a.grad == 0.0 and y.grad == 0.0

    # no active tape: nothing to do
    zero_adjoints()


def test_format_graph_deep_chain():
    x = make_node(1.0)
    y = x
    for _ in range(5000):
        y = add(y, 1.0)

    lines = format_graph(y).splitlines()

    # each add has a chain parent and a constant leaf
    assert len(lines) == 10001
    assert lines[0].startswith("Value(data=5001, ")
    assert lines[1].startswith("  Value(data=5000, ")
    assert lines[-1] == "  Value(data=1, grad=0, op=leaf)"


def test_format_graph_wide_neuron():
    n = Neuron(1200, rng=np.random.default_rng(0))
    out = n([1.0] * 1200)
    run_backward(out)

    lines = format_graph(out).splitlines()

    assert len(lines) == len(topological_order(out))
    assert lines[0].endswith("op=add)")
