"""
Neuron / Layer / MLP wiring on top of the engine.
"""

import numpy as np
import pytest

from scalar_autodiff import MLP, Layer, Neuron, Value, make_node, run_backward, add, check_grad


def test_mlp_wiring():
    mlp = MLP(3, [3, 2, 1], rng=np.random.default_rng(0))

    params = mlp.parameters()
    assert len(params) == 3 * 3 + 3 + 3 * 2 + 2 + 2 * 1 + 1 == 23
    assert mlp.num_parameters() == 23
    assert len({id(p) for p in params}) == 23
    assert all(p.is_leaf for p in params)

    output = mlp([1.0, 1.0, 1.0])
    assert len(output) == 1
    assert isinstance(output[0], Value)


def test_mlp_repr():
    mlp = MLP(3, [3, 2, 1], rng=np.random.default_rng(0))
    assert repr(mlp) == "MLP(in_feat=3, out_features=[3, 2, 1])"
    assert repr(mlp.layers[1]) == "Layer(in_feat=3, out_feat=2)"
    assert repr(mlp.layers[1].neurons[0]) == "Neuron(n_inputs=3)"


def test_initialization_is_seeded_and_in_range():
    p1 = [float(p) for p in MLP(4, [5, 3], rng=np.random.default_rng(42)).parameters()]
    p2 = [float(p) for p in MLP(4, [5, 3], rng=np.random.default_rng(42)).parameters()]
    p3 = [float(p) for p in MLP(4, [5, 3], rng=np.random.default_rng(43)).parameters()]

    assert p1 == p2
    assert p1 != p3
    assert all(-1.0 <= v < 1.0 for v in p1)


def test_neuron_forward_is_affine():
    rng = np.random.default_rng(1)
    n = Neuron(3, rng=rng)
    x = [0.5, -2.0, 1.5]

    out = n(x)

    expected = sum(w.data * xi for w, xi in zip(n.w, x)) + n.b.data
    assert out.data == pytest.approx(expected)
    assert n.parameters() == n.w + [n.b]


def test_neuron_gradients():
    n = Neuron(2, rng=np.random.default_rng(2))
    x = [make_node(3.0), make_node(-1.0)]

    run_backward(n(x))

    assert n.w[0].grad == 3.0
    assert n.w[1].grad == -1.0
    assert n.b.grad == 1.0
    assert x[0].grad == n.w[0].data
    assert x[1].grad == n.w[1].data


def test_neuron_input_size_mismatch():
    n = Neuron(3, rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        n([1.0, 2.0])
    with pytest.raises(ValueError):
        Neuron(0)
    with pytest.raises(ValueError):
        MLP(3, [])


def test_layer_shares_inputs_across_neurons():
    layer = Layer(2, 3, rng=np.random.default_rng(3))
    x = [make_node(0.5), make_node(-0.25)]

    outs = layer(x)
    assert len(outs) == 3
    run_backward(add(add(outs[0], outs[1]), outs[2]))

    # every neuron contributes to the gradient of the shared input
    assert x[0].grad == pytest.approx(sum(n.w[0].data for n in layer.neurons))
    assert x[1].grad == pytest.approx(sum(n.w[1].data for n in layer.neurons))


def test_parameter_order_is_stable():
    mlp = MLP(2, [2, 1], rng=np.random.default_rng(4))
    params = mlp.parameters()
    first = mlp.layers[0].neurons[0]
    last = mlp.layers[-1].neurons[-1]
    assert params[:3] == first.w + [first.b]
    assert params[-1] is last.b
    assert [id(p) for p in params] == [id(p) for p in mlp.parameters()]


def test_zero_grad_then_fresh_pass_matches_first_pass():
    mlp = MLP(3, [3, 2, 1], rng=np.random.default_rng(5))
    x = [1.0, -0.5, 2.0]

    # === first-ever pass ===
    run_backward(mlp(x)[0].sigmoid())
    first = [float(p.grad) for p in mlp.parameters()]
    assert any(g != 0.0 for g in first)

    # === reset ===
    mlp.zero_grad()
    assert all(p.grad == 0.0 for p in mlp.parameters())

    # === fresh forward + backward ===
    run_backward(mlp(x)[0].sigmoid())
    second = [float(p.grad) for p in mlp.parameters()]
    assert second == first


def test_mlp_input_gradient_matches_finite_differences():
    mlp = MLP(3, [4, 2, 1], rng=np.random.default_rng(6))

    def f(xs):
        return mlp(xs)[0].sigmoid()

    assert check_grad(f, [0.3, -0.8, 1.1])
