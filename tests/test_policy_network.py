import math

import pytest

from gridreinforce.policy_network import PolicyNetwork, relu, softmax


def test_softmax_uniform():
    assert softmax([0.0, 0.0]) == pytest.approx([0.5, 0.5])


def test_softmax_sums_to_one_and_keeps_order():
    probs = softmax([1.0, 3.0, -2.0, 0.5])
    assert sum(probs) == pytest.approx(1.0)
    assert sorted(range(4), key=probs.__getitem__) == [2, 3, 0, 1]


def test_softmax_shift_invariant():
    assert softmax([1.0, 2.0, 3.0]) == pytest.approx(softmax([1001.0, 1002.0, 1003.0]))


def test_relu():
    assert relu(-3.0) == 0.0
    assert relu(2.5) == 2.5


def test_forward_is_distribution():
    net = PolicyNetwork([2, 16, 4], seed=42)
    probs = net.forward([0.25, 0.75])
    assert len(probs) == 4
    assert all(p > 0 for p in probs)
    assert sum(probs) == pytest.approx(1.0)


def test_forward_single_layer():
    net = PolicyNetwork([3, 2], seed=1)
    assert sum(net.forward([1.0, 2.0, 3.0])) == pytest.approx(1.0)


def test_forward_wrong_input_size():
    net = PolicyNetwork([2, 16, 4])
    with pytest.raises(ValueError):
        net.forward([1.0])


def test_same_seed_same_parameters():
    first = PolicyNetwork([2, 16, 4], seed=7)
    second = PolicyNetwork([2, 16, 4], seed=7)
    weights, biases = first.parameters()
    assert any(w != 0.0 for layer in weights for row in layer for w in row)
    assert biases == [[0.0] * 16, [0.0] * 4]
    assert second.parameters() == (weights, biases)
    state = [0.4, 0.6]
    assert first.forward(state) == second.forward(state)
    assert [first.sample_action(state) for _ in range(30)] == [
        second.sample_action(state) for _ in range(30)
    ]


def test_different_seed_different_weights():
    w1, _ = PolicyNetwork([2, 16, 4], seed=1).parameters()
    w2, _ = PolicyNetwork([2, 16, 4], seed=2).parameters()
    assert w1 != w2


def test_parameter_shapes_and_bounds():
    weights, biases = PolicyNetwork([2, 16, 4]).parameters()
    assert [len(layer) for layer in weights] == [16, 4]
    assert [len(layer[0]) for layer in weights] == [2, 16]
    assert biases == [[0.0] * 16, [0.0] * 4]
    for layer, n_in in zip(weights, [2, 16]):
        bound = 0.1 * math.sqrt(2.0 / n_in)
        assert all(abs(w) <= bound for row in layer for w in row)


def test_parameters_returns_copies():
    net = PolicyNetwork([2, 4, 3])
    weights, biases = net.parameters()
    weights[0][0][0] = 99.0
    biases[0][0] = 99.0
    fresh_w, fresh_b = net.parameters()
    assert fresh_w[0][0][0] != 99.0
    assert fresh_b[0][0] == 0.0


def test_update_parameters_moves_by_gradient():
    net = PolicyNetwork([2, 4, 3])
    old_w, old_b = net.parameters()
    ones_w = [[[1.0] * len(row) for row in layer] for layer in old_w]
    ones_b = [[1.0] * len(layer) for layer in old_b]
    net.update_parameters(ones_w, ones_b, 0.5)
    new_w, new_b = net.parameters()
    for old_layer, new_layer in zip(old_w, new_w):
        for old_row, new_row in zip(old_layer, new_layer):
            assert [n - o for n, o in zip(new_row, old_row)] == pytest.approx([0.5] * len(old_row))
    assert new_b == [[0.5] * len(layer) for layer in old_b]


def test_update_parameters_shape_mismatch():
    net = PolicyNetwork([2, 4, 3])
    weights, biases = net.parameters()
    with pytest.raises(ValueError):
        net.update_parameters(weights[:1], biases[:1], 0.1)


def test_log_probability_matches_forward():
    net = PolicyNetwork([2, 16, 4])
    state = [0.5, 0.25]
    probs = net.forward(state)
    for action in range(4):
        assert math.exp(net.log_probability(state, action)) == pytest.approx(probs[action])


def test_log_probability_bad_action():
    net = PolicyNetwork([2, 16, 4])
    with pytest.raises(IndexError):
        net.log_probability([0.0, 0.0], 4)


def test_sample_action_in_range():
    net = PolicyNetwork([2, 16, 4])
    assert {net.sample_action([0.3, 0.6]) for _ in range(200)} <= {0, 1, 2, 3}


def test_sample_action_follows_dominant_probability():
    net = PolicyNetwork([2, 4, 3])
    weights, biases = net.parameters()
    zero_w = [[[0.0] * len(row) for row in layer] for layer in weights]
    bias_grad = [[0.0] * len(layer) for layer in biases]
    bias_grad[-1][2] = 100.0
    net.update_parameters(zero_w, bias_grad, 1.0)
    assert {net.sample_action([0.1, 0.9]) for _ in range(50)} == {2}


def test_bad_architecture():
    with pytest.raises(ValueError):
        PolicyNetwork([4])