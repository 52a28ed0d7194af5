import math

import pytest

from playnet.exceptions import InputShapeError
from playnet.functions import activations, errors, regularizations
from playnet.nn import (
    back_prop,
    build_network,
    for_each_node,
    forward_prop,
    get_output_node,
    iter_nodes,
    node_states,
    link_states,
    update_weights,
)


def single_link_network(activation, weight=0.3, bias=0.1):
    net = build_network([1, 1], activation, activation, ['x'])
    net[1][0].bias = bias
    net[1][0].input_links[0].weight = weight
    return net


def loss_at(net, inputs, target, error_func=errors.SQUARE):
    return error_func.error(forward_prop(net, inputs), target)


class TestForward:

    def test_hand_computed_output(self):
        net = build_network([2, 2, 1], activations.TANH, activations.LINEAR, ['x', 'y'], init_zero=True)
        h1, h2 = net[1]
        h1.input_links[0].weight, h1.input_links[1].weight = 0.5, -0.25
        h2.input_links[0].weight, h2.input_links[1].weight = 1.0, 0.0
        h1.bias, h2.bias = 0.1, -0.2
        out = net[2][0]
        out.input_links[0].weight, out.input_links[1].weight = 2.0, -1.0
        out.bias = 0.05

        a1 = math.tanh(0.1 + 0.5 * 1.0 - 0.25 * 2.0)
        a2 = math.tanh(-0.2 + 1.0 * 1.0)
        expected = 0.05 + 2.0 * a1 - 1.0 * a2

        assert forward_prop(net, [1.0, 2.0]) == pytest.approx(expected)
        assert h1.total_input == pytest.approx(0.1)
        assert net[0][1].output == 2.0

    def test_inputs_are_not_activated(self):
        net = build_network([1, 1], activations.SIGMOID, activations.SIGMOID, ['x'])
        forward_prop(net, [5.0])
        assert net[0][0].output == 5.0

    def test_deterministic(self):
        net = build_network([2, 5, 3, 1], activations.TANH, activations.TANH, ['x', 'y'], seed=3)
        assert forward_prop(net, [0.3, -0.7]) == forward_prop(net, [0.3, -0.7])

    @pytest.mark.parametrize('inputs', [[1.0], [1.0, 2.0, 3.0], []])
    def test_input_shape_error_leaves_state_untouched(self, inputs):
        net = build_network([2, 3, 1], activations.TANH, activations.TANH, ['x', 'y'], seed=1)
        forward_prop(net, [0.2, 0.4])
        before = node_states(net)

        with pytest.raises(InputShapeError):
            forward_prop(net, inputs)
        assert node_states(net) == before

    def test_bad_input_value_leaves_state_untouched(self):
        net = build_network([2, 3, 1], activations.TANH, activations.TANH, ['x', 'y'], seed=1)
        forward_prop(net, [0.2, 0.4])
        before = node_states(net)

        with pytest.raises(TypeError):
            forward_prop(net, [9.0, None])
        assert net[0][0].output == 0.2
        assert node_states(net) == before

    def test_input_shape_error_is_value_error(self):
        net = build_network([2, 1], activations.TANH, activations.TANH, ['x', 'y'])
        with pytest.raises(ValueError):
            forward_prop(net, [1.0])


class TestBackward:

    def test_linear_single_link_update(self):
        learning_rate = 0.1
        net = single_link_network(activations.LINEAR, weight=0.3, bias=0.1)
        link = net[1][0].input_links[0]

        output = forward_prop(net, [2.0])
        back_prop(net, 1.0, errors.SQUARE)
        update_weights(net, learning_rate)

        assert link.weight == pytest.approx(0.3 - learning_rate * (output - 1.0) * 2.0)
        assert net[1][0].bias == pytest.approx(0.1 - learning_rate * (output - 1.0))

    @pytest.mark.parametrize('activation', [activations.TANH, activations.SIGMOID, activations.RELU])
    def test_gradients_match_finite_differences(self, activation):
        h = 1e-6
        net = build_network([2, 3, 1], activation, activation, ['x', 'y'], seed=11)
        inputs, target = [0.8, -0.6], 0.5

        forward_prop(net, inputs)
        back_prop(net, target, errors.SQUARE)

        for layer in net[1:]:
            for node in layer:
                for link in node.input_links:
                    original = link.weight
                    link.weight = original + h
                    plus = loss_at(net, inputs, target)
                    link.weight = original - h
                    minus = loss_at(net, inputs, target)
                    link.weight = original
                    assert link.error_der == pytest.approx((plus - minus) / (2 * h), abs=1e-4)

                original = node.bias
                node.bias = original + h
                plus = loss_at(net, inputs, target)
                node.bias = original - h
                minus = loss_at(net, inputs, target)
                node.bias = original
                assert node.input_der == pytest.approx((plus - minus) / (2 * h), abs=1e-4)

    def test_input_layer_gets_no_derivatives(self):
        net = build_network([2, 2, 1], activations.TANH, activations.TANH, ['x', 'y'], seed=2)
        forward_prop(net, [1.0, 1.0])
        back_prop(net, 1.0, errors.SQUARE)

        for node in net[0]:
            assert node.output_der == 0.0
            assert node.num_accumulated_ders == 0

    def test_accumulates_until_update(self):
        net = build_network([1, 2, 1], activations.TANH, activations.TANH, ['x'], seed=4)
        out = get_output_node(net)

        for _ in range(3):
            forward_prop(net, [0.5])
            back_prop(net, 1.0, errors.SQUARE)

        assert out.num_accumulated_ders == 3
        assert out.acc_input_der == pytest.approx(3 * out.input_der)
        assert out.input_links[0].num_accumulated_ders == 3

        update_weights(net, 0.1)
        for node in iter_nodes(net, ignore_inputs=True):
            assert node.acc_input_der == 0.0
            assert node.num_accumulated_ders == 0
            for link in node.input_links:
                assert link.acc_error_der == 0.0
                assert link.num_accumulated_ders == 0

    def test_output_derivative_does_not_carry_over(self):
        net = build_network([1, 2, 1], activations.TANH, activations.TANH, ['x'], seed=5)
        forward_prop(net, [0.5])
        back_prop(net, 1.0, errors.SQUARE)
        first = [node.output_der for node in net[1]]

        back_prop(net, 1.0, errors.SQUARE)
        assert [node.output_der for node in net[1]] == first


class TestUpdate:

    @pytest.mark.parametrize('batch', [1, 4, 9])
    def test_batch_averages_constant_gradient(self, batch):
        reference = single_link_network(activations.LINEAR)
        forward_prop(reference, [1.5])
        back_prop(reference, -1.0, errors.SQUARE)
        update_weights(reference, 0.05)

        net = single_link_network(activations.LINEAR)
        for _ in range(batch):
            forward_prop(net, [1.5])
            back_prop(net, -1.0, errors.SQUARE)
        update_weights(net, 0.05)

        assert net[1][0].input_links[0].weight == pytest.approx(reference[1][0].input_links[0].weight)
        assert net[1][0].bias == pytest.approx(reference[1][0].bias)

    def test_update_without_backward_changes_nothing(self):
        net = build_network([2, 2, 1], activations.TANH, activations.TANH, ['x', 'y'], seed=6)
        before = link_states(net), node_states(net)
        update_weights(net, 0.5, regularizations.L2, 0.1)
        assert (link_states(net), node_states(net)) == before

    def test_l2_shrinks_weight(self):
        net = single_link_network(activations.LINEAR, weight=0.4)
        link = net[1][0].input_links[0]
        # Zero input gives a zero weight gradient, leaving only the penalty.
        forward_prop(net, [0.0])
        back_prop(net, 0.1, errors.SQUARE)
        update_weights(net, 0.1, regularizations.L2, 0.5)

        assert link.weight == pytest.approx(0.4 - 0.1 * 0.5 * 0.4)
        assert not link.is_dead

    def test_l1_crossing_zero_kills_link(self):
        net = single_link_network(activations.LINEAR, weight=0.001)
        link = net[1][0].input_links[0]

        forward_prop(net, [0.0])
        back_prop(net, 1.0, errors.SQUARE)
        update_weights(net, 0.1, regularizations.L1, 1.0)

        assert link.weight == 0.0
        assert link.is_dead

    def test_other_regularizers_never_kill(self):
        net = single_link_network(activations.LINEAR, weight=0.001)
        link = net[1][0].input_links[0]

        forward_prop(net, [0.0])
        back_prop(net, 1.0, errors.SQUARE)
        update_weights(net, 0.1, regularizations.ELASTIC_NET, 1.0)

        assert link.weight < 0
        assert not link.is_dead

    def test_dead_link_is_permanent(self):
        net = build_network([2, 1], activations.LINEAR, activations.LINEAR, ['x', 'y'], seed=8)
        dead, live = net[1][0].input_links
        dead.weight = 0.001
        live.weight = 0.3

        forward_prop(net, [0.0, 0.0])
        back_prop(net, 1.0, errors.SQUARE)
        update_weights(net, 0.1, regularizations.L1, 1.0)
        assert dead.is_dead and dead.weight == 0.0

        for _ in range(5):
            forward_prop(net, [2.0, -1.0])
            back_prop(net, 3.0, errors.SQUARE)
            assert dead.num_accumulated_ders == 0
            assert dead.acc_error_der == 0.0
            update_weights(net, 0.1, regularizations.L1, 0.001)
            assert dead.weight == 0.0
            assert dead.is_dead

        assert live.weight != 0.3

    def test_regularization_rate_zero_is_plain_gradient_descent(self):
        plain = single_link_network(activations.LINEAR)
        regularized = single_link_network(activations.LINEAR)
        for net, reg in ((plain, None), (regularized, regularizations.L2)):
            forward_prop(net, [1.0])
            back_prop(net, 0.0, errors.SQUARE)
            update_weights(net, 0.1, reg, 0.0)

        assert plain[1][0].input_links[0].weight == regularized[1][0].input_links[0].weight


def test_traversal_order():
    net = build_network([2, 2, 1], activations.TANH, activations.TANH, ['x', 'y'])

    seen = []
    for_each_node(net, False, lambda node: seen.append(node.id))
    assert seen == ['x', 'y', '1', '2', '3']
    assert [node.id for node in iter_nodes(net, ignore_inputs=True)] == ['1', '2', '3']
    assert get_output_node(net).id == '3'
