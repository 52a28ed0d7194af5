"""
Propagation engine - forward pass, backward pass and weight update.

Training a batch is a three-phase protocol:
1. forward_prop + back_prop once per sample; derivatives accumulate on
   nodes and links
2. update_weights once; the accumulated derivatives are averaged and applied
3. update_weights clears the accumulators for the next batch
"""

import logging
from typing import Callable, Iterator, Optional, Sequence

from ..exceptions import InputShapeError
from ..functions import ErrorFunction, RegularizationFunction, regularizations
from .builder import Network
from .graph import Node

logger = logging.getLogger(__name__)


def forward_prop(network: Network, inputs: Sequence[float]) -> float:
    """
    Run a forward pass and return the network's output.

    Overwrites total_input and output on every node; back_prop reads that
    state, so nothing may modify the network between the two calls.

    Args:
        network: Layered node matrix
        inputs: One value per input node

    Returns:
        output: Output of the single output node
    """
    input_layer = network[0]
    if len(inputs) != len(input_layer):
        raise InputShapeError(f"The number of inputs ({len(inputs)}) must match the "
                              f"number of nodes in the input layer ({len(input_layer)})")

    values = [float(value) for value in inputs]
    for node, value in zip(input_layer, values):
        node.output = value
    for layer in network[1:]:
        for node in layer:
            node.update_output()
    return get_output_node(network).output


def back_prop(network: Network, target: float, error_func: ErrorFunction) -> None:
    """
    Run a backward pass for the output of the previous forward pass.

    Computes dE/d(total_input) for every non-input node and dE/dw for every
    live link, adding both to their accumulators.

    Args:
        network: Layered node matrix, after forward_prop
        target: Expected output
        error_func: Error function whose derivative seeds the pass
    """
    output_node = get_output_node(network)
    output_node.output_der = error_func.der(output_node.output, target)

    for layer_idx in range(len(network) - 1, 0, -1):
        current_layer = network[layer_idx]

        for node in current_layer:
            node.input_der = node.output_der * node.activation.der(node.total_input)
            node.acc_input_der += node.input_der
            node.num_accumulated_ders += 1

        for node in current_layer:
            for link in node.input_links:
                if link.is_dead:
                    continue
                link.error_der = node.input_der * link.source.output
                link.acc_error_der += link.error_der
                link.num_accumulated_ders += 1

        if layer_idx == 1:
            continue

        # Dead links are summed too; their weight is pinned at 0.
        for node in network[layer_idx - 1]:
            node.output_der = 0.0
            for link in node.outputs:
                node.output_der += link.weight * link.dest.input_der


def update_weights(
    network: Network,
    learning_rate: float,
    regularization: Optional[RegularizationFunction] = None,
    regularization_rate: float = 0.0
) -> None:
    """
    Apply the averaged accumulated derivatives to biases and weights.

    With L1 regularization, a weight whose regularization step crosses zero
    is set to 0 and its link is marked dead for good.

    Args:
        network: Layered node matrix
        learning_rate: Gradient descent step size
        regularization: Weight penalty, or None
        regularization_rate: Scale of the penalty's derivative
    """
    for layer in network[1:]:
        for node in layer:
            if node.num_accumulated_ders > 0:
                node.bias -= learning_rate * node.acc_input_der / node.num_accumulated_ders
                node.acc_input_der = 0.0
                node.num_accumulated_ders = 0

            for link in node.input_links:
                if link.is_dead:
                    continue
                regul_der = regularization.der(link.weight) if regularization else 0.0
                if link.num_accumulated_ders > 0:
                    link.weight -= (learning_rate / link.num_accumulated_ders) * link.acc_error_der
                    new_weight = link.weight - (learning_rate * regularization_rate) * regul_der
                    if regularization is regularizations.L1 and link.weight * new_weight < 0:
                        link.weight = 0.0
                        link.is_dead = True
                        logger.debug("Link %s pruned by L1 regularization", link.id)
                    else:
                        link.weight = new_weight
                    link.acc_error_der = 0.0
                    link.num_accumulated_ders = 0


def iter_nodes(network: Network, ignore_inputs: bool = False) -> Iterator[Node]:
    """Yield every node layer by layer, optionally skipping the input layer."""
    for layer in network[1 if ignore_inputs else 0:]:
        yield from layer


def for_each_node(network: Network, ignore_inputs: bool, accessor: Callable[[Node], object]) -> None:
    """Call accessor on every node, layer by layer."""
    for node in iter_nodes(network, ignore_inputs):
        accessor(node)


def get_output_node(network: Network) -> Node:
    """Return the single node of the last layer."""
    return network[-1][0]
