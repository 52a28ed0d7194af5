"""
Network construction - layered, fully connected feed-forward graphs
"""

import logging
import numpy as np
from typing import List, Optional, Sequence

from ..exceptions import ConfigurationError
from ..functions import ActivationFunction
from .graph import Node, Link

logger = logging.getLogger(__name__)

Network = List[List[Node]]


class LayerBuilder:
    """
    Build a network layer by layer.

    Input nodes take their ids from the feature names; every other node gets
    the next value of a counter shared by all non-input layers of the build.
    """

    def __init__(self, init_zero: bool = False):
        """
        Initialize builder.

        Args:
            init_zero: Start every bias and weight at 0
        """
        self.init_zero = init_zero
        self.layers: Network = []
        self.current_node_id = 1

    def add_input_layer(self, input_ids: Sequence[str], activation: ActivationFunction) -> List[Node]:
        """
        Add the input layer.

        Args:
            input_ids: Feature names, one per input node
            activation: Activation stored on the nodes (never applied to inputs)

        Returns:
            nodes: The new layer
        """
        if self.layers:
            raise ConfigurationError("The input layer must be the first layer")
        layer = [Node(input_id, activation, self.init_zero) for input_id in input_ids]
        self.layers.append(layer)
        return layer

    def add_layer(self, size: int, activation: ActivationFunction) -> List[Node]:
        """
        Add a layer fully connected to the previous one.

        Args:
            size: Number of nodes in this layer
            activation: Activation function of every node in the layer

        Returns:
            nodes: The new layer
        """
        if not self.layers:
            raise ConfigurationError("Add the input layer before hidden layers")

        prev_layer = self.layers[-1]
        layer = []
        for _ in range(size):
            node = Node(str(self.current_node_id), activation, self.init_zero)
            self.current_node_id += 1
            for prev_node in prev_layer:
                self.connect(prev_node, node)
            layer.append(node)
        self.layers.append(layer)
        return layer

    def connect(self, source: Node, dest: Node) -> Link:
        """Create a link and register it on both endpoints."""
        link = Link(source, dest, self.init_zero)
        source.outputs.append(link)
        dest.input_links.append(link)
        return link

    def build(self) -> Network:
        """Return the layered node matrix."""
        return self.layers


def build_network(
    network_shape: Sequence[int],
    activation: ActivationFunction,
    output_activation: ActivationFunction,
    input_ids: Sequence[str],
    init_zero: bool = False,
    seed: Optional[int] = None
) -> Network:
    """
    Build a fully connected feed-forward network.

    Args:
        network_shape: Nodes per layer including input and output, e.g. [2, 4, 1]
        activation: Activation of every hidden node
        output_activation: Activation of the output layer
        input_ids: Ids of the input nodes, one per input
        init_zero: Start every bias and weight at 0
        seed: Random seed for weight initialization

    Returns:
        network: List of layers, each a list of nodes

    Example:
        >>> from playnet.functions import activations
        >>> net = build_network([2, 3, 1], activations.TANH, activations.TANH, ['x', 'y'])
        >>> [len(layer) for layer in net]
        [2, 3, 1]
    """
    if len(network_shape) < 1:
        raise ConfigurationError("network_shape must have at least one layer")
    if network_shape[0] != len(input_ids):
        raise ConfigurationError(f"Input layer size {network_shape[0]} does not match "
                                 f"{len(input_ids)} input ids")

    if seed is not None:
        np.random.seed(seed)

    builder = LayerBuilder(init_zero=init_zero)
    num_layers = len(network_shape)
    builder.add_input_layer(input_ids, output_activation if num_layers == 1 else activation)
    for layer_idx in range(1, num_layers):
        is_output_layer = layer_idx == num_layers - 1
        builder.add_layer(network_shape[layer_idx],
                          output_activation if is_output_layer else activation)

    logger.debug("Built network with shape %s", list(network_shape))
    return builder.build()
