"""
Graph entities - nodes (neurons) and links (weighted connections)
"""

import numpy as np
from typing import List, Optional

from ..functions import ActivationFunction


class Node:
    """
    A neuron in one layer of the network.

    The total input, output and their derivatives change after every forward
    and backward pass. The accumulated input derivative persists across
    backward passes until the next weight update and equals dE/db for the
    node's bias.

    Attributes:
        id: Layer-scoped identifier (feature name for inputs, integer string otherwise)
        activation: Shared activation function
        bias: Bias term
        input_links: Incoming links, in build order
        outputs: Outgoing links, in build order
        total_input: Bias plus weighted inputs from the last forward pass
        output: Activation of total_input from the last forward pass
        output_der: dE/d(output) from the last backward pass
        input_der: dE/d(total_input) from the last backward pass
        acc_input_der: Sum of input_der since the last update
        num_accumulated_ders: Number of terms in acc_input_der
    """

    def __init__(self, id: str, activation: ActivationFunction, init_zero: bool = False):
        self.id = id
        self.activation = activation
        self.bias = 0.0 if init_zero else 0.1
        self.input_links: List['Link'] = []
        self.outputs: List['Link'] = []
        self.total_input = 0.0
        self.output = 0.0
        self.output_der = 0.0
        self.input_der = 0.0
        self.acc_input_der = 0.0
        self.num_accumulated_ders = 0

    def update_output(self) -> float:
        """Recompute total input and output from the incoming links."""
        self.total_input = self.bias
        for link in self.input_links:
            self.total_input += link.weight * link.source.output
        self.output = self.activation.output(self.total_input)
        return self.output

    def __repr__(self):
        return (f"Node(id='{self.id}', bias={self.bias:.4f}, "
                f"activation='{self.activation.name}')")


class Link:
    """
    A directed, weighted connection between nodes in adjacent layers.

    A dead link has been pruned by L1 regularization: its weight stays at 0
    and it no longer accumulates derivatives or receives updates.

    Attributes:
        id: '<source id>-<dest id>'
        source: Node in the earlier layer
        dest: Node in the later layer
        weight: Connection strength, uniform in [-0.5, 0.5) unless zero-initialized
        is_dead: Permanently pruned flag
        error_der: dE/dw from the last backward pass
        acc_error_der: Sum of error_der since the last update
        num_accumulated_ders: Number of terms in acc_error_der
    """

    def __init__(self, source: Node, dest: Node, init_zero: bool = False,
                 weight: Optional[float] = None):
        self.id = f"{source.id}-{dest.id}"
        self.source = source
        self.dest = dest
        if weight is not None:
            self.weight = float(weight)
        elif init_zero:
            self.weight = 0.0
        else:
            self.weight = float(np.random.rand() - 0.5)
        self.is_dead = False
        self.error_der = 0.0
        self.acc_error_der = 0.0
        self.num_accumulated_ders = 0

    def __repr__(self):
        return f"Link(id='{self.id}', weight={self.weight:.4f}, dead={self.is_dead})"
