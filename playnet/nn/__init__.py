"""
playnet.nn - Feed-forward networks as graphs of nodes and links

- Nodes are neurons with bias, activation and derivative state
- Links are weighted connections between adjacent layers
- A network is a list of layers, each a list of nodes; the last layer
  holds the single output node
"""

from .graph import Node, Link
from .builder import Network, LayerBuilder, build_network
from .propagation import (
    forward_prop,
    back_prop,
    update_weights,
    iter_nodes,
    for_each_node,
    get_output_node
)
from .compiler import compile_network_to_py, network_to_py, to_precision
from .inspect import (
    node_states,
    link_states,
    architecture_stats,
    print_architecture_stats
)
from .network import NeuralNetwork

__all__ = [
    'Node',
    'Link',
    'Network',
    'LayerBuilder',
    'build_network',
    'forward_prop',
    'back_prop',
    'update_weights',
    'iter_nodes',
    'for_each_node',
    'get_output_node',
    'compile_network_to_py',
    'network_to_py',
    'to_precision',
    'node_states',
    'link_states',
    'architecture_stats',
    'print_architecture_stats',
    'NeuralNetwork',
]
