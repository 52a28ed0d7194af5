"""
playnet - In-memory feed-forward neural network engine

Builds layered networks of nodes and links, trains them with
backpropagation and mini-batch gradient descent, and compiles trained
networks into Python expressions.
"""

from .exceptions import ConfigurationError, InputShapeError
from . import functions
from .config import NetworkConfig, INPUT_FEATURES, construct_input

# nn must be imported before train
from . import nn
from .nn import (
    Node,
    Link,
    LayerBuilder,
    NeuralNetwork,
    build_network,
    forward_prop,
    back_prop,
    update_weights,
    for_each_node,
    get_output_node,
    compile_network_to_py,
)
from . import train
from .convert import to_networkx

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'InputShapeError',
    'functions',
    'NetworkConfig',
    'INPUT_FEATURES',
    'construct_input',
    'nn',
    'Node',
    'Link',
    'LayerBuilder',
    'NeuralNetwork',
    'build_network',
    'forward_prop',
    'back_prop',
    'update_weights',
    'for_each_node',
    'get_output_node',
    'compile_network_to_py',
    'train',
    'to_networkx',
]
