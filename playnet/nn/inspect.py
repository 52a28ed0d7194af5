"""
Inspection tools for networks - node/link state snapshots and statistics
"""

import numpy as np
from typing import Any, Dict, List

from .builder import Network


def node_states(network: Network) -> List[Dict[str, Any]]:
    """
    Snapshot the state of every node, layer by layer.

    Returns:
        states: One dict per node with id, layer, bias, total_input, output,
            output_der and input_der
    """
    states = []
    for layer_idx, layer in enumerate(network):
        for node in layer:
            states.append({
                'id': node.id,
                'layer': layer_idx,
                'bias': node.bias,
                'total_input': node.total_input,
                'output': node.output,
                'output_der': node.output_der,
                'input_der': node.input_der,
            })
    return states


def link_states(network: Network) -> List[Dict[str, Any]]:
    """
    Snapshot the state of every link, grouped by destination node.

    Returns:
        states: One dict per link with id, source, dest, weight, error_der and dead
    """
    states = []
    for layer in network[1:]:
        for node in layer:
            for link in node.input_links:
                states.append({
                    'id': link.id,
                    'source': link.source.id,
                    'dest': link.dest.id,
                    'weight': link.weight,
                    'error_der': link.error_der,
                    'dead': link.is_dead,
                })
    return states


def architecture_stats(network: Network) -> Dict[str, Any]:
    """
    Compute statistics about the network.

    Returns:
        stats: Dictionary with topology and weight statistics

    Example:
        >>> stats = architecture_stats(net)
        >>> print(f"Sparsity: {stats['sparsity']:.2%}")
    """
    links = link_states(network)
    n_links = len(links)
    n_dead = sum(1 for link in links if link['dead'])
    # Only live links carry a weight
    weights = np.array([link['weight'] for link in links if not link['dead']])
    biases = np.array([node.bias for layer in network[1:] for node in layer])

    stats = {
        'n_nodes': sum(len(layer) for layer in network),
        'n_links': n_links,
        'n_dead_links': n_dead,
        'sparsity': n_dead / n_links if n_links > 0 else 0.0,
        'n_layers': len(network),
        'layer_sizes': [len(layer) for layer in network],
    }

    if weights.size > 0:
        stats.update({
            'weight_mean': float(weights.mean()),
            'weight_std': float(weights.std()),
            'weight_min': float(weights.min()),
            'weight_max': float(weights.max()),
        })
    else:
        stats.update({'weight_mean': 0.0, 'weight_std': 0.0,
                      'weight_min': 0.0, 'weight_max': 0.0})

    stats['bias_mean'] = float(biases.mean()) if biases.size > 0 else 0.0
    return stats


def print_architecture_stats(network: Network) -> None:
    """
    Print formatted network statistics.

    Example:
        >>> from playnet.nn import print_architecture_stats
        >>> print_architecture_stats(net)
    """
    stats = architecture_stats(network)

    print("\n" + "="*60)
    print("Network Statistics")
    print("="*60)

    print(f"\nTopology:")
    print(f"  Nodes: {stats['n_nodes']}")
    print(f"  Links: {stats['n_links']}")
    print(f"  Dead links: {stats['n_dead_links']}")
    print(f"  Sparsity: {stats['sparsity']:.2%}")

    print(f"\nWeights:")
    print(f"  Mean: {stats['weight_mean']:.4f} ± {stats['weight_std']:.4f}")
    print(f"  Range: [{stats['weight_min']:.4f}, {stats['weight_max']:.4f}]")
    print(f"  Mean bias: {stats['bias_mean']:.4f}")

    print(f"\nLayers:")
    print(f"  Number of layers: {stats['n_layers']}")
    print(f"  Layer sizes: {stats['layer_sizes']}")

    print("="*60 + "\n")
