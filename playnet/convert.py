"""
Conversion utilities for playnet networks to other graph libraries.
"""


def to_networkx(network):
    """
    Convert a network to a NetworkX directed graph.

    Parameters
    ----------
    network : list of list of playnet.nn.Node
        Layered node matrix

    Returns
    -------
    networkx.DiGraph
        One graph node per network node (attributes: layer, bias, output)
        and one edge per link (attributes: weight, dead)

    Examples
    --------
    >>> import playnet
    >>> G = playnet.to_networkx(net)
    >>> G.edges['x', '1']['weight']
    """
    try:
        import networkx as nx
    except ImportError:
        raise ImportError("NetworkX is required for this function. Install it with: pip install networkx")

    G = nx.DiGraph()

    for layer_idx, layer in enumerate(network):
        for node in layer:
            G.add_node(node.id, layer=layer_idx, bias=node.bias, output=node.output)

    for layer in network[1:]:
        for node in layer:
            for link in node.input_links:
                G.add_edge(link.source.id, link.dest.id, weight=link.weight, dead=link.is_dead)

    return G
