"""
Expression compiler - render a trained network as a Python function
"""

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import PythonLexer

from .builder import Network
from .graph import Node

# Input feature ids with a fixed rendering; anything else falls back to 'a' + id.
INPUT_NAMES = {
    'x': 'X1',
    'y': 'X2',
    'xTimesY': 'X1X2',
    'xSquared': 'X1_squared',
    'ySquared': 'X2_squared',
}


def to_precision(value: float, digits: int = 2) -> str:
    """
    Format a number with a fixed count of significant digits.

    Uses exponent notation when the decimal exponent is below -6 or at least
    `digits`, e.g. 0.2 -> '0.20', 12.3 -> '12', 123 -> '1.2e+2'.
    """
    value = float(value) + 0.0  # drops the sign of -0.0
    if value != value or value in (float('inf'), float('-inf')):
        return repr(value)

    mantissa, exponent = f"{value:.{digits - 1}e}".split('e')
    exponent = int(exponent)
    if exponent < -6 or exponent >= digits:
        sign = '+' if exponent >= 0 else '-'
        return f"{mantissa}e{sign}{abs(exponent)}"
    return f"{value:.{digits - 1 - exponent}f}"


def node_name(node: Node) -> str:
    """Variable name of a node in the generated code."""
    return INPUT_NAMES.get(node.id, 'a' + node.id)


def node_expression(node: Node) -> str:
    """Bias plus weighted inputs, wrapped in the node's activation."""
    expr = to_precision(node.bias)
    for link in node.input_links:
        expr += f" + ({to_precision(link.weight)} * {node_name(link.source)})"
    return node.activation.to_py(expr)


def network_to_py(network: Network) -> str:
    """
    Render the network as plain Python source.

    Returns:
        source: A `forward` function over the input names with one
            assignment per non-input node and a return of the output node
    """
    input_names = ', '.join(node_name(node) for node in network[0])
    lines = [
        f"def forward({input_names}):",
        '    """Compute a forward pass of the network."""',
    ]
    for layer in network[1:]:
        for node in layer:
            lines.append(f"    {node_name(node)} = {node_expression(node)}")
    lines.append(f"    return {node_name(network[-1][0])}")
    return '\n'.join(lines) + '\n'


def compile_network_to_py(network: Network, highlighted: bool = True) -> str:
    """
    Compile the network into a Python function definition.

    Args:
        network: Layered node matrix (read only)
        highlighted: Return HTML with syntax highlighting spans instead of
            plain source

    Returns:
        code: The generated function

    Example:
        >>> print(compile_network_to_py(net, highlighted=False))
        def forward(X1):
            \"\"\"Compute a forward pass of the network.\"\"\"
            a1 = 0.20 + (0.50 * X1)
            return a1
    """
    source = network_to_py(network)
    if not highlighted:
        return source
    return highlight(source, PythonLexer(), HtmlFormatter(nowrap=True))
