"""
NeuralNetwork - a configured network with its training operations

Bundles the layered node matrix with the NetworkConfig it was built from so
callers can drive forward/backward/update cycles without passing the
functions around.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..config import NetworkConfig
from ..functions import get_eval
from .. import train as training
from .builder import Network, build_network
from .compiler import compile_network_to_py
from .inspect import architecture_stats, link_states, node_states
from .graph import Node
from .propagation import back_prop, forward_prop, get_output_node, iter_nodes, update_weights


class NeuralNetwork:
    """
    A feed-forward network with a single output node.

    Key concepts:
    - Each node is a neuron with bias, activation and derivative state
    - Each link is a weighted connection between adjacent layers
    - backward() accumulates derivatives; update_weights() averages and
      applies them, so several backward() calls form one batch

    Attributes:
        config: Settings the network was built from
        network: Layered node matrix (list of layers, each a list of nodes)
    """

    def __init__(self, config: Optional[NetworkConfig] = None, **settings):
        """
        Build a network.

        Args:
            config: Complete configuration
            **settings: NetworkConfig fields, used when config is None
        """
        if config is None:
            config = NetworkConfig(**settings)
        elif settings:
            merged = config.to_dict()
            merged.update(settings)
            config = NetworkConfig.from_dict(merged)
        self.config = config
        self.network: Network = []
        self.rebuild()

    def rebuild(self) -> None:
        """Discard all weights and build a fresh network from the config."""
        self.network = build_network(
            self.config.full_shape,
            self.config.activation_fn,
            self.config.output_activation_fn,
            self.config.input_features,
            init_zero=self.config.init_zero,
            seed=self.config.seed
        )

    @property
    def output_node(self) -> Node:
        """The single node of the output layer."""
        return get_output_node(self.network)

    @property
    def output(self) -> float:
        """Output of the last forward pass."""
        return self.output_node.output

    def nodes(self, ignore_inputs: bool = False) -> List[Node]:
        """All nodes, layer by layer."""
        return list(iter_nodes(self.network, ignore_inputs))

    def forward(self, inputs: Sequence[float]) -> float:
        """
        Forward propagation through the network.

        Args:
            inputs: One value per input feature

        Returns:
            output: Network prediction
        """
        return forward_prop(self.network, inputs)

    def backward(self, target: float) -> float:
        """
        Backward propagation (accumulate derivatives).

        Args:
            target: Expected output for the last forward pass

        Returns:
            loss: Error of the last output against target
        """
        back_prop(self.network, target, self.config.error_fn)
        return self.config.error_fn.error(self.output, target)

    def update_weights(self, learning_rate: Optional[float] = None) -> None:
        """
        Apply accumulated derivatives with the configured regularization.

        Args:
            learning_rate: Optional learning rate override
        """
        if learning_rate is None:
            learning_rate = self.config.learning_rate
        update_weights(self.network, learning_rate,
                       self.config.regularization_fn, self.config.regularization_rate)

    def train_step(
        self,
        inputs: Sequence[float],
        target: float,
        learning_rate: Optional[float] = None
    ) -> float:
        """
        Complete training step on one sample: forward + backward + update.

        Returns:
            loss: Error before the update
        """
        self.forward(inputs)
        loss = self.backward(target)
        self.update_weights(learning_rate)
        return loss

    def fit(
        self,
        train_data: Sequence[training.Sample],
        epochs: int = 100,
        validation_data: Optional[Sequence[training.Sample]] = None,
        shuffle: bool = False,
        verbose: bool = True
    ) -> Dict[str, Any]:
        """
        Train with the configured batch size, learning rate and regularization.

        Returns:
            history: Dict with 'train_loss', 'val_loss', 'epochs'
        """
        return training.train(
            self.network,
            train_data,
            self.config.error_fn,
            epochs=epochs,
            batch_size=self.config.batch_size,
            learning_rate=self.config.learning_rate,
            regularization=self.config.regularization_fn,
            regularization_rate=self.config.regularization_rate,
            validation_data=validation_data,
            shuffle=shuffle,
            verbose=verbose
        )

    def loss(self, samples: Sequence[training.Sample]) -> float:
        """Mean error over the samples."""
        return training.get_loss(self.network, samples, self.config.error_fn)

    def evaluate(self, samples: Sequence[training.Sample], metric: str) -> float:
        """
        Score the network with a named evaluation metric.

        Args:
            samples: (inputs, target) pairs
            metric: 'f1', 'mcc', 'r2' or 'rmse'
        """
        return training.evaluate(self.network, samples, get_eval(metric))

    def compile(self, highlighted: bool = True) -> str:
        """Render the network as a Python function."""
        return compile_network_to_py(self.network, highlighted=highlighted)

    def node_states(self) -> List[Dict[str, Any]]:
        return node_states(self.network)

    def link_states(self) -> List[Dict[str, Any]]:
        return link_states(self.network)

    def stats(self) -> Dict[str, Any]:
        return architecture_stats(self.network)

    def __repr__(self):
        """String representation."""
        n_nodes = sum(len(layer) for layer in self.network)
        return (f"NeuralNetwork(nodes={n_nodes}, shape={self.config.full_shape}, "
                f"activation='{self.config.activation}', "
                f"output_activation='{self.config.output_activation}')")
