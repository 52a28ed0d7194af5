"""
Network and training configuration.

Functions are selected by registry name and resolved once, when the
configuration is created, so a bad name fails before any network exists.
"""

import numpy as np
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .exceptions import ConfigurationError
from .functions import get_activation, get_error, get_regularization

# Feature id -> value computed from a 2-D point (x, y).
INPUT_FEATURES: Dict[str, Callable[[float, float], float]] = {
    'x': lambda x, y: x,
    'y': lambda x, y: y,
    'xSquared': lambda x, y: x * x,
    'ySquared': lambda x, y: y * y,
    'xTimesY': lambda x, y: x * y,
    'sinX': lambda x, y: float(np.sin(x)),
    'sinY': lambda x, y: float(np.sin(y)),
}

# Problem type -> default output activation
PROBLEMS: Dict[str, str] = {
    'classification': 'tanh',
    'regression': 'linear',
}


def construct_input(x: float, y: float, features: Sequence[str]) -> List[float]:
    """
    Build the input vector for a 2-D point.

    Args:
        x: First coordinate
        y: Second coordinate
        features: Feature ids, in input-layer order

    Returns:
        inputs: One value per feature
    """
    inputs = []
    for feature in features:
        if feature not in INPUT_FEATURES:
            raise ConfigurationError(f"Unknown input feature: {feature!r}. "
                                     f"Must be one of {list(INPUT_FEATURES.keys())}")
        inputs.append(INPUT_FEATURES[feature](x, y))
    return inputs


class NetworkConfig:
    """
    Settings for building and training a network.

    Attributes:
        learning_rate: Gradient descent step size
        regularization_rate: Scale of the regularization derivative
        batch_size: Samples per weight update
        activation: Hidden activation name
        output_activation: Output activation name (derived from problem when None)
        regularization: Regularization name, or None
        error: Error function name
        problem: 'classification' or 'regression'
        network_shape: Hidden layer sizes
        input_features: Input feature ids
        init_zero: Start every bias and weight at 0
        seed: Random seed for weight initialization
        activation_fn, output_activation_fn, regularization_fn, error_fn:
            Resolved function descriptors
    """

    FIELDS = (
        'learning_rate',
        'regularization_rate',
        'batch_size',
        'activation',
        'output_activation',
        'regularization',
        'error',
        'problem',
        'network_shape',
        'input_features',
        'init_zero',
        'seed',
    )

    def __init__(
        self,
        learning_rate: float = 0.03,
        regularization_rate: float = 0.01,
        batch_size: int = 10,
        activation: str = 'sigmoid',
        output_activation: Optional[str] = None,
        regularization: Optional[str] = None,
        error: str = 'square',
        problem: str = 'classification',
        network_shape: Sequence[int] = (4,),
        input_features: Sequence[str] = ('x', 'y'),
        init_zero: bool = False,
        seed: Optional[int] = None
    ):
        if problem not in PROBLEMS:
            raise ConfigurationError(f"Unknown problem type: {problem!r}. "
                                     f"Must be one of {list(PROBLEMS.keys())}")
        if int(batch_size) < 1:
            raise ConfigurationError(f"batch_size must be positive, got {batch_size}")
        if any(int(size) < 1 for size in network_shape):
            raise ConfigurationError(f"Hidden layer sizes must be positive, got {list(network_shape)}")
        if len(input_features) == 0:
            raise ConfigurationError("At least one input feature is required")
        for feature in input_features:
            if feature not in INPUT_FEATURES:
                raise ConfigurationError(f"Unknown input feature: {feature!r}. "
                                         f"Must be one of {list(INPUT_FEATURES.keys())}")

        self.learning_rate = float(learning_rate)
        self.regularization_rate = float(regularization_rate)
        self.batch_size = int(batch_size)
        self.problem = problem
        self.network_shape = [int(size) for size in network_shape]
        self.input_features = list(input_features)
        self.init_zero = bool(init_zero)
        self.seed = seed

        self.activation = activation
        self.output_activation = output_activation if output_activation is not None else PROBLEMS[problem]
        self.regularization = None if regularization == 'none' else regularization
        self.error = error

        self.activation_fn = get_activation(self.activation)
        self.output_activation_fn = get_activation(self.output_activation)
        self.regularization_fn = get_regularization(self.regularization)
        self.error_fn = get_error(self.error)

    @property
    def full_shape(self) -> List[int]:
        """Layer sizes including the input layer and the single output node."""
        return [len(self.input_features)] + self.network_shape + [1]

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> 'NetworkConfig':
        """
        Create a configuration from a mapping of field names.

        Args:
            settings: Any subset of FIELDS; missing fields keep their defaults

        Returns:
            config: Validated configuration
        """
        unknown = [key for key in settings if key not in cls.FIELDS]
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {unknown}. "
                                     f"Must be among {list(cls.FIELDS)}")
        return cls(**settings)

    def to_dict(self) -> Dict[str, Any]:
        """Name-based form of the configuration, accepted by from_dict."""
        return {field: getattr(self, field) for field in self.FIELDS}

    def __eq__(self, other):
        if not isinstance(other, NetworkConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"NetworkConfig(shape={self.full_shape}, activation='{self.activation}', "
                f"output_activation='{self.output_activation}', error='{self.error}', "
                f"regularization={self.regularization!r}, learning_rate={self.learning_rate})")


__all__ = [
    'INPUT_FEATURES',
    'PROBLEMS',
    'construct_input',
    'NetworkConfig',
]
