"""
playnet.functions - Named function families that parameterize a network

Each family is a fixed registry keyed by the names used in network
configuration:
- Activation: value, derivative and Python rendering for a node
- Error: per-sample loss and its derivative w.r.t. the output
- Regularization: weight penalty and its derivative
- Eval: metric over whole output/target vectors
"""

from typing import Any, Dict, Optional

from ..exceptions import ConfigurationError
from . import activations, errors, regularizations, evals
from .activations import ActivationFunction
from .errors import ErrorFunction
from .regularizations import RegularizationFunction
from .evals import EvalFunction


ACTIVATIONS: Dict[str, ActivationFunction] = {
    'relu': activations.RELU,
    'leakyrelu': activations.LEAKY_RELU,
    'elu': activations.ELU,
    'tanh': activations.TANH,
    'sigmoid': activations.SIGMOID,
    'swish': activations.SWISH,
    'mish': activations.MISH,
    'softplus': activations.SOFTPLUS,
    'gelu': activations.GELU,
    'linear': activations.LINEAR,
    'bent': activations.BENT_IDENTITY,
}

REGULARIZATIONS: Dict[str, Optional[RegularizationFunction]] = {
    'none': None,
    'L1': regularizations.L1,
    'L2': regularizations.L2,
    'elastic net': regularizations.ELASTIC_NET,
    'huber': regularizations.HUBER,
}

ERRORS: Dict[str, ErrorFunction] = {
    'square': errors.SQUARE,
    'absolute': errors.ABS,
    'hinge': errors.HINGE,
    'squared hinge': errors.SQUARED_HINGE,
    'huber': errors.HUBER,
    'modified huber': errors.MODIFIED_HUBER,
    'cross entropy': errors.BINARY_CROSS_ENTROPY,
    'exponential': errors.EXPONENTIAL,
    'poisson': errors.POISSON,
    'epsilon insensitive': errors.EPSILON_INSENSITIVE,
}

EVALS: Dict[str, EvalFunction] = {
    'f1': evals.F1,
    'mcc': evals.MATTHEWS_CORR_COEFF,
    'r2': evals.R2,
    'rmse': evals.RMSE,
}


def _lookup(registry: Dict[str, Any], name: str, kind: str) -> Any:
    if name not in registry:
        raise ConfigurationError(f"Unknown {kind} function: {name!r}. "
                                 f"Must be one of {list(registry.keys())}")
    return registry[name]


def get_activation(name: str) -> ActivationFunction:
    """Resolve an activation function by name."""
    return _lookup(ACTIVATIONS, name, 'activation')


def get_error(name: str) -> ErrorFunction:
    """Resolve an error function by name."""
    return _lookup(ERRORS, name, 'error')


def get_regularization(name: Optional[str]) -> Optional[RegularizationFunction]:
    """Resolve a regularization function by name; None and 'none' mean no regularization."""
    if name is None:
        return None
    return _lookup(REGULARIZATIONS, name, 'regularization')


def get_eval(name: str) -> EvalFunction:
    """Resolve an evaluation metric by name."""
    return _lookup(EVALS, name, 'eval')


def name_of(registry: Dict[str, Any], fn: Any) -> str:
    """
    Reverse lookup of a registered function.

    Args:
        registry: One of ACTIVATIONS, ERRORS, REGULARIZATIONS, EVALS
        fn: Function descriptor (or None for REGULARIZATIONS)

    Returns:
        name: Registry key under which fn is stored
    """
    for key, value in registry.items():
        if value is fn:
            return key
    raise ConfigurationError(f"Function {fn!r} is not registered")


__all__ = [
    'ActivationFunction',
    'ErrorFunction',
    'RegularizationFunction',
    'EvalFunction',
    'ACTIVATIONS',
    'REGULARIZATIONS',
    'ERRORS',
    'EVALS',
    'get_activation',
    'get_error',
    'get_regularization',
    'get_eval',
    'name_of',
    'activations',
    'errors',
    'regularizations',
    'evals',
]
