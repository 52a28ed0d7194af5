"""
Training driver - batches samples through the propagation engine
"""

import numpy as np
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .functions import ErrorFunction, EvalFunction, RegularizationFunction
from .nn.builder import Network
from .nn.propagation import back_prop, forward_prop, update_weights

Sample = Tuple[Sequence[float], float]


def iterate_batches(
    samples: Sequence[Sample],
    batch_size: int,
    shuffle: bool = False,
    seed: Optional[int] = None
) -> Iterator[List[Sample]]:
    """
    Split samples into consecutive batches.

    Args:
        samples: (inputs, target) pairs
        batch_size: Samples per batch; the last batch may be shorter
        shuffle: Visit the samples in random order
        seed: Random seed for shuffling

    Yields:
        batch: List of samples
    """
    indices = np.arange(len(samples))
    if shuffle:
        if seed is not None:
            np.random.seed(seed)
        np.random.shuffle(indices)

    for start in range(0, len(samples), batch_size):
        yield [samples[i] for i in indices[start:start + batch_size]]


def train_epoch(
    network: Network,
    samples: Sequence[Sample],
    batch_size: int,
    learning_rate: float,
    error_func: ErrorFunction,
    regularization: Optional[RegularizationFunction] = None,
    regularization_rate: float = 0.0,
    shuffle: bool = False
) -> None:
    """
    Run one pass over the samples, updating the weights once per batch.

    Args:
        network: Layered node matrix
        samples: (inputs, target) pairs
        batch_size: Samples accumulated per weight update
        learning_rate: Gradient descent step size
        error_func: Error function for the backward pass
        regularization: Weight penalty, or None
        regularization_rate: Scale of the penalty's derivative
        shuffle: Visit the samples in random order
    """
    for batch in iterate_batches(samples, batch_size, shuffle=shuffle):
        for inputs, target in batch:
            forward_prop(network, inputs)
            back_prop(network, target, error_func)
        update_weights(network, learning_rate, regularization, regularization_rate)


def get_loss(network: Network, samples: Sequence[Sample], error_func: ErrorFunction) -> float:
    """Mean per-sample error of the network over the samples."""
    if len(samples) == 0:
        return 0.0
    total = 0.0
    for inputs, target in samples:
        output = forward_prop(network, inputs)
        total += error_func.error(output, target)
    return total / len(samples)


def evaluate(network: Network, samples: Sequence[Sample], eval_func: EvalFunction) -> float:
    """Apply an evaluation metric to the network's outputs over the samples."""
    outputs = [forward_prop(network, inputs) for inputs, _ in samples]
    targets = [target for _, target in samples]
    return eval_func.evaluate(outputs, targets)


def train(
    network: Network,
    train_data: Sequence[Sample],
    error_func: ErrorFunction,
    epochs: int = 100,
    batch_size: int = 10,
    learning_rate: float = 0.03,
    regularization: Optional[RegularizationFunction] = None,
    regularization_rate: float = 0.0,
    validation_data: Optional[Sequence[Sample]] = None,
    shuffle: bool = False,
    verbose: bool = True
) -> Dict[str, Any]:
    """
    Train a network with mini-batch gradient descent.

    Args:
        network: Layered node matrix
        train_data: (inputs, target) pairs
        error_func: Error function used for gradients and reported loss
        epochs: Number of passes over train_data
        batch_size: Samples per weight update
        learning_rate: Gradient descent step size
        regularization: Weight penalty, or None
        regularization_rate: Scale of the penalty's derivative
        validation_data: Optional held-out (inputs, target) pairs
        shuffle: Shuffle the samples every epoch
        verbose: Print training progress

    Returns:
        history: Dict with 'train_loss', 'val_loss', 'epochs'

    Example:
        >>> from playnet.functions import errors
        >>> history = train(net, samples, errors.SQUARE, epochs=50)
        >>> history['train_loss'][-1]
    """
    history = {
        'train_loss': [],
        'val_loss': [],
        'epochs': []
    }

    for epoch in range(epochs):
        train_epoch(network, train_data, batch_size, learning_rate, error_func,
                    regularization, regularization_rate, shuffle=shuffle)

        train_loss = get_loss(network, train_data, error_func)
        history['train_loss'].append(train_loss)
        history['epochs'].append(epoch)

        if validation_data is not None:
            val_loss = get_loss(network, validation_data, error_func)
            history['val_loss'].append(val_loss)

        # Print progress
        if verbose and (epoch % 10 == 0 or epoch == epochs - 1):
            if validation_data is not None:
                print(f"Epoch {epoch}/{epochs}: "
                      f"train_loss={train_loss:.4f}, val_loss={val_loss:.4f}")
            else:
                print(f"Epoch {epoch}/{epochs}: train_loss={train_loss:.4f}")

    return history
