"""
Error (loss) functions for a single output/target pair and their derivatives
with respect to the output.

Targets for the classification losses are expected in {-1, +1}.
"""

from collections import namedtuple

import numpy as np


ErrorFunction = namedtuple('ErrorFunction', ['name', 'error', 'der'])


def _sign(value):
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def _hinge(output, target):
    return max(0.0, 1 - output * target)


def _hinge_der(output, target):
    return 0.0 if 1 - output * target <= 0 else -target


def _squared_hinge_der(output, target):
    if 1 - output * target <= 0:
        return 0.0
    return 2 * _hinge_der(output, target)


def _huber(output, target, delta=1.0):
    diff = output - target
    if abs(diff) <= delta:
        return 0.5 * diff * diff
    return delta * (abs(diff) - 0.5 * delta)


def _huber_der(output, target, delta=1.0):
    diff = output - target
    if abs(diff) <= delta:
        return diff
    return delta if diff > 0 else -delta


def _modified_huber(output, target):
    hinge = max(0.0, 1 - target * output)
    squared_error = 0.5 * (target - output) ** 2
    return hinge + squared_error


def _modified_huber_der(output, target):
    # The hinge part switches on output alone, not on the margin.
    hinge_grad = target * (-1 if output < 1 else 0)
    squared_error_grad = output - target
    return hinge_grad + squared_error_grad


def _to_unit_interval(value):
    """Map a value from [-1, 1] onto [0, 1]."""
    return (np.float64(value) + 1) / 2


def _cross_entropy(output, target):
    target01 = _to_unit_interval(target)
    output01 = _to_unit_interval(output)
    return float(-(target01 * np.log(output01) + (1 - target01) * np.log(1 - output01)))


def _cross_entropy_der(output, target):
    target01 = _to_unit_interval(target)
    output01 = _to_unit_interval(output)
    return float((output01 - target01) / (output01 * (1 - output01)))


def _exponential(output, target):
    return float(np.exp(-output * target))


def _exponential_der(output, target):
    return float(-target * np.exp(-output * target))


def _poisson(output, target):
    return float(output - target * np.log(np.float64(output)))


def _poisson_der(output, target):
    return float(1 - target / np.float64(output))


def _epsilon_insensitive(output, target, epsilon=0.1):
    diff = abs(output - target)
    return 0.0 if diff <= epsilon else diff - epsilon


def _epsilon_insensitive_der(output, target, epsilon=0.1):
    diff = output - target
    if abs(diff) <= epsilon:
        return 0.0
    return 1.0 if diff > 0 else -1.0


SQUARE = ErrorFunction(
    'square',
    lambda output, target: 0.5 * (output - target) ** 2,
    lambda output, target: output - target)
ABS = ErrorFunction(
    'absolute',
    lambda output, target: abs(output - target),
    lambda output, target: _sign(output - target))
HINGE = ErrorFunction('hinge', _hinge, _hinge_der)
SQUARED_HINGE = ErrorFunction(
    'squared hinge',
    lambda output, target: _hinge(output, target) ** 2,
    _squared_hinge_der)
HUBER = ErrorFunction('huber', _huber, _huber_der)
MODIFIED_HUBER = ErrorFunction('modified huber', _modified_huber, _modified_huber_der)
BINARY_CROSS_ENTROPY = ErrorFunction('cross entropy', _cross_entropy, _cross_entropy_der)
EXPONENTIAL = ErrorFunction('exponential', _exponential, _exponential_der)
POISSON = ErrorFunction('poisson', _poisson, _poisson_der)
EPSILON_INSENSITIVE = ErrorFunction(
    'epsilon insensitive', _epsilon_insensitive, _epsilon_insensitive_der)
