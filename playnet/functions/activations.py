"""
Activation functions - value, derivative and a Python rendering template
"""

from collections import namedtuple

import numpy as np


ActivationFunction = namedtuple('ActivationFunction', ['name', 'output', 'der', 'to_py'])
ActivationFunction.__doc__ = """
A node's activation function.

Attributes:
    name: Registry key
    output: f(total_input) -> output
    der: f'(total_input)
    to_py: Renders the activation around a Python expression string
"""


def _tanh(x):
    return float(np.tanh(x))


def _tanh_der(x):
    output = _tanh(x)
    return 1 - output * output


def _relu(x):
    # NaN falls through both comparisons and is returned unchanged.
    if x > 0:
        return x
    return 0.0 if x <= 0 else x


def _relu_der(x):
    return 0.0 if x <= 0 else 1.0


def _leaky_relu(x):
    return 0.1 * x if x <= 0 else x


def _leaky_relu_der(x):
    return 0.1 if x <= 0 else 1.0


def _elu(x):
    return float(0.1 * (np.exp(x) - 1)) if x <= 0 else x


def _elu_der(x):
    # output + alpha for every x; above zero this is not the slope of _elu.
    return _elu(x) + 0.1


def _sigmoid(x):
    return float(1 / (1 + np.exp(-x)))


def _sigmoid_der(x):
    output = _sigmoid(x)
    return output * (1 - output)


def _softplus(x):
    return float(np.log(1 + np.exp(x)))


def _swish(x):
    return x * _sigmoid(x)


def _swish_der(x):
    # Expressed through the swish output itself; not the slope of _swish.
    output = _swish(x)
    return output * (1 - output)


def _mish(x):
    return float(x * np.tanh(np.log(1 + np.exp(x))))


def _mish_der(x):
    omega = np.exp(x)
    delta = omega + 1
    tanh_val = np.tanh(np.log(delta))
    return float(tanh_val + x * (omega / delta) * (1 - tanh_val * tanh_val))


def _gelu(x):
    term1 = x + 0.044715 * x ** 3
    term2 = 1 + np.tanh(np.sqrt(2 / 3.14159265) * term1)
    return float(0.5 * x * term2)


def _gelu_der(x):
    # Closed-form approximation with its own constants, kept as published.
    inner = 0.797885 * x + 0.0356774 * x ** 3
    term1 = 0.398942 * x + 0.0535161 * x ** 3
    sech = 1 / np.cosh(inner)
    term2 = 0.5 * np.tanh(inner)
    return float(0.5 + term1 * sech ** 2 + term2)


def _bent_identity(x):
    return float((np.sqrt(x * x + 1) - 1) / 2 + x)


def _bent_identity_der(x):
    return float(x / (2 * np.sqrt(x * x + 1)) + 1)


TANH = ActivationFunction(
    'tanh', _tanh, _tanh_der,
    lambda s: f'math.tanh({s})')
RELU = ActivationFunction(
    'relu', _relu, _relu_der,
    lambda s: f'max(0, {s})')
LEAKY_RELU = ActivationFunction(
    'leakyrelu', _leaky_relu, _leaky_relu_der,
    lambda s: f'max(0, {s} * 0.1)')
ELU = ActivationFunction(
    'elu', _elu, _elu_der,
    lambda s: f'ELU({s})')
SOFTPLUS = ActivationFunction(
    'softplus', _softplus, _sigmoid,
    lambda s: f'np.log(1 + np.exp({s}))')
SIGMOID = ActivationFunction(
    'sigmoid', _sigmoid, _sigmoid_der,
    lambda s: f'1 / (1 + math.exp(-({s})))')
SWISH = ActivationFunction(
    'swish', _swish, _swish_der,
    lambda s: f'{s} * SIGMOID({s})')
MISH = ActivationFunction(
    'mish', _mish, _mish_der,
    lambda s: f'{s} * np.tanh(np.log(1 + np.exp({s})))')
GELU = ActivationFunction(
    'gelu', _gelu, _gelu_der,
    lambda s: f'{s} * GELU({s})')
LINEAR = ActivationFunction(
    'linear', lambda x: x, lambda x: 1.0,
    lambda s: f'{s}')
BENT_IDENTITY = ActivationFunction(
    'bent', _bent_identity, _bent_identity_der,
    lambda s: f'(np.sqrt({s}**2 + 1) - 1) / 2 + {s}')
