"""
Weight regularization penalties and their derivatives
"""

from collections import namedtuple


RegularizationFunction = namedtuple('RegularizationFunction', ['name', 'output', 'der'])


def _sign(w):
    if w < 0:
        return -1.0
    if w > 0:
        return 1.0
    return 0.0


L1 = RegularizationFunction('L1', abs, _sign)
L2 = RegularizationFunction('L2', lambda w: 0.5 * w * w, lambda w: w)
ELASTIC_NET = RegularizationFunction(
    'elastic net',
    lambda w: 0.5 * w * w + abs(w),
    lambda w: w + _sign(w))
HUBER = RegularizationFunction(
    'huber',
    lambda w: 0.5 * w * w if abs(w) < 1 else abs(w) - 0.5,
    lambda w: w if abs(w) < 1 else _sign(w))
