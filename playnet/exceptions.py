"""
Exceptions raised by playnet
"""


class ConfigurationError(ValueError):
    """A network or training setting is missing, unknown or inconsistent."""


class InputShapeError(ValueError):
    """The input vector does not match the size of the input layer."""
