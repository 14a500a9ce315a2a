"""
Activations Package

This package provides the activation functions a Brain can apply at every
connection and at the output nodes.

Exported:
    activations:      Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: identity_activation, logistic_activation,
                                     legacy_activation, tanh_activation
"""

from neatcritters.activations.basic_activations import (
    activations,
    activation_codes,
    identity_activation,
    logistic_activation,
    legacy_activation,
    tanh_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'identity_activation',
    'logistic_activation',
    'legacy_activation',
    'tanh_activation'
]
