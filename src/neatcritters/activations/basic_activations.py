import numpy as np

def identity_activation(z):
    return z

def logistic_activation(z):
    z = np.clip(z, -500, 500)   # to prevent overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-z))

def legacy_activation(z):
    # Operator precedence in earlier versions of the creature simulation turned
    # '1 / (1 + e^-z)' into '1 / 1 + e^-z'. Kept for genomes evolved under it.
    # Large negative inputs overflow to inf there, so they do here.
    with np.errstate(over='ignore'):
        return 1.0 + np.exp(-z)

def tanh_activation(z):
    return np.tanh(z)

activations = {
    "identity": identity_activation,
    "logistic": logistic_activation,
    "legacy"  : legacy_activation,
    "tanh"    : tanh_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "identity": "IDN",
    "logistic": "LOG",
    "legacy"  : "LGC",
    "tanh"    : "TNH"
    }
