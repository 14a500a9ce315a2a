"""
Phenotype Package

This package implements the phenotype representation: the runnable brain
evaluating the network a genome encodes.

Modules:
    brain_base: Abstract base class for brain implementations
    brain:      Single-pass evaluator of a graph-of-nodes genome

Exported Classes:
    BrainBase: Abstract base class for brain implementations
    Brain:     Evaluates a genome's network in a single pass over its connections
"""

from neatcritters.phenotype.brain_base import BrainBase
from neatcritters.phenotype.brain      import Brain

__all__ = ['Brain',
           'BrainBase']
