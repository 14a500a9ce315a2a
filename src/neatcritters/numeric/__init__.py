"""
Numeric Package

Random number utilities shared by the genotype operators.

Exported Classes:
    RandomSource: Seeded uniform generator with a Box-Muller normal sampler
"""

from neatcritters.numeric.random_source import RandomSource

__all__ = ['RandomSource']
