"""
Random Source Module

This module implements the RandomSource class, the single stream of random
draws behind every stochastic decision taken by the genome core (initial
weights, mutation choice, crossover blends, trait mixing, fresh identifiers).

Classes:
    RandomSource: Seeded uniform generator with a Box-Muller normal sampler
"""

import math
import uuid
from collections.abc import Sequence
from typing          import Optional, TypeVar

import numpy as np

T = TypeVar("T")

class RandomSource:
    """
    A seeded source of random numbers.

    Uniform draws come from a NumPy Generator driven by the Mersenne Twister
    bit generator. Normal variates are derived from those uniform draws with the
    Box-Muller transform, so the whole stream is reproducible from one seed.

    Public Attributes:
        seed: The seed used to build the generator (None if drawn from OS entropy)

    Public Methods:
        random():         Uniform float in [0, 1)
        coin():           Fair coin flip
        index(n):         Uniform integer in [0, n)
        choice(seq):      Uniform element of a non-empty sequence
        uniform(lo, hi):  Uniform float in [lo, hi)
        normal(mean,dev): Normally distributed float
        bimodal_normal(): Standard normal shifted by 0 or 1 with equal probability
        bimodal_mix(a,b): Random blend of two values, usually close to one of them
        token():          Random UUID-formatted string
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Parameters:
            seed: Seed for the generator; None seeds from OS entropy
        """
        self.seed = seed
        self._generator = np.random.Generator(np.random.MT19937(seed))

    def random(self) -> float:
        return float(self._generator.random())

    def coin(self) -> bool:
        return self.random() < 0.5

    def index(self, n: int) -> int:
        """
        Draw a uniform integer in [0, n).

        Raises:
            ValueError: If 'n' is not positive
        """
        if n <= 0:
            raise ValueError(f"Cannot draw an index from an empty range (n={n})")
        return min(int(self.random() * n), n - 1)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.index(len(seq))]

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.random()

    def normal(self, mean: float = 0.0, dev: float = 1.0) -> float:
        """
        Draw from a normal distribution using the Box-Muller transform.

        Parameters:
            mean: Mean of the distribution
            dev:  Standard deviation of the distribution

        Returns:
            A normally distributed value
        """
        u1 = 1.0 - self.random()    # in (0, 1], keeps log() finite
        u2 = self.random()
        radius = math.sqrt(-2.0 * math.log(u1))
        return mean + dev * radius * math.cos(2.0 * math.pi * u2)

    def bimodal_normal(self) -> float:
        return (0.0 if self.coin() else 1.0) + self.normal()

    def bimodal_mix(self, lhs: float, rhs: float) -> float:
        """
        Blend two values as p*lhs + (1-p)*rhs, where p is drawn from 'bimodal_normal'.

        The result is usually close to one of the two values, and occasionally
        an interpolation or extrapolation of both.
        """
        p = self.bimodal_normal()
        return p * lhs + (1.0 - p) * rhs

    def token(self) -> str:
        """
        Random version-4 UUID string, drawn from this source (and so reproducible).
        """
        return str(uuid.UUID(bytes=self._generator.bytes(16), version=4))

    def __repr__(self):
        return f"RandomSource(seed={self.seed})"
