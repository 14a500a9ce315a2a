"""
Traits Module

This module implements the Traits class: the scalar and categorical genes of a
creature which are not part of its network graph.

Classes:
    Traits: Eye size, body colour hue, egg colour hue and sight resolution
"""

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neatcritters.numeric import RandomSource

class Traits:
    """
    The non-topological genes of a creature.

    Public Attributes:
        eye_size:         Angular size of the creature's field of view (radians)
        color:            Hue of the creature's body, in [0, 360)
        egg_color:        Hue of the creature's eggs, in [0, 360)
        sight_resolution: Number of sight slots; each slot feeds four network inputs

    Public Methods:
        mix(other, rng): Create the traits of an offspring
        to_dict():       Convert the traits to their persisted dictionary form

    Class Methods:
        random(rng, sight_resolution): Draw the traits of a brand new creature
        from_dict(traits_dict):        Create traits from their persisted dictionary form
    """

    # Allowed eye size range
    MIN_EYE_SIZE = 0.17 * math.pi
    MAX_EYE_SIZE = 0.27 * math.pi

    def __init__(self, eye_size: float, color: int, egg_color: int, sight_resolution: int):
        self.eye_size        : float = float(eye_size)
        self.color           : int   = int(color)
        self.egg_color       : int   = int(egg_color)
        self.sight_resolution: int   = int(sight_resolution)

    @classmethod
    def random(cls, rng: 'RandomSource', sight_resolution: int = 3) -> 'Traits':
        egg_color = math.floor(rng.random() * 360)
        color     = math.floor(rng.random() * 360)
        eye_size  = (0.17 + 0.1 * rng.random()) * math.pi
        return cls(eye_size, color, egg_color, sight_resolution)

    def mix(self, other: 'Traits', rng: 'RandomSource') -> 'Traits':
        """
        Create the traits of an offspring of this creature and 'other'.

        Each trait is mixed independently with a bimodal blend: the eye size is
        then clamped to its allowed range, the hues are blended along the shorter
        arc of the colour wheel. The sight resolution is inherited from this
        creature, since it fixes the network's input interface.

        Parameters:
            other: the traits of the other parent
            rng:   source of the random draws

        Returns:
            the offspring's traits
        """
        egg_color = self._bimodal_hue_mix(self.egg_color, other.egg_color, rng)
        color     = self._bimodal_hue_mix(self.color, other.color, rng)
        eye_size  = rng.bimodal_mix(self.eye_size, other.eye_size)
        eye_size  = min(self.MAX_EYE_SIZE, max(self.MIN_EYE_SIZE, eye_size))  # Clip it
        return Traits(eye_size, color, egg_color, self.sight_resolution)

    @staticmethod
    def _bimodal_hue_mix(lhs: int, rhs: int, rng: 'RandomSource') -> int:
        smaller = min(lhs, rhs)
        larger  = max(lhs, rhs)

        # Blend across the 0/360 boundary when that is the shorter way round
        if larger - smaller < 360 + smaller - larger:
            mixed = rng.bimodal_mix(smaller, larger)
        else:
            mixed = rng.bimodal_mix(smaller + 360, larger)
        return math.floor(mixed + 360) % 360

    def to_dict(self) -> dict:
        return {"eyeSize"        : self.eye_size,
                "color"          : self.color,
                "eggColor"       : self.egg_color,
                "sightResolution": self.sight_resolution}

    @classmethod
    def from_dict(cls, traits_dict: dict) -> 'Traits':
        return cls(traits_dict["eyeSize"],
                   traits_dict["color"],
                   traits_dict["eggColor"],
                   traits_dict["sightResolution"])

    def __eq__(self, other):
        if not isinstance(other, Traits):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self):
        return (f"Traits(eye_size={self.eye_size:.4f}, color={self.color}, "
                f"egg_color={self.egg_color}, sight_resolution={self.sight_resolution})")
