"""
Genome Base Module

This module defines the capability interface shared by every genome
representation a creature simulation can be populated with.

Classes:
    GenomeBase: Abstract base class defining the genome interface
"""

from abc    import ABC, abstractmethod
from typing import Any

from neatcritters.errors           import StructuralError
from neatcritters.genotype.traits  import Traits

class GenomeBase(ABC):
    """
    Abstract base class for genome representations.

    A simulation picks one representation when creating its population and
    only ever talks to genomes through this interface. Genomes of different
    representations never interbreed.

    The base class provides:
        - Identity and the non-topological traits
        - Guard against mixing genomes of different representations

    Public Properties:
        id:               Unique id of this genome
        traits:           The non-topological traits
        eye_size:         Shortcut to traits.eye_size
        sight_resolution: Shortcut to traits.sight_resolution

    Public Methods (must be implemented by subclasses):
        build_brain():  Create the runnable phenotype of this genome
        mix(other):     Create an offspring genome with another genome
        pixel_id(i):    Input-key fragment of the i-th sight slot
    """

    def __init__(self, genome_id: str, traits: Traits):
        self._id     = genome_id
        self._traits = traits

    @property
    def id(self) -> str:
        return self._id

    @property
    def traits(self) -> Traits:
        return self._traits

    @property
    def eye_size(self) -> float:
        return self._traits.eye_size

    @property
    def sight_resolution(self) -> int:
        return self._traits.sight_resolution

    @abstractmethod
    def build_brain(self) -> Any:
        pass

    @abstractmethod
    def mix(self, other: 'GenomeBase') -> 'GenomeBase':
        pass

    @abstractmethod
    def pixel_id(self, i: int) -> str:
        pass

    def _check_same_variant(self, other: 'GenomeBase') -> None:
        """
        Raises:
            StructuralError: If 'other' is not the same genome representation as this one
        """
        if type(other) is not type(self):
            raise StructuralError(f"Cannot mix a {type(self).__name__} with a {type(other).__name__}")
