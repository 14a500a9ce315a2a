"""
Brain Base Module

This module defines the abstract base class for the runnable phenotype of a
genome. It provides a common interface and shared introspection for the
different brain implementations a creature can be driven by.

Classes:
    BrainBase: Abstract base class defining the brain interface
"""

from abc    import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from neatcritters.genotype import Genome

class BrainBase(ABC):
    """
    Abstract base class for brain implementations.

    A brain is a thin, stateless wrapper around one genome: it keeps nothing
    between calls to 'think', so several callers may share it.

    Public Properties (available to all subclasses):
        genome:                     The genome this brain evaluates
        number_nodes:               Total number of nodes in the network
        number_nodes_hidden:        Number of hidden nodes in the network
        number_connections:         Total number of connections in the network
        number_connections_enabled: Number of enabled connections in the network

    Public Methods (must be implemented by subclasses):
        think(inputs): Process inputs through the network and return outputs
    """

    def __init__(self, genome: 'Genome'):
        """
        Parameters:
            genome: The Genome encoding the network structure
        """
        self._genome = genome

    @property
    def genome(self) -> 'Genome':
        return self._genome

    @property
    def possessed(self) -> bool:
        """Whether the creature is steered from outside rather than by this brain."""
        return False

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._genome.nodes)

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden nodes in the network."""
        return len(self._genome.hidden_nodes)

    @property
    def number_connections(self) -> int:
        """Total number of connections in the network."""
        return len(self._genome.connections)

    @property
    def number_connections_enabled(self) -> int:
        """Number of enabled connections in the network."""
        return sum(1 for conn in self._genome.connections if conn.enabled)

    @abstractmethod
    def think(self, inputs: Any) -> Any:
        """
        Compute the outputs of the network.

        Parameters:
            inputs: Network inputs (implementation-specific type)

        Returns:
            Network outputs (implementation-specific type)
        """
        pass
