"""
Brain Module

This module implements the Brain class, which evaluates the network
encoded by a Genome.

Classes:
    Brain: Evaluates a genome's network in a single pass over its connections
"""

import math
from typing import Callable, Mapping, TYPE_CHECKING

from loguru import logger

from neatcritters.activations          import activations
from neatcritters.errors               import ConfigurationError, StructuralError
from neatcritters.phenotype.brain_base import BrainBase

if TYPE_CHECKING:
    from neatcritters.genotype import ConnectionGene, Genome

class Brain(BrainBase):
    """
    Evaluates the network encoded by a Genome.

    The network maps a dictionary of named inputs to a dictionary of named
    outputs. The genome stores its connections in topological order, so one
    walk over them computes every node:
        value[target] += weight * activation(value[source])
    for each enabled connection, where nodes not set yet count as 0. Each output
    is then 'activation(value[output])'. There are no biases and no per-node
    activation functions: a single activation is used everywhere.

    The 'legacy' activation also replays how earlier versions of the creature
    simulation evaluated a network:
     - a source node without a value, or whose activation is NaN, contributes 0
     - a NaN target value is reset to 0 before the contribution is added
     - an output no connection has reached reads as NaN

    Public Properties:
        activation_name: Name of the activation function
        nodes:           All node keys of the network
        connections:     Connection genes, in evaluation order
        node_levels:     Drawing level of each node

    Public Methods:
        think(inputs): Compute the outputs for a dictionary of inputs
    """

    def __init__(self, genome: 'Genome', activation_name: str = 'logistic'):
        """
        Parameters:
            genome:          the Genome encoding the network
            activation_name: name of the activation function (see 'basic_activations.py')

        Raises:
            ConfigurationError: If the activation function is unknown
        """
        super().__init__(genome)

        if activation_name not in activations:
            raise ConfigurationError(f"Unknown activation function '{activation_name}'")
        self.activation_name: str = activation_name
        self._activation: Callable[[float], float] = activations[activation_name]
        self._legacy: bool = activation_name == 'legacy'

    @property
    def nodes(self) -> tuple[str, ...]:
        return self._genome.nodes

    @property
    def connections(self) -> tuple['ConnectionGene', ...]:
        return self._genome.connections

    @property
    def node_levels(self) -> dict[str, int]:
        return self._genome.node_levels

    def think(self, inputs: Mapping[str, float]) -> dict[str, float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: input node key => value. Missing inputs count as 0.

        Returns:
            output node key => value

        Raises:
            StructuralError: If the network references an unknown node, or its
                             connections are not in evaluation order. Genome
                             validation makes this unreachable for a well-formed
                             Genome.
        """
        roles  = self._genome.roles
        values = dict(inputs)

        consumed = set()
        for conn in self._genome.connections:
            if conn.node_in not in roles or conn.node_out not in roles:
                logger.error("Connection {} references an unknown node", conn)
                raise StructuralError(f"Connection {conn.innovation} references an unknown node "
                                      f"({conn.node_in} => {conn.node_out})")
            if not conn.enabled:
                continue

            consumed.add(conn.node_in)
            if conn.node_out in consumed:
                logger.error("Node {} updated after having been consumed", conn.node_out)
                raise StructuralError(f"Node '{conn.node_out}' is updated after having been consumed")

            if self._legacy:
                source_value = self._legacy_source_value(values, conn.node_in)
                target_value = values.get(conn.node_out, 0.0)
                if math.isnan(target_value):
                    target_value = 0.0
            else:
                source_value = self._activation(values.get(conn.node_in, 0.0))
                target_value = values.get(conn.node_out, 0.0)
            values[conn.node_out] = target_value + conn.weight * source_value

        missing = math.nan if self._legacy else 0.0
        return {key: float(self._activation(values.get(key, missing))) for key in roles.outputs}

    def _legacy_source_value(self, values: dict[str, float], key: str) -> float:
        # a node without a value, or whose activation is NaN, contributes 0
        if key not in values:
            return 0.0
        value = float(self._activation(values[key]))
        return 0.0 if math.isnan(value) else value

    def __repr__(self):
        return f"Brain(genome={self._genome.id!r}, activation={self.activation_name!r})"
