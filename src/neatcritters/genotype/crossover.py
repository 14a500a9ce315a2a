"""
Crossover Module

This module implements the Crossover class, which combines the connection
genes of two parent genomes.

Classes:
    Crossover: Aligns the genes of two parents by innovation id and blends their weights
"""

from typing import TYPE_CHECKING

from loguru import logger

from neatcritters.genotype.connection_gene import ConnectionGene

if TYPE_CHECKING:
    from neatcritters.genotype.genome             import Genome
    from neatcritters.genotype.innovation_tracker import InnovationTracker
    from neatcritters.genotype.node_roles         import NodeRoles
    from neatcritters.numeric                     import RandomSource
    from neatcritters.run.config                  import Config

class Crossover:
    """
    Combines two parent genomes into the (nodes, connections) pair of their offspring.

    The offspring takes its structure from the 'primary' parent: all of its
    nodes and, one for one, all of its connections. The 'secondary' parent
    only contributes weights, for the genes it shares with the primary.

    For each connection of the primary parent:
     + if it is enabled, and the secondary parent has a gene with the same innovation id:
       weight = bimodal mix of the two parents' weights + a small normal perturbation;
       the gene keeps its innovation id
     + otherwise (disabled, or unpaired):
       weight = bimodal mix of the primary's weight and a freshly drawn normal value;
       the gene gets a new innovation id, its enabled flag is kept

    NOTE: re-identifying unpaired genes departs from classical NEAT, where a
          gene keeps its innovation id forever. An unpaired gene can therefore
          only be paired again by descendants of this offspring.

    Public Methods:
        cross(primary, secondary): Create the offspring's (nodes, connections) pair
    """

    def __init__(self, config: 'Config', rng: 'RandomSource', tracker: 'InnovationTracker'):
        """
        Parameters:
            config:  Stores configuration parameters
            rng:     Source of all random draws
            tracker: Issues the ids of re-identified genes
        """
        self._config  = config
        self._rng     = rng
        self._tracker = tracker

    def cross(self, primary: 'Genome', secondary: 'Genome') -> tuple['NodeRoles', list[ConnectionGene]]:
        """
        Parameters:
            primary:   the parent providing the structure of the offspring
            secondary: the parent providing alternative weights for shared genes

        Returns:
            the (nodes, connections) pair of the offspring (not yet validated)
        """
        weight_mutation_stdev          = self._config.weight_mutation_stdev
        unpaired_weight_mutation_stdev = self._config.unpaired_weight_mutation_stdev

        # Index the genes of the secondary parent by innovation id
        secondary_genes = {conn.innovation: conn for conn in secondary.connections}

        connections = []
        num_paired  = 0
        for conn in primary.connections:
            match = secondary_genes.get(conn.innovation)

            if conn.enabled and match is not None:
                weight = self._rng.bimodal_mix(conn.weight, match.weight) + \
                         self._rng.normal(0.0, weight_mutation_stdev)
                connections.append(conn.copy(weight=weight, enabled=True))
                num_paired += 1
            else:
                partner = self._rng.normal(0.0, unpaired_weight_mutation_stdev)
                weight  = self._rng.bimodal_mix(conn.weight, partner)
                connections.append(conn.copy(weight=weight, innovation=self._tracker.new_innovation()))

        logger.debug("Crossover of {} and {}: {} paired genes, {} unpaired",
                     primary.id, secondary.id, num_paired, len(connections) - num_paired)
        return primary.roles, connections
