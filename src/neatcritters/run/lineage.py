"""
Lineage Module

This module implements the Lineage class: the reproduction context shared by
all the genomes descending from one population.

Classes:
    Lineage: Owns the configuration, random source and innovation tracker of a population
"""

from typing import Iterable, Optional

from loguru import logger

from neatcritters.genotype.connection_gene    import ConnectionGene
from neatcritters.genotype.crossover          import Crossover
from neatcritters.genotype.genome             import Genome
from neatcritters.genotype.innovation_tracker import InnovationTracker
from neatcritters.genotype.mutation           import TopologyMutator
from neatcritters.genotype.node_roles         import NodeRoles
from neatcritters.genotype.traits             import Traits
from neatcritters.numeric                     import RandomSource
from neatcritters.run.config                  import Config

class Lineage:
    """
    The reproduction context of a population of genomes.

    A lineage owns everything that reproduction reads or advances:
     + the configuration (mutation probabilities, weight deviations, activation)
     + the random source behind every stochastic decision
     + the innovation tracker issuing the ids of new genes

    Every genome remembers its lineage and reproduces through it. Independent
    lineages never share state, so several evolutionary runs can proceed side
    by side, and a lineage created with a fixed seed reproduces identically.
    The configuration may be replaced between calls; it is read anew by every
    reproduction.

    Public Attributes:
        config:  Stores configuration parameters
        rng:     Source of all random draws
        tracker: Issues the ids of new genes

    Public Properties:
        mutator:   TopologyMutator bound to this lineage
        crossover: Crossover bound to this lineage

    Public Methods:
        generate_initial_genome(input_keys, output_keys, traits): Fully connected genome for any interface
        generate_random_genome(sight_resolution):                 Fully connected creature genome
        generate_reduced_random_genome(sight_resolution):         Creature genome wired only from sight to motion
    """

    # Outputs wired in a reduced genome
    REDUCED_OUTPUTS = ('acceleration_angle', 'acceleration_radius')

    # Sight channels wired in a reduced genome (lightness and distance)
    REDUCED_SIGHT_CHANNELS = ('l', 'd')

    def __init__(self,
                 config   : Optional[Config] = None,
                 seed     : Optional[int]    = None,
                 namespace: Optional[str]    = None):
        """
        Parameters:
            config:    Configuration; if None, the defaults are used
            seed:      Seed of the random source; if None, seeded from OS entropy
            namespace: Prefix of the innovation ids issued by this lineage;
                       if None, a random one is drawn from the random source

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else Config()
        self.config.validate()

        self.rng = RandomSource(seed)
        if namespace is None:
            namespace = self.rng.token()[:8]
        self.tracker = InnovationTracker(namespace)

    @property
    def mutator(self) -> TopologyMutator:
        return TopologyMutator(self.config, self.rng, self.tracker)

    @property
    def crossover(self) -> Crossover:
        return Crossover(self.config, self.rng, self.tracker)

    def generate_initial_genome(self,
                                input_keys : Iterable[str],
                                output_keys: Iterable[str],
                                traits     : Optional[Traits] = None) -> Genome:
        """
        Create a minimal genome: every input connected to every output, no hidden nodes.

        Weights are drawn from a zero-centered normal distribution. Each connection
        gets the initial innovation id derived from its endpoints, which is shared
        by all the genomes created this way.

        Parameters:
            input_keys:  The input node keys
            output_keys: The output node keys
            traits:      The non-topological traits; if None, random ones are drawn

        Returns:
            the new genome
        """
        roles = NodeRoles(input_keys, output_keys)
        return self._build_genome(roles, roles.inputs, roles.outputs, traits)

    def generate_random_genome(self, sight_resolution: Optional[int] = None) -> Genome:
        """
        Create a minimal genome for the creature interface (see 'Genome.input_node_ids').

        Parameters:
            sight_resolution: number of sight slots; if None, taken from the configuration
        """
        resolution = self._sight_resolution(sight_resolution)
        roles = NodeRoles(Genome.input_node_ids(resolution), Genome.output_node_ids())
        return self._build_genome(roles, roles.inputs, roles.outputs, None, resolution)

    def generate_reduced_random_genome(self, sight_resolution: Optional[int] = None) -> Genome:
        """
        Create a creature genome with fewer initial connections.

        The genome has the full creature interface, but only the lightness and
        distance channels of each sight slot are connected, and only to the
        two acceleration outputs.

        Parameters:
            sight_resolution: number of sight slots; if None, taken from the configuration
        """
        resolution = self._sight_resolution(sight_resolution)
        roles = NodeRoles(Genome.input_node_ids(resolution), Genome.output_node_ids())

        reduced_inputs = [f"sight_{Genome.pixel_id_for_resolution(i, resolution)}{channel}"
                          for i in range(resolution)
                          for channel in self.REDUCED_SIGHT_CHANNELS]
        return self._build_genome(roles, reduced_inputs, self.REDUCED_OUTPUTS, None, resolution)

    def _sight_resolution(self, sight_resolution: Optional[int]) -> int:
        return self.config.sight_resolution if sight_resolution is None else sight_resolution

    def _build_genome(self,
                      roles           : NodeRoles,
                      inputs          : Iterable[str],
                      outputs         : Iterable[str],
                      traits          : Optional[Traits],
                      sight_resolution: Optional[int] = None) -> Genome:
        self.config.validate()
        stdev   = self.config.weight_init_stdev
        outputs = list(outputs)

        connections = []
        for node_in in inputs:
            for node_out in outputs:
                weight     = self.rng.normal(0.0, stdev)
                innovation = InnovationTracker.initial_innovation(node_in, node_out)
                connections.append(ConnectionGene(node_in, node_out, weight, innovation))

        if traits is None:
            traits = Traits.random(self.rng, self._sight_resolution(sight_resolution))

        genome = Genome(roles, connections, traits, self)
        logger.debug("Generated genome {} with {} connections", genome.id, len(connections))
        return genome

    def __repr__(self):
        return f"Lineage(seed={self.rng.seed}, namespace={self.tracker.namespace!r})"
