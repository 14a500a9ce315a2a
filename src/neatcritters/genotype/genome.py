"""
Genome Module

This module implements the Genome class: the graph-of-nodes representation
of a creature's neural structure.

Classes:
    Genome: Validated, read-only genome encoding a feed-forward network
"""

from typing import Iterable, Optional, TYPE_CHECKING

from loguru import logger

from neatcritters.errors                   import StructuralError
from neatcritters.genotype.connection_gene import ConnectionGene
from neatcritters.genotype.genome_base     import GenomeBase
from neatcritters.genotype.node_roles      import NodeRoles, NodeType
from neatcritters.genotype.topology        import node_levels, sort_connections, validate_order
from neatcritters.genotype.traits          import Traits
from neatcritters.phenotype.brain          import Brain

if TYPE_CHECKING:
    from neatcritters.run.lineage import Lineage

class Genome(GenomeBase):
    """
    A genome representing a neural network as a set of nodes and a list of connection genes.

    The genome consists of:
    - Node roles: the node keys, partitioned into input, hidden and output nodes.
      Input and output keys name what the creature senses and what it controls.
    - Connection genes: weighted, enable-able connections between nodes, each with
      an innovation id marking it across generations for crossover

    The connections are stored in topological order (see 'topology.py'), which the
    Brain relies upon to evaluate the network in one pass. The order is computed
    and checked when the genome is created: no Genome can exist whose network has
    a cycle. After creation a genome is read-only; reproduction always yields a
    new genome.

    A genome belongs to a Lineage, which supplies the configuration, the random
    source and the innovation tracker used when it reproduces.

    Public Properties:
        roles:        The node partition
        connections:  Tuple of connection genes, in topological order
        lineage:      The Lineage this genome belongs to
        input_nodes:  Tuple of input node keys
        output_nodes: Tuple of output node keys
        hidden_nodes: Tuple of hidden node keys
        nodes:        All node keys (inputs, hidden, outputs)
        node_levels:  Drawing level of each node

    Public Methods:
        build_brain(): Create the Brain evaluating this genome
        mix(other):    Create an offspring, via crossover and one structural mutation
        pixel_id(i):   Input-key fragment of the i-th sight slot

    Static Methods:
        pixel_id_for_resolution(i, resolution): Input-key fragment of a sight slot
        sight_input_ids(resolution):            Input keys fed by the sight slots
        input_node_ids(resolution):             All input keys of a creature
        output_node_ids():                      All output keys of a creature
    """

    # Non-sight inputs of a creature
    BODY_INPUTS = ('energy', 'fire_power', 'speed', 'dna_color')

    # Each sight slot reports the hue, saturation, lightness and distance of what it sees
    SIGHT_CHANNELS = ('h', 's', 'l', 'd')

    # Outputs of a creature
    OUTPUTS = ('acceleration_angle', 'acceleration_radius', 'shooting_trigger', 'sexual_desire')

    def __init__(self,
                 roles      : NodeRoles,
                 connections: Iterable[ConnectionGene],
                 traits     : Traits,
                 lineage    : 'Lineage',
                 genome_id  : Optional[str] = None):
        """
        Create a genome, validating its network.

        Parameters:
            roles:       The node partition
            connections: The connection genes, in any order (they are copied)
            traits:      The non-topological traits
            lineage:     The Lineage this genome belongs to
            genome_id:   Unique id; if None, a random one is drawn from the lineage

        Raises:
            StructuralError: If a connection references an unknown node, starts at
                             an output node, ends at an input node, or if the
                             network has a cycle
        """
        if genome_id is None:
            genome_id = lineage.rng.token()
        super().__init__(genome_id, traits)

        self._lineage = lineage
        self._roles   = roles

        connections = [conn.copy() for conn in connections]
        self._check_endpoints(roles, connections)

        connections = sort_connections(roles, connections)
        validate_order(connections)
        self._connections: tuple[ConnectionGene, ...] = tuple(connections)

    @staticmethod
    def _check_endpoints(roles: NodeRoles, connections: list[ConnectionGene]) -> None:
        for conn in connections:
            if conn.node_in not in roles:
                raise StructuralError(f"Connection {conn.innovation} references non-existent source node: {conn.node_in}")
            if conn.node_out not in roles:
                raise StructuralError(f"Connection {conn.innovation} references non-existent destination node: {conn.node_out}")
            if roles.role_of(conn.node_in) == NodeType.OUTPUT:
                raise StructuralError(f"Connection {conn.innovation} starts at output node {conn.node_in}")
            if roles.role_of(conn.node_out) == NodeType.INPUT:
                raise StructuralError(f"Connection {conn.innovation} ends at input node {conn.node_out}")

    @property
    def roles(self) -> NodeRoles:
        return self._roles

    @property
    def connections(self) -> tuple[ConnectionGene, ...]:
        return self._connections

    @property
    def lineage(self) -> 'Lineage':
        return self._lineage

    @property
    def input_nodes(self) -> tuple[str, ...]:
        return self._roles.inputs

    @property
    def output_nodes(self) -> tuple[str, ...]:
        return self._roles.outputs

    @property
    def hidden_nodes(self) -> tuple[str, ...]:
        return self._roles.hidden

    @property
    def nodes(self) -> tuple[str, ...]:
        return self._roles.all_keys

    @property
    def node_levels(self) -> dict[str, int]:
        return node_levels(self._roles, self._connections)

    def build_brain(self) -> Brain:
        """
        Create the Brain evaluating this genome, with the activation function
        currently selected by the lineage configuration.
        """
        return Brain(self, self._lineage.config.activation)

    def mix(self, other: 'Genome') -> 'Genome':
        """
        Create an offspring of this genome and another.

        Reproduction involves the following steps:
         - a coin flip decides which parent is 'primary' (provides the structure)
         - crossover aligns the parents' genes by innovation id (see 'Crossover')
         - exactly one structural mutation step is applied (see 'TopologyMutator')
         - the traits of the two parents are mixed
         - the result is validated by creating a new Genome

        The lineage of this genome provides the configuration, random draws
        and new ids, and the offspring belongs to it. 'other' may come from
        another lineage: innovation ids are namespaced per lineage, so its
        genes never collide with ours and are carried over as they are.

        Parameters:
            other: the genome this genome is mating with

        Returns:
            the offspring genome

        Raises:
            StructuralError:    If 'other' is a different genome representation,
                                or the offspring network is malformed
            ConfigurationError: If the lineage configuration is invalid
        """
        self._check_same_variant(other)
        lineage = self._lineage

        this_is_primary = lineage.rng.coin()
        primary   = self  if this_is_primary else other
        secondary = other if this_is_primary else self

        roles, connections = lineage.crossover.cross(primary, secondary)
        roles, connections = lineage.mutator.mutate(roles, connections)
        traits = self.traits.mix(other.traits, lineage.rng)

        offspring = Genome(roles, connections, traits, lineage)
        logger.debug("Mixed {} (primary) with {} into {}", primary.id, secondary.id, offspring.id)
        return offspring

    def pixel_id(self, i: int) -> str:
        return Genome.pixel_id_for_resolution(i, self.sight_resolution)

    @staticmethod
    def pixel_id_for_resolution(i: int, resolution: int) -> str:
        """
        Name the i-th sight slot after its position relative to the center of sight.

        Slots left of the center are 'l<offset>', right of it 'r<offset>',
        and the center slot is 'c0'.

        Parameters:
            i:          index of the sight slot, in [0, resolution)
            resolution: number of sight slots

        Returns:
            the slot name, e.g. 'l1', 'c0', 'r1' for a resolution of 3
        """
        pixel_index = i - resolution // 2
        if pixel_index < 0:
            pixel_side = 'l'
        elif pixel_index > 0:
            pixel_side = 'r'
        else:
            pixel_side = 'c'
        return f"{pixel_side}{abs(pixel_index)}"

    @staticmethod
    def sight_input_ids(resolution: int) -> list[str]:
        ids = []
        for i in range(resolution):
            pixel_id = Genome.pixel_id_for_resolution(i, resolution)
            ids.extend(f"sight_{pixel_id}{channel}" for channel in Genome.SIGHT_CHANNELS)
        return ids

    @staticmethod
    def input_node_ids(resolution: int) -> list[str]:
        return list(Genome.BODY_INPUTS) + Genome.sight_input_ids(resolution)

    @staticmethod
    def output_node_ids() -> list[str]:
        return list(Genome.OUTPUTS)

    def __str__(self):
        conn_genes_str = ''.join(str(conn) for conn in self._connections)
        return f"Nodes: {self._roles}\nConns: {conn_genes_str}"

    def __repr__(self):
        return (f"Genome(id={self.id!r}, nodes={len(self._roles)}, "
                f"connections={len(self._connections)}, traits={self.traits!r})")
