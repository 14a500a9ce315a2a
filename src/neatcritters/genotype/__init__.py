"""
Genotype Package

This package implements the genotype representation of a creature's brain:
a feed-forward network whose topology evolves (NEAT style).

A genome consists of:
- Node roles:       The node keys, partitioned into input, hidden and output nodes
- Connection genes: Weighted, enable-able connections between nodes, with innovation ids
- Traits:           Scalar and categorical genes outside the network graph

Modules:
    node_roles:         NodeType enumeration and NodeRoles class
    connection_gene:    ConnectionGene class
    innovation_tracker: InnovationTracker class
    topology:           Topological sort, order validation and cycle detection
    mutation:           TopologyMutator class
    crossover:          Crossover class
    traits:             Traits class
    genome_base:        GenomeBase class
    genome:             Genome class
    serializer:         GenomeSerializer class

Exported Classes:
    NodeType:          Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeRoles:         Partition of the node keys of a genome
    ConnectionGene:    Gene encoding a weighted connection between nodes
    InnovationTracker: Per-lineage generator of innovation ids and hidden node keys
    TopologyMutator:   Applies one of the three structural mutations (or none)
    Crossover:         Aligns the genes of two parents and blends their weights
    Traits:            Non-topological genes
    GenomeBase:        Capability interface of all genome representations
    Genome:            Validated genome encoding a feed-forward network
    GenomeSerializer:  Converts genomes to and from plain dictionaries
"""

from neatcritters.genotype.connection_gene    import ConnectionGene
from neatcritters.genotype.crossover          import Crossover
from neatcritters.genotype.genome             import Genome
from neatcritters.genotype.genome_base        import GenomeBase
from neatcritters.genotype.innovation_tracker import InnovationTracker
from neatcritters.genotype.mutation           import TopologyMutator
from neatcritters.genotype.node_roles         import NodeRoles, NodeType
from neatcritters.genotype.serializer         import GenomeSerializer
from neatcritters.genotype.traits             import Traits

__all__ = ['ConnectionGene',
           'Crossover',
           'Genome',
           'GenomeBase',
           'GenomeSerializer',
           'InnovationTracker',
           'NodeRoles',
           'NodeType',
           'TopologyMutator',
           'Traits']
