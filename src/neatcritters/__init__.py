"""
neatcritters - Evolving brains for simulated creatures.

This package implements a NEAT-style (topology-evolving) genome for the brains
of creatures living in a simulated world: a feed-forward network with named
inputs (what the creature senses) and named outputs (how it moves and acts),
the operators that mutate and recombine such genomes across generations, and
the brain that evaluates them.

Main components:
- genotype:    Genetic encoding (genomes, genes, innovation ids, mutation, crossover)
- phenotype:   The brain evaluating a genome
- run:         Configuration and reproduction context (lineage)
- numeric:     Seeded random source
- activations: Activation functions

Example:
    >>> from neatcritters import Lineage
    >>> lineage = Lineage(seed=42)
    >>> mother  = lineage.generate_random_genome()
    >>> father  = lineage.generate_random_genome()
    >>> child   = mother.mix(father)
    >>> outputs = child.build_brain().think({"energy": 0.8, "speed": 0.1})
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from neatcritters.errors    import ConfigurationError, StructuralError
from neatcritters.genotype  import (ConnectionGene, Genome, GenomeBase, GenomeSerializer,
                                    InnovationTracker, NodeRoles, NodeType, Traits)
from neatcritters.numeric   import RandomSource
from neatcritters.phenotype import Brain
from neatcritters.run       import Config, Lineage

__all__ = [
    "Brain",
    "Config",
    "ConfigurationError",
    "ConnectionGene",
    "Genome",
    "GenomeBase",
    "GenomeSerializer",
    "InnovationTracker",
    "Lineage",
    "NodeRoles",
    "NodeType",
    "RandomSource",
    "StructuralError",
    "Traits",
]
