"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the package sources to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def lineage():
    """A lineage with default configuration and a fixed seed."""
    from neatcritters.run.lineage import Lineage
    return Lineage(seed=42, namespace="test")


@pytest.fixture
def traits():
    """Fixed traits, for genomes built by hand."""
    from neatcritters.genotype.traits import Traits
    return Traits(eye_size=0.7, color=120, egg_color=240, sight_resolution=3)


@pytest.fixture
def ab_x_genome(lineage, traits):
    """
    Genome with inputs {a, b}, output {x}, and the connections:
        a -> x (weight  2.0)
        b -> x (weight -1.0)
    """
    from neatcritters.genotype import ConnectionGene, Genome, NodeRoles
    roles = NodeRoles(["a", "b"], ["x"])
    connections = [ConnectionGene("a", "x",  2.0, "initial_a_x"),
                   ConnectionGene("b", "x", -1.0, "initial_b_x")]
    return Genome(roles, connections, traits, lineage, genome_id="ab_x")
