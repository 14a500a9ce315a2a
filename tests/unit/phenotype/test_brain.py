"""
Unit tests for Brain class.

Tests cover the single-pass evaluation, the choice of activation function,
the introspection properties and the defensive structural checks.
"""

import math
from unittest.mock import Mock

import pytest

from neatcritters.activations              import legacy_activation, logistic_activation
from neatcritters.errors                   import ConfigurationError, StructuralError
from neatcritters.genotype.connection_gene import ConnectionGene
from neatcritters.genotype.genome          import Genome
from neatcritters.genotype.mutation        import TopologyMutator
from neatcritters.genotype.node_roles      import NodeRoles
from neatcritters.numeric                  import RandomSource
from neatcritters.phenotype.brain          import Brain
from neatcritters.run.config               import Config
from neatcritters.run.lineage              import Lineage


def split(genome, innovation):
    """Split the connection with the given innovation id, returning the new genome."""
    index = [c.innovation for c in genome.connections].index(innovation)
    roles, connections = genome.lineage.mutator.split_connection(genome.roles, genome.connections, index=index)
    return Genome(roles, connections, genome.traits, genome.lineage)


@pytest.fixture
def identity_lineage():
    config = Config()
    config.activation = 'identity'
    return Lineage(config, seed=0, namespace="id")


@pytest.fixture
def identity_genome(identity_lineage, traits):
    roles = NodeRoles(["a", "b"], ["x"])
    connections = [ConnectionGene("a", "x",  2.0, "initial_a_x"),
                   ConnectionGene("b", "x", -1.0, "initial_b_x")]
    return Genome(roles, connections, traits, identity_lineage)


# ============================================================================
# Test: Forward pass
# ============================================================================

class TestBrainThink:
    """Test the forward pass."""

    def test_two_inputs_one_output(self, ab_x_genome):
        """x = act(2.0*act(a) - 1.0*act(b))"""
        L = logistic_activation
        outputs = ab_x_genome.build_brain().think({"a": 1.0, "b": 1.0})
        assert outputs == {"x": pytest.approx(L(2.0 * L(1.0) + -1.0 * L(1.0)))}

    def test_legacy_activation(self, ab_x_genome):
        act = legacy_activation
        brain = Brain(ab_x_genome, 'legacy')
        outputs = brain.think({"a": 0.5, "b": -0.5})
        assert outputs["x"] == pytest.approx(act(2.0 * act(0.5) - 1.0 * act(-0.5)))

    def test_identity_activation(self, identity_genome):
        outputs = identity_genome.build_brain().think({"a": 3.0, "b": 0.5})
        assert outputs == {"x": pytest.approx(5.5)}

    def test_missing_inputs_count_as_zero(self, ab_x_genome):
        L = logistic_activation
        outputs = ab_x_genome.build_brain().think({"a": 1.0})
        assert outputs["x"] == pytest.approx(L(2.0 * L(1.0) - 1.0 * L(0.0)))

    def test_unconnected_output(self, lineage, traits):
        """An output no connection reaches yields act(0)."""
        genome = Genome(NodeRoles(["a"], ["x", "y"]), [ConnectionGene("a", "x", 1.0, "i")], traits, lineage)
        assert genome.build_brain().think({"a": 1.0})["y"] == pytest.approx(0.5)

    def test_disabled_connections_skipped(self, lineage, traits):
        L = logistic_activation
        roles = NodeRoles(["a", "b"], ["x"])
        connections = [ConnectionGene("a", "x",  2.0, "initial_a_x"),
                       ConnectionGene("b", "x", -1.0, "initial_b_x", enabled=False)]
        genome = Genome(roles, connections, traits, lineage)
        assert genome.build_brain().think({"a": 1.0, "b": 1.0})["x"] == pytest.approx(L(2.0 * L(1.0)))

    def test_hidden_layers(self, identity_lineage, traits):
        roles = NodeRoles(["a"], ["x"], ["0", "1"])
        connections = [ConnectionGene("1", "x", 3.0, "c2"),
                       ConnectionGene("0", "1", 2.0, "c1"),
                       ConnectionGene("a", "0", 0.5, "c0"),
                       ConnectionGene("a", "1", 1.0, "c3")]
        genome = Genome(roles, connections, traits, identity_lineage)
        # 0 = 0.5a, 1 = 2*0 + a = 2a, x = 3*1 = 6a
        assert genome.build_brain().think({"a": 2.0}) == {"x": pytest.approx(12.0)}

    def test_only_outputs_returned(self, lineage):
        genome  = lineage.generate_random_genome()
        outputs = genome.build_brain().think({key: 0.5 for key in genome.input_nodes})
        assert set(outputs) == set(Genome.output_node_ids())
        assert all(isinstance(v, float) and math.isfinite(v) for v in outputs.values())

    def test_stateless(self, ab_x_genome):
        brain  = ab_x_genome.build_brain()
        first  = brain.think({"a": 1.0, "b": 2.0})
        brain.think({"a": -5.0, "b": 7.0})
        assert brain.think({"a": 1.0, "b": 2.0}) == first

    def test_extra_keys_seed_the_working_values(self, identity_lineage, traits):
        """The working values start as a copy of the whole input map."""
        roles = NodeRoles(["a"], ["x"], ["0"])
        connections = [ConnectionGene("a", "0", 1.0, "c0"),
                       ConnectionGene("0", "x", 1.0, "c1")]
        genome = Genome(roles, connections, traits, identity_lineage)
        assert genome.build_brain().think({"a": 1.0, "0": 10.0, "z": 5.0}) == {"x": pytest.approx(11.0)}

    def test_inputs_untouched(self, ab_x_genome):
        inputs = {"a": 1.0, "b": 2.0}
        ab_x_genome.build_brain().think(inputs)
        assert inputs == {"a": 1.0, "b": 2.0}


# ============================================================================
# Test: Legacy evaluation
# ============================================================================

class TestBrainLegacyEvaluation:
    """Test the evaluation rules replayed by the 'legacy' activation."""

    def test_node_without_value_contributes_zero(self, lineage, traits):
        """Hidden node 0 is never written, so x only gets 3.0 * 0."""
        roles = NodeRoles(["a"], ["x"], ["0"])
        connections = [ConnectionGene("a", "0", 1.0, "c0", enabled=False),
                       ConnectionGene("0", "x", 3.0, "c1")]
        genome = Genome(roles, connections, traits, lineage)
        assert Brain(genome, 'legacy').think({"a": 1.0})["x"] == pytest.approx(2.0)

    def test_missing_input_contributes_zero(self, ab_x_genome):
        act = legacy_activation
        outputs = Brain(ab_x_genome, 'legacy').think({"a": 0.5})
        assert outputs["x"] == pytest.approx(act(2.0 * act(0.5)))

    def test_nan_source_contributes_zero(self, lineage, traits):
        genome = Genome(NodeRoles(["a"], ["x"]), [ConnectionGene("a", "x", 1.0, "c0")], traits, lineage)
        assert Brain(genome, 'legacy').think({"a": math.nan})["x"] == pytest.approx(2.0)

    def test_nan_target_reset_before_adding(self, lineage, traits):
        act = legacy_activation
        roles = NodeRoles(["a"], ["x"], ["0"])
        connections = [ConnectionGene("a", "0", 1.0, "c0"),
                       ConnectionGene("0", "x", 1.0, "c1")]
        genome = Genome(roles, connections, traits, lineage)
        outputs = Brain(genome, 'legacy').think({"a": 1.0, "0": math.nan})
        assert outputs["x"] == pytest.approx(act(act(act(1.0))))

    def test_unreached_output_is_nan(self, lineage, traits):
        genome = Genome(NodeRoles(["a"], ["x", "y"]), [ConnectionGene("a", "x", 1.0, "c0")], traits, lineage)
        outputs = Brain(genome, 'legacy').think({"a": 1.0})
        assert outputs["x"] == pytest.approx(legacy_activation(legacy_activation(1.0)))
        assert math.isnan(outputs["y"])

    def test_other_activations_apply_to_missing_values(self, lineage, traits):
        """Outside legacy mode a node without a value is activated like a 0."""
        roles = NodeRoles(["a"], ["x"], ["0"])
        connections = [ConnectionGene("a", "0", 1.0, "c0", enabled=False),
                       ConnectionGene("0", "x", 3.0, "c1")]
        genome = Genome(roles, connections, traits, lineage)
        L = logistic_activation
        assert Brain(genome, 'logistic').think({"a": 1.0})["x"] == pytest.approx(L(3.0 * L(0.0)))


# ============================================================================
# Test: Structural mutations and the function computed
# ============================================================================

class TestBrainAfterMutation:
    """Test the outputs of mutated genomes."""

    def test_split_with_logistic(self, ab_x_genome):
        """With a saturating activation the split adds one more squashing step."""
        L = logistic_activation
        child = split(ab_x_genome, "initial_a_x")
        assert child.build_brain().think({"a": 1.0, "b": 1.0})["x"] == \
               pytest.approx(L(2.0 * L(1.0 * L(1.0)) - L(1.0)))

    def test_split_preserves_function_with_identity(self, identity_genome):
        """a -> 0 (1.0) -> x (2.0) computes exactly what a -> x (2.0) did."""
        inputs = {"a": 1.0, "b": 1.0}
        before = identity_genome.build_brain().think(inputs)
        child  = split(identity_genome, "initial_a_x")

        assert child.hidden_nodes == ("0",)
        assert child.build_brain().think(inputs) == pytest.approx(before)

    def test_disable_is_idempotent(self, ab_x_genome):
        rng = Mock(spec=RandomSource)
        rng.index.return_value = 0
        lineage = ab_x_genome.lineage
        mutator = TopologyMutator(lineage.config, rng, lineage.tracker)

        roles, once  = mutator.remove_connection(ab_x_genome.roles, ab_x_genome.connections)
        roles, twice = mutator.remove_connection(roles, once)

        g1 = Genome(roles, once,  ab_x_genome.traits, ab_x_genome.lineage)
        g2 = Genome(roles, twice, ab_x_genome.traits, ab_x_genome.lineage)
        inputs = {"a": 0.3, "b": 0.9}
        assert g1.build_brain().think(inputs) == g2.build_brain().think(inputs)


# ============================================================================
# Test: Activation choice and introspection
# ============================================================================

class TestBrainProperties:
    """Test construction options and introspection."""

    def test_unknown_activation(self, ab_x_genome):
        with pytest.raises(ConfigurationError):
            Brain(ab_x_genome, 'sine')

    def test_activation_from_config(self, identity_genome):
        assert identity_genome.build_brain().activation_name == 'identity'

    def test_counts(self, lineage, traits):
        roles = NodeRoles(["a", "b"], ["x"], ["0"])
        connections = [ConnectionGene("a", "x", 1.0, "c0", enabled=False),
                       ConnectionGene("a", "0", 1.0, "c1"),
                       ConnectionGene("0", "x", 1.0, "c2")]
        brain = Genome(roles, connections, traits, lineage).build_brain()

        assert brain.number_nodes               == 4
        assert brain.number_nodes_hidden        == 1
        assert brain.number_connections         == 3
        assert brain.number_connections_enabled == 2
        assert brain.possessed is False
        assert brain.nodes == ("a", "b", "0", "x")
        assert brain.node_levels == {"a": 0, "b": 0, "0": 1, "x": 2}


# ============================================================================
# Test: Defensive checks
# ============================================================================

class TestBrainDefensiveChecks:
    """Test that malformed networks fail fast instead of being guessed at."""

    def make_brain(self, roles, connections):
        genome = Mock(spec=Genome)
        genome.roles       = roles
        genome.connections = tuple(connections)
        return Brain(genome)

    def test_unknown_node(self):
        brain = self.make_brain(NodeRoles(["a"], ["x"]), [ConnectionGene("a", "q", 1.0, "i")])
        with pytest.raises(StructuralError, match="unknown node"):
            brain.think({"a": 1.0})

    def test_unknown_node_in_disabled_connection(self):
        brain = self.make_brain(NodeRoles(["a"], ["x"]), [ConnectionGene("q", "x", 1.0, "i", enabled=False)])
        with pytest.raises(StructuralError):
            brain.think({"a": 1.0})

    def test_out_of_order(self):
        roles = NodeRoles(["a"], ["x"], ["0"])
        brain = self.make_brain(roles, [ConnectionGene("0", "x", 1.0, "i1"),
                                        ConnectionGene("a", "0", 1.0, "i0")])
        with pytest.raises(StructuralError, match="consumed"):
            brain.think({"a": 1.0})
