"""
Unit tests for GenomeSerializer class.
"""

import json

import pytest

from neatcritters.errors              import StructuralError
from neatcritters.genotype.genome     import Genome
from neatcritters.genotype.serializer import GenomeSerializer


@pytest.fixture
def serializer():
    return GenomeSerializer()


def by_innovation(conn):
    return conn.innovation


class TestSerialize:
    """Test converting a genome to a dictionary."""

    def test_fields(self, serializer, ab_x_genome):
        data = serializer.serialize(ab_x_genome)
        assert data["type"] == "neat"
        assert data["id"]   == "ab_x"
        assert data["eyeSize"] == 0.7
        assert data["color"]    == 120
        assert data["eggColor"] == 240
        assert data["sightResolution"] == 3
        assert data["nodes"] == {"in": ["a", "b"], "out": ["x"], "hidden": []}
        assert {"enabled": True, "inNode": "a", "outNode": "x",
                "weight": 2.0, "innovation": "initial_a_x"} in data["connections"]
        assert len(data["connections"]) == 2
        assert "mother" not in data
        assert "father" not in data

    def test_parents_recorded(self, serializer, lineage):
        mother = lineage.generate_random_genome()
        father = lineage.generate_random_genome()
        child  = mother.mix(father)
        data = serializer.serialize(child, mother, father)
        assert data["mother"] == mother.id
        assert data["father"] == father.id

    def test_json_compatible(self, serializer, lineage):
        data = serializer.serialize(lineage.generate_random_genome())
        assert json.loads(json.dumps(data)) == data

    def test_unknown_genome_type(self, serializer):
        with pytest.raises(StructuralError):
            serializer.serialize(object())


class TestDeserialize:
    """Test re-creating a genome from a dictionary."""

    def test_round_trip(self, serializer, lineage):
        genome   = lineage.generate_random_genome().mix(lineage.generate_random_genome())
        restored = serializer.deserialize(serializer.serialize(genome), lineage)

        assert isinstance(restored, Genome)
        assert restored.id     == genome.id
        assert restored.roles  == genome.roles
        assert restored.traits == genome.traits
        assert sorted(restored.connections, key=by_innovation) == \
               sorted(genome.connections,   key=by_innovation)
        assert restored.lineage is lineage

    def test_restored_genome_thinks_alike(self, serializer, lineage):
        genome   = lineage.generate_random_genome()
        restored = serializer.deserialize(serializer.serialize(genome), lineage)
        inputs   = {key: 0.1 * i for i, key in enumerate(genome.input_nodes)}
        assert restored.build_brain().think(inputs) == pytest.approx(genome.build_brain().think(inputs))

    def test_wrong_type(self, serializer, ab_x_genome, lineage):
        data = serializer.serialize(ab_x_genome)
        data["type"] = "fixed"
        with pytest.raises(StructuralError, match="fixed"):
            serializer.deserialize(data, lineage)

    def test_missing_type_accepted(self, serializer, ab_x_genome, lineage):
        data = serializer.serialize(ab_x_genome)
        del data["type"]
        assert serializer.deserialize(data, lineage).id == "ab_x"

    def test_malformed_network(self, serializer, ab_x_genome, lineage):
        data = serializer.serialize(ab_x_genome)
        data["connections"].append({"enabled": True, "inNode": "x", "outNode": "a",
                                    "weight": 1.0, "innovation": "bad"})
        with pytest.raises(StructuralError):
            serializer.deserialize(data, lineage)

    def test_missing_field(self, serializer, ab_x_genome, lineage):
        data = serializer.serialize(ab_x_genome)
        del data["nodes"]
        with pytest.raises(KeyError):
            serializer.deserialize(data, lineage)


class TestLegacyMigration:
    """Test records using positional node names."""

    @pytest.fixture
    def legacy_record(self):
        return {"type": "neat",
                "id": "old",
                "eyeSize": 0.6, "color": 10, "eggColor": 20, "sightResolution": 3,
                "nodes": {"in": [f"in_{i}" for i in range(16)],
                          "out": [f"out_{i}" for i in range(4)],
                          "hidden": [0]},
                "connections": [
                    {"enabled": False, "inNode": "in_0", "outNode": "out_2", "weight": 1.5,
                     "innovation": "initial_0_2"},
                    {"enabled": True, "inNode": "in_0", "outNode": 0, "weight": 1.0,
                     "innovation": "abc-1"},
                    {"enabled": True, "inNode": 0, "outNode": "out_2", "weight": 1.5,
                     "innovation": "abc-2"},
                    {"enabled": True, "inNode": "in_15", "outNode": "out_3", "weight": -0.5,
                     "innovation": "initial_15_3"}]}

    def test_nodes_renamed(self, serializer, legacy_record, lineage):
        genome = serializer.deserialize(legacy_record, lineage)
        assert genome.input_nodes  == tuple(Genome.input_node_ids(3))
        assert genome.output_nodes == tuple(Genome.output_node_ids())
        assert genome.hidden_nodes == ("0",)

    def test_connections_renamed(self, serializer, legacy_record, lineage):
        genome = serializer.deserialize(legacy_record, lineage)
        pairs = {(c.node_in, c.node_out) for c in genome.connections}
        assert pairs == {("energy", "shooting_trigger"),
                         ("energy", "0"),
                         ("0", "shooting_trigger"),
                         ("sight_r1d", "sexual_desire")}

    def test_initial_innovations_renamed(self, serializer, legacy_record, lineage):
        genome = serializer.deserialize(legacy_record, lineage)
        innovations = {c.innovation for c in genome.connections}
        assert innovations == {"initial_energy_shooting_trigger", "abc-1", "abc-2",
                               "initial_sight_r1d_sexual_desire"}

    def test_migrated_genome_pairs_with_new_genomes(self, serializer, legacy_record, lineage):
        """Migrated initial genes share their ids with newly generated genomes."""
        genome = serializer.deserialize(legacy_record, lineage)
        fresh  = lineage.generate_random_genome()
        fresh_ids = {c.innovation for c in fresh.connections}
        assert "initial_energy_shooting_trigger" in fresh_ids
        assert "initial_sight_r1d_sexual_desire" in fresh_ids
        genome.mix(fresh)

    def test_out_of_range_innovation_kept(self, serializer, legacy_record, lineage):
        legacy_record["connections"][0]["innovation"] = "initial_99_2"
        genome = serializer.deserialize(legacy_record, lineage)
        assert "initial_99_2" in {c.innovation for c in genome.connections}
