"""
Genome Serializer Module

This module implements the GenomeSerializer class, which converts genomes
to and from plain dictionaries (ready for JSON or any other storage format).

Classes:
    GenomeSerializer: Converts genomes to and from plain dictionaries
"""

import re
from typing import Optional, TYPE_CHECKING

from neatcritters.errors                   import StructuralError
from neatcritters.genotype.connection_gene import ConnectionGene
from neatcritters.genotype.genome          import Genome
from neatcritters.genotype.node_roles      import NodeRoles
from neatcritters.genotype.traits          import Traits

if TYPE_CHECKING:
    from neatcritters.run.lineage import Lineage

class GenomeSerializer:
    """
    Converts genomes to and from plain dictionaries.

    Dictionary format:
        {
            "type": "neat",
            "id": "0b1c...",
            "eyeSize": 0.64, "color": 120, "eggColor": 300, "sightResolution": 3,
            "nodes": {"in": ["energy", ...], "out": ["acceleration_angle", ...], "hidden": ["0"]},
            "connections": [
                {"enabled": true, "inNode": "energy", "outNode": "0",
                 "weight": 1.0, "innovation": "9f2a...-3"},
                ...
            ],
            "mother": "...",   # optional
            "father": "..."    # optional
        }

    Older records named the interface nodes by position ('in_<n>', 'out_<n>')
    and their initial genes 'initial_<n>_<m>'. Such keys are migrated to the
    named keys on deserialization, using the sight resolution of the record.

    Public Methods:
        serialize(genome, mother, father): Convert a genome to a dictionary
        deserialize(genome_dict, lineage): Create (and validate) a genome from a dictionary
    """

    TYPE = "neat"

    _LEGACY_INNOVATION = re.compile(r"^initial_(\d+)_(\d+)$")

    def serialize(self,
                  genome: Genome,
                  mother: Optional[Genome] = None,
                  father: Optional[Genome] = None) -> dict:
        """
        Parameters:
            genome: the genome to convert
            mother: optional parent, whose id is recorded
            father: optional parent, whose id is recorded

        Returns:
            the dictionary describing the genome
        """
        if not isinstance(genome, Genome):
            raise StructuralError(f"Unknown genome type: {type(genome).__name__}")

        genome_dict = {"type": self.TYPE, "id": genome.id}
        genome_dict.update(genome.traits.to_dict())
        genome_dict["nodes"]       = genome.roles.to_dict()
        genome_dict["connections"] = [conn.to_dict() for conn in genome.connections]

        if mother is not None:
            genome_dict["mother"] = mother.id
        if father is not None:
            genome_dict["father"] = father.id

        return genome_dict

    def deserialize(self, genome_dict: dict, lineage: 'Lineage') -> Genome:
        """
        Parameters:
            genome_dict: the dictionary describing the genome
            lineage:     the Lineage the genome will belong to

        Returns:
            the new (validated) genome

        Raises:
            StructuralError: If the record is not a graph-of-nodes genome, or its network is malformed
            KeyError:        If required fields are missing from the dictionary
        """
        genome_type = genome_dict.get("type", self.TYPE)
        if genome_type != self.TYPE:
            raise StructuralError(f"Cannot deserialize a genome of type '{genome_type}'")

        traits     = Traits.from_dict(genome_dict)
        resolution = traits.sight_resolution
        node_map   = self._legacy_node_map(resolution)

        nodes_dict = genome_dict["nodes"]
        roles = NodeRoles([node_map.get(str(k), str(k)) for k in nodes_dict["in"]],
                          [node_map.get(str(k), str(k)) for k in nodes_dict["out"]],
                          [str(k) for k in nodes_dict.get("hidden", [])])

        connections = []
        for conn_dict in genome_dict["connections"]:
            conn = ConnectionGene.from_dict(conn_dict)
            conn = conn.copy(node_in   =node_map.get(conn.node_in , conn.node_in),
                             node_out  =node_map.get(conn.node_out, conn.node_out),
                             innovation=self._migrate_innovation(conn.innovation, resolution))
            connections.append(conn)

        return Genome(roles, connections, traits, lineage, genome_id=genome_dict.get("id"))

    @staticmethod
    def _legacy_node_map(resolution: int) -> dict[str, str]:
        node_map = {}
        for index, key in enumerate(Genome.input_node_ids(resolution)):
            node_map[f"in_{index}"] = key
        for index, key in enumerate(Genome.output_node_ids()):
            node_map[f"out_{index}"] = key
        return node_map

    def _migrate_innovation(self, innovation: str, resolution: int) -> str:
        match = self._LEGACY_INNOVATION.match(innovation)
        if not match:
            return innovation

        inputs  = Genome.input_node_ids(resolution)
        outputs = Genome.output_node_ids()
        in_index, out_index = int(match.group(1)), int(match.group(2))
        if in_index >= len(inputs) or out_index >= len(outputs):
            return innovation
        return f"initial_{inputs[in_index]}_{outputs[out_index]}"
