"""
Node Roles Module.

This module implements the NodeRoles class and NodeType enumeration.
A genome does not keep per-node genes: a node is only a string key, and
its role is given by the partition of the genome's keys into three groups.

Classes:
    NodeType:  Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeRoles: Partition of the node keys of a genome into the three roles
"""

from enum   import Enum
from typing import Iterable

from neatcritters.errors import StructuralError

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class NodeRoles:
    """
    The node keys of a genome, partitioned into input, output and hidden nodes.

    Input and output keys are semantically named (one per sensed quantity or
    per actuator) and fixed when the genome is first created. Hidden keys are
    numeric strings, added one at a time by the split-connection mutation.

    Instances are immutable; 'with_hidden()' returns a new partition.

    Public Attributes:
        inputs:  Tuple of input node keys
        outputs: Tuple of output node keys
        hidden:  Tuple of hidden node keys, in order of creation

    Public Properties:
        all_keys:          Every key, inputs then hidden then outputs
        source_candidates: Keys allowed at the start of a connection (inputs + hidden)
        target_candidates: Keys allowed at the end   of a connection (hidden + outputs)

    Public Methods:
        role_of(key):     The NodeType of a key
        with_hidden(key): A new partition with one more hidden node
        to_dict():        Persisted form {"in": [...], "out": [...], "hidden": [...]}
    """

    def __init__(self,
                 inputs : Iterable[str],
                 outputs: Iterable[str],
                 hidden : Iterable[str] = ()):
        """
        Parameters:
            inputs:  Input node keys
            outputs: Output node keys
            hidden:  Hidden node keys

        Raises:
            StructuralError: If a key is not a string, or appears more than once
        """
        self.inputs : tuple[str, ...] = tuple(inputs)
        self.outputs: tuple[str, ...] = tuple(outputs)
        self.hidden : tuple[str, ...] = tuple(hidden)

        self._roles: dict[str, NodeType] = {}
        for keys, node_type in ((self.inputs , NodeType.INPUT ),
                                (self.hidden , NodeType.HIDDEN),
                                (self.outputs, NodeType.OUTPUT)):
            for key in keys:
                if not isinstance(key, str):
                    raise StructuralError(f"Node keys must be strings, got {key!r}")
                if key in self._roles:
                    raise StructuralError(f"Node key '{key}' appears more than once")
                self._roles[key] = node_type

    @classmethod
    def from_dict(cls, nodes_dict: dict) -> 'NodeRoles':
        return cls([str(k) for k in nodes_dict["in"]],
                   [str(k) for k in nodes_dict["out"]],
                   [str(k) for k in nodes_dict.get("hidden", [])])

    def to_dict(self) -> dict:
        return {"in"    : list(self.inputs),
                "out"   : list(self.outputs),
                "hidden": list(self.hidden)}

    @property
    def all_keys(self) -> tuple[str, ...]:
        return self.inputs + self.hidden + self.outputs

    @property
    def source_candidates(self) -> tuple[str, ...]:
        return self.inputs + self.hidden

    @property
    def target_candidates(self) -> tuple[str, ...]:
        return self.hidden + self.outputs

    def role_of(self, key: str) -> NodeType:
        """
        Raises:
            StructuralError: If the key is not a node of this partition
        """
        try:
            return self._roles[key]
        except KeyError:
            raise StructuralError(f"Unknown node key '{key}'") from None

    def with_hidden(self, key: str) -> 'NodeRoles':
        return NodeRoles(self.inputs, self.outputs, self.hidden + (key,))

    def __contains__(self, key) -> bool:
        return key in self._roles

    def __len__(self) -> int:
        return len(self._roles)

    def __eq__(self, other):
        if not isinstance(other, NodeRoles):
            return NotImplemented
        return (self.inputs, self.outputs, self.hidden) == (other.inputs, other.outputs, other.hidden)

    def __hash__(self):
        return hash((self.inputs, self.outputs, self.hidden))

    def __repr__(self):
        return f"NodeRoles(inputs={list(self.inputs)}, outputs={list(self.outputs)}, hidden={list(self.hidden)})"

    def __str__(self):
        s  = ''.join(f"[{NodeType.INPUT.value}:{key}]"  for key in self.inputs)
        s += ''.join(f"[{NodeType.HIDDEN.value}:{key}]" for key in self.hidden)
        s += ''.join(f"[{NodeType.OUTPUT.value}:{key}]" for key in self.outputs)
        return s
