"""
Connection Gene Module

This module implements the ConnectionGene class for the graph-of-nodes genome.

Classes:
    ConnectionGene: Gene encoding a weighted connection between two nodes
"""

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the network graph,
    connecting a source node to a destination node with an associated weight.
    Connection genes are identified by their innovation id, a plain string
    which marks "the same gene" across generations and is used to align
    genes during crossover, whatever their current weight or enabled state.

    Connections are never deleted from a genome. Structural mutations disable
    them instead, so the genome keeps the full history of its topology.

    Genes are immutable: all attributes are read-only properties, and
    operators derive modified genes with 'copy()'. A Genome can therefore
    hand out its genes without copying them.

    Public Properties:
        node_in:    Key of the source node (an input or hidden node)
        node_out:   Key of the destination node (a hidden or output node)
        weight:     Weight of the connection
        enabled:    Whether this connection is active in the network
        innovation: Innovation id identifying this gene

    Public Methods:
        copy(**changes): Create a copy of the gene, with some attributes changed
        to_dict():       Convert the gene to its persisted dictionary form

    Class Methods:
        from_dict(gene_dict): Create a gene from its persisted dictionary form
    """

    def __init__(self,
                 node_in   : str,
                 node_out  : str,
                 weight    : float,
                 innovation: str,
                 enabled   : bool = True):
        """
        Parameters:
            node_in:    Key of the source node
            node_out:   Key of the destination node
            weight:     Weight of the connection
            innovation: Id marking this gene across generations
            enabled:    Whether this connection is active in the network
        """
        self._node_in   : str   = node_in
        self._node_out  : str   = node_out
        self._weight    : float = float(weight)
        self._enabled   : bool  = bool(enabled)
        self._innovation: str   = innovation

    @property
    def node_in(self) -> str:
        return self._node_in

    @property
    def node_out(self) -> str:
        return self._node_out

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def innovation(self) -> str:
        return self._innovation

    def copy(self, **changes) -> 'ConnectionGene':
        """
        Create a copy of this gene.

        Parameters:
            changes: attributes to override in the copy
                     (any of: node_in, node_out, weight, innovation, enabled)

        Returns:
            the new gene
        """
        attrs = {"node_in"   : self.node_in,
                 "node_out"  : self.node_out,
                 "weight"    : self.weight,
                 "innovation": self.innovation,
                 "enabled"   : self.enabled}
        unknown = set(changes) - set(attrs)
        if unknown:
            raise TypeError(f"Unknown ConnectionGene attribute(s): {sorted(unknown)}")
        attrs.update(changes)
        return ConnectionGene(**attrs)

    def to_dict(self) -> dict:
        return {"enabled"   : self.enabled,
                "inNode"    : self.node_in,
                "outNode"   : self.node_out,
                "weight"    : self.weight,
                "innovation": self.innovation}

    @classmethod
    def from_dict(cls, gene_dict: dict) -> 'ConnectionGene':
        return cls(str(gene_dict["inNode"]),
                   str(gene_dict["outNode"]),
                   gene_dict["weight"],
                   str(gene_dict["innovation"]),
                   gene_dict.get("enabled", True))

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return (self.node_in, self.node_out, self.weight, self.enabled, self.innovation) == \
               (other.node_in, other.node_out, other.weight, other.enabled, other.innovation)

    __hash__ = None

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in!r}, node_out={self.node_out!r}, "
                f"weight={self.weight:+.6f}, enabled={self.enabled}, innovation={self.innovation!r})")

    def __str__(self):
        return f"[{self.innovation},{'E' if self.enabled else 'D'},{self.node_in}=>{self.node_out},{self.weight:+.02f}]"
