"""
Innovation Tracker Module

This module implements the InnovationTracker class, which hands out the
identifiers of new genes within one evolutionary lineage.

Classes:
    InnovationTracker: Per-lineage generator of innovation ids and hidden node keys
"""

from itertools import count
from typing    import TYPE_CHECKING

if TYPE_CHECKING:
    from neatcritters.genotype.node_roles import NodeRoles

class InnovationTracker:
    """
    Generates the identifiers of new genes for one lineage.

    Each lineage owns its own tracker, so independent lineages can evolve side
    by side: the namespace prefixed to every fresh innovation id keeps ids from
    different lineages apart.

    Two kinds of innovation id exist:
     + initial ids, 'initial_<in>_<out>', derived from the endpoints of the
       connections of a newly generated genome; every newly generated genome
       shares them, so crossover can pair up its initial genes
     + fresh ids, '<namespace>-<n>', unique within the lineage; given to the
       connections created by structural mutations, and to the genes that
       crossover could not pair

    Public Attributes:
        namespace: Prefix of every fresh innovation id

    Public Methods:
        initial_innovation(node_in, node_out): Id for a connection of a newly generated genome
        new_innovation():                      Fresh, never before issued, id
        next_node_id(roles):                   Key for the next hidden node of a genome
    """

    INITIAL_PREFIX = "initial"

    def __init__(self, namespace: str):
        """
        Parameters:
            namespace: Prefix of every fresh innovation id issued by this tracker
        """
        self.namespace = namespace
        self._next_innovation_number = count(0)

    @classmethod
    def initial_innovation(cls, node_in: str, node_out: str) -> str:
        """
        Get the innovation id of an initial connection, identified by its endpoints.

        Parameters:
            node_in:  node key for the 'from' end of the connection
            node_out: node key for the 'to'   end of the connection

        Returns:
            connection ID (a.k.a. innovation id)
        """
        return f"{cls.INITIAL_PREFIX}_{node_in}_{node_out}"

    def new_innovation(self) -> str:
        return f"{self.namespace}-{next(self._next_innovation_number)}"

    @staticmethod
    def next_node_id(roles: 'NodeRoles') -> str:
        """
        Get the key for a new hidden node of a genome.

        Hidden keys are numeric strings allocated in increasing order:
        the new key is one more than the largest numeric hidden key
        ("0" for a genome without hidden nodes).

        Parameters:
            roles: the node partition of the genome receiving the new node

        Returns:
            a hidden node key not yet used by the genome
        """
        numeric = [int(key) for key in roles.hidden if key.isdigit()]
        next_id = max(numeric) + 1 if numeric else 0
        while str(next_id) in roles:
            next_id += 1
        return str(next_id)

    def __repr__(self):
        return f"InnovationTracker(namespace={self.namespace!r})"
