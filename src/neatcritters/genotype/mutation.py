"""
Topology Mutation Module

This module implements the TopologyMutator class, which applies the structural
mutations that grow the network encoded by a genome.

Classes:
    TopologyMutator: Applies one of the three structural mutations (or none)
"""

from typing import Optional, Sequence, TYPE_CHECKING

from loguru import logger

from neatcritters.genotype.connection_gene import ConnectionGene
from neatcritters.genotype.topology        import sort_connections, would_create_cycle

if TYPE_CHECKING:
    from neatcritters.genotype.innovation_tracker import InnovationTracker
    from neatcritters.genotype.node_roles         import NodeRoles
    from neatcritters.numeric                     import RandomSource
    from neatcritters.run.config                  import Config

class TopologyMutator:
    """
    Applies structural mutations to a (nodes, connections) pair.

    The three structural mutations are:
      + split-connection:  a hidden node is inserted in the middle of an enabled connection
      + add-connection:    a new connection joins two existing nodes
      + remove-connection: a connection is disabled (nodes and connections are never deleted)

    All operators leave their arguments untouched and return a new pair,
    which the caller turns into a Genome (and so validates).

    Public Methods:
        mutate(roles, connections):            Apply at most one structural mutation
        split_connection(roles, connections):  Insert a hidden node into a connection
        add_connection(roles, connections):    Join two unconnected nodes
        remove_connection(roles, connections): Disable a connection
    """

    def __init__(self, config: 'Config', rng: 'RandomSource', tracker: 'InnovationTracker'):
        """
        Parameters:
            config:  Stores configuration parameters
            rng:     Source of all random draws
            tracker: Issues the ids of new genes
        """
        self._config  = config
        self._rng     = rng
        self._tracker = tracker

    def mutate(self,
               roles      : 'NodeRoles',
               connections: Sequence[ConnectionGene]) -> tuple['NodeRoles', list[ConnectionGene]]:
        """
        Apply at most one structural mutation.

        A single random number is compared against the cumulative probabilities
        of adding a node, adding a connection and removing a connection. If none
        of them fires, the pair is returned unchanged.

        Parameters:
            roles:       the node partition
            connections: the connections

        Returns:
            the (possibly) mutated pair

        Raises:
            ConfigurationError: If the mutation probabilities are missing or out of range
        """
        self._config.validate()

        node_add    = self._config.node_add_probability
        conn_add    = self._config.connection_add_probability
        conn_remove = self._config.connection_remove_probability

        r = self._rng.random()
        if r < node_add:
            return self.split_connection(roles, connections)
        elif r < node_add + conn_add:
            return self.add_connection(roles, connections)
        elif r < node_add + conn_add + conn_remove:
            return self.remove_connection(roles, connections)
        return roles, list(connections)

    def split_connection(self,
                         roles      : 'NodeRoles',
                         connections: Sequence[ConnectionGene],
                         index      : Optional[int] = None) -> tuple['NodeRoles', list[ConnectionGene]]:
        """
        Split an enabled connection A -> B by adding a new hidden node H.

        The split connection is disabled and replaced by A -> H (weight 1.0)
        and H -> B (the weight of the split connection), both with fresh
        innovation ids.

        Parameters:
            roles:       the node partition
            connections: the connections
            index:       position of the connection to split; if None, an enabled
                         connection is picked at random. Splitting a disabled
                         connection is a no-op.

        Returns:
            the mutated pair (or a copy of the original pair, if nothing was split)
        """
        connections = list(connections)

        if index is None:
            enabled = [i for i, conn in enumerate(connections) if conn.enabled]
            if not enabled:
                return roles, connections
            index = self._rng.choice(enabled)

        split_conn = connections[index]
        if not split_conn.enabled:
            return roles, connections

        new_node_id = self._tracker.next_node_id(roles)

        connections[index] = split_conn.copy(enabled=False)
        connections.append(ConnectionGene(split_conn.node_in, new_node_id, 1.0,
                                          self._tracker.new_innovation()))
        connections.append(ConnectionGene(new_node_id, split_conn.node_out, split_conn.weight,
                                          self._tracker.new_innovation()))

        logger.debug("Split connection {} => {} with hidden node {}",
                     split_conn.node_in, split_conn.node_out, new_node_id)
        return roles.with_hidden(new_node_id), connections

    def add_connection(self,
                       roles      : 'NodeRoles',
                       connections: Sequence[ConnectionGene]) -> tuple['NodeRoles', list[ConnectionGene]]:
        """
        Add a new connection between two existing nodes.

        The destination is drawn from the hidden and output nodes, the source
        from the input and hidden nodes, so a connection can never start at an
        output or end at an input. The attempt is dropped (no retry) if:
         + the two nodes are already joined by a direct connection
         + the new connection would create a cycle in the network

        The new connection gets a weight drawn from a zero-centered normal
        distribution and a fresh innovation id; the list is then re-sorted.

        Parameters:
            roles:       the node partition
            connections: the connections

        Returns:
            the mutated pair (or a copy of the original pair, if the attempt was dropped)
        """
        connections = list(connections)

        out_candidates = roles.target_candidates
        in_candidates  = roles.source_candidates
        if not out_candidates or not in_candidates:
            return roles, connections

        node_out = self._rng.choice(out_candidates)
        node_in  = self._rng.choice(in_candidates)

        # Carry out expensive check last
        if any(c.node_in == node_in and c.node_out == node_out for c in connections):
            logger.debug("Dropped new connection {} => {}: already connected", node_in, node_out)
            return roles, connections
        if would_create_cycle(connections, node_in, node_out):
            logger.debug("Dropped new connection {} => {}: would create a cycle", node_in, node_out)
            return roles, connections

        weight = self._rng.normal(0.0, self._config.new_connection_weight_stdev)
        connections.append(ConnectionGene(node_in, node_out, weight, self._tracker.new_innovation()))

        logger.debug("Added connection {} => {} (weight={:+.3f})", node_in, node_out, weight)
        return roles, sort_connections(roles, connections)

    def remove_connection(self,
                          roles      : 'NodeRoles',
                          connections: Sequence[ConnectionGene]) -> tuple['NodeRoles', list[ConnectionGene]]:
        """
        Disable a random connection (either enabled or already disabled).

        Nodes are never deleted and disabling never creates a cycle, so the
        result needs no re-sorting.
        """
        connections = list(connections)
        if not connections:
            return roles, connections

        index = self._rng.index(len(connections))
        connections[index] = connections[index].copy(enabled=False)

        logger.debug("Disabled connection {} => {}", connections[index].node_in, connections[index].node_out)
        return roles, connections
