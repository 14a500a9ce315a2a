"""
Topology Module

Graph algorithms over the connection list of a genome.

The connection list of a genome is kept in topological order: for every
connection, all the connections feeding its source node come before it.
This lets a Brain compute every node value in one linear pass.

Functions:
    out_connections_by_source(connections):   Map each source key to its outgoing connections
    sort_connections(roles, connections):     Order connections topologically
    validate_order(connections):              Check that an ordered list can be evaluated in one pass
    would_create_cycle(connections, in, out): Whether a new connection would close a cycle
    node_levels(roles, connections):          Depth of every node, for drawing the network
"""

from collections import defaultdict
from typing      import Iterable, Sequence, TYPE_CHECKING

from loguru import logger

from neatcritters.errors import StructuralError

if TYPE_CHECKING:
    from neatcritters.genotype.connection_gene import ConnectionGene
    from neatcritters.genotype.node_roles      import NodeRoles

def out_connections_by_source(connections: Iterable['ConnectionGene']) -> dict[str, list['ConnectionGene']]:
    """
    Build the adjacency map of the network (both enabled and disabled connections).

    Returns:
        source node key => list of the connections starting at it, in list order
    """
    outgoing = defaultdict(list)
    for conn in connections:
        outgoing[conn.node_in].append(conn)
    return dict(outgoing)

def sort_connections(roles: 'NodeRoles', connections: Sequence['ConnectionGene']) -> list['ConnectionGene']:
    """
    Order connections so that each node is fully computed before it is consumed.

    A depth-first walk starts from every input node (in order) and follows the
    outgoing connections, marking nodes as visited the first time they are
    entered. Each connection is appended to a result list once the walk below
    its destination node has finished (post-order). Reversing that list puts,
    for every connection, the connections feeding its source node before it.

    Sources that cannot be reached from any input are walked afterwards, in
    connection order, so no connection is ever dropped.

    The walk uses an explicit stack instead of recursion, and visits the
    connections in exactly the order a recursive walk would.

    Parameters:
        roles:       the node partition of the genome
        connections: the connections to sort (both enabled and disabled)

    Returns:
        a new list holding the same connections, in topological order
        (if the graph has a cycle, the order is meaningless; see 'validate_order')
    """
    outgoing   = out_connections_by_source(connections)
    visited    = set()
    post_order = []

    starts = list(roles.inputs) + [conn.node_in for conn in connections]
    for start in starts:
        if start in visited or start not in outgoing:
            continue
        visited.add(start)

        # Each stack frame: (iterator over the node's outgoing connections,
        #                    connection through which the node was entered)
        stack = [(iter(outgoing[start]), None)]
        while stack:
            conns, entered_via = stack[-1]
            conn = next(conns, None)

            # Node exhausted: the connection leading to it is now complete
            if conn is None:
                stack.pop()
                if entered_via is not None:
                    post_order.append(entered_via)
                continue

            target = conn.node_out
            if target in outgoing and target not in visited:
                visited.add(target)
                stack.append((iter(outgoing[target]), conn))
            else:
                post_order.append(conn)

    post_order.reverse()
    return post_order

def validate_order(connections: Sequence['ConnectionGene']) -> None:
    """
    Check that an ordered connection list can be evaluated in a single pass.

    Scanning left to right, a node is 'consumed' once it appears as the source
    of a connection. If a consumed node later appears as the target of a
    connection, its value would change after having been used: the network
    has a cycle (or the list is not topologically sorted).

    Parameters:
        connections: the ordered connections

    Raises:
        StructuralError: If a connection targets an already consumed node
    """
    consumed = set()
    for position, conn in enumerate(connections):
        consumed.add(conn.node_in)
        if conn.node_out in consumed:
            logger.error("Found sort error at connection {} ({} => {})", position, conn.node_in, conn.node_out)
            raise StructuralError(f"Found sort error: node '{conn.node_out}' is the target of connection "
                                  f"{conn.innovation} after having been consumed (the network has a cycle)")

def would_create_cycle(connections: Iterable['ConnectionGene'], node_in: str, node_out: str) -> bool:
    """
    Check if adding a connection node_in -> node_out would create a cycle.
    Uses DFS to check if there's already a path from 'node_out' back to 'node_in'.
    Considers ALL connections (both enabled and disabled), so re-enabling a
    connection can never close a cycle either.

    Parameters:
        connections: the existing connections
        node_in:     proposed start of the new connection
        node_out:    proposed end   of the new connection

    Returns:
        whether adding the new connection would create a cycle in the network
    """
    # A connection from a node to itself is a cycle
    if node_in == node_out:
        return True

    outgoing = out_connections_by_source(connections)

    # If we can reach 'node_in' starting at 'node_out', then adding a
    # connection 'node_in' -> 'node_out' would create a network cycle
    visited = set()
    stack   = [node_out]
    while stack:
        current = stack.pop()
        if current == node_in:
            return True
        if current in visited:
            continue
        visited.add(current)
        stack.extend(conn.node_out for conn in outgoing.get(current, []))

    return False

def node_levels(roles: 'NodeRoles', connections: Sequence['ConnectionGene']) -> dict[str, int]:
    """
    Assign a drawing level to each node.

    Input nodes are at level 0; a hidden node sits one level below the deepest
    node feeding it; all output nodes share the level below the deepest hidden node.

    Parameters:
        roles:       the node partition of the genome
        connections: the connections, in topological order

    Returns:
        node key => level
    """
    incoming = defaultdict(list)
    for conn in connections:
        incoming[conn.node_out].append(conn.node_in)

    levels = {key: 0 for key in roles.inputs}
    hidden = set(roles.hidden)

    def level_of(key: str) -> int:
        return 1 + max((levels.get(source, 0) for source in incoming.get(key, [])), default=0)

    # Topological order guarantees the feeders of a source are already placed
    for conn in connections:
        if conn.node_in in hidden and conn.node_in not in levels:
            levels[conn.node_in] = level_of(conn.node_in)

    # Hidden nodes that feed nothing
    for key in roles.hidden:
        if key not in levels:
            levels[key] = level_of(key)

    max_depth = max((levels[key] for key in roles.hidden), default=0)
    for key in roles.outputs:
        levels[key] = max_depth + 1

    return levels
