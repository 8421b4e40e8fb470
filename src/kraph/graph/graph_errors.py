from __future__ import annotations

from kraph.graph.graph_schema import NodeID


class GraphError(Exception):
    """Base class for failures reported by the graph store."""


class NodeNotFoundError(GraphError, LookupError):
    """A referenced node id is not present in the store."""

    def __init__(self, node_id: NodeID) -> None:
        self.node_id = node_id
        super().__init__(f"{node_id} does not exist in graph")


class EdgeNotFoundError(GraphError, LookupError):
    """Both endpoints exist but no edge connects them."""

    def __init__(self, source: NodeID, target: NodeID) -> None:
        self.source = source
        self.target = target
        super().__init__(f"there is no edge from {source} to {target}")
