"""
Graph subsystem for kraph.

Defines the weighted directed graph store and its collaborators:
- identity and node value types
- the error taxonomy raised by edge and neighbour operations
- JSON serialization of the adjacency
- bulk construction helpers
"""

from kraph.graph.graph_schema import NodeID, Node
from kraph.graph.graph_errors import GraphError, NodeNotFoundError, EdgeNotFoundError
from kraph.graph.graph_serializer import GraphSerializer
from kraph.graph.graph_store import GraphStore
from kraph.graph.graph_builder import GraphBuilder

__all__ = [
    "NodeID",
    "Node",
    "GraphError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "GraphSerializer",
    "GraphStore",
    "GraphBuilder",
]
