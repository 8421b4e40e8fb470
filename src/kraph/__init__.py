"""
kraph
=====

An in-memory store for weighted, directed graphs that is safe to share
between threads.

Core idea:
- One store, two mirrored adjacency indices, one readers-writer lock.

Public API:
- GraphStore
- GraphBuilder
- GraphSerializer
- Node, NodeID
- NodeNotFoundError, EdgeNotFoundError
"""

from kraph.graph.graph_schema import Node, NodeID
from kraph.graph.graph_errors import GraphError, NodeNotFoundError, EdgeNotFoundError
from kraph.graph.graph_store import GraphStore
from kraph.graph.graph_builder import GraphBuilder
from kraph.graph.graph_serializer import GraphSerializer

__all__ = [
    "GraphStore",
    "GraphBuilder",
    "GraphSerializer",
    "Node",
    "NodeID",
    "GraphError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
]

__version__ = "0.1.0"
