from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from kraph.config.settings import SerializationConfig, StoreConfig
from kraph.graph.graph_errors import EdgeNotFoundError, NodeNotFoundError
from kraph.graph.graph_schema import IDLike, Node, NodeID
from kraph.graph.graph_serializer import GraphSerializer
from kraph.utils.locks import ReadWriteLock

logger = logging.getLogger("kraph.graph")

Adjacency = Dict[NodeID, Dict[NodeID, float]]


class GraphStore:
    """
    Authoritative in-memory weighted directed graph.

    State is three maps guarded together by one readers-writer lock:

    - ``_nodes``: id -> Node
    - ``_sources``: target id -> {source id: weight}
    - ``_targets``: source id -> {target id: weight}

    An edge u -> v with weight w exists iff ``_targets[u][v] == w`` and
    ``_sources[v][u] == w``. Every mutation updates both indices while
    holding the write side of the lock.

    Queries return copies; callers never see the internal maps.
    """

    def __init__(self, config: Optional[StoreConfig] = None) -> None:
        self.config = config or StoreConfig()
        self._lock = ReadWriteLock(prefer_writers=self.config.prefer_writers)
        self._nodes: Dict[NodeID, Node] = {}
        self._sources: Adjacency = {}
        self._targets: Adjacency = {}

    # -------------------- Lifecycle --------------------

    def reset(self) -> None:
        with self._lock.write_locked():
            self._nodes = {}
            self._sources = {}
            self._targets = {}
        logger.debug("graph store reset")

    # -------------------- Nodes --------------------

    def node_count(self) -> int:
        with self._lock.read_locked():
            return len(self._nodes)

    def get_node(self, node_id: IDLike) -> Optional[Node]:
        """
        Return the node stored under ``node_id``, or ``None``.
        """
        nid = NodeID.coerce(node_id)
        with self._lock.read_locked():
            return self._nodes.get(nid)

    def get_nodes(self) -> Dict[NodeID, Node]:
        """
        Snapshot of every node keyed by id.

        The returned dict is a fresh copy; mutating it does not touch the
        store and later store mutations do not show up in it.
        """
        with self._lock.read_locked():
            return dict(self._nodes)

    def has_node(self, node_id: IDLike) -> bool:
        nid = NodeID.coerce(node_id)
        with self._lock.read_locked():
            return nid in self._nodes

    def add_node(self, node: Node) -> bool:
        """
        Insert ``node`` keyed by its id.

        Returns False and leaves the existing node untouched when the id
        is already present.
        """
        with self._lock.write_locked():
            if node.id in self._nodes:
                return False
            self._nodes[node.id] = node
            return True

    def delete_node(self, node_id: IDLike) -> bool:
        """
        Remove a node together with every edge incident to it.

        Returns False when the node is absent. The cascade runs under a
        single write acquisition, so no observer sees a half-deleted node.
        """
        nid = NodeID.coerce(node_id)
        with self._lock.write_locked():
            if nid not in self._nodes:
                return False

            del self._nodes[nid]

            outgoing = self._targets.pop(nid, {})
            incoming = self._sources.pop(nid, {})

            # Reciprocal half-entries held by every other hub.
            for tmap in self._targets.values():
                tmap.pop(nid, None)
            for smap in self._sources.values():
                smap.pop(nid, None)

        logger.debug(
            "deleted node %s (outgoing=%d, incoming=%d)",
            nid,
            len(outgoing),
            len(incoming),
        )
        return True

    # -------------------- Edges --------------------

    def add_edge(self, source: IDLike, target: IDLike, weight: float) -> float:
        """
        Create source -> target, or add ``weight`` to the existing weight.
        Returns the resulting weight.

        Raises NodeNotFoundError if either endpoint is missing (source is
        checked first).
        """
        src = NodeID.coerce(source)
        dst = NodeID.coerce(target)
        with self._lock.write_locked():
            self._unsafe_require(src, dst)
            current = self._targets.get(src, {}).get(dst)
            total = weight if current is None else current + weight
            self._unsafe_set_weight(src, dst, total)
            return total

    def replace_edge(self, source: IDLike, target: IDLike, weight: float) -> None:
        """
        Set the weight of source -> target, creating the edge if needed.
        """
        src = NodeID.coerce(source)
        dst = NodeID.coerce(target)
        with self._lock.write_locked():
            self._unsafe_require(src, dst)
            self._unsafe_set_weight(src, dst, weight)

    def delete_edge(self, source: IDLike, target: IDLike) -> None:
        """
        Remove source -> target. Deleting a missing edge is a no-op.
        """
        src = NodeID.coerce(source)
        dst = NodeID.coerce(target)
        with self._lock.write_locked():
            self._unsafe_require(src, dst)
            self._targets.get(src, {}).pop(dst, None)
            self._sources.get(dst, {}).pop(src, None)

    def get_weight(self, source: IDLike, target: IDLike) -> float:
        src = NodeID.coerce(source)
        dst = NodeID.coerce(target)
        with self._lock.read_locked():
            self._unsafe_require(src, dst)
            return self._unsafe_weight(src, dst)

    def has_edge(self, source: IDLike, target: IDLike) -> bool:
        src = NodeID.coerce(source)
        dst = NodeID.coerce(target)
        with self._lock.read_locked():
            return dst in self._targets.get(src, {})

    def edge_count(self) -> int:
        with self._lock.read_locked():
            return sum(len(tmap) for tmap in self._targets.values())

    # -------------------- Neighbours --------------------

    def get_sources(self, node_id: IDLike) -> Dict[NodeID, Optional[Node]]:
        """
        Upstream neighbours of ``node_id``: every node with an edge into it.

        Neighbour nodes are looked up in the node map at call time. An id
        present in the index but missing from the node map maps to None
        instead of being dropped; the delete cascade keeps this from
        happening in practice.
        """
        nid = NodeID.coerce(node_id)
        with self._lock.read_locked():
            self._unsafe_require(nid)
            return self._unsafe_neighbours(self._sources, nid)

    def get_targets(self, node_id: IDLike) -> Dict[NodeID, Optional[Node]]:
        """
        Downstream neighbours of ``node_id``; see get_sources.
        """
        nid = NodeID.coerce(node_id)
        with self._lock.read_locked():
            self._unsafe_require(nid)
            return self._unsafe_neighbours(self._targets, nid)

    def adjacency(self) -> Adjacency:
        """
        Copy of the outgoing index, {source: {target: weight}}, taken in
        one read acquisition. Nodes without outgoing edges are omitted.
        """
        with self._lock.read_locked():
            return {
                src: dict(tmap)
                for src, tmap in self._targets.items()
                if tmap
            }

    # -------------------- Serialization --------------------

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return GraphSerializer().to_dict(self)

    def to_json(self, config: Optional[SerializationConfig] = None) -> str:
        return GraphSerializer(config).to_json(self)

    # -------------------- Dunder --------------------

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node_id: object) -> bool:
        if not isinstance(node_id, (NodeID, str)):
            return False
        return self.has_node(node_id)

    # ------------------------------------------------------------------
    # Lock-held helpers. Callers must already hold the lock; these never
    # touch it so compound operations cannot deadlock on re-entry.
    # ------------------------------------------------------------------

    def _unsafe_require(self, *node_ids: NodeID) -> None:
        for nid in node_ids:
            if nid not in self._nodes:
                raise NodeNotFoundError(nid)

    def _unsafe_weight(self, source: NodeID, target: NodeID) -> float:
        tmap = self._targets.get(source)
        if tmap is None or target not in tmap:
            raise EdgeNotFoundError(source, target)
        return tmap[target]

    def _unsafe_set_weight(self, source: NodeID, target: NodeID, weight: float) -> None:
        self._targets.setdefault(source, {})[target] = weight
        self._sources.setdefault(target, {})[source] = weight

    def _unsafe_neighbours(
        self,
        index: Adjacency,
        node_id: NodeID,
    ) -> Dict[NodeID, Optional[Node]]:
        return {
            other: self._nodes.get(other)
            for other in index.get(node_id, {})
        }
