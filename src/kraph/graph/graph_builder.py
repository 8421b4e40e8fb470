from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Iterable, Mapping, Optional, Tuple, Union

import pandas as pd

from kraph.graph.graph_errors import NodeNotFoundError
from kraph.graph.graph_schema import IDLike, Node, NodeID
from kraph.graph.graph_store import GraphStore

EdgeSpec = Tuple[IDLike, IDLike, float]

logger = logging.getLogger("kraph.builder")


class GraphBuilder:
    """
    Populates a GraphStore from structured inputs.

    Every write goes through the store's public operations, so the
    builder inherits their locking and error behaviour.
    """

    def __init__(self, store: Optional[GraphStore] = None) -> None:
        self.store = store if store is not None else GraphStore()

    def add_nodes(self, nodes: Iterable[Union[Node, IDLike]]) -> int:
        """
        Insert nodes, skipping ids that already exist.

        Returns the number of nodes actually inserted.
        """
        inserted = 0
        for item in nodes:
            node = item if isinstance(item, Node) else Node.create(item)
            if self.store.add_node(node):
                inserted += 1
        return inserted

    def add_edges(self, edges: Iterable[EdgeSpec]) -> None:
        for source, target, weight in edges:
            self.store.add_edge(source, target, weight)

    def ensure_edges(self, edges: Iterable[EdgeSpec]) -> int:
        """
        Like add_edges, but creates missing endpoint nodes first.

        Node creation and the edge write take the store lock separately,
        so a concurrent delete_node can remove an endpoint in between.
        Endpoint creation is retried once before NodeNotFoundError is
        allowed to propagate.
        """
        count = 0
        for source, target, weight in edges:
            for attempt in range(2):
                self.add_nodes((source, target))
                try:
                    self.store.add_edge(source, target, weight)
                    break
                except NodeNotFoundError:
                    if attempt:
                        raise
            count += 1
        return count

    # -------------------- Serialized adjacency --------------------

    def from_dict(self, adjacency: Mapping[str, Mapping[str, float]]) -> GraphStore:
        """
        Rebuild edges from ``{source: {target: weight}}``.

        Weights replace rather than accumulate, so loading the same
        mapping twice is idempotent.
        """
        for source, tmap in adjacency.items():
            self.add_nodes([source])
            for target, weight in tmap.items():
                self.add_nodes([target])
                self.store.replace_edge(source, target, weight)
        return self.store

    def from_json(self, text: str) -> GraphStore:
        return self.from_dict(json.loads(text))

    # -------------------- Tabular edge lists --------------------

    def load_edge_list(self, path: Union[str, Path]) -> int:
        """
        Load a CSV edge list with ``source``, ``target`` and optional
        ``weight`` columns (weight defaults to 1.0 when absent or blank).

        Labels are read verbatim: pandas NA markers such as ``NA`` or
        ``null`` stay ordinary labels. Blank endpoint cells are rejected.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(path)

        t0 = time.perf_counter()
        df = pd.read_csv(path, dtype=str, keep_default_na=False, na_filter=False)

        missing = {"source", "target"} - set(df.columns)
        if missing:
            raise ValueError(
                f"{path} is missing required columns: {', '.join(sorted(missing))}"
            )

        blank = (df["source"].str.strip() == "") | (df["target"].str.strip() == "")
        if blank.any():
            rows = ", ".join(str(i + 2) for i in df.index[blank])
            raise ValueError(f"{path} has blank source or target labels on line(s) {rows}")

        if "weight" not in df.columns:
            df["weight"] = ""
        weights = df["weight"].str.strip()
        df["weight"] = pd.to_numeric(weights.where(weights != "")).fillna(1.0)

        count = self.ensure_edges(
            (NodeID(row.source), NodeID(row.target), float(row.weight))
            for row in df.itertuples(index=False)
        )
        logger.info(
            "loaded %d edges from %s in %.3fs",
            count,
            path,
            time.perf_counter() - t0,
        )
        return count
