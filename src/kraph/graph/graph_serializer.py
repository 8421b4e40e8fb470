from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Optional

import numpy as np

from kraph.config.settings import SerializationConfig

if TYPE_CHECKING:
    from kraph.graph.graph_store import GraphStore


def _to_json_safe(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


class GraphSerializer:
    """
    Renders a GraphStore as a nested adjacency mapping.

    Output shape::

        {"<source>": {"<target>": weight, ...}, ...}

    Only nodes with at least one outgoing edge appear as outer keys.
    The serializer reads the store through ``adjacency()`` alone, so the
    result reflects a single consistent read of the graph.
    """

    def __init__(self, config: Optional[SerializationConfig] = None) -> None:
        self.config = config or SerializationConfig()

    def to_dict(self, store: "GraphStore") -> Dict[str, Dict[str, Any]]:
        return {
            str(src): {
                str(dst): _to_json_safe(weight)
                for dst, weight in tmap.items()
            }
            for src, tmap in store.adjacency().items()
        }

    def to_json(self, store: "GraphStore") -> str:
        return json.dumps(
            self.to_dict(store),
            indent=self.config.indent,
            sort_keys=self.config.sort_keys,
        )
