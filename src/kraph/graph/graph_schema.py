from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True, order=True)
class NodeID:
    """
    Opaque node identity.

    Two identities denote the same node iff their labels are equal.
    """

    label: str

    def __post_init__(self) -> None:
        if not isinstance(self.label, str):
            raise TypeError(
                f"node id label must be str, not {type(self.label).__name__}"
            )

    def __str__(self) -> str:
        return self.label

    @staticmethod
    def coerce(value: "IDLike") -> "NodeID":
        if isinstance(value, NodeID):
            return value
        if isinstance(value, str):
            return NodeID(value)
        raise TypeError(f"cannot use {type(value).__name__} as a node id")


IDLike = Union[NodeID, str]


@dataclass(frozen=True)
class Node:
    """
    Vertex in the graph.

    Carries its identity and an opaque attribute payload that the store
    never inspects.
    """

    id: NodeID
    attributes: Dict[str, Any] = field(default_factory=dict, compare=False)

    @staticmethod
    def create(
        label: IDLike,
        attributes: Optional[Dict[str, Any]] = None,
    ) -> "Node":
        return Node(
            id=NodeID.coerce(label),
            attributes=dict(attributes or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "attributes": dict(self.attributes),
        }
