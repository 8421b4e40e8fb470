from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# ---------------------------------------------------------------------
# Store concurrency
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class StoreConfig:
    """
    Controls the locking behaviour of a GraphStore.
    """

    prefer_writers: bool = True


# ---------------------------------------------------------------------
# Text serialization
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class SerializationConfig:
    """
    Controls how the graph adjacency is rendered as JSON.
    """

    indent: Optional[int] = None
    sort_keys: bool = True


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class KraphConfig:
    """
    Root configuration object for kraph.

    This object is intended to be:
    - constructed explicitly
    - passed to the store and its collaborators
    - treated as immutable policy
    """

    store: StoreConfig = field(default_factory=StoreConfig)
    serialization: SerializationConfig = field(default_factory=SerializationConfig)
