"""
Configuration layer for kraph.

This module defines the configuration contracts that control store
locking and text serialization.

Configuration in kraph is:
- Explicit (passed, not global)
- Typed (frozen dataclasses)
- Optional (every contract has working defaults)
"""

from kraph.config.settings import (
    StoreConfig,
    SerializationConfig,
    KraphConfig,
)

__all__ = [
    "StoreConfig",
    "SerializationConfig",
    "KraphConfig",
]
