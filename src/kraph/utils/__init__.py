"""
Utility helpers for kraph.

This module contains low-level primitives used across the system.
No graph logic should live here.
"""

from kraph.utils.locks import ReadWriteLock

__all__ = [
    "ReadWriteLock",
]
