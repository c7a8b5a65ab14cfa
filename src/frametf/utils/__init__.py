"""Shared utility functions for frametf.

Provides the angle conversion helpers behind the ``use_degrees`` flag.
"""

from frametf.utils._angle import from_radians, to_radians

__all__ = [
    "from_radians",
    "to_radians",
]
