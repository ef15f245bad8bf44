"""
Utilities
=========

Generic containers used by the data model:
- OrderedMap: sorted string-keyed map (binary search tree)
"""

from .ordered_map import OrderedMap

__all__ = ["OrderedMap"]
