"""
Network Components
==================

Entities of the energy network, all indexed by a shared timeline:
- Zone: demand node with expected demands
- Plant: production unit with min/max power bounds
- Link: directed transmission edge between zones
"""

from .zone import Zone
from .plant import Plant
from .link import Link

__all__ = ["Zone", "Plant", "Link"]
