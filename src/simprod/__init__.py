"""
simprod
=======

Data model for the simulation of energy production and transport
through a network of zones:

- timeline: shared discretization of the future into timesteps
- components/: zones, plants and links of the network
- scenario: input dataset (timeline + zones + plants + links)
- plan: output dataset (per-timestep production of each plant)
- utils/: ordered map backing the plan productions

Every entity has a lossless JSON encoding (``to_json`` / ``from_json``)
and structural equality (``equals``). Loading fails fast with a
SimprodValidationError on the first malformed value.
"""

__version__ = "1.0.0"

from .components import Link, Plant, Zone
from .config import Limits
from .errors import ErrorReason, SimprodValidationError
from .plan import Plan
from .scenario import Scenario
from .timeline import Timeline
from .utils import OrderedMap

__all__ = [
    "Timeline",
    "Zone",
    "Plant",
    "Link",
    "Scenario",
    "Plan",
    "OrderedMap",
    "Limits",
    "ErrorReason",
    "SimprodValidationError",
]
