"""
Link Model
==========

Directed transmission edge between two zones.
"""

from dataclasses import dataclass, replace
import logging
from typing import Any, Dict, Optional

from ..config import DEFAULT_LIMITS, Limits
from ..errors import InvariantError, UnresolvedReferenceError
from ..validation import (
    ensure_identifier_length,
    ensure_json_is_object,
    ensure_json_is_string,
    ensure_json_object_contains_key,
    ensure_json_object_has_size,
    ensure_zone_identifiers_are_the_same,
)
from .zone import Zone

LOGGER = logging.getLogger(__name__)

JSON_LINK_ID = "id"
JSON_LINK_SOURCE = "source"
JSON_LINK_TARGET = "target"


@dataclass(frozen=True, eq=False)
class Link:
    """
    Transmission link.

    Attributes:
        id: Link identifier
        source: Zone the link starts from (not owned)
        target: Zone the link ends at (not owned)
    """
    id: str
    source: Zone
    target: Zone

    def __post_init__(self):
        if self.source.id == self.target.id:
            raise InvariantError(f"Link {self.id} connects zone {self.source.id} to itself")

    def copy(self) -> "Link":
        return replace(self)

    @classmethod
    def from_json(
        cls,
        source: Optional[Zone],
        target: Optional[Zone],
        j: Any,
        limits: Limits = DEFAULT_LIMITS,
    ) -> "Link":
        """
        Build a link from its JSON value.

        The caller resolves the ``source`` and ``target`` identifiers into
        zones; a link cannot resolve them on its own.

        Raises:
            SimprodValidationError: on any shape or reference violation
        """
        ensure_json_is_object(j, "link")
        for key in (JSON_LINK_ID, JSON_LINK_SOURCE, JSON_LINK_TARGET):
            ensure_json_object_contains_key(j, key, "link")
        ensure_json_object_has_size(j, 3, "link")
        link_id = j[JSON_LINK_ID]
        ensure_json_is_string(link_id, "link.id")
        ensure_identifier_length(link_id, limits.id_max_length)
        for key, zone in ((JSON_LINK_SOURCE, source), (JSON_LINK_TARGET, target)):
            zone_id = j[key]
            ensure_json_is_string(zone_id, f"{link_id}.{key}")
            if zone is None:
                raise UnresolvedReferenceError(
                    f"Link {link_id} refers to unknown {key} zone {zone_id}"
                )
            ensure_zone_identifiers_are_the_same(zone_id, zone.id)

        LOGGER.debug("Loaded link %s", link_id)
        return cls(id=link_id, source=source, target=target)

    def to_json(self) -> Dict[str, Any]:
        return {
            JSON_LINK_ID: self.id,
            JSON_LINK_SOURCE: self.source.id,
            JSON_LINK_TARGET: self.target.id,
        }

    def equals(self, other: "Link") -> bool:
        return (self.id == other.id
                and self.source.equals(other.source)
                and self.target.equals(other.target))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def describe(self) -> str:
        return "\n".join([
            f'A link with identifier "{self.id}"',
            f"  Source zone: {self.source.id}",
            f"  Target zone: {self.target.id}",
        ])
