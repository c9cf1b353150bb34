"""Reconciliation of computed base sites against existing structures."""

from dataclasses import dataclass
from typing import Hashable, Optional, Sequence

from basesite.clustering import ResourceField
from basesite.geometry import Vec2

DEFAULT_OCCUPANCY_TOLERANCE = 1.0


@dataclass(frozen=True)
class BaseSite:
    """Placement result for one resource field.

    Sites are rebuilt every pass; match them across passes by position or
    linked resources, not by identity.
    """

    position: Vec2
    occupied: bool
    linked_resources: frozenset
    occupying_structure: Optional[Hashable] = None


def find_occupant(
    site_position: Vec2,
    existing_structures: Sequence[tuple[Hashable, Vec2]],
    tolerance: float = DEFAULT_OCCUPANCY_TOLERANCE,
) -> Optional[Hashable]:
    """Handle of the first structure strictly within *tolerance* of the site."""
    for handle, position in existing_structures:
        if position.distance(site_position) < tolerance:
            return handle
    return None


def register(
    site_position: Vec2,
    field: ResourceField,
    existing_structures: Sequence[tuple[Hashable, Vec2]],
    tolerance: float = DEFAULT_OCCUPANCY_TOLERANCE,
) -> BaseSite:
    occupant = find_occupant(site_position, existing_structures, tolerance)
    return BaseSite(
        position=site_position,
        occupied=occupant is not None,
        linked_resources=field.resource_ids(),
        occupying_structure=occupant,
    )
