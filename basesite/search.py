"""Grid search for the best colony-structure center within a resource field.

The search area is the field's bounding box (of deposit positions) grown by
the structure footprint plus a fixed margin, snapped outward to the grid, and
then shrunk by half the footprint so that it only contains legal centers.
Every integer-step point inside that area is tested against the field's
exclusion zones; the survivor with the lowest mean distance to the deposits
wins.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional

from basesite.clustering import ResourceField
from basesite.exclusion import ExclusionZone, violates_any, zones_for
from basesite.game_data import ResourceKind
from basesite.geometry import Rect, Vec2

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_MARGIN = Vec2(4.0, 4.0)


@dataclass(frozen=True)
class SearchRegion:
    """Rectangles derived from a field for one structure footprint.

    ``drawable`` is the grid-aligned area the structure body may occupy;
    ``centers`` is the area its center may occupy.
    """

    drawable: Rect
    centers: Rect


@dataclass(frozen=True)
class Candidate:
    position: Vec2
    score: float


def search_region(
    field: ResourceField,
    structure_footprint: Vec2,
    margin: Vec2 = DEFAULT_SEARCH_MARGIN,
) -> SearchRegion:
    bbox = Rect.bounding_points(field.positions())
    if bbox is None:
        raise ValueError("Resource field should contain at least one deposit")

    grown = Rect.from_center(bbox.center(), bbox.size() + structure_footprint + margin)
    drawable = Rect.from_corners(grown.min.floor(), grown.max.ceil())

    half = structure_footprint / 2.0
    centers = Rect(drawable.min + half, drawable.max - half)
    return SearchRegion(drawable=drawable, centers=centers)


def candidate_centers(area: Rect) -> Iterator[Vec2]:
    """Yield grid points from ``area.min`` to ``area.max`` inclusive.

    Points step by 1.0 on each axis; x is the outer loop and y the inner.
    """
    nx = math.floor(area.max.x - area.min.x) + 1
    ny = math.floor(area.max.y - area.min.y) + 1
    for i in range(max(nx, 0)):
        x = area.min.x + i
        for j in range(max(ny, 0)):
            yield Vec2(x, area.min.y + j)


def valid_candidates(
    field: ResourceField,
    structure_footprint: Vec2,
    zones: list[ExclusionZone],
    margin: Vec2 = DEFAULT_SEARCH_MARGIN,
) -> Iterator[Vec2]:
    """Candidate centers whose footprint respects every exclusion zone."""
    region = search_region(field, structure_footprint, margin)
    for point in candidate_centers(region.centers):
        if not violates_any(Rect.from_center(point, structure_footprint), zones):
            yield point


def best_candidate(
    field: ResourceField,
    structure_footprint: Vec2,
    margin: Vec2 = DEFAULT_SEARCH_MARGIN,
    rules: Optional[dict[ResourceKind, dict]] = None,
) -> Optional[Candidate]:
    """Lowest-scoring valid candidate; ties keep the first one enumerated."""
    zones = zones_for(field, rules)
    best: Optional[Candidate] = None
    for point in valid_candidates(field, structure_footprint, zones, margin):
        score = field.mean_distance(point)
        if best is None or score < best.score:
            best = Candidate(point, score)
    return best


def best_site(
    field: ResourceField,
    structure_footprint: Vec2,
    margin: Vec2 = DEFAULT_SEARCH_MARGIN,
    rules: Optional[dict[ResourceKind, dict]] = None,
) -> Optional[Vec2]:
    """Best structure center for *field*, or None when no candidate is valid.

    None means the field is infeasible for this footprint this pass (for
    example deposits packed too tightly); it is not an error.
    """
    candidate = best_candidate(field, structure_footprint, margin, rules)
    if candidate is None:
        logger.debug(f"No valid placement for field of {len(field)} deposits")
        return None
    return candidate.position
