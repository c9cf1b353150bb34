"""Keep-out geometry around resource deposits.

A colony structure may not be built within a perimeter around each deposit.
The perimeter extends three cells from the deposit's edge but is 'curved'
around corners, with the curve drawn as grid squares. It is modelled as the
deposit's footprint box plus a minimum squared gap that the closest point of
the structure's footprint must keep from it. Any candidate whose gap exceeds
the minimum is guaranteed to be outside the perimeter.
"""

from dataclasses import dataclass
from typing import Optional

from basesite.clustering import ResourceDeposit, ResourceField
from basesite.game_data import ResourceKind
from basesite.geometry import Rect


@dataclass(frozen=True)
class ExclusionZone:
    """Keep-out rectangle and minimum squared clearance for one deposit."""

    keep_out: Rect
    min_clearance: float

    def allows(self, footprint: Rect) -> bool:
        """True if a structure occupying *footprint* respects this zone.

        The squared rectangle gap is compared against ``min_clearance`` as is;
        the clearance constants were tuned against that metric.
        """
        return self.keep_out.min_distance_squared(footprint) >= self.min_clearance


def zone_for(deposit: ResourceDeposit, rules: Optional[dict[ResourceKind, dict]] = None) -> ExclusionZone:
    entry = deposit.rule(rules)
    return ExclusionZone(
        keep_out=Rect.from_center(deposit.position, entry["footprint"]),
        min_clearance=entry["clearance"],
    )


def zones_for(field: ResourceField, rules: Optional[dict[ResourceKind, dict]] = None) -> list[ExclusionZone]:
    """One exclusion zone per deposit, in the field's deposit order."""
    return [zone_for(deposit, rules) for deposit in field]


def violates_any(footprint: Rect, zones: list[ExclusionZone]) -> bool:
    return not all(zone.allows(footprint) for zone in zones)
