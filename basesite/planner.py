"""One placement pass over a world snapshot.

Clusters the snapshot's deposits into fields, searches each field for the
best colony-structure center, and reconciles the results against the
structures already on the map. Every pass starts from scratch; the only
output is the list of base sites plus the fields that had no valid site.
"""

import logging
from dataclasses import dataclass, field
from typing import Hashable, Optional, Sequence

from basesite.clustering import ResourceDeposit, ResourceField, cluster
from basesite.config import BaseSiteConfig
from basesite.geometry import Vec2
from basesite.models import (
    BaseSiteModel,
    PlacementReport,
    WorldSnapshot,
    snapshot_deposits,
    snapshot_structures,
    sorted_handles,
)
from basesite.registrar import BaseSite, register
from basesite.search import best_site

logger = logging.getLogger(__name__)


@dataclass
class PassResult:
    """Sites and infeasible fields from one pass, in field-processing order."""

    fields: list[ResourceField] = field(default_factory=list)
    sites: list[BaseSite] = field(default_factory=list)
    infeasible_fields: list[ResourceField] = field(default_factory=list)

    def unoccupied_sites(self) -> list[BaseSite]:
        return [site for site in self.sites if not site.occupied]

    def occupied_sites(self) -> list[BaseSite]:
        return [site for site in self.sites if site.occupied]

    def site_for_resource(self, resource_id: Hashable) -> Optional[BaseSite]:
        for site in self.sites:
            if resource_id in site.linked_resources:
                return site
        return None

    def to_report(self, tick: int = 0, map_name: str = "", structure_type: str = "") -> PlacementReport:
        return PlacementReport(
            tick=tick,
            map_name=map_name,
            structure_type=structure_type,
            sites=[BaseSiteModel.from_site(site) for site in self.sites],
            infeasible_fields=[sorted_handles(f.resource_ids()) for f in self.infeasible_fields],
        )


class BaseSitePlanner:
    """Computes base sites for every resource field on the map.

    Holds configuration only; each call to :meth:`plan` is independent.
    """

    def __init__(self, config: Optional[BaseSiteConfig] = None):
        self.config = config or BaseSiteConfig()
        self._rules = self.config.resources.as_table()
        self._footprint = self.config.structure_footprint()
        self._margin = self.config.search_margin()

    @property
    def structure_footprint(self) -> Vec2:
        return self._footprint

    @property
    def rules(self) -> dict:
        """Resource rules table in effect, after config overrides."""
        return self._rules

    def plan(self, snapshot: WorldSnapshot) -> PassResult:
        """Run one placement pass over a world snapshot."""
        deposits = snapshot_deposits(snapshot)
        structures = snapshot_structures(snapshot)
        result = self.plan_entities(deposits, structures)
        logger.info(
            f"Tick {snapshot.tick}: {len(result.sites)} base sites "
            f"({len(result.unoccupied_sites())} unoccupied, "
            f"{len(result.infeasible_fields)} infeasible fields)"
        )
        return result

    def plan_entities(
        self,
        deposits: Sequence[ResourceDeposit],
        structures: Sequence[tuple[Hashable, Vec2]],
    ) -> PassResult:
        """Run one placement pass over already-extracted deposits and structures."""
        placement = self.config.placement
        result = PassResult(fields=cluster(deposits, placement.cluster_threshold))

        for resource_field in result.fields:
            position = best_site(resource_field, self._footprint, self._margin, self._rules)
            if position is None:
                logger.warning(
                    f"No valid {placement.structure_type} placement for field of "
                    f"{len(resource_field)} deposits near {resource_field.deposits[-1].position}"
                )
                result.infeasible_fields.append(resource_field)
                continue
            site = register(position, resource_field, structures, placement.occupancy_tolerance)
            logger.debug(
                f"Base site at ({position.x}, {position.y}) occupied={site.occupied} "
                f"resources={len(site.linked_resources)}"
            )
            result.sites.append(site)

        return result
