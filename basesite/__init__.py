"""sc2-basesite: base-site placement for a StarCraft II agent."""

from basesite.clustering import ResourceDeposit, ResourceField, cluster
from basesite.exclusion import ExclusionZone, zones_for
from basesite.planner import BaseSitePlanner, PassResult
from basesite.registrar import BaseSite, register
from basesite.search import best_site

__all__ = [
    "BaseSite",
    "BaseSitePlanner",
    "ExclusionZone",
    "PassResult",
    "ResourceDeposit",
    "ResourceField",
    "best_site",
    "cluster",
    "register",
    "zones_for",
]
