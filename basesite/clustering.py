"""Grouping of resource deposits into fields.

A field is the set of deposits a single colony structure would harvest.
Grouping is seed-relative: each field is a seed deposit plus every remaining
deposit within the threshold of that seed. Deposits chained through a third
deposit are not pulled in transitively.
"""

import logging
from dataclasses import dataclass
from typing import Hashable, Iterator, Optional, Sequence

from basesite.game_data import ResourceKind, get_resource_rules
from basesite.geometry import Vec2

logger = logging.getLogger(__name__)

DEFAULT_CLUSTER_THRESHOLD = 15.0


@dataclass(frozen=True)
class ResourceDeposit:
    """A harvestable deposit as seen in one world snapshot.

    ``id`` is the opaque handle of the entity in the external catalog.
    """

    id: Hashable
    kind: ResourceKind
    position: Vec2

    def rule(self, rules: Optional[dict[ResourceKind, dict]] = None) -> dict:
        """Footprint and clearance entry for this deposit's kind.

        Reads *rules* when given (e.g. a config-overridden table), otherwise
        the built-in ``RESOURCE_RULES``.
        """
        if rules is None:
            return get_resource_rules(self.kind)
        return rules[self.kind]

    @property
    def footprint(self) -> Vec2:
        """Built-in footprint for the kind; overrides are read through :meth:`rule`."""
        return self.rule()["footprint"]

    @property
    def clearance(self) -> float:
        """Built-in clearance for the kind; overrides are read through :meth:`rule`."""
        return self.rule()["clearance"]


@dataclass(frozen=True)
class ResourceField:
    """A non-empty group of deposits clustered by proximity."""

    deposits: tuple[ResourceDeposit, ...]

    def __post_init__(self):
        if not self.deposits:
            raise ValueError("ResourceField requires at least one deposit")

    def __iter__(self) -> Iterator[ResourceDeposit]:
        return iter(self.deposits)

    def __len__(self) -> int:
        return len(self.deposits)

    def positions(self) -> list[Vec2]:
        return [d.position for d in self.deposits]

    def resource_ids(self) -> frozenset:
        return frozenset(d.id for d in self.deposits)

    def mean_distance(self, point: Vec2) -> float:
        """Arithmetic mean of the Euclidean distance from *point* to every deposit."""
        return sum(d.position.distance(point) for d in self.deposits) / len(self.deposits)


def cluster(
    deposits: Sequence[ResourceDeposit],
    threshold: float = DEFAULT_CLUSTER_THRESHOLD,
) -> list[ResourceField]:
    """Partition *deposits* into fields.

    Args:
        deposits: Deposits from the current snapshot, in catalog order.
        threshold: Maximum seed-to-member distance (inclusive).

    Returns:
        Fields in creation order. Every deposit appears in exactly one field;
        an empty input yields no fields.
    """
    fields: list[ResourceField] = []
    remaining = list(deposits)
    while remaining:
        seed, rest = remaining[0], remaining[1:]
        group: list[ResourceDeposit] = []
        remaining = []
        for deposit in rest:
            if seed.position.distance(deposit.position) <= threshold:
                group.append(deposit)
            else:
                remaining.append(deposit)
        group.append(seed)
        fields.append(ResourceField(tuple(group)))

    logger.debug(f"Clustered {len(deposits)} deposits into {len(fields)} fields (threshold={threshold})")
    return fields
