"""Pydantic models for world snapshots and placement reports.

A snapshot is the read-only view of the world handed to the planner each
pass; a report is the serialisable form of the planner's output.
"""

from typing import Hashable, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from basesite.clustering import ResourceDeposit
from basesite.game_data import is_colony_structure, resource_kind_for
from basesite.geometry import Vec2
from basesite.registrar import BaseSite


# ─── Snapshot Types ───────────────────────────────────────────────────────────


class EntityModel(BaseModel):
    """A single world entity as reported by the game."""

    id: int = Field(..., description="Unique entity tag")
    type: str = Field(..., description="Unit type name (e.g. 'MineralField', 'Hatchery')")
    x: float = Field(default=0.0, description="World position X")
    y: float = Field(default=0.0, description="World position Y")
    z: float = Field(default=0.0, description="World position Z (ignored for placement)")
    owner: int = Field(default=0, description="Owning player id (16 = neutral)")

    def position(self) -> Vec2:
        return Vec2.from_xyz(self.x, self.y, self.z)


class WorldSnapshot(BaseModel):
    """All entities visible at one game step."""

    tick: int = Field(default=0, description="Game loop at which the snapshot was taken")
    map_name: str = Field(default="", description="Map display name")
    entities: List[EntityModel] = Field(default_factory=list, description="Every visible entity")


def snapshot_deposits(snapshot: WorldSnapshot) -> list[ResourceDeposit]:
    """Resource deposits in the snapshot, in entity order."""
    deposits = []
    for entity in snapshot.entities:
        kind = resource_kind_for(entity.type)
        if kind is not None:
            deposits.append(ResourceDeposit(id=entity.id, kind=kind, position=entity.position()))
    return deposits


def snapshot_structures(
    snapshot: WorldSnapshot,
    structure_types: Optional[set[str]] = None,
) -> list[tuple[Hashable, Vec2]]:
    """(handle, position) of colony structures in the snapshot, in entity order.

    When *structure_types* is given only those types count, otherwise every
    known colony structure does.
    """
    structures = []
    for entity in snapshot.entities:
        wanted = entity.type in structure_types if structure_types is not None else is_colony_structure(entity.type)
        if wanted:
            structures.append((entity.id, entity.position()))
    return structures


# ─── Report Types ─────────────────────────────────────────────────────────────

# Snapshot entities carry int tags; engine callers may use string handles.
Handle = Union[int, str]


def sorted_handles(handles: Iterable[Hashable]) -> list:
    """Handles in report order: ints ascending, then strings ascending."""
    return sorted(handles, key=lambda h: (isinstance(h, str), h))


class BaseSiteModel(BaseModel):
    """Serialisable view of a BaseSite."""

    x: float = Field(..., description="Site center X")
    y: float = Field(..., description="Site center Y")
    occupied: bool = Field(default=False, description="Whether a colony structure stands on the site")
    occupying_structure: Optional[Handle] = Field(default=None, description="Handle of the occupying structure")
    linked_resources: List[Handle] = Field(default_factory=list, description="Handles of the field's deposits")

    @classmethod
    def from_site(cls, site: BaseSite) -> "BaseSiteModel":
        return cls(
            x=site.position.x,
            y=site.position.y,
            occupied=site.occupied,
            occupying_structure=site.occupying_structure,
            linked_resources=sorted_handles(site.linked_resources),
        )


class PlacementReport(BaseModel):
    """Output of one planner pass."""

    tick: int = Field(default=0)
    map_name: str = Field(default="")
    structure_type: str = Field(default="Hatchery")
    sites: List[BaseSiteModel] = Field(default_factory=list)
    infeasible_fields: List[List[Handle]] = Field(
        default_factory=list, description="Deposit handles of fields with no valid placement"
    )
