"""Static StarCraft II unit-type data used by the placement engine.

Maps raw unit-type names from world snapshots onto the roles the engine
cares about (mineral deposit, vespene deposit, colony structure) together
with the footprints and clearance constants for each role.
"""

from enum import Enum
from typing import Optional

from basesite.geometry import Vec2


# ─── Resource Kinds ───────────────────────────────────────────────────────────


class ResourceKind(str, Enum):
    """Harvestable deposit kinds."""

    MINERAL = "mineral"
    VESPENE = "vespene"


# footprint: ground area (width, height) of the deposit
# clearance: minimum squared gap between the deposit's keep-out box and a
#   colony structure's footprint; tuned against Rect.min_distance_squared
RESOURCE_RULES: dict[ResourceKind, dict] = {
    ResourceKind.MINERAL: {
        "name": "Mineral Field",
        "footprint": Vec2(2.0, 1.0),
        "clearance": 8.0,
    },
    ResourceKind.VESPENE: {
        "name": "Vespene Geyser",
        "footprint": Vec2(3.0, 3.0),
        "clearance": 5.0,
    },
}


RESOURCE_TYPES: dict[str, ResourceKind] = {
    # Minerals
    "MineralField": ResourceKind.MINERAL,
    "MineralField450": ResourceKind.MINERAL,
    "MineralField750": ResourceKind.MINERAL,
    "RichMineralField": ResourceKind.MINERAL,
    "RichMineralField750": ResourceKind.MINERAL,
    "LabMineralField": ResourceKind.MINERAL,
    "LabMineralField750": ResourceKind.MINERAL,
    "PurifierMineralField": ResourceKind.MINERAL,
    "PurifierMineralField750": ResourceKind.MINERAL,
    # Vespene
    "VespeneGeyser": ResourceKind.VESPENE,
    "SpacePlatformGeyser": ResourceKind.VESPENE,
    "RichVespeneGeyser": ResourceKind.VESPENE,
    "ProtossVespeneGeyser": ResourceKind.VESPENE,
    "PurifierVespeneGeyser": ResourceKind.VESPENE,
    "ShakurasVespeneGeyser": ResourceKind.VESPENE,
}


# ─── Colony Structures ────────────────────────────────────────────────────────

COLONY_STRUCTURES: dict[str, dict] = {
    # Zerg
    "Hatchery": {"name": "Hatchery", "race": "zerg", "footprint": Vec2(5.0, 5.0), "height": 2.0},
    "Lair": {"name": "Lair", "race": "zerg", "footprint": Vec2(5.0, 5.0), "height": 2.0},
    "Hive": {"name": "Hive", "race": "zerg", "footprint": Vec2(5.0, 5.0), "height": 2.0},
    # Terran
    "CommandCenter": {"name": "Command Center", "race": "terran", "footprint": Vec2(5.0, 5.0), "height": 2.5},
    "OrbitalCommand": {"name": "Orbital Command", "race": "terran", "footprint": Vec2(5.0, 5.0), "height": 2.5},
    "PlanetaryFortress": {"name": "Planetary Fortress", "race": "terran", "footprint": Vec2(5.0, 5.0), "height": 2.5},
    # Protoss
    "Nexus": {"name": "Nexus", "race": "protoss", "footprint": Vec2(5.0, 5.0), "height": 2.5},
}


# ─── Lookups ──────────────────────────────────────────────────────────────────


def resource_kind_for(unit_type: str) -> Optional[ResourceKind]:
    """Return the deposit kind for a raw unit type, or None if not a resource."""
    return RESOURCE_TYPES.get(unit_type)


def get_resource_rules(kind: ResourceKind) -> dict:
    return RESOURCE_RULES[ResourceKind(kind)]


def get_structure_info(unit_type: str) -> Optional[dict]:
    """Get colony-structure data by unit type name.

    Accepts the exact type name or a case-insensitive match
    (e.g. "hatchery" resolves to "Hatchery").
    """
    info = COLONY_STRUCTURES.get(unit_type)
    if info is not None:
        return info
    lowered = unit_type.lower()
    for name, data in COLONY_STRUCTURES.items():
        if name.lower() == lowered:
            return data
    return None


def is_colony_structure(unit_type: str) -> bool:
    return unit_type in COLONY_STRUCTURES
