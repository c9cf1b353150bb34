"""Tests for static unit-type data."""

from basesite.game_data import (
    COLONY_STRUCTURES,
    RESOURCE_RULES,
    RESOURCE_TYPES,
    ResourceKind,
    get_resource_rules,
    get_structure_info,
    is_colony_structure,
    resource_kind_for,
)
from basesite.geometry import Vec2


class TestResourceKind:
    def test_values(self):
        assert ResourceKind.MINERAL == "mineral"
        assert ResourceKind.VESPENE == "vespene"
        assert ResourceKind("vespene") is ResourceKind.VESPENE

    def test_every_kind_has_rules(self):
        for kind in ResourceKind:
            rules = RESOURCE_RULES[kind]
            assert isinstance(rules["footprint"], Vec2)
            assert rules["clearance"] > 0

    def test_rule_constants(self):
        assert get_resource_rules(ResourceKind.MINERAL)["footprint"] == Vec2(2.0, 1.0)
        assert get_resource_rules(ResourceKind.MINERAL)["clearance"] == 8.0
        assert get_resource_rules("vespene")["footprint"] == Vec2(3.0, 3.0)
        assert get_resource_rules("vespene")["clearance"] == 5.0


class TestResourceTypes:
    def test_mineral_variants(self):
        for name in ("MineralField", "MineralField450", "MineralField750"):
            assert resource_kind_for(name) is ResourceKind.MINERAL

    def test_geyser_variants(self):
        for name in (
            "VespeneGeyser",
            "SpacePlatformGeyser",
            "RichVespeneGeyser",
            "ProtossVespeneGeyser",
            "PurifierVespeneGeyser",
            "ShakurasVespeneGeyser",
        ):
            assert resource_kind_for(name) is ResourceKind.VESPENE

    def test_non_resources(self):
        assert resource_kind_for("Hatchery") is None
        assert resource_kind_for("Drone") is None

    def test_all_types_map_to_known_kind(self):
        assert set(RESOURCE_TYPES.values()) == set(ResourceKind)


class TestColonyStructures:
    def test_hatchery(self):
        info = get_structure_info("Hatchery")
        assert info["footprint"] == Vec2(5.0, 5.0)
        assert info["race"] == "zerg"

    def test_case_insensitive_lookup(self):
        assert get_structure_info("hatchery") is COLONY_STRUCTURES["Hatchery"]
        assert get_structure_info("NEXUS") is COLONY_STRUCTURES["Nexus"]

    def test_unknown(self):
        assert get_structure_info("Barracks") is None

    def test_is_colony_structure(self):
        assert is_colony_structure("CommandCenter")
        assert not is_colony_structure("MineralField")

    def test_all_town_halls_have_footprint(self):
        for data in COLONY_STRUCTURES.values():
            assert data["footprint"] == Vec2(5.0, 5.0)
            assert data["height"] > 0
