"""Shared fixtures and builders for the placement engine tests."""

import random

import pytest

from basesite.clustering import ResourceDeposit, ResourceField
from basesite.game_data import ResourceKind
from basesite.geometry import Vec2

HATCHERY = Vec2(5.0, 5.0)


def mineral(id, x, y) -> ResourceDeposit:
    return ResourceDeposit(id=id, kind=ResourceKind.MINERAL, position=Vec2(x, y))


def vespene(id, x, y) -> ResourceDeposit:
    return ResourceDeposit(id=id, kind=ResourceKind.VESPENE, position=Vec2(x, y))


def mineral_line(origin_x: float = 0.0, origin_y: float = 0.0, first_id: int = 1) -> list[ResourceDeposit]:
    """A typical main-base layout: six minerals in an arc and two geysers."""
    offsets = [
        ("m", -7.0, -3.0),
        ("m", -7.5, -1.0),
        ("m", -7.0, 1.0),
        ("m", -7.5, 3.0),
        ("m", -6.0, 5.0),
        ("m", -6.5, -5.0),
        ("v", -3.0, 7.0),
        ("v", -3.0, -7.0),
    ]
    deposits = []
    for i, (kind, dx, dy) in enumerate(offsets):
        make = mineral if kind == "m" else vespene
        deposits.append(make(first_id + i, origin_x + dx, origin_y + dy))
    return deposits


def random_deposits(seed: int, count: int = 20, spread: float = 60.0) -> list[ResourceDeposit]:
    rng = random.Random(seed)
    deposits = []
    for i in range(count):
        make = mineral if rng.random() < 0.8 else vespene
        deposits.append(make(i, round(rng.uniform(0, spread), 1), round(rng.uniform(0, spread), 1)))
    return deposits


@pytest.fixture
def small_field() -> ResourceField:
    """Two minerals and a geyser within one clustering threshold."""
    return ResourceField((mineral(1, 0.0, 0.0), mineral(2, 3.0, 0.0), vespene(3, 6.0, 6.0)))


@pytest.fixture
def main_base() -> list[ResourceDeposit]:
    return mineral_line()
