"""Debug overlay primitives for base sites.

Builds the draw requests a debug renderer needs to show the planner's
output: a footprint-sized box on each site, a label on unoccupied sites, and
a line from each site to every resource it harvests. Rendering itself is up
to the consumer.
"""

from typing import Hashable, List, Mapping, Optional, Union

from pydantic import BaseModel, Field

from basesite.config import OverlayConfig
from basesite.geometry import Rect, Vec2
from basesite.registrar import BaseSite
from basesite.search import SearchRegion


class Color(BaseModel):
    r: int = Field(default=255, ge=0, le=255)
    g: int = Field(default=255, ge=0, le=255)
    b: int = Field(default=255, ge=0, le=255)

    @classmethod
    def from_tuple(cls, rgb: tuple[int, int, int]) -> "Color":
        r, g, b = rgb
        return cls(r=r, g=g, b=b)


class DrawBox(BaseModel):
    """A box resting on the terrain surface."""

    kind: str = "box"
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    height: float = 0.0
    color: Color = Field(default_factory=Color)


class DrawText(BaseModel):
    kind: str = "text"
    text: str
    x: float
    y: float
    color: Color = Field(default_factory=Color)


class DrawLine(BaseModel):
    """A line along the terrain surface."""

    kind: str = "line"
    x0: float
    y0: float
    x1: float
    y1: float
    color: Color = Field(default_factory=Color)


DrawCommand = Union[DrawBox, DrawText, DrawLine]


def surface_box(rect: Rect, height: float, color: Color) -> DrawBox:
    return DrawBox(
        min_x=rect.min.x,
        min_y=rect.min.y,
        max_x=rect.max.x,
        max_y=rect.max.y,
        height=height,
        color=color,
    )


def search_region_box(region: SearchRegion, config: Optional[OverlayConfig] = None) -> DrawBox:
    """Outline of the area in which structure centers were searched."""
    config = config or OverlayConfig()
    return surface_box(region.centers, 10.0, Color.from_tuple(config.region_color))


def build_overlay(
    sites: List[BaseSite],
    resource_positions: Mapping[Hashable, Vec2],
    structure_footprint: Vec2,
    structure_height: float = 2.0,
    config: Optional[OverlayConfig] = None,
) -> List[DrawCommand]:
    """Draw requests for every site, in site order.

    Lines follow the order of *resource_positions*; linked resources missing
    from it (e.g. a deposit mined out since the pass) get no line.
    """
    config = config or OverlayConfig()
    color = Color.from_tuple(config.site_color)
    height = config.box_height if config.box_height is not None else structure_height

    commands: List[DrawCommand] = []
    for site in sites:
        commands.append(surface_box(Rect.from_center(site.position, structure_footprint), height, color))

        if not site.occupied:
            commands.append(DrawText(text=config.label, x=site.position.x, y=site.position.y))

        for resource_id, resource_pos in resource_positions.items():
            if resource_id not in site.linked_resources:
                continue
            commands.append(
                DrawLine(
                    x0=site.position.x,
                    y0=site.position.y,
                    x1=resource_pos.x,
                    y1=resource_pos.y,
                    color=color,
                )
            )
    return commands
