"""Unified configuration for the base-site planner.

Provides a single YAML-based configuration system with Pydantic validation.
Supports multiple override layers:
  CLI flags > env vars > constructor overrides > config file > built-in defaults

Usage:
    from basesite.config import load_config
    config = load_config()                                   # auto-find basesite.yaml
    config = load_config("path/to/basesite.yaml")            # explicit path
    config = load_config(placement={"cluster_threshold": 12.0})  # with overrides
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from basesite.game_data import RESOURCE_RULES, ResourceKind, get_structure_info
from basesite.geometry import Vec2


# ── Pydantic Config Models ────────────────────────────────────────────


class PlacementConfig(BaseModel):
    cluster_threshold: float = 15.0  # max seed-to-member distance within a field
    occupancy_tolerance: float = 1.0  # structure within this distance occupies a site
    search_margin: tuple[float, float] = (4.0, 4.0)  # extra growth of the search box
    structure_type: str = "Hatchery"  # colony structure to place

    @model_validator(mode="after")
    def check_positive(self) -> "PlacementConfig":
        if self.cluster_threshold < 0:
            raise ValueError("cluster_threshold must be non-negative")
        if self.occupancy_tolerance < 0:
            raise ValueError("occupancy_tolerance must be non-negative")
        if min(self.search_margin) < 0:
            raise ValueError("search_margin must be non-negative")
        return self


class ResourceRuleConfig(BaseModel):
    footprint: tuple[float, float]  # deposit width, height
    clearance: float  # minimum squared gap to a structure footprint

    @model_validator(mode="after")
    def check_positive(self) -> "ResourceRuleConfig":
        if min(self.footprint) < 0:
            raise ValueError("footprint must be non-negative")
        if self.clearance < 0:
            raise ValueError("clearance must be non-negative")
        return self


def _default_rule(kind: ResourceKind) -> ResourceRuleConfig:
    entry = RESOURCE_RULES[kind]
    return ResourceRuleConfig(footprint=tuple(entry["footprint"]), clearance=entry["clearance"])


class ResourceRulesConfig(BaseModel):
    """Per-kind footprint and clearance overrides."""

    mineral: ResourceRuleConfig = Field(default_factory=lambda: _default_rule(ResourceKind.MINERAL))
    vespene: ResourceRuleConfig = Field(default_factory=lambda: _default_rule(ResourceKind.VESPENE))

    def as_table(self) -> dict[ResourceKind, dict]:
        """Rules in the shape of ``game_data.RESOURCE_RULES``."""
        table = {}
        for kind in ResourceKind:
            rule: ResourceRuleConfig = getattr(self, kind.value)
            table[kind] = {
                **RESOURCE_RULES[kind],
                "footprint": Vec2(*rule.footprint),
                "clearance": rule.clearance,
            }
        return table


class OverlayConfig(BaseModel):
    enabled: bool = False
    label: str = "Unoccupied Base Site"
    site_color: tuple[int, int, int] = (0, 0, 255)
    region_color: tuple[int, int, int] = (255, 255, 255)
    show_search_region: bool = False
    box_height: Optional[float] = None  # None = structure height from game data


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class BaseSiteConfig(BaseModel):
    """Root configuration for the base-site planner."""

    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    resources: ResourceRulesConfig = Field(default_factory=ResourceRulesConfig)
    overlay: OverlayConfig = Field(default_factory=OverlayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def check_structure_type(self) -> "BaseSiteConfig":
        """Reject structure types without known footprint data."""
        if get_structure_info(self.placement.structure_type) is None:
            raise ValueError(f"Unknown colony structure type: {self.placement.structure_type}")
        return self

    def structure_footprint(self) -> Vec2:
        return get_structure_info(self.placement.structure_type)["footprint"]

    def search_margin(self) -> Vec2:
        return Vec2(*self.placement.search_margin)


# ── Env Var Mapping ───────────────────────────────────────────────────

_ENV_VAR_MAP: list[tuple[str, str]] = [
    ("BASESITE_CLUSTER_THRESHOLD", "placement.cluster_threshold"),
    ("BASESITE_OCCUPANCY_TOLERANCE", "placement.occupancy_tolerance"),
    ("BASESITE_STRUCTURE", "placement.structure_type"),
    ("BASESITE_OVERLAY", "overlay.enabled"),
    ("BASESITE_LOG_LEVEL", "logging.level"),
]


# ── Helper Functions ──────────────────────────────────────────────────


def _deep_merge(base: dict, override: dict) -> None:
    """Recursively merge *override* into *base* in place."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def _set_nested(d: dict, path: str, value: object) -> None:
    """Set a value in a nested dict via dotted path (e.g. ``'placement.structure_type'``)."""
    keys = path.split(".")
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def _coerce_value(value: str) -> object:
    """Coerce a string env-var value to bool / int / float / str."""
    lower = value.lower()
    if lower in ("true", "yes"):
        return True
    if lower in ("false", "no"):
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


# ── Config Loading ────────────────────────────────────────────────────


def load_config(
    config_path: Optional[str] = None,
    cli_overrides: Optional[dict] = None,
    **overrides: object,
) -> BaseSiteConfig:
    """Load configuration with precedence: CLI > env vars > overrides > file > defaults.

    Parameters
    ----------
    config_path:
        Explicit path to a YAML config file; raises ``FileNotFoundError`` if it
        does not exist. When ``None``, searches for ``basesite.yaml`` in the
        current working directory and the project root.
    cli_overrides:
        Dict of overrides from explicit CLI flags. Applied last (highest
        priority), beating even environment variables.
    **overrides:
        Keyword arguments that are deep-merged on top of the file values.
        Keys should be top-level section names (e.g. ``placement={...}``).
    """
    config_dict: dict = {}

    # 1. Load YAML file
    resolved_path = _resolve_config_path(config_path)
    if resolved_path is not None:
        with open(resolved_path, encoding="utf-8") as f:
            file_dict = yaml.safe_load(f) or {}
        _deep_merge(config_dict, file_dict)

    # 2. Apply programmatic overrides
    if overrides:
        _deep_merge(config_dict, overrides)

    # 3. Apply environment variable overrides
    for env_var, dotted_path in _ENV_VAR_MAP:
        value = os.environ.get(env_var)
        if value is not None:
            _set_nested(config_dict, dotted_path, _coerce_value(value))

    # 4. Apply CLI overrides
    if cli_overrides:
        _deep_merge(config_dict, cli_overrides)

    return BaseSiteConfig(**config_dict)


def _resolve_config_path(config_path: Optional[str]) -> Optional[str]:
    """Find the config file to load, or None if none exists.

    An explicit *config_path* must exist; only the auto-discovered locations
    are optional.
    """
    if config_path is not None:
        p = Path(config_path)
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return str(p)

    candidates = [
        Path.cwd() / "basesite.yaml",
        Path(__file__).resolve().parent.parent / "basesite.yaml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return str(candidate)
    return None
