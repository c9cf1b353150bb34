"""Subcommand implementations for the basesite CLI."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from basesite.cli.console import error, info, print_report
from basesite.config import BaseSiteConfig, load_config
from basesite.game_data import get_structure_info
from basesite.models import WorldSnapshot, snapshot_deposits
from basesite.overlay import build_overlay, search_region_box
from basesite.planner import BaseSitePlanner
from basesite.search import search_region


def _setup_logging(config: BaseSiteConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.logging.format)


def _cli_overrides(
    threshold: Optional[float] = None,
    structure: Optional[str] = None,
    overlay: bool = False,
) -> dict:
    overrides: dict = {}
    if threshold is not None:
        overrides.setdefault("placement", {})["cluster_threshold"] = threshold
    if structure:
        overrides.setdefault("placement", {})["structure_type"] = structure
    if overlay:
        overrides["overlay"] = {"enabled": True}
    return overrides


def load_snapshot(path: str) -> WorldSnapshot:
    """Read a world snapshot from a YAML or JSON file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Snapshot not found: {path}")
    with open(p, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return WorldSnapshot.model_validate(data)


def cmd_plan(
    snapshot_path: str,
    config_path: Optional[str] = None,
    threshold: Optional[float] = None,
    structure: Optional[str] = None,
    as_json: bool = False,
    overlay: bool = False,
    verbose: bool = False,
) -> None:
    """Compute base sites for a snapshot and print them."""
    try:
        config = load_config(
            config_path,
            cli_overrides=_cli_overrides(threshold=threshold, structure=structure, overlay=overlay),
        )
        snapshot = load_snapshot(snapshot_path)
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        error(str(e))
        sys.exit(1)

    _setup_logging(config, verbose)

    planner = BaseSitePlanner(config)
    result = planner.plan(snapshot)
    structure_type = config.placement.structure_type
    report = result.to_report(tick=snapshot.tick, map_name=snapshot.map_name, structure_type=structure_type)

    draw_commands = []
    if config.overlay.enabled:
        positions = {d.id: d.position for d in snapshot_deposits(snapshot)}
        draw_commands = build_overlay(
            result.sites,
            positions,
            planner.structure_footprint,
            structure_height=get_structure_info(structure_type)["height"],
            config=config.overlay,
        )
        if config.overlay.show_search_region:
            for resource_field in result.fields:
                region = search_region(resource_field, planner.structure_footprint, config.search_margin())
                draw_commands.append(search_region_box(region, config.overlay))

    if as_json:
        payload = report.model_dump(mode="json")
        if config.overlay.enabled:
            payload["overlay"] = [cmd.model_dump(mode="json") for cmd in draw_commands]
        print(json.dumps(payload, indent=2))
        return

    print_report(report, snapshot.map_name or snapshot_path)
    if config.overlay.enabled:
        info(f"{len(draw_commands)} overlay draw commands")


def cmd_config(config_path: Optional[str] = None) -> None:
    """Print the effective configuration as YAML."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        error(str(e))
        sys.exit(1)
    print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False), end="")


def cmd_version() -> None:
    """Print version."""
    try:
        from importlib.metadata import version
        v = version("sc2-basesite")
    except Exception:
        v = "dev"
    print(f"basesite {v}")
