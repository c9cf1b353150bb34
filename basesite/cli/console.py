"""Terminal rendering of placement reports for the basesite CLI.

Colors are plain ANSI escapes, emitted only when stdout is a TTY and
``NO_COLOR`` is unset.
"""

import os
import sys

from basesite.models import BaseSiteModel, PlacementReport

_COLOR = hasattr(sys.stdout, "isatty") and sys.stdout.isatty() and "NO_COLOR" not in os.environ

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""


def _paint(code: str, msg: str) -> str:
    return f"{code}{msg}{_RESET}"


def info(msg: str) -> None:
    print(f"  {msg}")


def error(msg: str) -> None:
    print(f"  {_paint(_RED, msg)}", file=sys.stderr)


def warn(msg: str) -> None:
    print(f"  {_paint(_YELLOW, msg)}")


def header(msg: str) -> None:
    print(f"\n  {_paint(_BOLD, msg)}")


def site_line(site: BaseSiteModel) -> str:
    """One-line summary of a site; unoccupied sites are highlighted."""
    where = f"({site.x:g}, {site.y:g})"
    count = len(site.linked_resources)
    if site.occupied:
        return _paint(_DIM, f"{where} occupied by {site.occupying_structure}, {count} resources")
    return _paint(_GREEN, f"{where} unoccupied, {count} resources")


def print_report(report: PlacementReport, title: str) -> None:
    """Print every site of *report*, then the fields with no valid placement."""
    header(f"Base sites for {title} (tick {report.tick})")
    if not report.sites:
        warn("No base sites found.")
    for site in report.sites:
        print(f"  {site_line(site)}")
    for field_ids in report.infeasible_fields:
        warn(f"No valid {report.structure_type} placement for deposits {field_ids}")
