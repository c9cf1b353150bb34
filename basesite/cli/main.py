"""CLI entry point for basesite."""

import argparse
import sys


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        prog="basesite",
        description="Compute expansion sites from StarCraft II world snapshots",
    )
    parser.add_argument(
        "--version", action="store_true",
        help="Print version and exit",
    )
    subparsers = parser.add_subparsers(dest="command")

    # ── plan ────────────────────────────────────────────────────────
    plan_parser = subparsers.add_parser(
        "plan", help="Compute base sites for a snapshot file (YAML or JSON)",
    )
    plan_parser.add_argument("snapshot", help="Path to the world snapshot")
    plan_parser.add_argument("--config", dest="config_path", help="Path to basesite.yaml")
    plan_parser.add_argument("--threshold", type=float, help="Clustering distance threshold")
    plan_parser.add_argument("--structure", help="Colony structure type (default: Hatchery)")
    plan_parser.add_argument("--json", dest="as_json", action="store_true", help="Print the report as JSON")
    plan_parser.add_argument("--overlay", action="store_true", help="Include debug overlay draw commands")
    plan_parser.add_argument("--verbose", action="store_true", help="Verbose logging")

    # ── config ──────────────────────────────────────────────────────
    config_parser = subparsers.add_parser("config", help="Print the effective configuration")
    config_parser.add_argument("--config", dest="config_path", help="Path to basesite.yaml")

    # ── version ─────────────────────────────────────────────────────
    subparsers.add_parser("version", help="Print version")

    args = parser.parse_args(argv)

    if args.version:
        from basesite.cli.commands import cmd_version
        cmd_version()
        return

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from basesite.cli import commands

    if args.command == "plan":
        commands.cmd_plan(
            snapshot_path=args.snapshot,
            config_path=args.config_path,
            threshold=args.threshold,
            structure=args.structure,
            as_json=args.as_json,
            overlay=args.overlay,
            verbose=args.verbose,
        )
    elif args.command == "config":
        commands.cmd_config(config_path=args.config_path)
    elif args.command == "version":
        commands.cmd_version()
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
