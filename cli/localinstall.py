"""localinstall CLI — show the local-install plan for the current project."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Ensure project root is importable when running as script
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def cmd_plan(args: argparse.Namespace) -> None:
    """Print the install sets found from the starting directory."""
    from contracts.errors import LocalInstallError
    from localinstall.walker import find_installs

    try:
        sets = find_installs(dst_bin=args.bin, start_dir=args.dir)
    except LocalInstallError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps([json.loads(s.model_dump_json()) for s in sets], indent=2))
        return

    if not sets:
        print("No local-install entries found.")
        return

    for install_set in sets:
        print(f"Manifest: {install_set.src or '(none)'}")
        print(f"  Bin dir:  {install_set.bin}")
        for argv in install_set.commands():
            print(f"  {' '.join(argv)}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="localinstall",
        description="localinstall — plan cargo installs declared in Cargo.toml metadata",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")

    # plan
    p_plan = sub.add_parser("plan", help="Show the installs for the nearest Cargo.toml")
    p_plan.add_argument(
        "--bin",
        default=os.environ.get("LOCALINSTALL_BIN"),
        help="Destination bin directory (default: <manifest dir>/bin)",
    )
    p_plan.add_argument("--dir", default=None, help="Start searching here instead of cwd")
    p_plan.add_argument("--json", action="store_true", help="Output raw JSON")
    p_plan.set_defaults(func=cmd_plan)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
