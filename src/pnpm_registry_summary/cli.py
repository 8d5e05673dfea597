"""Command line entrypoint for the pnpm registry summary.

Usage:
  pnpm-registry-summary <path-to-pnpm-lock.yaml> [--json] [--userconfig PATH]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .core import summarize_lockfile
from .discovery import resolve_lockfile_path
from .parsers.pnpm_lock import LockfileError
from .summary import render_summary

PROG = "pnpm-registry-summary"
EXIT_CUSTOM_REGISTRIES = 10

USAGE_EXAMPLES = f"""
Usage: {PROG} <path-to-pnpm-lock.yaml>

Examples:
  {PROG} ./pnpm-lock.yaml
  {PROG} /absolute/path/to/pnpm-lock.yaml"""


def configure_logging(*, verbose: bool = False) -> None:
    """Route package log records to stderr, DEBUG when verbose, else WARNING+."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    package_logger = logging.getLogger(__package__)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Report which pnpm lockfile scopes resolve to non-default registries.",
    )
    parser.add_argument(
        "lockfile",
        nargs="?",
        default=None,
        help="Path to pnpm-lock.yaml (absolute or relative to the current directory)",
    )
    parser.add_argument(
        "--userconfig",
        default=None,
        help="User-level .npmrc (default: $NPM_CONFIG_USERCONFIG or ~/.npmrc)",
    )
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument(
        "--fail-on-custom",
        action="store_true",
        help=f"Exit with {EXIT_CUSTOM_REGISTRIES} when packages resolve to custom registries",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)

    if not args.lockfile:
        print("❌ Please provide the path to pnpm-lock.yaml as an argument.", file=sys.stderr)
        print(USAGE_EXAMPLES, file=sys.stderr)
        return 1

    lockfile_path = resolve_lockfile_path(args.lockfile)
    if lockfile_path is None or not lockfile_path.is_file():
        print(f"❌ Lockfile not found: {lockfile_path or args.lockfile}", file=sys.stderr)
        return 1

    try:
        summary = summarize_lockfile(lockfile_path, userconfig=args.userconfig)
    except (LockfileError, OSError) as exc:
        print(f"❌ Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(render_summary(summary))

    if args.fail_on_custom and summary.uses_custom_registries:
        return EXIT_CUSTOM_REGISTRIES
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
