"""CLI entrypoint for checking, comparing, sorting and bumping semantic versions.

Usage:
  semver-constraints satisfies 1.2.3 "^1.0.0"
  semver-constraints compare 1.2.3 1.3.0
  semver-constraints sort [--reverse] 1.10.0 1.2.0 1.2.0-rc.1
  semver-constraints inc 1.2.3 pre-release [--pre-release alpha]

Set SEMVER_CONSTRAINTS_LOOSE=1 (or pass --loose) to accept partial versions
such as ``v1.2``.
"""

from __future__ import annotations

import argparse
import os
import sys

from .compare import rsort, sort
from .constraints.constraint import Constraint
from .errors import SemverError
from .models.version import Inc, Version

LOOSE_ENV_VAR = "SEMVER_CONSTRAINTS_LOOSE"

_INC_CHOICES = {inc.value: inc for inc in Inc}


def _loose_from_env() -> bool:
    return os.getenv(LOOSE_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "y"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="semver-constraints", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--loose",
        action="store_true",
        default=None,
        help=f"Accept partial and v-prefixed versions (default from {LOOSE_ENV_VAR})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    satisfies_cmd = commands.add_parser("satisfies", help="Check a version against a constraint")
    satisfies_cmd.add_argument("version")
    satisfies_cmd.add_argument("constraint")

    compare_cmd = commands.add_parser("compare", help="Print -1, 0 or 1")
    compare_cmd.add_argument("v1")
    compare_cmd.add_argument("v2")

    sort_cmd = commands.add_parser("sort", help="Sort versions by precedence")
    sort_cmd.add_argument("versions", nargs="+")
    sort_cmd.add_argument("--reverse", action="store_true")

    inc_cmd = commands.add_parser("inc", help="Print the next version")
    inc_cmd.add_argument("version")
    inc_cmd.add_argument("by", choices=sorted(_INC_CHOICES))
    inc_cmd.add_argument("--pre-release", dest="pre_release", default=None)

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command; return the process exit code."""
    strict = not (args.loose if args.loose is not None else _loose_from_env())

    if args.command == "satisfies":
        version = Version.parse(args.version, strict)
        ok = version.is_satisfying(Constraint.parse(args.constraint))
        print("true" if ok else "false")
        return 0 if ok else 1

    if args.command == "compare":
        print(Version.compare(Version.parse(args.v1, strict), Version.parse(args.v2, strict)))
        return 0

    if args.command == "sort":
        versions = [Version.parse(v, strict) for v in args.versions]
        for version in rsort(versions) if args.reverse else sort(versions):
            print(version)
        return 0

    version = Version.parse(args.version, strict)
    print(version.inc(_INC_CHOICES[args.by], args.pre_release))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except SemverError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
