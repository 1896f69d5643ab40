"""Command line interface for orm-annotator.

Usage:
    orm-annotator annotate [--module X] [--class NAME] [--dry-run] [--force]
    orm-annotator check [--module X]
    orm-annotator classes [--module X]
    orm-annotator strip --class NAME [--dry-run]
"""

import argparse
import sys

from orm_annotator.cli.annotate import cmd_annotate, cmd_check
from orm_annotator.cli.classes import cmd_classes, cmd_strip
from orm_annotator.paths import config_path, manifest_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orm-annotator",
        description="Generate IDE docblocks for ORM entity and extension classes",
    )
    parser.add_argument(
        "--config", default=str(config_path()),
        help="Path to annotator.yaml",
    )
    parser.add_argument(
        "--manifest", default=str(manifest_path()),
        help="Path to annotator-manifest.yaml",
    )
    sub = parser.add_subparsers(dest="command")

    ann = sub.add_parser("annotate", help="Insert or refresh generated docblocks")
    ann.add_argument("--module", default=None, help="Only run if this module is enabled")
    ann.add_argument("--class", dest="class_name", default=None, help="Single class")
    ann.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    ann.add_argument(
        "--force", action="store_true",
        help="Run even when 'enabled' is false in the config",
    )

    chk = sub.add_parser("check", help="Fail if any generated docblock is stale")
    chk.add_argument("--module", default=None, help="Limit to an enabled module")

    cls = sub.add_parser("classes", help="List the class worklist")
    cls.add_argument("--module", default=None, help="Filter to a module")

    strip = sub.add_parser("strip", help="Remove the block marker lines of a class")
    strip.add_argument("--class", dest="class_name", required=True, help="Class name")
    strip.add_argument(
        "--dry-run", action="store_true",
        help="Report without writing",
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "annotate": cmd_annotate,
        "check": cmd_check,
        "classes": cmd_classes,
        "strip": cmd_strip,
    }
    try:
        return dispatch[args.command](args)
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
