"""Worklist inspection and marker cleanup CLI commands."""

import argparse

from orm_annotator.annotator import Annotator
from orm_annotator.config import load_config
from orm_annotator.manifest import load_manifest, writable_class_file_path
from orm_annotator.permissions import PermissionChecker


def cmd_classes(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    descriptors = load_manifest(args.manifest)
    checker = PermissionChecker(config, descriptors)

    if args.module:
        descriptors = [d for d in descriptors if d.module == args.module]

    print(f"{'Class':<32} {'Kind':<10} {'Module':<16} {'Allowed':<8} File")
    print("─" * 90)
    for d in descriptors:
        allowed = "yes" if checker.class_is_allowed(d.name) else "no"
        path = writable_class_file_path(d)
        file_col = str(path) if path else "-"
        print(f"{d.name:<32} {d.kind:<10} {d.module:<16} {allowed:<8} {file_col}")
    print(f"\n{len(descriptors)} classes")
    return 0


def cmd_strip(args: argparse.Namespace) -> int:
    annotator = Annotator(
        load_config(args.config),
        load_manifest(args.manifest),
        dry_run=args.dry_run,
    )
    if not annotator.strip_class(args.class_name):
        print(f"{args.class_name} is not allowed or has no writable file.")
        return 1

    if annotator.report.updated:
        print(f"Removed block markers from {args.class_name}")
    else:
        print(f"No block markers in {args.class_name}")
    if args.dry_run:
        print("\n[DRY RUN] No files were modified.")
    return 0
