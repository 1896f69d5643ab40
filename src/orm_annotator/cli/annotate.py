"""Annotate / check CLI commands."""

import argparse

from orm_annotator.annotator import AnnotationReport, Annotator
from orm_annotator.config import load_config
from orm_annotator.manifest import load_manifest


def _build_annotator(args: argparse.Namespace, dry_run: bool, notify=None) -> Annotator:
    return Annotator(
        load_config(args.config),
        load_manifest(args.manifest),
        dry_run=dry_run,
        force=getattr(args, "force", False),
        notify=notify,
    )


def _print_report(title: str, report: AnnotationReport) -> None:
    print(title)
    print("─" * 40)
    print(f"  Updated:   {len(report.updated)}")
    print(f"  Unchanged: {len(report.unchanged)}")
    print(f"  Skipped:   {len(report.skipped)}")
    if report.errors:
        print(f"  Errors:    {len(report.errors)}")
        for e in report.errors:
            print(f"    - {e['class']}: {e['error']}")


def cmd_annotate(args: argparse.Namespace) -> int:
    annotator = _build_annotator(args, args.dry_run, notify=lambda msg: print(f"  {msg}"))

    if args.class_name:
        if not annotator.force and not annotator.config.enabled:
            print("Annotation is disabled. Set 'enabled: true' in the config or pass --force.")
            return 1
        try:
            ok = annotator.annotate_class(args.class_name)
        except (ValueError, OSError) as e:
            print(f"ERROR: {args.class_name}: {e}")
            return 1
        if not ok:
            print(f"{args.class_name} is not allowed or has no writable file.")
            return 1
    elif args.module:
        if not annotator.annotate_module(args.module):
            print(f"Module '{args.module}' is not enabled for annotation.")
            return 1
    elif not annotator.annotate_all():
        print("Annotation is disabled. Set 'enabled: true' in the config or pass --force.")
        return 1

    _print_report("Docblock Annotation Results", annotator.report)
    if annotator.report.dry_run:
        print("\n[DRY RUN] No files were modified.")

    return 1 if annotator.report.errors else 0


def cmd_check(args: argparse.Namespace) -> int:
    """Exit non-zero when any docblock is stale."""
    args.force = True
    annotator = _build_annotator(args, dry_run=True)
    if args.module:
        if not annotator.annotate_module(args.module):
            print(f"Module '{args.module}' is not enabled for annotation.")
            return 1
    else:
        annotator.annotate_all()

    report = annotator.report
    if report.updated:
        print(f"Stale docblocks ({len(report.updated)}):")
        for name in report.updated:
            print(f"  {name}")
    for e in report.errors:
        print(f"ERROR: {e['class']}: {e['error']}")
    if not report.updated and not report.errors:
        print("All docblocks up to date.")

    return 1 if report.updated or report.errors else 0
