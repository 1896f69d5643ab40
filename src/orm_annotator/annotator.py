"""Annotator — walks the class worklist and rewrites docblocks.

The run, per class:
1. Check the module/class allow-list
2. Resolve the class to a writable file
3. Generate tags and upsert the marked block
4. Write only when the text actually changed

One class failing never stops the batch; the failure lands in the report.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from orm_annotator.config import AnnotatorConfig
from orm_annotator.docblock.cleanup import remove_start_and_end_tag
from orm_annotator.docblock.gate import decide
from orm_annotator.docblock.upsert import BlockStructureError, upsert_annotations
from orm_annotator.manifest import (
    ClassDescriptor,
    entity_classes,
    extension_classes,
    writable_class_file_path,
)
from orm_annotator.permissions import PermissionChecker
from orm_annotator.tags import TagProvider, generate_tags


@dataclass
class AnnotationReport:
    """Outcome of an annotation run."""

    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    skipped: list[dict[str, str]] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)
    dry_run: bool = False

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "updated": self.updated,
            "unchanged": self.unchanged,
            "skipped": self.skipped,
            "errors": self.errors,
            "dry_run": self.dry_run,
        }


class Annotator:
    """Generates docblocks for the entity and extension classes it is given."""

    def __init__(
        self,
        config: AnnotatorConfig,
        descriptors: list[ClassDescriptor],
        tag_provider: TagProvider | None = None,
        dry_run: bool = False,
        force: bool = False,
        notify: Callable[[str], None] | None = None,
    ):
        self.config = config
        self.classes = entity_classes(descriptors)
        self.extensions = extension_classes(descriptors)
        self.permissions = PermissionChecker(config, descriptors)
        self.tag_provider = tag_provider or generate_tags
        self.dry_run = dry_run
        self.force = force
        self.notify = notify
        self.report = AnnotationReport(dry_run=dry_run)
        self._by_name = {d.name: d for d in descriptors}

    def annotate_module(self, module: str) -> bool:
        """Annotate every entity and extension class, gated by module.

        Returns False without touching anything when generation is
        disabled or the module is not allow-listed.
        """
        if not self._enabled() or not self.permissions.module_is_allowed(module):
            return False
        self._run_batch()
        return True

    def annotate_all(self) -> bool:
        """Annotate every known class; the class gate decides per class."""
        if not self._enabled():
            return False
        self._run_batch()
        return True

    def annotate_class(self, class_name: str) -> bool:
        """Generate the docblock for a single class.

        Returns False when the class is not allowed or has no writable
        file; True otherwise, whether or not the file changed.

        Raises:
            BlockStructureError: If the file's markers are inverted or repeated.
            OSError: If the file cannot be read or written.
        """
        path = self._writable_path(class_name)
        if path is None:
            return False

        descriptor = self._by_name[class_name]
        original = _read(path)
        result = upsert_annotations(original, class_name, self.tag_provider(descriptor))

        if result.partial_markers:
            warnings.warn(
                f"{path} has only one generated-block marker; "
                f"inserted a new block above {class_name}"
            )
        if not result.produced:
            self.report.skipped.append({"class": class_name, "reason": result.status})
            return True

        self._persist(class_name, path, original, result.content)
        return True

    def strip_class(self, class_name: str) -> bool:
        """Remove the marker lines from a class's generated block."""
        path = self._writable_path(class_name)
        if path is None:
            return False

        original = _read(path)
        self._persist(
            class_name, path, original, remove_start_and_end_tag(original), "Stripped",
        )
        return True

    def _enabled(self) -> bool:
        return self.config.enabled or self.force

    def _writable_path(self, class_name: str) -> Path | None:
        if not self.permissions.class_is_allowed(class_name):
            self.report.skipped.append({"class": class_name, "reason": "not_allowed"})
            return None
        path = writable_class_file_path(self._by_name[class_name])
        if path is None:
            self.report.skipped.append({"class": class_name, "reason": "no_writable_file"})
        return path

    def _persist(
        self, class_name: str, path: Path, original: str, candidate: str,
        action: str = "Annotated",
    ) -> None:
        decision = decide(original, candidate)
        if not decision.changed:
            self.report.unchanged.append(class_name)
            return
        if not self.dry_run:
            _write(path, decision.content)
            if self.notify:
                self.notify(f"{class_name} {action}")
        self.report.updated.append(class_name)

    def _run_batch(self) -> None:
        for descriptor in [*self.classes, *self.extensions]:
            try:
                self.annotate_class(descriptor.name)
            except (BlockStructureError, OSError) as e:
                self.report.errors.append({"class": descriptor.name, "error": str(e)})


def _read(path: Path) -> str:
    # newline="" keeps CRLF sources byte-identical outside the block
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
