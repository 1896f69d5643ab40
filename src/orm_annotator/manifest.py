"""Parse the class manifest and resolve classes to writable files.

The manifest replaces runtime class discovery: a separate tool (or a
human) lists every entity and extension class with its ORM schema.

    classes:
      - name: Page
        module: mysite
        file: code/Page.php
        db: {Title: Varchar(255), Sort: Int}
        has_one: {Parent: Page}
      - name: PageExtension
        kind: extension
        module: mysite
        file: code/PageExtension.php
        owners: [Page]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from orm_annotator.paths import manifest_path

ENTITY = "entity"
EXTENSION = "extension"
KINDS = {ENTITY, EXTENSION}


@dataclass
class ClassDescriptor:
    """One data-model class and the schema the tag generator reads."""

    name: str
    kind: str = ENTITY
    module: str = ""
    file: Path | None = None
    abstract: bool = False
    db: dict[str, str] = field(default_factory=dict)
    has_one: dict[str, str] = field(default_factory=dict)
    has_many: dict[str, str] = field(default_factory=dict)
    many_many: dict[str, str] = field(default_factory=dict)
    belongs_many_many: dict[str, str] = field(default_factory=dict)
    extensions: list[str] = field(default_factory=list)
    owners: list[str] = field(default_factory=list)

    @property
    def is_extension(self) -> bool:
        return self.kind == EXTENSION


def _parse_entry(entry: dict, base_dir: Path) -> ClassDescriptor:
    if not isinstance(entry, dict) or not entry.get("name"):
        raise ValueError(f"Manifest entry without a name: {entry!r}")

    kind = entry.get("kind", ENTITY)
    if kind not in KINDS:
        raise ValueError(f"Unknown kind '{kind}' for {entry['name']}")

    raw_file = entry.get("file")
    return ClassDescriptor(
        name=str(entry["name"]),
        kind=kind,
        module=str(entry.get("module", "")),
        file=(base_dir / raw_file) if raw_file else None,
        abstract=bool(entry.get("abstract", False)),
        db=dict(entry.get("db") or {}),
        has_one=dict(entry.get("has_one") or {}),
        has_many=dict(entry.get("has_many") or {}),
        many_many=dict(entry.get("many_many") or {}),
        belongs_many_many=dict(entry.get("belongs_many_many") or {}),
        extensions=list(entry.get("extensions") or []),
        owners=list(entry.get("owners") or []),
    )


def load_manifest(path: Path | str | None = None) -> list[ClassDescriptor]:
    """Read annotator-manifest.yaml.

    File entries are resolved relative to the manifest's directory.

    Raises:
        FileNotFoundError: If the manifest doesn't exist.
        ValueError: If the manifest or one of its entries is malformed.
    """
    manifest = Path(path) if path else manifest_path()
    with open(manifest) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Manifest at {manifest} is not a YAML mapping")

    base_dir = manifest.parent
    return [_parse_entry(e, base_dir) for e in data.get("classes") or []]


def entity_classes(descriptors: list[ClassDescriptor]) -> list[ClassDescriptor]:
    return [d for d in descriptors if not d.is_extension]


def extension_classes(descriptors: list[ClassDescriptor]) -> list[ClassDescriptor]:
    return [d for d in descriptors if d.is_extension]


def writable_class_file_path(descriptor: ClassDescriptor) -> Path | None:
    """Return the declaring file if the annotator may rewrite it.

    Abstract classes, classes without a file, and read-only files
    resolve to None.
    """
    if descriptor.abstract or descriptor.file is None:
        return None
    path = Path(descriptor.file)
    if not path.is_file() or not os.access(path, os.W_OK):
        return None
    return path
