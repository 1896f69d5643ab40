"""Insert or replace the generated docblock of a single class.

The rewrite is stateless: the markers are the only memory between runs,
so applying the same tags twice yields byte-identical output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from orm_annotator.docblock import END_TAG, START_TAG
from orm_annotator.docblock.locator import locate_block

REPLACED = "replaced"
INSERTED = "inserted"
NO_PAYLOAD = "no_payload"
ANCHOR_NOT_FOUND = "anchor_not_found"

_BLOCK_PATTERN = re.compile(
    re.escape(START_TAG) + r".*?" + re.escape(END_TAG), flags=re.DOTALL,
)


class BlockStructureError(ValueError):
    """The markers are present but do not form exactly one ordered block."""

    def __init__(self, message: str, start_count: int = 0, end_count: int = 0):
        super().__init__(message)
        self.start_count = start_count
        self.end_count = end_count


@dataclass(frozen=True)
class UpsertResult:
    """Outcome of an upsert; content is None when nothing was produced."""

    status: str
    content: str | None = None
    partial_markers: bool = False

    @property
    def produced(self) -> bool:
        return self.content is not None


def class_anchor(class_name: str) -> str:
    # "extends" keeps controllers and plain mentions of the name out
    return f"class {class_name} extends"


def build_block(tags: str) -> str:
    """Marker-bounded block body, without the surrounding comment tokens."""
    if not tags.endswith("\n"):
        tags += "\n"
    return f"{START_TAG}\n * \n{tags} * \n * {END_TAG}"


def upsert_annotations(content: str, class_name: str, tags: str) -> UpsertResult:
    """Put tags into the generated block for class_name.

    Args:
        content: Original source text.
        class_name: Class whose declaration anchors a new block.
        tags: Comment-continuation lines (" * @property ...\\n"), or "".

    Returns:
        UpsertResult with status replaced/inserted and the new text, or
        no_payload/anchor_not_found with content None.

    Raises:
        BlockStructureError: If the end marker precedes the start marker
            or the text holds more than one block.
    """
    if not tags:
        return UpsertResult(NO_PAYLOAD)

    location = locate_block(content)

    if location.present:
        if location.inverted:
            raise BlockStructureError(
                f"End marker precedes start marker in {class_name} source",
                location.start_count, location.end_count,
            )
        if location.multiple:
            raise BlockStructureError(
                f"Expected one generated block for {class_name}, found "
                f"{location.start_count} start and {location.end_count} end markers",
                location.start_count, location.end_count,
            )
        block = build_block(tags)
        new_content = _BLOCK_PATTERN.sub(lambda _: block, content, count=1)
        return UpsertResult(REPLACED, new_content)

    anchor = class_anchor(class_name)
    if anchor not in content:
        return UpsertResult(ANCHOR_NOT_FOUND, partial_markers=location.partial)

    docblock = f"\n/**\n * {build_block(tags)}\n */\n"
    new_content = content.replace(anchor, docblock + anchor, 1)
    return UpsertResult(INSERTED, new_content, partial_markers=location.partial)
