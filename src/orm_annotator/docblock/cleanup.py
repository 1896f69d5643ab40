"""Strip the generated block markers from a file."""

from __future__ import annotations

from orm_annotator.docblock import END_TAG, START_TAG
from orm_annotator.docblock.locator import locate_block


def remove_start_and_end_tag(content: str) -> str:
    """Remove the start and end marker lines, keeping the block's tags.

    Only acts when both markers are present; otherwise the content is
    returned unchanged, so repeated calls are harmless.
    """
    if not locate_block(content).present:
        return content
    for line in (f" * {START_TAG}\n", f" * {END_TAG}\n"):
        content = content.replace(line, "")
    return content
