"""Find the generated block markers in a source file."""

from __future__ import annotations

from dataclasses import dataclass

from orm_annotator.docblock import END_TAG, START_TAG


@dataclass(frozen=True)
class BlockLocation:
    """Where the start/end markers sit in a piece of source text."""

    start: int = -1
    end: int = -1
    start_count: int = 0
    end_count: int = 0

    @property
    def present(self) -> bool:
        return self.start_count > 0 and self.end_count > 0

    @property
    def partial(self) -> bool:
        """Exactly one kind of marker is in the text."""
        return (self.start_count > 0) != (self.end_count > 0)

    @property
    def inverted(self) -> bool:
        return self.present and self.end < self.start

    @property
    def multiple(self) -> bool:
        return self.start_count > 1 or self.end_count > 1


def locate_block(
    content: str,
    start_tag: str = START_TAG,
    end_tag: str = END_TAG,
) -> BlockLocation:
    """Scan content for the start and end markers.

    Args:
        content: Raw source text.
        start_tag: Literal start marker.
        end_tag: Literal end marker.

    Returns:
        BlockLocation with the first index and the count of each marker.
    """
    return BlockLocation(
        start=content.find(start_tag),
        end=content.find(end_tag),
        start_count=content.count(start_tag),
        end_count=content.count(end_tag),
    )
