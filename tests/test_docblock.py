"""Tests for the docblock module (locate, upsert, change gate, cleanup)."""

import pytest

from orm_annotator.docblock import END_TAG, START_TAG
from orm_annotator.docblock.cleanup import remove_start_and_end_tag
from orm_annotator.docblock.gate import decide
from orm_annotator.docblock.locator import locate_block
from orm_annotator.docblock.upsert import (
    ANCHOR_NOT_FOUND,
    INSERTED,
    NO_PAYLOAD,
    REPLACED,
    BlockStructureError,
    build_block,
    upsert_annotations,
)

SOURCE = "class Foo extends DataObject {\n}\n"
TAGS = " * @property string $Title\n"


def _blocked(tags: str, before: str = "<?php\n", after: str = "class Foo extends DataObject {\n}\n") -> str:
    return f"{before}\n/**\n * {build_block(tags)}\n */\n{after}"


class TestLocateBlock:
    def test_absent(self):
        loc = locate_block(SOURCE)
        assert not loc.present
        assert not loc.partial
        assert loc.start == -1 and loc.end == -1

    def test_present(self):
        loc = locate_block(_blocked(TAGS))
        assert loc.present
        assert loc.start < loc.end
        assert not loc.inverted
        assert not loc.multiple

    def test_start_only_is_partial(self):
        loc = locate_block(f"/* {START_TAG} */\n{SOURCE}")
        assert not loc.present
        assert loc.partial

    def test_end_only_is_partial(self):
        loc = locate_block(f"/* {END_TAG} */\n{SOURCE}")
        assert not loc.present
        assert loc.partial

    def test_marker_at_offset_zero_counts(self):
        loc = locate_block(f"{START_TAG}\n{END_TAG}\n")
        assert loc.present
        assert loc.start == 0

    def test_inverted(self):
        loc = locate_block(f"{END_TAG}\n{START_TAG}\n")
        assert loc.present
        assert loc.inverted

    def test_multiple(self):
        loc = locate_block(_blocked(TAGS) + _blocked(TAGS, before=""))
        assert loc.multiple
        assert loc.start_count == 2


class TestUpsertInsert:
    def test_inserts_before_declaration(self):
        result = upsert_annotations(SOURCE, "Foo", TAGS)
        assert result.status == INSERTED
        expected = (
            f"\n/**\n * {START_TAG}\n * \n"
            " * @property string $Title\n"
            f" * \n * {END_TAG}\n */\n"
            "class Foo extends DataObject {\n}\n"
        )
        assert result.content == expected

    def test_surrounding_text_untouched(self):
        source = "<?php\n// keeps Foo mention\n\nclass Foo extends DataObject\n{\n}\n"
        result = upsert_annotations(source, "Foo", TAGS)
        idx = result.content.index("class Foo extends")
        block_start = result.content.index("\n/**\n")
        assert block_start < idx
        removed = result.content[:block_start] + result.content[idx:]
        assert removed == source

    def test_idempotent(self):
        first = upsert_annotations(SOURCE, "Foo", TAGS)
        second = upsert_annotations(first.content, "Foo", TAGS)
        assert second.status == REPLACED
        assert second.content == first.content

    def test_no_extends_is_anchor_not_found(self):
        result = upsert_annotations("class Foo {\n}\n", "Foo", TAGS)
        assert result.status == ANCHOR_NOT_FOUND
        assert result.content is None
        assert not result.produced

    def test_similar_class_name_not_anchored(self):
        result = upsert_annotations("class FooBar extends DataObject {}\n", "Foo", TAGS)
        assert result.status == ANCHOR_NOT_FOUND

    def test_backslashes_in_tags_kept_literally(self):
        tags = " * @method \\App\\Model\\Page Parent()\n"
        result = upsert_annotations(SOURCE, "Foo", tags)
        assert "\\App\\Model\\Page" in result.content
        again = upsert_annotations(result.content, "Foo", tags)
        assert again.content == result.content

    def test_lone_start_marker_falls_through_to_insert(self):
        source = f"// {START_TAG}\n{SOURCE}"
        result = upsert_annotations(source, "Foo", TAGS)
        assert result.status == INSERTED
        assert result.partial_markers
        assert result.content.count(START_TAG) == 2


class TestUpsertReplace:
    def test_replaces_stale_payload(self):
        source = _blocked(" * @property string $Old\n")
        result = upsert_annotations(source, "Foo", " * @property string $New\n")
        assert result.status == REPLACED
        assert "$Old" not in result.content
        assert "$New" in result.content
        assert result.content == _blocked(" * @property string $New\n")

    def test_text_outside_block_untouched(self):
        source = "<?php\n/* header */\n/**\n * Hand written\n * " + START_TAG + "\nanything here\n" + END_TAG + "\n */\nclass Foo extends DataObject {}\n"
        result = upsert_annotations(source, "Foo", TAGS)
        start = source.index(START_TAG)
        end = source.index(END_TAG) + len(END_TAG)
        assert result.content.startswith(source[:start])
        assert result.content.endswith(source[end:])
        assert "anything here" not in result.content

    def test_replace_does_not_need_anchor(self):
        source = f"/**\n * {build_block(TAGS)}\n */\nclass Foo implements Bar {{}}\n"
        result = upsert_annotations(source, "Foo", " * @property int $X\n")
        assert result.status == REPLACED

    def test_inverted_markers_rejected(self):
        source = f"/* {END_TAG} */\n/* {START_TAG} */\n{SOURCE}"
        with pytest.raises(BlockStructureError, match="precedes"):
            upsert_annotations(source, "Foo", TAGS)

    def test_multiple_blocks_rejected(self):
        source = _blocked(TAGS) + _blocked(TAGS, before="")
        with pytest.raises(BlockStructureError) as exc:
            upsert_annotations(source, "Foo", TAGS)
        assert exc.value.start_count == 2
        assert exc.value.end_count == 2


class TestEmptyPayload:
    @pytest.mark.parametrize("source", [SOURCE, _blocked(TAGS), ""])
    def test_no_payload(self, source):
        result = upsert_annotations(source, "Foo", "")
        assert result.status == NO_PAYLOAD
        assert result.content is None


class TestChangeGate:
    def test_same_text_unchanged(self):
        assert not decide(SOURCE, SOURCE).changed

    def test_different_text_changed(self):
        decision = decide(SOURCE, SOURCE + "\n")
        assert decision.changed
        assert decision.content == SOURCE + "\n"

    def test_none_candidate_unchanged(self):
        decision = decide(SOURCE, None)
        assert not decision.changed
        assert decision.content is None


class TestRemoveStartAndEndTag:
    def test_no_markers_is_noop(self):
        assert remove_start_and_end_tag(SOURCE) == SOURCE

    def test_strips_marker_lines_only(self):
        source = upsert_annotations(SOURCE, "Foo", TAGS).content
        stripped = remove_start_and_end_tag(source)
        assert START_TAG not in stripped
        assert END_TAG not in stripped
        assert stripped == "\n/**\n * \n * @property string $Title\n * \n */\nclass Foo extends DataObject {\n}\n"

    def test_idempotent(self):
        source = upsert_annotations(SOURCE, "Foo", TAGS).content
        once = remove_start_and_end_tag(source)
        assert remove_start_and_end_tag(once) == once

    def test_lone_marker_left_alone(self):
        source = f" * {START_TAG}\n{SOURCE}"
        assert remove_start_and_end_tag(source) == source


class TestLoneMarkerRerun:
    """A lone marker survives insertion, so the next run sees a broken pair."""

    def test_lone_start_then_multiple(self):
        first = upsert_annotations(f"// {START_TAG}\n{SOURCE}", "Foo", TAGS)
        assert first.status == INSERTED
        assert locate_block(first.content).multiple
        with pytest.raises(BlockStructureError, match="found 2 start and 1 end markers"):
            upsert_annotations(first.content, "Foo", TAGS)

    def test_lone_end_then_inverted(self):
        first = upsert_annotations(f"// {END_TAG}\n{SOURCE}", "Foo", TAGS)
        assert first.status == INSERTED
        assert locate_block(first.content).inverted
        with pytest.raises(BlockStructureError, match="precedes"):
            upsert_annotations(first.content, "Foo", TAGS)


class TestPayloadWithoutTrailingNewline:
    def test_newline_added(self):
        bare = upsert_annotations(SOURCE, "Foo", " * @see Foo")
        assert bare.content == upsert_annotations(SOURCE, "Foo", " * @see Foo\n").content
        assert " * @see Foo\n * \n * " + END_TAG in bare.content

    def test_rerun_stable(self):
        first = upsert_annotations(SOURCE, "Foo", " * @see Foo")
        assert upsert_annotations(first.content, "Foo", " * @see Foo").content == first.content
