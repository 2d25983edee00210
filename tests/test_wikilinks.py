"""Tests for the wikilink tokenizer and its helpers."""

import pytest

from cards_preview.schemas.segment import LinkRef, LiteralSegment
from cards_preview.services.wikilinks import (
    display_text,
    link_targets,
    tokenize,
    unwrap_wikilink,
)


class TestTokenize:
    def test_mixed_links_and_text(self):
        assert tokenize("See [[Home]] and [[Docs|Documentation]] today") == [
            LiteralSegment(text="See "),
            LinkRef(target="Home", label="Home"),
            LiteralSegment(text=" and "),
            LinkRef(target="Docs", label="Documentation"),
            LiteralSegment(text=" today"),
        ]

    def test_no_links(self):
        assert tokenize("no links here") == [LiteralSegment(text="no links here")]

    def test_empty_string(self):
        assert tokenize("") == [LiteralSegment(text="")]

    def test_link_only(self):
        assert tokenize("[[Home]]") == [LinkRef(target="Home", label="Home")]

    def test_adjacent_links(self):
        assert tokenize("[[a]][[b|B]]") == [
            LinkRef(target="a", label="a"),
            LinkRef(target="b", label="B"),
        ]

    def test_unclosed_link_is_literal(self):
        assert tokenize("[[a]] then [[b") == [
            LinkRef(target="a", label="a"),
            LiteralSegment(text=" then [[b"),
        ]

    def test_stray_closing_brackets_are_literal(self):
        assert tokenize("a]] b") == [LiteralSegment(text="a]] b")]

    def test_nested_open_resumes_scan(self):
        assert tokenize("[[x [[Home]]") == [
            LiteralSegment(text="[[x "),
            LinkRef(target="Home", label="Home"),
        ]

    def test_extra_leading_bracket_stays_literal(self):
        assert tokenize("[[[Home]]") == [
            LiteralSegment(text="["),
            LinkRef(target="Home", label="Home"),
        ]

    def test_extra_trailing_bracket_stays_literal(self):
        assert tokenize("[[Home]]]") == [
            LinkRef(target="Home", label="Home"),
            LiteralSegment(text="]"),
        ]

    @pytest.mark.parametrize("value", ["[[]]", "[[|label]]", "[[target|]]", "[[a]b]]"])
    def test_malformed_links_are_literal(self, value):
        assert tokenize(value) == [LiteralSegment(text=value)]

    def test_label_may_contain_pipe(self):
        assert tokenize("[[a|b|c]]") == [LinkRef(target="a", label="b|c")]

    def test_target_kept_verbatim(self):
        assert tokenize("[[Folder/Note name.md]]") == [
            LinkRef(target="Folder/Note name.md", label="Folder/Note name.md"),
        ]

    def test_segments_are_immutable(self):
        seg = tokenize("[[Home]]")[0]
        with pytest.raises(Exception):
            seg.target = "Other"


class TestDisplayText:
    def test_labels_replace_links(self):
        segments = tokenize("See [[Home]] and [[Docs|Documentation]] today")
        assert display_text(segments) == "See Home and Documentation today"

    def test_plain_text_roundtrip(self):
        assert display_text(tokenize("no links [[here")) == "no links [[here"


class TestLinkTargets:
    def test_targets_in_order(self):
        assert link_targets("[[b]] x [[a|A]] [[b]]") == ["b", "a", "b"]

    def test_no_targets(self):
        assert link_targets("plain") == []


class TestUnwrapWikilink:
    def test_wrapped_value(self):
        assert unwrap_wikilink("[[covers/cat.png]]") == "covers/cat.png"

    def test_plain_value_unchanged(self):
        assert unwrap_wikilink("covers/cat.png") == "covers/cat.png"

    def test_partial_wrap_unchanged(self):
        assert unwrap_wikilink("[[cat.png") == "[[cat.png"

    def test_empty_link(self):
        assert unwrap_wikilink("[[]]") == ""
