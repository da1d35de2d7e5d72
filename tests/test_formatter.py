"""Tests for commit_mentions.filters.formatter: commit reference labels."""

from xml.etree.ElementTree import Element, SubElement

import pytest
from pydantic import ValidationError

from commit_mentions.filters.formatter import (
    CommitReference,
    ReferenceFormatter,
    format_range,
    trim_commit_sha,
)

from conftest import FULL_SHA, OTHER_FULL_SHA, inner_html


class TestTrimCommitSha:
    def test_full_sha_trimmed_to_seven(self):
        assert trim_commit_sha(FULL_SHA) == "6fd7945"

    def test_short_sha_unchanged(self):
        assert trim_commit_sha("6fd7945") == "6fd7945"

    def test_threshold_is_thirty(self):
        assert trim_commit_sha(FULL_SHA[:29]) == FULL_SHA[:29]
        assert trim_commit_sha(FULL_SHA[:30]) == "6fd7945"

    def test_every_length(self):
        for length in range(7, 41):
            sha = FULL_SHA[:length]
            trimmed = trim_commit_sha(sha)
            if length >= 30:
                assert trimmed == sha[:7]
            else:
                assert trimmed == sha

    def test_trim_is_stable(self):
        assert trim_commit_sha(trim_commit_sha(FULL_SHA)) == "6fd7945"


class TestFormatRange:
    def test_each_side_trimmed(self):
        assert format_range(FULL_SHA, OTHER_FULL_SHA) == "6fd7945...abc1234"

    def test_mixed_lengths(self):
        assert format_range("6fd7945", OTHER_FULL_SHA) == "6fd7945...abc1234"

    def test_medium_length_tokens_not_trimmed_as_a_whole(self):
        first, second = FULL_SHA[:20], OTHER_FULL_SHA[:20]
        assert format_range(first, second) == f"{first}...{second}"


class TestCommitReference:
    def test_to_html_plain(self):
        ref = CommitReference(sha_label="6fd7945")
        assert ref.to_html() == "<tt>6fd7945</tt>"

    def test_to_html_with_prefix_and_suffix(self):
        ref = CommitReference(
            owner_repo_prefix="desktop/desktop@",
            sha_label="6fd7945",
            file_path_suffix="/README.md?plain=1",
        )
        assert ref.to_html() == "desktop/desktop@<tt>6fd7945</tt>/README.md?plain=1"

    def test_to_html_escapes_text(self):
        ref = CommitReference(sha_label="6fd7945", file_path_suffix="/a.md?x=1&y=<2>")
        assert ref.to_html() == "<tt>6fd7945</tt>/a.md?x=1&amp;y=&lt;2&gt;"

    def test_is_frozen(self):
        ref = CommitReference(sha_label="6fd7945")
        with pytest.raises(ValidationError):
            ref.sha_label = "abc1234"

    def test_apply_to_replaces_content(self):
        anchor = Element("a", href="https://example.com", title="keep")
        anchor.text = "old"
        SubElement(anchor, "em").text = "child"
        anchor.tail = " after"

        ref = CommitReference(owner_repo_prefix="o/r@", sha_label="6fd7945", file_path_suffix="/f")
        result = ref.apply_to(anchor)

        assert result is anchor
        assert inner_html(anchor) == "o/r@<tt>6fd7945</tt>/f"
        assert anchor.get("title") == "keep"
        assert anchor.tail == " after"


class TestReferenceFormatter:
    def test_same_repository_has_no_prefix(self, repository):
        formatter = ReferenceFormatter(repository)
        assert formatter.format("desktop", "desktop", FULL_SHA) == "<tt>6fd7945</tt>"

    def test_foreign_repository_is_prefixed(self, other_repository):
        formatter = ReferenceFormatter(other_repository)
        assert formatter.format("desktop", "desktop", FULL_SHA) == "desktop/desktop@<tt>6fd7945</tt>"

    def test_same_owner_other_name_is_prefixed(self, repository):
        formatter = ReferenceFormatter(repository)
        assert formatter.format("desktop", "dugite", "6fd7945") == "desktop/dugite@<tt>6fd7945</tt>"

    def test_owner_comparison_is_case_sensitive(self, repository):
        formatter = ReferenceFormatter(repository)
        assert formatter.owner_repo_prefix("Desktop", "desktop") == "Desktop/desktop@"

    def test_range_trimmed_per_token(self, repository):
        formatter = ReferenceFormatter(repository)
        result = formatter.format("desktop", "desktop", f"{FULL_SHA}...{OTHER_FULL_SHA}")
        assert result == "<tt>6fd7945...abc1234</tt>"

    def test_file_path_suffix_appended(self, repository):
        formatter = ReferenceFormatter(repository)
        result = formatter.format("desktop", "desktop", FULL_SHA, "/src/main.py")
        assert result == "<tt>6fd7945</tt>/src/main.py"

    def test_reference_fields(self, other_repository):
        ref = ReferenceFormatter(other_repository).reference("desktop", "desktop", "6fd7945")
        assert ref.owner_repo_prefix == "desktop/desktop@"
        assert ref.sha_label == "6fd7945"
        assert ref.file_path_suffix is None
