"""Builds compact labels for commit mention links."""

from __future__ import annotations

from html import escape
from xml.etree.ElementTree import Element, SubElement

from pydantic import BaseModel, ConfigDict

from commit_mentions.vcs.models import RepositoryContext

SHA_TAG = "tt"
RANGE_SEPARATOR = "..."
# Shas at least this long are treated as full hashes and abbreviated.
FULL_SHA_MIN_LENGTH = 30
SHORT_SHA_LENGTH = 7


def trim_commit_sha(sha: str) -> str:
    """Abbreviate a full-length sha to 7 characters; shorter ones pass through."""
    return sha[:SHORT_SHA_LENGTH] if len(sha) >= FULL_SHA_MIN_LENGTH else sha


def format_range(first: str, second: str) -> str:
    return f"{trim_commit_sha(first)}{RANGE_SEPARATOR}{trim_commit_sha(second)}"


class CommitReference(BaseModel):
    """A resolved commit mention, ready to display."""

    model_config = ConfigDict(frozen=True)

    owner_repo_prefix: str | None = None
    sha_label: str
    file_path_suffix: str | None = None

    def to_html(self) -> str:
        return (
            f"{escape(self.owner_repo_prefix or '')}"
            f"<{SHA_TAG}>{escape(self.sha_label)}</{SHA_TAG}>"
            f"{escape(self.file_path_suffix or '')}"
        )

    def apply_to(self, element: Element) -> Element:
        """Replace the children and text of ``element`` with this label.

        Attributes and tail are left alone.
        """
        for child in list(element):
            element.remove(child)
        element.text = self.owner_repo_prefix
        sha = SubElement(element, SHA_TAG)
        sha.text = self.sha_label
        sha.tail = self.file_path_suffix
        return element


class ReferenceFormatter:
    def __init__(self, repository: RepositoryContext):
        self.repository = repository

    def owner_repo_prefix(self, owner: str, name: str) -> str | None:
        if owner != self.repository.owner or name != self.repository.name:
            return f"{owner}/{name}@"
        return None

    def reference(
        self,
        owner: str,
        name: str,
        sha_label: str,
        file_path_suffix: str | None = None,
    ) -> CommitReference:
        """Build a CommitReference; ``sha_label`` must already be trimmed."""
        return CommitReference(
            owner_repo_prefix=self.owner_repo_prefix(owner, name),
            sha_label=sha_label,
            file_path_suffix=file_path_suffix,
        )

    def format(
        self,
        owner: str,
        name: str,
        sha_or_range: str,
        file_path_suffix: str | None = None,
    ) -> str:
        """Format a sha or ``a...b`` range, trimming each token independently."""
        tokens = sha_or_range.split(RANGE_SEPARATOR)
        label = RANGE_SEPARATOR.join(trim_commit_sha(t) for t in tokens)
        return self.reference(owner, name, label, file_path_suffix).to_html()
