"""Picks the anchor elements that look like auto-linked commit mentions."""

from __future__ import annotations

from dataclasses import dataclass
from xml.etree.ElementTree import Element

from commit_mentions.filters.patterns import build_commit_mention_url_re
from commit_mentions.vcs.models import RepositoryContext

LINK_TAG = "a"
# Links directly inside these elements are never rewritten.
EXCLUDED_PARENT_TAGS = frozenset({"pre", "code", "a"})


@dataclass(frozen=True)
class LinkCandidate:
    element: Element
    href: str
    text: str


def _tag(element: Element) -> str:
    tag = element.tag
    return tag.lower() if isinstance(tag, str) else ""


def as_link_candidate(element: Element) -> LinkCandidate | None:
    """Return a LinkCandidate for an ``<a href>`` element, None for anything else."""
    if _tag(element) != LINK_TAG:
        return None
    href = element.get("href")
    if href is None:
        return None
    return LinkCandidate(element=element, href=href, text="".join(element.itertext()))


class CandidateSelector:
    """Accepts a link only when all of these hold:

    - its parent is not a ``pre``, ``code`` or ``a`` element
    - its href and visible text are identical
    - its href is a commit, compare or pull request commit URL on the
      repository's host
    """

    def __init__(self, repository: RepositoryContext):
        self.repository = repository
        self._url_re = build_commit_mention_url_re(repository.host_base_url)

    def accept(self, element: Element, parent: Element | None = None) -> LinkCandidate | None:
        if parent is not None and _tag(parent) in EXCLUDED_PARENT_TAGS:
            return None
        candidate = as_link_candidate(element)
        if candidate is None or candidate.href != candidate.text:
            return None
        if not self._url_re.match(candidate.href):
            return None
        return candidate
