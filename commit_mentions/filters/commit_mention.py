"""Rewrites auto-linked commit URLs into compact commit references.

Types of commit mention links:

- Plain single commit:
  https://github.com/desktop/desktop/commit/6fd794543af171c35cc9c325f570f9553128ffc9
- Compare a range of commits:
  https://github.com/desktop/desktop/compare/6fd7945...abc1234
- Pull request commit:
  https://github.com/desktop/desktop/pull/14239/commits/6fd794543af171c35cc9c325f570f9553128ffc9

Example::

    <a href="https://github.com/desktop/desktop/commit/6fd7945...">https://github.com/desktop/desktop/commit/6fd7945...</a>

becomes::

    <a href="https://github.com/desktop/desktop/commit/6fd7945..."><tt>6fd7945</tt></a>

or, when the link points at another repository::

    <a href="https://github.com/desktop/desktop/commit/6fd7945...">desktop/desktop@<tt>6fd7945</tt></a>

Meant to run after a markdown renderer has turned raw URLs into anchors.
"""

from __future__ import annotations

import copy
from urllib.parse import SplitResult, urlsplit
from xml.etree.ElementTree import Element

from commit_mentions.filters.formatter import (
    RANGE_SEPARATOR,
    CommitReference,
    ReferenceFormatter,
    format_range,
    trim_commit_sha,
)
from commit_mentions.filters.patterns import (
    SHA_RE,
    CommitMatch,
    CompareMatch,
    PullCommitMatch,
    match_commit_path,
    match_compare_path,
    match_pull_commit_path,
)
from commit_mentions.filters.selector import CandidateSelector, LinkCandidate, as_link_candidate
from commit_mentions.vcs.models import RepositoryContext

# Server-side endpoints under /commit/{sha}/ that are not file paths, e.g.
#   _render_node/partialpath, checks, checks/123/logs, hovercard
RESERVED_COMMIT_ACTIONS = frozenset(
    {"checks_state_summary", "hovercard", "rollup", "show_partial"}
)
RESERVED_COMMIT_ACTION_PREFIXES = frozenset({"_render_node", "checks"})

DIFF_SUFFIXES = (".diff", ".patch")


def is_reserved_commit_action_path(file_path: str | None) -> bool:
    if file_path is None:
        return False
    return (
        file_path in RESERVED_COMMIT_ACTIONS
        or file_path.split("/")[0] in RESERVED_COMMIT_ACTION_PREFIXES
    )


def _file_path_suffix(file_path: str | None, url: SplitResult) -> str | None:
    if file_path is None:
        return None
    query = f"?{url.query}" if url.query else ""
    return f"/{file_path}{query}"


def _parse_url(text: str) -> SplitResult | None:
    try:
        url = urlsplit(text)
    except ValueError:
        return None
    if not url.scheme or not url.netloc:
        return None
    return url


class CommitMentionLinkFilter:
    """Node filter that relabels commit mention links.

    ``is_candidate`` drives the traversal; ``rewrite`` returns a single
    replacement element, or None to leave the node as it is.
    """

    def __init__(self, repository: RepositoryContext):
        self.repository = repository
        self.selector = CandidateSelector(repository)
        self.formatter = ReferenceFormatter(repository)

    def is_candidate(self, node: Element, parent: Element | None = None) -> bool:
        return self.selector.accept(node, parent) is not None

    async def rewrite(self, node: Element) -> list[Element] | None:
        return self.rewrite_node(node)

    def rewrite_node(self, node: Element) -> list[Element] | None:
        candidate = as_link_candidate(node)
        if candidate is None:
            return None
        reference = self.resolve(candidate)
        if reference is None:
            return None
        return [reference.apply_to(copy.deepcopy(candidate.element))]

    def resolve(self, candidate: LinkCandidate) -> CommitReference | None:
        """Classify the candidate's URL and build its reference.

        Commit, compare and pull request commit shapes are tried in that
        order; the first shape that matches decides the outcome.
        """
        url = _parse_url(candidate.text)
        if url is None or not self._on_repository_host(url):
            return None
        path = url.path

        commit = match_commit_path(path)
        if commit is not None:
            return self._commit_reference(commit, url)

        compare = match_compare_path(path)
        if compare is not None:
            return self._compare_reference(compare, url)

        pull_commit = match_pull_commit_path(path)
        if pull_commit is not None:
            return self._pull_commit_reference(pull_commit)

        return None

    def _on_repository_host(self, url: SplitResult) -> bool:
        host = self.repository.host_base_url.rstrip("/").lower()
        return f"{url.scheme}://{url.netloc}".lower() == host

    def _commit_reference(self, match: CommitMatch, url: SplitResult) -> CommitReference | None:
        possible_sha, _, rest = match.sha_fragment.partition("/")
        file_path = rest.lstrip("/") or None
        # A format suffix (sha.patch, sha.diff) is a download, not a reference
        if not possible_sha or "." in possible_sha:
            return None
        if is_reserved_commit_action_path(file_path):
            return None
        return self.formatter.reference(
            match.owner,
            match.name,
            trim_commit_sha(possible_sha),
            _file_path_suffix(file_path, url),
        )

    def _compare_reference(self, match: CompareMatch, url: SplitResult) -> CommitReference | None:
        if match.range.endswith(DIFF_SUFFIXES):
            return None
        shas = match.range.split(RANGE_SEPARATOR)
        if len(shas) != 2:
            return None
        first_sha, second = shas
        second_sha, _, rest = second.partition("/")
        if not first_sha or not second_sha:
            return None
        file_path = rest.lstrip("/") or None
        return self.formatter.reference(
            match.owner,
            match.name,
            format_range(first_sha, second_sha),
            _file_path_suffix(file_path, url),
        )

    def _pull_commit_reference(self, match: PullCommitMatch) -> CommitReference | None:
        if not SHA_RE.fullmatch(match.sha):
            return None
        return self.formatter.reference(match.owner, match.name, trim_commit_sha(match.sha))
