"""URL path shapes for commit mention links.

Three shapes are recognized, each rooted at ``/{owner}/{name}``:

- Single commit: ``/desktop/desktop/commit/6fd7945``
- Compare range: ``/desktop/desktop/compare/6fd7945...abc1234``
- Pull request commit: ``/desktop/desktop/pull/14239/commits/6fd7945``

Paths are split into segments first and each segment is matched on its own,
so every shape can be exercised in isolation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

OWNER_RE = re.compile(r"-?[A-Za-z0-9][A-Za-z0-9_-]*")
NAME_RE = re.compile(r"[A-Za-z0-9._-]+")
PULL_NUMBER_RE = re.compile(r"\d+")
SHA_RE = re.compile(r"^[0-9a-f]{7,40}$")

COMMIT_KIND = "commit"
COMPARE_KIND = "compare"
PULL_KIND = "pull"


@dataclass(frozen=True)
class CommitMatch:
    owner: str
    name: str
    # Everything after /commit/, sha plus any sub-path.
    sha_fragment: str


@dataclass(frozen=True)
class CompareMatch:
    owner: str
    name: str
    range: str


@dataclass(frozen=True)
class PullCommitMatch:
    owner: str
    name: str
    sha: str


PathMatch = Union[CommitMatch, CompareMatch, PullCommitMatch]


def _split_repo_path(path: str) -> tuple[str, str, str, str] | None:
    """Split ``/{owner}/{name}/{kind}/{rest}`` into its four parts."""
    if not path.startswith("/"):
        return None
    parts = path[1:].split("/", 3)
    if len(parts) != 4:
        return None
    owner, name, kind, rest = parts
    if not OWNER_RE.fullmatch(owner) or not NAME_RE.fullmatch(name) or not rest:
        return None
    return owner, name, kind, rest


def match_commit_path(path: str) -> CommitMatch | None:
    split = _split_repo_path(path)
    if split is None or split[2] != COMMIT_KIND:
        return None
    owner, name, _, rest = split
    return CommitMatch(owner=owner, name=name, sha_fragment=rest)


def match_compare_path(path: str) -> CompareMatch | None:
    split = _split_repo_path(path)
    if split is None or split[2] != COMPARE_KIND:
        return None
    owner, name, _, rest = split
    return CompareMatch(owner=owner, name=name, range=rest)


def match_pull_commit_path(path: str) -> PullCommitMatch | None:
    split = _split_repo_path(path)
    if split is None or split[2] != PULL_KIND:
        return None
    owner, name, _, rest = split
    parts = rest.split("/", 2)
    if len(parts) != 3:
        return None
    number, commits, sha = parts
    if not PULL_NUMBER_RE.fullmatch(number) or commits != "commits" or not sha:
        return None
    return PullCommitMatch(owner=owner, name=name, sha=sha)


_MATCHERS = (match_commit_path, match_compare_path, match_pull_commit_path)


def match_path(path: str) -> PathMatch | None:
    """Return the first shape that ``path`` fits, or None."""
    for matcher in _MATCHERS:
        result = matcher(path)
        if result is not None:
            return result
    return None


def build_commit_mention_url_re(host_base_url: str) -> re.Pattern[str]:
    """Compile the full-URL pattern used to pick candidate links on a host."""
    return re.compile(
        re.escape(host_base_url.rstrip("/"))
        + "/"
        + OWNER_RE.pattern
        + "/"
        + NAME_RE.pattern
        + "/(?:commit|pull|compare)/"
        + r"(?:\d+/commits/)?"
        + r"[0-9a-f]{7,40}\b"
    )
