"""Node filters that rewrite links in rendered markdown."""

from commit_mentions.filters.commit_mention import (
    CommitMentionLinkFilter,
    is_reserved_commit_action_path,
)
from commit_mentions.filters.formatter import (
    CommitReference,
    ReferenceFormatter,
    trim_commit_sha,
)
from commit_mentions.filters.node_filter import NodeFilter, apply_node_filters, iter_candidates
from commit_mentions.filters.patterns import (
    CommitMatch,
    CompareMatch,
    PathMatch,
    PullCommitMatch,
    match_path,
)
from commit_mentions.filters.selector import CandidateSelector, LinkCandidate

__all__ = [
    "CandidateSelector",
    "CommitMatch",
    "CommitMentionLinkFilter",
    "CommitReference",
    "CompareMatch",
    "LinkCandidate",
    "NodeFilter",
    "PathMatch",
    "PullCommitMatch",
    "ReferenceFormatter",
    "apply_node_filters",
    "is_reserved_commit_action_path",
    "iter_candidates",
    "match_path",
    "trim_commit_sha",
]
