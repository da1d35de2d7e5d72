"""Commit mentions - compact labels for auto-linked commit URLs in rendered markdown."""

from commit_mentions.config import CommitMentionsConfig, load_config
from commit_mentions.filters import CommitMentionLinkFilter, NodeFilter, apply_node_filters
from commit_mentions.render import CommitMentionExtension, render_markdown
from commit_mentions.vcs import RepositoryContext

__version__ = "0.1.0"

__all__ = [
    "CommitMentionExtension",
    "CommitMentionLinkFilter",
    "CommitMentionsConfig",
    "NodeFilter",
    "RepositoryContext",
    "apply_node_filters",
    "load_config",
    "render_markdown",
]
