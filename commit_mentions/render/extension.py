"""Python-Markdown extensions for commit mention rendering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from markdown.extensions import Extension
from markdown.inlinepatterns import AutolinkInlineProcessor
from markdown.treeprocessors import Treeprocessor

from commit_mentions.filters.commit_mention import CommitMentionLinkFilter
from commit_mentions.filters.node_filter import iter_candidates, replace_node
from commit_mentions.vcs.models import RepositoryContext

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

logger = logging.getLogger(__name__)

# A bare http(s) URL not already inside an attribute or an <...> autolink.
# Trailing sentence punctuation and emphasis markers are left out of the link.
BARE_URL_RE = (
    r"(?<![\w\"'=<>/])"
    r"((?:[Hh][Tt][Tt][Pp][Ss]?)://[^\s<>\"'()]*[^\s<>\"'().,;:!?*_~])"
)

# Inline processing runs at 20; rewriting needs the finished anchors.
TREEPROCESSOR_PRIORITY = 15
# Above automail (110), below the <...> autolink (120).
BARE_AUTOLINK_PRIORITY = 115


class BareUrlAutolinkExtension(Extension):
    """Turn bare ``http(s)://`` URLs into anchors whose text equals the href."""

    def extendMarkdown(self, md: Markdown) -> None:  # noqa: N802
        md.inlinePatterns.register(
            AutolinkInlineProcessor(BARE_URL_RE, md), "bare_autolink", BARE_AUTOLINK_PRIORITY
        )


class CommitMentionTreeprocessor(Treeprocessor):
    def __init__(self, md: Markdown, node_filter: CommitMentionLinkFilter) -> None:
        super().__init__(md)
        self.node_filter = node_filter

    def run(self, root: Element) -> None:
        rewritten = 0
        for parent, node in iter_candidates(root, self.node_filter):
            replacements = self.node_filter.rewrite_node(node)
            if replacements is None:
                continue
            replace_node(parent, node, replacements)
            rewritten += 1
        logger.debug(
            "Rewrote %d commit mention link(s) for %s",
            rewritten,
            self.node_filter.repository.full_name,
        )


class CommitMentionExtension(Extension):
    """Relabel auto-linked commit URLs once inline processing is done."""

    def __init__(self, repository: RepositoryContext, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.repository = repository

    def extendMarkdown(self, md: Markdown) -> None:  # noqa: N802
        processor = CommitMentionTreeprocessor(md, CommitMentionLinkFilter(self.repository))
        md.treeprocessors.register(processor, "commit_mentions", TREEPROCESSOR_PRIORITY)
