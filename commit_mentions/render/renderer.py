"""Markdown to HTML rendering with commit mentions rewritten."""

from __future__ import annotations

import markdown
from markdown.extensions import Extension

from commit_mentions.config.models import RenderConfig
from commit_mentions.render.extension import BareUrlAutolinkExtension, CommitMentionExtension
from commit_mentions.vcs.models import RepositoryContext


def build_markdown(repository: RepositoryContext, config: RenderConfig | None = None) -> markdown.Markdown:
    cfg = config or RenderConfig()
    extensions: list[str | Extension] = list(cfg.extensions)
    if cfg.autolink_bare_urls:
        extensions.append(BareUrlAutolinkExtension())
    extensions.append(CommitMentionExtension(repository))
    return markdown.Markdown(extensions=extensions, output_format=cfg.output_format)


def render_markdown(
    text: str, repository: RepositoryContext, config: RenderConfig | None = None
) -> str:
    """Render ``text`` to HTML, relabelling commit links for ``repository``."""
    return build_markdown(repository, config).convert(text)
