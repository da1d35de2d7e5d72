"""Markdown rendering integration."""

from commit_mentions.render.extension import (
    BareUrlAutolinkExtension,
    CommitMentionExtension,
    CommitMentionTreeprocessor,
)
from commit_mentions.render.renderer import build_markdown, render_markdown

__all__ = [
    "BareUrlAutolinkExtension",
    "CommitMentionExtension",
    "CommitMentionTreeprocessor",
    "build_markdown",
    "render_markdown",
]
