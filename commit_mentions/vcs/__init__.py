"""Repository context for commit mention rewriting."""

from commit_mentions.vcs.models import (
    DOTCOM_API_ENDPOINT,
    DOTCOM_HTML_URL,
    RepositoryContext,
    get_html_url,
)

__all__ = [
    "DOTCOM_API_ENDPOINT",
    "DOTCOM_HTML_URL",
    "RepositoryContext",
    "get_html_url",
]
