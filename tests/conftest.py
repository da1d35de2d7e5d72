"""Shared test fixtures for commit-mentions."""

from xml.etree.ElementTree import Element, tostring

import pytest

from commit_mentions.config.models import CommitMentionsConfig
from commit_mentions.filters.commit_mention import CommitMentionLinkFilter
from commit_mentions.vcs.models import RepositoryContext

FULL_SHA = "6fd794543af171c35cc9c325f570f9553128ffc9"
OTHER_FULL_SHA = "abc1234def5678901234567890abcdef12345678"
COMMIT_URL = f"https://github.com/desktop/desktop/commit/{FULL_SHA}"


def make_anchor(href: str, text: str | None = None, **attrs: str) -> Element:
    """An <a> element as a markdown auto-linker would produce it."""
    anchor = Element("a", href=href, **attrs)
    anchor.text = href if text is None else text
    return anchor


def inner_html(element: Element) -> str:
    """Serialize the children and text of ``element``, like DOM innerHTML."""
    parts = [element.text or ""]
    for child in element:
        parts.append(tostring(child, encoding="unicode"))
    return "".join(parts)


@pytest.fixture
def repository():
    return RepositoryContext(host_base_url="https://github.com", owner="desktop", name="desktop")


@pytest.fixture
def other_repository():
    return RepositoryContext(host_base_url="https://github.com", owner="other", name="other")


@pytest.fixture
def enterprise_repository():
    return RepositoryContext.from_endpoint("https://ghe.example.com/api/v3", "acme", "widget-api")


@pytest.fixture
def link_filter(repository):
    return CommitMentionLinkFilter(repository)


@pytest.fixture
def sample_config():
    return CommitMentionsConfig()
