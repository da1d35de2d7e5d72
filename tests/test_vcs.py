"""Tests for commit_mentions.vcs: repository context."""

import pytest
from pydantic import ValidationError

from commit_mentions.vcs.models import RepositoryContext, get_html_url


class TestGetHtmlUrl:
    def test_dotcom(self):
        assert get_html_url("https://api.github.com") == "https://github.com"

    def test_dotcom_trailing_slash(self):
        assert get_html_url("https://api.github.com/") == "https://github.com"

    def test_enterprise(self):
        assert get_html_url("https://ghe.example.com/api/v3") == "https://ghe.example.com"

    def test_keeps_port(self):
        assert get_html_url("http://localhost:8080/api/v3") == "http://localhost:8080"

    @pytest.mark.parametrize("endpoint", ["", "ghe.example.com", "/api/v3"])
    def test_invalid_endpoint_raises(self, endpoint):
        with pytest.raises(ValueError, match="Invalid API endpoint"):
            get_html_url(endpoint)


class TestRepositoryContext:
    def test_from_endpoint(self):
        ctx = RepositoryContext.from_endpoint("https://api.github.com", "desktop", "desktop")
        assert ctx == RepositoryContext(
            host_base_url="https://github.com", owner="desktop", name="desktop"
        )

    def test_full_name(self, repository):
        assert repository.full_name == "desktop/desktop"

    def test_is_frozen(self, repository):
        with pytest.raises(ValidationError):
            repository.owner = "other"

    def test_hashable(self, repository, other_repository):
        assert len({repository, other_repository, repository}) == 2
