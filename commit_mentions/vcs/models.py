"""Pydantic models for repository context."""

from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

DOTCOM_API_ENDPOINT = "https://api.github.com"
DOTCOM_HTML_URL = "https://github.com"


def get_html_url(endpoint: str) -> str:
    """Return the web host URL for an API endpoint.

    ``https://api.github.com`` maps to ``https://github.com``; an Enterprise
    endpoint such as ``https://ghe.example.com/api/v3`` maps to its scheme and
    host.
    """
    if endpoint.rstrip("/") == DOTCOM_API_ENDPOINT:
        return DOTCOM_HTML_URL
    parts = urlsplit(endpoint)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Invalid API endpoint: {endpoint!r}")
    return f"{parts.scheme}://{parts.netloc}"


class RepositoryContext(BaseModel):
    """The repository rendered content belongs to."""

    model_config = ConfigDict(frozen=True)

    host_base_url: str = Field(description="Web host URL (e.g. https://github.com)")
    owner: str
    name: str

    @classmethod
    def from_endpoint(cls, endpoint: str, owner: str, name: str) -> "RepositoryContext":
        return cls(host_base_url=get_html_url(endpoint), owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
