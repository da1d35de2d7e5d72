from pydantic import BaseModel, Field
from typing import Literal

from commit_mentions.vcs.models import DOTCOM_API_ENDPOINT, RepositoryContext, get_html_url


class RepositoryConfig(BaseModel):
    endpoint: str = DOTCOM_API_ENDPOINT
    html_url: str | None = None
    owner: str = ""
    name: str = ""

    def to_context(self) -> RepositoryContext:
        if not self.owner or not self.name:
            raise ValueError("Repository owner and name must both be set.")
        host = self.html_url or get_html_url(self.endpoint)
        return RepositoryContext(host_base_url=host.rstrip("/"), owner=self.owner, name=self.name)


class RenderConfig(BaseModel):
    autolink_bare_urls: bool = True
    extensions: list[str] = Field(default_factory=lambda: ["extra", "sane_lists"])
    output_format: Literal["html", "xhtml"] = "html"


class CommitMentionsConfig(BaseModel):
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
