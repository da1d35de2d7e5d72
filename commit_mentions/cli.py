"""CLI entry point for commit-mentions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated
from xml.etree.ElementTree import Element

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax

from commit_mentions.config import CommitMentionsConfig, load_config
from commit_mentions.config.loader import DEFAULT_CONFIG_TEMPLATE
from commit_mentions.filters import CommitMentionLinkFilter
from commit_mentions.logsetup import configure_logging
from commit_mentions.render import render_markdown
from commit_mentions.vcs import RepositoryContext

app = typer.Typer(
    name="commit-mentions",
    help="Render markdown with compact labels for commit, compare and pull request commit links.",
)

config_app = typer.Typer(help="Manage commit-mentions configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: CommitMentionsConfig | None = None


def _get_config() -> CommitMentionsConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to commit-mentions.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _validate_repo_id(repo_id: str) -> tuple[str, str]:
    """Validate and split a repo identifier into (owner, repo_name).

    Raises ValueError if format is invalid.
    """
    parts = repo_id.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f"Invalid repo identifier '{repo_id}': expected 'owner/repo'")
    return parts[0], parts[1]


def _resolve_repository(repo: str | None, endpoint: str | None) -> RepositoryContext:
    """Merge --repo/--endpoint over the configured repository."""
    repo_cfg = _get_config().repository
    update: dict[str, str] = {}
    if repo is not None:
        owner, name = _validate_repo_id(repo)
        update.update(owner=owner, name=name)
    if endpoint is not None:
        update.update(endpoint=endpoint, html_url=None)
    return repo_cfg.model_copy(update=update).to_context()


RepoOption = Annotated[
    str | None, typer.Option("--repo", "-r", help="Repository the content belongs to (owner/repo)")
]
EndpointOption = Annotated[
    str | None, typer.Option("--endpoint", help="API endpoint of the repository host")
]


@app.command()
def render(
    path: str = typer.Argument(..., help="Markdown file to render"),
    repo: RepoOption = None,
    endpoint: EndpointOption = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Write HTML here instead of stdout")
    ] = None,
) -> None:
    """Render a markdown file to HTML with commit mention links relabelled."""
    source = Path(path)
    if not source.is_file():
        rprint(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)

    try:
        repository = _resolve_repository(repo, endpoint)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    html = render_markdown(source.read_text(encoding="utf-8"), repository, _get_config().render)

    if output is None:
        typer.echo(html)
        return
    dest = Path(output)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(html + "\n", encoding="utf-8")
    rprint(f"[green]Wrote[/green] {dest}")


@app.command()
def label(
    url: str = typer.Argument(..., help="Commit, compare or pull request commit URL"),
    repo: RepoOption = None,
    endpoint: EndpointOption = None,
) -> None:
    """Show the label a commit URL gets when it appears as a bare link."""
    try:
        repository = _resolve_repository(repo, endpoint)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    link_filter = CommitMentionLinkFilter(repository)
    anchor = Element("a", href=url)
    anchor.text = url
    candidate = link_filter.selector.accept(anchor)
    reference = link_filter.resolve(candidate) if candidate is not None else None

    if reference is None:
        rprint(f"[yellow]Unchanged:[/yellow] {url} is not a commit mention link for {repository.host_base_url}")
        return
    typer.echo(reference.to_html())


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default commit-mentions.yaml in current directory."""
    target = Path("commit-mentions.yaml")
    if target.exists() and not force:
        rprint("[yellow]commit-mentions.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
