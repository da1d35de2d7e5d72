"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import CommitMentionsConfig


def load_config(cli_path: str | None = None) -> CommitMentionsConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./commit-mentions.yaml"),
        Path.home() / ".commit-mentions" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(
                        f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}"
                    )
                return CommitMentionsConfig.model_validate(_expand_env_vars(raw))
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return CommitMentionsConfig()


_ENV_VAR_RE = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} and ${VAR:-default} references in strings."""
    if isinstance(obj, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1)) or m.group(2) or "", obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `commit-mentions config init`
DEFAULT_CONFIG_TEMPLATE = """\
# commit-mentions.yaml

# Repository the rendered content belongs to
repository:
  endpoint: "https://api.github.com"   # API endpoint; Enterprise: https://HOST/api/v3
  # html_url: "https://github.com"     # overrides the host derived from endpoint
  owner: ""
  name: ""

# Markdown rendering
render:
  autolink_bare_urls: true
  extensions: [extra, sane_lists]
  output_format: "html"                # html | xhtml

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
