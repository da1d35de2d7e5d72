from .loader import load_config
from .models import (
    CommitMentionsConfig,
    RenderConfig,
    RepositoryConfig,
)

__all__ = [
    "CommitMentionsConfig",
    "RenderConfig",
    "RepositoryConfig",
    "load_config",
]
