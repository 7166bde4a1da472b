"""Resolve a repository's GitHub identity and the per-user .github template directory."""

from importlib import metadata

DISTRIBUTION = "dot-github"

try:  # pragma: no cover - not installed when run from a checkout
    __version__ = metadata.version(DISTRIBUTION)
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from .config import load_settings, resolve_repository  # noqa: E402
from .fs import template_dir  # noqa: E402
from .models import Repository, Settings  # noqa: E402

__all__ = [
    "Repository",
    "Settings",
    "__version__",
    "load_settings",
    "resolve_repository",
    "template_dir",
]
