"""Load environment variables and git metadata for runtime."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Mapping

from . import git
from .exceptions import GitNotFoundError, HomeDirectoryError
from .models import Repository, Settings
from .remote import parse_repository, parse_url

GIT_CMD_ENV = "DOT_GITHUB_GIT_CMD"
HOME_ENV = "DOT_GITHUB_HOME"
DEBUG_ENV = "DOT_GITHUB_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        git_cmd=resolve_git_cmd(env),
        base_dir=base_dir(env),
        debug=debug_enabled(env),
    )


def resolve_git_cmd(environ: Mapping[str, str]) -> str:
    specified = environ.get(GIT_CMD_ENV)
    if specified:
        return specified
    found = shutil.which("git", path=environ.get("PATH"))
    if not found:
        raise GitNotFoundError(f"'git' command not found. Consider setting ${GIT_CMD_ENV} manually.")
    return found


def base_dir(environ: Mapping[str, str]) -> Path:
    override = environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise HomeDirectoryError(
            f"Could not determine the current user's home directory. Set ${HOME_ENV} instead."
        ) from exc


def debug_enabled(environ: Mapping[str, str]) -> bool:
    return environ.get(DEBUG_ENV, "").strip().lower() in _TRUTHY


def resolve_repository(settings: Settings, remote: str = "origin", cwd: Path | None = None) -> Repository:
    url = parse_url(git.remote_url(settings, remote, cwd=cwd))
    root = git.repository_root(settings, cwd=cwd)
    return parse_repository(url, root)
