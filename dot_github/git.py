"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError, GitNotFoundError, NotARepositoryError, RemoteNotFoundError
from .models import Settings

logger = logging.getLogger(__name__)


def run_git(
    settings: Settings,
    args: Iterable[str],
    *,
    cwd: Path | None = None,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = [settings.git_cmd, *args]
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise GitNotFoundError(
            f"Could not run '{settings.git_cmd}': {exc.strerror or exc}. "
            "Consider setting $DOT_GITHUB_GIT_CMD manually."
        ) from exc
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc


def remote_url(settings: Settings, name: str = "origin", *, cwd: Path | None = None) -> str:
    proc = run_git(settings, ["ls-remote", "--get-url", name], cwd=cwd, raise_on_error=False)
    url = proc.stdout.strip()
    # git echoes the argument back when no remote of that name exists
    if proc.returncode != 0 or not url or url == name:
        raise RemoteNotFoundError(
            [settings.git_cmd, "ls-remote", "--get-url", name],
            proc.returncode,
            proc.stderr,
            message=f"Remote '{name}' was not found",
        )
    return url


def repository_root(settings: Settings, *, cwd: Path | None = None) -> Path:
    """Return the absolute root of the repository containing ``cwd``."""

    proc = run_git(settings, ["rev-parse", "--show-cdup"], cwd=cwd, raise_on_error=False)
    if proc.returncode != 0:
        raise NotARepositoryError(
            [settings.git_cmd, "rev-parse", "--show-cdup"],
            proc.returncode,
            proc.stderr,
            message="Current directory is not in a git repository",
        )
    base = cwd if cwd is not None else Path.cwd()
    return (base / proc.stdout.strip()).resolve()
