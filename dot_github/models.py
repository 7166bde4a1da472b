"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    """Ambient configuration resolved once from the environment."""

    git_cmd: str
    base_dir: Path
    debug: bool = False


@dataclass(frozen=True)
class RemoteURL:
    """A remote URL split into the parts the identity parser looks at."""

    raw: str
    scheme: str
    host: str
    path: str
    port: int | None = None
    userinfo: str | None = None

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class Repository:
    """GitHub identity of a local repository."""

    user: str
    name: str
    path: Path

    @property
    def slug(self) -> str:
        return f"{self.user}/{self.name}"

    def __str__(self) -> str:
        return f"{self.slug} ({self.path})"
