"""Parse git remote URLs into GitHub repository identities."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

from .exceptions import InvalidRemoteURLError, UnsupportedRemoteError
from .models import RemoteURL, Repository

GIT_SUFFIX = ".git"


def parse_url(text: str) -> RemoteURL:
    raw = text.strip()
    if not raw:
        raise InvalidRemoteURLError("Remote URL is empty")
    try:
        parts = urlsplit(raw)
        host = parts.hostname or ""
        port = parts.port
    except ValueError as exc:
        raise InvalidRemoteURLError(f"Invalid remote URL '{raw}': {exc}") from exc
    userinfo = None
    if "@" in parts.netloc:
        userinfo = parts.netloc.rsplit("@", 1)[0]
    return RemoteURL(raw=raw, scheme=parts.scheme, host=host, path=parts.path, port=port, userinfo=userinfo)


def parse_identity(url: RemoteURL) -> tuple[str, str]:
    """Return ``(owner, name)`` for an HTTPS or ``git@host:owner/name`` URL.

    Any other scheme is rejected rather than guessed at.
    """

    if url.scheme == "https":
        return _parse_https(url)
    if url.scheme == "":
        return _parse_scp_like(url)
    raise UnsupportedRemoteError(f"Unsupported URL scheme '{url.scheme}' for GitHub: {url}")


def parse_repository(url: RemoteURL, root: Path) -> Repository:
    user, name = parse_identity(url)
    return Repository(user=user, name=name, path=root)


def _parse_https(url: RemoteURL) -> tuple[str, str]:
    if not url.path:
        raise UnsupportedRemoteError(f"Invalid https URL for GitHub: {url}")
    return _split_owner_name(url.path[1:], url, "https")


def _parse_scp_like(url: RemoteURL) -> tuple[str, str]:
    if not url.path.startswith("git@") or ":" not in url.path:
        raise UnsupportedRemoteError(f"Invalid git@ URL for GitHub: {url}")
    _, remainder = url.path.split(":", 1)
    return _split_owner_name(remainder, url, "git@")


def _split_owner_name(path: str, url: RemoteURL, kind: str) -> tuple[str, str]:
    owner, sep, name = path.partition("/")
    if name.endswith(GIT_SUFFIX):
        name = name[: -len(GIT_SUFFIX)]
    if not sep or not owner or not name:
        raise UnsupportedRemoteError(f"Invalid {kind} URL for GitHub: {url} (expected <owner>/<repo>)")
    return owner, name
