"""Filesystem helpers for dot-github."""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import TemplateDirError
from .models import Settings

logger = logging.getLogger(__name__)

TEMPLATE_DIR_NAME = ".github"


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def template_dir(settings: Settings) -> Path:
    """Return ``<base>/.github``, creating it when missing."""

    target = (settings.base_dir / TEMPLATE_DIR_NAME).absolute()
    if target.is_dir():
        return target
    logger.debug("Creating template directory %s", target)
    try:
        ensure_directory(target)
    except OSError as exc:
        raise TemplateDirError(f"Could not create template directory {target}: {exc.strerror or exc}") from exc
    return target
