"""Typer-based CLI for dot-github."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer
from rich.console import Console

from . import __version__
from .config import load_settings, resolve_repository
from .exceptions import DotGithubError
from .fs import template_dir

USAGE = """\
$ dot-github [flags]

  A CLI tool to generate GitHub files such as CONTRIBUTING.md,
  ISSUE_TEMPLATE.md and PULL_REQUEST_TEMPLATE.md from template file.

  GitHub Blog: https://github.com/blog/2111-issue-and-pull-request-templates
  More usage:  https://github.com/rhysd/dot-github#readme

Flags:
  --help     Show this help
  --version  Show version"""

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": []},
)
err_console = Console(stderr=True)


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _show_help(value: bool) -> None:
    if value:
        typer.echo(USAGE, err=True)
        raise typer.Exit()


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def main(
    help_: bool = typer.Option(
        False,
        "--help",
        help="Show this help",
        is_eager=True,
        callback=_show_help,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version",
        is_eager=True,
        callback=_show_version,
    ),
) -> None:
    try:
        settings = load_settings()
        configure_logging(settings.debug)
        repository = resolve_repository(settings)
        target = template_dir(settings)
    except DotGithubError as err:
        _fail(str(err), err.exit_code)
    typer.echo(str(repository))
    typer.echo(str(target))


def _fail(message: str, code: int = 1) -> NoReturn:
    err_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
