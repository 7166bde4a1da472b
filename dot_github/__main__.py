"""Module entrypoint for `python -m dot_github`."""

from __future__ import annotations

from .cli import app


def main() -> None:
    app(prog_name="dot-github")


if __name__ == "__main__":
    main()
