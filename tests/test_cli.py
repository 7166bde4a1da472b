"""Tests for the dot-github command line."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from dot_github import __version__, cli
from dot_github.exceptions import GitNotFoundError, RemoteNotFoundError, UnsupportedRemoteError
from dot_github.models import Repository, Settings


def _separate_streams_runner() -> CliRunner:
    """Return a runner whose result exposes stdout and stderr separately."""

    try:
        return CliRunner(mix_stderr=False)
    except TypeError:  # click >= 8.2 always keeps the streams apart
        return CliRunner()


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = _separate_streams_runner()
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.base = Path(self._tmp.name)
        self.settings = Settings(git_cmd="git", base_dir=self.base)

    def test_help_goes_to_stderr(self) -> None:
        result = self.runner.invoke(cli.app, ["--help"])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "")
        self.assertIn("$ dot-github [flags]", result.stderr)
        self.assertIn("--version", result.stderr)

    def test_version_prints_version(self) -> None:
        result = self.runner.invoke(cli.app, ["--version"])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), __version__)
        self.assertEqual(result.stderr, "")

    def test_unknown_flag_is_usage_error(self) -> None:
        result = self.runner.invoke(cli.app, ["--frobnicate"])

        self.assertEqual(result.exit_code, 2)

    def test_prints_identity_and_template_dir(self) -> None:
        repo = Repository(user="rhysd", name="dot-github", path=Path("/work/dot-github"))
        with mock.patch.object(cli, "load_settings", return_value=self.settings), mock.patch.object(
            cli, "resolve_repository", return_value=repo
        ):
            result = self.runner.invoke(cli.app, [])

        self.assertEqual(result.exit_code, 0, result.stderr)
        lines = result.stdout.splitlines()
        self.assertEqual(lines[0], "rhysd/dot-github (/work/dot-github)")
        self.assertEqual(lines[1], str(self.base / ".github"))
        self.assertTrue((self.base / ".github").is_dir())

    def test_errors_map_to_exit_codes(self) -> None:
        cases = [
            (RemoteNotFoundError(["git"], 128, message="Remote 'origin' was not found"), 4),
            (UnsupportedRemoteError("Invalid git@ URL for GitHub: foo"), 6),
        ]
        for error, code in cases:
            with self.subTest(error=type(error).__name__):
                with mock.patch.object(cli, "load_settings", return_value=self.settings), mock.patch.object(
                    cli, "resolve_repository", side_effect=error
                ):
                    result = self.runner.invoke(cli.app, [])

                self.assertEqual(result.exit_code, code)
                self.assertIn(str(error), result.stderr)

    def test_missing_git_is_reported(self) -> None:
        with mock.patch.object(cli, "load_settings", side_effect=GitNotFoundError("'git' command not found.")):
            result = self.runner.invoke(cli.app, [])

        self.assertEqual(result.exit_code, 3)
        self.assertIn("'git' command not found.", result.stderr)


if __name__ == "__main__":
    unittest.main()
