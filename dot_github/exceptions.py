"""Custom exception hierarchy for dot-github."""


class DotGithubError(Exception):
    """Base error for all custom exceptions."""

    exit_code = 1


class GitNotFoundError(DotGithubError):
    """Raised when the git executable cannot be located or started."""

    exit_code = 3


class GitCommandError(DotGithubError):
    """Raised when a git invocation fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None, message: str | None = None):
        if message is None:
            message = "Git command failed"
            if command:
                message = f"Git command failed: {' '.join(command)}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""


class RemoteNotFoundError(GitCommandError):
    """Raised when the requested remote is not configured."""

    exit_code = 4


class NotARepositoryError(GitCommandError):
    """Raised when the working directory is outside a git repository."""

    exit_code = 7


class InvalidRemoteURLError(DotGithubError):
    """Raised when a remote URL cannot be parsed."""

    exit_code = 5


class UnsupportedRemoteError(DotGithubError):
    """Raised when a remote URL does not name a GitHub repository."""

    exit_code = 6


class HomeDirectoryError(DotGithubError):
    """Raised when the current user's home directory is unknown."""

    exit_code = 8


class TemplateDirError(DotGithubError):
    """Raised when the template directory cannot be created."""

    exit_code = 9
