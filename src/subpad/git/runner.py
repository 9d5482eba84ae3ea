"""Thin wrapper around the git executable.

Every submodule operation is a sequence of git invocations. Failures are
fail-fast: a non-zero exit raises immediately and nothing already done is
rolled back.
"""

import subprocess
from pathlib import Path


class GitCommandError(RuntimeError):
    """A git invocation exited non-zero."""

    def __init__(self, args: list[str], returncode: int, stderr: str = "", stdout: str = ""):
        self.git_args = list(args)
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout
        super().__init__(f"git {' '.join(self.git_args)} failed (exit {returncode})")


class NotAGitRepositoryError(RuntimeError):
    """The working directory is not inside a git repository."""


def run_git(
    args: list[str],
    cwd: Path | str | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run a git command and return the result.

    Args:
        args: Arguments passed after ``git``.
        cwd: Directory to run in. Defaults to the current directory.
        check: Raise GitCommandError on a non-zero exit.

    Returns:
        The completed process with text stdout/stderr captured.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise GitCommandError(args, 127, "git executable not found") from None

    if check and result.returncode != 0:
        raise GitCommandError(args, result.returncode, result.stderr, result.stdout)
    return result


def check_git_repo(cwd: Path | str | None = None) -> Path:
    """Verify ``cwd`` is inside a git repository.

    Returns:
        Absolute path of the repository's git directory.

    Raises:
        NotAGitRepositoryError: If git does not recognize a repository here.
    """
    base = Path(cwd) if cwd else Path.cwd()
    if not base.is_dir():
        raise NotAGitRepositoryError(f"Directory not found: {base}")
    try:
        result = run_git(["rev-parse", "--git-dir"], base)
    except GitCommandError:
        raise NotAGitRepositoryError(
            "Not in a Git repository. Please run this command from a Git repository."
        ) from None

    git_dir = Path(result.stdout.strip())
    if not git_dir.is_absolute():
        git_dir = base / git_dir
    return git_dir.resolve()
