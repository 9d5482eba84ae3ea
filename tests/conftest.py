"""Shared test fixtures for subpad."""

import shutil
import subprocess
from pathlib import Path

import pytest

from subpad.git.runner import GitCommandError

FIXTURES = Path(__file__).parent / "fixtures"

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Keep rich from forcing color or terminal mode in CI environments."""
    for var in ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """Isolated git identity/config so real repos can be created and committed to."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "t@t")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "t@t")
    # Local-path submodule URLs need the file transport
    monkeypatch.setenv("GIT_CONFIG_COUNT", "1")
    monkeypatch.setenv("GIT_CONFIG_KEY_0", "protocol.file.allow")
    monkeypatch.setenv("GIT_CONFIG_VALUE_0", "always")
    return tmp_path


def git(*args: str, cwd: Path) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout


def make_repo(path: Path, filename: str = "README.md") -> Path:
    path.mkdir(parents=True)
    git("init", "-b", "main", cwd=path)
    (path / filename).write_text(f"# {path.name}\n")
    git("add", ".", cwd=path)
    git("commit", "-m", "init", cwd=path)
    return path


@pytest.fixture
def superproject(git_env):
    """A parent repo ``app`` and a standalone repo ``lib`` to add as a submodule."""
    lib = make_repo(git_env / "lib")
    app = make_repo(git_env / "app")
    return {"app": app, "lib": lib}


class GitRecorder:
    """Stand-in for run_git that records argument lists.

    ``results`` maps an argument tuple to (returncode, stdout, stderr);
    anything unlisted succeeds with empty output.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.results: dict[tuple, tuple[int, str, str]] = {}

    def fail(self, *args: str, returncode: int = 1, stderr: str = "boom") -> None:
        self.results[args] = (returncode, "", stderr)

    def respond(self, *args: str, stdout: str) -> None:
        self.results[args] = (0, stdout, "")

    def __call__(self, args, cwd=None, check=True):
        self.calls.append(list(args))
        returncode, stdout, stderr = self.results.get(tuple(args), (0, "", ""))
        if check and returncode != 0:
            raise GitCommandError(args, returncode, stderr, stdout)
        return subprocess.CompletedProcess(["git"] + list(args), returncode, stdout, stderr)


@pytest.fixture
def recorder(monkeypatch):
    rec = GitRecorder()
    monkeypatch.setattr("subpad.git.submodules.run_git", rec)
    return rec


@pytest.fixture
def fake_repo(tmp_path, monkeypatch):
    """Make the CLI precondition pass without a real repository."""
    git_dir = tmp_path / ".git"
    git_dir.mkdir()
    monkeypatch.setattr("subpad.cli.check_git_repo", lambda cwd: git_dir)
    monkeypatch.chdir(tmp_path)
    return tmp_path
