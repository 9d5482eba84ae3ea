"""Submodule workflows for the repository in the working directory.

Each function is a fixed sequence of git invocations run one after another.
The first failing step raises GitCommandError; steps already applied stay
applied. ``report`` receives a short progress line before each stage.
"""

import posixpath
import shutil
from pathlib import Path
from typing import Callable

from subpad.git.runner import GitCommandError, run_git

DEFAULT_ADD_MESSAGE = "Add {folder} as submodule"
DEFAULT_UPDATE_MESSAGE = "Update submodules to latest versions"
DEFAULT_UPDATE_SPECIFIC_MESSAGE = "Update {folder} submodule"

# `git submodule status` line prefix -> state
STATUS_PREFIXES = {
    " ": "current",
    "+": "modified",
    "-": "not-initialized",
    "U": "conflict",
}


def _noop(message: str) -> None:
    pass


def add_submodule(
    url: str,
    folder: str,
    cwd: Path | str | None = None,
    message: str | None = None,
) -> dict:
    """Register ``folder`` as a submodule tracking ``url`` and commit it.

    Returns:
        Dict with keys: added, url, message.
    """
    commit_msg = message or DEFAULT_ADD_MESSAGE.format(folder=folder, url=url)

    run_git(["submodule", "add", url, folder], cwd)
    run_git(["add", ".gitmodules", folder], cwd)
    run_git(["commit", "-m", commit_msg], cwd)

    return {"added": folder, "url": url, "message": commit_msg}


def update_submodules(
    cwd: Path | str | None = None,
    message: str | None = None,
    report: Callable[[str], None] = _noop,
) -> dict:
    """Move every submodule to its remote's latest commit and commit the pointers.

    Nothing is staged or committed when the working tree has no diff after
    the update.

    Returns:
        Dict with keys: changed, committed (and message when committed).
    """
    report("Updating all submodules to latest commits...")
    run_git(["submodule", "update", "--remote"], cwd)

    # diff --quiet: 0 = clean, 1 = differences, anything else is an error
    diff = run_git(["diff", "--quiet"], cwd, check=False)
    if diff.returncode == 0:
        return {"changed": False, "committed": False}
    if diff.returncode != 1:
        raise GitCommandError(["diff", "--quiet"], diff.returncode, diff.stderr, diff.stdout)

    commit_msg = message or DEFAULT_UPDATE_MESSAGE

    report("Staging submodule updates...")
    run_git(["add", "."], cwd)

    report("Committing submodule updates...")
    run_git(["commit", "-m", commit_msg], cwd)

    return {"changed": True, "committed": True, "message": commit_msg}


def update_specific_submodule(
    folder: str,
    cwd: Path | str | None = None,
    message: str | None = None,
) -> dict:
    """Move one submodule to its remote's latest commit, stage and commit it."""
    commit_msg = message or DEFAULT_UPDATE_SPECIFIC_MESSAGE.format(folder=folder)

    run_git(["submodule", "update", "--remote", folder], cwd)
    run_git(["add", folder], cwd)
    run_git(["commit", "-m", commit_msg], cwd)

    return {"updated": folder, "message": commit_msg}


def push_submodules(
    cwd: Path | str | None = None,
    report: Callable[[str], None] = _noop,
) -> dict:
    """Push the containing repository, then each submodule.

    A failing main push raises before any submodule is pushed.
    """
    report("Pushing main repository...")
    main = run_git(["push"], cwd)

    report("Pushing submodule changes...")
    subs = run_git(["submodule", "foreach", "git", "push"], cwd)

    return {"pushed": True, "output": (main.stdout + subs.stdout).strip()}


def init_submodules(
    cwd: Path | str | None = None,
    report: Callable[[str], None] = _noop,
) -> dict:
    """Initialize and check out all submodules (first-clone bootstrap)."""
    report("Initializing submodules...")
    run_git(["submodule", "init"], cwd)

    report("Updating submodules...")
    run_git(["submodule", "update"], cwd)

    return {"initialized": True}


def parse_submodule_status(text: str) -> list[dict]:
    """Parse ``git submodule status`` output.

    Line format: ``<prefix><sha> <path> (<describe>)`` where the prefix is
    a space (checked out at the pinned commit), ``+`` (checked out commit
    differs), ``-`` (not initialized) or ``U`` (merge conflicts).

    Returns:
        List of dicts with: path, sha, state.
    """
    entries = []
    for line in text.rstrip("\n").split("\n"):
        if not line.strip():
            continue
        prefix = line[0]
        parts = line[1:].strip().split()
        if len(parts) < 2:
            continue
        entries.append({
            "path": parts[1],
            "sha": parts[0],
            "state": STATUS_PREFIXES.get(prefix, "unknown"),
        })
    return entries


def submodule_status(cwd: Path | str | None = None) -> dict:
    """Collect submodule pointer status and per-submodule uncommitted changes.

    Returns:
        Dict with keys: pointers (raw status text), entries (parsed),
        changes (raw ``foreach git status --porcelain`` text).
    """
    pointers = run_git(["submodule", "status"], cwd).stdout
    changes = run_git(["submodule", "foreach", "git", "status", "--porcelain"], cwd).stdout

    return {
        "pointers": pointers.rstrip("\n"),
        "entries": parse_submodule_status(pointers),
        "changes": changes.rstrip("\n"),
    }


def submodule_name(folder: str, cwd: Path | str | None = None) -> str:
    """Resolve the name a submodule is registered under in .gitmodules.

    ``folder`` is relative to ``cwd``; git keeps submodule metadata under
    ``modules/<name>``, keyed from the top level. Falls back to the
    top-level path when .gitmodules has no matching entry.
    """
    prefix = run_git(["rev-parse", "--show-prefix"], cwd).stdout.strip()
    cdup = run_git(["rev-parse", "--show-cdup"], cwd).stdout.strip()
    path = posixpath.normpath(posixpath.join(prefix, folder.replace("\\", "/")))

    # exits 1 when .gitmodules is missing or has no path entries
    entries = run_git(
        ["config", "-f", cdup + ".gitmodules", "--get-regexp", r"^submodule\..*\.path$"],
        cwd,
        check=False,
    )
    for line in entries.stdout.splitlines():
        key, _, value = line.partition(" ")
        if value.strip() == path:
            return key[len("submodule."):-len(".path")]
    return path


def remove_submodule(
    folder: str,
    git_dir: Path | str,
    cwd: Path | str | None = None,
    report: Callable[[str], None] = _noop,
) -> dict:
    """Deinitialize a submodule, drop it from the index and working tree,
    and delete its metadata under ``<git_dir>/modules``.

    The resulting change is left staged; committing is up to the caller.
    """
    name = submodule_name(folder, cwd)

    report(f"Removing submodule: {folder}")
    run_git(["submodule", "deinit", "-f", folder], cwd)
    run_git(["rm", "-f", folder], cwd)

    metadata = Path(git_dir) / "modules" / name
    deleted = metadata.exists()
    if deleted:
        shutil.rmtree(metadata)

    return {"removed": folder, "name": name, "metadata_deleted": deleted}
