"""Git module — submodule workflows for the repository in the working directory."""

from subpad.git.runner import GitCommandError, NotAGitRepositoryError, check_git_repo, run_git
from subpad.git.submodules import (
    add_submodule,
    init_submodules,
    parse_submodule_status,
    push_submodules,
    remove_submodule,
    submodule_name,
    submodule_status,
    update_specific_submodule,
    update_submodules,
)

__all__ = [
    "GitCommandError",
    "NotAGitRepositoryError",
    "check_git_repo",
    "run_git",
    "add_submodule",
    "update_submodules",
    "update_specific_submodule",
    "push_submodules",
    "init_submodules",
    "submodule_status",
    "parse_submodule_status",
    "submodule_name",
    "remove_submodule",
]
