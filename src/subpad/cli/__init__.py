"""Submodule management CLI.

Usage:
    subpad add <repository-url> <folder-name>
    subpad update
    subpad update-specific <folder-name>
    subpad push
    subpad init
    subpad status
    subpad remove <folder-name>
    subpad help
"""

import argparse
import sys
from pathlib import Path

import yaml

from subpad.cli.submodule_cmds import (
    cmd_add,
    cmd_init,
    cmd_push,
    cmd_remove,
    cmd_status,
    cmd_update,
    cmd_update_specific,
)
from subpad.config import load_settings
from subpad.git.runner import GitCommandError, NotAGitRepositoryError, check_git_repo
from subpad.output import COLOR_MODES, configure, print_error, print_raw

PROG = "subpad"

# command -> (handler, required positional argument placeholders)
COMMANDS = {
    "add": (cmd_add, ["<repository-url>", "<folder-name>"]),
    "update": (cmd_update, []),
    "update-specific": (cmd_update_specific, ["<folder-name>"]),
    "push": (cmd_push, []),
    "init": (cmd_init, []),
    "status": (cmd_status, []),
    "remove": (cmd_remove, ["<folder-name>"]),
}

HELP_COMMANDS = [
    ("add <repo-url> <folder-name>", "Add a new submodule"),
    ("update", "Update all submodules to latest"),
    ("update-specific <folder-name>", "Update a specific submodule"),
    ("push", "Push main repo and all submodules"),
    ("init", "Initialize submodules (for new clones)"),
    ("status", "Show submodule status"),
    ("remove <folder-name>", "Remove a submodule"),
    ("help", "Show this help message"),
]

HELP_EXAMPLES = [
    "add https://github.com/user/repo projects/my-project",
    "update",
    "push",
    "update-specific projects/my-project",
]


def usage(command: str) -> str:
    """Usage line for a command, e.g. ``subpad remove <folder-name>``."""
    _, placeholders = COMMANDS[command]
    return " ".join([PROG, command] + placeholders)


def show_help() -> int:
    print_raw("Submodule Management")
    print_raw()
    print_raw(f"Usage: {PROG} [options] <command> [arguments]")
    print_raw()
    print_raw("Commands:")
    for synopsis, description in HELP_COMMANDS:
        print_raw(f"    {synopsis:<33}{description}")
    print_raw()
    print_raw("Options:")
    print_raw(f"    {'-C, --repo <path>':<33}Run as if started in <path>")
    print_raw(f"    {'--config <file>':<33}Read commit messages and color from a YAML file")
    print_raw(f"    {'--color {auto,always,never}':<33}Colorize output (default: auto)")
    print_raw(f"    {'-y, --yes':<33}Do not ask for confirmation on remove")
    print_raw()
    print_raw("Examples:")
    for example in HELP_EXAMPLES:
        print_raw(f"    {PROG} {example}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    epilog = "commands:\n" + "\n".join(
        f"  {synopsis:<31}{description}" for synopsis, description in HELP_COMMANDS
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Add, update, push and remove git submodules",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        exit_on_error=False,
    )
    parser.add_argument(
        "-C", "--repo", default=None,
        help="Run as if started in this directory",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML settings file",
    )
    parser.add_argument(
        "--color", choices=COLOR_MODES, default=None,
        help="Colorize output (default: auto)",
    )
    parser.add_argument(
        "-y", "--yes", action="store_true",
        help="Answer yes to the remove confirmation",
    )
    parser.add_argument("command", nargs="?", default="help")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def main() -> int:
    parser = build_parser()
    try:
        args, unknown = parser.parse_known_args()
    except argparse.ArgumentError as e:
        print_error(str(e))
        return 1

    # an unknown option in the command slot is an unrecognized command
    entry = None if unknown else COMMANDS.get(args.command)
    if entry is None:
        configure(args.color or "auto")
        return show_help()
    handler, placeholders = entry

    try:
        args.settings = load_settings(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print_error(f"Could not load settings: {e}")
        return 1
    configure(args.color or args.settings.color)

    args.repo = Path(args.repo).expanduser().resolve() if args.repo else Path.cwd()
    try:
        args.git_dir = check_git_repo(args.repo)
    except NotAGitRepositoryError as e:
        print_error(str(e))
        return 1

    if len(args.args) != len(placeholders):
        print_error(f"Usage: {usage(args.command)}")
        return 1

    try:
        return handler(args)
    except GitCommandError as e:
        print_error(str(e))
        detail = (e.stderr or e.stdout).strip()
        if detail:
            print_raw(detail)
        return 1


if __name__ == "__main__":
    sys.exit(main())
