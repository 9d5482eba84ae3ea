"""Submodule CLI commands."""

import argparse

from subpad.output import ask, print_header, print_raw, print_status, print_warning

PUSH_REMINDER = "Don't forget to push: git push"


def cmd_add(args: argparse.Namespace) -> int:
    from subpad.git.submodules import add_submodule

    url, folder = args.args
    print_header("Adding Submodule")
    print_status(f"Adding {url} as submodule in folder: {folder}")

    add_submodule(
        url=url,
        folder=folder,
        cwd=args.repo,
        message=args.settings.commit_message("add", folder=folder, url=url),
    )

    print_status("Submodule added successfully!")
    print_warning(PUSH_REMINDER)
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    from subpad.git.submodules import update_submodules

    print_header("Updating Submodules")
    result = update_submodules(
        cwd=args.repo,
        message=args.settings.commit_message("update", folder="", url=""),
        report=print_status,
    )

    if not result["changed"]:
        print_status("All submodules are already up to date!")
        return 0

    print_status("Submodules updated successfully!")
    print_warning(PUSH_REMINDER)
    return 0


def cmd_update_specific(args: argparse.Namespace) -> int:
    from subpad.git.submodules import update_specific_submodule

    (folder,) = args.args
    print_header("Updating Specific Submodule")
    print_status(f"Updating submodule: {folder}")

    update_specific_submodule(
        folder=folder,
        cwd=args.repo,
        message=args.settings.commit_message("update_specific", folder=folder, url=""),
    )

    print_status(f"Submodule {folder} updated successfully!")
    print_warning(PUSH_REMINDER)
    return 0


def cmd_push(args: argparse.Namespace) -> int:
    from subpad.git.submodules import push_submodules

    print_header("Pushing Submodules")
    result = push_submodules(cwd=args.repo, report=print_status)
    if result["output"]:
        print_raw(result["output"])

    print_status("All submodules pushed successfully!")
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    from subpad.git.submodules import init_submodules

    print_header("Initializing Submodules")
    init_submodules(cwd=args.repo, report=print_status)

    print_status("Submodules initialized successfully!")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    from subpad.git.submodules import submodule_status

    print_header("Submodule Status")
    result = submodule_status(cwd=args.repo)

    print_status("Current submodules:")
    if result["pointers"]:
        print_raw(result["pointers"])

    entries = result["entries"]
    counts: dict[str, int] = {}
    for entry in entries:
        counts[entry["state"]] = counts.get(entry["state"], 0) + 1
    summary = ", ".join(f"{n} {state}" for state, n in sorted(counts.items()))
    print_status(f"{len(entries)} submodule(s)" + (f": {summary}" if summary else ""))

    print_raw()
    print_status("Checking for updates...")
    if result["changes"]:
        print_raw(result["changes"])
    return 0


def cmd_remove(args: argparse.Namespace) -> int:
    from subpad.git.submodules import remove_submodule

    (folder,) = args.args
    print_header("Removing Submodule")
    print_warning(f"This will remove the submodule: {folder}")

    if not args.yes:
        reply = ask("Are you sure? (y/N): ")
        if reply[:1] not in ("y", "Y"):
            print_status("Operation cancelled.")
            return 0

    remove_submodule(
        folder=folder,
        git_dir=args.git_dir,
        cwd=args.repo,
        report=print_status,
    )

    print_status(f"Submodule {folder} removed successfully!")
    print_warning(
        f"Don't forget to commit and push: git commit -m 'Remove {folder} submodule' && git push"
    )
    return 0
