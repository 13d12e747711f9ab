"""
Content directory refresh.

Deletes the local export directory, runs the export command to rebuild
it, and counts what came back.
"""

import os
import shlex
import shutil
from dataclasses import dataclass
from pathlib import Path

from ..runner import CommandError, CommandRunner, split_command
from ..utils import console, print_info, print_warning, print_success, print_stats_table


@dataclass(frozen=True)
class ContentStats:
    files: int = 0
    directories: int = 0


def count_tree(root: Path) -> ContentStats:
    """
    Recursively count files and subdirectories under root.

    Directories that cannot be listed are skipped along with everything
    below them. A symlink to a directory counts as a directory but is not
    descended into; any other non-directory entry counts as a file.

    Args:
        root: Directory to walk.

    Returns:
        ContentStats with the totals (root itself is not counted).
    """
    files = 0
    directories = 0
    pending = [root]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError:
            continue

        for entry in entries:
            try:
                is_dir = entry.is_dir()
                is_link = entry.is_symlink()
            except OSError:
                continue
            if is_dir:
                directories += 1
                if not is_link:
                    pending.append(Path(entry.path))
            else:
                files += 1

    return ContentStats(files=files, directories=directories)


SECRET_FLAGS = {"-k", "--stack-api-key"}


def mask_secrets(command: str) -> list[str]:
    """Return the command arguments with the stack API key replaced by ***."""
    args = split_command(command)
    masked = []
    hide_next = False
    for arg in args:
        if hide_next:
            masked.append("***")
            hide_next = False
        elif arg in SECRET_FLAGS:
            masked.append(arg)
            hide_next = True
        elif "=" in arg and arg.split("=", 1)[0] in SECRET_FLAGS:
            masked.append(arg.split("=", 1)[0] + "=***")
        else:
            masked.append(arg)
    return masked


def delete_content_dir(content_dir: Path) -> bool:
    """
    Remove content_dir and everything under it.

    Returns:
        True if something was deleted, False if the directory did not exist.
    """
    if not content_dir.exists():
        print_info(f"Content directory does not exist: {content_dir}")
        return False

    print_info(f"Deleting existing content directory {content_dir}...")
    if content_dir.is_dir() and not content_dir.is_symlink():
        shutil.rmtree(content_dir)
    else:
        content_dir.unlink()
    print_success("Content directory deleted")
    return True


def refresh_content(content_dir: Path, export_command: str, runner: CommandRunner) -> ContentStats | None:
    """
    Delete content_dir, run the export command and report stats.

    Args:
        content_dir: Directory the export writes into.
        export_command: Command line of the exporter.
        runner: Runs the export with inherited stdio.

    Returns:
        ContentStats for the new tree, or None if the export did not
        create the directory.

    Raises:
        CommandError: If the export command fails.
        OSError: If the old directory cannot be removed.
    """
    delete_content_dir(content_dir)

    console.print("\n[bold cyan]Starting fresh content export...[/bold cyan]")
    masked = mask_secrets(export_command)
    print_info(f"Running: {shlex.join(masked)}")
    try:
        result = runner.run(export_command, capture=False)
    except CommandError as e:
        raise CommandError(masked, detail=e.detail) from None
    if not result.ok:
        raise CommandError(masked, result.returncode)
    print_success("Content export completed")

    if not content_dir.is_dir():
        print_warning(f"Content directory was not created: {content_dir}")
        return None

    stats = count_tree(content_dir)
    print_stats_table("Export Summary", {
        "Directories": stats.directories,
        "Files": stats.files,
    })
    return stats
