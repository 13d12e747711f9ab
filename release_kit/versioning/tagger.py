"""
Release tag reconciliation.

Decides what to do when the release tag may already exist locally
and/or on the remote, then creates and pushes it.
"""

from dataclasses import dataclass
from enum import Enum

from ..utils import print_info, print_warning, print_success
from .git import GitClient


class TagOutcome(Enum):
    CREATED = "created"
    SKIPPED_EXISTS = "skipped_exists"  # local and remote, no force
    SKIPPED_REMOTE = "skipped_remote"  # remote only, no force


@dataclass(frozen=True)
class TagState:
    exists_locally: bool
    exists_remotely: bool


def lookup_tag(git: GitClient, tag: str, strict_remote: bool = False) -> TagState:
    """Query local and remote tag existence."""
    return TagState(
        exists_locally=git.tag_exists_locally(tag),
        exists_remotely=git.tag_exists_remotely(tag, strict=strict_remote),
    )


def create_release_tag(git: GitClient, version: str) -> None:
    """
    Commit pending changes and create + push an annotated tag.

    Args:
        git: Git client bound to the repository.
        version: Tag name and release version.
    """
    print_info("Adding changes to staging...")
    git.stage_all()

    if git.has_staged_changes():
        print_info("Committing changes...")
        git.commit(f"Release {version}")
    else:
        print_info("No changes to commit.")

    print_info(f"Creating tag {version}...")
    git.create_tag(version, f"Release version {version}")

    print_info(f"Pushing tag {version} to {git.remote}...")
    git.push_tag(version)


def reconcile_tag(
    git: GitClient,
    version: str,
    force: bool = False,
    strict_remote: bool = False,
) -> TagOutcome:
    """
    Create the release tag, resolving any existing local/remote copy first.

    | local | remote | force | action                                   |
    |-------|--------|-------|------------------------------------------|
    | yes   | yes    | no    | skip                                     |
    | yes   | yes    | yes   | delete local, delete remote, create      |
    | yes   | no     | any   | delete local, create                     |
    | no    | yes    | no    | skip                                     |
    | no    | yes    | yes   | delete remote, create                    |
    | no    | no     | any   | create                                   |

    Args:
        git: Git client bound to the repository.
        version: Tag name.
        force: Replace a tag that already exists on the remote.
        strict_remote: Fail if the remote cannot be queried.

    Returns:
        The TagOutcome.

    Raises:
        RuntimeError: If not inside a git repository.
        CommandError: If any delete, commit, tag or push fails.
    """
    print_info(f"Creating version tag for {version}...")
    git.ensure_repository()

    state = lookup_tag(git, version, strict_remote)

    if state.exists_locally and state.exists_remotely:
        if not force:
            print_warning(f"Tag {version} exists both locally and remotely. Skipping...")
            print_info("Use force-update to update the existing tag")
            return TagOutcome.SKIPPED_EXISTS
        print_warning(f"Tag {version} exists both locally and remotely. Force updating...")
        _delete_local(git, version)
        _delete_remote(git, version)

    elif state.exists_locally:
        print_info(f"Tag {version} exists locally but not remotely. Deleting local tag and creating fresh...")
        _delete_local(git, version)

    elif state.exists_remotely:
        if not force:
            print_warning(f"Tag {version} exists remotely but not locally.")
            print_info("Use force-update to update the remote tag")
            return TagOutcome.SKIPPED_REMOTE
        print_warning(f"Tag {version} exists remotely but not locally. Force updating...")
        _delete_remote(git, version)

    else:
        print_info(f"Tag {version} doesn't exist. Creating new tag...")

    create_release_tag(git, version)
    print_success(f"Created and pushed tag {version}")
    return TagOutcome.CREATED


def _delete_local(git: GitClient, version: str) -> None:
    print_info(f"Deleting local tag {version}...")
    git.delete_local_tag(version)


def _delete_remote(git: GitClient, version: str) -> None:
    print_info(f"Deleting remote tag {version}...")
    git.delete_remote_tag(version)
