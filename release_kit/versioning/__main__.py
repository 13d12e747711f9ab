#!/usr/bin/env python3
"""
Release Tag Manager - CLI Entry Point
=====================================

Usage:
    python -m release_kit.versioning tag
    python -m release_kit.versioning tag 3.3.0 force-update
    python -m release_kit.versioning update minor
"""

import argparse
import sys
from pathlib import Path

from ..config import ReleaseConfig
from ..runner import SubprocessRunner
from ..utils import console, print_error, print_info
from .git import GitClient
from .manifest import bump_manifest, read_version
from .semver import BUMP_KINDS, validate_version
from .tagger import reconcile_tag

FORCE_WORDS = {"force-update", "-f", "--force"}

USAGE = """
Usage:
  release-tag tag [version] [force-update]  - Create a tag using current or custom version
  release-tag update [type]                 - Update version in the manifest and create tag

Version types:
  patch (default) - Increment patch version (x.x.X)
  minor           - Increment minor version (x.X.0)
  major           - Increment major version (X.0.0)

Flags:
  force-update, -f    - Force recreate tag if it already exists

Options (before the command):
  --manifest PATH     - Manifest holding the version (default: package.json)
  --remote NAME       - Remote to push tags to (default: origin)
  --cwd DIR           - Repository directory (default: current directory)
  --strict-remote     - Fail if the remote cannot be queried

Examples:
  release-tag tag                     - Create tag {version} (current version)
  release-tag tag 3.3.0               - Create tag 3.3.0 (custom version)
  release-tag tag 3.3.0 force-update  - Force recreate tag 3.3.0
  release-tag tag force-update        - Force recreate tag with current version
  release-tag update                  - Update to next patch and create tag
  release-tag update minor            - Update to next minor and create tag
  release-tag update major            - Update to next major and create tag

Note: If you deleted a tag from the remote but it still exists locally, run tag again;
the local copy is replaced automatically.
"""


def print_usage(config: ReleaseConfig) -> None:
    try:
        version = read_version(config.manifest_path)
    except (OSError, ValueError):
        version = "<version>"
    console.print(USAGE.format(version=version), markup=False, highlight=False)


def _git_for(config: ReleaseConfig) -> GitClient:
    return GitClient(SubprocessRunner(cwd=config.cwd), remote=config.remote)


def _parse_known(parser: argparse.ArgumentParser, argv: list[str] | None):
    """parse_known_args, mapping argparse exits to 0 (help) or 1 (usage error)."""
    try:
        return parser.parse_known_args(argv), None
    except SystemExit as e:
        return None, 0 if e.code in (0, None) else 1


def cmd_tag(config: ReleaseConfig, argv: list[str]) -> int:
    """Tag command - create a tag for the manifest or a custom version."""
    parser = argparse.ArgumentParser(prog="release-tag tag", add_help=True)
    parser.add_argument("targets", nargs="*", metavar="VERSION|force-update")
    parsed, code = _parse_known(parser, argv)
    if parsed is None:
        return code
    args, extra = parsed

    words = list(args.targets) + list(extra)
    force = any(w in FORCE_WORDS for w in words)
    unknown_flags = [w for w in words if w.startswith("-") and w not in FORCE_WORDS]
    versions = [w for w in words if w not in FORCE_WORDS and not w.startswith("-")]

    if unknown_flags:
        print_error(f"Unknown option(s): {' '.join(unknown_flags)}")
        return 1
    if len(versions) > 1:
        print_error(f"Expected at most one version, got: {' '.join(versions)}")
        return 1

    try:
        if versions:
            version = validate_version(versions[0])
            print_info(f"Using custom version: {version}")
        else:
            version = read_version(config.manifest_path)

        reconcile_tag(_git_for(config), version, force=force, strict_remote=config.strict_remote)
        return 0

    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except Exception as e:
        print_error(f"Error creating version tag: {e}")
        return 1


def cmd_update(config: ReleaseConfig, argv: list[str]) -> int:
    """Update command - bump the manifest version, then tag it."""
    parser = argparse.ArgumentParser(prog="release-tag update", add_help=True)
    parser.add_argument("kind", nargs="?", default="patch", metavar="{patch,minor,major}")
    parsed, code = _parse_known(parser, argv)
    if parsed is None:
        return code
    args, extra = parsed

    if extra:
        print_error(f"Unexpected argument(s): {' '.join(extra)}")
        return 1
    if args.kind not in BUMP_KINDS:
        print_error("Invalid version type. Use: patch, minor, or major")
        return 1

    try:
        git = _git_for(config)
        git.ensure_repository()

        old_version, new_version = bump_manifest(config.manifest_path, args.kind)
        print_info(f"Updating version from {old_version} to {new_version}")
        print_info(f"Updated {config.manifest_path.name} version to {new_version}")

        reconcile_tag(git, new_version, strict_remote=config.strict_remote)
        return 0

    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except Exception as e:
        print_error(f"Error updating version and creating tag: {e}")
        return 1


COMMANDS = {
    "tag": cmd_tag,
    "update": cmd_update,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="release-tag",
        description="Bump the manifest version and create/push release tags",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show usage")
    parser.add_argument("--manifest", type=str, help="Manifest file holding the version")
    parser.add_argument("--remote", type=str, help="Git remote to push tags to")
    parser.add_argument("--cwd", type=Path, help="Repository directory")
    parser.add_argument("--strict-remote", action="store_true", default=None,
                        help="Fail if the remote tag check cannot reach the remote")
    parser.add_argument("command", nargs="?")
    parser.add_argument("args", nargs=argparse.REMAINDER)

    parsed, code = _parse_known(parser, argv)
    if parsed is None:
        return code
    args, extra = parsed

    if extra:
        print_error(f"Unknown option(s): {' '.join(extra)}")
        return 1

    config = ReleaseConfig.from_env(
        cwd=args.cwd,
        manifest=args.manifest,
        remote=args.remote,
        strict_remote=args.strict_remote,
    )

    handler = COMMANDS.get(args.command)
    if args.help or handler is None:
        print_usage(config)
        return 0

    return handler(config, args.args)


if __name__ == "__main__":
    sys.exit(main())
