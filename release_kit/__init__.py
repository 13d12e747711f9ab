"""
Release Kit
===========

Command-line helpers for a content site's release chores:

- ``content-refresh``: wipe the local content export and pull a fresh one
- ``release-tag``: bump the manifest version and create/push the git tag
"""

__version__ = "1.0.0"

from .runner import CommandError, CommandResult, SubprocessRunner
from .config import ContentConfig, ReleaseConfig
from .utils import save_json, load_json

__all__ = [
    "CommandError",
    "CommandResult",
    "SubprocessRunner",
    "ContentConfig",
    "ReleaseConfig",
    "save_json",
    "load_json",
]
