"""
Release versioning: manifest version bumps and git tag reconciliation.
"""

from .git import GitClient
from .manifest import bump_manifest, read_version
from .semver import BUMP_KINDS, bump_version, is_valid_version, parse_version, validate_version
from .tagger import TagOutcome, TagState, create_release_tag, lookup_tag, reconcile_tag

__all__ = [
    "GitClient",
    "bump_manifest",
    "read_version",
    "BUMP_KINDS",
    "bump_version",
    "is_valid_version",
    "parse_version",
    "validate_version",
    "TagOutcome",
    "TagState",
    "create_release_tag",
    "lookup_tag",
    "reconcile_tag",
]
