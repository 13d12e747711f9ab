"""
Semantic version helpers.
"""

import re

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+(-[\w.-]+)?$")

BUMP_KINDS = ("patch", "minor", "major")


def is_valid_version(version: str) -> bool:
    """Check a version string against MAJOR.MINOR.PATCH[-prerelease]."""
    return bool(VERSION_PATTERN.match(version))


def validate_version(version: str) -> str:
    """
    Return version unchanged if it is a valid semantic version.

    Raises:
        ValueError: If the format is wrong.
    """
    if not is_valid_version(version):
        raise ValueError(
            f"Invalid version format '{version}'. "
            "Please use semantic versioning (e.g., 1.0.0)"
        )
    return version


def parse_version(version: str) -> tuple[int, int, int]:
    """
    Split a version into its (major, minor, patch) integers.

    Any prerelease suffix is ignored.

    Raises:
        ValueError: If the version cannot be parsed.
    """
    core = str(version).split("-", 1)[0]
    parts = core.split(".")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Cannot parse version '{version}'")
    major, minor, patch = (int(p) for p in parts)
    return major, minor, patch


def bump_version(version: str, kind: str = "patch") -> str:
    """
    Increment one field of a version and zero the less-significant ones.

    Args:
        version: Current version, e.g. "3.3.0".
        kind: One of "patch", "minor", "major".

    Returns:
        The bumped version string. A prerelease suffix is dropped.

    Raises:
        ValueError: If kind is unknown or version cannot be parsed.
    """
    if kind not in BUMP_KINDS:
        raise ValueError("Invalid version type. Use: patch, minor, or major")

    major, minor, patch = parse_version(version)

    if kind == "major":
        major, minor, patch = major + 1, 0, 0
    elif kind == "minor":
        minor, patch = minor + 1, 0
    else:
        patch += 1

    return f"{major}.{minor}.{patch}"
