"""
Reading and writing the version field of a JSON manifest.
"""

from pathlib import Path

from ..utils import load_json, save_json
from .semver import bump_version


def _load_manifest(path: Path) -> dict:
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Manifest is not a JSON object: {path}")
    return data


def read_version(path: Path) -> str:
    """
    Return the "version" field of the manifest at path.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the JSON is invalid or has no version.
    """
    data = _load_manifest(path)
    version = data.get("version")
    if not isinstance(version, str) or not version:
        raise ValueError(f"No version field in {path}")
    return version


def bump_manifest(path: Path, kind: str = "patch") -> tuple[str, str]:
    """
    Bump the manifest version in place, keeping every other field as is.

    Returns:
        (old_version, new_version)
    """
    data = _load_manifest(path)
    old_version = data.get("version")
    if not isinstance(old_version, str) or not old_version:
        raise ValueError(f"No version field in {path}")

    new_version = bump_version(old_version, kind)
    data["version"] = new_version
    save_json(data, path)
    return old_version, new_version
