"""
Configuration for the release tooling.

Values come from the environment (a ``.env`` file in the working
directory is loaded first) and can be overridden by CLI flags.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Default export command; {api_key} and {content_dir} are filled in at runtime
DEFAULT_EXPORT_TEMPLATE = "csdx cm:export -k {api_key} -d {content_dir}"

DEFAULT_CONTENT_DIR = "content"
DEFAULT_MANIFEST = "package.json"
DEFAULT_REMOTE = "origin"

_TRUTHY = {"1", "true", "yes", "on"}


def load_environment(cwd: Path | None = None) -> None:
    """Load a .env file from cwd (or the process cwd) without overriding real env vars."""
    env_file = (cwd or Path.cwd()) / ".env"
    if env_file.is_file():
        load_dotenv(env_file, override=False)


def _env(name: str, default: str | None = None) -> str | None:
    value = (os.environ.get(name) or "").strip()
    return value or default


def _resolve(cwd: Path, path: str | Path) -> Path:
    path = Path(path)
    return path if path.is_absolute() else cwd / path


@dataclass(frozen=True)
class ContentConfig:
    cwd: Path
    content_dir: Path
    export_command: str | None
    api_key: str | None

    @classmethod
    def from_env(
        cls,
        cwd: Path | None = None,
        content_dir: str | None = None,
        export_command: str | None = None,
        api_key: str | None = None,
    ) -> "ContentConfig":
        cwd = (cwd or Path.cwd()).resolve()
        load_environment(cwd)
        return cls(
            cwd=cwd,
            content_dir=_resolve(cwd, content_dir or _env("CONTENT_DIR", DEFAULT_CONTENT_DIR)),
            export_command=export_command or _env("CONTENT_EXPORT_COMMAND"),
            api_key=api_key or _env("CONTENTSTACK_STACK_API_KEY"),
        )

    def build_export_command(self) -> str:
        """
        Return the export command line to run.

        Raises:
            RuntimeError: If no explicit command is set and no API key is configured.
        """
        if self.export_command:
            return self.export_command
        if not self.api_key:
            raise RuntimeError(
                "No stack API key configured. Set CONTENTSTACK_STACK_API_KEY "
                "or pass --stack-api-key / --command."
            )
        try:
            content_dir = self.content_dir.relative_to(self.cwd)
        except ValueError:
            content_dir = self.content_dir
        return DEFAULT_EXPORT_TEMPLATE.format(api_key=self.api_key, content_dir=content_dir.as_posix())


@dataclass(frozen=True)
class ReleaseConfig:
    cwd: Path
    manifest_path: Path
    remote: str = DEFAULT_REMOTE
    strict_remote: bool = False

    @classmethod
    def from_env(
        cls,
        cwd: Path | None = None,
        manifest: str | None = None,
        remote: str | None = None,
        strict_remote: bool | None = None,
    ) -> "ReleaseConfig":
        cwd = (cwd or Path.cwd()).resolve()
        load_environment(cwd)
        if strict_remote is None:
            strict_remote = (_env("RELEASE_STRICT_REMOTE", "false") or "").lower() in _TRUTHY
        return cls(
            cwd=cwd,
            manifest_path=_resolve(cwd, manifest or _env("RELEASE_MANIFEST", DEFAULT_MANIFEST)),
            remote=remote or _env("RELEASE_REMOTE", DEFAULT_REMOTE),
            strict_remote=strict_remote,
        )
