"""
Thin wrapper over the git commands used for tagging releases.

Existence checks return booleans and never raise for a non-zero exit. Mutating
commands inherit stdio and raise CommandError when they fail.
"""

from ..runner import CommandError, CommandRunner


class GitClient:
    def __init__(self, runner: CommandRunner, remote: str = "origin"):
        self.runner = runner
        self.remote = remote

    def _run(self, *args: str):
        return self.runner.run(["git", *args], capture=False).check()

    def ensure_repository(self) -> None:
        """
        Raises:
            RuntimeError: If the working directory is not a git repository.
        """
        try:
            result = self.runner.run(["git", "status"])
        except CommandError as e:
            raise RuntimeError(f"Not in a git repository ({e})") from e
        if not result.ok:
            raise RuntimeError("Not in a git repository")

    # --- existence checks ---

    def tag_exists_locally(self, tag: str) -> bool:
        try:
            result = self.runner.run(["git", "rev-parse", "--verify", "--quiet", f"refs/tags/{tag}"])
        except CommandError:
            return False
        return result.ok

    def tag_exists_remotely(self, tag: str, strict: bool = False) -> bool:
        """
        Check whether the remote lists the tag.

        Args:
            tag: Tag name.
            strict: Raise CommandError when the remote cannot be queried
                instead of reporting the tag as absent.
        """
        args = ["git", "ls-remote", "--tags", self.remote, f"refs/tags/{tag}"]
        try:
            result = self.runner.run(args)
        except CommandError:
            if strict:
                raise
            return False

        if not result.ok:
            if strict:
                raise CommandError(result.args, result.returncode, result.stderr)
            return False
        return bool(result.stdout.strip())

    def has_staged_changes(self) -> bool:
        """Exit 0 from `git diff --cached --quiet` means nothing is staged."""
        result = self.runner.run(["git", "diff", "--cached", "--quiet"])
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        raise CommandError(result.args, result.returncode, result.stderr)

    # --- mutations ---

    def stage_all(self) -> None:
        self._run("add", ".")

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message, "--no-verify")

    def create_tag(self, tag: str, message: str) -> None:
        self._run("tag", "-a", tag, "-m", message)

    def delete_local_tag(self, tag: str) -> None:
        self._run("tag", "-d", tag)

    def delete_remote_tag(self, tag: str) -> None:
        self._run("push", "--delete", self.remote, tag)

    def push_tag(self, tag: str) -> None:
        self._run("push", self.remote, tag)
