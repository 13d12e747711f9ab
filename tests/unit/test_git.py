import unittest

from release_kit.runner import CommandError
from release_kit.versioning.git import GitClient
from tests.unit.fakes import FakeRunner


class TestTagLookups(unittest.TestCase):
    def test_local_lookup_checks_tag_ref(self):
        runner = FakeRunner({("git", "rev-parse"): (0, "abc\n")})

        self.assertTrue(GitClient(runner).tag_exists_locally("1.2.3"))
        self.assertEqual(runner.commands(), ["git rev-parse --verify --quiet refs/tags/1.2.3"])

    def test_local_lookup_non_zero_means_absent(self):
        runner = FakeRunner({("git", "rev-parse"): (1, "")})
        self.assertFalse(GitClient(runner).tag_exists_locally("1.2.3"))

    def test_remote_lookup_uses_configured_remote(self):
        runner = FakeRunner({("git", "ls-remote"): (0, "abc\trefs/tags/1.2.3\n")})

        self.assertTrue(GitClient(runner, remote="upstream").tag_exists_remotely("1.2.3"))
        self.assertEqual(runner.commands(), ["git ls-remote --tags upstream refs/tags/1.2.3"])

    def test_remote_lookup_empty_listing_means_absent(self):
        runner = FakeRunner({("git", "ls-remote"): (0, "\n")})
        self.assertFalse(GitClient(runner).tag_exists_remotely("1.2.3"))

    def test_remote_lookup_failure_means_absent(self):
        runner = FakeRunner({("git", "ls-remote"): (128, "")})
        self.assertFalse(GitClient(runner).tag_exists_remotely("1.2.3"))

    def test_remote_lookup_failure_raises_when_strict(self):
        runner = FakeRunner({("git", "ls-remote"): (128, "")})
        with self.assertRaises(CommandError):
            GitClient(runner).tag_exists_remotely("1.2.3", strict=True)

    def test_staged_changes_from_diff_exit_code(self):
        self.assertFalse(GitClient(FakeRunner({("git", "diff"): (0, "")})).has_staged_changes())
        self.assertTrue(GitClient(FakeRunner({("git", "diff"): (1, "")})).has_staged_changes())
        with self.assertRaises(CommandError):
            GitClient(FakeRunner({("git", "diff"): (129, "")})).has_staged_changes()


class TestMutations(unittest.TestCase):
    def test_commands(self):
        runner = FakeRunner()
        git = GitClient(runner, remote="origin")

        git.stage_all()
        git.commit("Release 1.0.0")
        git.create_tag("1.0.0", "Release version 1.0.0")
        git.delete_local_tag("1.0.0")
        git.delete_remote_tag("1.0.0")
        git.push_tag("1.0.0")

        self.assertEqual(runner.calls, [
            ["git", "add", "."],
            ["git", "commit", "-m", "Release 1.0.0", "--no-verify"],
            ["git", "tag", "-a", "1.0.0", "-m", "Release version 1.0.0"],
            ["git", "tag", "-d", "1.0.0"],
            ["git", "push", "--delete", "origin", "1.0.0"],
            ["git", "push", "origin", "1.0.0"],
        ])

    def test_failed_mutation_raises(self):
        runner = FakeRunner({("git", "tag", "-a"): (128, "")})
        with self.assertRaises(CommandError):
            GitClient(runner).create_tag("1.0.0", "msg")


if __name__ == "__main__":
    unittest.main()
