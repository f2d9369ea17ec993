import subprocess
import unittest
from types import SimpleNamespace
from unittest.mock import patch

from genie_fun.vcs.git_client import GitClient, GitError


class DummyProc(SimpleNamespace):
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


class TestGitClient(unittest.TestCase):
    def test_is_repo_true_on_zero_exit(self) -> None:
        with patch("subprocess.run", return_value=DummyProc(returncode=0, stdout=".git\n", stderr="")) as mock_run:
            self.assertTrue(GitClient().is_repo())
        self.assertEqual(mock_run.call_args[0][0], ["git", "rev-parse", "--git-dir"])

    def test_is_repo_false_on_nonzero_exit(self) -> None:
        proc = DummyProc(returncode=128, stdout="", stderr="fatal: not a git repository")
        with patch("subprocess.run", return_value=proc):
            self.assertFalse(GitClient().is_repo())

    def test_is_repo_false_when_git_missing(self) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError("git")):
            self.assertFalse(GitClient().is_repo())

    def test_change_queries_use_expected_commands(self) -> None:
        calls = []

        def fake_run(self, args, check=True):
            calls.append(args)
            return DummyProc(returncode=0, stdout="", stderr="")

        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.side_effect = fake_run
            client = GitClient()
            client.get_staged_diff()
            client.get_unstaged_diff()
            client.get_untracked_files()

        self.assertEqual(
            calls,
            [
                ["diff", "--cached"],
                ["diff"],
                ["ls-files", "--others", "--exclude-standard"],
            ],
        )

    def test_get_untracked_files_keeps_order_and_skips_blanks(self) -> None:
        proc = DummyProc(returncode=0, stdout="b.txt\n\na.txt\n", stderr="")
        with patch.object(GitClient, "_run", return_value=proc):
            self.assertEqual(GitClient().get_untracked_files(), ["b.txt", "a.txt"])

    def test_run_raises_on_failure(self) -> None:
        proc = DummyProc(returncode=1, stdout="", stderr="fatal: bad revision\n")
        with patch("subprocess.run", return_value=proc):
            with self.assertRaises(GitError) as ctx:
                GitClient().get_staged_diff()
        self.assertEqual(str(ctx.exception), "fatal: bad revision")

    def test_run_failure_without_output_names_command(self) -> None:
        proc = DummyProc(returncode=2, stdout="", stderr="")
        with patch("subprocess.run", return_value=proc):
            with self.assertRaises(GitError) as ctx:
                GitClient().get_unstaged_diff()
        self.assertIn("git diff", str(ctx.exception))
        self.assertIn("2", str(ctx.exception))

    def test_run_wraps_os_error(self) -> None:
        with patch("subprocess.run", side_effect=OSError("boom")):
            with self.assertRaises(GitError):
                GitClient().get_staged_diff()

    def test_run_passes_cwd(self) -> None:
        with patch("subprocess.run", return_value=DummyProc(returncode=0, stdout="", stderr="")) as mock_run:
            GitClient(cwd="/repo").get_staged_diff()
        self.assertEqual(mock_run.call_args.kwargs["cwd"], "/repo")
        self.assertEqual(mock_run.call_args.kwargs["stdout"], subprocess.PIPE)


if __name__ == "__main__":
    unittest.main()
