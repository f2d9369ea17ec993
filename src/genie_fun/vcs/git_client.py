"""
Git client implementation for genie_fun.

This module wraps the handful of read-only Git queries the tool needs:
the repository check and the three change listings (staged diff,
unstaged diff, untracked files). All subprocess calls go through
:meth:`GitClient._run` so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for querying a Git working tree.

    Parameters
    ----------
    cwd : Path, optional
        Directory in which Git commands are executed. Defaults to the
        process working directory.
    """

    def __init__(self, cwd: Optional[Path] = None) -> None:
        self.cwd = cwd

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the working directory.

        Raises
        ------
        GitError
            If the command exits with a non-zero status when ``check`` is
            True, or if the ``git`` executable cannot be started.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding='utf-8',
                errors='replace',  # Replace invalid characters instead of failing
            )
        except OSError as e:
            logger.error("Unable to run Git: %s", e)
            raise GitError(f"Unable to run git: {e}") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(
                result.stderr.strip()
                or result.stdout.strip()
                or f"'{' '.join(full_cmd)}' exited with status {result.returncode}"
            )
        return result

    # ------------------------------------------------------------------
    # Repository detection
    # ------------------------------------------------------------------
    def is_repo(self) -> bool:
        """Return True if the working directory is inside a Git repository.

        Asks Git for its metadata directory and only looks at the exit
        status. A missing ``git`` executable counts as "not a repository".
        """
        try:
            result = self._run(["rev-parse", "--git-dir"], check=False)
        except GitError:
            return False
        return result.returncode == 0

    # ------------------------------------------------------------------
    # Change queries
    # ------------------------------------------------------------------
    def get_staged_diff(self) -> str:
        """Return the diff of the index against HEAD."""
        return self._run(["diff", "--cached"]).stdout

    def get_unstaged_diff(self) -> str:
        """Return the diff of the working tree against the index."""
        return self._run(["diff"]).stdout

    def get_untracked_files(self) -> List[str]:
        """Return untracked files not covered by ignore rules.

        Files are returned in the order Git lists them; blank lines are
        skipped.
        """
        result = self._run(["ls-files", "--others", "--exclude-standard"])
        return [line for line in result.stdout.splitlines() if line.strip()]
