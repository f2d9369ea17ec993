"""
Version control system (VCS) integration.

This package contains the :class:`GitClient` used to check that the
working directory is a Git repository and to list its pending changes.
"""

from .git_client import GitClient, GitError  # noqa: F401
