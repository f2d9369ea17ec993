"""
Change extraction for genie_fun.

Pending changes are looked up through an ordered list of change sources:
staged diff, unstaged diff, and finally a listing of untracked files. The
first source that yields non-empty text wins; the remaining sources are
never queried.

Git failures are not caught here. A :class:`GitError` raised by any source
aborts the extraction.
"""

from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Optional

from genie_fun.changes.change_set import ChangeSet
from genie_fun.vcs.git_client import GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


UNTRACKED_HEADER = "New untracked files:"


class ChangeSource(NamedTuple):
    """A named strategy returning change text, or None when it has none."""

    name: str
    fetch: Callable[[GitClient], Optional[str]]


def _non_empty(text: str) -> Optional[str]:
    stripped = text.strip()
    return stripped or None


def staged_changes(client: GitClient) -> Optional[str]:
    return _non_empty(client.get_staged_diff())


def unstaged_changes(client: GitClient) -> Optional[str]:
    return _non_empty(client.get_unstaged_diff())


def untracked_files(client: GitClient) -> Optional[str]:
    """Summarize untracked files as a header followed by ``+ <name>`` lines."""
    files = client.get_untracked_files()
    if not files:
        return None
    lines = [UNTRACKED_HEADER]
    lines.extend(f"+ {name}" for name in files)
    return "\n".join(lines) + "\n"


CHANGE_SOURCES: List[ChangeSource] = [
    ChangeSource("staged", staged_changes),
    ChangeSource("unstaged", unstaged_changes),
    ChangeSource("untracked", untracked_files),
]


def extract_changes(
    client: GitClient,
    sources: Optional[List[ChangeSource]] = None,
) -> Optional[ChangeSet]:
    """Return the first non-empty change set, or None if nothing changed.

    Parameters
    ----------
    client : GitClient
        Client used to query the working tree.
    sources : list of ChangeSource, optional
        Sources to try, in order. Defaults to :data:`CHANGE_SOURCES`.

    Raises
    ------
    GitError
        If any Git query fails.
    """
    for source in sources if sources is not None else CHANGE_SOURCES:
        text = source.fetch(client)
        if text:
            logger.debug("Using %s changes (%d chars)", source.name, len(text))
            return ChangeSet(source=source.name, text=text)
        logger.debug("No %s changes found", source.name)
    return None
