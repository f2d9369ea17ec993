"""
Data model for extracted changes.

The :class:`ChangeSet` is the text handed to the language model: either a
diff or a synthesized listing of untracked files.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeSet:
    """Textual summary of pending repository modifications.

    Attributes
    ----------
    source : str
        Name of the change source that produced the text
        (``"staged"``, ``"unstaged"`` or ``"untracked"``).
    text : str
        The diff or file listing itself.
    """

    source: str
    text: str
