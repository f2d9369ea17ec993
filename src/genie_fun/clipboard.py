"""
Clipboard delivery through platform utilities.

Each supported platform has a priority-ordered list of candidate commands.
The first one found on ``PATH`` receives the text on standard input.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CLIPBOARD_COMMANDS: Dict[str, List[List[str]]] = {
    "darwin": [["pbcopy"]],
    "linux": [
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
        ["wl-copy"],
    ],
    "win32": [["cmd", "/c", "clip"]],
}


class ClipboardError(Exception):
    """Raised when text cannot be copied to the clipboard."""

    pass


def find_clipboard_command(platform: Optional[str] = None) -> List[str]:
    """Return the first available clipboard command for ``platform``.

    Raises
    ------
    ClipboardError
        If the platform is not supported or none of its utilities is
        installed.
    """
    platform = platform or sys.platform
    candidates = CLIPBOARD_COMMANDS.get(platform)
    if candidates is None:
        raise ClipboardError(f"unsupported OS: {platform}")
    for command in candidates:
        if shutil.which(command[0]):
            return command
    raise ClipboardError("no clipboard utility found")


def copy_to_clipboard(text: str, platform: Optional[str] = None) -> None:
    """Copy ``text`` to the system clipboard.

    Raises
    ------
    ClipboardError
        If no utility is available or the utility fails.
    """
    command = find_clipboard_command(platform)
    logger.debug("Copying %d chars with: %s", len(text), " ".join(command))
    try:
        subprocess.run(command, input=text.encode("utf-8"), check=True)
    except subprocess.CalledProcessError as exc:
        logger.error("Clipboard command failed: %s", exc)
        raise ClipboardError(f"{command[0]} exited with status {exc.returncode}") from exc
    except OSError as exc:
        logger.error("Unable to run clipboard command: %s", exc)
        raise ClipboardError(str(exc)) from exc
