"""
Commit message generation using Gemini.

This module provides the :class:`CommitMessageGenerator` class, which
embeds a :class:`~genie_fun.changes.change_set.ChangeSet` in a fixed
style prompt, sends it through :class:`GeminiClient`, and cleans the
reply into the final commit message.

Generated messages follow the format:
  <emoji> <creative remark related to the change>
  <literal technical description>

The format is requested from the model, not enforced. The only
post-processing is trimming whitespace and wrapping quote characters.
"""

from __future__ import annotations

import logging

from genie_fun.changes.change_set import ChangeSet
from genie_fun.llm.gemini_client import GeminiClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


QUOTE_CHARS = "\"'`"

PROMPT_TEMPLATE = """\
You are a creative, witty, and slightly chaotic developer who treats commit messages as an art form. You make commits that are fun, random, and creative - but ALWAYS contextually relevant to the actual code changes.

YOUR MISSION:
Analyze the git diff and create a TWO-LINE commit message:
- Line 1: Random emoji + creative/funny/philosophical/lyrical message related to the change
- Line 2: Actual technical explanation of what changed

CREATIVE STYLES (pick randomly based on the vibe):
🎵 SONG LYRICS: Find a song lyric that metaphorically relates to the change
  Example: "🎸 I fought the law and the law won / Fixed authentication middleware to properly validate JWT tokens"

🧠 PHILOSOPHICAL: Drop some wisdom that somehow connects
  Example: "🌊 The only constant is change, except constants which I just changed / Refactored configuration values to environment variables"

😂 JOKES/PUNS: Make a programming joke or pun about the change
  Example: "🤡 Why did the function break up? It had too many arguments! / Simplified parameter passing in user service"

🎭 RANDOM FACTS: Share a random fact that loosely relates
  Example: "🦖 T-Rex couldn't clap but this code now can / Added applause animation to success notifications"

🎪 CHAOS: Just pure creative chaos that somehow makes sense
  Example: "🌮 Tacos are just sandwiches that think different / Implemented dependency injection for better testing"

💭 SHOWER THOUGHTS: Those weird thoughts that actually fit
  Example: "🚿 If you clean a vacuum cleaner, you're a vacuum cleaner / Removed unused imports and dead code"

🎨 METAPHORS: Poetic descriptions of mundane changes
  Example: "🌸 Like a butterfly emerging from its cache-rysalis / Optimized Redis caching strategy"

RULES:
1. MUST be contextually relevant to the actual code changes (even if loosely)
2. First line: emoji + creative message (can be funny, deep, random, whatever)
3. Second line: Clear technical explanation of what actually changed
4. Use a single random emoji that fits the vibe (not limited to common ones)
5. Be creative, be weird, be fun - but make it make sense when you squint
6. Maximum 72 characters per line
7. Don't use quotes around the output

Git Changes:
{changes}

Generate the creative two-line commit message now:"""


def build_prompt(change_set: ChangeSet) -> str:
    """Place the change text under the ``Git Changes:`` heading of the template."""
    return PROMPT_TEMPLATE.format(changes=change_set.text)


def clean_commit_message(raw_response: str) -> str:
    """Trim surrounding whitespace, then any wrapping quote characters.

    >>> clean_commit_message('  "🎸 line one\\nline two"\\n')
    '🎸 line one\\nline two'
    """
    return raw_response.strip().strip(QUOTE_CHARS)


class CommitMessageGenerator:
    """Generate a creative two-line commit message for a change set."""

    def __init__(self, gemini_client: GeminiClient) -> None:
        self.gemini_client = gemini_client

    def generate(self, change_set: ChangeSet) -> str:
        """Return the cleaned commit message for ``change_set``.

        Raises
        ------
        LLMError
            Propagated unchanged from the client.
        """
        prompt = build_prompt(change_set)
        logger.debug(
            "Generating message for %s changes (%d prompt chars)",
            change_set.source,
            len(prompt),
        )
        raw_response = self.gemini_client.generate(prompt)
        return clean_commit_message(raw_response)
