"""
Language model integration for genie_fun.

This package contains the :class:`GeminiClient` for calling the Gemini
REST API and the :class:`CommitMessageGenerator` which turns a change set
into a creative commit message.
"""

from .gemini_client import GeminiClient, LLMError  # noqa: F401
from .commit_message_generator import CommitMessageGenerator  # noqa: F401
