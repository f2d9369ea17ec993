"""
Configuration loader for genie_fun.

The tool is configured entirely through the environment. The only
required setting is the Gemini API key in ``GOOGLE_AI_TOKEN``; the
endpoint and request timeout are fixed.

If the key is missing or blank, a :class:`ConfigError` is raised carrying
a pointer to where a key can be obtained.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings or logging errors in
# environments where the root logger may be closed. Propagation stays off
# until the CLI configures logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


API_KEY_ENV_VAR = "GOOGLE_AI_TOKEN"
API_KEY_HELP_URL = "https://aistudio.google.com/apikey"
GEMINI_ENDPOINT = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent"
)
DEFAULT_REQUEST_TIMEOUT = 30.0


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, help_url: Optional[str] = None) -> None:
        super().__init__(message)
        self.help_url = help_url


@dataclass(frozen=True)
class Settings:
    """Runtime settings for a single invocation.

    Attributes
    ----------
    api_key : str
        Gemini API key, passed as a query parameter on each request.
    endpoint : str
        Full URL of the ``generateContent`` endpoint.
    request_timeout : float
        Timeout in seconds for the HTTP request.
    """

    api_key: str
    endpoint: str = GEMINI_ENDPOINT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from the environment.

    Args:
        environ: Mapping to read variables from. Defaults to ``os.environ``.

    Returns:
        The validated settings.

    Raises:
        ConfigError: If ``GOOGLE_AI_TOKEN`` is unset or blank.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        logger.error("%s is not set", API_KEY_ENV_VAR)
        raise ConfigError(
            f"{API_KEY_ENV_VAR} environment variable not set",
            help_url=API_KEY_HELP_URL,
        )

    logger.debug("Loaded API key from %s", API_KEY_ENV_VAR)
    return Settings(api_key=api_key)
