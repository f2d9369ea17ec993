"""
Configuration loading for genie_fun.

Settings come from the process environment. See
:mod:`genie_fun.config.loader` for implementation details.
"""

from .loader import ConfigError, Settings, load_settings  # noqa: F401
