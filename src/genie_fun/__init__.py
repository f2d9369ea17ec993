"""
Top-level package for genie_fun.

This package exposes the main CLI entry point via the
``genie_fun.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
