"""
Command line interface for the genie_fun tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``genie-fun`` command. It runs the pipeline in
order: repository check, configuration, change extraction, message
generation, and clipboard delivery. Every fatal condition prints one
diagnostic line and exits with ``EXIT_FAILURE``; a clipboard failure is
reported but does not change the exit code.
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from genie_fun import __version__
from genie_fun.changes.extractor import extract_changes
from genie_fun.clipboard import ClipboardError, copy_to_clipboard
from genie_fun.config.loader import ConfigError, load_settings
from genie_fun.llm.commit_message_generator import CommitMessageGenerator
from genie_fun.llm.gemini_client import GeminiClient, LLMError
from genie_fun.vcs.git_client import GitClient, GitError

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests). Propagation is only switched back
# on when ``--verbose`` is given.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_status(message: str) -> None:
    """Print a status line to standard output."""
    click.echo(message)


def print_error(message: str, hint: Optional[str] = None) -> None:
    """Print an error line, and an optional indented hint, to standard error."""
    click.echo(f"❌ {message}", err=True)
    if hint:
        click.echo(f"   {hint}", err=True)


def configure_logging(verbose: bool) -> None:
    # Use force=True to ensure handlers are reconfigured on subsequent
    # invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    # Module records only reach the terminal with --verbose; otherwise the
    # ❌ line is the single diagnostic for a fatal error.
    for name, existing in logging.root.manager.loggerDict.items():
        if name.startswith("genie_fun") and isinstance(existing, logging.Logger):
            existing.propagate = verbose
    # urllib3 logs request lines, which carry the API key in the query string.
    logging.getLogger("urllib3").setLevel(logging.INFO)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

@click.command()
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="genie-fun")
def main(verbose: bool) -> None:
    """🎲 Generate a creative two-line commit message for pending changes.

    The message is printed and copied to the clipboard. Requires the
    GOOGLE_AI_TOKEN environment variable.
    """
    configure_logging(verbose)

    try:
        client = GitClient()
        if not client.is_repo():
            print_error("Not a git repository")
            raise click.exceptions.Exit(EXIT_FAILURE)

        try:
            settings = load_settings()
        except ConfigError as exc:
            hint = f"Get your API key from: {exc.help_url}" if exc.help_url else None
            print_error(str(exc), hint=hint)
            raise click.exceptions.Exit(EXIT_FAILURE)

        try:
            change_set = extract_changes(client)
        except GitError as exc:
            print_error(f"Error getting git diff: {exc}")
            raise click.exceptions.Exit(EXIT_FAILURE)

        if change_set is None:
            print_status("✨ No changes detected. Nothing to commit!")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        print_status("🎲 Generating creative commit message...")

        try:
            gemini_client = GeminiClient(
                api_key=settings.api_key,
                endpoint=settings.endpoint,
                request_timeout=settings.request_timeout,
            )
            message = CommitMessageGenerator(gemini_client).generate(change_set)
        except LLMError as exc:
            print_error(f"Error generating commit: {exc}")
            raise click.exceptions.Exit(EXIT_FAILURE)

        print_status(f"\n{message}\n")

        try:
            copy_to_clipboard(message)
        except ClipboardError as exc:
            print_status(f"📋 Could not copy to clipboard: {exc}")
        else:
            print_status("📋 Copied to clipboard!")

        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logger.debug("Unhandled error: %s", exc, exc_info=True)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_FAILURE)
