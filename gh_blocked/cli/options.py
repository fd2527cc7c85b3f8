"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

# Arguments
PATTERN_ARGUMENT = typer.Argument(
    ..., help="Issue pattern: URL, OWNER/REPO#N, REPO#N, #N or N"
)
REASON_ARGUMENT = typer.Argument(
    None, help="Message to show when the issue has been closed"
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="GitHub API token (defaults to BLOCKED_GITHUB_API_KEY or GITHUB_TOKEN)",
)

# Behavior options
STRICT_OPTION = typer.Option(
    False, "--strict", help="Exit with an error when the issue has been closed"
)

FORCE_OPTION = typer.Option(
    False, "--force", "-f", help="Check even without a token outside CI"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")

# Configuration options
REPO_DIR_OPTION = typer.Option(
    None,
    "--repo-dir",
    help="Directory to look up git remotes from (defaults to current directory)",
)
