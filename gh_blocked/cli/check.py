"""CLI commands for checking and resolving issue patterns."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..check import IssueCheck, OutcomeKind
from ..config import BlockedConfig
from ..exceptions import ParseError
from ..github_client.patterns import PatternResolver
from ..github_client.remotes import RemoteResolver
from .options import (
    FORCE_OPTION,
    PATTERN_ARGUMENT,
    REASON_ARGUMENT,
    REPO_DIR_OPTION,
    STRICT_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def check(
    pattern: str = PATTERN_ARGUMENT,
    reason: str | None = REASON_ARGUMENT,
    token: str | None = TOKEN_OPTION,
    strict: bool = STRICT_OPTION,
    force: bool = FORCE_OPTION,
    repo_dir: Path | None = REPO_DIR_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check whether a GitHub issue is still open.

    Without a token the check only runs in CI (or with --force).

    Examples:
        gh-blocked check 423
        gh-blocked check serde#423 "Remove the workaround in parser.py"
        gh-blocked check serde-rs/serde/423 --strict
        gh-blocked check https://github.com/serde-rs/serde/issues/423
    """
    _configure_logging(verbose)

    config = BlockedConfig()
    credential = token or config.credential
    in_ci = config.in_ci or force

    resolver = PatternResolver(RemoteResolver(cwd=repo_dir), api_base=config.api_base)
    outcome = IssueCheck(resolver).run(
        pattern, reason, credential=credential, in_ci=in_ci
    )

    if outcome.kind is OutcomeKind.PASS:
        if outcome.skipped:
            console.print(
                "⏭️  Skipped: no GitHub token and no CI environment detected "
                "(use --force to check anyway)"
            )
        else:
            console.print(f"[green]✅ Issue is still open:[/green] {outcome.endpoint}")
        return

    if outcome.kind is OutcomeKind.WARN:
        console.print(f"[yellow]⚠️  {outcome.message}[/yellow] ({outcome.endpoint})")
        if strict:
            raise typer.Exit(1)
        return

    if outcome.kind is OutcomeKind.PARSE_ERROR:
        console.print(
            f"[red]❌ Could not resolve issue pattern: {outcome.message}[/red]"
        )
    else:
        console.print(f"[red]❌ Issue check failed: {outcome.message}[/red]")
    raise typer.Exit(1)


def resolve(
    pattern: str = PATTERN_ARGUMENT,
    repo_dir: Path | None = REPO_DIR_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Resolve an issue pattern to its API endpoint without any network access.

    Examples:
        gh-blocked resolve 423
        gh-blocked resolve serde#423
    """
    _configure_logging(verbose)

    config = BlockedConfig()
    resolver = PatternResolver(RemoteResolver(cwd=repo_dir), api_base=config.api_base)
    try:
        reference = resolver.resolve_reference(pattern)
        endpoint = resolver.endpoint_for(reference, pattern)
    except ParseError as e:
        console.print(f"[red]❌ Could not resolve issue pattern: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Issue {reference.slug}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Organization", reference.organization)
    table.add_row("Repository", reference.repository)
    table.add_row("Issue number", reference.issue_number)
    table.add_row("Endpoint", endpoint)
    console.print(table)
