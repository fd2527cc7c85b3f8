"""Flag code that waits on a GitHub issue once that issue is closed.

Typical use, next to a workaround::

    from gh_blocked import blocked

    blocked("serde-rs/serde#423", "Drop the manual impl once this is fixed")

When ``BLOCKED_GITHUB_API_KEY`` (or ``GITHUB_TOKEN``) is set, or a CI
environment is detected, the issue's state is fetched and an
``IssueClosedWarning`` is emitted if it has been closed. Otherwise the call
returns immediately without touching the network.
"""

import warnings
from pathlib import Path

from .check import CheckOutcome, IssueCheck, OutcomeKind, check_issue
from .config import BlockedConfig
from .exceptions import (
    BlockedError,
    IssueClosedWarning,
    ParseError,
    StatusCheckError,
)
from .github_client.patterns import PatternResolver
from .github_client.remotes import RemoteResolver

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "blocked",
    "check_issue",
    "BlockedConfig",
    "BlockedError",
    "CheckOutcome",
    "IssueCheck",
    "IssueClosedWarning",
    "OutcomeKind",
    "ParseError",
    "StatusCheckError",
]


def blocked(
    pattern: str,
    reason: str | None = None,
    *,
    config: BlockedConfig | None = None,
    cwd: Path | None = None,
) -> CheckOutcome:
    """Warn if the issue referenced by ``pattern`` has been closed.

    Args:
        pattern: Issue pattern, e.g. ``"#423"``, ``"serde#423"``,
            ``"serde-rs/serde#423"`` or a full issue URL.
        reason: Warning text used when the issue is closed.
        config: Configuration to use. Defaults to one read from the environment.
        cwd: Directory used to find git remotes for shorthand patterns.

    Returns:
        The check outcome for pass and warn results.

    Raises:
        ParseError: If the pattern or the git remote could not be parsed.
        StatusCheckError: If the issue state could not be determined.
    """
    config = config or BlockedConfig()
    resolver = PatternResolver(RemoteResolver(cwd=cwd), api_base=config.api_base)
    outcome = IssueCheck(resolver).run(
        pattern, reason, credential=config.credential, in_ci=config.in_ci
    )

    if outcome.kind is OutcomeKind.PARSE_ERROR:
        raise ParseError(outcome.message)
    if outcome.kind is OutcomeKind.RUNTIME_ERROR:
        raise StatusCheckError(outcome.message)
    if outcome.kind is OutcomeKind.WARN:
        warnings.warn(outcome.message, IssueClosedWarning, stacklevel=2)
    return outcome
