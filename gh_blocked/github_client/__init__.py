"""GitHub client package for issue resolution and status checks."""

from .client import IssueStatusClient
from .models import (
    FailureStatus,
    IssueReference,
    IssueState,
    KnownStatus,
    RepoCoordinates,
)
from .patterns import GITHUB_API_BASE, PatternResolver
from .remotes import RemoteResolver, parse_remote_url

__all__ = [
    "GITHUB_API_BASE",
    "IssueStatusClient",
    "PatternResolver",
    "RemoteResolver",
    "parse_remote_url",
    "RepoCoordinates",
    "IssueReference",
    "IssueState",
    "KnownStatus",
    "FailureStatus",
]
