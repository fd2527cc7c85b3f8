"""Exception and warning types raised by gh-blocked."""


class BlockedError(Exception):
    """Base class for all gh-blocked errors."""


class ParseError(BlockedError):
    """An issue pattern or git remote could not be turned into an issue reference.

    Always raised before any network access.
    """


class StatusCheckError(BlockedError):
    """The issue status could not be determined from the GitHub API."""


class IssueClosedWarning(UserWarning):
    """Emitted by ``blocked()`` when the referenced issue has been closed."""
