"""Pydantic models for issue references and GitHub issue status.

The response models map to the two bodies the GitHub issues endpoint returns.
API Reference: https://docs.github.com/en/rest/issues/issues#get-an-issue
"""

from enum import Enum
from typing import Annotated, Literal, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..exceptions import ParseError


class RepoCoordinates(BaseModel):
    """Organization and repository recovered from a git remote."""

    model_config = ConfigDict(frozen=True)

    organization: str = Field(..., min_length=1, description="GitHub organization")
    repository: str = Field(..., min_length=1, description="GitHub repository name")


class IssueReference(BaseModel):
    """Fully-qualified reference to a single GitHub issue."""

    model_config = ConfigDict(frozen=True)

    organization: str = Field(..., min_length=1, description="GitHub organization")
    repository: str = Field(..., min_length=1, description="GitHub repository name")
    issue_number: str = Field(
        ..., min_length=1, pattern=r"^\d+$", description="Issue number (digits)"
    )

    @property
    def slug(self) -> str:
        """Short form, e.g. ``serde-rs/serde#423``."""
        return f"{self.organization}/{self.repository}#{self.issue_number}"

    def endpoint(self, api_base: str) -> str:
        """Build the issues API URL for this reference under ``api_base``."""
        # Without a trailing slash join() would replace the last path segment
        if not api_base.endswith("/"):
            api_base += "/"
        path = f"{self.organization}/{self.repository}/issues/{self.issue_number}"
        try:
            url = httpx.URL(api_base).join(path)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise ParseError(f"could not join URL fragments: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise ParseError(
                f"could not join URL fragments: {api_base!r} is not an absolute "
                f"http(s) URL"
            )
        return str(url)


class IssueState(str, Enum):
    """Interpreted state of an issue."""

    OPEN = "open"
    CLOSED = "closed"
    OTHER = "other"


class KnownStatus(BaseModel):
    """The API reported a state for the issue."""

    kind: Literal["known"] = "known"
    state: IssueState = Field(..., description="Interpreted issue state")
    raw_state: str = Field(..., description="State string exactly as returned")


class FailureStatus(BaseModel):
    """The API answered with an error body instead of an issue."""

    kind: Literal["failure"] = "failure"
    message: str = Field(..., description="Error message reported by GitHub")


IssueStatus = Annotated[Union[KnownStatus, FailureStatus], Field(discriminator="kind")]


class IssueStateResponse(BaseModel):
    """Success body; only the state is of interest."""

    state: str = Field(..., min_length=1, description="'open', 'closed', ...")


class IssueErrorResponse(BaseModel):
    """Error body, e.g. ``{"message": "Not Found", "documentation_url": ...}``."""

    message: str = Field(..., description="Error message reported by GitHub")


IssueResponse = Annotated[
    Union[IssueStateResponse, IssueErrorResponse],
    Field(union_mode="left_to_right"),
]

issue_response_adapter: TypeAdapter[IssueStateResponse | IssueErrorResponse] = (
    TypeAdapter(IssueResponse)
)


def status_from_response(
    response: IssueStateResponse | IssueErrorResponse,
) -> IssueStatus:
    """Classify a decoded response body."""
    if isinstance(response, IssueErrorResponse):
        return FailureStatus(message=response.message)

    try:
        state = IssueState(response.state)
    except ValueError:
        state = IssueState.OTHER
    return KnownStatus(state=state, raw_state=response.state)
