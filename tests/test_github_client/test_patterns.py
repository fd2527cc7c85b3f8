"""Tests for issue pattern resolution."""

from unittest.mock import Mock

import pytest

from gh_blocked.exceptions import ParseError
from gh_blocked.github_client.models import IssueReference, RepoCoordinates
from gh_blocked.github_client.patterns import PatternResolver
from gh_blocked.github_client.remotes import RemoteResolver

API = "https://api.github.com/repos"


@pytest.fixture
def remote_resolver() -> Mock:
    """Remote resolver that reports acme/widgets."""
    resolver = Mock(spec=RemoteResolver)
    resolver.resolve.return_value = RepoCoordinates(
        organization="acme", repository="widgets"
    )
    return resolver


@pytest.fixture
def resolver(remote_resolver: Mock) -> PatternResolver:
    return PatternResolver(remote_resolver)


class TestPatternTiers:
    """Test each supported pattern form."""

    def test_web_url(self, resolver: PatternResolver, remote_resolver: Mock) -> None:
        """Test full GitHub issue URL."""
        endpoint = resolver.resolve("https://github.com/serde-rs/serde/issues/423")

        assert endpoint == f"{API}/serde-rs/serde/issues/423"
        remote_resolver.resolve.assert_not_called()

    def test_http_web_url(self, resolver: PatternResolver) -> None:
        """Test plain http GitHub issue URL."""
        endpoint = resolver.resolve("http://github.com/serde-rs/serde/issues/423")
        assert endpoint == f"{API}/serde-rs/serde/issues/423"

    def test_api_url_used_as_is(
        self, resolver: PatternResolver, remote_resolver: Mock
    ) -> None:
        """Test that an API URL is returned unchanged."""
        url = "https://api.github.com/repos/serde-rs/serde/issues/423"

        assert resolver.resolve(url) == url
        remote_resolver.resolve.assert_not_called()

    def test_owner_repo_hash(
        self, resolver: PatternResolver, remote_resolver: Mock
    ) -> None:
        """Test OWNER/REPO#N."""
        endpoint = resolver.resolve("serde-rs/serde#423")

        assert endpoint == f"{API}/serde-rs/serde/issues/423"
        remote_resolver.resolve.assert_not_called()

    def test_owner_repo_slash(
        self, resolver: PatternResolver, remote_resolver: Mock
    ) -> None:
        """Test OWNER/REPO/N."""
        endpoint = resolver.resolve("serde-rs/serde/423")

        assert endpoint == f"{API}/serde-rs/serde/issues/423"
        remote_resolver.resolve.assert_not_called()

    def test_repo_hash(self, resolver: PatternResolver, remote_resolver: Mock) -> None:
        """Test REPO#N takes the organization from the remote."""
        endpoint = resolver.resolve("serde#423")

        assert endpoint == f"{API}/acme/serde/issues/423"
        remote_resolver.resolve.assert_called_once()

    def test_repo_slash_prefers_pattern_repository(
        self, resolver: PatternResolver
    ) -> None:
        """Test REPO/N uses the repository from the pattern, not the remote."""
        reference = resolver.resolve_reference("serde/423")

        assert reference == IssueReference(
            organization="acme", repository="serde", issue_number="423"
        )

    def test_hash_number(self, resolver: PatternResolver) -> None:
        """Test #N takes organization and repository from the remote."""
        assert resolver.resolve("#42") == f"{API}/acme/widgets/issues/42"

    def test_bare_number(self, resolver: PatternResolver) -> None:
        """Test N takes organization and repository from the remote."""
        assert resolver.resolve("42") == f"{API}/acme/widgets/issues/42"

    def test_surrounding_whitespace(self, resolver: PatternResolver) -> None:
        """Test that surrounding whitespace is ignored."""
        assert resolver.resolve("  serde-rs/serde#1 \n") == (
            f"{API}/serde-rs/serde/issues/1"
        )


class TestPatternErrors:
    """Test pattern resolution failures."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "",
            "not an issue",
            "serde",
            "#",
            "#abc",
            "a/b/c/1",
            "serde-rs/serde#42a",
            "https://gitlab.com/acme/widgets/issues/1",
            "https://github.com/serde-rs/serde/pull/423",
        ],
    )
    def test_unparseable(
        self, resolver: PatternResolver, remote_resolver: Mock, pattern: str
    ) -> None:
        """Test patterns that match no form."""
        with pytest.raises(ParseError, match="could not parse issue pattern"):
            resolver.resolve(pattern)
        remote_resolver.resolve.assert_not_called()

    def test_remote_error_propagates(self, remote_resolver: Mock) -> None:
        """Test that remote lookup errors propagate unchanged."""
        error = ParseError("no repository found")
        remote_resolver.resolve.side_effect = error

        with pytest.raises(ParseError) as excinfo:
            PatternResolver(remote_resolver).resolve("42")

        assert excinfo.value is error

    def test_remote_error_for_repo_pattern(self, remote_resolver: Mock) -> None:
        """Test that REPO#N also needs the remote."""
        remote_resolver.resolve.side_effect = ParseError(
            "no upstream or origin remote"
        )

        with pytest.raises(ParseError, match="no upstream or origin remote"):
            PatternResolver(remote_resolver).resolve("serde#1")


class TestEndpointConstruction:
    """Test endpoint building."""

    def test_custom_api_base(self, remote_resolver: Mock) -> None:
        """Test joining onto a custom API base."""
        resolver = PatternResolver(
            remote_resolver, api_base="https://ghe.example.com/api/v3/repos/"
        )

        assert resolver.resolve("acme/widgets#7") == (
            "https://ghe.example.com/api/v3/repos/acme/widgets/issues/7"
        )

    def test_endpoint_for_api_url(self, resolver: PatternResolver) -> None:
        """Test endpoint_for keeps API URLs."""
        url = "https://api.github.com/repos/acme/widgets/issues/7"
        reference = resolver.resolve_reference(url)

        assert resolver.endpoint_for(reference, url) == url
        assert reference.slug == "acme/widgets#7"
