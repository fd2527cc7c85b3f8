"""Test configuration and fixtures."""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an empty git repository with no remotes."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    # Keep discovery from walking into a repository above tmp_path
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.delenv("GIT_DIR", raising=False)

    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=repo_dir, check=True)
    return repo_dir


@pytest.fixture
def add_remote(git_repo: Path) -> Callable[[str, str], None]:
    """Add a named remote to the ``git_repo`` repository."""

    def _add(name: str, url: str) -> None:
        subprocess.run(["git", "remote", "add", name, url], cwd=git_repo, check=True)

    return _add


@pytest.fixture
def mock_http() -> Callable[..., httpx.Client]:
    """Build an httpx client that answers every request with a fixed response.

    Sent requests are recorded on the returned client's ``requests`` list.
    """

    def _build(
        json: object = None, status_code: int = 200, content: bytes | None = None
    ) -> httpx.Client:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.requests = requests  # type: ignore[attr-defined]
        return client

    return _build
