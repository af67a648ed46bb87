"""Shared test fixtures — sample compare payloads, mocked GitLab API, env."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from branchdiff.gitlab.client import ComparisonClient
from branchdiff.gitlab.models import DiffEntry


def _diff(old_path: str, new_path: str, *, new=False, deleted=False, renamed=False) -> Dict[str, Any]:
    return {
        "old_path": old_path,
        "new_path": new_path,
        "a_mode": "100644",
        "b_mode": "100644",
        "diff": "@@ -1 +1 @@\n-a\n+b\n",
        "new_file": new,
        "renamed_file": renamed,
        "deleted_file": deleted,
    }


@pytest.fixture
def compare_payload() -> Dict[str, Any]:
    """A compare response body with one change of every kind."""
    return {
        "commit": {"id": "12d65c8dd2b2676fa3ac47d955accc085a37a9c1", "title": "feat: x"},
        "commits": [],
        "compare_timeout": False,
        "compare_same_ref": False,
        "web_url": "https://gitlab.example.com/group/app/-/compare/main...feature",
        "diffs": [
            _diff("src/app.py", "src/app.py"),
            _diff("", "src/new_module.py", new=True),
            _diff("docs/old.md", "docs/old.md", deleted=True),
            _diff("README.txt", "README.md", renamed=True),
        ],
    }


@pytest.fixture
def sample_entries() -> List[DiffEntry]:
    return [
        DiffEntry("src/app.py", "src/app.py"),
        DiffEntry("", "src/new_module.py", is_new=True),
        DiffEntry("docs/old.md", "docs/old.md", is_deleted=True),
        DiffEntry("README.txt", "README.md", is_renamed=True),
    ]


@pytest.fixture
def json_response() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Build a MockTransport handler returning *body* with *status*."""

    def factory(body: Any, status: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, content=json.dumps(body).encode())

        return handler

    return factory


@pytest.fixture
def mock_gitlab(monkeypatch):
    """Route every ComparisonClient through an httpx.MockTransport.

    Call the fixture with a handler; recorded requests are returned.
    """
    requests: List[httpx.Request] = []

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> List[httpx.Request]:
        def recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        def _client(self: ComparisonClient) -> httpx.Client:
            return httpx.Client(
                base_url=self.base_url,
                headers={"PRIVATE-TOKEN": self._token},
                transport=httpx.MockTransport(recording),
            )

        monkeypatch.setattr(ComparisonClient, "_client", _client)
        return requests

    return install


@pytest.fixture
def gitlab_env(monkeypatch):
    """A clean environment with only the access token set."""
    for name in ("GITLAB_URL", "CI_SERVER_URL", "BRANCHDIFF_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GITLAB_API_TOKEN", "glpat-testtoken123")
