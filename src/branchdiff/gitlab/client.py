"""GitLab REST client — one call to the repository compare endpoint."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from branchdiff.gitlab.models import DiffEntry

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v4"


class ClientInitializationError(Exception):
    """Raised when the API client cannot be constructed."""


class ComparisonError(Exception):
    """Raised when the compare request fails."""

    def __init__(self, source_branch: str, target_branch: str, cause: object) -> None:
        self.source_branch = source_branch
        self.target_branch = target_branch
        self.cause = cause
        super().__init__(
            f"Failed to compare {source_branch} with {target_branch}. "
            f"Ensure both branches exist. Error: {cause}"
        )


def _validate_token(token: str) -> None:
    if not token or not token.strip():
        raise ClientInitializationError("access token is empty")
    if any(not (33 <= ord(ch) <= 126) for ch in token):
        raise ClientInitializationError(
            "access token contains whitespace or non-printable characters"
        )


def _validate_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ClientInitializationError(f"invalid GitLab URL {base_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ClientInitializationError(
            f"invalid GitLab URL {base_url!r}: expected an absolute http(s) URL"
        )
    return url


def _describe_http_error(response: httpx.Response) -> str:
    """Render an error response as ``<status> <reason>: <GitLab message>``."""
    detail: Any = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = body.get("message") or body.get("error")
    text = f"{response.status_code} {response.reason_phrase}".strip()
    return f"{text}: {detail}" if detail else text


class ComparisonClient:
    """Thin wrapper over ``GET /projects/:id/repository/compare``.

    The access token is passed in explicitly; the client never reads the
    environment. *transport* exists so tests can plug in
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        token: str,
        base_url: str = "https://gitlab.com",
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        _validate_token(token)
        url = _validate_base_url(base_url)
        self.base_url = str(url).rstrip("/") + API_PREFIX
        self._token = token
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            headers={"PRIVATE-TOKEN": self._token},
            transport=self._transport,
            follow_redirects=True,
        )

    def compare(
        self,
        project_id: int,
        source_branch: str,
        target_branch: str,
        *,
        straight: bool = False,
    ) -> List[DiffEntry]:
        """Return the diff entries between *source_branch* and *target_branch*.

        ``straight=False`` compares against the merge base (three dots);
        ``straight=True`` compares the two tips directly.
        """
        if not source_branch or not target_branch:
            raise ComparisonError(
                source_branch, target_branch, "source and target branch must be non-empty"
            )

        path = f"/projects/{project_id}/repository/compare"
        params = {
            "from": source_branch,
            "to": target_branch,
            "straight": "true" if straight else "false",
        }
        logger.debug("GET %s%s params=%s", self.base_url, path, params)

        try:
            with self._client() as client:
                response = client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise ComparisonError(source_branch, target_branch, exc) from exc

        logger.debug("HTTP Status: %d", response.status_code)
        if response.is_error:
            raise ComparisonError(
                source_branch, target_branch, _describe_http_error(response)
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise ComparisonError(
                source_branch, target_branch, f"invalid JSON in response: {exc}"
            ) from exc
        if not isinstance(body, dict):
            raise ComparisonError(
                source_branch, target_branch, "unexpected response: expected a JSON object"
            )

        diffs = body.get("diffs") or []
        if not isinstance(diffs, list):
            raise ComparisonError(
                source_branch, target_branch, "unexpected response: 'diffs' is not a list"
            )
        return [DiffEntry.from_api(d if isinstance(d, dict) else {}) for d in diffs]
