# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thin GitHub REST and GraphQL client for pull request files and check runs.

Every method performs exactly one request. Transport failures, non-2xx
responses and GraphQL ``errors`` payloads surface as
:class:`~eslint_checks.errors.HostApiError`; callers decide whether to degrade.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any, Final

import httpx
from pydantic import ValidationError

from ..errors import HostApiError
from ..models import ChangedFile, CheckRunOutput, CheckRunRef, Conclusion

PULL_REQUEST_QUERY: Final[str] = """
query($owner: String!, $name: String!, $prNumber: Int!) {
  repository(owner: $owner, name: $name) {
    pullRequest(number: $prNumber) {
      files(first: 100) {
        nodes {
          path
        }
      }
      commits(last: 1) {
        nodes {
          commit {
            oid
          }
        }
      }
    }
  }
}
"""

_ACCEPT: Final[str] = "application/vnd.github+json"
_API_VERSION: Final[str] = "2022-11-28"


class GitHubClient:
    """Synchronous GitHub API client backed by :class:`httpx.Client`.

    Args:
        token: Token sent as ``Authorization: Bearer <token>``.
        api_url: REST API base URL.
        graphql_url: GraphQL endpoint; defaults to ``<api_url>/graphql``.
        timeout: Request timeout in seconds.
        transport: Optional transport, used by tests to inject
            :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = "https://api.github.com",
        graphql_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._graphql_url = graphql_url or f"{api_url.rstrip('/')}/graphql"
        self._client = httpx.Client(
            base_url=api_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": _ACCEPT,
                "X-GitHub-Api-Version": _API_VERSION,
                "User-Agent": "eslint-checks",
            },
            transport=transport,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""

        self._client.close()

    # Pull requests and commits -----------------------------------------------

    def pull_request_files(self, owner: str, repo: str, number: int) -> tuple[list[ChangedFile], str]:
        """Return the first 100 files of a pull request and its latest commit oid.

        Args:
            owner: Repository owner.
            repo: Repository name.
            number: Pull request number.

        Returns:
            tuple[list[ChangedFile], str]: Changed files (status unknown, as the
            GraphQL listing omits it) and the head commit oid.

        Raises:
            HostApiError: If the request fails or the response is malformed.
        """

        data = self._graphql(PULL_REQUEST_QUERY, {"owner": owner, "name": repo, "prNumber": number})
        try:
            pull_request = data["repository"]["pullRequest"]
            nodes = pull_request["files"]["nodes"]
            oid = pull_request["commits"]["nodes"][0]["commit"]["oid"]
            files = [ChangedFile(path=node["path"]) for node in nodes]
        except (KeyError, IndexError, TypeError, ValidationError) as exc:
            raise HostApiError(f"unexpected pull request payload: {exc!r}") from exc
        return files, str(oid)

    def commit_files(self, owner: str, repo: str, ref: str) -> list[ChangedFile]:
        """Return the files touched by commit ``ref``.

        Raises:
            HostApiError: If the request fails or the response is malformed.
        """

        payload = self._request("GET", f"/repos/{owner}/{repo}/commits/{ref}")
        files = payload.get("files") or []
        try:
            return [ChangedFile(path=entry["filename"], status=entry.get("status")) for entry in files]
        except (KeyError, TypeError, ValidationError) as exc:
            raise HostApiError(f"unexpected commit payload: {exc!r}") from exc

    # Check runs ---------------------------------------------------------------

    def in_progress_check_runs(self, owner: str, repo: str, ref: str) -> list[CheckRunRef]:
        """List check runs with status ``in_progress`` for ``ref``."""

        payload = self._request(
            "GET",
            f"/repos/{owner}/{repo}/commits/{ref}/check-runs",
            params={"status": "in_progress"},
        )
        try:
            return [CheckRunRef.model_validate(item) for item in payload.get("check_runs") or []]
        except ValidationError as exc:
            raise HostApiError(f"unexpected check run listing: {exc}") from exc

    def create_check_run(self, owner: str, repo: str, *, name: str, head_sha: str, started_at: str) -> int:
        """Create an in-progress check run and return its id.

        Args:
            owner: Repository owner.
            repo: Repository name.
            name: Check run name shown in the UI.
            head_sha: Commit the check run is attached to.
            started_at: ISO-8601 start timestamp.

        Returns:
            int: Identifier of the new check run.

        Raises:
            HostApiError: If the request fails.
        """

        payload = self._request(
            "POST",
            f"/repos/{owner}/{repo}/check-runs",
            json={"name": name, "head_sha": head_sha, "status": "in_progress", "started_at": started_at},
        )
        try:
            return int(payload["id"])
        except (KeyError, TypeError, ValueError) as exc:
            raise HostApiError(f"unexpected check run payload: {exc!r}") from exc

    def update_check_run(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        *,
        completed_at: str,
        conclusion: Conclusion,
        output: CheckRunOutput | None = None,
    ) -> None:
        """Complete check run ``check_run_id`` with ``conclusion`` and optional ``output``."""

        body: dict[str, Any] = {"completed_at": completed_at, "conclusion": conclusion.value}
        if output is not None:
            body["output"] = output.model_dump(mode="json")
        self._request("PATCH", f"/repos/{owner}/{repo}/check-runs/{check_run_id}", json=body)

    # Transport ----------------------------------------------------------------

    def _graphql(self, query: str, variables: Mapping[str, Any]) -> dict[str, Any]:
        payload = self._request("POST", self._graphql_url, json={"query": query, "variables": dict(variables)})
        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(item.get("message", item)) for item in errors if isinstance(item, dict))
            raise HostApiError(f"GraphQL error: {messages or errors!r}")
        data = payload.get("data")
        if not isinstance(data, dict):
            raise HostApiError("GraphQL response carried no data")
        return data

    def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise HostApiError(f"{method} {url} failed with HTTP {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise HostApiError(f"{method} {url} failed: {exc}") from exc
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as exc:
            raise HostApiError(f"{method} {url} returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise HostApiError(f"{method} {url} returned a non-object payload")
        return payload


__all__ = ["GitHubClient", "PULL_REQUEST_QUERY"]
