"""GitHub API client utilities for the portfolio.

This module provides async functions to fetch a user's profile and the
first page of their repositories from the GitHub REST API. Requests are
unauthenticated and never retried.

Rate Limits:
    - Unauthenticated: 60 requests/hour per IP

Example:
    ```python
    import asyncio, httpx
    from ghfolio.core.github import make_client, fetch_profile, fetch_user_repos

    async def main():
        async with make_client() as client:
            profile = await fetch_profile(client, "octocat")
            repos = await fetch_user_repos(client, "octocat")

    asyncio.run(main())
    ```
"""
from __future__ import annotations
from typing import Any, Dict

import httpx

GH_API = "https://api.github.com"


class GitHubError(RuntimeError):
    """A GitHub request failed or returned something that is not JSON."""


def _headers() -> Dict[str, str]:
    """Construct HTTP headers for GitHub API requests."""
    return {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "ghfolio",
    }


def make_client(base_url: str = GH_API, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the shared async client used for every portfolio request.

    Args:
        base_url: GitHub API root.
        transport: Optional transport override (tests pass `httpx.MockTransport`).
    """
    return httpx.AsyncClient(base_url=base_url, headers=_headers(), timeout=20.0, transport=transport)


async def fetch_json(client: httpx.AsyncClient, path: str, params: Dict[str, Any] | None = None) -> Any:
    """GET `path` and decode its JSON body.

    Raises:
        GitHubError: On transport errors, non-success status or invalid JSON.
    """
    try:
        resp = await client.get(path, params=params)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise GitHubError(f"GitHub {exc.response.status_code}: {path}") from exc
    except httpx.RequestError as exc:
        raise GitHubError(f"GitHub request error: {type(exc).__name__} {exc!r}") from exc

    try:
        return resp.json()
    except ValueError as exc:
        raise GitHubError(f"GitHub returned malformed JSON for {path}") from exc


async def fetch_profile(client: httpx.AsyncClient, username: str) -> Any:
    """Return the public profile of `username`."""
    return await fetch_json(client, f"/users/{username}")


async def fetch_user_repos(client: httpx.AsyncClient, username: str, per_page: int = 100) -> Any:
    """Return one page of `username`'s repositories, most recently updated first.

    Forks are included; callers filter them.
    """
    return await fetch_json(client, f"/users/{username}/repos", params={"per_page": per_page, "sort": "updated"})
