"""Profile and repository loading.

`DataLoader.load` is the boundary where every network or payload error is
absorbed: the page only ever sees a fixed status message.
"""
from __future__ import annotations
import asyncio
from typing import Any

import httpx
from loguru import logger

from .github import fetch_profile, fetch_user_repos
from .repos import exclude_forks, sort_by_recency
from .surface import Surface
from .view import ViewController

LOADING_STATUS = "Loading repositories..."
FAILURE_STATUS = "Could not load the repositories right now. Check them directly on GitHub."
NO_COUNT = "—"


def repo_count_display(profile: Any, repos: Any) -> str:
    """Profile's public repo count, else the fetched list length, else a dash."""
    count = profile.get("public_repos") if isinstance(profile, dict) else None
    if count is None and isinstance(repos, list):
        count = len(repos)
    return NO_COUNT if count is None else str(count)


class DataLoader:
    """Fetches the owner's profile and repositories into a `ViewController`."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        owner: str,
        view: ViewController,
        surface: Surface,
        per_page: int = 100,
    ):
        self.client = client
        self.owner = owner
        self.view = view
        self.surface = surface
        self.per_page = per_page

    async def _fetch_both(self) -> tuple[Any, Any]:
        # the group cancels the sibling request as soon as one fails
        async with asyncio.TaskGroup() as tg:
            profile_task = tg.create_task(fetch_profile(self.client, self.owner))
            repos_task = tg.create_task(fetch_user_repos(self.client, self.owner, self.per_page))
        return profile_task.result(), repos_task.result()

    async def load(self) -> bool:
        """Fetch, normalize and render the repositories.

        Returns:
            True when the page was populated, False when the failure status
            was published instead.
        """
        self.surface.status = LOADING_STATUS
        logger.info("loading repositories for {}", self.owner)

        try:
            profile, repos = await self._fetch_both()

            avatar_url = profile.get("avatar_url") if isinstance(profile, dict) else None
            if avatar_url and not self.surface.avatar.is_local:
                self.surface.avatar.src = avatar_url

            self.surface.repo_count = repo_count_display(profile, repos)

            records = sort_by_recency(exclude_forks(repos if isinstance(repos, list) else []))
            self.view.set_repositories(records)
            self.surface.status = self.view.status_summary()
        except Exception as exc:
            logger.warning("could not load repositories for {}: {}", self.owner, exc)
            self.surface.status = FAILURE_STATUS
            self.surface.load_more_hidden = True
            return False

        logger.info("loaded {} repositories for {}", len(records), self.owner)
        return True
