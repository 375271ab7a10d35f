"""Application context tying the portfolio components together.

Startup order is fixed: bind the surface, apply the theme, wire inputs,
start the local photo probe, then load the repositories.

Example:
    ```python
    import asyncio
    from ghfolio import Portfolio, load_settings

    async def main():
        settings = load_settings()
        settings.owner = "octocat"
        async with Portfolio(settings) as page:
            await page.start()
            page.wiring.on_search_input("python")
            await page.settle()
            print(page.surface.status)

    asyncio.run(main())
    ```
"""
from __future__ import annotations
import asyncio
import contextlib
from datetime import date
from typing import Callable, Optional

import httpx

from .config import Settings
from .github import make_client
from .loader import DataLoader
from .surface import Surface
from .theme import PreferenceStore, ThemeController
from .view import ViewController
from .wiring import InputWiring, probe_local_photo


class Portfolio:
    def __init__(
        self,
        settings: Settings,
        surface: Surface | None = None,
        store: PreferenceStore | None = None,
        client: httpx.AsyncClient | None = None,
        on_render: Callable[[Surface], None] | None = None,
    ):
        if not settings.owner:
            raise ValueError("a GitHub owner is required")
        self.settings = settings
        self.surface = surface or Surface()
        self.store = store or PreferenceStore(settings.preferences_path)
        self._owns_client = client is None
        self.client = client or make_client(settings.api_base_url)

        self.view = ViewController(self.surface, settings.page_size, settings.locale, on_render)
        self.theme = ThemeController(self.surface, self.store)
        self.wiring = InputWiring(self.surface, self.view, self.theme, settings.debounce_ms / 1000)
        self.loader = DataLoader(self.client, settings.owner, self.view, self.surface, settings.per_page)
        self.probe: Optional[asyncio.Task] = None

    def bind_surface(self) -> None:
        self.surface.year = str(date.today().year)
        if self.settings.local_photo:
            self.surface.avatar.local_src = self.settings.local_photo

    async def start(self) -> bool:
        """Initialize the page and run the initial load.

        Returns:
            Whether the repositories were loaded.
        """
        self.bind_surface()
        self.theme.init()
        self.probe = asyncio.create_task(probe_local_photo(self.surface, self.client))
        return await self.loader.load()

    async def settle(self) -> None:
        """Wait for the photo probe and any pending debounced search."""
        if self.probe is not None:
            await self.probe
        while self.wiring.search_timer.pending:
            await asyncio.sleep(self.wiring.search_timer.delay)

    async def aclose(self) -> None:
        if self.probe is not None and not self.probe.done():
            self.probe.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self.probe
        self.wiring.search_timer.cancel()
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "Portfolio":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
