"""User interaction wiring: debounced search, load more, theme toggle, avatar probe."""
from __future__ import annotations
import asyncio
from pathlib import Path
from typing import Callable

import httpx
from loguru import logger

from .surface import LOCAL_PHOTO, Surface
from .theme import ThemeController
from .view import ViewController

SEARCH_DEBOUNCE = 0.12


class Debouncer:
    """Runs `callback` once `delay` seconds pass without another `trigger()`.

    Must be triggered from within a running event loop.
    """

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self.callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self.callback()


class InputWiring:
    """Binds search edits, "load more" clicks and theme clicks to the controllers."""

    def __init__(
        self,
        surface: Surface,
        view: ViewController,
        theme: ThemeController,
        delay: float = SEARCH_DEBOUNCE,
    ):
        self.surface = surface
        self.view = view
        self.theme = theme
        self.search_timer = Debouncer(delay, self._run_search)

    def _run_search(self) -> None:
        # read at fire time so only the value after the pause counts
        self.view.apply_filter(self.surface.search_value)

    def on_search_input(self, value: str) -> None:
        self.surface.search_value = value
        self.search_timer.trigger()

    def on_load_more_click(self) -> None:
        self.view.load_more()

    def on_theme_toggle_click(self) -> None:
        self.theme.toggle()


async def _preload(src: str, client: httpx.AsyncClient) -> None:
    if src.startswith(("http://", "https://")):
        resp = await client.get(src)
        resp.raise_for_status()
        return
    data = await asyncio.to_thread(Path(src).read_bytes)
    if not data:
        raise ValueError(f"empty image: {src}")


async def probe_local_photo(surface: Surface, client: httpx.AsyncClient) -> bool:
    """Switch the avatar to the configured local image if it can be loaded.

    Failures are ignored; whatever avatar is already shown stays.

    Returns:
        True when the local image became the avatar.
    """
    src = surface.avatar.local_src
    if not src:
        return False
    try:
        await _preload(src, client)
    except Exception as exc:
        logger.debug("local photo {} unavailable: {}", src, exc)
        return False
    surface.avatar.src = src
    surface.avatar.photo_source = LOCAL_PHOTO
    return True
