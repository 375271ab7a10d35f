"""Theme preference, input wiring and application startup tests."""

import asyncio
import json
from datetime import date
from unittest.mock import MagicMock

import httpx
import pytest

from ghfolio.core.app import Portfolio
from ghfolio.core.config import Settings
from ghfolio.core.github import make_client
from ghfolio.core.surface import Surface
from ghfolio.core.theme import PreferenceStore, ThemeController
from ghfolio.core.wiring import Debouncer, InputWiring, probe_local_photo


@pytest.fixture
def store(tmp_path):
    return PreferenceStore(tmp_path / "prefs" / "preferences.json")


class TestThemeController:
    """Test the persisted light/dark preference."""

    def test_absent_defaults_to_dark_then_toggle(self, store):
        """Test an absent slot means dark and one toggle persists light."""
        surface = Surface()
        theme = ThemeController(surface, store)
        assert theme.get_preferred() == "dark"

        theme.init()
        assert surface.theme == "dark"
        assert surface.theme_icon == "◐"

        assert theme.toggle() == "light"
        assert store.get("theme") == "light"
        assert surface.theme_icon == "☀"
        assert json.loads(store.path.read_text(encoding="utf-8")) == {"theme": "light"}

    def test_invalid_value_defaults_to_dark(self, store):
        """Test values other than light/dark are ignored."""
        store.set("theme", "solarized")
        assert ThemeController(Surface(), store).get_preferred() == "dark"

    def test_saved_light_is_used(self, store):
        """Test a stored light preference is applied at init."""
        store.set("theme", "light")
        surface = Surface()
        ThemeController(surface, store).init()
        assert surface.theme == "light"

    def test_corrupt_file_defaults_to_dark(self, store):
        """Test an unreadable preferences file behaves as absent."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")
        assert ThemeController(Surface(), store).get_preferred() == "dark"

    def test_toggle_without_attribute(self, store):
        """Test toggling with no applied theme treats the page as dark."""
        surface = Surface()
        ThemeController(surface, store).toggle()
        assert surface.theme == "light"

    def test_store_keeps_other_keys(self, store):
        """Test writing the theme leaves unrelated keys alone."""
        store.set("other", "value")
        store.set("theme", "dark")
        assert store.get("other") == "value"


class TestDebounce:
    """Test the debounced search loop."""

    def test_only_final_value_is_applied(self, store):
        """Test rapid edits collapse into one filter with the last value."""
        view = MagicMock()
        surface = Surface()
        wiring = InputWiring(surface, view, ThemeController(surface, store), delay=0.1)

        async def scenario():
            for value in ("p", "py", "pyt"):
                wiring.on_search_input(value)
                await asyncio.sleep(0.001)
            assert wiring.search_timer.pending
            view.apply_filter.assert_not_called()
            await asyncio.sleep(0.3)

        asyncio.run(scenario())
        view.apply_filter.assert_called_once_with("pyt")
        assert not wiring.search_timer.pending

    def test_cancel(self):
        """Test a cancelled debounce never fires."""
        calls = []

        async def scenario():
            debouncer = Debouncer(0.01, lambda: calls.append(1))
            debouncer.trigger()
            debouncer.cancel()
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert calls == []

    def test_clicks(self, store):
        """Test load-more and theme clicks reach their controllers."""
        view = MagicMock()
        surface = Surface()
        wiring = InputWiring(surface, view, ThemeController(surface, store))
        wiring.on_load_more_click()
        wiring.on_theme_toggle_click()
        view.load_more.assert_called_once_with()
        assert surface.theme == "light"


def run_probe(surface, handler=None):
    async def scenario():
        transport = httpx.MockTransport(handler or (lambda r: httpx.Response(404)))
        async with make_client(transport=transport) as client:
            return await probe_local_photo(surface, client)

    return asyncio.run(scenario())


class TestLocalPhotoProbe:
    """Test the local avatar preload."""

    def test_local_file(self, tmp_path):
        """Test a readable image becomes the avatar and is marked local."""
        photo = tmp_path / "me.jpg"
        photo.write_bytes(b"\xff\xd8\xff")
        surface = Surface()
        surface.avatar.src = "https://avatars/remote.png"
        surface.avatar.local_src = str(photo)

        assert run_probe(surface) is True
        assert surface.avatar.src == str(photo)
        assert surface.avatar.photo_source == "local"

    def test_missing_file_is_ignored(self, tmp_path):
        """Test a failed preload keeps the current avatar."""
        surface = Surface()
        surface.avatar.src = "https://avatars/remote.png"
        surface.avatar.local_src = str(tmp_path / "missing.jpg")

        assert run_probe(surface) is False
        assert surface.avatar.src == "https://avatars/remote.png"
        assert surface.avatar.photo_source is None

    def test_url_source(self):
        """Test an http image is preloaded through the client."""
        surface = Surface()
        surface.avatar.local_src = "https://example.com/me.png"
        assert run_probe(surface, lambda r: httpx.Response(200, content=b"png")) is True
        assert surface.avatar.is_local

    def test_no_local_source(self):
        """Test nothing happens without a configured local image."""
        surface = Surface()
        assert run_probe(surface) is False
        assert surface.avatar.src is None


def github_api(request):
    if request.url.path == "/users/octo":
        return httpx.Response(200, json={"avatar_url": "https://avatars/octo.png", "public_repos": 2})
    if request.url.path == "/users/octo/repos":
        return httpx.Response(200, json=[
            {"name": "alpha", "html_url": "https://github.com/octo/alpha", "pushed_at": "2024-05-01T00:00:00Z"},
            {"name": "beta", "html_url": "https://github.com/octo/beta", "pushed_at": "2024-06-01T00:00:00Z"},
            {"name": "gamma", "html_url": "https://github.com/octo/gamma", "fork": True},
        ])
    return httpx.Response(404)


class TestPortfolio:
    """Test application startup and interaction end to end."""

    def test_start_and_search(self, tmp_path):
        """Test startup order effects, local photo priority and a debounced search."""
        photo = tmp_path / "me.jpg"
        photo.write_bytes(b"img")
        settings = Settings(owner="octo", cache_dir=str(tmp_path / ".cache"), local_photo=str(photo), debounce_ms=10)

        async def scenario():
            async with make_client(transport=httpx.MockTransport(github_api)) as client:
                page = Portfolio(settings, client=client)
                assert await page.start() is True
                await page.settle()
                first = [c.title.label for c in page.surface.repo_grid]
                page.wiring.on_search_input("ALP")
                await page.settle()
                await page.aclose()
                return page, first

        page, first = asyncio.run(scenario())
        surface = page.surface
        assert first == ["beta", "alpha"]
        assert [c.title.label for c in surface.repo_grid] == ["alpha"]
        assert surface.status == "Showing 1 of 1."
        assert surface.year == str(date.today().year)
        assert surface.theme == "dark"
        assert surface.repo_count == "2"
        assert surface.avatar.src == str(photo)
        assert surface.avatar.photo_source == "local"
        assert (tmp_path / ".cache" / "preferences.json").exists()

    def test_close_waits_for_pending_photo(self, tmp_path):
        """Test closing the page cancels a slow photo preload and waits for it."""
        settings = Settings(
            owner="octo",
            cache_dir=str(tmp_path / ".cache"),
            local_photo="https://photos.example.com/me.png",
        )

        async def slow_photos(request):
            if request.url.host == "photos.example.com":
                await asyncio.sleep(10)
            return github_api(request)

        async def scenario():
            async with make_client(transport=httpx.MockTransport(slow_photos)) as client:
                page = Portfolio(settings, client=client)
                assert await page.start() is True
                assert not page.probe.done()
                await page.aclose()
                return page

        page = asyncio.run(scenario())
        assert page.probe.done()
        assert page.probe.cancelled()
        assert page.surface.avatar.src == "https://avatars/octo.png"
        assert page.surface.avatar.photo_source is None

    def test_owner_required(self):
        """Test a portfolio cannot be built without an owner."""
        with pytest.raises(ValueError):
            Portfolio(Settings())
