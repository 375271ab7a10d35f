"""Light/dark theme preference.

The preference lives in a tiny JSON file so it survives between runs.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Literal, Optional

from loguru import logger

from .surface import Surface

Theme = Literal["light", "dark"]

THEME_KEY = "theme"
DEFAULT_THEME: Theme = "dark"
ICONS = {"light": "☀", "dark": "◐"}


class PreferenceStore:
    """Key-value preferences persisted as a JSON object in `path`."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.debug("ignoring unreadable preferences {}: {}", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class ThemeController:
    def __init__(self, surface: Surface, store: PreferenceStore):
        self.surface = surface
        self.store = store

    def get_preferred(self) -> Theme:
        saved = self.store.get(THEME_KEY)
        if saved == "light" or saved == "dark":
            return saved
        return DEFAULT_THEME

    def apply(self, theme: Theme) -> None:
        """Switch the page to `theme`, remember it and update the toggle glyph."""
        self.surface.theme = theme
        self.store.set(THEME_KEY, theme)
        self.surface.theme_icon = ICONS["light"] if theme == "light" else ICONS["dark"]

    def toggle(self) -> Theme:
        current = "light" if self.surface.theme == "light" else "dark"
        new: Theme = "dark" if current == "light" else "light"
        self.apply(new)
        return new

    def init(self) -> None:
        self.apply(self.get_preferred())
