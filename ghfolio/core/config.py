"""Configuration management for ghfolio.

This module handles loading and merging configuration from multiple sources:
1. Environment variables (highest priority)
2. TOML configuration file (medium priority)
3. Default values (lowest priority)

Command-line flags are applied on top of the returned `Settings` by the CLI.

Example config.toml:
    ```toml
    [github]
    owner = "octocat"
    per_page = 100

    [display]
    locale = "pt_BR"
    page_size = 9
    debounce_ms = 120
    local_photo = "assets/me.jpg"

    [cache]
    dir = ".cache"
    ```

Environment Variables:
    GITHUB_USER: Override the portfolio owner
    GITHUB_API_URL: Override the GitHub API base URL
    GHFOLIO_LOCALE: Override the display locale
    GHFOLIO_LOCAL_PHOTO: Override the local avatar image
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os
import tomllib  # Python 3.11+

from dotenv import load_dotenv

load_dotenv()

PREFERENCES_FILE = "preferences.json"


@dataclass
class Settings:
    """Runtime configuration derived from `config.toml` and environment.

    Values are merged with precedence: environment > config file > defaults.

    Attributes:
        owner: GitHub user whose repositories make up the portfolio.
        api_base_url: Base URL of the GitHub REST API.
        per_page: How many repositories to request (a single page).
        locale: Babel locale used for dates and compact numbers.
        page_size: Cards shown initially and added per "load more".
        debounce_ms: Pause required after a search edit before filtering.
        local_photo: Local image (path or URL) preferred over the remote avatar.
        cache_dir: Directory holding the persisted preferences file.
    """

    # GitHub
    owner: str | None = None
    api_base_url: str = "https://api.github.com"
    per_page: int = 100

    # Display
    locale: str = "en_US"
    page_size: int = 9
    debounce_ms: int = 120
    local_photo: str | None = None

    # Persistence
    cache_dir: str = ".cache"

    @property
    def preferences_path(self) -> Path:
        """Location of the JSON file holding the theme preference."""
        return Path(self.cache_dir) / PREFERENCES_FILE


def load_config(path: str = "config.toml") -> dict:
    """Load a TOML config file into a dictionary.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        Dictionary containing configuration data, or empty dict if file missing.
    """
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("rb") as f:
        return tomllib.load(f)


def load_settings(config_path: str | None = None) -> Settings:
    """Create a `Settings` object from config file and environment variables.

    Args:
        config_path: Path to TOML config file. Defaults to "config.toml".

    Returns:
        Settings object with merged configuration from all sources.

    Example:
        ```python
        from ghfolio.core.config import load_settings

        settings = load_settings()
        settings = load_settings("custom.toml")
        ```
    """
    cfg = load_config(config_path or "config.toml")

    s = Settings()

    # github section
    gh = cfg.get("github", {})
    s.owner = os.getenv("GITHUB_USER", gh.get("owner", s.owner))
    s.api_base_url = os.getenv("GITHUB_API_URL", gh.get("api_base_url", s.api_base_url))
    s.per_page = int(gh.get("per_page", s.per_page))

    # display section
    disp = cfg.get("display", {})
    s.locale = os.getenv("GHFOLIO_LOCALE", disp.get("locale", s.locale))
    s.page_size = int(disp.get("page_size", s.page_size))
    s.debounce_ms = int(disp.get("debounce_ms", s.debounce_ms))
    s.local_photo = os.getenv("GHFOLIO_LOCAL_PHOTO", disp.get("local_photo", s.local_photo))

    # cache section
    ch = cfg.get("cache", {})
    s.cache_dir = ch.get("dir", s.cache_dir)

    return s
