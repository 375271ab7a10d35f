"""Core functionality for the GitHub portfolio page.

This module contains the core business logic for:
- GitHub API interactions
- Repository matching, ordering and card construction
- View state, theme preference and input wiring
- Configuration management
"""

from .app import Portfolio
from .cards import CardView, render_card
from .config import Settings, load_settings
from .formatting import format_compact_number, format_date
from .github import GitHubError, fetch_profile, fetch_user_repos
from .loader import DataLoader
from .repos import RepositoryRecord, exclude_forks, matches, sort_by_recency
from .surface import Avatar, Surface
from .theme import PreferenceStore, ThemeController
from .view import ViewController, ViewState
from .wiring import Debouncer, InputWiring, probe_local_photo

__all__ = [
    "Portfolio",
    "CardView",
    "render_card",
    "Settings",
    "load_settings",
    "format_compact_number",
    "format_date",
    "GitHubError",
    "fetch_profile",
    "fetch_user_repos",
    "DataLoader",
    "RepositoryRecord",
    "exclude_forks",
    "matches",
    "sort_by_recency",
    "Avatar",
    "Surface",
    "PreferenceStore",
    "ThemeController",
    "ViewController",
    "ViewState",
    "Debouncer",
    "InputWiring",
    "probe_local_photo",
]
