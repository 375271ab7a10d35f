"""GitHub portfolio page.

Fetches a user's public repositories, renders them as searchable cards with
"load more" pagination, and remembers a light/dark theme preference.
This package can be used both as a command-line tool and as a Python SDK.

Features:
    - Concurrent profile and repository fetch from the GitHub API
    - Fork exclusion and most-recent-activity ordering
    - Case-insensitive search with a debounced input loop
    - Locale-aware dates and compact counters
    - JSON, Markdown and HTML page output

Quick Start:
    ```python
    import ghfolio

    ghfolio.matches({"name": "dotfiles"}, "DOT")        # True
    ghfolio.format_compact_number(1500, locale="pt_BR")  # "1,5 mil"
    card = ghfolio.render_card(repo)
    ```

CLI Usage:
    ```bash
    ghfolio octocat --format md
    ghfolio octocat --query python --more 1 --format html --out site/index.html
    ghfolio octocat --interactive
    ```
"""

__version__ = "0.1.0"

# Re-export main functionality for easy importing
from .core import (
    Portfolio,
    CardView,
    render_card,
    Settings,
    load_settings,
    format_compact_number,
    format_date,
    matches,
    sort_by_recency,
    Surface,
)

__all__ = [
    "Portfolio",
    "CardView",
    "render_card",
    "Settings",
    "load_settings",
    "format_compact_number",
    "format_date",
    "matches",
    "sort_by_recency",
    "Surface",
]
