"""View state: the loaded repositories, the filtered subset and the page window.

`ViewController` owns the state and is the only writer of the card grid,
the status line and the "load more" visibility.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from loguru import logger

from .cards import render_card
from .formatting import DEFAULT_LOCALE
from .repos import RepositoryRecord, matches, sort_by_recency
from .surface import Surface

PAGE_SIZE = 9
EMPTY_STATUS = "No repositories found."


def showing(shown: int, total: int) -> str:
    return f"Showing {shown} of {total}."


@dataclass
class ViewState:
    """Repositories known to the page.

    Attributes:
        all_repositories: Fork-free records ordered by recency, None until loaded.
        visible_subset: Records matching the current query, ordered by recency.
        visible_count: Size of the page window; clamped only when slicing.
    """

    all_repositories: Optional[Tuple[RepositoryRecord, ...]] = None
    visible_subset: List[RepositoryRecord] = field(default_factory=list)
    visible_count: int = PAGE_SIZE


class ViewController:
    def __init__(
        self,
        surface: Surface,
        page_size: int = PAGE_SIZE,
        locale: str = DEFAULT_LOCALE,
        on_render: Callable[[Surface], None] | None = None,
    ):
        self.surface = surface
        self.page_size = page_size
        self.locale = locale
        self.on_render = on_render
        self.state = ViewState(visible_count=page_size)

    def set_repositories(self, records: Sequence[RepositoryRecord]) -> None:
        """Install the loaded records as both the full set and the visible subset."""
        self.state.all_repositories = tuple(records)
        self.state.visible_subset = list(records)
        self.render()

    def apply_filter(self, query: str | None) -> None:
        """Filter by `query`, re-sort, and go back to the first page."""
        repos = self.state.all_repositories or ()
        self.state.visible_subset = sort_by_recency(r for r in repos if matches(r, query))
        self.state.visible_count = self.page_size
        logger.debug("filter {!r}: {} of {} repositories", query, len(self.state.visible_subset), len(repos))
        self.render()

    def load_more(self) -> None:
        self.state.visible_count += self.page_size
        self.render()

    def render(self) -> None:
        """Replace the card grid with the current window and refresh the status."""
        subset = self.state.visible_subset
        window = subset[: self.state.visible_count]
        self.surface.repo_grid = [render_card(r, self.locale) for r in window]

        total, shown = len(subset), len(window)
        if total == 0:
            self.surface.load_more_hidden = True
            self.surface.status = EMPTY_STATUS
        else:
            self.surface.load_more_hidden = shown == total
            self.surface.status = showing(shown, total)

        if self.on_render is not None:
            self.on_render(self.surface)

    def status_summary(self) -> str:
        total = len(self.state.visible_subset)
        return showing(min(self.state.visible_count, total), total)
