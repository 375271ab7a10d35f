"""Repository card construction.

A card is a display-agnostic structure built from one repository record;
the page renderers in `ghfolio.core.render` decide how it looks.
"""
from __future__ import annotations
from typing import List, Literal

from pydantic import BaseModel, Field

from .formatting import DEFAULT_LOCALE, format_compact_number, format_date
from .repos import RepositoryRecord

NO_DESCRIPTION = "No description."


class Link(BaseModel):
    """An outbound link; always opened in a new context without a referrer."""

    label: str
    href: str
    target: str = "_blank"
    rel: str = "noreferrer"


class Badge(BaseModel):
    kind: Literal["language", "stars", "forks", "updated"]
    text: str


class CardView(BaseModel):
    """Displayable card for a single repository."""

    title: Link
    description: str
    meta: List[Badge] = Field(default_factory=list)
    actions: List[Link] = Field(default_factory=list)


def code_url(record: RepositoryRecord) -> str:
    """Browse-code URL: the default branch tree when known, else the repo page."""
    url = record.get("html_url") or ""
    branch = record.get("default_branch")
    return f"{url}/tree/{branch}" if branch else url


def render_card(record: RepositoryRecord, locale: str = DEFAULT_LOCALE) -> CardView:
    """Build the card for `record`.

    Args:
        record: Raw repository mapping from the GitHub API.
        locale: Babel locale for the counters and the update date.

    Returns:
        A `CardView` with title link, description, metadata badges and
        the "Open" / "Code" actions.
    """
    url = record.get("html_url") or ""

    meta: List[Badge] = []
    if record.get("language"):
        meta.append(Badge(kind="language", text=record["language"]))
    meta.append(Badge(kind="stars", text=f"★ {format_compact_number(record.get('stargazers_count') or 0, locale)}"))
    meta.append(Badge(kind="forks", text=f"⑂ {format_compact_number(record.get('forks_count') or 0, locale)}"))
    if record.get("updated_at"):
        meta.append(Badge(kind="updated", text=f"Updated {format_date(record['updated_at'], locale)}"))

    return CardView(
        title=Link(label=record.get("name") or "", href=url),
        description=record.get("description") or NO_DESCRIPTION,
        meta=meta,
        actions=[
            Link(label="Open", href=url),
            Link(label="Code", href=code_url(record)),
        ],
    )
