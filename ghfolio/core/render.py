"""Serialize a display surface as JSON, Markdown or a standalone HTML page."""
from __future__ import annotations
from html import escape
from typing import Any, Dict, List
import json

from .cards import CardView, Link
from .surface import Surface


def to_dict(surface: Surface) -> Dict[str, Any]:
    return {
        "status": surface.status,
        "repo_count": surface.repo_count,
        "load_more": not surface.load_more_hidden,
        "search": surface.search_value,
        "avatar": surface.avatar.src,
        "photo_source": surface.avatar.photo_source,
        "theme": surface.theme,
        "year": surface.year,
        "cards": [card.model_dump() for card in surface.repo_grid],
    }


def to_json(surface: Surface) -> str:
    return json.dumps(to_dict(surface), ensure_ascii=False, indent=2)


def to_markdown(surface: Surface) -> str:
    """Render the page as a Markdown list, one bullet per card."""
    lines = [f"_{surface.status}_", ""]
    for card in surface.repo_grid:
        meta = " · ".join(b.text for b in card.meta)
        actions = " ".join(f"[{a.label}]({a.href})" for a in card.actions)
        lines.append(f"- [{card.title.label}]({card.title.href}): {card.description}")
        lines.append(f"  {meta} — {actions}")
    if not surface.load_more_hidden:
        lines += ["", "_More repositories available._"]
    return "\n".join(lines)


def _anchor(link: Link, css: str = "") -> str:
    cls = f' class="{css}"' if css else ""
    return (
        f'<a{cls} href="{escape(link.href)}" target="{link.target}" rel="{link.rel}">'
        f"{escape(link.label)}</a>"
    )


def _card_html(card: CardView) -> str:
    meta: List[str] = []
    for badge in card.meta:
        tag = "code" if badge.kind == "language" else "span"
        meta.append(f"<{tag}>{escape(badge.text)}</{tag}>")
    return (
        '<article class="repo-card">'
        f'<h3 class="repo-card__title">{_anchor(card.title)}</h3>'
        f'<p class="repo-card__desc">{escape(card.description)}</p>'
        f'<div class="repo-card__meta">{"".join(meta)}</div>'
        '<div class="repo-card__actions">'
        f'{_anchor(card.actions[0], "btn btn--secondary")}{_anchor(card.actions[1], "btn btn--ghost")}'
        "</div></article>"
    )


def to_html(surface: Surface) -> str:
    """Render a self-contained HTML document mirroring the page regions."""
    avatar = surface.avatar
    hidden = " hidden" if surface.load_more_hidden else ""
    cards = "\n".join(_card_html(c) for c in surface.repo_grid)
    return f"""<!doctype html>
<html lang="en" data-theme="{escape(surface.theme or '')}">
<head><meta charset="utf-8"><title>Portfolio</title></head>
<body>
<header>
<img id="avatarImg" src="{escape(avatar.src or '')}" data-local-src="{escape(avatar.local_src or '')}" data-photo-source="{escape(avatar.photo_source or '')}" alt="">
<button id="themeToggle"><span id="themeIcon">{escape(surface.theme_icon)}</span></button>
<span id="repoCount">{escape(surface.repo_count)}</span>
</header>
<main>
<input id="repoSearch" type="search" value="{escape(surface.search_value)}">
<p id="repoStatus">{escape(surface.status)}</p>
<section id="repoGrid">
{cards}
</section>
<button id="loadMoreBtn"{hidden}>Load more</button>
</main>
<footer><span id="year">{escape(surface.year)}</span></footer>
</body>
</html>
"""
