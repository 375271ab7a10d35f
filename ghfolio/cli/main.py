"""Command-line interface for ghfolio.

This module builds the portfolio page for a GitHub user. It parses
command-line arguments, loads the profile and repositories via the GitHub
API, replays the requested interactions (search, load more, theme toggle)
and writes the page as JSON, Markdown or HTML.

Usage:
    ```bash
    # Basic usage
    ghfolio octocat

    # Search, show two pages and write an HTML file
    ghfolio octocat --query cli --more 1 --format html --out site/index.html

    # Interactive session: type to search, :more, :theme, :quit
    ghfolio octocat --interactive
    ```

Configuration:
    The CLI supports configuration via:
    - Command-line arguments (highest priority)
    - Environment variables
    - config.toml file (lowest priority)
"""
from __future__ import annotations
from typing import List, Optional
import argparse, asyncio, os, sys

from loguru import logger

from ..core.app import Portfolio
from ..core.config import Settings, load_settings
from ..core.render import to_html, to_json, to_markdown
from ..core.surface import Surface

RENDERERS = {"json": to_json, "md": to_markdown, "html": to_html}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ghfolio", description="Render a GitHub user's repositories as a portfolio page.")

    p.add_argument("owner", nargs="?", help="GitHub username (defaults to GITHUB_USER / config.toml)")
    p.add_argument("--query", default="", help="Search text applied after loading")
    p.add_argument("--more", type=int, default=0, metavar="N", help="Click 'load more' N times")
    p.add_argument("--toggle-theme", action="store_true", help="Toggle and persist the light/dark theme")
    p.add_argument("--format", choices=sorted(RENDERERS), default="md", help="Output format")
    p.add_argument("--out", help="Write to file instead of stdout")
    p.add_argument("--locale", help="Babel locale for dates and counters (e.g. pt_BR)")
    p.add_argument("--local-photo", help="Local avatar image (path or URL) preferred over the GitHub one")
    p.add_argument("--interactive", action="store_true", help="Type to search; :more, :theme and :quit as commands")
    p.add_argument("--config", help="Path to config.toml (defaults to ./config.toml if present)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return p


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Layer CLI flags over the loaded settings (CLI > env/config > defaults)."""
    if args.owner:
        settings.owner = args.owner
    if args.locale:
        settings.locale = args.locale
    if args.local_photo:
        settings.local_photo = args.local_photo
    return settings


def _print_page(surface: Surface) -> None:
    print(to_markdown(surface), flush=True)


async def interactive(page: Portfolio) -> None:
    """Read lines from stdin; each one replaces the search box contents."""
    while True:
        try:
            line = await asyncio.to_thread(input, "search> ")
        except EOFError:
            break
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":more":
            page.wiring.on_load_more_click()
        elif cmd == ":theme":
            page.wiring.on_theme_toggle_click()
            print(f"theme: {page.surface.theme} {page.surface.theme_icon}")
        else:
            page.wiring.on_search_input(line)
            await page.settle()


async def run(settings: Settings, args: argparse.Namespace) -> tuple[bool, Surface]:
    """Start the page, replay the requested interactions and return the final surface."""
    on_render = _print_page if args.interactive else None
    async with Portfolio(settings, on_render=on_render) as page:
        loaded = await page.start()
        await page.settle()

        if args.interactive:
            if not loaded:
                print(page.surface.status)
            await interactive(page)
            return loaded, page.surface

        if args.query:
            page.wiring.on_search_input(args.query)
            await page.settle()
        for _ in range(max(args.more, 0)):
            page.wiring.on_load_more_click()
        if args.toggle_theme:
            page.wiring.on_theme_toggle_click()
        return loaded, page.surface


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    Raises:
        SystemExit: On argument errors, a missing owner, or when the
            repositories could not be loaded (exit code 1, after the page
            with the failure status has been written).
    """
    p = build_parser()
    args = p.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    settings = apply_overrides(load_settings(args.config or "config.toml"), args)
    if not settings.owner:
        p.error("an owner is required (argument, GITHUB_USER or [github] owner in config.toml)")

    loaded, surface = asyncio.run(run(settings, args))
    if args.interactive:
        return

    payload = RENDERERS[args.format](surface)
    if args.out:
        os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(payload)
        print(f"wrote {args.out} ({len(surface.repo_grid)} repos)")
    else:
        print(payload)

    if not loaded:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
