"""Repository record helpers: search matching, recency ordering, fork filtering.

Records are the raw dictionaries returned by the GitHub REST API and are
never mutated here.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Iterable, List, Optional, TypedDict

from .formatting import parse_timestamp

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class RepositoryRecord(TypedDict, total=False):
    """Fields of a GitHub repository payload that the portfolio reads."""

    name: str
    full_name: str
    html_url: str
    default_branch: Optional[str]
    description: Optional[str]
    language: Optional[str]
    topics: List[str]
    stargazers_count: int
    forks_count: int
    updated_at: Optional[str]
    pushed_at: Optional[str]
    fork: bool


def _haystack(record: RepositoryRecord) -> str:
    parts = [
        record.get("name"),
        record.get("full_name"),
        record.get("description"),
        record.get("language"),
        *(record.get("topics") or []),
    ]
    return " ".join(str(p) for p in parts if p).lower()


def matches(record: RepositoryRecord, query: str | None) -> bool:
    """Return True when `query` is a case-insensitive substring of the record's text.

    The searched text is the name, full name, description, language and
    topics, with absent fields skipped. A blank query matches everything.
    """
    if not query or not query.strip():
        return True
    return query.lower().strip() in _haystack(record)


def recency_key(record: RepositoryRecord) -> datetime:
    """Last push, else last update, else the epoch."""
    stamp = record.get("pushed_at") or record.get("updated_at")
    return parse_timestamp(stamp) or EPOCH


def sort_by_recency(records: Iterable[RepositoryRecord]) -> List[RepositoryRecord]:
    """Return a new list ordered by most recent activity first.

    `sorted` is stable, so records with equal keys keep their input order.
    """
    return sorted(records, key=recency_key, reverse=True)


def exclude_forks(records: Iterable[RepositoryRecord]) -> List[RepositoryRecord]:
    """Drop every record flagged as a fork."""
    return [r for r in records if not r.get("fork")]
