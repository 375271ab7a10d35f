"""In-memory display surface.

Every region the portfolio writes to is a plain attribute here; renderers
serialize a `Surface` into JSON, Markdown or HTML.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .cards import CardView

LOCAL_PHOTO = "local"


@dataclass
class Avatar:
    """Avatar image region.

    Attributes:
        src: Image currently displayed.
        local_src: Local image hint, preferred over the remote avatar when it loads.
        photo_source: Set to ``"local"`` once the local image is active.
    """

    src: Optional[str] = None
    local_src: Optional[str] = None
    photo_source: Optional[str] = None

    @property
    def is_local(self) -> bool:
        return self.photo_source == LOCAL_PHOTO


@dataclass
class Surface:
    repo_grid: List[CardView] = field(default_factory=list)
    status: str = ""
    search_value: str = ""
    load_more_hidden: bool = True
    repo_count: str = ""
    avatar: Avatar = field(default_factory=Avatar)
    year: str = ""
    theme: Optional[str] = None
    theme_icon: str = ""
