"""Content filters applied to resolved items.

Every filter is pure and idempotent, returns a new list and is a no-op when
disabled.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

from ytm_innertube.models.items import Item, PlaylistItem, SongItem
from ytm_innertube.models.pages import HomePage, HomeSection

ItemT = TypeVar("ItemT", bound=Item)

# Playlists of vertical short clips
SHORTS_PLAYLIST_PREFIX = "SS"


def filter_explicit(items: Iterable[ItemT], enabled: bool = True) -> list[ItemT]:
    """Drop items flagged explicit."""
    if not enabled:
        return list(items)
    return [item for item in items if not item.explicit]


def filter_video_songs(items: Iterable[ItemT], enabled: bool = False) -> list[ItemT]:
    """Drop songs that are music videos rather than audio tracks."""
    if not enabled:
        return list(items)
    return [
        item
        for item in items
        if not (isinstance(item, SongItem) and item.is_video_song)
    ]


def filter_shorts(items: Iterable[ItemT], enabled: bool = False) -> list[ItemT]:
    """Drop playlists of short clips."""
    if not enabled:
        return list(items)
    return [
        item
        for item in items
        if not (
            isinstance(item, PlaylistItem)
            and item.id.startswith(SHORTS_PLAYLIST_PREFIX)
        )
    ]


@dataclass(frozen=True)
class ContentFilters:
    """User content preferences.

    Attributes:
        hide_explicit: Drop explicit items.
        hide_video_songs: Drop music videos.
        hide_shorts: Drop playlists of short clips.
    """

    hide_explicit: bool = False
    hide_video_songs: bool = False
    hide_shorts: bool = False

    def apply(self, items: Iterable[ItemT]) -> list[ItemT]:
        result = filter_explicit(items, self.hide_explicit)
        result = filter_video_songs(result, self.hide_video_songs)
        return filter_shorts(result, self.hide_shorts)

    def apply_home(self, page: HomePage) -> HomePage:
        """Filter every home section, dropping sections left empty."""
        sections = []
        for section in page.sections:
            items = self.apply(section.items)
            if items:
                sections.append(
                    HomeSection(
                        title=section.title,
                        label=section.label,
                        thumbnail=section.thumbnail,
                        endpoint=section.endpoint,
                        items=items,
                    )
                )
        return page.model_copy(update={"sections": tuple(sections)})
