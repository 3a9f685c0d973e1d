"""Fallback chains for item fields.

A chain is an ordered tuple of extractors. ``first_of`` tries them in turn
and returns the first non-empty value. Chains are declared per renderer
shape so each field's alternatives can be read (and tested) in one place.
"""

from collections.abc import Callable, Sequence
from typing import Any

from ytm_innertube.parsing.nodes import (
    FIXED_COLUMN,
    FLEX_COLUMN,
    OVERLAY_PLAY_ENDPOINT,
    dig,
    menu_navigation_endpoint,
    menu_items,
    thumbnail_url,
)

Extractor = Callable[[dict[str, Any]], Any]
Chain = Sequence[Extractor]


def at(*path: str | int) -> Extractor:
    """Extractor reading a fixed path."""

    def extract(data: dict[str, Any]) -> Any:
        return dig(data, *path)

    return extract


def thumbnail_at(key: str) -> Extractor:
    def extract(data: dict[str, Any]) -> Any:
        return thumbnail_url(data.get(key))

    return extract


def menu_endpoint_at(icon: str, *path: str) -> Extractor:
    def extract(data: dict[str, Any]) -> Any:
        return dig(menu_navigation_endpoint(menu_items(data), icon), *path)

    return extract


def first_of(data: dict[str, Any], chain: Chain) -> Any:
    """Value of the first extractor in ``chain`` that yields something."""
    for extractor in chain:
        value = extractor(data)
        if value is not None and value != "" and value != []:
            return value
    return None


# musicTwoRowItemRenderer

TWO_ROW_TITLE: Chain = (at("title", "runs", 0, "text"), at("title", "simpleText"))
TWO_ROW_ARTIST_NAME: Chain = (
    at("title", "runs", -1, "text"),
    at("title", "simpleText"),
)
TWO_ROW_THUMBNAIL: Chain = (thumbnail_at("thumbnailRenderer"),)
TWO_ROW_BROWSE_ID: Chain = (at("navigationEndpoint", "browseEndpoint", "browseId"),)
TWO_ROW_VIDEO_ID: Chain = (
    at("navigationEndpoint", "watchEndpoint", "videoId"),
    at("thumbnailOverlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint", "videoId"),
)
TWO_ROW_EPISODE_ID: Chain = (
    at("thumbnailOverlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint", "videoId"),
    at("navigationEndpoint", "watchEndpoint", "videoId"),
)
TWO_ROW_EPISODE_ENDPOINT: Chain = (
    at("thumbnailOverlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint"),
    at("navigationEndpoint", "watchEndpoint"),
)
TWO_ROW_WATCH_ENDPOINT: Chain = (
    at("navigationEndpoint", "watchEndpoint"),
    at("thumbnailOverlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint"),
)
TWO_ROW_PLAY_ENDPOINT: Chain = (
    at("thumbnailOverlay", *OVERLAY_PLAY_ENDPOINT, "watchPlaylistEndpoint"),
    at("thumbnailOverlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint"),
)
TWO_ROW_ALBUM_PLAYLIST_ID: Chain = (
    at(
        "thumbnailOverlay",
        *OVERLAY_PLAY_ENDPOINT,
        "watchPlaylistEndpoint",
        "playlistId",
    ),
    menu_endpoint_at("MUSIC_SHUFFLE", "watchPlaylistEndpoint", "playlistId"),
)

# musicResponsiveListItemRenderer

FIRST_TITLE_RUN = ("flexColumns", 0, FLEX_COLUMN, "text", "runs", 0)
CUSTOM_INDEX = ("customIndexColumn", "musicCustomIndexColumnRenderer")

RESPONSIVE_TITLE: Chain = (
    at("flexColumns", 0, FLEX_COLUMN, "text", "runs", 0, "text"),
    at("flexColumns", 0, FIXED_COLUMN, "text", "runs", 0, "text"),
)
RESPONSIVE_THUMBNAIL: Chain = (thumbnail_at("thumbnail"),)
RESPONSIVE_BROWSE_ID: Chain = (
    at("navigationEndpoint", "browseEndpoint", "browseId"),
    at(*FIRST_TITLE_RUN, "navigationEndpoint", "browseEndpoint", "browseId"),
)
RESPONSIVE_VIDEO_ID: Chain = (
    at("playlistItemData", "videoId"),
    at("navigationEndpoint", "watchEndpoint", "videoId"),
    at("overlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint", "videoId"),
    at(*FIRST_TITLE_RUN, "navigationEndpoint", "watchEndpoint", "videoId"),
)
RESPONSIVE_WATCH_ENDPOINT: Chain = (
    at("navigationEndpoint", "watchEndpoint"),
    at("overlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint"),
    at(*FIRST_TITLE_RUN, "navigationEndpoint", "watchEndpoint"),
)
RESPONSIVE_DURATION_TEXT: Chain = (
    at("fixedColumns", 0, FIXED_COLUMN, "text", "runs", 0, "text"),
    at("fixedColumns", 0, FIXED_COLUMN, "text", "simpleText"),
)
RESPONSIVE_PLAY_ENDPOINT: Chain = (
    at("overlay", *OVERLAY_PLAY_ENDPOINT, "watchPlaylistEndpoint"),
    at("navigationEndpoint", "watchPlaylistEndpoint"),
)
RESPONSIVE_ALBUM_PLAYLIST_ID: Chain = (
    menu_endpoint_at("MUSIC_SHUFFLE", "watchPlaylistEndpoint", "playlistId"),
    at("overlay", *OVERLAY_PLAY_ENDPOINT, "watchPlaylistEndpoint", "playlistId"),
)
RESPONSIVE_CHART_POSITION: Chain = (
    at(*CUSTOM_INDEX, "text", "runs", 0, "text"),
)
RESPONSIVE_CHART_CHANGE: Chain = (
    at(*CUSTOM_INDEX, "icon", "iconType"),
)

# musicMultiRowListItemRenderer

MULTI_ROW_VIDEO_ID: Chain = (
    at("onTap", "watchEndpoint", "videoId"),
    at("overlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint", "videoId"),
)
MULTI_ROW_TITLE: Chain = (at("title", "runs", 0, "text"),)
MULTI_ROW_THUMBNAIL: Chain = (thumbnail_at("thumbnail"),)

# musicCardShelfRenderer (search top result)

CARD_TITLE: Chain = (at("title", "runs", 0, "text"),)
CARD_THUMBNAIL: Chain = (thumbnail_at("thumbnail"),)
CARD_BROWSE_ID: Chain = (
    at("title", "runs", 0, "navigationEndpoint", "browseEndpoint", "browseId"),
    at("onTap", "browseEndpoint", "browseId"),
)
CARD_VIDEO_ID: Chain = (
    at("title", "runs", 0, "navigationEndpoint", "watchEndpoint", "videoId"),
    at("onTap", "watchEndpoint", "videoId"),
    at("thumbnailOverlay", *OVERLAY_PLAY_ENDPOINT, "watchEndpoint", "videoId"),
)
CARD_WATCH_ENDPOINT: Chain = (
    at("title", "runs", 0, "navigationEndpoint", "watchEndpoint"),
    at("onTap", "watchEndpoint"),
)

# playlistPanelVideoRenderer (watch queue rows)

PANEL_TITLE: Chain = (at("title", "runs", 0, "text"), at("title", "simpleText"))
PANEL_THUMBNAIL: Chain = (at("thumbnail", "thumbnails", -1, "url"),)
PANEL_DURATION_TEXT: Chain = (
    at("lengthText", "runs", 0, "text"),
    at("lengthText", "simpleText"),
)
