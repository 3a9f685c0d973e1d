"""Data models for ytm_innertube.

Public API:
    SongItem, AlbumItem, PlaylistItem, ArtistItem, PodcastItem, EpisodeItem
        - The resolved item variants (AnyItem is their tagged union)
    WatchEndpoint, BrowseEndpoint - Opaque, round-trippable endpoints
    Page - Items plus continuation token
    ItemKind, SearchFilter - Item discriminator and search categories

Page-specific models live in ytm_innertube.models.pages.
"""

from ytm_innertube.models.cancel import CancelToken
from ytm_innertube.models.endpoints import BrowseEndpoint, WatchEndpoint
from ytm_innertube.models.enums import ItemKind, LibraryFilter, SearchFilter, VideoType
from ytm_innertube.models.items import (
    AlbumItem,
    AlbumRef,
    AnyItem,
    Artist,
    ArtistItem,
    EpisodeItem,
    Item,
    PlaylistItem,
    PodcastItem,
    SongItem,
)
from ytm_innertube.models.pages import Page

__all__ = [
    "AlbumItem",
    "AlbumRef",
    "AnyItem",
    "Artist",
    "ArtistItem",
    "BrowseEndpoint",
    "CancelToken",
    "EpisodeItem",
    "Item",
    "ItemKind",
    "LibraryFilter",
    "Page",
    "PlaylistItem",
    "PodcastItem",
    "SearchFilter",
    "SongItem",
    "VideoType",
    "WatchEndpoint",
]
