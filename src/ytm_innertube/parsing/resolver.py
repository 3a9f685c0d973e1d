"""Resolve renderer nodes into domain items.

``resolve`` picks exactly one variant per node from its precomputed
capabilities, gathers the fields through fallback chains and validates the
result. A node whose required fields cannot be found yields None and is
logged at DEBUG; it never affects its siblings.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ytm_innertube.config import BrowseIdHeuristics
from ytm_innertube.models.endpoints import WatchEndpoint
from ytm_innertube.models.enums import IconType, ItemKind, PageType
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
from ytm_innertube.parsing import fields as f
from ytm_innertube.parsing.nodes import (
    ItemNode,
    NodeShape,
    Run,
    dig,
    flex_column_runs,
    has_explicit_badge,
    has_menu_icon,
    library_tokens,
    menu_items,
    menu_service_token,
    menu_watch_playlist_endpoint,
    odd_elements,
    run_browse_id,
    run_page_type,
    runs_of,
    split_by_separator,
)
from ytm_innertube.utils.text import parse_duration, parse_int

logger = logging.getLogger(__name__)

# Leading type labels of unfiltered search results ("Song • Artist • ...")
TYPE_LABELS = frozenset(
    {
        "Song",
        "Video",
        "Album",
        "Single",
        "EP",
        "Playlist",
        "Artist",
        "Podcast",
        "Episode",
    }
)

_MODELS: dict[ItemKind, type[Item]] = {
    ItemKind.SONG: SongItem,
    ItemKind.ALBUM: AlbumItem,
    ItemKind.PLAYLIST: PlaylistItem,
    ItemKind.ARTIST: ArtistItem,
    ItemKind.PODCAST: PodcastItem,
    ItemKind.EPISODE: EpisodeItem,
}


@dataclass(frozen=True)
class ResolutionContext:
    """Page-level facts that items on that page inherit.

    Attributes:
        heuristics: Browse id prefix table for run disambiguation.
        album: Album stamped onto songs that do not name one (album pages).
        podcast: Podcast stamped onto episodes (podcast pages).
        thumbnail: Thumbnail for songs that carry none (album track lists).
    """

    heuristics: BrowseIdHeuristics = field(default_factory=BrowseIdHeuristics)
    album: AlbumRef | None = None
    podcast: PodcastItem | None = None
    thumbnail: str | None = None


DEFAULT_CONTEXT = ResolutionContext()


# -- Subtitle run helpers -----------------------------------------------------


def _artist(run: Run) -> Artist:
    return Artist(name=run.get("text", ""), id=run_browse_id(run))


def artists_from_runs(runs: list[Run], ctx: ResolutionContext) -> list[Artist]:
    """Runs linking to an artist or channel, by browse id prefix."""
    return [
        _artist(run)
        for run in runs
        if ctx.heuristics.is_artist_id(run_browse_id(run))
        or (
            run_browse_id(run) is not None
            and not ctx.heuristics.is_album_id(run_browse_id(run))
            and run_page_type(run) in (None, PageType.ARTIST, PageType.USER_CHANNEL)
        )
    ]


def album_from_runs(runs: Iterable[Run], ctx: ResolutionContext) -> AlbumRef | None:
    for run in runs:
        browse_id = run_browse_id(run)
        if ctx.heuristics.is_album_id(browse_id):
            return AlbumRef(name=run.get("text", ""), id=browse_id)
    return None


def podcast_from_runs(runs: Iterable[Run]) -> AlbumRef | None:
    for run in runs:
        if run_page_type(run) == PageType.PODCAST and run_browse_id(run):
            return AlbumRef(name=run.get("text", ""), id=run_browse_id(run))
    return None


def _without_type_label(groups: list[list[Run]]) -> list[list[Run]]:
    """Drop a leading "Song"/"Album"/... group of unfiltered search results."""
    if len(groups) > 1 and len(groups[0]) == 1:
        first = groups[0][0]
        if first.get("text") in TYPE_LABELS and run_browse_id(first) is None:
            return groups[1:]
    return groups


def _plain_artists(runs: list[Run]) -> list[Artist]:
    return [_artist(run) for run in odd_elements(runs) if run.get("text")]


def _watch_endpoint(data: dict[str, Any], chain: f.Chain) -> WatchEndpoint | None:
    return WatchEndpoint.from_node(f.first_of(data, chain))


def _explicit(data: dict[str, Any]) -> bool:
    return has_explicit_badge(data.get("badges")) or has_explicit_badge(
        data.get("subtitleBadges")
    )


def _tokens(data: dict[str, Any]) -> dict[str, str | None]:
    tokens = library_tokens(menu_items(data))
    return {"library_add_token": tokens.add, "library_remove_token": tokens.remove}


def _menu_endpoints(data: dict[str, Any]) -> dict[str, Any]:
    items = menu_items(data)
    return {
        "shuffle_endpoint": menu_watch_playlist_endpoint(items, IconType.SHUFFLE),
        "radio_endpoint": menu_watch_playlist_endpoint(items, IconType.RADIO),
    }


# -- musicTwoRowItemRenderer --------------------------------------------------


def _two_row_song(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = odd_elements(runs_of(data.get("subtitle")))
    artists = artists_from_runs(subtitle, ctx)
    if not artists and subtitle:
        artists = [Artist(name=subtitle[0].get("text", ""))]
    return {
        "id": f.first_of(data, f.TWO_ROW_VIDEO_ID),
        "title": f.first_of(data, f.TWO_ROW_TITLE),
        "thumbnail": f.first_of(data, f.TWO_ROW_THUMBNAIL) or ctx.thumbnail,
        "artists": artists,
        "album": album_from_runs(subtitle, ctx) or ctx.album,
        "explicit": _explicit(data),
        "music_video_type": node.music_video_type,
        "endpoint": _watch_endpoint(data, f.TWO_ROW_WATCH_ENDPOINT),
        **_tokens(data),
    }


def _two_row_album(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = runs_of(data.get("subtitle"))
    artists = artists_from_runs(subtitle, ctx) or _plain_artists(subtitle)[1:]
    return {
        "id": f.first_of(data, f.TWO_ROW_BROWSE_ID),
        "title": f.first_of(data, f.TWO_ROW_TITLE),
        "thumbnail": f.first_of(data, f.TWO_ROW_THUMBNAIL),
        "playlist_id": f.first_of(data, f.TWO_ROW_ALBUM_PLAYLIST_ID),
        "artists": artists or None,
        "year": parse_int(subtitle[-1].get("text")) if subtitle else None,
        "explicit": _explicit(data),
    }


def _two_row_playlist(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    browse_id = f.first_of(data, f.TWO_ROW_BROWSE_ID)
    subtitle = runs_of(data.get("subtitle"))
    authors = artists_from_runs(subtitle, ctx)
    author = authors[0] if authors else (_artist(subtitle[0]) if subtitle else None)
    return {
        "id": ctx.heuristics.strip_playlist_prefix(browse_id) if browse_id else None,
        "title": f.first_of(data, f.TWO_ROW_TITLE),
        "thumbnail": f.first_of(data, f.TWO_ROW_THUMBNAIL),
        "author": author,
        "song_count_text": subtitle[-1].get("text") if len(subtitle) > 1 else None,
        "play_endpoint": _watch_endpoint(data, f.TWO_ROW_PLAY_ENDPOINT),
        "is_editable": has_menu_icon(menu_items(data), IconType.EDIT),
        **_menu_endpoints(data),
    }


def _two_row_artist(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    browse_id = f.first_of(data, f.TWO_ROW_BROWSE_ID)
    return {
        "id": browse_id,
        "title": f.first_of(data, f.TWO_ROW_ARTIST_NAME),
        "thumbnail": f.first_of(data, f.TWO_ROW_THUMBNAIL),
        "channel_id": browse_id if ctx.heuristics.is_artist_id(browse_id) else None,
        **_menu_endpoints(data),
    }


def _two_row_podcast(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = runs_of(data.get("subtitle"))
    return {
        "id": f.first_of(data, f.TWO_ROW_BROWSE_ID),
        "title": f.first_of(data, f.TWO_ROW_TITLE),
        "thumbnail": f.first_of(data, f.TWO_ROW_THUMBNAIL),
        "author": _artist(subtitle[0]) if subtitle else None,
        "play_endpoint": _watch_endpoint(data, f.TWO_ROW_PLAY_ENDPOINT),
        "shuffle_endpoint": menu_watch_playlist_endpoint(
            menu_items(data), IconType.SHUFFLE
        ),
        **_tokens(data),
    }


def _two_row_episode(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = runs_of(data.get("subtitle"))
    podcast = podcast_from_runs(subtitle) or _podcast_ref(ctx)
    return {
        "id": f.first_of(data, f.TWO_ROW_EPISODE_ID),
        "title": f.first_of(data, f.TWO_ROW_TITLE),
        "thumbnail": f.first_of(data, f.TWO_ROW_THUMBNAIL),
        "author": _podcast_author(ctx, subtitle),
        "podcast": podcast,
        "explicit": _explicit(data),
        "endpoint": _watch_endpoint(data, f.TWO_ROW_EPISODE_ENDPOINT),
        **_tokens(data),
    }


# -- musicResponsiveListItemRenderer ------------------------------------------


def _responsive_song(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    video_id = f.first_of(data, f.RESPONSIVE_VIDEO_ID)
    subtitle = flex_column_runs(data, 1)
    groups = _without_type_label(split_by_separator(subtitle))

    artists = artists_from_runs(subtitle, ctx)
    if not artists and groups:
        artists = _plain_artists(groups[0])

    album = (
        album_from_runs(subtitle, ctx)
        or album_from_runs(flex_column_runs(data, 2), ctx)
        or ctx.album
    )
    duration_text = f.first_of(data, f.RESPONSIVE_DURATION_TEXT)
    if duration_text is None and len(groups) > 1 and groups[-1]:
        duration_text = groups[-1][0].get("text")

    endpoint = _watch_endpoint(data, f.RESPONSIVE_WATCH_ENDPOINT)
    if endpoint is None and video_id:
        endpoint = WatchEndpoint(video_id=video_id)

    return {
        "id": video_id,
        "title": f.first_of(data, f.RESPONSIVE_TITLE),
        "thumbnail": f.first_of(data, f.RESPONSIVE_THUMBNAIL) or ctx.thumbnail,
        "artists": artists,
        "album": album,
        "duration": parse_duration(duration_text),
        "explicit": _explicit(data),
        "music_video_type": node.music_video_type,
        "chart_position": parse_int(f.first_of(data, f.RESPONSIVE_CHART_POSITION)),
        "chart_change": f.first_of(data, f.RESPONSIVE_CHART_CHANGE),
        "endpoint": endpoint,
        "set_video_id": dig(data, "playlistItemData", "playlistSetVideoId"),
        "history_remove_token": menu_service_token(
            menu_items(data), IconType.REMOVE_FROM_HISTORY
        ),
        **_tokens(data),
    }


def _responsive_album(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = flex_column_runs(data, 1)
    groups = split_by_separator(subtitle)
    artists = artists_from_runs(subtitle, ctx)
    if not artists and len(groups) > 1:
        artists = _plain_artists(groups[1])
    year = groups[-1][0].get("text") if len(groups) > 1 and groups[-1] else None
    return {
        "id": f.first_of(data, f.RESPONSIVE_BROWSE_ID),
        "title": f.first_of(data, f.RESPONSIVE_TITLE),
        "thumbnail": f.first_of(data, f.RESPONSIVE_THUMBNAIL),
        "playlist_id": f.first_of(data, f.RESPONSIVE_ALBUM_PLAYLIST_ID),
        "artists": artists or None,
        "year": parse_int(year),
        "explicit": _explicit(data),
    }


def _responsive_playlist(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    browse_id = f.first_of(data, f.RESPONSIVE_BROWSE_ID)
    subtitle = flex_column_runs(data, 1)
    groups = _without_type_label(split_by_separator(subtitle))
    authors = artists_from_runs(subtitle, ctx)
    if authors:
        author = authors[0]
    elif groups and groups[0]:
        author = _artist(groups[0][0])
    else:
        author = None
    count = groups[-1][0].get("text") if len(groups) > 1 and groups[-1] else None
    return {
        "id": ctx.heuristics.strip_playlist_prefix(browse_id) if browse_id else None,
        "title": f.first_of(data, f.RESPONSIVE_TITLE),
        "thumbnail": f.first_of(data, f.RESPONSIVE_THUMBNAIL),
        "author": author,
        "song_count_text": count,
        "play_endpoint": _watch_endpoint(data, f.RESPONSIVE_PLAY_ENDPOINT),
        "is_editable": has_menu_icon(menu_items(data), IconType.EDIT),
        **_menu_endpoints(data),
    }


def _responsive_artist(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    browse_id = f.first_of(data, f.RESPONSIVE_BROWSE_ID)
    return {
        "id": browse_id,
        "title": f.first_of(data, f.RESPONSIVE_TITLE),
        "thumbnail": f.first_of(data, f.RESPONSIVE_THUMBNAIL),
        "channel_id": browse_id if ctx.heuristics.is_artist_id(browse_id) else None,
        **_menu_endpoints(data),
    }


def _responsive_podcast(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    groups = _without_type_label(split_by_separator(flex_column_runs(data, 1)))
    author = _artist(groups[0][0]) if groups and groups[0] else None
    return {
        "id": f.first_of(data, f.RESPONSIVE_BROWSE_ID),
        "title": f.first_of(data, f.RESPONSIVE_TITLE),
        "thumbnail": f.first_of(data, f.RESPONSIVE_THUMBNAIL),
        "author": author,
        "play_endpoint": _watch_endpoint(data, f.RESPONSIVE_PLAY_ENDPOINT),
        **_tokens(data),
    }


def _responsive_episode(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = flex_column_runs(data, 1)
    groups = _without_type_label(split_by_separator(subtitle))
    publish_date = groups[0][0].get("text") if groups and groups[0] else None
    duration_text = f.first_of(data, f.RESPONSIVE_DURATION_TEXT)
    return {
        "id": f.first_of(data, f.RESPONSIVE_VIDEO_ID),
        "title": f.first_of(data, f.RESPONSIVE_TITLE),
        "thumbnail": f.first_of(data, f.RESPONSIVE_THUMBNAIL) or ctx.thumbnail,
        "author": _podcast_author(ctx, subtitle),
        "podcast": podcast_from_runs(subtitle) or _podcast_ref(ctx),
        "duration": parse_duration(duration_text),
        "publish_date_text": publish_date,
        "explicit": _explicit(data),
        "endpoint": _watch_endpoint(data, f.RESPONSIVE_WATCH_ENDPOINT),
        **_tokens(data),
    }


# -- musicMultiRowListItemRenderer --------------------------------------------


def _multi_row_episode(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    groups = split_by_separator(runs_of(data.get("subtitle")))
    items = menu_items(data)
    return {
        "id": f.first_of(data, f.MULTI_ROW_VIDEO_ID),
        "title": f.first_of(data, f.MULTI_ROW_TITLE),
        "thumbnail": f.first_of(data, f.MULTI_ROW_THUMBNAIL) or ctx.thumbnail,
        "author": ctx.podcast.author if ctx.podcast else None,
        "podcast": _podcast_ref(ctx),
        "duration": parse_duration(groups[-1][0].get("text")) if groups[-1] else None,
        "publish_date_text": groups[0][0].get("text") if groups[0] else None,
        "endpoint": WatchEndpoint.from_node(dig(data, "onTap", "watchEndpoint")),
        "mark_as_played_token": menu_service_token(items, IconType.MARK_AS_PLAYED),
        "mark_as_unplayed_token": menu_service_token(items, IconType.MARK_AS_UNPLAYED),
        **_tokens(data),
    }


# -- musicCardShelfRenderer ---------------------------------------------------


def _card_song(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = runs_of(data.get("subtitle"))
    artists = artists_from_runs(subtitle, ctx)
    groups = _without_type_label(split_by_separator(subtitle))
    if not artists and groups:
        artists = _plain_artists(groups[0])
    duration = groups[-1][0].get("text") if len(groups) > 1 and groups[-1] else None
    return {
        "id": f.first_of(data, f.CARD_VIDEO_ID),
        "title": f.first_of(data, f.CARD_TITLE),
        "thumbnail": f.first_of(data, f.CARD_THUMBNAIL),
        "artists": artists,
        "album": album_from_runs(subtitle, ctx),
        "duration": parse_duration(duration),
        "explicit": _explicit(data),
        "music_video_type": node.music_video_type,
        "endpoint": _watch_endpoint(data, f.CARD_WATCH_ENDPOINT),
    }


def _card_browse(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    """Album, artist, playlist or podcast as the top search result."""
    data = node.data
    subtitle = runs_of(data.get("subtitle"))
    browse_id = f.first_of(data, f.CARD_BROWSE_ID)
    artists = artists_from_runs(subtitle, ctx)
    kind = node.capabilities.kind()
    fields: dict[str, Any] = {
        "id": browse_id,
        "title": f.first_of(data, f.CARD_TITLE),
        "thumbnail": f.first_of(data, f.CARD_THUMBNAIL),
        "explicit": _explicit(data),
    }
    if kind is ItemKind.ALBUM:
        fields["artists"] = artists or None
    elif kind is ItemKind.PLAYLIST:
        if browse_id:
            fields["id"] = ctx.heuristics.strip_playlist_prefix(browse_id)
        else:
            fields["id"] = None
        fields["author"] = artists[0] if artists else None
    elif kind is ItemKind.PODCAST:
        fields["author"] = artists[0] if artists else None
    elif kind is ItemKind.ARTIST:
        is_channel = ctx.heuristics.is_artist_id(browse_id)
        fields["channel_id"] = browse_id if is_channel else None
    return fields


def _card_episode(node: ItemNode, ctx: ResolutionContext) -> dict[str, Any]:
    data = node.data
    subtitle = runs_of(data.get("subtitle"))
    return {
        "id": f.first_of(data, f.CARD_VIDEO_ID),
        "title": f.first_of(data, f.CARD_TITLE),
        "thumbnail": f.first_of(data, f.CARD_THUMBNAIL),
        "podcast": podcast_from_runs(subtitle),
        "endpoint": _watch_endpoint(data, f.CARD_WATCH_ENDPOINT),
    }


# -- Shared podcast helpers ---------------------------------------------------


def _podcast_ref(ctx: ResolutionContext) -> AlbumRef | None:
    if ctx.podcast is None:
        return None
    return AlbumRef(name=ctx.podcast.title, id=ctx.podcast.id)


def _podcast_author(ctx: ResolutionContext, subtitle: list[Run]) -> Artist | None:
    if ctx.podcast is not None and ctx.podcast.author is not None:
        return ctx.podcast.author
    podcast = podcast_from_runs(subtitle)
    return Artist(name=podcast.name, id=podcast.id) if podcast else None


Builder = Callable[[ItemNode, ResolutionContext], dict[str, Any]]

_BUILDERS: dict[tuple[NodeShape, ItemKind], Builder] = {
    (NodeShape.TWO_ROW, ItemKind.SONG): _two_row_song,
    (NodeShape.TWO_ROW, ItemKind.ALBUM): _two_row_album,
    (NodeShape.TWO_ROW, ItemKind.PLAYLIST): _two_row_playlist,
    (NodeShape.TWO_ROW, ItemKind.ARTIST): _two_row_artist,
    (NodeShape.TWO_ROW, ItemKind.PODCAST): _two_row_podcast,
    (NodeShape.TWO_ROW, ItemKind.EPISODE): _two_row_episode,
    (NodeShape.RESPONSIVE, ItemKind.SONG): _responsive_song,
    (NodeShape.RESPONSIVE, ItemKind.ALBUM): _responsive_album,
    (NodeShape.RESPONSIVE, ItemKind.PLAYLIST): _responsive_playlist,
    (NodeShape.RESPONSIVE, ItemKind.ARTIST): _responsive_artist,
    (NodeShape.RESPONSIVE, ItemKind.PODCAST): _responsive_podcast,
    (NodeShape.RESPONSIVE, ItemKind.EPISODE): _responsive_episode,
    (NodeShape.MULTI_ROW, ItemKind.EPISODE): _multi_row_episode,
    (NodeShape.CARD_SHELF, ItemKind.SONG): _card_song,
    (NodeShape.CARD_SHELF, ItemKind.ALBUM): _card_browse,
    (NodeShape.CARD_SHELF, ItemKind.PLAYLIST): _card_browse,
    (NodeShape.CARD_SHELF, ItemKind.ARTIST): _card_browse,
    (NodeShape.CARD_SHELF, ItemKind.PODCAST): _card_browse,
    (NodeShape.CARD_SHELF, ItemKind.EPISODE): _card_episode,
}


def resolve(
    node: ItemNode | dict[str, Any], context: ResolutionContext | None = None
) -> AnyItem | None:
    """Resolve one renderer node into an item.

    Args:
        node: A wrapper dict such as ``{"musicTwoRowItemRenderer": {...}}``
            or an already wrapped ItemNode.
        context: Page-level facts. Defaults to DEFAULT_CONTEXT.

    Returns:
        The item, or None if the node is not an item or lacks a required field.
    """
    item_node = node if isinstance(node, ItemNode) else ItemNode.wrap(node)
    if item_node is None:
        return None

    kind = item_node.capabilities.kind()
    builder = _BUILDERS.get((item_node.shape, kind)) if kind else None
    if builder is None:
        logger.debug(
            "No item kind for %s node: %s", item_node.shape, item_node.capabilities
        )
        return None

    ctx = context or DEFAULT_CONTEXT
    try:
        return _MODELS[kind].model_validate(builder(item_node, ctx))
    except ValidationError as e:
        logger.debug(
            "Dropping %s %s: %d invalid field(s): %s",
            item_node.shape,
            kind,
            e.error_count(),
            ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"]),
        )
        return None
    except (TypeError, AttributeError) as e:
        logger.debug(
            "Dropping %s %s: unexpected node layout: %s", item_node.shape, kind, e
        )
        return None


def resolve_all(
    nodes: Iterable[Any], context: ResolutionContext | None = None
) -> list[AnyItem]:
    """Resolve every node, dropping those that do not resolve."""
    items = []
    for node in nodes:
        item = resolve(node, context)
        if item is not None:
            items.append(item)
    return items


def resolve_panel_video(
    renderer: dict[str, Any] | None, context: ResolutionContext | None = None
) -> SongItem | None:
    """Resolve a ``playlistPanelVideoRenderer`` (queue row) into a song.

    Queue rows are not one of the item shapes: the byline is a single run
    list ("Artist • Album • 2019") and the duration sits in ``lengthText``.
    """
    if not isinstance(renderer, dict):
        return None
    ctx = context or DEFAULT_CONTEXT
    video_id = renderer.get("videoId")
    try:
        return SongItem.model_validate(_panel_values(renderer, ctx))
    except ValidationError as e:
        logger.debug(
            "Dropping queue row (id=%s): %d invalid field(s)",
            video_id,
            e.error_count(),
        )
        return None
    except (TypeError, AttributeError) as e:
        logger.debug("Dropping queue row (id=%s): %s", video_id, e)
        return None


def _panel_values(renderer: dict[str, Any], ctx: ResolutionContext) -> dict[str, Any]:
    byline = runs_of(renderer.get("longBylineText")) or runs_of(
        renderer.get("shortBylineText")
    )
    artists = artists_from_runs(byline, ctx)
    if not artists and byline:
        artists = _plain_artists(split_by_separator(byline)[0])
    endpoint = WatchEndpoint.from_node(
        dig(renderer, "navigationEndpoint", "watchEndpoint")
    )
    return {
        "id": renderer.get("videoId"),
        "title": f.first_of(renderer, f.PANEL_TITLE),
        "thumbnail": f.first_of(renderer, f.PANEL_THUMBNAIL) or ctx.thumbnail,
        "artists": artists,
        "album": album_from_runs(byline, ctx) or ctx.album,
        "duration": parse_duration(f.first_of(renderer, f.PANEL_DURATION_TEXT)),
        "explicit": _explicit(renderer),
        "music_video_type": endpoint.music_video_type if endpoint else None,
        "endpoint": endpoint,
        "set_video_id": renderer.get("playlistSetVideoId"),
        **_tokens(renderer),
    }
