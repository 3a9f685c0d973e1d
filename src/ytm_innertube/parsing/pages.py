"""Assemble page models from endpoint responses.

Each ``parse_*`` function takes one decoded response and returns one page
model. Item nodes go through the resolver, so an unresolvable item is simply
absent. Only the structure a whole page depends on (an album title, a
playlist header) raises PageParseError.
"""

import logging
from typing import Any

from pydantic import ValidationError

from ytm_innertube.exceptions import PageParseError
from ytm_innertube.models.endpoints import BrowseEndpoint, WatchEndpoint
from ytm_innertube.models.enums import ChartType, IconType, ItemKind, VideoType
from ytm_innertube.models.items import (
    AlbumItem,
    AlbumRef,
    AnyItem,
    ArtistItem,
    EpisodeItem,
    PlaylistItem,
    PodcastItem,
    SongItem,
)
from ytm_innertube.models.pages import (
    AccountInfo,
    AlbumPage,
    ArtistItemsPage,
    ArtistPage,
    ArtistSection,
    BrowsePage,
    BrowseSection,
    ChartSection,
    ChartsPage,
    ExplorePage,
    HistoryPage,
    HistorySection,
    HomeChip,
    HomePage,
    HomeSection,
    MoodAndGenre,
    NextResult,
    Page,
    PlaylistEdit,
    PlaylistEditedVideo,
    PlaylistPage,
    PodcastPage,
    RelatedPage,
    SearchSuggestions,
    SearchSummary,
    SearchSummaryPage,
)
from ytm_innertube.parsing.nodes import (
    ItemNode,
    as_list,
    continuation_item_token,
    dig,
    first_run_text,
    get_continuation,
    has_explicit_badge,
    join_runs,
    library_tokens,
    menu_watch_playlist_endpoint,
    run_browse_id,
    runs_of,
    thumbnail_url,
)
from ytm_innertube.parsing.resolver import (
    DEFAULT_CONTEXT,
    ResolutionContext,
    artists_from_runs,
    resolve,
    resolve_all,
    resolve_panel_video,
)
from ytm_innertube.utils.text import parse_int

logger = logging.getLogger(__name__)

# Raised while assembling a header whose fields have unexpected types
_MALFORMED = (ValidationError, TypeError, AttributeError)

SINGLE_COLUMN_SECTIONS = (
    "contents",
    "singleColumnBrowseResultsRenderer",
    "tabs",
    0,
    "tabRenderer",
    "content",
    "sectionListRenderer",
)
TWO_COLUMN_PRIMARY = (
    "contents",
    "twoColumnBrowseResultsRenderer",
    "tabs",
    0,
    "tabRenderer",
    "content",
    "sectionListRenderer",
)
TWO_COLUMN_SECONDARY = (
    "contents",
    "twoColumnBrowseResultsRenderer",
    "secondaryContents",
    "sectionListRenderer",
)
SEARCH_SECTIONS = (
    "contents",
    "tabbedSearchResultsRenderer",
    "tabs",
    0,
    "tabRenderer",
    "content",
    "sectionListRenderer",
    "contents",
)
WATCH_TABS = (
    "contents",
    "singleColumnMusicWatchNextResultsRenderer",
    "tabbedRenderer",
    "watchNextTabbedResultsRenderer",
    "tabs",
)
CAROUSEL_HEADER = ("header", "musicCarouselShelfBasicHeaderRenderer")
MORE_BUTTON_ENDPOINT = ("moreContentButton", "buttonRenderer", "navigationEndpoint")
APPEND_ACTION_ITEMS = (
    "onResponseReceivedActions",
    0,
    "appendContinuationItemsAction",
    "continuationItems",
)

NEW_RELEASES_BROWSE_ID = "FEmusic_new_releases_albums"
MOODS_BROWSE_ID = "FEmusic_moods_and_genres"

# Display order of grouped search results
SUMMARY_ORDER = (
    "Top result",
    "Songs",
    "Videos",
    "Albums",
    "Artists",
    "Playlists",
    "Podcasts",
    "Episodes",
)


def _only(items: list[AnyItem], *types: type) -> list[Any]:
    return [item for item in items if isinstance(item, types)]


def _context(ctx: ResolutionContext | None) -> ResolutionContext:
    return ctx or DEFAULT_CONTEXT


def _page(items: list[AnyItem], continuation: str | None) -> Page:
    """Page whose continuation is dropped when it carries no items."""
    return Page(items=tuple(items), continuation=continuation if items else None)


# -- Search -------------------------------------------------------------------


def parse_search(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> Page:
    """Items of every result shelf, deduplicated by id."""
    ctx = _context(ctx)
    items: list[AnyItem] = []
    seen: set[str] = set()
    continuation = None
    for section in as_list(dig(response, *SEARCH_SECTIONS)):
        shelf = dig(section, "musicShelfRenderer")
        if shelf is None:
            continue
        for item in resolve_all(as_list(shelf.get("contents")), ctx):
            if item.id not in seen:
                seen.add(item.id)
                items.append(item)
        continuation = continuation or get_continuation(shelf)
    return Page(items=tuple(items), continuation=continuation)


def parse_search_continuation(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> Page:
    shelf = dig(response, "continuationContents", "musicShelfContinuation")
    items = resolve_all(as_list(dig(shelf, "contents")), _context(ctx))
    return _page(items, get_continuation(shelf))


def _summary_group(item: AnyItem) -> str:
    if isinstance(item, SongItem):
        return "Videos" if item.is_video_song else "Songs"
    return {
        ItemKind.ALBUM: "Albums",
        ItemKind.ARTIST: "Artists",
        ItemKind.PLAYLIST: "Playlists",
        ItemKind.PODCAST: "Podcasts",
        ItemKind.EPISODE: "Episodes",
    }.get(item.kind, "Other")


def parse_search_summary(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> SearchSummaryPage:
    """Unfiltered search results grouped under titled sections.

    The card shelf becomes "Top result". Titled shelves keep their title;
    untitled shelves are grouped by item kind. Groups with the same title
    are merged and ordered as in SUMMARY_ORDER, unknown titles last.
    """
    ctx = _context(ctx)
    groups: dict[str, list[AnyItem]] = {}

    def add(title: str, items: list[AnyItem]) -> None:
        if items:
            groups.setdefault(title, []).extend(items)

    for section in as_list(dig(response, *SEARCH_SECTIONS)):
        card = dig(section, "musicCardShelfRenderer")
        if card is not None:
            header = dig(card, "header", "musicCardShelfHeaderBasicRenderer")
            title = first_run_text(dig(header, "title")) or "Top result"
            top = resolve(section, ctx)
            rest = resolve_all(as_list(card.get("contents")), ctx)
            add(title, ([top] if top else []) + rest)
            continue

        shelf = dig(section, "musicShelfRenderer")
        if shelf is None:
            continue
        items = resolve_all(as_list(shelf.get("contents")), ctx)
        title = first_run_text(shelf.get("title"))
        if title:
            add(title, items)
        else:
            for item in items:
                add(_summary_group(item), [item])

    def order(title: str) -> int:
        if title in SUMMARY_ORDER:
            return SUMMARY_ORDER.index(title)
        return len(SUMMARY_ORDER)

    summaries = [
        SearchSummary(title=title, items=tuple(items))
        for title, items in sorted(groups.items(), key=lambda kv: order(kv[0]))
    ]
    return SearchSummaryPage(summaries=tuple(summaries))


def parse_search_suggestions(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> SearchSuggestions:
    sections = as_list(dig(response, "contents"))
    queries = []
    entries = dig(sections, 0, "searchSuggestionsSectionRenderer", "contents")
    for entry in as_list(entries):
        text = join_runs(dig(entry, "searchSuggestionRenderer", "suggestion"))
        if text:
            queries.append(text)
    recommended = resolve_all(
        as_list(dig(sections, 1, "searchSuggestionsSectionRenderer", "contents")),
        _context(ctx),
    )
    return SearchSuggestions(
        queries=tuple(queries), recommended_items=tuple(recommended)
    )


# -- Album --------------------------------------------------------------------


def album_playlist_id(response: dict[str, Any]) -> str | None:
    """Playlist id of an album, taken from the canonical URL."""
    url = dig(response, "microformat", "microformatDataRenderer", "urlCanonical")
    if not url or "=" not in url:
        return None
    return url.rsplit("=", 1)[-1] or None


def parse_album(
    response: dict[str, Any], browse_id: str, ctx: ResolutionContext | None = None
) -> AlbumPage:
    """Album header, in-page tracks and other versions.

    Raises:
        PageParseError: If the album header has no title or thumbnail.
    """
    ctx = _context(ctx)
    header = dig(
        response, *TWO_COLUMN_PRIMARY, "contents", 0, "musicResponsiveHeaderRenderer"
    )
    title = first_run_text(dig(header, "title"))
    thumbnail = thumbnail_url(dig(header, "thumbnail"))
    if not title or not thumbnail:
        raise PageParseError(f"Album {browse_id} has no header")

    strapline = runs_of(dig(header, "straplineTextOne"))
    subtitle = runs_of(dig(header, "subtitle"))
    try:
        album = AlbumItem(
            id=browse_id,
            title=title,
            thumbnail=thumbnail,
            playlist_id=album_playlist_id(response),
            artists=tuple(artists_from_runs(strapline, ctx)) or None,
            year=parse_int(subtitle[-1].get("text")) if subtitle else None,
            explicit=has_explicit_badge(dig(header, "subtitleBadge")),
        )
    except _MALFORMED as e:
        raise PageParseError(f"Album {browse_id} has a malformed header: {e}") from e

    track_ctx = ResolutionContext(
        heuristics=ctx.heuristics,
        album=AlbumRef(name=title, id=browse_id),
        thumbnail=thumbnail,
    )
    secondary = as_list(dig(response, *TWO_COLUMN_SECONDARY, "contents"))
    songs = _only(
        resolve_all(
            as_list(dig(secondary, 0, "musicShelfRenderer", "contents"))
            or as_list(dig(secondary, 0, "musicPlaylistShelfRenderer", "contents")),
            track_ctx,
        ),
        SongItem,
    )
    carousel = dig(secondary, 1, "musicCarouselShelfRenderer")
    other_versions = _only(
        resolve_all(as_list(dig(carousel, "contents")), ctx), AlbumItem
    )
    return AlbumPage(
        album=album, songs=tuple(songs), other_versions=tuple(other_versions)
    )


# -- Artist -------------------------------------------------------------------


def _artist_header(response: dict[str, Any]) -> dict[str, Any] | None:
    for key in (
        "musicImmersiveHeaderRenderer",
        "musicVisualHeaderRenderer",
        "musicHeaderRenderer",
    ):
        header = dig(response, "header", key)
        if isinstance(header, dict):
            return header
    return None


def _subscriber_count(header: dict[str, Any]) -> str | None:
    button = dig(header, "subscriptionButton", "subscribeButtonRenderer")
    for key in (
        "subscriberCountWithSubscribeText",
        "longSubscriberCountText",
        "shortSubscriberCountText",
    ):
        text = first_run_text(dig(button, key))
        if text:
            return text
    return None


def _artist_section(
    section: dict[str, Any], ctx: ResolutionContext
) -> ArtistSection | None:
    shelf = dig(section, "musicShelfRenderer")
    if shelf is not None:
        title_node = shelf.get("title")
        contents = as_list(shelf.get("contents"))
        more = dig(shelf, "bottomEndpoint", "browseEndpoint") or dig(
            title_node, "runs", 0, "navigationEndpoint", "browseEndpoint"
        )
    else:
        shelf = dig(section, "musicCarouselShelfRenderer")
        if shelf is None:
            return None
        title_node = dig(shelf, *CAROUSEL_HEADER, "title")
        contents = as_list(shelf.get("contents"))
        more = dig(
            shelf, *CAROUSEL_HEADER, *MORE_BUTTON_ENDPOINT, "browseEndpoint"
        ) or dig(title_node, "runs", 0, "navigationEndpoint", "browseEndpoint")

    title = first_run_text(title_node)
    items = resolve_all(contents, ctx)
    if not title or not items:
        return None
    return ArtistSection(
        title=title, items=tuple(items), more_endpoint=BrowseEndpoint.from_node(more)
    )


def parse_artist(
    response: dict[str, Any], browse_id: str, ctx: ResolutionContext | None = None
) -> ArtistPage:
    """Artist header and its shelves.

    Raises:
        PageParseError: If the response has no artist header.
    """
    ctx = _context(ctx)
    header = _artist_header(response)
    title = first_run_text(dig(header, "title"))
    if header is None or not title:
        raise PageParseError(f"Artist {browse_id} has no header")

    channel_id = dig(
        header, "subscriptionButton", "subscribeButtonRenderer", "channelId"
    )
    if channel_id is None and ctx.heuristics.is_artist_id(browse_id):
        channel_id = browse_id
    play = dig(header, "playButton", "buttonRenderer", "navigationEndpoint")
    radio = dig(header, "startRadioButton", "buttonRenderer", "navigationEndpoint")
    try:
        artist = ArtistItem(
            id=browse_id,
            title=title,
            thumbnail=thumbnail_url(dig(header, "thumbnail"))
            or thumbnail_url(dig(header, "foregroundThumbnail")),
            channel_id=channel_id,
            shuffle_endpoint=WatchEndpoint.from_node(
                dig(play, "watchPlaylistEndpoint") or dig(play, "watchEndpoint")
            ),
            radio_endpoint=WatchEndpoint.from_node(
                dig(radio, "watchPlaylistEndpoint")
            ),
        )
    except _MALFORMED as e:
        raise PageParseError(f"Artist {browse_id} has a malformed header: {e}") from e

    description = join_runs(dig(header, "description"))
    sections: list[ArtistSection] = []
    for raw in as_list(dig(response, *SINGLE_COLUMN_SECTIONS, "contents")):
        shelf = dig(raw, "musicDescriptionShelfRenderer")
        if shelf is not None:
            description = description or join_runs(shelf.get("description"))
            continue
        section = _artist_section(raw, ctx)
        if section is not None:
            sections.append(section)

    return ArtistPage(
        artist=artist,
        sections=tuple(sections),
        description=description,
        subscriber_count_text=_subscriber_count(header),
        monthly_listener_count=first_run_text(dig(header, "monthlyListenerCount")),
    )


def _shelf_container(section: Any) -> tuple[str | None, list[Any], Any]:
    """Title, item nodes and container of a grid or shelf section."""
    grid = dig(section, "gridRenderer")
    if grid is not None:
        title = first_run_text(dig(grid, "header", "gridHeaderRenderer", "title"))
        return title, as_list(grid.get("items")), grid
    carousel = dig(section, "musicCarouselShelfRenderer")
    if carousel is not None:
        title = first_run_text(dig(carousel, *CAROUSEL_HEADER, "title"))
        return title, as_list(carousel.get("contents")), carousel
    for key in ("musicShelfRenderer", "musicPlaylistShelfRenderer"):
        shelf = dig(section, key)
        if shelf is not None:
            title = first_run_text(shelf.get("title"))
            return title, as_list(shelf.get("contents")), shelf
    return None, [], None


def parse_artist_items(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> ArtistItemsPage:
    """The "see all" page behind an artist section."""
    section = dig(response, *SINGLE_COLUMN_SECTIONS, "contents", 0)
    title, nodes, container = _shelf_container(section)
    if not title:
        title = first_run_text(dig(response, "header", "musicHeaderRenderer", "title"))
    items = resolve_all(nodes, _context(ctx))
    return ArtistItemsPage(
        title=title or "",
        items=tuple(items),
        continuation=get_continuation(container) if items else None,
    )


def parse_shelf_continuation(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> Page:
    """Continuation of a grid or shelf (artist items, library)."""
    contents = response.get("continuationContents") or {}
    for key, items_key in (
        ("gridContinuation", "items"),
        ("musicPlaylistShelfContinuation", "contents"),
        ("musicShelfContinuation", "contents"),
    ):
        container = contents.get(key)
        if isinstance(container, dict):
            items = resolve_all(as_list(container.get(items_key)), _context(ctx))
            return _page(items, get_continuation(container))

    appended = as_list(dig(response, *APPEND_ACTION_ITEMS))
    items = resolve_all(appended, _context(ctx))
    return _page(items, continuation_item_token(appended))


# -- Playlist -----------------------------------------------------------------


def _playlist_header(response: dict[str, Any]) -> tuple[dict[str, Any] | None, bool]:
    first = dig(response, *TWO_COLUMN_PRIMARY, "contents", 0)
    header = dig(first, "musicResponsiveHeaderRenderer")
    if isinstance(header, dict):
        return header, False
    header = dig(
        first,
        "musicEditablePlaylistDetailHeaderRenderer",
        "header",
        "musicResponsiveHeaderRenderer",
    )
    if isinstance(header, dict):
        return header, True
    return None, False


def _header_play_endpoint(header: dict[str, Any]) -> WatchEndpoint | None:
    for button in as_list(header.get("buttons")):
        endpoint = dig(button, "musicPlayButtonRenderer", "playNavigationEndpoint")
        watch = dig(endpoint, "watchPlaylistEndpoint") or dig(endpoint, "watchEndpoint")
        if watch:
            return WatchEndpoint.from_node(watch)
    return None


def _header_menu_items(header: dict[str, Any]) -> list[Any]:
    buttons = as_list(header.get("buttons"))
    return as_list(dig(buttons, -1, "menuRenderer", "items"))


def _playlist_item(
    header: dict[str, Any], playlist_id: str, editable: bool, ctx: ResolutionContext
) -> PlaylistItem:
    author_runs = runs_of(header.get("straplineTextOne"))
    authors = artists_from_runs(author_runs, ctx)
    author = authors[0] if authors else None
    if author is None and author_runs:
        author = {"name": author_runs[0].get("text", ""), "id": None}

    menu = _header_menu_items(header)
    return PlaylistItem.model_validate(
        {
            "id": playlist_id,
            "title": first_run_text(dig(header, "title")),
            "thumbnail": thumbnail_url(header.get("thumbnail")),
            "author": author,
            "song_count_text": first_run_text(header.get("secondSubtitle")),
            "play_endpoint": _header_play_endpoint(header)
            or WatchEndpoint(playlist_id=playlist_id),
            "shuffle_endpoint": menu_watch_playlist_endpoint(menu, IconType.SHUFFLE)
            or WatchEndpoint.from_node(
                dig(
                    menu,
                    0,
                    "menuNavigationItemRenderer",
                    "navigationEndpoint",
                    "watchPlaylistEndpoint",
                )
            ),
            "radio_endpoint": menu_watch_playlist_endpoint(menu, IconType.RADIO),
            "is_editable": editable,
        }
    )


def parse_playlist(
    response: dict[str, Any], playlist_id: str, ctx: ResolutionContext | None = None
) -> PlaylistPage:
    """Playlist header and first page of songs.

    Raises:
        PageParseError: If the response has no playlist header.
    """
    ctx = _context(ctx)
    header, editable = _playlist_header(response)
    title = first_run_text(dig(header, "title"))
    if header is None or not title:
        raise PageParseError(f"Playlist {playlist_id} has no header")

    try:
        playlist = _playlist_item(header, playlist_id, editable, ctx)
    except _MALFORMED as e:
        raise PageParseError(
            f"Playlist {playlist_id} has a malformed header: {e}"
        ) from e

    shelf = dig(
        response, *TWO_COLUMN_SECONDARY, "contents", 0, "musicPlaylistShelfRenderer"
    )
    songs = _only(resolve_all(as_list(dig(shelf, "contents")), ctx), SongItem)
    return PlaylistPage(
        playlist=playlist,
        songs=tuple(songs),
        songs_continuation=get_continuation(shelf),
        continuation=get_continuation(dig(response, *TWO_COLUMN_SECONDARY)),
    )


def parse_playlist_songs(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> Page:
    """Song shelf of a playlist browse, without requiring a header.

    Album track lists are browsed this way through the album's playlist id.
    """
    shelf = dig(
        response, *TWO_COLUMN_SECONDARY, "contents", 0, "musicPlaylistShelfRenderer"
    )
    songs = _only(resolve_all(as_list(dig(shelf, "contents")), _context(ctx)), SongItem)
    return _page(songs, get_continuation(shelf))


def parse_playlist_continuation(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> Page:
    """Songs of a playlist continuation.

    Songs may arrive in a section list, a playlist shelf continuation or an
    append action; all three are merged. The continuation is None when the
    page carries no songs, so a caller can never loop on an empty page.
    """
    ctx = _context(ctx)
    contents = response.get("continuationContents") or {}
    nodes: list[Any] = []
    tokens: list[str | None] = []

    section_list = contents.get("sectionListContinuation")
    for section in as_list(dig(section_list, "contents")):
        shelf = dig(section, "musicPlaylistShelfRenderer")
        nodes.extend(as_list(dig(shelf, "contents")))
        tokens.append(get_continuation(shelf))
    tokens.insert(0, get_continuation(section_list))

    shelf = contents.get("musicPlaylistShelfContinuation")
    nodes.extend(as_list(dig(shelf, "contents")))
    tokens.append(get_continuation(shelf))
    tokens.append(get_continuation(contents.get("musicShelfContinuation")))

    appended = as_list(dig(response, *APPEND_ACTION_ITEMS))
    nodes.extend(appended)
    tokens.append(continuation_item_token(appended))

    songs = _only(resolve_all(nodes, ctx), SongItem)
    return _page(songs, next((t for t in tokens if t), None))


# -- Podcast ------------------------------------------------------------------


def _podcast_header(response: dict[str, Any]) -> dict[str, Any] | None:
    for path in (TWO_COLUMN_PRIMARY, SINGLE_COLUMN_SECTIONS):
        header = dig(response, *path, "contents", 0, "musicResponsiveHeaderRenderer")
        if isinstance(header, dict):
            return header
    return None


def _podcast_channel_and_tokens(
    header: dict[str, Any]
) -> tuple[str | None, dict[str, Any]]:
    channel_id = None
    tokens = library_tokens(_header_menu_items(header))
    for button in as_list(header.get("buttons")):
        toggle = dig(button, "toggleButtonRenderer")
        if toggle is None:
            continue
        icon = dig(toggle, "defaultIcon", "iconType")
        if icon == IconType.SUBSCRIBE:
            channel_id = dig(
                toggle, "defaultServiceEndpoint", "subscribeEndpoint", "channelIds", 0
            )
        elif tokens.add is None and tokens.remove is None:
            tokens = library_tokens([{"toggleMenuServiceItemRenderer": toggle}])
    return channel_id, {
        "library_add_token": tokens.add,
        "library_remove_token": tokens.remove,
    }


def parse_podcast(
    response: dict[str, Any], podcast_id: str, ctx: ResolutionContext | None = None
) -> PodcastPage:
    """Podcast header and its episodes.

    Raises:
        PageParseError: If the response has no podcast header.
    """
    ctx = _context(ctx)
    header = _podcast_header(response)
    title = first_run_text(dig(header, "title"))
    if header is None or not title:
        raise PageParseError(f"Podcast {podcast_id} has no header")

    author_runs = runs_of(header.get("straplineTextOne"))
    channel_id, tokens = _podcast_channel_and_tokens(header)
    try:
        podcast = PodcastItem.model_validate(
            {
                "id": podcast_id,
                "title": title,
                "thumbnail": thumbnail_url(header.get("thumbnail")),
                "author": {
                    "name": author_runs[0].get("text", ""),
                    "id": run_browse_id(author_runs[0]),
                }
                if author_runs
                else None,
                "episode_count_text": first_run_text(header.get("secondSubtitle")),
                "play_endpoint": _header_play_endpoint(header)
                or WatchEndpoint(
                    playlist_id=ctx.heuristics.strip_podcast_prefix(podcast_id)
                ),
                "channel_id": channel_id,
                **tokens,
            }
        )
    except _MALFORMED as e:
        raise PageParseError(f"Podcast {podcast_id} has a malformed header: {e}") from e

    episode_ctx = ResolutionContext(
        heuristics=ctx.heuristics, podcast=podcast, thumbnail=podcast.thumbnail
    )
    shelf = None
    for path in (TWO_COLUMN_SECONDARY, SINGLE_COLUMN_SECTIONS):
        for section in as_list(dig(response, *path, "contents")):
            shelf = dig(section, "musicShelfRenderer") or dig(
                section, "musicPlaylistShelfRenderer"
            )
            if shelf is not None:
                break
        if shelf is not None:
            break

    episodes = _only(
        resolve_all(as_list(dig(shelf, "contents")), episode_ctx), EpisodeItem
    )
    return PodcastPage(
        podcast=podcast, episodes=tuple(episodes), continuation=get_continuation(shelf)
    )


# -- Home / explore / charts --------------------------------------------------


def _carousel_section(
    carousel: dict[str, Any], ctx: ResolutionContext
) -> HomeSection | None:
    header = dig(carousel, *CAROUSEL_HEADER)
    title = first_run_text(dig(header, "title"))
    if not title:
        logger.debug("Skipping carousel without title")
        return None
    items = resolve_all(as_list(carousel.get("contents")), ctx)
    if not items:
        logger.debug("Skipping section %r: no resolvable items", title)
        return None
    return HomeSection(
        title=title,
        label=first_run_text(dig(header, "strapline")),
        thumbnail=thumbnail_url(dig(header, "thumbnail")),
        endpoint=BrowseEndpoint.from_node(
            dig(header, *MORE_BUTTON_ENDPOINT, "browseEndpoint")
        ),
        items=tuple(items),
    )


def _home_sections(section_list: Any, ctx: ResolutionContext) -> list[HomeSection]:
    sections = []
    for raw in as_list(dig(section_list, "contents")):
        carousel = dig(raw, "musicCarouselShelfRenderer")
        if carousel is None:
            continue
        section = _carousel_section(carousel, ctx)
        if section is not None:
            sections.append(section)
    return sections


def _home_chips(section_list: Any) -> list[HomeChip]:
    chips = []
    for chip in as_list(dig(section_list, "header", "chipCloudRenderer", "chips")):
        renderer = dig(chip, "chipCloudChipRenderer")
        title = first_run_text(dig(renderer, "text"))
        if not title:
            continue
        chips.append(
            HomeChip(
                title=title,
                endpoint=BrowseEndpoint.from_node(
                    dig(renderer, "navigationEndpoint", "browseEndpoint")
                ),
                deselect_endpoint=BrowseEndpoint.from_node(
                    dig(renderer, "onDeselectedCommand", "browseEndpoint")
                ),
            )
        )
    return chips


def parse_home(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> HomePage:
    """Home feed. Sections with no resolvable item are omitted."""
    ctx = _context(ctx)
    section_list = dig(response, *SINGLE_COLUMN_SECTIONS)
    return HomePage(
        chips=tuple(_home_chips(section_list)),
        sections=tuple(_home_sections(section_list, ctx)),
        continuation=get_continuation(section_list),
    )


def parse_home_continuation(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> HomePage:
    section_list = dig(response, "continuationContents", "sectionListContinuation")
    return HomePage(
        sections=tuple(_home_sections(section_list, _context(ctx))),
        continuation=get_continuation(section_list),
    )


def parse_browse(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> BrowsePage:
    """Generic single-column browse page (moods, genres, "see all" pages).

    Every grid, carousel and shelf becomes one section; sections with no
    resolvable item are omitted.
    """
    ctx = _context(ctx)
    sections = []
    for raw in as_list(dig(response, *SINGLE_COLUMN_SECTIONS, "contents")):
        title, nodes, _ = _shelf_container(raw)
        items = resolve_all(nodes, ctx)
        if not items:
            logger.debug("Skipping browse section %r: no resolvable items", title)
            continue
        sections.append(BrowseSection(title=title, items=tuple(items)))
    return BrowsePage(
        title=first_run_text(dig(response, "header", "musicHeaderRenderer", "title")),
        sections=tuple(sections),
    )


def parse_explore(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> ExplorePage:
    ctx = _context(ctx)
    albums: list[AlbumItem] = []
    moods: list[MoodAndGenre] = []
    for raw in as_list(dig(response, *SINGLE_COLUMN_SECTIONS, "contents")):
        carousel = dig(raw, "musicCarouselShelfRenderer")
        more_id = dig(
            carousel,
            *CAROUSEL_HEADER,
            *MORE_BUTTON_ENDPOINT,
            "browseEndpoint",
            "browseId",
        )
        contents = as_list(dig(carousel, "contents"))
        if more_id == NEW_RELEASES_BROWSE_ID:
            albums.extend(_only(resolve_all(contents, ctx), AlbumItem))
        elif more_id == MOODS_BROWSE_ID:
            for node in contents:
                button = dig(node, "musicNavigationButtonRenderer")
                title = first_run_text(dig(button, "buttonText"))
                endpoint = BrowseEndpoint.from_node(
                    dig(button, "clickCommand", "browseEndpoint")
                )
                if title and endpoint:
                    moods.append(MoodAndGenre(title=title, endpoint=endpoint))
    return ExplorePage(new_release_albums=tuple(albums), moods_and_genres=tuple(moods))


def chart_type(title: str) -> ChartType:
    lowered = title.lower()
    if "trending" in lowered:
        return ChartType.TRENDING
    if "new" in lowered or "release" in lowered:
        return ChartType.NEW_RELEASES
    if "top" in lowered:
        return ChartType.TOP
    return ChartType.GENRE


def parse_charts(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> ChartsPage:
    ctx = _context(ctx)
    section_list = dig(response, *SINGLE_COLUMN_SECTIONS) or dig(
        response, "continuationContents", "sectionListContinuation"
    )
    sections = []
    for raw in as_list(dig(section_list, "contents")):
        title, nodes, _ = _shelf_container(raw)
        items = resolve_all(nodes, ctx)
        if title and items:
            sections.append(
                ChartSection(
                    title=title, items=tuple(items), chart_type=chart_type(title)
                )
            )
    return ChartsPage(
        sections=tuple(sections), continuation=get_continuation(section_list)
    )


# -- Library / history --------------------------------------------------------


def parse_library(
    response: dict[str, Any], tab_index: int = 0, ctx: ResolutionContext | None = None
) -> Page:
    tabs = as_list(
        dig(response, "contents", "singleColumnBrowseResultsRenderer", "tabs")
    )
    tab = tabs[tab_index] if 0 <= tab_index < len(tabs) else dig(tabs, 0)
    section = dig(tab, "tabRenderer", "content", "sectionListRenderer", "contents", 0)
    _, nodes, container = _shelf_container(section)
    items = resolve_all(nodes, _context(ctx))
    return _page(items, get_continuation(container))


def parse_history(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> HistoryPage:
    ctx = _context(ctx)
    sections = []
    for raw in as_list(dig(response, *SINGLE_COLUMN_SECTIONS, "contents")):
        shelf = dig(raw, "musicShelfRenderer")
        if shelf is None:
            continue
        songs = _only(resolve_all(as_list(shelf.get("contents")), ctx), SongItem)
        if songs:
            title = first_run_text(shelf.get("title")) or ""
            sections.append(HistorySection(title=title, songs=tuple(songs)))
    return HistoryPage(sections=tuple(sections))


# -- Watch --------------------------------------------------------------------


def _panel_video(node: Any) -> dict[str, Any] | None:
    return dig(node, "playlistPanelVideoRenderer") or dig(
        node,
        "playlistPanelVideoWrapperRenderer",
        "primaryRenderer",
        "playlistPanelVideoRenderer",
    )


def _panel_songs(
    nodes: list[Any], ctx: ResolutionContext
) -> tuple[list[SongItem], int | None]:
    songs: list[SongItem] = []
    current_index = None
    for node in nodes:
        renderer = _panel_video(node)
        song = resolve_panel_video(renderer, ctx)
        if song is None:
            continue
        if renderer.get("selected"):
            current_index = len(songs)
        songs.append(song)
    return songs, current_index


def _watch_tab_endpoint(tabs: list[Any], index: int) -> BrowseEndpoint | None:
    return BrowseEndpoint.from_node(
        dig(tabs, index, "tabRenderer", "endpoint", "browseEndpoint")
    )


def parse_next(
    response: dict[str, Any],
    endpoint: WatchEndpoint,
    ctx: ResolutionContext | None = None,
) -> NextResult:
    """Up-next queue plus the lyrics and related tab endpoints."""
    ctx = _context(ctx)
    tabs = as_list(dig(response, *WATCH_TABS))
    queue = dig(tabs, 0, "tabRenderer", "content", "musicQueueRenderer")
    panel = dig(response, "continuationContents", "playlistPanelContinuation") or dig(
        queue, "content", "playlistPanelRenderer"
    )
    songs, current_index = _panel_songs(as_list(dig(panel, "contents")), ctx)
    return NextResult(
        title=join_runs(dig(queue, "header", "musicQueueHeaderRenderer", "subtitle"))
        or dig(panel, "title"),
        items=tuple(songs),
        current_index=current_index,
        lyrics_endpoint=_watch_tab_endpoint(tabs, 1),
        related_endpoint=_watch_tab_endpoint(tabs, 2),
        continuation=get_continuation(panel),
        endpoint=endpoint,
    )


def automix_endpoint(response: dict[str, Any]) -> WatchEndpoint | None:
    """Watch endpoint of the automix preview that ends a radio queue."""
    tabs = as_list(dig(response, *WATCH_TABS))
    queue = dig(tabs, 0, "tabRenderer", "content", "musicQueueRenderer")
    contents = as_list(dig(queue, "content", "playlistPanelRenderer", "contents"))
    if not contents:
        return None
    preview = dig(
        contents[-1],
        "automixPreviewVideoRenderer",
        "content",
        "automixPlaylistVideoRenderer",
    )
    return WatchEndpoint.from_node(
        dig(preview, "navigationEndpoint", "watchPlaylistEndpoint")
    )


def parse_lyrics(response: dict[str, Any]) -> str | None:
    return join_runs(
        dig(
            response,
            "contents",
            "sectionListRenderer",
            "contents",
            0,
            "musicDescriptionShelfRenderer",
            "description",
        )
    )


def parse_related(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> RelatedPage:
    """Related tab of a watch page.

    Songs are kept only when they are audio tracks; related music videos
    would otherwise crowd out the recommendations.
    """
    ctx = _context(ctx)
    songs: list[SongItem] = []
    albums: list[AlbumItem] = []
    artists: list[ArtistItem] = []
    playlists: list[PlaylistItem] = []
    sections = dig(response, "contents", "sectionListRenderer", "contents")
    for section in as_list(sections):
        for raw in as_list(dig(section, "musicCarouselShelfRenderer", "contents")):
            node = ItemNode.wrap(raw)
            if node is None:
                continue
            item = resolve(node, ctx)
            if isinstance(item, SongItem):
                if node.music_video_type == VideoType.ATV:
                    songs.append(item)
            elif isinstance(item, AlbumItem):
                albums.append(item)
            elif isinstance(item, ArtistItem):
                artists.append(item)
            elif isinstance(item, PlaylistItem):
                playlists.append(item)
    return RelatedPage(
        songs=tuple(songs),
        albums=tuple(albums),
        artists=tuple(artists),
        playlists=tuple(playlists),
    )


def parse_queue(
    response: dict[str, Any], ctx: ResolutionContext | None = None
) -> list[SongItem]:
    ctx = _context(ctx)
    songs = []
    for data in as_list(response.get("queueDatas")):
        song = resolve_panel_video(_panel_video(dig(data, "content")), ctx)
        if song is not None:
            songs.append(song)
    return songs


# -- Account / actions --------------------------------------------------------


def parse_account_info(response: dict[str, Any]) -> AccountInfo:
    """Active account of a logged-in session.

    Raises:
        PageParseError: If the response carries no active account.
    """
    header = dig(
        response,
        "actions",
        0,
        "openPopupAction",
        "popup",
        "multiPageMenuRenderer",
        "header",
        "activeAccountHeaderRenderer",
    )
    name = join_runs(dig(header, "accountName"))
    if not name:
        raise PageParseError("Account menu has no active account")
    return AccountInfo(
        name=name,
        email=join_runs(dig(header, "email")),
        channel_handle=join_runs(dig(header, "channelHandle")),
        thumbnail_url=dig(header, "accountPhoto", "thumbnails", 0, "url"),
    )


def parse_feedback(response: dict[str, Any]) -> bool:
    """True if every feedback token was processed."""
    responses = as_list(response.get("feedbackResponses"))
    return bool(responses) and all(dig(r, "isProcessed") is True for r in responses)


def parse_playlist_edit(response: dict[str, Any]) -> PlaylistEdit:
    """Status and added videos of a browse/edit_playlist response."""
    added = []
    for result in as_list(response.get("playlistEditResults")):
        data = dig(result, "playlistEditVideoAddedResultData")
        if not isinstance(data, dict) or not data.get("videoId"):
            continue
        try:
            added.append(PlaylistEditedVideo.model_validate(data))
        except ValidationError as e:
            logger.debug("Skipping malformed edit result: %s", e)
    status = response.get("status")
    return PlaylistEdit(
        succeeded=isinstance(status, str) and "SUCCEEDED" in status,
        added=tuple(added),
    )


def parse_created_playlist(response: dict[str, Any], title: str) -> str:
    """Id of the playlist a playlist/create request made.

    Raises:
        PageParseError: If the response carries no playlist id.
    """
    playlist_id = response.get("playlistId")
    if not isinstance(playlist_id, str) or not playlist_id:
        raise PageParseError(f"Creating playlist {title!r} returned no playlist id")
    return playlist_id
