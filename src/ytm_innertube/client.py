"""InnerTube client: one method per logical operation."""

import logging
from collections.abc import Iterator, Sequence
from typing import Any, Protocol

from pydantic import ValidationError

from ytm_innertube.config import APIConfig, RequestContext
from ytm_innertube.exceptions import AuthenticationRequiredError, PageParseError
from ytm_innertube.models.endpoints import BrowseEndpoint, WatchEndpoint
from ytm_innertube.models.enums import SearchFilter
from ytm_innertube.models.items import AlbumItem, AlbumRef, SongItem
from ytm_innertube.models.pages import (
    AccountInfo,
    AlbumPage,
    ArtistItemsPage,
    ArtistPage,
    BrowsePage,
    ChartsPage,
    ExplorePage,
    HistoryPage,
    HomePage,
    NextResult,
    Page,
    PlayerResponse,
    PlaylistEdit,
    PlaylistPage,
    PodcastPage,
    RelatedPage,
    SearchSuggestions,
    SearchSummaryPage,
)
from ytm_innertube.pagination import collect, paginate
from ytm_innertube.parsing import pages
from ytm_innertube.parsing.resolver import ResolutionContext
from ytm_innertube.transport import EndpointKind, InnerTubeTransport, TransportProtocol

logger = logging.getLogger(__name__)

HOME_BROWSE_ID = "FEmusic_home"
EXPLORE_BROWSE_ID = "FEmusic_explore"
CHARTS_BROWSE_ID = "FEmusic_charts"
CHARTS_PARAMS = "ggMGCgQIgAQ%3D"
PODCASTS_BROWSE_ID = "FEmusic_non_music_audio"
HISTORY_BROWSE_ID = "FEmusic_history"

# Upper bound of video ids accepted by music/get_queue
MAX_QUEUE_SIZE = 1000

# Playlist titles containing these are rejected by the service
INVALID_TITLE_CHARACTERS = ("<", ">")


class InnerTubeProtocol(Protocol):
    """Protocol for InnerTube clients.

    The discovery service depends on this protocol only.
    Implement it to feed canned pages into higher layers in tests.
    """

    def album(
        self,
        browse_id: str,
        with_songs: bool = True,
        *,
        context: RequestContext | None = None,
    ) -> AlbumPage:
        """Fetch an album page."""
        ...

    def artist(
        self, browse_id: str, *, context: RequestContext | None = None
    ) -> ArtistPage:
        """Fetch an artist page."""
        ...

    def playlist(
        self, playlist_id: str, *, context: RequestContext | None = None
    ) -> PlaylistPage:
        """Fetch the first page of a playlist."""
        ...

    def next(
        self,
        endpoint: WatchEndpoint,
        continuation: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> NextResult:
        """Fetch the up-next queue of a watch endpoint."""
        ...

    def related(
        self, endpoint: BrowseEndpoint, *, context: RequestContext | None = None
    ) -> RelatedPage:
        """Fetch the related tab of a watch page."""
        ...


def _require_id(value: str | None, name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{name} cannot be empty")
    return value.strip()


def _require_title(title: str) -> str:
    title = _require_id(title, "title")
    found = [c for c in INVALID_TITLE_CHARACTERS if c in title]
    if found:
        raise ValueError(f"title cannot contain {' '.join(found)}")
    return title


class InnerTubeClient:
    """Production InnerTube client.

    Wraps a transport with response parsing and consistent error handling.
    Implements InnerTubeProtocol. Every operation accepts a keyword
    ``context`` that overrides the default request context for that call.
    """

    def __init__(
        self,
        transport: TransportProtocol | None = None,
        config: APIConfig | None = None,
        context: RequestContext | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Optional transport. Creates an InnerTubeTransport if
                not provided.
            config: Optional API configuration. Uses defaults if not provided.
            context: Default request context.
        """
        self._config = config or APIConfig()
        self._context = context or RequestContext()
        self._transport = transport or InnerTubeTransport(self._config, self._context)
        self._resolution = ResolutionContext(heuristics=self._config.heuristics)

        if self._context.is_logged_in:
            logger.info("Using cookies for InnerTube requests")
        elif self._context.cookie:
            logger.info("Cookie configured without SAPISID, requests stay anonymous")
        else:
            logger.info("No cookies configured for InnerTube requests")

    @property
    def config(self) -> APIConfig:
        return self._config

    @property
    def context(self) -> RequestContext:
        return self._context

    # -- Plumbing ---------------------------------------------------------------

    def _ctx(self, context: RequestContext | None) -> RequestContext:
        return context or self._context

    def _require_login(self, ctx: RequestContext, operation: str) -> None:
        if not ctx.cookie:
            raise AuthenticationRequiredError(
                f"{operation} requires a logged-in context"
            )

    def _browse(
        self,
        ctx: RequestContext,
        browse_id: str | None = None,
        params: str | None = None,
        *,
        continuation: str | None = None,
        login: bool = False,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if browse_id:
            body["browseId"] = browse_id
            login = login or self._config.heuristics.requires_login(browse_id)
        if params:
            body["params"] = params
        return self._transport.request(
            EndpointKind.BROWSE, body, ctx, continuation=continuation, login=login
        )

    # -- Search -------------------------------------------------------------------

    def search(
        self,
        query: str,
        filter: SearchFilter | None = None,
        *,
        context: RequestContext | None = None,
    ) -> Page:
        """Search within one result category.

        Args:
            query: Search text.
            filter: Result category. None searches every category.
            context: Per-call request context.

        Returns:
            Items of every result shelf, deduplicated by id.

        Raises:
            ValueError: If query is empty.
            TransportError: If the request fails.
        """
        query = _require_id(query, "query")
        body: dict[str, Any] = {"query": query}
        if filter is not None:
            body["params"] = filter.value
        logger.debug("Searching %r (filter=%s)", query, filter.name if filter else None)
        response = self._transport.request(
            EndpointKind.SEARCH, body, self._ctx(context)
        )
        return pages.parse_search(response, self._resolution)

    def search_continuation(
        self, continuation: str, *, context: RequestContext | None = None
    ) -> Page:
        response = self._transport.request(
            EndpointKind.SEARCH, {}, self._ctx(context), continuation=continuation
        )
        return pages.parse_search_continuation(response, self._resolution)

    def search_summary(
        self, query: str, *, context: RequestContext | None = None
    ) -> SearchSummaryPage:
        """Unfiltered search, grouped into titled sections."""
        query = _require_id(query, "query")
        response = self._transport.request(
            EndpointKind.SEARCH, {"query": query}, self._ctx(context)
        )
        return pages.parse_search_summary(response, self._resolution)

    def search_suggestions(
        self, query: str, *, context: RequestContext | None = None
    ) -> SearchSuggestions:
        response = self._transport.request(
            EndpointKind.SUGGESTIONS, {"input": query}, self._ctx(context)
        )
        return pages.parse_search_suggestions(response, self._resolution)

    # -- Albums, artists, playlists, podcasts ---------------------------------------

    def album(
        self,
        browse_id: str,
        with_songs: bool = True,
        *,
        context: RequestContext | None = None,
    ) -> AlbumPage:
        """Fetch an album.

        Args:
            browse_id: Album browse id (MPREb_...).
            with_songs: Replace the in-page tracks with the complete track
                list read through the album's playlist.
            context: Per-call request context.

        Raises:
            ValueError: If browse_id is empty.
            PageParseError: If the album has no header.
            TransportError: If a request fails.
        """
        browse_id = _require_id(browse_id, "browse_id")
        ctx = self._ctx(context)
        logger.debug("Fetching album: %s", browse_id)
        response = self._browse(ctx, browse_id)
        page = pages.parse_album(response, browse_id, self._resolution)
        if not with_songs or not page.album.playlist_id:
            return page
        songs = self.album_songs(page.album.playlist_id, page.album, context=ctx)
        if not songs:
            return page
        return page.model_copy(update={"songs": tuple(songs)})

    def album_songs(
        self,
        playlist_id: str,
        album: AlbumItem | None = None,
        *,
        context: RequestContext | None = None,
    ) -> list[SongItem]:
        """Every track of an album, following continuations.

        Args:
            playlist_id: The album's playlist id (OLAK5uy_...).
            album: Album stamped onto tracks that do not name one.
            context: Per-call request context.
        """
        playlist_id = _require_id(playlist_id, "playlist_id")
        ctx = self._ctx(context)
        heuristics = self._config.heuristics
        resolution = self._resolution
        if album is not None:
            resolution = ResolutionContext(
                heuristics=heuristics,
                album=AlbumRef(name=album.title, id=album.id),
                thumbnail=album.thumbnail,
            )

        first = pages.parse_playlist_songs(
            self._browse(ctx, heuristics.playlist_prefix + playlist_id), resolution
        )

        def fetch_next(token: str) -> Page:
            response = self._browse(ctx, continuation=token)
            return pages.parse_playlist_continuation(response, resolution)

        return [
            song
            for song in collect(
                first, fetch_next, max_steps=self._config.max_continuation_steps
            )
            if isinstance(song, SongItem)
        ]

    def artist(
        self, browse_id: str, *, context: RequestContext | None = None
    ) -> ArtistPage:
        """Fetch an artist page.

        Raises:
            ValueError: If browse_id is empty.
            PageParseError: If the response has no artist header.
            TransportError: If the request fails.
        """
        browse_id = _require_id(browse_id, "browse_id")
        logger.debug("Fetching artist: %s", browse_id)
        response = self._browse(self._ctx(context), browse_id)
        return pages.parse_artist(response, browse_id, self._resolution)

    def artist_items(
        self, endpoint: BrowseEndpoint, *, context: RequestContext | None = None
    ) -> ArtistItemsPage:
        """Fetch the "see all" page behind an artist section."""
        response = self._browse(self._ctx(context), endpoint.browse_id, endpoint.params)
        return pages.parse_artist_items(response, self._resolution)

    def artist_items_continuation(
        self, continuation: str, *, context: RequestContext | None = None
    ) -> Page:
        response = self._browse(self._ctx(context), continuation=continuation)
        return pages.parse_shelf_continuation(response, self._resolution)

    def playlist(
        self, playlist_id: str, *, context: RequestContext | None = None
    ) -> PlaylistPage:
        """Fetch a playlist header and its first page of songs.

        Args:
            playlist_id: Playlist id, with or without the VL browse prefix.
            context: Per-call request context.

        Raises:
            ValueError: If playlist_id is empty.
            PageParseError: If the response has no playlist header.
            TransportError: If the request fails.
        """
        heuristics = self._config.heuristics
        playlist_id = heuristics.strip_playlist_prefix(
            _require_id(playlist_id, "playlist_id")
        )
        logger.debug("Fetching playlist: %s", playlist_id)
        response = self._browse(
            self._ctx(context), heuristics.playlist_prefix + playlist_id, login=True
        )
        return pages.parse_playlist(response, playlist_id, self._resolution)

    def playlist_continuation(
        self, continuation: str, *, context: RequestContext | None = None
    ) -> Page:
        """Next page of playlist songs.

        The continuation is None when the page has no songs.
        """
        response = self._browse(
            self._ctx(context), continuation=continuation, login=True
        )
        return pages.parse_playlist_continuation(response, self._resolution)

    def playlist_songs(
        self, playlist_id: str, *, context: RequestContext | None = None
    ) -> Iterator[SongItem]:
        """Lazily iterate every song of a playlist.

        The header request is made on the first ``next()``; each continuation
        is fetched only when the previous page is exhausted.
        """
        ctx = self._ctx(context)
        page = self.playlist(playlist_id, context=ctx)
        first = Page(items=page.songs, continuation=page.songs_continuation)
        for item in paginate(
            first,
            lambda token: self.playlist_continuation(token, context=ctx),
            max_steps=self._config.max_continuation_steps,
        ):
            if isinstance(item, SongItem):
                yield item

    def podcast(
        self, podcast_id: str, *, context: RequestContext | None = None
    ) -> PodcastPage:
        """Fetch a podcast show and its episodes.

        Raises:
            ValueError: If podcast_id is empty.
            PageParseError: If the response has no podcast header.
            TransportError: If the request fails.
        """
        podcast_id = _require_id(podcast_id, "podcast_id")
        response = self._browse(self._ctx(context), podcast_id, login=True)
        return pages.parse_podcast(response, podcast_id, self._resolution)

    # -- Feeds --------------------------------------------------------------------

    def home(
        self,
        continuation: str | None = None,
        params: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> HomePage:
        """Fetch the home feed, or its next page when continuation is given.

        Args:
            continuation: Token of the next batch of sections.
            params: Params of a selected mood chip.
            context: Per-call request context.
        """
        ctx = self._ctx(context)
        if continuation:
            response = self._browse(ctx, continuation=continuation)
            return pages.parse_home_continuation(response, self._resolution)
        response = self._browse(ctx, HOME_BROWSE_ID, params)
        return pages.parse_home(response, self._resolution)

    def explore(self, *, context: RequestContext | None = None) -> ExplorePage:
        response = self._browse(self._ctx(context), EXPLORE_BROWSE_ID)
        return pages.parse_explore(response, self._resolution)

    def charts(
        self, continuation: str | None = None, *, context: RequestContext | None = None
    ) -> ChartsPage:
        ctx = self._ctx(context)
        if continuation:
            response = self._browse(ctx, continuation=continuation)
        else:
            response = self._browse(ctx, CHARTS_BROWSE_ID, CHARTS_PARAMS)
        return pages.parse_charts(response, self._resolution)

    def podcast_discover(self, *, context: RequestContext | None = None) -> HomePage:
        """Podcast landing page, shaped like the home feed."""
        response = self._browse(self._ctx(context), PODCASTS_BROWSE_ID, login=True)
        return pages.parse_home(response, self._resolution)

    def browse(
        self,
        browse_id: str,
        params: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> BrowsePage:
        """Fetch any single-column browse page by id.

        Follows the endpoints found elsewhere, e.g. a mood from ``explore``
        or a home chip. Library ids are sent logged in.

        Raises:
            ValueError: If browse_id is empty.
        """
        browse_id = _require_id(browse_id, "browse_id")
        response = self._browse(self._ctx(context), browse_id, params)
        return pages.parse_browse(response, self._resolution)

    # -- Library ------------------------------------------------------------------

    def library(
        self,
        browse_id: str,
        tab_index: int = 0,
        params: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> Page:
        """Fetch one tab of a library page.

        Args:
            browse_id: Library browse id (e.g. FEmusic_liked_playlists).
            tab_index: Tab to read when the page has several.
            params: Sort or filter params, see LibraryFilter.
            context: Per-call request context.

        Raises:
            AuthenticationRequiredError: If the context has no cookie.
        """
        ctx = self._ctx(context)
        self._require_login(ctx, "library")
        response = self._browse(ctx, browse_id, params, login=True)
        return pages.parse_library(response, tab_index, self._resolution)

    def library_continuation(
        self, continuation: str, *, context: RequestContext | None = None
    ) -> Page:
        ctx = self._ctx(context)
        self._require_login(ctx, "library")
        response = self._browse(ctx, continuation=continuation, login=True)
        return pages.parse_shelf_continuation(response, self._resolution)

    def history(self, *, context: RequestContext | None = None) -> HistoryPage:
        ctx = self._ctx(context)
        self._require_login(ctx, "history")
        response = self._browse(ctx, HISTORY_BROWSE_ID, login=True)
        return pages.parse_history(response, self._resolution)

    # -- Watch --------------------------------------------------------------------

    def next(
        self,
        endpoint: WatchEndpoint,
        continuation: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> NextResult:
        """Fetch the up-next queue of a watch endpoint.

        A radio queue that ends in an automix preview is extended once with
        the automix playlist; the lyrics and related endpoints and the
        current index stay those of the original queue.
        """
        ctx = self._ctx(context)
        response = self._transport.request(
            EndpointKind.NEXT, endpoint.to_request(), ctx, continuation=continuation
        )
        result = pages.parse_next(response, endpoint, self._resolution)
        if continuation:
            return result

        automix = pages.automix_endpoint(response)
        if automix is None:
            return result
        logger.debug("Following automix playlist %s", automix.playlist_id)
        extra = pages.parse_next(
            self._transport.request(EndpointKind.NEXT, automix.to_request(), ctx),
            automix,
            self._resolution,
        )
        return result.model_copy(
            update={
                "items": result.items + extra.items,
                "continuation": extra.continuation,
                "endpoint": automix,
            }
        )

    def lyrics(
        self, endpoint: BrowseEndpoint, *, context: RequestContext | None = None
    ) -> str | None:
        response = self._browse(self._ctx(context), endpoint.browse_id, endpoint.params)
        return pages.parse_lyrics(response)

    def related(
        self, endpoint: BrowseEndpoint, *, context: RequestContext | None = None
    ) -> RelatedPage:
        response = self._browse(self._ctx(context), endpoint.browse_id, endpoint.params)
        return pages.parse_related(response, self._resolution)

    def queue(
        self,
        video_ids: Sequence[str] | None = None,
        playlist_id: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> list[SongItem]:
        """Resolve video ids (or a playlist) into queue songs.

        Raises:
            ValueError: If more than MAX_QUEUE_SIZE ids are given, or neither
                ids nor a playlist id.
        """
        if video_ids is not None and len(video_ids) > MAX_QUEUE_SIZE:
            raise ValueError(f"queue accepts at most {MAX_QUEUE_SIZE} video ids")
        if not video_ids and not playlist_id:
            raise ValueError("video_ids or playlist_id is required")
        body: dict[str, Any] = {}
        if video_ids:
            body["videoIds"] = list(video_ids)
        if playlist_id:
            body["playlistId"] = playlist_id
        response = self._transport.request(EndpointKind.QUEUE, body, self._ctx(context))
        return pages.parse_queue(response, self._resolution)

    def player(
        self,
        video_id: str,
        playlist_id: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> PlayerResponse:
        """Fetch playability, video details and stream formats.

        Raises:
            ValueError: If video_id is empty.
            PageParseError: If the response has no playability status.
            TransportError: If the request fails.
        """
        body: dict[str, Any] = {"videoId": _require_id(video_id, "video_id")}
        if playlist_id:
            body["playlistId"] = playlist_id
        response = self._transport.request(
            EndpointKind.PLAYER, body, self._ctx(context)
        )
        try:
            return PlayerResponse.model_validate(response)
        except ValidationError as e:
            raise PageParseError(f"Invalid player response for {video_id}: {e}") from e

    # -- Account actions ------------------------------------------------------------

    def feedback(
        self, tokens: Sequence[str], *, context: RequestContext | None = None
    ) -> bool:
        """Send feedback tokens (library add/remove, history removal).

        Returns:
            True if the service processed every token.

        Raises:
            AuthenticationRequiredError: If the context has no cookie.
        """
        ctx = self._ctx(context)
        self._require_login(ctx, "feedback")
        if not tokens:
            return True
        response = self._transport.request(
            EndpointKind.FEEDBACK, {"feedbackTokens": list(tokens)}, ctx, login=True
        )
        return pages.parse_feedback(response)

    def like_video(
        self, video_id: str, like: bool = True, *, context: RequestContext | None = None
    ) -> None:
        ctx = self._ctx(context)
        self._require_login(ctx, "like_video")
        kind = EndpointKind.LIKE if like else EndpointKind.REMOVE_LIKE
        target = {"videoId": _require_id(video_id, "video_id")}
        self._transport.request(kind, {"target": target}, ctx, login=True)

    def like_playlist(
        self,
        playlist_id: str,
        like: bool = True,
        *,
        context: RequestContext | None = None,
    ) -> None:
        ctx = self._ctx(context)
        self._require_login(ctx, "like_playlist")
        kind = EndpointKind.LIKE if like else EndpointKind.REMOVE_LIKE
        target = {"playlistId": _require_id(playlist_id, "playlist_id")}
        self._transport.request(kind, {"target": target}, ctx, login=True)

    def subscribe_channel(
        self,
        channel_id: str,
        subscribe: bool = True,
        *,
        context: RequestContext | None = None,
    ) -> None:
        ctx = self._ctx(context)
        self._require_login(ctx, "subscribe_channel")
        kind = EndpointKind.SUBSCRIBE if subscribe else EndpointKind.UNSUBSCRIBE
        body = {"channelIds": [_require_id(channel_id, "channel_id")]}
        self._transport.request(kind, body, ctx, login=True)

    def save_podcast(
        self,
        podcast_id: str,
        save: bool = True,
        *,
        context: RequestContext | None = None,
    ) -> None:
        """Save a podcast show to the library, or remove it with save=False."""
        podcast_id = _require_id(podcast_id, "podcast_id")
        playlist_id = self._config.heuristics.strip_podcast_prefix(podcast_id)
        self.like_playlist(playlist_id, like=save, context=context)

    def add_song_to_library(
        self, video_id: str, add: bool = True, *, context: RequestContext | None = None
    ) -> bool:
        """Add a song to (or remove it from) the library.

        Library tokens go stale, so a fresh pair is read from the song's
        ``next`` response first.

        Raises:
            AuthenticationRequiredError: If the context has no cookie.
            PageParseError: If the song or its library token is missing.
        """
        ctx = self._ctx(context)
        self._require_login(ctx, "add_song_to_library")
        video_id = _require_id(video_id, "video_id")
        result = self.next(WatchEndpoint(video_id=video_id), context=ctx)
        song = next((item for item in result.items if item.id == video_id), None)
        if song is None:
            raise PageParseError(f"Song {video_id} not found in its watch queue")
        token = song.library_add_token if add else song.library_remove_token
        if token is None:
            raise PageParseError(f"Song {video_id} has no library token")
        return self.feedback([token], context=ctx)

    def remove_history_items(
        self, tokens: Sequence[str], *, context: RequestContext | None = None
    ) -> bool:
        """Remove history entries by their ``history_remove_token``."""
        return self.feedback(tokens, context=context)

    # -- Playlist editing -----------------------------------------------------------

    def _edit_playlist(
        self,
        ctx: RequestContext,
        operation: str,
        playlist_id: str,
        actions: list[dict[str, Any]],
    ) -> PlaylistEdit:
        self._require_login(ctx, operation)
        body = {
            "playlistId": self._config.heuristics.strip_playlist_prefix(
                _require_id(playlist_id, "playlist_id")
            ),
            "actions": actions,
        }
        response = self._transport.request(
            EndpointKind.EDIT_PLAYLIST, body, ctx, login=True
        )
        edit = pages.parse_playlist_edit(response)
        if not edit.succeeded:
            logger.warning("%s on %s was not applied", operation, playlist_id)
        return edit

    def add_to_playlist(
        self,
        playlist_id: str,
        video_ids: Sequence[str],
        *,
        context: RequestContext | None = None,
    ) -> PlaylistEdit:
        """Append songs to an owned playlist.

        Returns:
            The edit, with the set video id given to each added song.

        Raises:
            ValueError: If video_ids is empty.
            AuthenticationRequiredError: If the context has no cookie.
        """
        if not video_ids:
            raise ValueError("video_ids cannot be empty")
        actions = [
            {"action": "ACTION_ADD_VIDEO", "addedVideoId": _require_id(v, "video_id")}
            for v in video_ids
        ]
        return self._edit_playlist(
            self._ctx(context), "add_to_playlist", playlist_id, actions
        )

    def remove_from_playlist(
        self,
        playlist_id: str,
        video_id: str,
        set_video_id: str,
        *,
        context: RequestContext | None = None,
    ) -> PlaylistEdit:
        """Remove one entry; ``set_video_id`` tells duplicates apart."""
        action = {
            "action": "ACTION_REMOVE_VIDEO",
            "removedVideoId": _require_id(video_id, "video_id"),
            "setVideoId": _require_id(set_video_id, "set_video_id"),
        }
        return self._edit_playlist(
            self._ctx(context), "remove_from_playlist", playlist_id, [action]
        )

    def move_playlist_song(
        self,
        playlist_id: str,
        set_video_id: str,
        successor_set_video_id: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> PlaylistEdit:
        """Move an entry before ``successor_set_video_id``, or to the end."""
        action = {
            "action": "ACTION_MOVE_VIDEO_BEFORE",
            "setVideoId": _require_id(set_video_id, "set_video_id"),
        }
        if successor_set_video_id:
            action["movedSetVideoIdSuccessor"] = successor_set_video_id
        return self._edit_playlist(
            self._ctx(context), "move_playlist_song", playlist_id, [action]
        )

    def rename_playlist(
        self, playlist_id: str, name: str, *, context: RequestContext | None = None
    ) -> PlaylistEdit:
        action = {
            "action": "ACTION_SET_PLAYLIST_NAME",
            "playlistName": _require_title(name),
        }
        return self._edit_playlist(
            self._ctx(context), "rename_playlist", playlist_id, [action]
        )

    def create_playlist(
        self,
        title: str,
        video_ids: Sequence[str] = (),
        *,
        context: RequestContext | None = None,
    ) -> str:
        """Create a private playlist, optionally seeded with songs.

        Returns:
            The new playlist id.

        Raises:
            ValueError: If the title is empty or contains ``<`` or ``>``.
            AuthenticationRequiredError: If the context has no cookie.
            PageParseError: If the response carries no playlist id.
        """
        ctx = self._ctx(context)
        self._require_login(ctx, "create_playlist")
        title = _require_title(title)
        body: dict[str, Any] = {"title": title, "privacyStatus": "PRIVATE"}
        if video_ids:
            body["videoIds"] = list(video_ids)
        response = self._transport.request(
            EndpointKind.CREATE_PLAYLIST, body, ctx, login=True
        )
        playlist_id = pages.parse_created_playlist(response, title)
        logger.info("Created playlist %s (%s)", title, playlist_id)
        return playlist_id

    def delete_playlist(
        self, playlist_id: str, *, context: RequestContext | None = None
    ) -> None:
        ctx = self._ctx(context)
        self._require_login(ctx, "delete_playlist")
        body = {
            "playlistId": self._config.heuristics.strip_playlist_prefix(
                _require_id(playlist_id, "playlist_id")
            )
        }
        self._transport.request(EndpointKind.DELETE_PLAYLIST, body, ctx, login=True)

    def account_info(self, *, context: RequestContext | None = None) -> AccountInfo:
        ctx = self._ctx(context)
        self._require_login(ctx, "account_info")
        response = self._transport.request(EndpointKind.ACCOUNT, {}, ctx, login=True)
        return pages.parse_account_info(response)

    def visitor_data(self, *, context: RequestContext | None = None) -> str | None:
        """Fetch a fresh visitor id for anonymous sessions."""
        return self._transport.fetch_visitor_data(self._ctx(context))
