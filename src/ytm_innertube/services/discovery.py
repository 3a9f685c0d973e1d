"""Recommendation features built by fanning out over seed items."""

import logging
import random
from collections.abc import Sequence
from typing import Any, TypeVar

from ytm_innertube.aggregation import aggregate, dedupe
from ytm_innertube.client import InnerTubeProtocol
from ytm_innertube.config import RequestContext
from ytm_innertube.filters import ContentFilters, filter_explicit, filter_video_songs
from ytm_innertube.models.cancel import CancelToken
from ytm_innertube.models.endpoints import BrowseEndpoint, WatchEndpoint
from ytm_innertube.models.items import AnyItem, Artist, PlaylistItem
from ytm_innertube.models.pages import (
    CommunityPlaylist,
    DailyDiscoverItem,
    SimilarRecommendation,
)

logger = logging.getLogger(__name__)

# Playlists by these authors are generated, not curated by listeners
EXCLUDED_AUTHORS = frozenset({"YouTube Music", "YouTube", "Playlist"})
# Radio mixes and album playlists
EXCLUDED_PLAYLIST_PREFIXES = ("RD", "OLAK")

COMMUNITY_CANDIDATES = 5
COMMUNITY_PREVIEW_SONGS = 10
ARTIST_SECTIONS = 3
ARTIST_ITEMS = 12
ALBUM_ITEMS = 10
RELATED_SONGS = 10
RELATED_ALBUMS = 5
RELATED_ARTISTS = 3
RELATED_PLAYLISTS = 3

S = TypeVar("S")


def _shuffled(items: Sequence[Any], rng: random.Random) -> list[Any]:
    result = list(items)
    rng.shuffle(result)
    return result


class DiscoveryService:
    """Discovery feeds assembled from many independent requests.

    Every feature runs one task per seed. A seed whose requests fail is
    logged and skipped; the feature returns whatever the other seeds found.

    Example:
        >>> from ytm_innertube import create_client
        >>> service = DiscoveryService(create_client())
        >>> for entry in service.daily_discover(["dQw4w9WgXcQ", "kJQP7kiw5Fk"]):
        ...     print(entry.seed_id, "->", entry.recommendation.title)
    """

    def __init__(
        self,
        client: InnerTubeProtocol,
        *,
        filters: ContentFilters | None = None,
        max_workers: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            client: Client used for every request.
            filters: Default content filters.
            max_workers: Thread pool size per fan-out.
            rng: Random source for seed selection and shuffling.
        """
        self._client = client
        self._filters = filters or ContentFilters()
        self._max_workers = max_workers
        self._rng = rng or random.Random()

    def _with_rngs(self, seeds: Sequence[S]) -> list[tuple[S, random.Random]]:
        """Pair each seed with its own generator, drawn on the calling thread.

        Worker threads never touch the shared generator.
        """
        return [(seed, random.Random(self._rng.random())) for seed in seeds]

    def _related_endpoint(
        self, video_id: str, context: RequestContext | None
    ) -> BrowseEndpoint | None:
        result = self._client.next(WatchEndpoint(video_id=video_id), context=context)
        if result.related_endpoint is None:
            logger.debug("No related tab for %s", video_id)
        return result.related_endpoint

    def related_items(
        self,
        endpoint: BrowseEndpoint,
        *,
        filters: ContentFilters | None = None,
        context: RequestContext | None = None,
    ) -> list[AnyItem]:
        """Songs, albums, artists and playlists of a related tab, filtered."""
        page = self._client.related(endpoint, context=context)
        items = dedupe([*page.songs, *page.albums, *page.artists, *page.playlists])
        return (filters or self._filters).apply(items)

    # -- Daily discover -------------------------------------------------------------

    def daily_discover(
        self,
        seed_video_ids: Sequence[str],
        filters: ContentFilters | None = None,
        seed_count: int = 5,
        *,
        cancel_token: CancelToken | None = None,
        context: RequestContext | None = None,
    ) -> list[DailyDiscoverItem]:
        """One fresh recommendation per seed song.

        Explicit songs are always skipped; music videos are skipped when the
        filters hide them.

        Args:
            seed_video_ids: Candidate seeds, e.g. liked songs.
            filters: Content filters. Defaults to the service filters.
            seed_count: Number of seeds drawn at random.
            cancel_token: Abandons the fan-out when set.
            context: Per-call request context.

        Returns:
            Recommendations with distinct ids, in random order.

        Raises:
            CancellationError: If cancel_token was set.
        """
        filters = filters or self._filters
        unique = dedupe(seed_video_ids, key=lambda video_id: video_id)
        seeds = _shuffled(unique, self._rng)[:seed_count]

        def query(task: tuple[str, random.Random]) -> list[DailyDiscoverItem]:
            seed, rng = task
            endpoint = self._related_endpoint(seed, context)
            if endpoint is None:
                return []
            songs = self._client.related(endpoint, context=context).songs
            songs = filter_video_songs(filter_explicit(songs), filters.hide_video_songs)
            for song in _shuffled(songs, rng):
                if song.id != seed:
                    return [
                        DailyDiscoverItem(
                            seed_id=seed, recommendation=song, related_endpoint=endpoint
                        )
                    ]
            return []

        return aggregate(
            self._with_rngs(seeds),
            query,
            key=lambda entry: entry.recommendation.id,
            shuffle=True,
            max_workers=self._max_workers,
            cancel_token=cancel_token,
            rng=self._rng,
        )

    # -- Community playlists --------------------------------------------------------

    @staticmethod
    def _is_community_playlist(
        playlist: PlaylistItem, seed_artist: str | None = None
    ) -> bool:
        author = playlist.author.name if playlist.author else None
        if author in EXCLUDED_AUTHORS:
            return False
        if seed_artist is not None and author == seed_artist:
            return False
        return not playlist.id.startswith(EXCLUDED_PLAYLIST_PREFIXES)

    def community_playlists(
        self,
        artist_seeds: Sequence[Artist] = (),
        song_seed_ids: Sequence[str] = (),
        *,
        cancel_token: CancelToken | None = None,
        context: RequestContext | None = None,
    ) -> list[CommunityPlaylist]:
        """Listener-made playlists around a few artists and songs.

        Candidates come from the sections of up to three artist pages and the
        related tabs of up to two songs. Five distinct candidates are drawn at
        random and fetched; a candidate is kept only if it has songs.

        Raises:
            CancellationError: If cancel_token was set.
        """
        artists = [artist for artist in artist_seeds if artist.id]
        seeds: list[tuple[str, Any]] = [
            ("artist", artist) for artist in _shuffled(artists, self._rng)[:3]
        ] + [
            ("song", video_id)
            for video_id in _shuffled(song_seed_ids, self._rng)[:2]
        ]

        def candidates(seed: tuple[str, Any]) -> list[PlaylistItem]:
            kind, value = seed
            if kind == "artist":
                page = self._client.artist(value.id, context=context)
                return [
                    item
                    for section in page.sections
                    for item in section.items
                    if isinstance(item, PlaylistItem)
                    and self._is_community_playlist(item, value.name)
                ]
            endpoint = self._related_endpoint(value, context)
            if endpoint is None:
                return []
            page = self._client.related(endpoint, context=context)
            return [
                item for item in page.playlists if self._is_community_playlist(item)
            ]

        picked = aggregate(
            seeds,
            candidates,
            shuffle=True,
            max_workers=self._max_workers,
            cancel_token=cancel_token,
            rng=self._rng,
        )[:COMMUNITY_CANDIDATES]

        def fetch(playlist: PlaylistItem) -> list[CommunityPlaylist]:
            page = self._client.playlist(playlist.id, context=context)
            songs = page.songs[:COMMUNITY_PREVIEW_SONGS]
            if not songs:
                return []
            count = page.playlist.song_count_text or playlist.song_count_text
            return [
                CommunityPlaylist(
                    playlist=playlist.model_copy(update={"song_count_text": count}),
                    songs=songs,
                )
            ]

        return aggregate(
            picked,
            fetch,
            key=lambda entry: entry.playlist.id,
            shuffle=True,
            max_workers=self._max_workers,
            cancel_token=cancel_token,
            rng=self._rng,
        )

    # -- Similar recommendations ----------------------------------------------------

    def similar_recommendations(
        self,
        artist_ids: Sequence[str] = (),
        song_ids: Sequence[str] = (),
        album_ids: Sequence[str] = (),
        filters: ContentFilters | None = None,
        *,
        cancel_token: CancelToken | None = None,
        context: RequestContext | None = None,
    ) -> list[SimilarRecommendation]:
        """Shelves of items similar to each artist, song or album seed.

        Raises:
            CancellationError: If cancel_token was set.
        """
        filters = filters or self._filters

        def finish(
            title: str,
            seed_id: str,
            items: list[Any],
            rng: random.Random,
            limit: int | None = None,
        ) -> list[SimilarRecommendation]:
            kept = _shuffled(filters.apply(dedupe(items)), rng)[:limit]
            if not kept:
                logger.debug("No similar items for %s", seed_id)
                return []
            return [SimilarRecommendation(title=title, seed_id=seed_id, items=kept)]

        def from_artist(
            artist_id: str, rng: random.Random
        ) -> list[SimilarRecommendation]:
            page = self._client.artist(artist_id, context=context)
            items = [
                item
                for section in page.sections[-ARTIST_SECTIONS:]
                for item in section.items
            ]
            return finish(page.artist.title, artist_id, items, rng, ARTIST_ITEMS)

        def from_song(video_id: str, rng: random.Random) -> list[SimilarRecommendation]:
            endpoint = WatchEndpoint(video_id=video_id)
            result = self._client.next(endpoint, context=context)
            if result.related_endpoint is None:
                return []
            page = self._client.related(result.related_endpoint, context=context)
            current = result.items[result.current_index or 0] if result.items else None
            items = (
                _shuffled(page.songs, rng)[:RELATED_SONGS]
                + _shuffled(page.albums, rng)[:RELATED_ALBUMS]
                + _shuffled(page.artists, rng)[:RELATED_ARTISTS]
                + _shuffled(page.playlists, rng)[:RELATED_PLAYLISTS]
            )
            title = current.title if current else video_id
            return finish(title, video_id, items, rng)

        def from_album(
            album_id: str, rng: random.Random
        ) -> list[SimilarRecommendation]:
            page = self._client.album(album_id, with_songs=False, context=context)
            items: list[Any] = list(page.other_versions)
            artist_id = next((a.id for a in page.album.artists or () if a.id), None)
            if artist_id:
                sections = self._client.artist(artist_id, context=context).sections
                if sections:
                    items.extend(sections[-1].items)
            return finish(page.album.title, album_id, items, rng, ALBUM_ITEMS)

        queries = {"artist": from_artist, "song": from_song, "album": from_album}
        seeds = (
            [("artist", seed) for seed in artist_ids]
            + [("song", seed) for seed in song_ids]
            + [("album", seed) for seed in album_ids]
        )
        return aggregate(
            self._with_rngs(seeds),
            lambda task: queries[task[0][0]](task[0][1], task[1]),
            key=lambda entry: entry.seed_id,
            shuffle=True,
            max_workers=self._max_workers,
            cancel_token=cancel_token,
            rng=self._rng,
        )
