"""Page models: the per-endpoint shapes built from resolved items."""

from pydantic import Field

from ytm_innertube.models.base import InnerTubeModel
from ytm_innertube.models.endpoints import BrowseEndpoint, WatchEndpoint
from ytm_innertube.models.enums import ChartType
from ytm_innertube.models.items import (
    AlbumItem,
    AnyItem,
    ArtistItem,
    EpisodeItem,
    PlaylistItem,
    PodcastItem,
    SongItem,
)

__all__ = [
    "AccountInfo",
    "AlbumPage",
    "ArtistItemsPage",
    "ArtistPage",
    "ArtistSection",
    "BrowsePage",
    "BrowseSection",
    "ChartSection",
    "ChartsPage",
    "CommunityPlaylist",
    "DailyDiscoverItem",
    "ExplorePage",
    "HistoryPage",
    "HistorySection",
    "HomeChip",
    "HomePage",
    "HomeSection",
    "MoodAndGenre",
    "NextResult",
    "Page",
    "PlayabilityStatus",
    "PlayerResponse",
    "PlaylistEdit",
    "PlaylistEditedVideo",
    "PlaylistPage",
    "PodcastPage",
    "RelatedPage",
    "SearchSuggestions",
    "SearchSummary",
    "SearchSummaryPage",
    "SimilarRecommendation",
    "StreamFormat",
    "StreamingData",
    "VideoDetails",
]


class Page(InnerTubeModel):
    """A list of items plus the token of the next page.

    ``continuation`` is None on the terminal page.
    """

    items: tuple[AnyItem, ...] = ()
    continuation: str | None = None


# -- Home / explore -----------------------------------------------------------


class HomeChip(InnerTubeModel):
    """Mood chip shown above the home feed."""

    title: str
    endpoint: BrowseEndpoint | None = None
    deselect_endpoint: BrowseEndpoint | None = None


class HomeSection(InnerTubeModel):
    """A carousel of the home feed. Never empty."""

    title: str
    label: str | None = None
    thumbnail: str | None = None
    endpoint: BrowseEndpoint | None = None
    items: tuple[AnyItem, ...] = Field(min_length=1)


class HomePage(InnerTubeModel):
    chips: tuple[HomeChip, ...] = ()
    sections: tuple[HomeSection, ...] = ()
    continuation: str | None = None


class MoodAndGenre(InnerTubeModel):
    title: str
    endpoint: BrowseEndpoint


class BrowseSection(InnerTubeModel):
    """A grid, carousel or shelf of a generic browse page. Never empty."""

    title: str | None = None
    items: tuple[AnyItem, ...] = Field(min_length=1)


class BrowsePage(InnerTubeModel):
    """Any single-column browse page, e.g. a mood or genre."""

    title: str | None = None
    sections: tuple[BrowseSection, ...] = ()


class ExplorePage(InnerTubeModel):
    new_release_albums: tuple[AlbumItem, ...] = ()
    moods_and_genres: tuple[MoodAndGenre, ...] = ()


class ChartSection(InnerTubeModel):
    title: str
    items: tuple[AnyItem, ...] = ()
    chart_type: ChartType = ChartType.TOP


class ChartsPage(InnerTubeModel):
    sections: tuple[ChartSection, ...] = ()
    continuation: str | None = None


# -- Search -------------------------------------------------------------------


class SearchSummary(InnerTubeModel):
    """One titled group of the unfiltered search results."""

    title: str
    items: tuple[AnyItem, ...] = ()


class SearchSummaryPage(InnerTubeModel):
    summaries: tuple[SearchSummary, ...] = ()


class SearchSuggestions(InnerTubeModel):
    queries: tuple[str, ...] = ()
    recommended_items: tuple[AnyItem, ...] = ()


# -- Entity pages -------------------------------------------------------------


class AlbumPage(InnerTubeModel):
    album: AlbumItem
    songs: tuple[SongItem, ...] = ()
    other_versions: tuple[AlbumItem, ...] = ()


class ArtistSection(InnerTubeModel):
    """A shelf or carousel of an artist page."""

    title: str
    items: tuple[AnyItem, ...] = ()
    more_endpoint: BrowseEndpoint | None = None


class ArtistPage(InnerTubeModel):
    artist: ArtistItem
    sections: tuple[ArtistSection, ...] = ()
    description: str | None = None
    subscriber_count_text: str | None = None
    monthly_listener_count: str | None = None


class ArtistItemsPage(InnerTubeModel):
    """The "see all" page of an artist section."""

    title: str
    items: tuple[AnyItem, ...] = ()
    continuation: str | None = None


class PlaylistPage(InnerTubeModel):
    """First page of a playlist.

    ``songs_continuation`` continues the song shelf; ``continuation``
    continues the surrounding section list (suggestions and the like).
    """

    playlist: PlaylistItem
    songs: tuple[SongItem, ...] = ()
    songs_continuation: str | None = None
    continuation: str | None = None


class PodcastPage(InnerTubeModel):
    podcast: PodcastItem
    episodes: tuple[EpisodeItem, ...] = ()
    continuation: str | None = None


class HistorySection(InnerTubeModel):
    title: str
    songs: tuple[SongItem, ...] = ()


class HistoryPage(InnerTubeModel):
    sections: tuple[HistorySection, ...] = ()


# -- Watch --------------------------------------------------------------------


class NextResult(InnerTubeModel):
    """Up-next queue of a watch endpoint, with lyrics and related tabs."""

    title: str | None = None
    items: tuple[SongItem, ...] = ()
    current_index: int | None = None
    lyrics_endpoint: BrowseEndpoint | None = None
    related_endpoint: BrowseEndpoint | None = None
    continuation: str | None = None
    endpoint: WatchEndpoint


class RelatedPage(InnerTubeModel):
    songs: tuple[SongItem, ...] = ()
    albums: tuple[AlbumItem, ...] = ()
    artists: tuple[ArtistItem, ...] = ()
    playlists: tuple[PlaylistItem, ...] = ()


class PlayabilityStatus(InnerTubeModel):
    status: str
    reason: str | None = None


class VideoDetails(InnerTubeModel):
    video_id: str = Field(alias="videoId")
    title: str | None = None
    author: str | None = None
    channel_id: str | None = Field(default=None, alias="channelId")
    length_seconds: int | None = Field(default=None, alias="lengthSeconds")
    music_video_type: str | None = Field(default=None, alias="musicVideoType")


class StreamFormat(InnerTubeModel):
    itag: int
    mime_type: str = Field(alias="mimeType")
    bitrate: int | None = None
    url: str | None = None
    signature_cipher: str | None = Field(default=None, alias="signatureCipher")
    audio_quality: str | None = Field(default=None, alias="audioQuality")
    content_length: int | None = Field(default=None, alias="contentLength")

    @property
    def is_audio(self) -> bool:
        return self.mime_type.startswith("audio/")


class StreamingData(InnerTubeModel):
    expires_in_seconds: int | None = Field(default=None, alias="expiresInSeconds")
    formats: tuple[StreamFormat, ...] = ()
    adaptive_formats: tuple[StreamFormat, ...] = Field(
        default=(), alias="adaptiveFormats"
    )


class PlayerResponse(InnerTubeModel):
    """Subset of the ``player`` envelope, validated straight from JSON."""

    playability_status: PlayabilityStatus = Field(alias="playabilityStatus")
    video_details: VideoDetails | None = Field(default=None, alias="videoDetails")
    streaming_data: StreamingData | None = Field(default=None, alias="streamingData")

    @property
    def is_playable(self) -> bool:
        return self.playability_status.status == "OK"


# -- Account ------------------------------------------------------------------


class AccountInfo(InnerTubeModel):
    name: str
    email: str | None = None
    channel_handle: str | None = None
    thumbnail_url: str | None = None


class PlaylistEditedVideo(InnerTubeModel):
    """A video added to a playlist and the set id it was given."""

    video_id: str = Field(alias="videoId")
    set_video_id: str | None = Field(default=None, alias="setVideoId")


class PlaylistEdit(InnerTubeModel):
    """Outcome of a playlist edit.

    ``added`` holds one entry per added video; the set ids are what
    ``remove_from_playlist`` and ``move_playlist_song`` need later.
    """

    succeeded: bool
    added: tuple[PlaylistEditedVideo, ...] = ()


# -- Discovery ----------------------------------------------------------------


class DailyDiscoverItem(InnerTubeModel):
    """A recommendation derived from one seed song."""

    seed_id: str
    recommendation: SongItem
    related_endpoint: BrowseEndpoint | None = None


class CommunityPlaylist(InnerTubeModel):
    playlist: PlaylistItem
    songs: tuple[SongItem, ...] = ()


class SimilarRecommendation(InnerTubeModel):
    """Items similar to one seed (artist, song or album)."""

    title: str
    seed_id: str
    items: tuple[AnyItem, ...] = ()
