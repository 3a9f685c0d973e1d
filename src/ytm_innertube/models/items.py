"""Domain items resolved from renderer nodes.

An item is one of six variants sharing ``id``, ``title``, ``thumbnail`` and
``explicit``. Items are frozen: once resolved they are never mutated, and
sequence fields are tuples.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Literal

from pydantic import Field

from ytm_innertube.models.base import InnerTubeModel
from ytm_innertube.models.endpoints import WatchEndpoint
from ytm_innertube.models.enums import ItemKind, VideoType

__all__ = [
    "AlbumItem",
    "AlbumRef",
    "AnyItem",
    "Artist",
    "ArtistItem",
    "EpisodeItem",
    "Item",
    "PlaylistItem",
    "PodcastItem",
    "SongItem",
]

SHARE_BASE = "https://music.youtube.com"


class Artist(InnerTubeModel):
    """Artist or channel reference in a subtitle."""

    name: str
    id: str | None = None


class AlbumRef(InnerTubeModel):
    """Album (or podcast) reference attached to a song or episode."""

    name: str
    id: str


class Item(InnerTubeModel, ABC):
    """Fields common to every variant. Only the variants are instantiated."""

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    thumbnail: str | None = None
    explicit: bool = False

    @property
    @abstractmethod
    def share_link(self) -> str:
        """Public music.youtube.com URL of the item."""


class SongItem(Item):
    """A playable track, music video or (with is_episode) podcast episode."""

    kind: Literal[ItemKind.SONG] = ItemKind.SONG
    thumbnail: str = Field(min_length=1)
    artists: tuple[Artist, ...] = ()
    album: AlbumRef | None = None
    duration: int | None = None
    music_video_type: str | None = None
    chart_position: int | None = None
    chart_change: str | None = None
    endpoint: WatchEndpoint | None = None
    set_video_id: str | None = None
    library_add_token: str | None = None
    library_remove_token: str | None = None
    history_remove_token: str | None = None
    is_episode: bool = False

    @property
    def is_video_song(self) -> bool:
        """True for music videos, i.e. anything that is not an audio track."""
        video_type = self.music_video_type
        return video_type is not None and video_type != VideoType.ATV

    @property
    def share_link(self) -> str:
        return f"{SHARE_BASE}/watch?v={self.id}"


class AlbumItem(Item):
    """An album. ``id`` is the MPREb_ browse id."""

    kind: Literal[ItemKind.ALBUM] = ItemKind.ALBUM
    thumbnail: str = Field(min_length=1)
    playlist_id: str | None = None
    artists: tuple[Artist, ...] | None = None
    year: int | None = None

    @property
    def browse_id(self) -> str:
        return self.id

    @property
    def share_link(self) -> str:
        return f"{SHARE_BASE}/playlist?list={self.playlist_id or self.id}"


class PlaylistItem(Item):
    """A playlist. ``id`` never carries the VL browse prefix."""

    kind: Literal[ItemKind.PLAYLIST] = ItemKind.PLAYLIST
    author: Artist | None = None
    song_count_text: str | None = None
    play_endpoint: WatchEndpoint | None = None
    shuffle_endpoint: WatchEndpoint | None = None
    radio_endpoint: WatchEndpoint | None = None
    is_editable: bool = False
    is_podcast: bool = False

    @property
    def share_link(self) -> str:
        return f"{SHARE_BASE}/playlist?list={self.id}"


class ArtistItem(Item):
    """An artist page or user channel."""

    kind: Literal[ItemKind.ARTIST] = ItemKind.ARTIST
    channel_id: str | None = None
    play_endpoint: WatchEndpoint | None = None
    shuffle_endpoint: WatchEndpoint | None = None
    radio_endpoint: WatchEndpoint | None = None

    @property
    def share_link(self) -> str:
        return f"{SHARE_BASE}/channel/{self.id}"


class PodcastItem(Item):
    """A podcast show. ``id`` is the MPSP browse id."""

    kind: Literal[ItemKind.PODCAST] = ItemKind.PODCAST
    author: Artist | None = None
    episode_count_text: str | None = None
    play_endpoint: WatchEndpoint | None = None
    shuffle_endpoint: WatchEndpoint | None = None
    library_add_token: str | None = None
    library_remove_token: str | None = None
    channel_id: str | None = None

    @property
    def share_link(self) -> str:
        return f"{SHARE_BASE}/playlist?list={self.id.removeprefix('MPSP')}"

    def as_playlist_item(self) -> PlaylistItem:
        """Present the show as a playlist, e.g. for a saved-podcasts list."""
        return PlaylistItem(
            id=self.id,
            title=self.title,
            thumbnail=self.thumbnail,
            author=self.author,
            song_count_text=self.episode_count_text,
            play_endpoint=self.play_endpoint,
            shuffle_endpoint=self.shuffle_endpoint,
            is_podcast=True,
        )


class EpisodeItem(Item):
    """A podcast episode."""

    kind: Literal[ItemKind.EPISODE] = ItemKind.EPISODE
    thumbnail: str = Field(min_length=1)
    author: Artist | None = None
    podcast: AlbumRef | None = None
    duration: int | None = None
    publish_date_text: str | None = None
    endpoint: WatchEndpoint | None = None
    library_add_token: str | None = None
    library_remove_token: str | None = None
    mark_as_played_token: str | None = None
    mark_as_unplayed_token: str | None = None

    @property
    def share_link(self) -> str:
        return f"{SHARE_BASE}/watch?v={self.id}"

    def as_song_item(self) -> SongItem:
        """Present the episode as a playable song for queues."""
        return SongItem(
            id=self.id,
            title=self.title,
            thumbnail=self.thumbnail,
            explicit=self.explicit,
            artists=(self.author,) if self.author else (),
            album=self.podcast,
            duration=self.duration,
            endpoint=self.endpoint,
            library_add_token=self.library_add_token,
            library_remove_token=self.library_remove_token,
            is_episode=True,
        )


AnyItem = Annotated[
    SongItem | AlbumItem | PlaylistItem | ArtistItem | PodcastItem | EpisodeItem,
    Field(discriminator="kind"),
]
