"""Enums and wire constants shared across the package."""

from enum import StrEnum


class ItemKind(StrEnum):
    """Discriminator of the Item variant."""

    SONG = "song"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    PODCAST = "podcast"
    EPISODE = "episode"


class PageType(StrEnum):
    """Values of browseEndpointContextMusicConfig.pageType."""

    ALBUM = "MUSIC_PAGE_TYPE_ALBUM"
    AUDIOBOOK = "MUSIC_PAGE_TYPE_AUDIOBOOK"
    PLAYLIST = "MUSIC_PAGE_TYPE_PLAYLIST"
    ARTIST = "MUSIC_PAGE_TYPE_ARTIST"
    LIBRARY_ARTIST = "MUSIC_PAGE_TYPE_LIBRARY_ARTIST"
    USER_CHANNEL = "MUSIC_PAGE_TYPE_USER_CHANNEL"
    PODCAST = "MUSIC_PAGE_TYPE_PODCAST_SHOW_DETAIL_PAGE"
    EPISODE = "MUSIC_PAGE_TYPE_NON_MUSIC_AUDIO_TRACK_PAGE"


class VideoType(StrEnum):
    """Values of watchEndpointMusicConfig.musicVideoType."""

    ATV = "MUSIC_VIDEO_TYPE_ATV"  # Audio Track Video
    OMV = "MUSIC_VIDEO_TYPE_OMV"  # Official Music Video
    UGC = "MUSIC_VIDEO_TYPE_UGC"  # User Generated Content
    PODCAST_EPISODE = "MUSIC_VIDEO_TYPE_PODCAST_EPISODE"


class SearchFilter(StrEnum):
    """Search params selecting a single result category."""

    SONG = "EgWKAQIIAWoKEAkQBRAKEAMQBA%3D%3D"
    VIDEO = "EgWKAQIQAWoKEAkQChAFEAMQBA%3D%3D"
    ALBUM = "EgWKAQIYAWoKEAkQChAFEAMQBA%3D%3D"
    ARTIST = "EgWKAQIgAWoKEAkQChAFEAMQBA%3D%3D"
    FEATURED_PLAYLIST = "EgeKAQQoADgBagwQDhAKEAMQBRAJEAQ%3D"
    COMMUNITY_PLAYLIST = "EgeKAQQoAEABagoQAxAEEAoQCRAF"
    PODCAST = "EgWKAQJQAWoKEAkQChAFEAMQBA%3D%3D"
    EPISODE = "EgWKAQJYAWoKEAkQChAFEAMQBA%3D%3D"


class LibraryFilter(StrEnum):
    """Params of the FEmusic_library_landing browse request."""

    RECENT_ACTIVITY = (
        "4qmFsgIrEhdGRW11c2ljX2xpYnJhcnlfbGFuZGluZxoQ"
        "Z2dNR0tnUUlCaEFCb0FZQg%3D%3D"
    )
    RECENTLY_PLAYED = (
        "4qmFsgIrEhdGRW11c2ljX2xpYnJhcnlfbGFuZGluZxoQ"
        "Z2dNR0tnUUlCUkFCb0FZQg%3D%3D"
    )
    PLAYLISTS_ALPHABETICAL = (
        "4qmFsgIrEhdGRW11c2ljX2xpa2VkX3BsYXlsaXN0cxoQ"
        "Z2dNR0tnUUlBUkFBb0FZQg%3D%3D"
    )
    PLAYLISTS_RECENTLY_SAVED = (
        "4qmFsgIrEhdGRW11c2ljX2xpa2VkX3BsYXlsaXN0cxoQ"
        "Z2dNR0tnUUlBQkFCb0FZQg%3D%3D"
    )


class ChartType(StrEnum):
    """Kind of a chart section, derived from its title."""

    TRENDING = "trending"
    TOP = "top"
    GENRE = "genre"
    NEW_RELEASES = "new_releases"


class IconType(StrEnum):
    """Menu and badge icon names used to locate actions."""

    EXPLICIT = "MUSIC_EXPLICIT_BADGE"
    SHUFFLE = "MUSIC_SHUFFLE"
    RADIO = "MIX"
    EDIT = "EDIT"
    LIBRARY_ADD = "LIBRARY_ADD"
    LIBRARY_SADDLE = "LIBRARY_SADDLE"
    BOOKMARK_BORDER = "BOOKMARK_BORDER"
    BOOKMARK = "BOOKMARK"
    SUBSCRIBE = "SUBSCRIBE"
    REMOVE_FROM_HISTORY = "REMOVE_FROM_HISTORY"
    MARK_AS_PLAYED = "CHECK"
    MARK_AS_UNPLAYED = "UNDO"
