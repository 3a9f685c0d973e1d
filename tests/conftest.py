"""Test fixtures and raw renderer builders."""

from typing import Any

import pytest
from ytm_innertube.config import RequestContext
from ytm_innertube.exceptions import InnerTubeError
from ytm_innertube.models.endpoints import BrowseEndpoint, WatchEndpoint
from ytm_innertube.models.items import (
    AlbumItem,
    Artist,
    ArtistItem,
    PlaylistItem,
    SongItem,
)
from ytm_innertube.models.pages import (
    AlbumPage,
    ArtistPage,
    ArtistSection,
    NextResult,
    PlaylistPage,
    RelatedPage,
)
from ytm_innertube.transport import EndpointKind

THUMB = "https://lh3.googleusercontent.com/cover=w544-h544"
SMALL_THUMB = "https://lh3.googleusercontent.com/cover=w60-h60"

ATV = "MUSIC_VIDEO_TYPE_ATV"
OMV = "MUSIC_VIDEO_TYPE_OMV"

FLEX = "musicResponsiveListItemFlexColumnRenderer"
FIXED = "musicResponsiveListItemFixedColumnRenderer"
SEPARATOR = {"text": " • "}


# -- Raw node builders ----------------------------------------------------------


def thumbnail(url: str = THUMB) -> dict[str, Any]:
    return {
        "musicThumbnailRenderer": {
            "thumbnail": {"thumbnails": [{"url": SMALL_THUMB}, {"url": url}]}
        }
    }


def browse(browse_id: str, page_type: str | None = None) -> dict[str, Any]:
    endpoint: dict[str, Any] = {"browseId": browse_id}
    if page_type:
        endpoint["browseEndpointContextSupportedConfigs"] = {
            "browseEndpointContextMusicConfig": {"pageType": page_type}
        }
    return {"browseEndpoint": endpoint}


def watch(
    video_id: str, playlist_id: str | None = None, video_type: str | None = ATV
) -> dict[str, Any]:
    endpoint: dict[str, Any] = {"videoId": video_id}
    if playlist_id:
        endpoint["playlistId"] = playlist_id
    if video_type:
        endpoint["watchEndpointMusicSupportedConfigs"] = {
            "watchEndpointMusicConfig": {"musicVideoType": video_type}
        }
    return {"watchEndpoint": endpoint}


def run(text: str, endpoint: dict[str, Any] | None = None) -> dict[str, Any]:
    result: dict[str, Any] = {"text": text}
    if endpoint is not None:
        result["navigationEndpoint"] = endpoint
    return result


def artist_run(name: str = "Daft Punk", browse_id: str = "UCartist1") -> dict[str, Any]:
    return run(name, browse(browse_id, "MUSIC_PAGE_TYPE_ARTIST"))


def album_run(
    name: str = "Discovery", browse_id: str = "MPREb_album1"
) -> dict[str, Any]:
    return run(name, browse(browse_id, "MUSIC_PAGE_TYPE_ALBUM"))


def text(*runs: dict[str, Any]) -> dict[str, Any]:
    return {"runs": list(runs)}


def explicit_badge() -> list[dict[str, Any]]:
    return [
        {"musicInlineBadgeRenderer": {"icon": {"iconType": "MUSIC_EXPLICIT_BADGE"}}}
    ]


def flex(*runs: dict[str, Any]) -> dict[str, Any]:
    return {FLEX: {"text": text(*runs)}}


def fixed(value: str) -> dict[str, Any]:
    return {FIXED: {"text": text(run(value))}}


def song_row(
    video_id: str = "vid1",
    title: str = "One More Time",
    artist: tuple[str, str] | None = ("Daft Punk", "UCartist1"),
    album: tuple[str, str] | None = ("Discovery", "MPREb_album1"),
    duration: str | None = "5:20",
    video_type: str | None = ATV,
    explicit: bool = False,
    thumb: str | None = THUMB,
    set_video_id: str | None = None,
) -> dict[str, Any]:
    """A musicResponsiveListItemRenderer shaped like a playlist or search song."""
    subtitle = [artist_run(*artist)] if artist else [run("Unknown Artist")]
    data: dict[str, Any] = {
        "playlistItemData": {"videoId": video_id},
        "flexColumns": [
            flex(run(title, watch(video_id, video_type=video_type))),
            flex(*subtitle),
            flex(album_run(*album)) if album else flex(),
        ],
    }
    if video_type:
        data["overlay"] = {
            "musicItemThumbnailOverlayRenderer": {
                "content": {
                    "musicPlayButtonRenderer": {
                        "playNavigationEndpoint": watch(video_id, video_type=video_type)
                    }
                }
            }
        }
    if thumb:
        data["thumbnail"] = thumbnail(thumb)
    if duration:
        data["fixedColumns"] = [fixed(duration)]
    if explicit:
        data["badges"] = explicit_badge()
    if set_video_id:
        data["playlistItemData"]["playlistSetVideoId"] = set_video_id
    return {"musicResponsiveListItemRenderer": data}


def responsive_browse_row(
    browse_id: str,
    title: str,
    page_type: str,
    subtitle: list[dict[str, Any]] | None = None,
    thumb: str | None = THUMB,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "navigationEndpoint": browse(browse_id, page_type),
        "flexColumns": [flex(run(title)), flex(*(subtitle or []))],
    }
    if thumb:
        data["thumbnail"] = thumbnail(thumb)
    return {"musicResponsiveListItemRenderer": data}


def two_row(
    title: str,
    endpoint: dict[str, Any],
    subtitle: list[dict[str, Any]] | None = None,
    thumb: str | None = THUMB,
    play_endpoint: dict[str, Any] | None = None,
    explicit: bool = False,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "title": text(run(title, endpoint)),
        "subtitle": text(*(subtitle or [])),
        "navigationEndpoint": endpoint,
    }
    if thumb:
        data["thumbnailRenderer"] = thumbnail(thumb)
    if play_endpoint:
        data["thumbnailOverlay"] = {
            "musicItemThumbnailOverlayRenderer": {
                "content": {
                    "musicPlayButtonRenderer": {"playNavigationEndpoint": play_endpoint}
                }
            }
        }
    if explicit:
        data["subtitleBadges"] = explicit_badge()
    return {"musicTwoRowItemRenderer": data}


def two_row_song(
    video_id: str = "vid1",
    title: str = "One More Time",
    video_type: str = ATV,
    **kwargs: Any,
) -> dict[str, Any]:
    return two_row(
        title, watch(video_id, video_type=video_type), [artist_run()], **kwargs
    )


def two_row_album(
    browse_id: str = "MPREb_album1", title: str = "Discovery", **kwargs: Any
) -> dict[str, Any]:
    return two_row(
        title,
        browse(browse_id, "MUSIC_PAGE_TYPE_ALBUM"),
        [run("Album"), SEPARATOR, artist_run(), SEPARATOR, run("2001")],
        play_endpoint={"watchPlaylistEndpoint": {"playlistId": "OLAK5uy_album1"}},
        **kwargs,
    )


def two_row_playlist(
    browse_id: str = "VLPLcommunity1",
    title: str = "Weekend Mix",
    author: str = "Some Listener",
    **kwargs: Any,
) -> dict[str, Any]:
    return two_row(
        title,
        browse(browse_id, "MUSIC_PAGE_TYPE_PLAYLIST"),
        [run(author), SEPARATOR, run("50 songs")],
        **kwargs,
    )


def two_row_artist(
    browse_id: str = "UCartist2", name: str = "Justice"
) -> dict[str, Any]:
    return two_row(
        name, browse(browse_id, "MUSIC_PAGE_TYPE_ARTIST"), [run("1M subscribers")]
    )


def panel_video(
    video_id: str,
    title: str,
    artist: str = "Daft Punk",
    length: str = "3:45",
    selected: bool = False,
) -> dict[str, Any]:
    return {
        "playlistPanelVideoRenderer": {
            "videoId": video_id,
            "title": text(run(title)),
            "longBylineText": text(
                artist_run(artist), SEPARATOR, album_run(), SEPARATOR, run("2001")
            ),
            "lengthText": text(run(length)),
            "thumbnail": {"thumbnails": [{"url": SMALL_THUMB}, {"url": THUMB}]},
            "navigationEndpoint": watch(video_id, "RDAMVM" + video_id),
            "selected": selected,
        }
    }


def next_continuation(token: str) -> list[dict[str, Any]]:
    return [{"nextContinuationData": {"continuation": token}}]


def continuation_item(token: str) -> dict[str, Any]:
    return {
        "continuationItemRenderer": {
            "continuationEndpoint": {"continuationCommand": {"token": token}}
        }
    }


# -- Raw response builders ------------------------------------------------------


def single_column(*sections: dict[str, Any], **section_list: Any) -> dict[str, Any]:
    return {
        "contents": {
            "singleColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {
                                    "contents": list(sections),
                                    **section_list,
                                }
                            }
                        }
                    }
                ]
            }
        }
    }


def carousel(
    title: str, *items: dict[str, Any], more: str | None = None
) -> dict[str, Any]:
    header: dict[str, Any] = {"title": text(run(title))}
    if more:
        header["moreContentButton"] = {
            "buttonRenderer": {"navigationEndpoint": browse(more)}
        }
    return {
        "musicCarouselShelfRenderer": {
            "header": {"musicCarouselShelfBasicHeaderRenderer": header},
            "contents": list(items),
        }
    }


def search_response(*shelves: dict[str, Any]) -> dict[str, Any]:
    return {
        "contents": {
            "tabbedSearchResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {"contents": list(shelves)}
                            }
                        }
                    }
                ]
            }
        }
    }


def music_shelf(
    *items: dict[str, Any], title: str | None = None, continuation: str | None = None
) -> dict[str, Any]:
    shelf: dict[str, Any] = {"contents": list(items)}
    if title:
        shelf["title"] = text(run(title))
    if continuation:
        shelf["continuations"] = next_continuation(continuation)
    return {"musicShelfRenderer": shelf}


def playlist_response(
    *songs: dict[str, Any],
    playlist_id: str = "PLtest",
    title: str = "Road Trip",
    continuation: str | None = None,
    editable: bool = False,
) -> dict[str, Any]:
    header = {
        "musicResponsiveHeaderRenderer": {
            "title": text(run(title)),
            "thumbnail": thumbnail(),
            "straplineTextOne": text(run("Some Listener", browse("UClistener"))),
            "secondSubtitle": text(run("42 songs")),
        }
    }
    if editable:
        header = {"musicEditablePlaylistDetailHeaderRenderer": {"header": header}}
    shelf: dict[str, Any] = {"playlistId": playlist_id, "contents": list(songs)}
    if continuation:
        shelf["contents"].append(continuation_item(continuation))
    return {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {"sectionListRenderer": {"contents": [header]}}
                        }
                    }
                ],
                "secondaryContents": {
                    "sectionListRenderer": {
                        "contents": [{"musicPlaylistShelfRenderer": shelf}]
                    }
                },
            }
        }
    }


def playlist_continuation_response(
    *songs: dict[str, Any], continuation: str | None = None
) -> dict[str, Any]:
    items = list(songs)
    if continuation:
        items.append(continuation_item(continuation))
    return {
        "onResponseReceivedActions": [
            {"appendContinuationItemsAction": {"continuationItems": items}}
        ]
    }


def next_response(
    *panel_items: dict[str, Any],
    related_browse_id: str | None = "MPTRt_related1",
    continuation: str | None = None,
) -> dict[str, Any]:
    panel: dict[str, Any] = {"title": "Mix", "contents": list(panel_items)}
    if continuation:
        panel["continuations"] = next_continuation(continuation)
    tabs: list[dict[str, Any]] = [
        {
            "tabRenderer": {
                "content": {
                    "musicQueueRenderer": {"content": {"playlistPanelRenderer": panel}}
                }
            }
        },
        {"tabRenderer": {"endpoint": browse("MPLYt_lyrics1")}},
    ]
    if related_browse_id:
        tabs.append({"tabRenderer": {"endpoint": browse(related_browse_id)}})
    return {
        "contents": {
            "singleColumnMusicWatchNextResultsRenderer": {
                "tabbedRenderer": {"watchNextTabbedResultsRenderer": {"tabs": tabs}}
            }
        }
    }


def related_response(*carousels: dict[str, Any]) -> dict[str, Any]:
    return {"contents": {"sectionListRenderer": {"contents": list(carousels)}}}


def album_response(
    *tracks: dict[str, Any], other_versions: tuple = ()
) -> dict[str, Any]:
    header = {
        "musicResponsiveHeaderRenderer": {
            "title": text(run("Discovery")),
            "thumbnail": thumbnail(),
            "straplineTextOne": text(artist_run()),
            "subtitle": text(run("Album"), run(" • "), run("2001")),
        }
    }
    secondary: list[dict[str, Any]] = [
        {"musicShelfRenderer": {"contents": list(tracks)}}
    ]
    if other_versions:
        secondary.append(carousel("Other versions", *other_versions))
    return {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {"sectionListRenderer": {"contents": [header]}}
                        }
                    }
                ],
                "secondaryContents": {"sectionListRenderer": {"contents": secondary}},
            }
        },
        "microformat": {
            "microformatDataRenderer": {
                "urlCanonical": "https://music.youtube.com/playlist?list=OLAK5uy_album1"
            }
        },
    }


def album_track(video_id: str, title: str) -> dict[str, Any]:
    """Album track rows name neither the album nor a thumbnail."""
    return song_row(video_id, title, album=None, thumb=None)


# -- Doubles ----------------------------------------------------------------------


class MockTransport:
    """Transport that records calls and replays queued responses in order."""

    def __init__(self, *responses: Any, visitor_data: str | None = None) -> None:
        self.responses: list[Any] = list(responses)
        self.visitor_data = visitor_data
        self.calls: list[dict[str, Any]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def request(
        self,
        kind: EndpointKind,
        params: dict[str, Any],
        context: RequestContext | None = None,
        *,
        continuation: str | None = None,
        login: bool = False,
    ) -> dict[str, Any]:
        """Mock request."""
        self.calls.append(
            {
                "kind": kind,
                "params": params,
                "context": context,
                "continuation": continuation,
                "login": login,
            }
        )
        if not self.responses:
            raise AssertionError(f"No response queued for {kind}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def fetch_visitor_data(self, context: RequestContext | None = None) -> str | None:
        """Mock fetch_visitor_data."""
        return self.visitor_data


def make_song(
    video_id: str,
    title: str | None = None,
    explicit: bool = False,
    video_type: str = ATV,
) -> SongItem:
    return SongItem(
        id=video_id,
        title=title or f"Song {video_id}",
        thumbnail=THUMB,
        explicit=explicit,
        music_video_type=video_type,
        artists=(Artist(name="Daft Punk", id="UCartist1"),),
    )


def make_playlist(
    playlist_id: str, author: str = "Some Listener", count: str | None = "20 songs"
) -> PlaylistItem:
    return PlaylistItem(
        id=playlist_id,
        title=f"Playlist {playlist_id}",
        author=Artist(name=author),
        song_count_text=count,
    )


class MockInnerTubeClient:
    """Mock InnerTube client serving canned pages by id.

    Ids listed in ``failing`` raise InnerTubeError, as a failed request would.
    """

    def __init__(
        self,
        related: dict[str, RelatedPage] | None = None,
        artists: dict[str, ArtistPage] | None = None,
        playlists: dict[str, PlaylistPage] | None = None,
        albums: dict[str, AlbumPage] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self._related = related or {}
        self._artists = artists or {}
        self._playlists = playlists or {}
        self._albums = albums or {}
        self._failing = failing or set()
        self.next_calls: list[str] = []
        self.playlist_calls: list[str] = []

    def _check(self, key: str) -> None:
        if key in self._failing:
            raise InnerTubeError(f"Request for {key} failed")

    def next(
        self,
        endpoint: WatchEndpoint,
        continuation: str | None = None,
        *,
        context: RequestContext | None = None,
    ) -> NextResult:
        """Mock next: related endpoint browse id is "related-<video id>"."""
        video_id = endpoint.video_id or ""
        self.next_calls.append(video_id)
        self._check(video_id)
        related = f"related-{video_id}" if video_id in self._related else None
        return NextResult(
            items=(make_song(video_id, title=f"Seed {video_id}"),),
            current_index=0,
            related_endpoint=BrowseEndpoint(browse_id=related) if related else None,
            endpoint=endpoint,
        )

    def related(
        self, endpoint: BrowseEndpoint, *, context: RequestContext | None = None
    ) -> RelatedPage:
        """Mock related."""
        return self._related[endpoint.browse_id.removeprefix("related-")]

    def artist(
        self, browse_id: str, *, context: RequestContext | None = None
    ) -> ArtistPage:
        """Mock artist."""
        self._check(browse_id)
        return self._artists[browse_id]

    def playlist(
        self, playlist_id: str, *, context: RequestContext | None = None
    ) -> PlaylistPage:
        """Mock playlist."""
        self.playlist_calls.append(playlist_id)
        self._check(playlist_id)
        return self._playlists[playlist_id]

    def album(
        self,
        browse_id: str,
        with_songs: bool = True,
        *,
        context: RequestContext | None = None,
    ) -> AlbumPage:
        """Mock album."""
        self._check(browse_id)
        return self._albums[browse_id]


def artist_page(
    browse_id: str, name: str, *sections: tuple[str, list[Any]]
) -> ArtistPage:
    return ArtistPage(
        artist=ArtistItem(id=browse_id, title=name, channel_id=browse_id),
        sections=tuple(
            ArtistSection(title=title, items=tuple(items)) for title, items in sections
        ),
    )


def album_item(browse_id: str, artist_id: str | None = "UCartist1") -> AlbumItem:
    return AlbumItem(
        id=browse_id,
        title=f"Album {browse_id}",
        thumbnail=THUMB,
        artists=(Artist(name="Daft Punk", id=artist_id),) if artist_id else None,
    )


# -- Fixtures ---------------------------------------------------------------------


@pytest.fixture
def transport() -> MockTransport:
    """Create an empty mock transport."""
    return MockTransport()


@pytest.fixture
def logged_in_context() -> RequestContext:
    """Create a context carrying a SAPISID cookie."""
    return RequestContext(cookie="SID=abc; SAPISID=sapisid123", data_sync_id="sync1")
