"""Tests for resolving renderer nodes into items."""

import pytest
from conftest import (
    OMV,
    SEPARATOR,
    THUMB,
    artist_run,
    browse,
    flex,
    panel_video,
    responsive_browse_row,
    run,
    song_row,
    text,
    thumbnail,
    two_row,
    two_row_album,
    two_row_artist,
    two_row_playlist,
    two_row_song,
)
from ytm_innertube.config import BrowseIdHeuristics
from ytm_innertube.models.items import (
    AlbumItem,
    AlbumRef,
    Artist,
    ArtistItem,
    PlaylistItem,
    PodcastItem,
    SongItem,
)
from ytm_innertube.parsing import (
    ResolutionContext,
    resolve,
    resolve_all,
    resolve_panel_video,
)


class TestTwoRowItems:
    """Tests for musicTwoRowItemRenderer nodes."""

    def test_song(self) -> None:
        item = resolve(two_row_song("vid1", "One More Time", explicit=True))

        assert isinstance(item, SongItem)
        assert item.id == "vid1"
        assert item.title == "One More Time"
        assert item.thumbnail == THUMB
        assert item.artists == (Artist(name="Daft Punk", id="UCartist1"),)
        assert item.explicit
        assert item.music_video_type == "MUSIC_VIDEO_TYPE_ATV"
        assert item.endpoint is not None
        assert item.endpoint.video_id == "vid1"

    def test_song_without_thumbnail_is_dropped(self) -> None:
        assert resolve(two_row_song(thumb=None)) is None

    def test_song_thumbnail_from_context(self) -> None:
        ctx = ResolutionContext(thumbnail="https://album-cover")

        item = resolve(two_row_song(thumb=None), ctx)

        assert isinstance(item, SongItem)
        assert item.thumbnail == "https://album-cover"

    def test_album(self) -> None:
        item = resolve(two_row_album())

        assert isinstance(item, AlbumItem)
        assert item.id == "MPREb_album1"
        assert item.title == "Discovery"
        assert item.playlist_id == "OLAK5uy_album1"
        assert item.artists == (Artist(name="Daft Punk", id="UCartist1"),)
        assert item.year == 2001

    def test_playlist_strips_browse_prefix(self) -> None:
        item = resolve(
            two_row_playlist("VLPLcommunity1", "Weekend Mix", "Some Listener")
        )

        assert isinstance(item, PlaylistItem)
        assert item.id == "PLcommunity1"
        assert item.author == Artist(name="Some Listener")
        assert item.song_count_text == "50 songs"

    def test_artist(self) -> None:
        item = resolve(two_row_artist("UCartist2", "Justice"))

        assert isinstance(item, ArtistItem)
        assert item.id == "UCartist2"
        assert item.title == "Justice"
        assert item.channel_id == "UCartist2"

    def test_podcast(self) -> None:
        raw = two_row(
            "The Show",
            browse("MPSPPLshow", "MUSIC_PAGE_TYPE_PODCAST_SHOW_DETAIL_PAGE"),
            [run("Some Host", browse("UChost"))],
        )

        item = resolve(raw)

        assert isinstance(item, PodcastItem)
        assert item.id == "MPSPPLshow"
        assert item.author == Artist(name="Some Host", id="UChost")

    def test_user_channel_is_artist(self) -> None:
        raw = two_row(
            "A Listener", browse("UClistener", "MUSIC_PAGE_TYPE_USER_CHANNEL")
        )

        item = resolve(raw)

        assert isinstance(item, ArtistItem)
        assert item.id == "UClistener"

    def test_node_without_id_is_dropped(self) -> None:
        raw = two_row("Nothing", {"browseEndpoint": {}})

        assert resolve(raw) is None


class TestResponsiveItems:
    """Tests for musicResponsiveListItemRenderer nodes."""

    def test_song(self) -> None:
        item = resolve(
            song_row("vid1", "One More Time", explicit=True, set_video_id="set1")
        )

        assert isinstance(item, SongItem)
        assert item.id == "vid1"
        assert item.artists == (Artist(name="Daft Punk", id="UCartist1"),)
        assert item.album == AlbumRef(name="Discovery", id="MPREb_album1")
        assert item.duration == 320
        assert item.explicit
        assert item.set_video_id == "set1"
        assert not item.is_video_song

    def test_music_video(self) -> None:
        item = resolve(song_row(video_type=OMV))

        assert isinstance(item, SongItem)
        assert item.is_video_song

    def test_plain_text_artist(self) -> None:
        item = resolve(song_row(artist=None))

        assert isinstance(item, SongItem)
        assert item.artists == (Artist(name="Unknown Artist"),)

    def test_album_from_context(self) -> None:
        ctx = ResolutionContext(album=AlbumRef(name="Homework", id="MPREb_home"))

        item = resolve(song_row(album=None), ctx)

        assert isinstance(item, SongItem)
        assert item.album == AlbumRef(name="Homework", id="MPREb_home")

    def test_search_row_type_label_is_skipped(self) -> None:
        raw = song_row(artist=None, album=None, duration=None)
        raw["musicResponsiveListItemRenderer"]["flexColumns"][1] = flex(
            run("Song"), SEPARATOR, run("Daft Punk"), SEPARATOR, run("4:01")
        )

        item = resolve(raw)

        assert isinstance(item, SongItem)
        assert item.artists == (Artist(name="Daft Punk"),)
        assert item.duration == 241

    def test_album_row(self) -> None:
        raw = responsive_browse_row(
            "MPREb_album2",
            "Homework",
            "MUSIC_PAGE_TYPE_ALBUM",
            [run("Album"), SEPARATOR, artist_run(), SEPARATOR, run("1997")],
        )

        item = resolve(raw)

        assert isinstance(item, AlbumItem)
        assert item.artists == (Artist(name="Daft Punk", id="UCartist1"),)
        assert item.year == 1997

    def test_playlist_row(self) -> None:
        raw = responsive_browse_row(
            "VLPLrow",
            "Focus",
            "MUSIC_PAGE_TYPE_PLAYLIST",
            [run("Playlist"), SEPARATOR, run("Someone"), SEPARATOR, run("12 songs")],
        )

        item = resolve(raw)

        assert isinstance(item, PlaylistItem)
        assert item.id == "PLrow"
        assert item.author == Artist(name="Someone")
        assert item.song_count_text == "12 songs"

    def test_artist_row(self) -> None:
        raw = responsive_browse_row(
            "UCrow", "Air", "MUSIC_PAGE_TYPE_ARTIST", [run("Artist")]
        )

        item = resolve(raw)

        assert isinstance(item, ArtistItem)
        assert item.title == "Air"

    def test_custom_heuristics(self) -> None:
        """Artist runs are recognized by the configured prefixes."""
        raw = song_row(artist=None)
        raw["musicResponsiveListItemRenderer"]["flexColumns"][1] = flex(
            run("Daft Punk", browse("XXartist", "MUSIC_PAGE_TYPE_ALBUM"))
        )
        ctx = ResolutionContext(
            heuristics=BrowseIdHeuristics(artist_prefixes=("XX",))
        )

        item = resolve(raw, ctx)

        assert isinstance(item, SongItem)
        assert item.artists == (Artist(name="Daft Punk", id="XXartist"),)


class TestMultiRowAndCard:
    """Tests for episode rows and the search top result card."""

    def test_multi_row_episode_inherits_podcast(self) -> None:
        podcast = PodcastItem(
            id="MPSPPLshow",
            title="The Show",
            thumbnail=THUMB,
            author=Artist(name="Host", id="UChost"),
        )
        raw = {
            "musicMultiRowListItemRenderer": {
                "onTap": {"watchEndpoint": {"videoId": "ep1"}},
                "title": text(run("Episode One")),
                "subtitle": text(run("Jan 1, 2024"), SEPARATOR, run("45:00")),
            }
        }

        item = resolve(raw, ResolutionContext(podcast=podcast, thumbnail=THUMB))

        assert item is not None
        assert item.kind == "episode"
        assert item.id == "ep1"
        assert item.podcast == AlbumRef(name="The Show", id="MPSPPLshow")
        assert item.author == Artist(name="Host", id="UChost")
        assert item.duration == 2700
        assert item.publish_date_text == "Jan 1, 2024"
        assert item.thumbnail == THUMB

    def test_card_shelf_artist(self) -> None:
        raw = {
            "musicCardShelfRenderer": {
                "title": text(
                    run("Daft Punk", browse("UCartist1", "MUSIC_PAGE_TYPE_ARTIST"))
                ),
                "thumbnail": thumbnail(),
                "subtitle": text(run("Artist")),
            }
        }

        item = resolve(raw)

        assert isinstance(item, ArtistItem)
        assert item.channel_id == "UCartist1"


class TestResolveAll:
    """Tests for resolve_all."""

    def test_drops_unresolvable_nodes_only(self) -> None:
        nodes = [
            song_row("vid1"),
            {"continuationItemRenderer": {}},
            two_row_song(thumb=None),
            two_row_album(),
        ]

        items = resolve_all(nodes)

        assert [item.id for item in items] == ["vid1", "MPREb_album1"]

    @pytest.mark.parametrize("nodes", [[], [None], [{}]])
    def test_empty(self, nodes: list) -> None:
        assert resolve_all(nodes) == []

    def test_null_subtitle_text_drops_only_that_item(self) -> None:
        broken = two_row(
            "Broken",
            {"watchEndpoint": {"videoId": "bad1"}},
            [{"text": None, "navigationEndpoint": browse("UCx")}],
        )

        items = resolve_all([two_row_song("vid1"), broken])

        assert [item.id for item in items] == ["vid1"]

    def test_non_numeric_watch_index_keeps_song_without_endpoint(self) -> None:
        odd = two_row_song("vid2")
        odd["musicTwoRowItemRenderer"]["navigationEndpoint"]["watchEndpoint"][
            "index"
        ] = "n/a"

        items = resolve_all([two_row_song("vid1"), odd])

        assert [item.id for item in items] == ["vid1", "vid2"]
        assert isinstance(items[1], SongItem)
        assert items[1].endpoint is None

    def test_non_string_year_drops_only_that_item(self) -> None:
        album = two_row_album("MPREb_bad")
        album["musicTwoRowItemRenderer"]["subtitle"]["runs"][-1]["text"] = 2001

        items = resolve_all([album, two_row_album()])

        assert [item.id for item in items] == ["MPREb_album1"]


class TestResolvePanelVideo:
    """Tests for queue rows."""

    def test_queue_row(self) -> None:
        raw = panel_video("q1", "Digital Love", length="4:58")

        song = resolve_panel_video(raw["playlistPanelVideoRenderer"])

        assert song is not None
        assert song.id == "q1"
        assert song.title == "Digital Love"
        assert song.duration == 298
        assert song.artists == (Artist(name="Daft Punk", id="UCartist1"),)
        assert song.album == AlbumRef(name="Discovery", id="MPREb_album1")
        assert song.endpoint is not None
        assert song.endpoint.playlist_id == "RDAMVMq1"

    def test_row_without_title_is_dropped(self) -> None:
        raw = panel_video("q1", "x")["playlistPanelVideoRenderer"]
        del raw["title"]

        assert resolve_panel_video(raw) is None

    @pytest.mark.parametrize(
        ("path", "value"),
        [
            (("longBylineText", "runs", 0, "text"), None),
            (("lengthText",), {"simpleText": 225}),
        ],
        ids=["null_artist_text", "numeric_length"],
    )
    def test_malformed_row_is_dropped(self, path: tuple, value: object) -> None:
        raw = panel_video("q1", "x")["playlistPanelVideoRenderer"]
        target = raw
        for key in path[:-1]:
            target = target[key]
        target[path[-1]] = value

        assert resolve_panel_video(raw) is None

    def test_non_numeric_index_drops_endpoint_only(self) -> None:
        raw = panel_video("q1", "x")["playlistPanelVideoRenderer"]
        raw["navigationEndpoint"]["watchEndpoint"]["index"] = "n/a"

        song = resolve_panel_video(raw)

        assert song is not None
        assert song.endpoint is None

    def test_none(self) -> None:
        assert resolve_panel_video(None) is None
