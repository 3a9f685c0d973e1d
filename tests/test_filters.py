"""Tests for content filters."""

from conftest import OMV, make_playlist, make_song
from ytm_innertube.filters import (
    ContentFilters,
    filter_explicit,
    filter_shorts,
    filter_video_songs,
)
from ytm_innertube.models.pages import HomePage, HomeSection


class TestFilterFunctions:
    """Tests for the individual filters."""

    def test_filter_explicit(self) -> None:
        items = [make_song("clean"), make_song("dirty", explicit=True)]

        assert [item.id for item in filter_explicit(items)] == ["clean"]
        assert len(filter_explicit(items, enabled=False)) == 2

    def test_filter_video_songs(self) -> None:
        items = [
            make_song("track"),
            make_song("video", video_type=OMV),
            make_playlist("PL1"),
        ]

        assert [item.id for item in filter_video_songs(items, enabled=True)] == [
            "track",
            "PL1",
        ]
        assert len(filter_video_songs(items)) == 3

    def test_filter_shorts(self) -> None:
        items = [
            make_playlist("SSshorts"),
            make_playlist("PLlong"),
            make_song("SSsong"),
        ]

        result = filter_shorts(items, enabled=True)

        assert [item.id for item in result] == ["PLlong", "SSsong"]

    def test_filters_are_idempotent(self) -> None:
        items = [make_song("a", explicit=True), make_song("b")]

        once = filter_explicit(items)

        assert filter_explicit(once) == once

    def test_returns_new_list(self) -> None:
        items = [make_song("a")]

        result = filter_explicit(items, enabled=False)

        assert result == items
        assert result is not items


class TestContentFilters:
    """Tests for ContentFilters."""

    def test_default_is_noop(self) -> None:
        items = [make_song("a", explicit=True), make_song("b", video_type=OMV)]

        assert ContentFilters().apply(items) == items

    def test_apply_combines(self) -> None:
        filters = ContentFilters(
            hide_explicit=True, hide_video_songs=True, hide_shorts=True
        )
        items = [
            make_song("explicit", explicit=True),
            make_song("video", video_type=OMV),
            make_playlist("SSshorts"),
            make_song("kept"),
        ]

        assert [item.id for item in filters.apply(items)] == ["kept"]

    def test_apply_home_drops_empty_sections(self) -> None:
        page = HomePage(
            sections=(
                HomeSection(
                    title="All explicit", items=(make_song("x", explicit=True),)
                ),
                HomeSection(
                    title="Mixed",
                    items=(make_song("y", explicit=True), make_song("z")),
                ),
            ),
            continuation="home-2",
        )

        result = ContentFilters(hide_explicit=True).apply_home(page)

        assert [section.title for section in result.sections] == ["Mixed"]
        assert [item.id for item in result.sections[0].items] == ["z"]
        assert result.continuation == "home-2"
