"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner
from conftest import (
    MockTransport,
    music_shelf,
    next_response,
    panel_video,
    search_response,
    single_column,
    song_row,
)
from ytm_innertube import cli
from ytm_innertube.client import InnerTubeClient
from ytm_innertube.config import RequestContext
from ytm_innertube.exceptions import NetworkError
from ytm_innertube.transport import EndpointKind


@pytest.fixture
def contexts(
    monkeypatch: pytest.MonkeyPatch, transport: MockTransport
) -> list[RequestContext]:
    """Route every CLI client through the mock transport.

    Returns the request contexts the CLI built its clients with.
    """
    built: list[RequestContext] = []

    def make_client(context: RequestContext) -> InnerTubeClient:
        built.append(context)
        return InnerTubeClient(transport=transport, context=context)

    monkeypatch.setattr(cli, "InnerTubeClient", make_client)
    monkeypatch.setattr(cli, "setup_logging", lambda verbose=False, console=None: None)
    return built


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestSearchCommand:
    """Tests for the search command."""

    def test_filtered_search(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        transport.queue(search_response(music_shelf(song_row("vid1"))))

        result = runner.invoke(cli.main, ["search", "daft punk", "--filter", "song"])

        assert result.exit_code == 0, result.output
        assert "vid1" in result.output
        assert transport.calls[0]["kind"] is EndpointKind.SEARCH
        assert "params" in transport.calls[0]["params"]

    def test_summary_without_results(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        transport.queue({})

        result = runner.invoke(cli.main, ["search", "nothing"])

        assert result.exit_code == 0
        assert "No results" in result.output
        assert transport.calls[0]["params"] == {"query": "nothing"}

    def test_invalid_filter(
        self, runner: CliRunner, contexts: list[RequestContext]
    ) -> None:
        result = runner.invoke(cli.main, ["search", "x", "--filter", "nonsense"])

        assert result.exit_code == 2

    def test_transport_error_exits_nonzero(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        transport.queue(NetworkError("offline"))

        result = runner.invoke(cli.main, ["search", "daft punk"])

        assert result.exit_code == 1
        assert "offline" in result.output


class TestGroupOptions:
    """Tests for options of the command group."""

    def test_locale_and_proxy(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        transport.queue({})

        result = runner.invoke(
            cli.main,
            ["--hl", "de", "--gl", "DE", "--proxy", "http://proxy:8080", "search", "x"],
        )

        assert result.exit_code == 0
        assert contexts[0].locale.hl == "de"
        assert contexts[0].locale.gl == "DE"
        assert contexts[0].proxy == "http://proxy:8080"
        assert contexts[0].cookie is None

    def test_cookie_file(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
        tmp_path: Path,
    ) -> None:
        cookies = tmp_path / "cookies.txt"
        cookies.write_text(
            "# Netscape HTTP Cookie File\n"
            ".youtube.com\tTRUE\t/\tTRUE\t0\tSAPISID\tsapisid123\n"
        )
        transport.queue({})

        result = runner.invoke(cli.main, ["--cookies", str(cookies), "search", "x"])

        assert result.exit_code == 0
        assert contexts[0].cookie == "SAPISID=sapisid123"

    def test_missing_cookie_file(
        self, runner: CliRunner, contexts: list[RequestContext]
    ) -> None:
        result = runner.invoke(
            cli.main, ["--cookies", "/nonexistent/cookies.txt", "home"]
        )

        assert result.exit_code == 2
        assert contexts == []


class TestFeedCommands:
    """Tests for home, related and discover."""

    def test_home_with_sections(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        transport.queue(
            single_column(
                {
                    "musicCarouselShelfRenderer": {
                        "header": {
                            "musicCarouselShelfBasicHeaderRenderer": {
                                "title": {"runs": [{"text": "Quick picks"}]}
                            }
                        },
                        "contents": [song_row("vid7")],
                    }
                }
            )
        )

        result = runner.invoke(cli.main, ["home"])

        assert result.exit_code == 0, result.output
        assert "Quick picks" in result.output
        assert "vid7" in result.output

    def test_browse_page(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        response = single_column(
            {
                "gridRenderer": {
                    "header": {
                        "gridHeaderRenderer": {"title": {"runs": [{"text": "Focus"}]}}
                    },
                    "items": [song_row("vid8")],
                }
            }
        )
        transport.queue(response)

        result = runner.invoke(
            cli.main, ["browse", "FEmusic_moods_and_genres_category", "--params", "p1"]
        )

        assert result.exit_code == 0, result.output
        assert "Focus" in result.output
        assert "vid8" in result.output
        assert transport.calls[0]["params"] == {
            "browseId": "FEmusic_moods_and_genres_category",
            "params": "p1",
        }

    def test_related_without_tab(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        transport.queue(next_response(panel_video("q1", "One"), related_browse_id=None))

        result = runner.invoke(cli.main, ["related", "q1"])

        assert result.exit_code == 0, result.output
        assert "No related items" in result.output

    def test_discover_without_recommendations(
        self,
        runner: CliRunner,
        transport: MockTransport,
        contexts: list[RequestContext],
    ) -> None:
        transport.queue(next_response(panel_video("q1", "One"), related_browse_id=None))

        result = runner.invoke(cli.main, ["discover", "q1"])

        assert result.exit_code == 0, result.output
        assert "No recommendations" in result.output

    def test_discover_requires_seed(
        self, runner: CliRunner, contexts: list[RequestContext]
    ) -> None:
        result = runner.invoke(cli.main, ["discover"])

        assert result.exit_code == 2
