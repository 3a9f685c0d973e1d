#!/usr/bin/env python3
"""Command-line interface for ytm_innertube.

Prints resolved items as Rich tables. Handy for poking at live responses;
applications should call the library directly.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ytm_innertube.client import InnerTubeClient
from ytm_innertube.config import Locale, RequestContext
from ytm_innertube.exceptions import InnerTubeError
from ytm_innertube.filters import ContentFilters
from ytm_innertube.models.endpoints import WatchEndpoint
from ytm_innertube.models.enums import SearchFilter
from ytm_innertube.models.items import (
    AlbumItem,
    AnyItem,
    ArtistItem,
    EpisodeItem,
    PlaylistItem,
    PodcastItem,
    SongItem,
)
from ytm_innertube.services import DiscoveryService
from ytm_innertube.utils.cookies import cookie_file_to_header

logger = logging.getLogger("ytm_innertube")


@dataclass
class CLIState:
    """Options of the command group, shared with every command."""

    verbose: bool = False
    context: RequestContext | None = None

    def client(self) -> InnerTubeClient:
        return InnerTubeClient(context=self.context)


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route log records through a RichHandler on the root logger.

    Replaces any handler installed by an earlier call.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        console: Console the handler writes to. Defaults to stderr.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def describe(item: AnyItem) -> str:
    """Secondary line of an item: artists, author or year."""
    if isinstance(item, SongItem):
        names = ", ".join(artist.name for artist in item.artists)
        return f"{names} · {item.album.name}" if item.album else names
    if isinstance(item, AlbumItem):
        names = ", ".join(artist.name for artist in item.artists or ())
        return f"{names} · {item.year}" if item.year else names
    if isinstance(item, PlaylistItem):
        author = item.author.name if item.author else ""
        return f"{author} · {item.song_count_text}" if item.song_count_text else author
    if isinstance(item, (PodcastItem, EpisodeItem)):
        return item.author.name if item.author else ""
    if isinstance(item, ArtistItem):
        return item.channel_id or ""
    return ""


def print_items(
    console: Console, items: Iterable[AnyItem], title: str | None = None
) -> None:
    """Print items as a table.

    Args:
        console: Rich console for output.
        items: Items to display.
        title: Optional table title.
    """
    table = Table(title=title, title_justify="left")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Title", style="bold", overflow="fold")
    table.add_column("Details", overflow="fold")
    table.add_column("ID", style="dim", overflow="fold")

    for index, item in enumerate(items, start=1):
        title_text = escape(item.title)
        if item.explicit:
            title_text += " [red]E[/red]"
        table.add_row(
            str(index), item.kind.value, title_text, escape(describe(item)), item.id
        )

    console.print(table)


def run_command(action: Callable[[], None]) -> None:
    """Map library errors onto ClickException, as every command does."""
    try:
        action()
    except InnerTubeError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--cookies",
    type=click.Path(exists=True, path_type=Path),
    help="Path to cookies.txt for YouTube Music authentication.",
)
@click.option("--hl", default="en", show_default=True, help="Interface language.")
@click.option("--gl", default="US", show_default=True, help="Content region.")
@click.option("--proxy", help="Proxy URL for every request.")
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    cookies: Path | None,
    hl: str,
    gl: str,
    proxy: str | None,
) -> None:
    """Query YouTube Music through the InnerTube API."""
    setup_logging(verbose=verbose)
    ctx.obj = CLIState(
        verbose=verbose,
        context=RequestContext(
            locale=Locale(hl=hl, gl=gl),
            cookie=cookie_file_to_header(cookies) if cookies else None,
            proxy=proxy,
        ),
    )


@main.command(name="search")
@click.argument("query")
@click.option(
    "--filter",
    "filter_name",
    type=click.Choice([f.name.lower() for f in SearchFilter], case_sensitive=False),
    help="Restrict results to one category.",
)
@click.pass_obj
def search_cmd(state: CLIState, query: str, filter_name: str | None) -> None:
    """Search for QUERY.

    Without --filter, results are grouped the way the search page shows them.

    \b
    Examples:
      ytm-innertube search "daft punk"
      ytm-innertube search "daft punk" --filter album
    """
    console = Console()
    client = state.client()

    def action() -> None:
        if filter_name is None:
            summary = client.search_summary(query)
            if not summary.summaries:
                console.print("[yellow]No results[/yellow]")
            for section in summary.summaries:
                print_items(console, section.items, title=section.title)
            return
        page = client.search(query, SearchFilter[filter_name.upper()])
        print_items(console, page.items, title=f"Results for {query!r}")

    run_command(action)


@main.command(name="suggest")
@click.argument("query")
@click.pass_obj
def suggest_cmd(state: CLIState, query: str) -> None:
    """Show search suggestions for QUERY."""
    console = Console()
    client = state.client()

    def action() -> None:
        suggestions = client.search_suggestions(query)
        for text in suggestions.queries:
            console.print(f"  {text}")
        if suggestions.recommended_items:
            print_items(console, suggestions.recommended_items, title="Recommended")

    run_command(action)


@main.command(name="home")
@click.option("--hide-explicit", is_flag=True, help="Drop explicit items.")
@click.option("--hide-videos", is_flag=True, help="Drop music videos.")
@click.pass_obj
def home_cmd(state: CLIState, hide_explicit: bool, hide_videos: bool) -> None:
    """Show the home feed."""
    console = Console()
    client = state.client()
    filters = ContentFilters(hide_explicit=hide_explicit, hide_video_songs=hide_videos)

    def action() -> None:
        page = filters.apply_home(client.home())
        if page.chips:
            chips = " · ".join(chip.title for chip in page.chips)
            console.print(chips, style="cyan", markup=False)
        for section in page.sections:
            print_items(console, section.items, title=section.title)

    run_command(action)


@main.command(name="browse")
@click.argument("browse_id")
@click.option("--params", help="Params of the browse endpoint, e.g. of a mood.")
@click.pass_obj
def browse_cmd(state: CLIState, browse_id: str, params: str | None) -> None:
    """Show any browse page, e.g. a mood or genre from the explore page."""
    console = Console()
    client = state.client()

    def action() -> None:
        page = client.browse(browse_id, params)
        if page.title:
            console.print(page.title, style="bold", markup=False)
        if not page.sections:
            console.print("[yellow]Nothing to show[/yellow]")
        for section in page.sections:
            print_items(console, section.items, title=section.title)

    run_command(action)


@main.command(name="playlist")
@click.argument("playlist_id")
@click.option("--all", "fetch_all", is_flag=True, help="Follow every continuation.")
@click.pass_obj
def playlist_cmd(state: CLIState, playlist_id: str, fetch_all: bool) -> None:
    """Show the songs of PLAYLIST_ID.

    \b
    Examples:
      ytm-innertube playlist PLxxx
      ytm-innertube playlist VLPLxxx --all
    """
    console = Console()
    client = state.client()

    def action() -> None:
        if fetch_all:
            songs = list(client.playlist_songs(playlist_id))
            print_items(console, songs, title=f"{playlist_id} ({len(songs)} songs)")
            return
        page = client.playlist(playlist_id)
        header = page.playlist
        title = header.title
        if header.author:
            title += f" by {header.author.name}"
        print_items(console, page.songs, title=title)
        if page.songs_continuation:
            console.print("[dim]More songs available, use --all[/dim]")

    run_command(action)


@main.command(name="related")
@click.argument("video_id")
@click.pass_obj
def related_cmd(state: CLIState, video_id: str) -> None:
    """Show the up-next queue and related items of VIDEO_ID."""
    console = Console()
    client = state.client()
    service = DiscoveryService(client)

    def action() -> None:
        result = client.next(WatchEndpoint(video_id=video_id))
        print_items(console, result.items, title=result.title or "Up next")
        if result.related_endpoint is None:
            console.print("[yellow]No related items[/yellow]")
            return
        items = service.related_items(result.related_endpoint)
        print_items(console, items, title="Related")

    run_command(action)


@main.command(name="discover")
@click.argument("video_ids", nargs=-1, required=True, metavar="VIDEO_ID...")
@click.option("--hide-videos", is_flag=True, help="Drop music videos.")
@click.pass_obj
def discover_cmd(
    state: CLIState, video_ids: tuple[str, ...], hide_videos: bool
) -> None:
    """Recommend one song per seed VIDEO_ID."""
    console = Console()
    service = DiscoveryService(state.client())
    filters = ContentFilters(hide_video_songs=hide_videos)

    def action() -> None:
        entries = service.daily_discover(
            list(video_ids), filters, seed_count=len(video_ids)
        )
        if not entries:
            console.print("[yellow]No recommendations[/yellow]")
            return
        table = Table(title="Daily discover", title_justify="left")
        table.add_column("Seed", style="dim")
        table.add_column("Recommendation", style="bold", overflow="fold")
        table.add_column("Artists", overflow="fold")
        for entry in entries:
            song = entry.recommendation
            table.add_row(entry.seed_id, escape(song.title), escape(describe(song)))
        console.print(table)

    run_command(action)


@main.command(name="album")
@click.argument("browse_id")
@click.pass_obj
def album_cmd(state: CLIState, browse_id: str) -> None:
    """Show the tracks of album BROWSE_ID."""
    console = Console()
    client = state.client()

    def action() -> None:
        page = client.album(browse_id)
        title = f"{page.album.title} · {describe(page.album)}"
        print_items(console, page.songs, title=title)

    run_command(action)


@main.command(name="charts")
@click.option(
    "--limit", type=int, default=None, help="Stop after this many items per chart."
)
@click.pass_obj
def charts_cmd(state: CLIState, limit: int | None) -> None:
    """Show the charts."""
    console = Console()
    client = state.client()

    def action() -> None:
        page = client.charts()
        for section in page.sections:
            items = section.items[:limit] if limit else section.items
            title = f"{section.title} ({section.chart_type.value})"
            print_items(console, items, title=title)

    run_command(action)


if __name__ == "__main__":
    main()
