"""ytm_innertube - InnerTube client for YouTube Music.

This library talks to the InnerTube JSON API behind YouTube Music
(browse, search, next, player, feedback and account) and resolves its
deeply nested, schema-unstable responses into a small set of uniform
items: songs, albums, playlists, artists, podcasts and episodes.

Designed for use as a library in applications, with a CLI for debugging
and development.

Examples:
    Search and walk a playlist:
    ```python
    from ytm_innertube import SearchFilter, create_client

    client = create_client()
    page = client.search("daft punk", SearchFilter.SONG)
    for song in client.playlist_songs("PLxxx"):
        print(song.title, [a.name for a in song.artists])
    ```

    Discovery with a logged-in context:
    ```python
    from pathlib import Path
    from ytm_innertube import ContentFilters, DiscoveryService, create_client

    client = create_client(cookies_path=Path("cookies.txt"))
    service = DiscoveryService(client, filters=ContentFilters(hide_explicit=True))
    picks = service.daily_discover(["dQw4w9WgXcQ"])
    ```
"""

from pathlib import Path

from ytm_innertube.aggregation import aggregate, dedupe
from ytm_innertube.client import InnerTubeClient, InnerTubeProtocol
from ytm_innertube.config import APIConfig, BrowseIdHeuristics, Locale, RequestContext
from ytm_innertube.exceptions import (
    AuthenticationRequiredError,
    CancellationError,
    HTTPStatusError,
    InnerTubeError,
    MalformedResponseError,
    NetworkError,
    PageParseError,
    TransportError,
    TransportErrorKind,
)
from ytm_innertube.filters import ContentFilters
from ytm_innertube.models import (
    AlbumItem,
    AnyItem,
    Artist,
    ArtistItem,
    BrowseEndpoint,
    CancelToken,
    EpisodeItem,
    ItemKind,
    LibraryFilter,
    Page,
    PlaylistItem,
    PodcastItem,
    SearchFilter,
    SongItem,
    WatchEndpoint,
)
from ytm_innertube.pagination import collect, iter_pages, paginate
from ytm_innertube.parsing import resolve
from ytm_innertube.services import DiscoveryService
from ytm_innertube.transport import InnerTubeTransport
from ytm_innertube.utils.cookies import cookie_file_to_header


def create_client(
    config: APIConfig | None = None,
    cookies_path: Path | None = None,
    locale: Locale | None = None,
    proxy: str | None = None,
) -> InnerTubeClient:
    """Create a configured InnerTube client.

    This is the recommended way to create a client for library usage.

    Args:
        config: Optional API configuration. Uses defaults if not provided.
        cookies_path: Optional path to a Netscape cookies.txt. Enables
            account operations when it carries a SAPISID cookie.
        locale: Language and region of the results.
        proxy: Proxy URL for every request.

    Returns:
        A configured InnerTubeClient instance.

    Examples:
        ```python
        client = create_client(locale=Locale(hl="de", gl="DE"))
        client = create_client(cookies_path=Path("cookies.txt"))
        ```
    """
    context = RequestContext(
        locale=locale or Locale(),
        cookie=cookie_file_to_header(cookies_path) if cookies_path else None,
        proxy=proxy,
    )
    return InnerTubeClient(config=config, context=context)


__all__ = [
    "APIConfig",
    "AlbumItem",
    "AnyItem",
    "Artist",
    "ArtistItem",
    "AuthenticationRequiredError",
    "BrowseEndpoint",
    "BrowseIdHeuristics",
    "CancelToken",
    "CancellationError",
    "ContentFilters",
    "DiscoveryService",
    "EpisodeItem",
    "HTTPStatusError",
    "InnerTubeClient",
    "InnerTubeError",
    "InnerTubeProtocol",
    "InnerTubeTransport",
    "ItemKind",
    "LibraryFilter",
    "Locale",
    "MalformedResponseError",
    "NetworkError",
    "Page",
    "PageParseError",
    "PlaylistItem",
    "PodcastItem",
    "RequestContext",
    "SearchFilter",
    "SongItem",
    "TransportError",
    "TransportErrorKind",
    "WatchEndpoint",
    "aggregate",
    "collect",
    "create_client",
    "dedupe",
    "iter_pages",
    "paginate",
    "resolve",
]
