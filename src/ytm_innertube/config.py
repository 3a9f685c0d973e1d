"""Configuration for ytm_innertube."""

from dataclasses import dataclass, field, replace
from typing import Any

from ytm_innertube.utils.cookies import get_sapisid, parse_cookie_header


@dataclass(frozen=True)
class Locale:
    """Language and region sent in every request context.

    Attributes:
        hl: Interface language (e.g. "en").
        gl: Content region (e.g. "US").
    """

    hl: str = "en"
    gl: str = "US"


@dataclass(frozen=True)
class BrowseIdHeuristics:
    """Prefix table used to tell entity kinds apart by browse id.

    Subtitle runs of an item carry no explicit type; the browse id prefix
    of each run is the only reliable signal. The values here match what the
    service currently emits and can be overridden if it changes.

    Attributes:
        artist_prefixes: Prefixes of artist and user channel ids.
        album_prefixes: Prefixes of album browse ids.
        playlist_prefix: Prefix added to playlist ids when browsing.
        podcast_prefix: Prefix of podcast show browse ids.
        login_prefixes: Browse ids starting with these need a logged-in request.
        login_ids: Exact browse ids that need a logged-in request.
    """

    artist_prefixes: tuple[str, ...] = ("UC",)
    album_prefixes: tuple[str, ...] = ("MPREb_",)
    playlist_prefix: str = "VL"
    podcast_prefix: str = "MPSP"
    login_prefixes: tuple[str, ...] = ("FEmusic_library",)
    login_ids: tuple[str, ...] = ("VLSE", "VLRDPN")

    def is_artist_id(self, browse_id: str | None) -> bool:
        return bool(browse_id) and browse_id.startswith(self.artist_prefixes)

    def is_album_id(self, browse_id: str | None) -> bool:
        return bool(browse_id) and browse_id.startswith(self.album_prefixes)

    def strip_playlist_prefix(self, browse_id: str) -> str:
        """Turn a playlist browse id ("VLPL...") into a playlist id."""
        return browse_id.removeprefix(self.playlist_prefix)

    def strip_podcast_prefix(self, browse_id: str) -> str:
        return browse_id.removeprefix(self.podcast_prefix)

    def requires_login(self, browse_id: str) -> bool:
        return browse_id.startswith(self.login_prefixes) or browse_id in self.login_ids


@dataclass(frozen=True)
class APIConfig:
    """InnerTube client configuration.

    Attributes:
        timeout: Per-request timeout in seconds.
        max_continuation_steps: Upper bound on continuation fetches per listing.
        max_workers: Thread pool size for multi-seed aggregation.
        client_version: WEB_REMIX client version. None uses the version
            ytmusicapi derives from the current date.
        heuristics: Browse id prefix table.
    """

    timeout: float = 15.0
    max_continuation_steps: int = 50
    max_workers: int = 8
    client_version: str | None = None
    heuristics: BrowseIdHeuristics = field(default_factory=BrowseIdHeuristics)


@dataclass(frozen=True)
class RequestContext:
    """Per-request identity: locale, visitor, session cookie and proxy.

    A client holds a default context; every operation accepts an override,
    so concurrent callers never share mutable session state.

    Attributes:
        locale: Language and region.
        visitor_data: Value for the X-Goog-Visitor-Id header.
        data_sync_id: Account id sent as onBehalfOfUser on logged-in requests.
        cookie: Raw Cookie header value. Requests carry it only when logged in.
        proxy: Proxy URL applied to both http and https.
        use_login_for_browse: Send the cookie on every browse request.
    """

    locale: Locale = field(default_factory=Locale)
    visitor_data: str | None = None
    data_sync_id: str | None = None
    cookie: str | None = None
    proxy: str | None = None
    use_login_for_browse: bool = False

    def replace(self, **changes: Any) -> "RequestContext":
        """Return a copy with the given fields overridden."""
        return replace(self, **changes)

    @property
    def is_logged_in(self) -> bool:
        """True if the cookie carries a SAPISID usable for SAPISIDHASH."""
        if not self.cookie:
            return False
        return get_sapisid(parse_cookie_header(self.cookie)) is not None
