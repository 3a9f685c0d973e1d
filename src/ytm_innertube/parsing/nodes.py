"""Navigation over raw InnerTube renderer trees.

Responses are arbitrarily nested dicts whose keys and depth drift between
releases. Everything here is total: a missing key, a wrong type or an index
out of range yields None (or an empty list), never an exception.

Item nodes come in four shapes. ``ItemNode`` wraps one of them and
precomputes which entity kinds the node can represent, so resolution picks
a variant once instead of re-probing the tree per field.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ytmusicapi.navigation import nav

from ytm_innertube.models.endpoints import WatchEndpoint
from ytm_innertube.models.enums import IconType, ItemKind, PageType

Run = dict[str, Any]

SEPARATOR = " • "

PAGE_TYPE_PATH = (
    "browseEndpointContextSupportedConfigs",
    "browseEndpointContextMusicConfig",
    "pageType",
)
VIDEO_TYPE_PATH = (
    "watchEndpointMusicSupportedConfigs",
    "watchEndpointMusicConfig",
    "musicVideoType",
)
OVERLAY_PLAY_ENDPOINT = (
    "musicItemThumbnailOverlayRenderer",
    "content",
    "musicPlayButtonRenderer",
    "playNavigationEndpoint",
)
FEEDBACK_TOKEN_PATH = ("feedbackEndpoint", "feedbackToken")
FLEX_COLUMN = "musicResponsiveListItemFlexColumnRenderer"
FIXED_COLUMN = "musicResponsiveListItemFixedColumnRenderer"


def dig(node: Any, *path: str | int) -> Any:
    """Follow ``path`` through nested dicts and lists.

    Args:
        node: Root of the walk.
        *path: Dict keys and list indexes; negative indexes count from the end.

    Returns:
        The value at the end of the path, or None if any step is missing.
    """
    if node is None:
        return None
    try:
        return nav(node, list(path), none_if_absent=True)
    except (TypeError, AttributeError):
        # nav indexes into whatever it finds; a str or int mid-path lands here
        return None


def as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


# -- Text runs ----------------------------------------------------------------


def runs_of(text_node: Any) -> list[Run]:
    """Runs of a text node ({"runs": [...]}), empty when absent."""
    return [run for run in as_list(dig(text_node, "runs")) if isinstance(run, dict)]


def first_run_text(text_node: Any) -> str | None:
    return dig(text_node, "runs", 0, "text") or dig(text_node, "simpleText")


def join_runs(text_node: Any) -> str | None:
    text = "".join(run.get("text") or "" for run in runs_of(text_node))
    return text or dig(text_node, "simpleText")


def split_by_separator(runs: list[Run], separator: str = SEPARATOR) -> list[list[Run]]:
    """Group runs between separator runs ("A • B, C • 3:12" -> 3 groups)."""
    groups: list[list[Run]] = []
    current: list[Run] = []
    for run in runs:
        if run.get("text") == separator:
            groups.append(current)
            current = []
        else:
            current.append(run)
    groups.append(current)
    return groups


def odd_elements(runs: list[Run]) -> list[Run]:
    """Every other run starting from the first, dropping " & " style joiners."""
    return runs[::2]


def run_browse_id(run: Run) -> str | None:
    return dig(run, "navigationEndpoint", "browseEndpoint", "browseId")


def run_page_type(run: Run) -> str | None:
    return dig(run, "navigationEndpoint", "browseEndpoint", *PAGE_TYPE_PATH)


# -- Endpoints, thumbnails, badges, menus -------------------------------------


def page_type(navigation_endpoint: Any) -> str | None:
    return dig(navigation_endpoint, "browseEndpoint", *PAGE_TYPE_PATH)


def thumbnail_url(thumbnail_renderer: Any) -> str | None:
    """Largest thumbnail of a thumbnail renderer.

    Accepts the parent of ``musicThumbnailRenderer`` or
    ``croppedSquareThumbnailRenderer``.
    """
    for key in ("musicThumbnailRenderer", "croppedSquareThumbnailRenderer"):
        url = dig(thumbnail_renderer, key, "thumbnail", "thumbnails", -1, "url")
        if url:
            return url
    return None


def has_explicit_badge(badges: Any) -> bool:
    return any(
        dig(badge, "musicInlineBadgeRenderer", "icon", "iconType") == IconType.EXPLICIT
        for badge in as_list(badges)
    )


def menu_items(node: Any) -> list[dict[str, Any]]:
    return as_list(dig(node, "menu", "menuRenderer", "items"))


def menu_navigation_endpoint(
    items: list[dict[str, Any]], icon: str
) -> dict[str, Any] | None:
    """Navigation endpoint of the menu entry with the given icon."""
    for item in items:
        renderer = dig(item, "menuNavigationItemRenderer")
        if dig(renderer, "icon", "iconType") == icon:
            return dig(renderer, "navigationEndpoint")
    return None


def menu_watch_playlist_endpoint(
    items: list[dict[str, Any]], icon: str
) -> WatchEndpoint | None:
    return WatchEndpoint.from_node(
        dig(menu_navigation_endpoint(items, icon), "watchPlaylistEndpoint")
    )


def has_menu_icon(items: list[dict[str, Any]], icon: str) -> bool:
    return menu_navigation_endpoint(items, icon) is not None


def menu_service_token(items: list[dict[str, Any]], icon: str) -> str | None:
    """Feedback token of a plain service entry (e.g. remove from history)."""
    for item in items:
        renderer = dig(item, "menuServiceItemRenderer")
        if dig(renderer, "icon", "iconType") == icon:
            return dig(renderer, "serviceEndpoint", "feedbackEndpoint", "feedbackToken")
    return None


@dataclass(frozen=True)
class LibraryTokens:
    """Feedback tokens that add an item to or remove it from the library."""

    add: str | None = None
    remove: str | None = None


_ADD_ICONS = (IconType.LIBRARY_ADD, IconType.BOOKMARK_BORDER)
_REMOVE_ICONS = (IconType.LIBRARY_SADDLE, IconType.BOOKMARK)


def library_tokens(items: list[dict[str, Any]]) -> LibraryTokens:
    """Read library tokens from ``toggleMenuServiceItemRenderer`` entries.

    The default icon tells the current state: an "add" icon means the
    default token adds and the toggled token removes, and the reverse for a
    "saved" icon.
    """
    for item in items:
        toggle = dig(item, "toggleMenuServiceItemRenderer")
        if toggle is None:
            continue
        icon = dig(toggle, "defaultIcon", "iconType")
        default = dig(toggle, "defaultServiceEndpoint", *FEEDBACK_TOKEN_PATH)
        toggled = dig(toggle, "toggledServiceEndpoint", *FEEDBACK_TOKEN_PATH)
        if icon in _ADD_ICONS:
            return LibraryTokens(add=default, remove=toggled)
        if icon in _REMOVE_ICONS:
            return LibraryTokens(add=toggled, remove=default)
    return LibraryTokens()


# -- Containers and continuations --------------------------------------------


def get_continuation(container: Any) -> str | None:
    """Continuation token of a shelf, grid, panel or section list.

    Looks at ``continuations[0]`` first, then at a trailing
    ``continuationItemRenderer`` in ``contents``/``items``.
    """
    for data_key in ("nextContinuationData", "reloadContinuationData"):
        token = dig(container, "continuations", 0, data_key, "continuation")
        if token:
            return token
    for key in ("contents", "items"):
        token = continuation_item_token(as_list(dig(container, key)))
        if token:
            return token
    return None


def continuation_item_token(contents: list[Any]) -> str | None:
    """Token of the ``continuationItemRenderer`` that ends a content list."""
    if not contents:
        return None
    return dig(
        contents[-1],
        "continuationItemRenderer",
        "continuationEndpoint",
        "continuationCommand",
        "token",
    )


# -- Item node shapes ---------------------------------------------------------


class NodeShape(StrEnum):
    """Wrapper key of each renderer that can hold an item."""

    TWO_ROW = "musicTwoRowItemRenderer"
    RESPONSIVE = "musicResponsiveListItemRenderer"
    MULTI_ROW = "musicMultiRowListItemRenderer"
    CARD_SHELF = "musicCardShelfRenderer"


@dataclass(frozen=True)
class Capabilities:
    """Entity kinds a node can represent, computed once per node."""

    is_song: bool = False
    is_album: bool = False
    is_playlist: bool = False
    is_artist: bool = False
    is_user_channel: bool = False
    is_podcast: bool = False
    is_episode: bool = False

    def kind(self) -> ItemKind | None:
        """First matching kind in fixed priority order."""
        if self.is_song:
            return ItemKind.SONG
        if self.is_album:
            return ItemKind.ALBUM
        if self.is_playlist:
            return ItemKind.PLAYLIST
        if self.is_artist or self.is_user_channel:
            return ItemKind.ARTIST
        if self.is_podcast:
            return ItemKind.PODCAST
        if self.is_episode:
            return ItemKind.EPISODE
        return None


def _capabilities_from_page_type(pt: str | None, **extra: bool) -> Capabilities:
    return Capabilities(
        is_album=pt in (PageType.ALBUM, PageType.AUDIOBOOK),
        is_playlist=pt == PageType.PLAYLIST,
        is_artist=pt == PageType.ARTIST,
        is_user_channel=pt == PageType.USER_CHANNEL,
        is_podcast=pt == PageType.PODCAST,
        is_episode=pt == PageType.EPISODE,
        **extra,
    )


def _two_row_capabilities(data: dict[str, Any]) -> Capabilities:
    endpoint = data.get("navigationEndpoint")
    return _capabilities_from_page_type(
        page_type(endpoint), is_song=dig(endpoint, "watchEndpoint") is not None
    )


def flex_column_runs(data: dict[str, Any], index: int) -> list[Run]:
    return runs_of(dig(data, "flexColumns", index, FLEX_COLUMN, "text"))


def fixed_column_runs(data: dict[str, Any], index: int) -> list[Run]:
    return runs_of(dig(data, "fixedColumns", index, FIXED_COLUMN, "text"))


def is_responsive_episode(data: dict[str, Any]) -> bool:
    """Episode markers on a list item, any one of which suffices."""
    endpoint = data.get("navigationEndpoint")
    if page_type(endpoint) == PageType.EPISODE:
        return True
    subtitle = flex_column_runs(data, 1)
    if subtitle and subtitle[0].get("text") == "Episode":
        return True
    has_podcast_link = any(run_page_type(run) == PageType.PODCAST for run in subtitle)
    has_video_id = bool(
        dig(data, "playlistItemData", "videoId")
        or dig(endpoint, "watchEndpoint", "videoId")
    )
    return has_podcast_link and has_video_id


def _responsive_capabilities(data: dict[str, Any]) -> Capabilities:
    endpoint = data.get("navigationEndpoint")
    pt = page_type(endpoint)
    is_episode = is_responsive_episode(data)
    playable = (
        endpoint is None
        or dig(endpoint, "watchEndpoint") is not None
        or dig(endpoint, "watchPlaylistEndpoint") is not None
    )
    caps = _capabilities_from_page_type(pt, is_song=playable and not is_episode)
    if pt == PageType.LIBRARY_ARTIST:
        caps = Capabilities(is_artist=True)
    if is_episode and not caps.is_episode:
        caps = Capabilities(is_episode=True)
    return caps


def _card_shelf_capabilities(data: dict[str, Any]) -> Capabilities:
    endpoint = dig(data, "title", "runs", 0, "navigationEndpoint")
    return _capabilities_from_page_type(
        page_type(endpoint), is_song=dig(endpoint, "watchEndpoint") is not None
    )


@dataclass(frozen=True)
class ItemNode:
    """A raw item renderer together with its shape and capabilities."""

    shape: NodeShape
    data: dict[str, Any]
    capabilities: Capabilities

    @classmethod
    def wrap(cls, raw: Any) -> "ItemNode | None":
        """Wrap a ``{"<rendererKey>": {...}}`` dict; None for other nodes."""
        if not isinstance(raw, dict):
            return None
        for shape in NodeShape:
            data = raw.get(shape.value)
            if isinstance(data, dict):
                capabilities = _capabilities_for(shape, data)
                return cls(shape=shape, data=data, capabilities=capabilities)
        return None

    @property
    def music_video_type(self) -> str | None:
        is_two_row = self.shape is NodeShape.TWO_ROW
        overlay_key = "thumbnailOverlay" if is_two_row else "overlay"
        return dig(
            self.data,
            overlay_key,
            *OVERLAY_PLAY_ENDPOINT,
            "watchEndpoint",
            *VIDEO_TYPE_PATH,
        ) or dig(self.data, "navigationEndpoint", "watchEndpoint", *VIDEO_TYPE_PATH)


def _capabilities_for(shape: NodeShape, data: dict[str, Any]) -> Capabilities:
    if shape is NodeShape.TWO_ROW:
        return _two_row_capabilities(data)
    if shape is NodeShape.RESPONSIVE:
        return _responsive_capabilities(data)
    if shape is NodeShape.MULTI_ROW:
        return Capabilities(is_episode=dig(data, "onTap", "watchEndpoint") is not None)
    return _card_shelf_capabilities(data)
