"""Opaque navigation endpoints.

Endpoints are handed back to the caller unchanged and can be fed into a
later request (e.g. a song's WatchEndpoint into ``next``).
"""

import logging
from typing import Any

from pydantic import Field, ValidationError
from ytmusicapi.navigation import nav

from ytm_innertube.models.base import InnerTubeModel

logger = logging.getLogger(__name__)

__all__ = ["BrowseEndpoint", "WatchEndpoint"]


class WatchEndpoint(InnerTubeModel):
    """Parameters of a ``next``/``player`` request.

    Also built from ``watchPlaylistEndpoint`` nodes, which carry no video id.
    """

    video_id: str | None = Field(default=None, alias="videoId")
    playlist_id: str | None = Field(default=None, alias="playlistId")
    playlist_set_video_id: str | None = Field(default=None, alias="playlistSetVideoId")
    index: int | None = None
    params: str | None = None
    music_video_type: str | None = None

    @classmethod
    def from_node(cls, node: dict[str, Any] | None) -> "WatchEndpoint | None":
        """Build from a raw watchEndpoint or watchPlaylistEndpoint dict.

        None if the node is not a dict or a field has the wrong type.
        """
        if not isinstance(node, dict):
            return None
        video_type = nav(
            node,
            [
                "watchEndpointMusicSupportedConfigs",
                "watchEndpointMusicConfig",
                "musicVideoType",
            ],
            none_if_absent=True,
        )
        try:
            return cls.model_validate({**node, "music_video_type": video_type})
        except ValidationError as e:
            logger.debug("Ignoring malformed watch endpoint: %s", e)
            return None

    def to_request(self) -> dict[str, Any]:
        """Body fields for a ``next`` request."""
        body: dict[str, Any] = {
            "videoId": self.video_id,
            "playlistId": self.playlist_id,
            "playlistSetVideoId": self.playlist_set_video_id,
            "index": self.index,
            "params": self.params,
        }
        return {key: value for key, value in body.items() if value is not None}


class BrowseEndpoint(InnerTubeModel):
    """Parameters of a ``browse`` request."""

    browse_id: str = Field(alias="browseId", min_length=1)
    params: str | None = None
    page_type: str | None = None

    @classmethod
    def from_node(cls, node: dict[str, Any] | None) -> "BrowseEndpoint | None":
        """Build from a raw browseEndpoint dict. None if it has no browse id."""
        if not isinstance(node, dict) or not node.get("browseId"):
            return None
        page_type = nav(
            node,
            [
                "browseEndpointContextSupportedConfigs",
                "browseEndpointContextMusicConfig",
                "pageType",
            ],
            none_if_absent=True,
        )
        try:
            return cls.model_validate({**node, "page_type": page_type})
        except ValidationError as e:
            logger.debug("Ignoring malformed browse endpoint: %s", e)
            return None
