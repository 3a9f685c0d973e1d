"""Response parsing: renderer navigation, item resolution and page assembly."""

from ytm_innertube.parsing.nodes import ItemNode, NodeShape, dig
from ytm_innertube.parsing.resolver import (
    DEFAULT_CONTEXT,
    ResolutionContext,
    resolve,
    resolve_all,
    resolve_panel_video,
)

__all__ = [
    "DEFAULT_CONTEXT",
    "ItemNode",
    "NodeShape",
    "ResolutionContext",
    "dig",
    "resolve",
    "resolve_all",
    "resolve_panel_video",
]
