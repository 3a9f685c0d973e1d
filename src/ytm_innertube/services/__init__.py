"""Higher-level services built on the client.

Public API:
    DiscoveryService - Daily discover, community playlists and similar
        recommendations, each fanned out over seed items
"""

from ytm_innertube.services.discovery import DiscoveryService

__all__ = ["DiscoveryService"]
