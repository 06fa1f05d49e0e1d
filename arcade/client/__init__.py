"""
Async HTTP client for the asset API.

AssetClient exposes one resource client per kind (items, links, players,
rooms), each returning the same records and raising the same ArcadeError
subclasses as the storage layer.
"""

from .client import DEFAULT_TIMEOUT, AssetClient
from .resources import ResourceClient

__all__ = ["DEFAULT_TIMEOUT", "AssetClient", "ResourceClient"]
