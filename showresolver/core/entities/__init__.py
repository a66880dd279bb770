"""
Business entities representing core domain concepts.

Exports:
- CatalogShow: Show tracked in the local catalog
- CatalogEpisode: Episode of a catalog show
"""

from showresolver.core.entities.catalog import CatalogEpisode, CatalogShow

__all__ = [
    "CatalogShow",
    "CatalogEpisode",
]
