"""
Clients des services distants.

- TVDBClient : guide de programmes TVDB (details et episodes d'une serie)
- CatalogAPIClient : catalogue des series connues et recherche par nom

Infrastructure partagee:
- APICache : cache persistant avec TTL (recherche 24h, details 7j)
- RateLimitError / with_retry / request_with_retry : gestion des 429
"""

from showresolver.adapters.api.cache import APICache
from showresolver.adapters.api.catalog_api_client import CatalogAPIClient, CatalogAPIError
from showresolver.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from showresolver.adapters.api.tvdb_client import TVDBClient

__all__ = [
    "APICache",
    "CatalogAPIClient",
    "CatalogAPIError",
    "RateLimitError",
    "TVDBClient",
    "request_with_retry",
    "with_retry",
]
