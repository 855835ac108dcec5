from .client import CatalogClient, FetchResult

__all__ = ["CatalogClient", "FetchResult"]
