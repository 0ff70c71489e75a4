"""
Subpaquete HTTP - Cliente para el Grail Resource Store.

Uso:
    from grail_lookups.http import ResourceStoreClient

    client = ResourceStoreClient(base_url)
    await client.upload_with_api_token(token, files)
"""

from grail_lookups.http.resource_store_client import ResourceStoreClient

__all__ = [
    "ResourceStoreClient",
]
