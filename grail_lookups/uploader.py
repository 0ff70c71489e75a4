"""
Upload directo de datos de lookup al Grail Resource Store.

Uso:
    from grail_lookups.uploader import upload_lookup_data

    response = await upload_lookup_data({
        "environmentUrl": "https://abc123.live.dynatrace.com",
        "apiToken": "dt0c01.XXXX",
        "filePath": "/lookups/region/us-east.v2",
        "parsePattern": 'LD:id "," LD:value',
        "lookupField": "id",
        "content": "data/regions.csv",
        "options": {"overwrite": True, "skippedRecords": 1},
    })
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from grail_lookups.http import ResourceStoreClient
from grail_lookups.models import UploadResponse
from grail_lookups.payload import build_descriptor, build_multipart, resolve_content
from grail_lookups.validator import validate_upload_config

logger = logging.getLogger(__name__)


async def upload_lookup_data(
    config: Mapping[str, Any],
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> UploadResponse:
    """
    Validar, construir el multipart y subir los datos de lookup.

    Args:
        config: environmentUrl, apiToken, filePath, parsePattern, lookupField,
                content (texto o ruta a archivo local) y "options" opcional
                (overwrite, autoFlatten, skippedRecords, displayName,
                description, timezone, locale)
        transport: Transporte httpx alternativo

    Returns:
        UploadResponse de la API

    Raises:
        ValidationError antes de cualquier I/O si la configuración es inválida
        RemoteError si la API responde con status no 2xx
        httpx.TransportError si no se obtuvo respuesta
    """
    validate_upload_config(config)

    descriptor = build_descriptor(config)
    content = resolve_content(config["content"])
    files = build_multipart(descriptor.to_json(), content)

    logger.info(f"Subiendo lookup {descriptor.file_path} (overwrite={descriptor.overwrite})")

    client = ResourceStoreClient(base_url=config["environmentUrl"], transport=transport)
    response = await client.upload_with_api_token(config["apiToken"], files)

    logger.info(f"Lookup {descriptor.file_path} subido. Status: {response.status_code}")
    return response
