"""
Resource Store Client - Cliente HTTP async para upload de lookups a Grail.

Maneja la comunicación con los endpoints de upload:
- POST /api/v2/grail/lookups/upload: Upload directo con Api-Token
- POST /platform/storage/resource-store/v1/files/tabular/lookup:upload:
  Upload desde workflow con token Bearer

Un request por llamada, sin reintentos. Los errores de red se propagan
tal cual (httpx.TransportError).
"""

import json
import logging
from typing import Any, Optional

import httpx

from config.constants import Endpoint
from config.settings import settings
from grail_lookups.errors import RemoteError
from grail_lookups.models import UploadResponse

logger = logging.getLogger(__name__)


class ResourceStoreClient:
    """Cliente HTTP async para el Grail Resource Store."""

    # Endpoints
    GRAIL_UPLOAD_ENDPOINT = Endpoint.GRAIL_LOOKUP_UPLOAD.value
    RESOURCE_STORE_UPLOAD_ENDPOINT = Endpoint.RESOURCE_STORE_LOOKUP_UPLOAD.value

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            base_url: URL del entorno (default: settings.grail.DT_URL)
            transport: Transporte httpx alternativo (tests, proxies)
        """
        self.base_url = (base_url or settings.grail.DT_URL).rstrip("/")
        self.transport = transport

    async def upload_with_api_token(self, api_token: str, files: dict) -> UploadResponse:
        """
        Upload directo con header `Api-Token`.

        Endpoint: POST {base_url}/api/v2/grail/lookups/upload

        Args:
            api_token: Token con permiso storage:files:write
            files: Partes multipart (ver grail_lookups.payload.build_multipart)

        Returns:
            UploadResponse con status, headers y body (JSON si se puede parsear)

        Raises:
            RemoteError si el status no es 2xx
            httpx.TransportError si no hubo respuesta
        """
        response = await self._post_multipart(
            url=f"{self.base_url}{self.GRAIL_UPLOAD_ENDPOINT}",
            files=files,
            headers={"Authorization": f"Api-Token {api_token}"}
        )
        body = parse_body(response, sniff_json=True)

        if is_success(response.status_code):
            return UploadResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
                data=body
            )

        raise RemoteError(
            f"Request failed with status {response.status_code}: {describe_body(body)}",
            status_code=response.status_code,
            body=body
        )

    async def upload_with_bearer(self, token: str, files: dict) -> UploadResponse:
        """
        Upload desde workflow con header `Bearer`.

        Endpoint: POST {base_url}/platform/storage/resource-store/v1/files/tabular/lookup:upload

        El body solo se parsea como JSON si la respuesta declara
        application/json. No se fija Content-Type: httpx genera el boundary.
        """
        response = await self._post_multipart(
            url=f"{self.base_url}{self.RESOURCE_STORE_UPLOAD_ENDPOINT}",
            files=files,
            headers={
                "Authorization": f"Bearer {token}",
                "accept": "*/*",
            }
        )
        body = parse_body(response, sniff_json=False)

        if is_success(response.status_code):
            return UploadResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
                data=body
            )

        raise RemoteError(
            f"API call failed with status {response.status_code}: {serialize_body(body)}",
            status_code=response.status_code,
            body=body
        )

    async def _post_multipart(self, url: str, files: dict, headers: dict) -> httpx.Response:
        """POST multipart/form-data, una sola vez."""
        logger.info(f"POST {url}")

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(url, files=files, headers=headers)

        logger.info(f"Respuesta {response.status_code} de {url}")
        return response


def is_success(status_code: int) -> bool:
    """Considerar 2xx como éxito."""
    return 200 <= status_code < 300


def parse_body(response: httpx.Response, sniff_json: bool) -> Any:
    """
    Interpretar el body de la respuesta.

    Args:
        response: Respuesta httpx
        sniff_json: True = intentar JSON siempre (body vacío → {} en 2xx);
                    False = JSON solo si el content-type lo declara

    Returns:
        dict/list si el body es JSON, texto crudo en otro caso
    """
    if sniff_json:
        if not response.content:
            return {} if is_success(response.status_code) else response.text
    elif "application/json" not in response.headers.get("content-type", ""):
        return response.text

    try:
        return response.json()
    except ValueError:
        return response.text


def describe_body(body: Any) -> str:
    """Texto del body para mensajes de error."""
    if isinstance(body, str):
        return body
    return serialize_body(body)


def serialize_body(body: Any) -> str:
    """JSON compacto, sin escapar caracteres no ASCII."""
    return json.dumps(body, ensure_ascii=False, separators=(",", ":"))
