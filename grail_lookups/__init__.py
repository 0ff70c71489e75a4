"""
Grail Lookups - Upload y query de tablas de lookup en el Grail Resource Store.

Componentes:
- validator: Validación de la configuración antes de cualquier I/O
- payload: Descriptor JSON + contenido como multipart
- http/: Cliente HTTP async para el Resource Store
- uploader: Upload directo con Api-Token
- workflow/: Acciones de upload y query para el orquestador
"""

from grail_lookups.errors import (
    ConfigurationError,
    LookupIntegrationError,
    RemoteError,
    TransportError,
    ValidationError,
)
from grail_lookups.models import UploadRequest, UploadResponse
from grail_lookups.uploader import upload_lookup_data

__all__ = [
    # Errors
    "ConfigurationError",
    "LookupIntegrationError",
    "RemoteError",
    "TransportError",
    "ValidationError",
    # Upload
    "UploadRequest",
    "UploadResponse",
    "upload_lookup_data",
]
