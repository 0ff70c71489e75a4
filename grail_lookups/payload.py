"""
Payload builder for lookup uploads.

Builds the JSON descriptor and pairs it with the raw content as the two
named parts (`request`, `content`) of a multipart/form-data body, in the
`files=` shape that httpx expects.
"""

import logging
import os
from typing import Any, Mapping, Optional, Union

from config.constants import (
    CONTENT_PART,
    JSON_CONTENT_TYPE,
    REQUEST_PART,
    TEXT_CONTENT_TYPE,
)
from grail_lookups.models import UploadRequest

logger = logging.getLogger(__name__)

Content = Union[str, bytes]

# Opciones que solo se incluyen si el caller las envía con valor
OPTIONAL_TEXT_FIELDS = ("displayName", "description", "timezone", "locale")


def build_descriptor(config: Mapping[str, Any]) -> UploadRequest:
    """
    Build the upload descriptor from a validated configuration bag.

    Args:
        config: Same bag accepted by validate_upload_config

    Returns:
        UploadRequest with defaults applied and only supplied optionals set
    """
    options = config.get("options") or {}

    params = {
        "filePath": config["filePath"],
        "parsePattern": config["parsePattern"],
        "lookupField": config["lookupField"],
        "overwrite": _option(options, "overwrite", False),
        "autoFlatten": _option(options, "autoFlatten", True),
        "skippedRecords": _option(options, "skippedRecords", 0),
    }
    for name in OPTIONAL_TEXT_FIELDS:
        if options.get(name):
            params[name] = options[name]

    return UploadRequest(**params)


def _option(options: Mapping[str, Any], name: str, default: Any) -> Any:
    """Valor de la opción, o el default si falta o es None."""
    value = options.get(name)
    return default if value is None else value


def resolve_content(content: Content) -> Content:
    """
    Resolve content given either inline or as a local file reference.

    A string naming an existing file is replaced by the file's text. Any
    other value is returned unchanged and sent as literal content.
    """
    if isinstance(content, str) and os.path.isfile(content):
        logger.info(f"Leyendo contenido desde archivo: {content}")
        with open(content, encoding="utf-8") as f:
            return f.read()

    logger.debug("Contenido enviado como literal")
    return content


def build_multipart(
    request_json: str,
    content: Content,
    content_filename: Optional[str] = None,
    typed_request: bool = True,
) -> dict:
    """
    Pair the serialized descriptor with the content as two multipart parts.

    Args:
        request_json: Serialized descriptor
        content: Text or bytes for the content part
        content_filename: Filename for the content part (None = plain field)
        typed_request: Tag the request part as application/json

    Returns:
        Mapping usable as httpx `files=`
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    request_part = (None, request_json.encode("utf-8"))
    if typed_request:
        request_part = request_part + (JSON_CONTENT_TYPE,)

    return {
        REQUEST_PART: request_part,
        CONTENT_PART: (content_filename, content, TEXT_CONTENT_TYPE),
    }
