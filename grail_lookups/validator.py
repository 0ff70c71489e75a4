"""
Validar la configuración de un upload directo antes de cualquier I/O.

Las reglas se evalúan en orden y se detienen en la primera falla.
"""

import re
from typing import Any, Mapping

from config.constants import LOOKUP_PATH_PREFIX, MAX_TEXT_FIELD_LENGTH
from grail_lookups.errors import ValidationError

REQUIRED_FIELDS = (
    "environmentUrl",
    "apiToken",
    "filePath",
    "parsePattern",
    "lookupField",
    "content",
)

FLAG_OPTIONS = ("overwrite", "autoFlatten")
TEXT_OPTIONS = ("displayName", "description", "timezone", "locale")
LENGTH_LIMITED_OPTIONS = ("displayName", "description")

FILE_PATH_CHARSET = re.compile(r"[A-Za-z0-9/.\-]+")
FILE_PATH_ENDING = re.compile(r"[A-Za-z0-9]$")


def validate_file_path(file_path: Any) -> None:
    """
    Args:
        file_path: Ruta del lookup en Grail (ej: /lookups/region/us-east.v2)

    Raises:
        ValidationError en la primera regla que no se cumpla
    """
    if not isinstance(file_path, str):
        raise ValidationError("filePath must be a string")

    if not file_path.startswith(LOOKUP_PATH_PREFIX):
        raise ValidationError(f"filePath must start with {LOOKUP_PATH_PREFIX}")

    if not FILE_PATH_CHARSET.fullmatch(file_path):
        raise ValidationError(
            "filePath contains invalid characters. Only alphanumeric, hyphens, "
            "periods, and forward slashes are allowed"
        )

    if not FILE_PATH_ENDING.search(file_path):
        raise ValidationError("filePath must end with an alphanumeric character")


def validate_upload_config(config: Mapping[str, Any]) -> None:
    """
    Validar la bolsa de configuración de upload_lookup_data.

    Args:
        config: environmentUrl, apiToken, filePath, parsePattern, lookupField,
                content y un dict opcional "options"

    Raises:
        ValidationError con un mensaje distinto por regla
    """
    missing = [name for name in REQUIRED_FIELDS if not config.get(name)]
    if missing:
        raise ValidationError(
            "Missing required parameters: environmentUrl, apiToken, filePath, "
            "parsePattern, lookupField, and content are all required "
            f"(missing: {', '.join(missing)})"
        )

    validate_file_path(config["filePath"])

    options = config.get("options") or {}
    if not isinstance(options, Mapping):
        raise ValidationError("options must be a mapping")

    # None equivale a opción omitida
    for name in FLAG_OPTIONS:
        value = options.get(name)
        if value is not None and not isinstance(value, bool):
            raise ValidationError(f"{name} must be a boolean")

    for name in TEXT_OPTIONS:
        value = options.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{name} must be a string")

    for name in LENGTH_LIMITED_OPTIONS:
        value = options.get(name)
        if value and len(value) > MAX_TEXT_FIELD_LENGTH:
            raise ValidationError(
                f"{name} must be {MAX_TEXT_FIELD_LENGTH} characters or less"
            )

    skipped = options.get("skippedRecords")
    if skipped is not None and (
        isinstance(skipped, bool) or not isinstance(skipped, int) or skipped < 0
    ):
        raise ValidationError("skippedRecords must be a non-negative integer")
