"""
Acción de workflow: Upload de datos de lookup.

Toma el descriptor JSON y el CSV de tareas previas del workflow, resuelve
el token Bearer desde el credential vault y sube los datos al Grail
Resource Store.
"""

import json
import logging
from datetime import date
from typing import Any, Optional

from config.constants import PREVIEW_CHARS
from config.settings import Settings, settings as default_settings
from grail_lookups.errors import ConfigurationError, ValidationError
from grail_lookups.http import ResourceStoreClient
from grail_lookups.models import UploadStepResult, read_field
from grail_lookups.payload import build_multipart
from grail_lookups.workflow.context import CredentialVault, StepResultSource
from grail_lookups.workflow.step_results import (
    TextFallback,
    classify_step_result,
    resolve_text,
)

logger = logging.getLogger(__name__)

# Campos que deben venir con texto no vacío en el descriptor
REQUIRED_DESCRIPTOR_FIELDS = (
    ("filePath", "filePath is required and must not be empty in the request payload"),
    ("lookupField", "lookupField is required and must not be blank in the request payload"),
    ("parsePattern", "parsePattern is required and must not be blank in the request payload"),
)


async def upload_lookup_action(
    steps: StepResultSource,
    vault: CredentialVault,
    client: Optional[ResourceStoreClient] = None,
    config: Optional[Settings] = None,
    today: Optional[date] = None
) -> dict:
    """
    Ejecutar el upload desde el workflow.

    Args:
        steps: Acceso a resultados de tareas previas
        vault: Credential vault
        client: Cliente HTTP (default: ResourceStoreClient sobre DT_URL)
        config: Settings (default: instancia global)
        today: Fecha para la descripción (default: hoy)

    Returns:
        UploadStepResult serializado (message, statusCode, responseBody, filePath)

    Raises:
        ConfigurationError si el vault no devuelve token
        ValidationError si el descriptor no es JSON válido o le faltan campos
        RemoteError si la API responde con status no 2xx
    """
    config = config or default_settings
    workflow = config.workflow

    credentials = await vault.get_credentials_details(workflow.CREDENTIALS_VAULT_ID)
    token = read_field(credentials, "token")
    if not token:
        raise ConfigurationError(
            "API_TOKEN is required. Please configure it in your workflow credential vault."
        )

    payload_raw = await steps.result(workflow.PAYLOAD_STEP_NAME)
    csv_raw = await steps.result(workflow.CSV_STEP_NAME)

    payload_text = resolve_text(classify_step_result(payload_raw), TextFallback.JSON)
    csv_content = resolve_text(classify_step_result(csv_raw), TextFallback.STR)

    logger.debug(f"Descriptor recibido: {payload_text[:PREVIEW_CHARS]}")
    logger.debug(f"CSV recibido ({len(csv_content)} chars): {csv_content[:PREVIEW_CHARS]}")

    descriptor = parse_descriptor(payload_text, workflow.PAYLOAD_STEP_NAME)

    skipped = skip_count(descriptor.get("skippedRecords"))
    if skipped > 0:
        csv_content = strip_leading_records(csv_content, skipped)

    for name, message in REQUIRED_DESCRIPTOR_FIELDS:
        value = descriptor.get(name)
        if not isinstance(value, str) or not value.strip():
            logger.error(f"Validación de {name} fallida. Campos: {list(descriptor)}")
            raise ValidationError(message)

    descriptor["description"] = describe_upload(descriptor.get("description"), today or date.today())
    logger.info(f"Descripción: {descriptor['description']}")

    files = build_multipart(
        json.dumps(descriptor),
        csv_content,
        content_filename=workflow.CSV_UPLOAD_FILENAME,
        typed_request=False
    )

    client = client or ResourceStoreClient(base_url=config.grail.DT_URL)
    response = await client.upload_with_bearer(token, files)

    logger.info(f"Lookup {descriptor['filePath']} subido. Status: {response.status_code}")

    return UploadStepResult(
        message=f"Successfully uploaded lookup data. Status: {response.status_code}",
        status_code=response.status_code,
        response_body=response.data,
        file_path=descriptor["filePath"]
    ).to_dict()


def parse_descriptor(payload_text: str, step_name: str) -> dict:
    """Parsear el descriptor JSON de la tarea previa."""
    try:
        descriptor = json.loads(payload_text)
    except ValueError as e:
        logger.error(f"JSON inválido: {e}")
        raise ValidationError(f"Invalid JSON payload from {step_name} task: {e}") from e

    if not isinstance(descriptor, dict):
        raise ValidationError(
            f"Invalid JSON payload from {step_name} task: expected an object, "
            f"got {type(descriptor).__name__}"
        )
    return descriptor


def skip_count(value: Any) -> int:
    """skippedRecords como entero (0 si no es numérico)."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return 0


def strip_leading_records(content: str, count: int) -> str:
    """
    Remover las primeras `count` líneas no vacías del CSV.

    Las líneas vacías se descartan y el orden se conserva. Si el CSV no
    tiene más líneas que `count` se devuelve sin cambios.
    """
    lines = [line for line in content.split("\n") if line.strip() != ""]

    if len(lines) <= count:
        logger.warning(f"CSV tiene {len(lines)} líneas pero skippedRecords es {count}")
        return content

    remaining = lines[count:]
    logger.info(f"Removidas {count} fila(s) de encabezado del CSV. Restantes: {len(remaining)}")
    return "\n".join(remaining)


def format_upload_date(day: date) -> str:
    """Fecha larga: "January 1, 2025"."""
    return f"{day:%B} {day.day}, {day.year}"


def describe_upload(description: Optional[str], day: date) -> str:
    """Agregar la fecha de upload a la descripción."""
    formatted = format_upload_date(day)
    if description:
        return f"{description} on {formatted}"
    return f"Uploaded on {formatted}"
