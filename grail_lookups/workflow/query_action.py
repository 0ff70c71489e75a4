"""
Acción de workflow: Query de datos de lookup.

Lee la tabla de lookup subida por la acción de upload usando DQL.
"""

import logging
from typing import Optional

from config.settings import Settings, settings as default_settings
from grail_lookups.errors import ConfigurationError
from grail_lookups.models import LookupReference, QueryStepResult, read_field
from grail_lookups.workflow.context import QueryExecutor, StepResultSource

logger = logging.getLogger(__name__)


def build_lookup_query(file_path: str) -> str:
    """DQL para leer una tabla de lookup."""
    return f"fetch lookup [{file_path}]"


async def query_lookup_action(
    steps: StepResultSource,
    query_client: QueryExecutor,
    config: Optional[Settings] = None
) -> dict:
    """
    Consultar el lookup subido en la tarea de upload.

    Args:
        steps: Acceso a resultados de tareas previas
        query_client: Cliente de ejecución de queries
        config: Settings (default: instancia global)

    Returns:
        QueryStepResult serializado (message, filePath, recordCount,
        records, fullResponse)

    Raises:
        ConfigurationError si el resultado previo no trae filePath
    """
    config = config or default_settings
    step_name = config.workflow.UPLOAD_STEP_NAME

    upload_result = await steps.result(step_name)
    reference = LookupReference.from_step_result(upload_result)
    if reference is None:
        raise ConfigurationError(
            f"filePath not found in {step_name} result. "
            "Make sure the upload action returns filePath."
        )

    query = build_lookup_query(reference.file_path)
    logger.info(f"Ejecutando query: {query}")

    data = await query_client.query_execute(query)
    records = read_field(data, "records") or []

    logger.info(f"Query de {reference.file_path} retornó {len(records)} registros")

    return QueryStepResult(
        message=f"Successfully queried lookup table at {reference.file_path}",
        file_path=reference.file_path,
        record_count=len(records),
        records=records,
        full_response=data
    ).to_dict()
