"""
Acciones de workflow - Upload y query de lookups desde un orquestador.

Uso:
    from grail_lookups.workflow import upload_lookup_action, query_lookup_action

    upload_result = await upload_lookup_action(steps, vault)
    query_result = await query_lookup_action(steps, query_client)
"""

from grail_lookups.workflow.query_action import build_lookup_query, query_lookup_action
from grail_lookups.workflow.upload_action import upload_lookup_action

__all__ = [
    "build_lookup_query",
    "query_lookup_action",
    "upload_lookup_action",
]
