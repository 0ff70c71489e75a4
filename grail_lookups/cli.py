"""
CLI para upload directo de datos de lookup.

Uso:
    python -m grail_lookups.cli --file-path /lookups/regions \\
        --parse-pattern 'LD:id "," LD:value' --lookup-field id \\
        --content data/regions.csv --skipped-records 1 --overwrite

URL y token se leen de DT_URL / DT_API_TOKEN si no se pasan.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

import httpx

from config.logging_config import setup_logging
from config.settings import settings
from grail_lookups.errors import LookupIntegrationError
from grail_lookups.uploader import upload_lookup_data

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Subir datos de lookup al Grail Resource Store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos:
  python -m grail_lookups.cli --file-path /lookups/regions --parse-pattern 'LD:id "," LD:value' --lookup-field id --content regions.csv
  python -m grail_lookups.cli --file-path /lookups/hosts --parse-pattern 'JSON:record' --lookup-field host --content hosts.jsonl --overwrite
        """
    )
    parser.add_argument("--file-path", required=True, help="Ruta en Grail (ej: /lookups/mydata)")
    parser.add_argument("--parse-pattern", required=True, help="Patrón DPL para parsear los datos")
    parser.add_argument("--lookup-field", required=True, help="Campo que identifica cada registro")
    parser.add_argument("--content", required=True, help="Archivo local o contenido literal")
    parser.add_argument("--environment-url", default=None, help="URL del entorno (default: DT_URL)")
    parser.add_argument("--api-token", default=None, help="API token (default: DT_API_TOKEN)")
    parser.add_argument("--overwrite", action="store_true", help="Sobrescribir si el archivo existe")
    parser.add_argument(
        "--no-auto-flatten",
        action="store_true",
        help="No extraer campos anidados al nivel raíz"
    )
    parser.add_argument("--skipped-records", type=int, default=0, help="Registros iniciales a descartar")
    parser.add_argument("--display-name", default=None, help="Nombre visible (max 500 chars)")
    parser.add_argument("--description", default=None, help="Descripción (max 500 chars)")
    parser.add_argument("--timezone", default=None, help="Timezone para fechas (ej: UTC)")
    parser.add_argument("--locale", default=None, help="Locale para parseo (ej: en_US)")
    return parser


def build_config(args: argparse.Namespace) -> dict:
    """Traducir argumentos a la configuración de upload_lookup_data."""
    options = {
        "overwrite": args.overwrite,
        "autoFlatten": not args.no_auto_flatten,
        "skippedRecords": args.skipped_records,
    }
    for key, value in (
        ("displayName", args.display_name),
        ("description", args.description),
        ("timezone", args.timezone),
        ("locale", args.locale),
    ):
        if value:
            options[key] = value

    return {
        "environmentUrl": args.environment_url or settings.grail.DT_URL,
        "apiToken": args.api_token or settings.grail.DT_API_TOKEN,
        "filePath": args.file_path,
        "parsePattern": args.parse_pattern,
        "lookupField": args.lookup_field,
        "content": args.content,
        "options": options,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point del CLI."""
    args = build_parser().parse_args(argv)
    setup_logging("uploader")

    try:
        response = asyncio.run(upload_lookup_data(build_config(args)))
    except (LookupIntegrationError, httpx.TransportError) as e:
        logger.error(f"Upload fallido: {e}")
        return 1

    print(json.dumps(response.to_dict(), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
