"""
Configuración centralizada de logging con rotación diaria.

Cada entry point escribe a su propio archivo en logs/:
- logs/uploader.log → CLI de upload directo
- logs/workflow.log → Acciones de workflow

Los archivos rotan a medianoche y se eliminan después de N días.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler

from config.settings import settings

# Directorio de logs (relativo a la raíz del proyecto)
LOGS_DIR = Path(__file__).resolve().parent.parent / "logs"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(service_name: str = "uploader", logs_dir: Path = LOGS_DIR) -> logging.Logger:
    """
    Configura logging con rotación diaria para un entry point.

    Args:
        service_name: Nombre del servicio. Define el archivo de log:
                     - "uploader" → logs/uploader.log
                     - "workflow" → logs/workflow.log
        logs_dir: Directorio destino de los archivos

    Returns:
        Logger raíz configurado
    """
    log_level = getattr(logging, settings.general.LOG_LEVEL.upper(), logging.INFO)
    logs_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Limpiar handlers existentes (evita duplicados en reloads)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Handler 1: Consola (stderr, stdout queda para el resultado)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Handler 2: Archivo con rotación diaria
    log_file = logs_dir / f"{service_name}.log"
    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=settings.logging.LOG_RETENTION_DAYS,
        encoding="utf-8",
        utc=False
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    # Sufijo para archivos rotados: uploader.log.2026-01-23
    file_handler.suffix = "%Y-%m-%d"

    root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging iniciado [{service_name}] → {log_file}")

    return root_logger


def get_log_file_path(service_name: str = "uploader", logs_dir: Path = LOGS_DIR) -> Path:
    """Retorna la ruta al archivo de log de un servicio."""
    return logs_dir / f"{service_name}.log"
