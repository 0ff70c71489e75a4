from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

from config.constants import (
    CSV_UPLOAD_FILENAME,
    DEFAULT_CREDENTIALS_VAULT_ID,
    DEFAULT_ENVIRONMENT_URL,
    LogLevel,
    WorkflowStep,
)


class GeneralSettings(BaseSettings):
    """Configuracion general"""

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Nivel de logging: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Normalizar a mayúsculas y rechazar niveles desconocidos"""
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"LOG_LEVEL inválido: {v}")
        return LogLevel(level).value

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class GrailSettings(BaseSettings):
    """Configuracion del entorno destino (Grail Resource Store)"""

    DT_URL: str = Field(
        default=DEFAULT_ENVIRONMENT_URL,
        description="URL base del entorno"
    )
    DT_API_TOKEN: str = Field(
        default="",
        description="API token con permiso storage:files:write (upload directo)"
    )

    @field_validator("DT_URL")
    @classmethod
    def validate_base_url(cls, v):
        """Remover trailing slash de la URL"""
        if v.endswith("/"):
            return v.rstrip("/")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class WorkflowSettings(BaseSettings):
    """Configuracion de las acciones de workflow"""

    CREDENTIALS_VAULT_ID: str = Field(
        default=DEFAULT_CREDENTIALS_VAULT_ID,
        description="ID de la credencial con el token Bearer"
    )
    PAYLOAD_STEP_NAME: str = Field(
        default=WorkflowStep.RETRIEVE_PAYLOAD.value,
        description="Tarea previa que entrega el descriptor JSON"
    )
    CSV_STEP_NAME: str = Field(
        default=WorkflowStep.RETRIEVE_CSV.value,
        description="Tarea previa que entrega el contenido CSV"
    )
    UPLOAD_STEP_NAME: str = Field(
        default=WorkflowStep.UPLOAD_LOOKUP_DATA.value,
        description="Tarea de upload que consume la accion de query"
    )
    CSV_UPLOAD_FILENAME: str = Field(
        default=CSV_UPLOAD_FILENAME,
        description="Nombre de archivo del blob CSV en el multipart"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class LoggingSettings(BaseSettings):
    """Configuracion de logging"""

    LOG_RETENTION_DAYS: int = Field(
        default=1,
        description="Dias de logs rotados a mantener"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class Settings(BaseSettings):
    """
    Clase principal que agrupa todas las configuraciones
    Uso: from config.settings import settings
         settings.DT_URL, settings.workflow.CREDENTIALS_VAULT_ID, etc
    """

    general: GeneralSettings = GeneralSettings()
    grail: GrailSettings = GrailSettings()
    workflow: WorkflowSettings = WorkflowSettings()
    logging: LoggingSettings = LoggingSettings()

    # Shortcuts para acceso directo
    @property
    def LOG_LEVEL(self) -> str:
        return self.general.LOG_LEVEL

    @property
    def DT_URL(self) -> str:
        return self.grail.DT_URL

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Obtener instancia singleton de Settings
    Uso: from config.settings import get_settings
         settings = get_settings()
    """
    return Settings()


# Instancia global (para imports directos)
settings = get_settings()
