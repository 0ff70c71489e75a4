from enum import Enum


# Entorno por defecto cuando DT_URL no esta definido
DEFAULT_ENVIRONMENT_URL = "https://nzi70060.sprint.apps.dynatracelabs.com"

# Credencial del vault con el token Bearer para el workflow
DEFAULT_CREDENTIALS_VAULT_ID = "CREDENTIALS_VAULT-4CAA8C8350C3FF4A"


class Endpoint(str, Enum):
    """Endpoints de upload de lookups"""

    GRAIL_LOOKUP_UPLOAD = "/api/v2/grail/lookups/upload"
    RESOURCE_STORE_LOOKUP_UPLOAD = "/platform/storage/resource-store/v1/files/tabular/lookup:upload"


class WorkflowStep(str, Enum):
    """Nombres de tareas previas del workflow"""

    RETRIEVE_PAYLOAD = "retrieve-payload"
    RETRIEVE_CSV = "retrieve-csv"
    UPLOAD_LOOKUP_DATA = "upload-lookup-data"


class LogLevel(str, Enum):
    """Niveles de logging"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Multipart

REQUEST_PART = "request"
CONTENT_PART = "content"
JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"
CSV_UPLOAD_FILENAME = "data.csv"

# Reglas del descriptor

LOOKUP_PATH_PREFIX = "/lookups"
MAX_TEXT_FIELD_LENGTH = 500
PREVIEW_CHARS = 200
