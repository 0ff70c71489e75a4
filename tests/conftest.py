import json
from email.parser import BytesParser
from email.policy import default as default_policy
from types import SimpleNamespace

import httpx
import pytest


@pytest.fixture
def upload_config():
    """Configuración mínima válida para upload directo."""
    return {
        "environmentUrl": "https://abc123.live.example.com",
        "apiToken": "dt0c01.TEST",
        "filePath": "/lookups/region/us-east.v2",
        "parsePattern": 'LD:id "," LD:value',
        "lookupField": "id",
        "content": "id,value\n1,a\n2,b",
    }


@pytest.fixture
def sample_descriptor():
    """Descriptor JSON como lo entrega la tarea retrieve-payload."""
    return {
        "filePath": "/lookups/regions",
        "parsePattern": 'LD:id "," LD:value',
        "lookupField": "id",
        "overwrite": True,
        "skippedRecords": 1,
    }


@pytest.fixture
def sample_csv():
    """CSV con encabezado y 3 registros."""
    return "id,value\n1,a\n2,b\n3,c\n"


@pytest.fixture
def recording_transport():
    """
    Factory de transporte httpx que registra cada request.

    Uso:
        transport, calls = recording_transport(httpx.Response(201, json={}))
    """
    def _factory(response_or_exc):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if isinstance(response_or_exc, Exception):
                raise response_or_exc
            return response_or_exc

        return httpx.MockTransport(handler), calls

    return _factory


@pytest.fixture
def parse_multipart():
    """Parsear el body multipart de un request a {name: (headers, bytes, filename)}."""
    def _parse(request: httpx.Request) -> dict:
        raw = (
            b"Content-Type: " + request.headers["content-type"].encode() + b"\r\n\r\n"
            + request.content
        )
        message = BytesParser(policy=default_policy).parsebytes(raw)
        parts = {}
        for part in message.iter_parts():
            name = part.get_param("name", header="content-disposition")
            parts[name] = SimpleNamespace(
                content_type=part.get("content-type"),
                filename=part.get_filename(),
                body=part.get_payload(decode=True),
            )
        return parts

    return _parse


@pytest.fixture
def request_json(parse_multipart):
    """Descriptor JSON enviado en la parte `request`."""
    def _read(request: httpx.Request) -> dict:
        return json.loads(parse_multipart(request)["request"].body)

    return _read


class FakeVault:
    """Credential vault en memoria."""

    def __init__(self, token=None):
        self.token = token
        self.requested_ids = []

    async def get_credentials_details(self, credential_id):
        self.requested_ids.append(credential_id)
        if self.token is None:
            return None
        return SimpleNamespace(token=self.token)


class FakeSteps:
    """Resultados de tareas previas en memoria."""

    def __init__(self, results):
        self.results = results

    async def result(self, step_name):
        return self.results.get(step_name)


class FakeQueryClient:
    """Cliente de queries que registra los DQL ejecutados."""

    def __init__(self, response):
        self.response = response
        self.queries = []

    async def query_execute(self, query):
        self.queries.append(query)
        return self.response


@pytest.fixture
def fake_vault():
    return FakeVault(token="platform-token")


@pytest.fixture
def make_vault():
    return FakeVault


@pytest.fixture
def make_steps():
    return FakeSteps


@pytest.fixture
def make_query_client():
    return FakeQueryClient
