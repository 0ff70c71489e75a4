"""
Tests unitarios para el CLI de upload.

python -m pytest tests/test_grail_lookups/test_cli.py
"""

import json
from unittest.mock import AsyncMock, patch

import httpx

from grail_lookups import cli
from grail_lookups.errors import ValidationError
from grail_lookups.models import UploadResponse

BASE_ARGS = [
    "--file-path", "/lookups/regions",
    "--parse-pattern", 'LD:id "," LD:value',
    "--lookup-field", "id",
    "--content", "id,value\n1,a",
    "--environment-url", "https://tenant.example.com",
    "--api-token", "tok",
]


class TestBuildConfig:
    """Tests de build_config."""

    def test_defaults(self):
        """Sin opciones: defaults del descriptor y sin opcionales."""
        args = cli.build_parser().parse_args(BASE_ARGS)

        config = cli.build_config(args)

        assert config["environmentUrl"] == "https://tenant.example.com"
        assert config["apiToken"] == "tok"
        assert config["options"] == {
            "overwrite": False,
            "autoFlatten": True,
            "skippedRecords": 0,
        }

    def test_all_options(self):
        """Opciones explícitas se trasladan al config."""
        args = cli.build_parser().parse_args(BASE_ARGS + [
            "--overwrite", "--no-auto-flatten", "--skipped-records", "1",
            "--display-name", "Regions", "--timezone", "UTC",
        ])

        options = cli.build_config(args)["options"]

        assert options["overwrite"] is True
        assert options["autoFlatten"] is False
        assert options["skippedRecords"] == 1
        assert options["displayName"] == "Regions"
        assert options["timezone"] == "UTC"
        assert "locale" not in options

    def test_falls_back_to_settings(self):
        """URL y token se toman de settings si no se pasan."""
        args = cli.build_parser().parse_args(BASE_ARGS[:8])

        with patch("grail_lookups.cli.settings") as mock_settings:
            mock_settings.grail.DT_URL = "https://from-env.example.com"
            mock_settings.grail.DT_API_TOKEN = "env-token"

            config = cli.build_config(args)

        assert config["environmentUrl"] == "https://from-env.example.com"
        assert config["apiToken"] == "env-token"


class TestMain:
    """Tests del entry point."""

    def test_success_prints_result(self, capsys):
        """Éxito imprime el resultado JSON y retorna 0."""
        response = UploadResponse(status_code=201, headers={}, data={"id": "abc"})

        with patch("grail_lookups.cli.setup_logging"), \
                patch("grail_lookups.cli.upload_lookup_data", new_callable=AsyncMock) as mock_upload:
            mock_upload.return_value = response

            exit_code = cli.main(BASE_ARGS)

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["data"] == {"id": "abc"}
        mock_upload.assert_called_once()

    def test_integration_error_exit_code(self):
        """Errores de integración retornan 1."""
        with patch("grail_lookups.cli.setup_logging"), \
                patch("grail_lookups.cli.upload_lookup_data", new_callable=AsyncMock) as mock_upload:
            mock_upload.side_effect = ValidationError("filePath must start with /lookups")

            assert cli.main(BASE_ARGS) == 1

    def test_network_error_exit_code(self):
        """Errores de red retornan 1."""
        with patch("grail_lookups.cli.setup_logging"), \
                patch("grail_lookups.cli.upload_lookup_data", new_callable=AsyncMock) as mock_upload:
            mock_upload.side_effect = httpx.ConnectError("Connection refused")

            assert cli.main(BASE_ARGS) == 1
