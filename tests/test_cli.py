"""Tests for the command-line interface."""

import json

import pytest

from lib.database import InMemoryMappingStore
from scripts.cli import url_shortener_cli
from scripts.cli.url_shortener_cli import build_parser, load_cli_config, main


@pytest.fixture
def cli_env(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_USER", "admin")
    monkeypatch.setenv("BASIC_AUTH_PASS", "pw")
    monkeypatch.setenv("API_SECRET", "key")
    monkeypatch.setenv("STORE_BACKEND", "memory")
    for name in ["SUPABASE_URL", "SUPABASE_KEY", "SHORT_CODE_LENGTH"]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestCLIConfig:
    """Flags layered over the server configuration."""

    def test_uses_server_environment(self, cli_env):
        config = load_cli_config(build_parser().parse_args(["get", "abc"]))

        assert config.store_backend == "memory"
        assert config.short_code_length == 6

    def test_flags_override_environment(self, cli_env):
        args = build_parser().parse_args([
            "--backend", "postgres",
            "--db-url", "postgresql://u:p@db:5432/links",
            "--length", "8",
            "get", "abc",
        ])

        config = load_cli_config(args)

        assert config.store_backend == "postgres"
        assert config.database_url == "postgresql://u:p@db:5432/links"
        assert config.short_code_length == 8


@pytest.mark.asyncio
class TestCLICommands:
    """Commands against the in-memory backend."""

    async def test_shorten(self, cli_env, capsys):
        exit_code = await main(["shorten", "https://example.com", "--custom-code", "docs1"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["short_code"] == "docs1"
        assert output["original_url"] == "https://example.com"

    async def test_shorten_generated_length(self, cli_env, capsys):
        exit_code = await main(["--length", "9", "shorten", "https://example.com"])

        assert exit_code == 0
        assert len(json.loads(capsys.readouterr().out)["short_code"]) == 9

    async def test_shorten_invalid_code(self, cli_env, capsys):
        exit_code = await main(["shorten", "https://example.com", "--custom-code", "bad code"])

        assert exit_code == 1
        assert json.loads(capsys.readouterr().err)["success"] is False

    async def test_get_missing(self, cli_env, capsys):
        exit_code = await main(["get", "nothing"])

        assert exit_code == 1
        assert json.loads(capsys.readouterr().err) == {
            "success": False,
            "error": "Short code 'nothing' not found",
        }

    async def test_delete(self, cli_env, capsys):
        exit_code = await main(["delete", "nothing"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["success"] is True

    async def test_missing_credentials_in_environment(self, cli_env, capsys):
        cli_env.delenv("API_SECRET")

        exit_code = await main(["get", "abc"])

        assert exit_code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    async def test_memory_backend_is_selected(self, cli_env, monkeypatch):
        built = []
        original = url_shortener_cli.build_service

        def recording_build_service(config, logger):
            service = original(config, logger)
            built.append(service.store)
            return service

        monkeypatch.setattr(url_shortener_cli, "build_service", recording_build_service)

        await main(["get", "abc"])

        assert isinstance(built[0], InMemoryMappingStore)
