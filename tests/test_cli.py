"""Tests for the command-line interface."""

import os
import json
import importlib.util
import pytest

CLI_PATH = os.path.join(os.path.dirname(__file__), "..", "scripts", "cli", "golinks_cli.py")


@pytest.fixture(scope="module")
def cli():
    """Import the CLI script as a module."""
    spec = importlib.util.spec_from_file_location("golinks_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.asyncio
class TestCLI:
    """Test CLI commands against a temporary links file."""

    async def test_add_get_list(self, cli, data_file, capsys):
        exit_code = await cli.main(["--data-file", data_file, "add", "gh", "github.com"])
        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == {
            "success": True,
            "shortcut": "gh",
            "url": "http://github.com",
        }

        exit_code = await cli.main(["--data-file", data_file, "get", "gh"])
        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["url"] == "http://github.com"

        exit_code = await cli.main(["--data-file", data_file, "list"])
        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["count"] == 1
        assert output["links"] == [{"shortcut": "gh", "url": "http://github.com"}]

    async def test_get_unknown(self, cli, data_file, capsys):
        exit_code = await cli.main(["--data-file", data_file, "get", "nope"])

        assert exit_code == 1
        assert "not found" in json.loads(capsys.readouterr().err)["error"]

    async def test_add_blank(self, cli, data_file, capsys):
        exit_code = await cli.main(["--data-file", data_file, "add", " ", "github.com"])

        assert exit_code == 1
        assert not os.path.exists(data_file)

    async def test_malformed_file(self, cli, data_file, capsys):
        os.makedirs(os.path.dirname(data_file), exist_ok=True)
        with open(data_file, "w", encoding="utf-8") as f:
            f.write("{broken")

        exit_code = await cli.main(["--data-file", data_file, "list"])

        assert exit_code == 1
        assert "Could not load" in json.loads(capsys.readouterr().err)["error"]

    async def test_no_command(self, cli, capsys):
        assert await cli.main([]) == 1
