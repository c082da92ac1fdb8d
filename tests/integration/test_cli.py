import json

import pytest
import yaml
from click.testing import CliRunner
from propreader.CLI.main import cli


@pytest.fixture
def properties_file(tmp_path):
    path = tmp_path / "app.properties"
    path.write_text(
        "# Application settings\n"
        "name = demo\n"
        "welcome = Welcome to \\\n"
        "          Wikipedia!\n"
        "helloInJapanese = こんにちは\n",
        encoding="utf-8",
    )
    return str(path)


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'properties' in result.output


def test_cli_dump_json(properties_file):
    runner = CliRunner()
    result = runner.invoke(cli, ['dump', properties_file])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "helloInJapanese": "こんにちは",
        "name": "demo",
        "welcome": "Welcome to Wikipedia!",
    }


def test_cli_dump_yaml(properties_file):
    runner = CliRunner()
    result = runner.invoke(cli, ['dump', '-F', 'yaml', properties_file])
    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["welcome"] == "Welcome to Wikipedia!"


def test_cli_dump_text(properties_file):
    runner = CliRunner()
    result = runner.invoke(cli, ['dump', '--format', 'text', properties_file])
    assert result.exit_code == 0
    assert result.output.splitlines()[1] == "name=demo"


def test_cli_get(properties_file):
    runner = CliRunner()
    result = runner.invoke(cli, ['get', properties_file, 'welcome'])
    assert result.exit_code == 0
    assert result.output == "Welcome to Wikipedia!\n"


def test_cli_get_line_number(properties_file):
    runner = CliRunner()
    result = runner.invoke(cli, ['get', '-n', properties_file, 'welcome'])
    assert result.exit_code == 0
    assert result.output.startswith("3: ")


def test_cli_get_missing_key(properties_file):
    runner = CliRunner()
    result = runner.invoke(cli, ['get', properties_file, 'nope'])
    assert result.exit_code == 1
    assert "Key 'nope' not found" in result.output


def test_cli_keys_with_whitespace_delimiter(tmp_path):
    path = tmp_path / "ws.properties"
    path.write_text("beta two\nalpha one\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ['-d', 'whitespace', 'keys', str(path)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["alpha", "beta"]


def test_cli_missing_file():
    runner = CliRunner()
    result = runner.invoke(cli, ['dump', 'non_existent.properties'])
    assert result.exit_code == 2
    assert 'does not exist' in result.output


def test_cli_bad_encoding(tmp_path):
    path = tmp_path / "latin.properties"
    path.write_bytes("name = café\n".encode("latin-1"))
    runner = CliRunner()
    result = runner.invoke(cli, ['get', str(path), 'name'])
    assert result.exit_code == 1
    assert 'Cannot decode' in result.output

    result = runner.invoke(cli, ['-e', 'latin-1', 'get', str(path), 'name'])
    assert result.exit_code == 0
    assert result.output == "café\n"
