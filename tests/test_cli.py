import json
import shutil
from pathlib import Path

import yaml
from click.testing import CliRunner

from rest_api_spec.cli import main

FIXTURES = Path(__file__).parent / "fixtures"
API_DIR = FIXTURES / "api"


class TestCliShow:
    def test_show_json(self):
        runner = CliRunner()
        result = runner.invoke(main, ["show", str(API_DIR / "get.json")])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["name"] == "get"
        assert data["path_parts"] == ["index", "id"]
        assert data["body"] == "absent"

    def test_show_yaml(self):
        runner = CliRunner()
        result = runner.invoke(main, ["show", str(API_DIR / "index.yaml"), "--format", "yaml"])

        assert result.exit_code == 0
        data = yaml.safe_load(result.stdout)
        assert data["methods"] == ["POST", "PUT"]
        assert data["body"] == "required"

    def test_show_malformed_file(self, tmp_path):
        f = tmp_path / "dup.json"
        f.write_text('{"dup": {"methods": ["GET", "GET"]}}')
        runner = CliRunner()
        result = runner.invoke(main, ["show", str(f)])

        assert result.exit_code == 1
        assert "found duplicate method [GET]" in result.output


class TestCliCheck:
    def test_check_directory(self):
        runner = CliRunner()
        result = runner.invoke(main, ["check", str(API_DIR)])

        assert result.exit_code == 0
        assert "Found 4 apis." in result.output

    def test_check_list(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-v", "check", str(API_DIR), "--list"])

        assert result.exit_code == 0
        assert "get  GET  /{index}/_doc/{id}  body=absent" in result.output
        assert "search  GET,POST  /_search /{index}/_search  body=optional" in result.output

    def test_check_duplicate_api(self, tmp_path):
        shutil.copy(API_DIR / "ping.json", tmp_path / "ping.json")
        runner = CliRunner()
        result = runner.invoke(main, ["check", str(API_DIR), str(tmp_path)])

        assert result.exit_code == 1
        assert "found duplicate api [ping]" in result.output


class TestCliUndecodableFile:
    def test_show_invalid_utf8(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_bytes(b'{"x": {"methods": ["G\xff\xfeT"]}}')
        runner = CliRunner()
        result = runner.invoke(main, ["show", str(f)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert f"[{f}]" in result.output
