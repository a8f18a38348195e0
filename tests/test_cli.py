"""Tests for the CLI implementation."""

import base64
import json

import pytest
from typer.testing import CliRunner

from fastresource.cli import app, iter_sources


class TestCLI:
    """Test the CLI functionality."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def hello(self, tmp_path):
        path = tmp_path / "hello.txt"
        path.write_text("héllo\nworld", encoding="utf-8")
        return path

    @pytest.mark.parametrize("mode", [[], ["--sync"]])
    def test_single_file_json_pretty(self, runner, server_runtime, hello, mode):
        result = runner.invoke(app, [*mode, str(hello)])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload == {
            "path": str(hello), "exists": True, "success": True,
            "text": "héllo\nworld", "size": 11,
        }

    def test_binary(self, runner, server_runtime, tmp_path):
        raw = tmp_path / "raw.bin"
        raw.write_bytes(bytes([0x00, 0x7F, 0x80, 0xFF]))

        result = runner.invoke(app, ["--binary", str(raw)])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert base64.b64decode(payload["bytes_b64"]) == b"\x00\x7f\x80\xff"
        assert payload["size"] == 4

    def test_multiple_files_jsonl(self, runner, server_runtime, hello):
        result = runner.invoke(app, ["--exists-only", str(hello), str(hello)])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 2
        for line in lines:
            assert json.loads(line) == {"path": str(hello), "exists": True, "success": True}

    def test_missing_file_exit_code(self, runner, server_runtime, hello):
        result = runner.invoke(app, ["--jsonl", "--sync", str(hello), "/missing/file.txt"])

        assert result.exit_code == 1
        ok, missing = [json.loads(line) for line in result.stdout.strip().splitlines()]
        assert ok["success"] is True
        assert missing["success"] is False
        assert missing["exists"] is False
        assert "/missing/file.txt" in missing["error"]

    def test_output_file(self, runner, server_runtime, hello, tmp_path):
        out = tmp_path / "out.json"
        result = runner.invoke(app, ["-o", str(out), str(hello)])

        assert result.exit_code == 0
        assert json.loads(out.read_text(encoding="utf-8"))["text"] == "héllo\nworld"

    def test_stdin_sources(self, runner, server_runtime, hello):
        result = runner.invoke(app, ["--jsonl", "-"], input=f"{hello}\n\n{hello}\n")

        assert result.exit_code == 0
        assert len(result.stdout.strip().splitlines()) == 2

    def test_no_input(self, runner):
        result = runner.invoke(app, [])
        assert result.exit_code == 1

    def test_remote_file(self, runner, browser_runtime, httpserver):
        httpserver.expect_request("/hello.txt").respond_with_data("héllo\nworld".encode("utf-8"))

        result = runner.invoke(app, [httpserver.url_for("/hello.txt")])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["success"] is True
        assert payload["text"] == "héllo\nworld"


def test_iter_sources():
    assert iter_sources([]) == []
    assert iter_sources(["a", "b"]) == ["a", "b"]


def test_invalid_configuration(server_runtime, monkeypatch, tmp_path):
    monkeypatch.setenv("FASTRESOURCE_TIMEOUT", "soon")
    result = CliRunner().invoke(app, ["--sync", str(tmp_path / "a.txt")])
    assert result.exit_code == 2
