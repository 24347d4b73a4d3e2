"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from apiprobe.cli.app import app, parse_header_lines, parse_probe_ids
from apiprobe.core.config import get_settings
from apiprobe.version import __version__

from conftest import respond

runner = CliRunner()

SECURE_HEADERS = {
    "Strict-Transport-Security": "max-age=31536000",
    "Content-Security-Policy": "default-src 'self'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


def test_parse_header_lines():
    headers = parse_header_lines(
        [
            "Authorization: Bearer a:b",
            "Accept:application/json",
            "broken line",
            "X-Empty:",
        ]
    )
    assert headers == {"Authorization": "Bearer a:b", "Accept": "application/json"}


def test_parse_probe_ids():
    assert parse_probe_ids(None) == []
    assert parse_probe_ids("auth-check, CORS-check,,") == ["auth-check", "cors-check"]


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_probes_command():
    result = runner.invoke(app, ["probes"])
    assert result.exit_code == 0
    for probe_id in ["auth-check", "sensitive-data", "cors-check", "security-headers", "rate-limit"]:
        assert probe_id in result.output


def test_scan_writes_json_report(use_transport, tmp_path):
    seen = use_transport(respond(401, json={"error": "unauthorized"}))
    out = tmp_path / "report.json"

    result = runner.invoke(
        app,
        [
            "scan",
            "https://api.example.com/v1/users",
            "-H",
            "Authorization: Bearer abc",
            "--probes",
            "auth-check,cors-check",
            "--output",
            str(out),
        ],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert [f["name"] for f in data["findings"]] == ["Authentication Check", "CORS Configuration"]
    assert data["findings"][0]["status"] == "passed"
    assert data["status_code"] == 401
    assert data["endpoint"]["headers"] == {"Authorization": "Bearer abc"}
    assert seen[0].headers["authorization"] == "Bearer abc"


def test_scan_table_output(use_transport):
    use_transport(respond(200, headers=SECURE_HEADERS))

    result = runner.invoke(
        app,
        ["scan", "https://api.example.com/v1/users", "--probes", "security-headers"],
    )

    assert result.exit_code == 0, result.output
    assert "1 Passed" in result.output


def test_scan_fail_on_failed(use_transport, tmp_path):
    use_transport(respond(200, json={"users": []}))

    result = runner.invoke(
        app,
        [
            "scan",
            "https://api.example.com/v1/users",
            "--probes",
            "auth-check",
            "--fail-on",
            "failed",
            "--output",
            str(tmp_path / "r.json"),
        ],
    )

    assert result.exit_code == 2


def test_scan_rejects_invalid_url():
    result = runner.invoke(app, ["scan", "ftp://example.com"])
    assert result.exit_code == 1
    assert "Invalid endpoint" in result.output


def test_scan_skips_unknown_selection(use_transport, tmp_path):
    use_transport(respond(401))
    output = tmp_path / "report.json"

    result = runner.invoke(
        app,
        ["scan", "https://api.example.com", "--probes", "nope,auth-check", "-o", str(output)],
    )

    assert result.exit_code == 0
    report = json.loads(output.read_text())
    assert [f["name"] for f in report["findings"]] == ["Authentication Check"]


def test_scan_passes_timeout_and_retries(use_transport):
    seen = use_transport(respond(401))

    result = runner.invoke(
        app,
        ["scan", "https://api.example.com", "-p", "auth-check", "--timeout", "4", "--retries", "1"],
    )

    assert result.exit_code == 0
    assert {r.extensions["timeout"]["read"] for r in seen} == {4.0}


def test_scan_rejects_invalid_timeout(use_transport):
    seen = use_transport(respond(200))

    result = runner.invoke(app, ["scan", "https://api.example.com", "--timeout", "0"])

    assert result.exit_code == 1
    assert "Invalid options" in result.output
    assert seen == []


def test_scan_rejects_invalid_json_body(use_transport):
    seen = use_transport(respond(200))

    result = runner.invoke(
        app,
        ["scan", "https://api.example.com/items", "-X", "POST", "-d", "{bad"],
    )

    assert result.exit_code == 1
    assert seen == []


def test_config_show():
    result = runner.invoke(app, ["config", "--show"])
    assert result.exit_code == 0
    assert "30000ms" in result.output


def test_config_validate_reports_errors(monkeypatch):
    monkeypatch.setenv("APIPROBE_VERIFY_TLS", "false")
    get_settings.cache_clear()

    result = runner.invoke(app, ["config", "--validate"])

    assert result.exit_code == 1
    assert "APIPROBE_VERIFY_TLS" in result.output
