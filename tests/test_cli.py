import json
from pathlib import Path

import pytest

from phpsl import cli

SAMPLES = Path(__file__).resolve().parent.parent / "samples"


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_cli_reports_vulnerable_sample(capsys):
    exit_code = cli.main(["--path", str(SAMPLES / "vulnerable")])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Scan results" in captured.out
    assert "  ✗ [CRITICAL] CIS-003: Directory traversal vulnerability (Line 8)" in captured.out
    assert "  ✗ [HIGH] OWASP-A1: OS command built from a variable (Line 4)" in captured.out
    assert "Summary: Scanned 1 files, found 2 potential issues." in captured.out
    assert "notes.txt" not in captured.out


def test_cli_writes_json_report(tmp_path, capsys):
    output_path = tmp_path / "artifacts" / "php-sl.json"

    exit_code = cli.main(["-p", str(SAMPLES / "vulnerable"), "--out", str(output_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert f"Report written to {output_path}" in captured.out
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["_meta"] == {"scanned_count": 1, "issue_count": 2}
    files = [key for key in data if not key.startswith("_")]
    assert len(files) == 1 and files[0].endswith("index.php")


def test_cli_json_format_on_stdout(capsys):
    exit_code = cli.main(["-p", str(SAMPLES / "safe"), "--format", "json"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out) == {"_meta": {"scanned_count": 1, "issue_count": 0}}


def test_cli_passes_on_clean_sample(capsys):
    exit_code = cli.main(["-p", str(SAMPLES / "safe")])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "File:" not in captured.out
    assert "Summary: Scanned 1 files, found 0 potential issues." in captured.out


def test_cli_exclude_rules(capsys):
    exit_code = cli.main(
        ["-p", str(SAMPLES / "vulnerable"), "--exclude-rules", "CIS-003", "--exclude-rules", "owasp-003"]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "found 0 potential issues" in captured.out


def test_cli_exclude_paths(capsys):
    exit_code = cli.main(["-p", str(SAMPLES), "--exclude", "vulnerable,storage"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Summary: Scanned 1 files, found 0 potential issues." in captured.out


def test_cli_without_path_prints_help(capsys):
    exit_code = cli.main([])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "usage: php-sl" in captured.out


def test_cli_missing_path_is_a_scan_error(capsys):
    exit_code = cli.main(["-p", "/nonexistent/path"])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "SCAN ERROR [0]: Path does not exist: /nonexistent/path" in captured.err


def test_cli_bad_config_is_a_scan_error(tmp_path, capsys):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("format: xml\n", encoding="utf-8")

    exit_code = cli.main(["-p", str(SAMPLES / "safe"), "--config", str(config_path)])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "SCAN ERROR [400]" in captured.err


def test_cli_unexpected_failure_is_fatal(capsys, monkeypatch):
    def explode(*_args, **_kwargs):
        raise ValueError("boom")

    monkeypatch.setattr(cli, "run_scan", explode)

    exit_code = cli.main(["-p", str(SAMPLES / "safe")])

    captured = capsys.readouterr()
    assert exit_code == 3
    assert "FATAL ERROR: boom" in captured.err


def test_cli_config_with_mixed_unknown_keys_is_a_scan_error(tmp_path, capsys):
    config_path = tmp_path / "mixed.yaml"
    config_path.write_text("1: a\nfoo: b\n", encoding="utf-8")

    exit_code = cli.main(["-p", str(SAMPLES / "safe"), "--config", str(config_path)])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "SCAN ERROR [400]: Unknown config keys" in captured.err
