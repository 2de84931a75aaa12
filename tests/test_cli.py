"""Tests for the command-line interface."""

import json

import pytest
from conftest import make_factory
from reviewsense import cli
from reviewsense.core.config import settings


@pytest.fixture(autouse=True)
def isolated_credentials(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "credential_dir", str(tmp_path / "creds"))


def test_analyze_runs_and_exports(tsv_file, tmp_path, capsys):
    out = tmp_path / "results.json"
    args = cli.build_parser().parse_args([
        "analyze", "--dataset", str(tsv_file), "--count", "3",
        "--no-telemetry", "--seed", "1", "--out", str(out),
    ])

    code = cli.cmd_analyze(args, pipeline_factory=make_factory())

    assert code == 0
    printed = capsys.readouterr().out
    assert "Confidence Score:" in printed

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["summary"]["total"] == 3
    assert data["summary"]["dataset_size"] == 2
    assert data["metadata"]["export_timestamp"]
    assert all(run["review"] in ("Great product!", "Terrible, broke in a day") for run in data["runs"])


def test_analyze_reports_bootstrap_failure(tmp_path, capsys):
    args = cli.build_parser().parse_args([
        "analyze", "--dataset", str(tmp_path / "missing.tsv"), "--no-telemetry",
    ])

    code = cli.cmd_analyze(args, pipeline_factory=make_factory())

    assert code == 1
    printed = capsys.readouterr().out
    assert "Application startup failed" in printed
    assert "Dataset loading error" in printed


def test_token_set_show_clear(capsys):
    parser = cli.build_parser()

    assert cli.cmd_token(parser.parse_args(["token", "hf_abcdef"])) == 0
    cli.cmd_token(parser.parse_args(["token"]))
    assert "hf_a*****" in capsys.readouterr().out

    cli.cmd_token(parser.parse_args(["token", "--clear"]))
    cli.cmd_token(parser.parse_args(["token"]))
    assert "No token stored" in capsys.readouterr().out


def test_main_without_command_prints_help(capsys):
    cli.main([])
    assert "Available commands" in capsys.readouterr().out


@pytest.mark.parametrize("count", ["0", "-2"])
def test_analyze_rejects_non_positive_count(count):
    with pytest.raises(SystemExit) as exc_info:
        cli.build_parser().parse_args(["analyze", "--count", count])
    assert exc_info.value.code == 2
