"""
Tests for the machine CLI.
"""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

TARGET = "machine.examples.users:machine"

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    """Keep log lines out of captured command output."""
    monkeypatch.setenv("MACHINE_LOG_LEVEL", "CRITICAL")


def test_describe_json():
    result = runner.invoke(app, ["describe", TARGET, "--json"])

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["labels"] == ["INIT", "IN_PROGRESS"]
    assert out["initial"] == "INIT"
    assert out["status_field"] == "status"
    assert out["strict"] is False


def test_describe_table():
    result = runner.invoke(app, ["describe", TARGET])

    assert result.exit_code == 0
    assert "IN_PROGRESS" in result.stdout


def test_describe_bad_target():
    result = runner.invoke(app, ["describe", "nope", "--json"])

    assert result.exit_code == 2
    assert "error" in json.loads(result.stdout)


def test_run_json(events_file):
    result = runner.invoke(app, ["run", TARGET, "--events", str(events_file), "--json", "--show-state"])

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["events_replayed"] == 2
    assert out["statuses"] == ["IN_PROGRESS", "INIT"]
    assert out["final_status"] == "INIT"
    assert out["state"] == {"error": None, "status": "INIT", "users": ["a"]}
    assert len(out["state_hash"]) == 64


def test_run_until_and_initial_state(events_file):
    state = json.dumps({"status": "IN_PROGRESS", "users": []})

    result = runner.invoke(
        app, ["run", TARGET, "-e", str(events_file), "--state", state, "--until", "1", "--json"]
    )

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    # FETCH_USERS is not handled while in progress
    assert out["statuses"] == ["IN_PROGRESS"]
    assert out["events_replayed"] == 1


def test_run_rich_output(events_file):
    result = runner.invoke(app, ["run", TARGET, "-e", str(events_file)])

    assert result.exit_code == 0
    assert "Replayed 2 events" in result.stdout
    assert "FETCH_USERS_RESPONSE" in result.stdout


def test_run_missing_events_file(tmp_path):
    missing = tmp_path / "missing.jsonl"

    result = runner.invoke(app, ["run", TARGET, "-e", str(missing), "--json"])

    assert result.exit_code == 2
    assert json.loads(result.stdout)["path"] == str(missing)


def test_run_invalid_state_json(events_file):
    result = runner.invoke(app, ["run", TARGET, "-e", str(events_file), "--state", "{bad"])

    assert result.exit_code == 2
    assert "Invalid --state JSON" in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.stdout


def test_run_non_utf8_events_file(tmp_path):
    path = tmp_path / "binary.jsonl"
    path.write_bytes(b"\xff\xfe")

    result = runner.invoke(app, ["run", TARGET, "-e", str(path), "--json"])

    assert result.exit_code == 2
    assert "Cannot read events" in json.loads(result.stdout)["error"]


def test_run_events_path_is_directory(tmp_path):
    result = runner.invoke(app, ["run", TARGET, "-e", str(tmp_path), "--json"])

    assert result.exit_code == 2
    assert "error" in json.loads(result.stdout)


def test_describe_module_with_syntax_error(broken_module):
    result = runner.invoke(app, ["describe", f"{broken_module}:machine", "--json"])

    assert result.exit_code == 2
    assert "Cannot import module" in json.loads(result.stdout)["error"]


def test_run_module_with_syntax_error(broken_module, events_file):
    result = runner.invoke(app, ["run", f"{broken_module}:machine", "-e", str(events_file)])

    assert result.exit_code == 2
    assert "Cannot import module" in result.stdout


def test_run_state_not_serializable(defs_module, events_file):
    result = runner.invoke(app, ["run", f"{defs_module}:tagged", "-e", str(events_file), "--json"])

    assert result.exit_code == 2
    assert "not JSON serializable" in json.loads(result.stdout)["error"]


def test_run_trail_shows_resolved_status(defs_module, events_file):
    result = runner.invoke(app, ["run", f"{defs_module}:statusless", "-e", str(events_file), "--json"])

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["statuses"] == ["INIT", "INIT"]
    assert out["final_status"] == "INIT"
