from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from fitparse.__main__ import app

NOW = "2026-03-01T12:00:00+00:00"


def test_parse_command_json_output(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["--json", "parse", "ran 5k in 25 minutes", "--now", NOW])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    decision = payload["activities"][0]
    assert decision["state"] == "auto_logged"
    assert decision["activity"]["type"] == "cardio"
    assert decision["activity"]["confidence"] == 95
    assert decision["activity"]["fields"] == {
        "activity_name": "running",
        "distance": 5.0,
        "distance_unit": "km",
        "duration_minutes": 25.0,
        "pace": 5.0,
    }
    assert decision["activity"]["timestamp"] == NOW


def test_parse_command_plain_multi_activity(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["--plain", "parse", "ran 5k, weight 175, ate eggs"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "text\ttype\tconfidence\tstate\tdetails"
    assert lines[1].startswith("ran 5k\tcardio\t90\tauto_logged")
    assert lines[2].startswith("weight 175\tweight\t90\tauto_logged")
    assert lines[3].startswith("ate eggs\tnutrition\t80\tpending_confirmation")


def test_parse_command_rejects_empty_text(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["parse", "   "])
    assert result.exit_code == 2
    assert "Parse error" in result.stdout


def test_parse_command_invalid_at_option(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["parse", "weight 175", "--at", "yesterday"])
    assert result.exit_code == 2


def test_parse_command_uses_configured_vocabulary(runner, isolated_dirs: Dict[str, Path]) -> None:
    before = runner.invoke(app, ["--json", "parse", "zumba for 30 minutes"])
    assert json.loads(before.stdout)["activities"][0]["activity"]["type"] == "unknown"

    isolated_dirs["config_file"].write_text('[vocabulary]\nworkout = ["zumba"]\n')
    after = runner.invoke(app, ["--json", "parse", "zumba for 30 minutes"])
    assert after.exit_code == 0
    activity = json.loads(after.stdout)["activities"][0]["activity"]
    assert activity["type"] == "cardio"
    assert activity["fields"]["duration_minutes"] == 30.0


def test_invalid_config_exits(runner, isolated_dirs: Dict[str, Path]) -> None:
    isolated_dirs["config_file"].write_text("[vocabulary\n")
    result = runner.invoke(app, ["parse", "weight 175"])
    assert result.exit_code == 2
    assert "Config error" in result.stdout


def test_log_command_with_yes_appends_activity(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["--json", "log", "175", "--yes"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["logged"] == 1
    assert payload["activities"][0]["state"] == "auto_logged"

    log_path = isolated_dirs["data_dir"] / "activities.jsonl"
    assert payload["activity_log"] == str(log_path.resolve())
    records = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert records[0]["type"] == "weight"
    assert records[0]["fields"] == {"value": 175.0, "unit": "lbs"}

    common = json.loads((isolated_dirs["data_dir"] / "common_logs.json").read_text())
    assert common[0]["text"] == "175"
    assert common[0]["category"] == "weight"


def test_log_command_json_without_yes_keeps_pending(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["--json", "log", "175"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["logged"] == 0
    assert payload["activities"][0]["state"] == "pending_confirmation"
    assert not (isolated_dirs["data_dir"] / "activities.jsonl").exists()


def test_log_command_prompt_declined(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["log", "175"], input="n\n")
    assert result.exit_code == 0
    assert "Did you mean: Weight: 175 lbs?" in result.stdout
    assert "Not logged" in result.stdout
    assert not (isolated_dirs["data_dir"] / "activities.jsonl").exists()


def test_log_command_high_confidence_needs_no_prompt(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["--plain", "log", "slept 8 hours, weight 80 kg"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == "logged\t2"
    assert len((isolated_dirs["data_dir"] / "activities.jsonl").read_text().splitlines()) == 2


def test_batch_command_stdin_json(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(
        app,
        ["--json", "batch", "--stdin"],
        input="ran 5k in 25 minutes\nslept 8 hours\n175\n",
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["summary"] == {"total": 3, "auto_logged": 2, "held": 1}
    assert [item["activity"]["type"] for item in payload["activities"]] == ["cardio", "sleep", "weight"]


def test_batch_command_yaml_file_plain(runner, isolated_dirs: Dict[str, Path], tmp_path: Path) -> None:
    path = tmp_path / "notes.yaml"
    path.write_text("- text: drank 64 oz water\n- text: energy 8/10\n")
    result = runner.invoke(app, ["--plain", "batch", "--file", str(path)])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[-2:] == ["auto_logged\t2", "held\t0"]


def test_batch_command_requires_input(runner, isolated_dirs: Dict[str, Path]) -> None:
    result = runner.invoke(app, ["batch"])
    assert result.exit_code == 2


def test_history_command_after_logging(runner, isolated_dirs: Dict[str, Path]) -> None:
    empty = runner.invoke(app, ["history"])
    assert empty.exit_code == 0
    assert "No common logs yet." in empty.stdout

    for _ in range(2):
        assert runner.invoke(app, ["--json", "log", "weight 175"]).exit_code == 0
    runner.invoke(app, ["--json", "log", "slept 8 hours"])

    result = runner.invoke(app, ["--json", "history"])
    assert result.exit_code == 0
    logs = json.loads(result.stdout)["common_logs"]
    assert [(log["text"], log["count"], log["category"]) for log in logs] == [
        ("weight 175", 2, "weight"),
        ("slept 8 hours", 1, "sleep"),
    ]

    plain = runner.invoke(app, ["--plain", "history", "--query", "slept"])
    assert plain.stdout.splitlines()[0] == "text\tcount\tcategory\tscore"
    assert plain.stdout.splitlines()[1].startswith("slept 8 hours\t1\tsleep\t")
