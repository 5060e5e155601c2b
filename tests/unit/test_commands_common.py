from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import pytest
import typer
from rich.console import Console

from fitparse.commands.common import (
    get_state,
    load_history,
    parse_datetime_option,
    print_decisions,
    remember_texts,
)
from fitparse.core.confirm import decide
from fitparse.core.models import ActivityType, ParsedActivity, WeightFields
from fitparse.core.state import CLIState
from fitparse.core.vocabulary import DEFAULT_VOCABULARY

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@dataclass
class FakeContext:
    obj: Any


def _state(tmp_path: Path, config: Optional[Dict[str, Any]] = None, plain: bool = True) -> CLIState:
    return CLIState(
        json_output=False,
        plain_output=plain,
        verbose=False,
        quiet=False,
        config_path=tmp_path / "config.toml",
        config=config or {"storage": {"common_logs": str(tmp_path / "common_logs.json"), "common_logs_limit": 2}},
        console=Console(record=True, width=120),
        vocabulary=DEFAULT_VOCABULARY,
    )


def _weight(value: float, raw_text: str, confidence: int = 95) -> ParsedActivity:
    return ParsedActivity(
        type=ActivityType.WEIGHT,
        fields=WeightFields(value=value, unit="lbs"),
        confidence=confidence,
        raw_text=raw_text,
        timestamp=NOW,
    )


def test_get_state_returns_cli_state(tmp_path: Path) -> None:
    state = _state(tmp_path)
    assert get_state(FakeContext(obj=state)) is state


def test_get_state_raises_on_invalid_obj() -> None:
    with pytest.raises(typer.Exit):
        get_state(FakeContext(obj={"not": "state"}))


def test_parse_datetime_option() -> None:
    assert parse_datetime_option(None) is None
    assert parse_datetime_option("2026-03-01T08:30:00+00:00") == datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc)
    with pytest.raises(typer.BadParameter):
        parse_datetime_option("yesterday", "--at")


def test_remember_texts_counts_and_saves(tmp_path: Path) -> None:
    state = _state(tmp_path)
    decisions = [decide(_weight(175, "weight 175")), decide(_weight(175, "Weight 175"))]
    logs = remember_texts(state, decisions, NOW)
    assert [(log.text, log.count, log.category) for log in logs] == [("weight 175", 2, "weight")]

    saved = json.loads((tmp_path / "common_logs.json").read_text())
    assert saved[0]["count"] == 2
    assert load_history(state) == logs


def test_load_history_ignores_unreadable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    state = _state(tmp_path)
    (tmp_path / "common_logs.json").write_text("{broken")
    assert load_history(state) == []
    assert "Ignoring unreadable common logs file" in capsys.readouterr().err


def test_print_decisions_plain(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    state = _state(tmp_path)
    print_decisions(state, [decide(_weight(175, "175", confidence=60))], title="Parsed")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "text\ttype\tconfidence\tstate\tdetails"
    assert lines[1] == "175\tweight\t60\tpending_confirmation\t175 lbs"


def test_print_decisions_rich_escapes_text_and_shows_warnings(tmp_path: Path) -> None:
    state = _state(tmp_path, plain=False)
    activity = ParsedActivity(
        type=ActivityType.WEIGHT,
        fields=WeightFields(value=175),
        confidence=85,
        raw_text="[bold]weight 175",
        timestamp=NOW,
        warnings=("ignored type override 'food': text is a weight expression",),
    )
    print_decisions(state, [decide(activity)], title="Parsed")
    output = state.console.export_text()
    assert "[bold]weight 175" in output
    assert "warning: ignored type override 'food'" in output
