"""Shared command helpers."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, List, Optional, Sequence

import typer
from rich.markup import escape
from rich.table import Table

from fitparse.core.config import common_logs_limit, resolve_storage_path
from fitparse.core.confirm import ConfirmationDecision
from fitparse.core.history import (
    CommonLog,
    common_log_to_dict,
    common_logs_from_data,
    record_common_log,
)
from fitparse.core.state import CLIState
from fitparse.exporters.json_export import read_json, write_json
from fitparse.utils.formatting import describe_fields


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def parse_datetime_option(value: Optional[str], option: str = "--at") -> Optional[datetime]:
    """Parse an ISO 8601 option value."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"{option} must be an ISO 8601 timestamp, got {value!r}") from exc


def load_history(state: CLIState) -> List[CommonLog]:
    path = resolve_storage_path(state.config, "common_logs")
    try:
        return common_logs_from_data(read_json(path, default=[]))
    except json.JSONDecodeError:
        typer.echo(f"Ignoring unreadable common logs file: {path}", err=True)
        return []


def remember_texts(state: CLIState, decisions: Sequence[ConfirmationDecision], now: datetime) -> List[CommonLog]:
    """Count logged texts in the common-log history and save it."""
    logs = load_history(state)
    limit = common_logs_limit(state.config)
    for decision in decisions:
        activity = decision.activity
        logs = record_common_log(logs, activity.raw_text, now, category=activity.type.value, limit=limit)
    write_json(resolve_storage_path(state.config, "common_logs"), [common_log_to_dict(log) for log in logs])
    return logs


def print_decisions(state: CLIState, decisions: Sequence[ConfirmationDecision], title: str) -> None:
    """Render parse results as JSON, tab-separated text or a rich table."""
    if state.json_output:
        print_json_payload(state, {"activities": [decision.as_dict() for decision in decisions]})
        return

    if state.plain_output:
        typer.echo("text\ttype\tconfidence\tstate\tdetails")
        for decision in decisions:
            activity = decision.activity
            typer.echo(
                "\t".join(
                    [
                        activity.raw_text,
                        activity.type.value,
                        str(activity.confidence),
                        decision.state.value,
                        describe_fields(activity),
                    ]
                )
            )
        return

    table = Table(title=title)
    table.add_column("Text")
    table.add_column("Type")
    table.add_column("Details")
    table.add_column("Confidence", justify="right")
    table.add_column("State")
    for decision in decisions:
        activity = decision.activity
        table.add_row(
            escape(activity.raw_text),
            activity.type.value,
            escape(describe_fields(activity)),
            str(activity.confidence),
            decision.state.value,
        )
    state.console.print(table)
    for decision in decisions:
        for warning in decision.activity.warnings:
            state.console.print(f"warning: {warning}", style="yellow", markup=False)
