"""Parse and batch commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from fitparse.commands.common import get_state, load_history, parse_datetime_option, print_decisions, print_json_payload
from fitparse.core.config import split_enabled
from fitparse.core.confirm import ConfirmationDecision, decide, split_batch
from fitparse.core.models import ParsedActivity
from fitparse.core.parser import parse_segments
from fitparse.core.segment import ParseError
from fitparse.utils.formatting import summarize
from fitparse.utils.parsing import load_utterances


def parse_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Activity text, e.g. 'ran 5k in 25 minutes'"),
    activity_type: Optional[str] = typer.Option(None, "--type", help="Type override, validated against the text"),
    at: Optional[str] = typer.Option(None, "--at", help="When the activity happened (ISO 8601)"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time (ISO 8601); defaults to the clock"),
) -> None:
    """Parse text and show the structured result without storing it."""
    state = get_state(ctx)
    reference = parse_datetime_option(now, "--now") or state.now()

    try:
        activities = parse_segments(
            text,
            now=reference,
            type_override=activity_type,
            occurred_at=parse_datetime_option(at),
            history=load_history(state),
            vocabulary=state.vocabulary,
            split=split_enabled(state.config),
        )
    except ParseError as exc:
        typer.echo(f"Parse error: {exc}")
        raise typer.Exit(code=2)
    decisions = [decide(activity) for activity in activities]
    print_decisions(state, decisions, title=f"Parsed {len(decisions)} activit{'y' if len(decisions) == 1 else 'ies'}")

    if not state.json_output and not state.plain_output:
        for decision in decisions:
            state.console.print(decision.message, markup=False)


def batch_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, help="Text, JSON or YAML file with utterances"),
    stdin: bool = typer.Option(False, "--stdin", help="Read utterances from stdin"),
) -> None:
    """Parse many utterances and report which the batch policy auto-logs."""
    state = get_state(ctx)

    stdin_text = sys.stdin.read() if stdin else ""
    entries = load_utterances(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    if not entries:
        raise typer.BadParameter("Provide --file or --stdin with at least one utterance")

    reference = state.now()
    history = load_history(state)
    activities: List[ParsedActivity] = []
    for entry in entries:
        occurred_at = entry.get("occurred_at")
        activities.extend(
            parse_segments(
                str(entry["text"]),
                now=reference,
                type_override=entry.get("type"),
                occurred_at=parse_datetime_option(str(occurred_at), "occurred_at") if occurred_at else None,
                history=history,
                vocabulary=state.vocabulary,
                split=split_enabled(state.config),
            )
        )

    logged, held = split_batch(activities)
    decisions: List[ConfirmationDecision] = [decide(activity) for activity in activities]

    if state.json_output:
        payload: Dict[str, Any] = {
            "activities": [decision.as_dict() for decision in decisions],
            "summary": {"total": len(activities), "auto_logged": len(logged), "held": len(held)},
        }
        print_json_payload(state, payload)
        return

    print_decisions(state, decisions, title=f"Batch ({len(activities)} activities)")
    if state.plain_output:
        typer.echo(f"auto_logged\t{len(logged)}")
        typer.echo(f"held\t{len(held)}")
        return

    state.console.print(f"Auto-logged {len(logged)} of {len(activities)} activities")
    for activity in held:
        state.console.print(f"Held back: {summarize(activity)} ({activity.confidence})", markup=False)
