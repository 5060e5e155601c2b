"""Log and history commands."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from fitparse.commands.common import (
    get_state,
    load_history,
    parse_datetime_option,
    print_decisions,
    print_json_payload,
    remember_texts,
)
from fitparse.core.config import resolve_storage_path, split_enabled
from fitparse.core.confirm import ConfirmationDecision, ConfirmationState, decide, resolve_confirmation
from fitparse.core.history import rank_common_logs
from fitparse.core.parser import parse_segments
from fitparse.core.segment import ParseError
from fitparse.exporters.json_export import append_jsonl
from fitparse.utils.formatting import confirmation_message


def _confirm(state_json: bool, decision: ConfirmationDecision, assume_yes: bool) -> ConfirmationDecision:
    if decision.state is not ConfirmationState.PENDING_CONFIRMATION:
        return decision
    if assume_yes:
        accepted = True
    elif state_json:
        # No interactive prompt in JSON mode; the result stays pending.
        return decision
    else:
        accepted = typer.confirm(decision.message.replace(" (yes/no)", ""), default=False)

    resolved = resolve_confirmation(decision.state, accepted)
    if resolved is ConfirmationState.AUTO_LOGGED:
        return replace(decision, state=resolved, message=confirmation_message(decision.activity))
    return replace(decision, state=resolved, message="Not logged. Try again with more detail.")


def log_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Activity text to log"),
    activity_type: Optional[str] = typer.Option(None, "--type", help="Type override, validated against the text"),
    at: Optional[str] = typer.Option(None, "--at", help="When the activity happened (ISO 8601)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept results that need confirmation"),
) -> None:
    """Parse text, confirm when needed, and append accepted results to the activity log."""
    state = get_state(ctx)
    now = state.now()

    try:
        activities = parse_segments(
            text,
            now=now,
            type_override=activity_type,
            occurred_at=parse_datetime_option(at),
            history=load_history(state),
            vocabulary=state.vocabulary,
            split=split_enabled(state.config),
        )
    except ParseError as exc:
        typer.echo(f"Parse error: {exc}")
        raise typer.Exit(code=2)

    decisions = [_confirm(state.json_output, decide(activity), yes) for activity in activities]
    stored = [decision for decision in decisions if decision.state is ConfirmationState.AUTO_LOGGED]

    log_path = resolve_storage_path(state.config, "activity_log")
    if stored:
        append_jsonl(log_path, [decision.activity.as_dict() for decision in stored])
        remember_texts(state, stored, now)

    if state.json_output:
        print_json_payload(
            state,
            {
                "activities": [decision.as_dict() for decision in decisions],
                "logged": len(stored),
                "activity_log": str(log_path),
            },
        )
        return

    if state.plain_output:
        print_decisions(state, decisions, title="Log")
        typer.echo(f"logged\t{len(stored)}")
        return

    for decision in decisions:
        state.console.print(decision.message, markup=False)
    if stored:
        state.console.print(f"Saved {len(stored)} activit{'y' if len(stored) == 1 else 'ies'} to {log_path}", markup=False)


def history_command(
    ctx: typer.Context,
    query: str = typer.Option("", "--query", help="Only show logs containing this text"),
    limit: int = typer.Option(10, "--limit", min=1, help="Maximum number of logs to show"),
) -> None:
    """Show frequently logged phrases, ranked by frequency and recency."""
    state = get_state(ctx)
    ranked = rank_common_logs(load_history(state), state.now(), query=query, limit=limit)

    if state.json_output:
        rows: List[dict] = [
            {
                "text": item.log.text,
                "count": item.log.count,
                "last_used": item.log.last_used.isoformat(),
                "category": item.log.category,
                "score": item.score,
            }
            for item in ranked
        ]
        print_json_payload(state, {"common_logs": rows})
        return

    if state.plain_output:
        typer.echo("text\tcount\tcategory\tscore")
        for item in ranked:
            typer.echo(f"{item.log.text}\t{item.log.count}\t{item.log.category or '-'}\t{item.score:.3f}")
        return

    if not ranked:
        state.console.print("No common logs yet.")
        return

    table = Table(title="Common logs")
    table.add_column("Text")
    table.add_column("Count", justify="right")
    table.add_column("Category")
    table.add_column("Last used")
    table.add_column("Score", justify="right")
    for item in ranked:
        table.add_row(
            escape(item.log.text),
            str(item.log.count),
            item.log.category or "-",
            item.log.last_used.strftime("%Y-%m-%d %H:%M"),
            f"{item.score:.3f}",
        )
    state.console.print(table)
