"""JSON storage helpers for logged activities and common logs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n")
    return path


def read_json(path: Path, default: Any = None) -> Any:
    """Read a JSON file, returning ``default`` when it does not exist."""
    if not path.exists():
        return default
    return json.loads(path.read_text())


def append_jsonl(path: Path, records: Iterable[Dict[str, Any]]) -> int:
    """Append records as JSON lines and return how many were written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("a") as handle:
        for record in records:
            handle.write(json.dumps(record, separators=(",", ":")) + "\n")
            count += 1
    return count

