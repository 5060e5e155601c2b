"""Parsing helpers for numbers, units, durations and utterance input files."""

from __future__ import annotations

import json
import logging
import math
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from fitparse.core.constants import LBS_TO_KG, NUMBER_WORDS

logger = logging.getLogger(__name__)

# Loose numeric capture; parse_number decides whether it is a usable number.
NUMBER = r"\d[\d.]*"

_CLOCK_RE = re.compile(r"\bin\s+(\d{1,2}(?::\d{2}){1,2})\b")
_HOURS_RE = re.compile(
    rf"({NUMBER})\s*(?:hours?|hrs?|h)\b(?:\s*(?:and\s+)?(\d+)\s*(?:minutes?|mins?|m)\b)?"
)
_MINUTES_RE = re.compile(rf"({NUMBER})\s*(?:minutes?|mins?)\b")
_DISTANCE_RE = re.compile(
    rf"({NUMBER})\s*(kilometers?|kilometres?|km|k|miles?|mi|meters?|metres?|m)\b"
)


def parse_number(raw: Optional[str]) -> Optional[float]:
    """Parse a decimal string, returning None when it is malformed."""
    if raw is None:
        return None
    text = raw.strip().rstrip(".")
    try:
        value = float(text)
    except ValueError:
        logger.warning("Ignoring malformed number %r", raw)
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_quantity(raw: Optional[str]) -> Optional[float]:
    """Parse a numeric or small number-word quantity like '2' or 'two'."""
    if raw is None:
        return None
    word = raw.strip().lower()
    if word in NUMBER_WORDS:
        return float(NUMBER_WORDS[word])
    return parse_number(word)


def parse_clock(value: str) -> Optional[float]:
    """Parse M:SS or H:MM:SS into total minutes."""
    parts = value.strip().split(":")
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        return None
    if any(number < 0 for number in numbers) or any(number >= 60 for number in numbers[1:]):
        return None

    if len(numbers) == 2:
        minutes, seconds = numbers
        return round(minutes + seconds / 60.0, 2)
    if len(numbers) == 3:
        hours, minutes, seconds = numbers
        return round(hours * 60 + minutes + seconds / 60.0, 2)
    return None


def parse_duration_minutes(text: str) -> Optional[float]:
    """Find a duration in free text and return it in minutes."""
    clock = _CLOCK_RE.search(text)
    if clock:
        parsed = parse_clock(clock.group(1))
        if parsed is not None:
            return parsed

    hours = _HOURS_RE.search(text)
    if hours:
        value = parse_number(hours.group(1))
        if value is not None:
            extra = int(hours.group(2)) if hours.group(2) else 0
            return round(value * 60 + extra, 2)

    for match in _MINUTES_RE.finditer(text):
        value = parse_number(match.group(1))
        if value is not None:
            return value
    return None


def normalize_distance_unit(token: str) -> str:
    """Normalize a distance unit token to km, miles or m."""
    token = token.lower()
    if token in {"k", "km"} or token.startswith("kilomet"):
        return "km"
    if token.startswith("mi"):
        return "miles"
    return "m"


def parse_distance(text: str) -> Optional[Tuple[float, str]]:
    """Find the first well-formed distance in free text."""
    for match in _DISTANCE_RE.finditer(text):
        value = parse_number(match.group(1))
        if value is not None:
            return value, normalize_distance_unit(match.group(2))
    return None


def normalize_weight_unit(token: Optional[str]) -> str:
    """Map a weight unit token to kg or lbs (lbs when absent)."""
    if token and ("kg" in token or "kilo" in token):
        return "kg"
    return "lbs"


def normalize_water_unit(token: str) -> str:
    """Map a volume unit token to oz, ml, cups or liters."""
    token = token.lower()
    if token.startswith("oz") or token.startswith("ounce"):
        return "oz"
    if token.startswith("ml") or token.startswith("millil"):
        return "ml"
    if token.startswith("cup") or token.startswith("glass"):
        return "cups"
    return "liters"


def pounds_to_kg(value: float) -> float:
    """Convert pounds to kilograms."""
    return round(value * LBS_TO_KG, 2)


def _entries_from_data(raw_data: Any) -> List[Dict[str, Any]]:
    if isinstance(raw_data, (str, dict)):
        raw_data = [raw_data]
    if not isinstance(raw_data, list):
        return []

    entries: List[Dict[str, Any]] = []
    for item in raw_data:
        if isinstance(item, str) and item.strip():
            entries.append({"text": item})
        elif isinstance(item, dict) and str(item.get("text") or "").strip():
            entries.append(item)
    return entries


def load_utterances(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[Dict[str, Any]]:
    """Load utterance entries from a text, JSON or YAML file, or stdin text.

    Each entry is a dict with at least ``text``; structured files may also
    carry ``type`` and ``occurred_at``. Plain text yields one entry per
    non-empty line.
    """
    if file_path:
        text = file_path.read_text()
        suffix = file_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return _entries_from_data(yaml.safe_load(text))
        if suffix == ".json":
            return _entries_from_data(json.loads(text))
        return _entries_from_data(text.splitlines())

    if not read_stdin:
        return []

    text = stdin_text.strip()
    if not text:
        return []
    if text[0] in "[{":
        try:
            return _entries_from_data(json.loads(text))
        except json.JSONDecodeError:
            return _entries_from_data(yaml.safe_load(text))
    return _entries_from_data(text.splitlines())
