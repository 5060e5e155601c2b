"""Formatting helpers used by confirmation prompts and console output."""

from __future__ import annotations

from typing import List, Optional

from fitparse.core.constants import CARDIO_VERBS, DEFAULT_STRENGTH_ACTIVITY, TYPE_LABELS
from fitparse.core.models import (
    CardioFields,
    EnergyFields,
    FoodItem,
    MoodFields,
    NutritionFields,
    ParsedActivity,
    SleepFields,
    StrengthFields,
    UnknownFields,
    WaterFields,
    WeightFields,
)


def format_number(value: Optional[float]) -> str:
    """Format a number without a trailing .0."""
    if value is None:
        return "N/A"
    if float(value).is_integer():
        return str(int(value))
    return f"{float(value):g}"


def format_minutes(minutes: Optional[float]) -> str:
    """Format minutes as '45 min' or '1h 05m'."""
    if minutes is None:
        return "N/A"
    total = int(round(float(minutes)))
    hours, rest = divmod(total, 60)
    if hours:
        return f"{hours}h {rest:02d}m"
    return f"{format_number(minutes)} min"


def _food_item(item: FoodItem) -> str:
    if item.quantity and item.quantity != 1:
        return f"{format_number(item.quantity)} {item.name}"
    return item.name


def _strength_detail(fields: StrengthFields) -> str:
    if not fields.sets:
        return ""
    first = fields.sets[0]
    if first.reps is None:
        return f"{len(fields.sets)} sets"
    detail = f"{len(fields.sets)}x{first.reps}"
    if first.weight is not None:
        detail += f" @ {format_number(first.weight)} {fields.weight_unit}"
    if first.rpe is not None:
        detail += f" rpe {format_number(first.rpe)}"
    return detail


def describe_fields(activity: ParsedActivity) -> str:
    """Describe the extracted fields without the type label."""
    fields = activity.fields
    if isinstance(fields, WeightFields):
        return f"{format_number(fields.value)} {fields.unit}"
    if isinstance(fields, NutritionFields):
        items = ", ".join(_food_item(item) for item in fields.items)
        return f"{items} ({fields.meal_type})"
    if isinstance(fields, CardioFields):
        parts: List[str] = [fields.activity_name]
        if fields.distance is not None:
            parts.append(f"{format_number(fields.distance)} {fields.distance_unit}")
        if fields.duration_minutes is not None:
            parts.append(f"in {format_minutes(fields.duration_minutes)}")
        if fields.pace is not None:
            parts.append(f"({format_number(fields.pace)} min/{fields.distance_unit})")
        return " ".join(parts)
    if isinstance(fields, StrengthFields):
        detail = _strength_detail(fields)
        return f"{fields.activity_name} {detail}".strip()
    if isinstance(fields, SleepFields):
        text = f"{format_number(fields.hours)} hours" if fields.hours is not None else "hours not given"
        return f"{text} ({fields.quality})" if fields.quality else text
    if isinstance(fields, WaterFields):
        return f"{format_number(fields.amount)} {fields.unit}"
    if isinstance(fields, MoodFields):
        return fields.mood
    if isinstance(fields, EnergyFields):
        return f"{fields.level}/10"
    if isinstance(fields, UnknownFields):
        return fields.raw
    raise TypeError(f"Unsupported fields type: {type(fields).__name__}")


def summarize(activity: ParsedActivity) -> str:
    """One-line summary such as 'Cardio: running 5 km in 25 min'."""
    label = TYPE_LABELS.get(activity.type.value, activity.type.value)
    return f"{label}: {describe_fields(activity)}"


def canonical_phrase(activity: ParsedActivity) -> str:
    """Rebuild a phrase that parses back to the same fields."""
    fields = activity.fields
    if isinstance(fields, WeightFields):
        return f"weight {format_number(fields.value)} {fields.unit}"
    if isinstance(fields, NutritionFields):
        items = " and ".join(_food_item(item) for item in fields.items)
        return f"ate {items} for {fields.meal_type}"
    if isinstance(fields, CardioFields):
        phrase = CARDIO_VERBS.get(fields.activity_name, fields.activity_name)
        if fields.distance is not None:
            phrase += f" {format_number(fields.distance)} {fields.distance_unit}"
        if fields.duration_minutes is not None:
            joiner = "in" if fields.distance is not None else "for"
            phrase += f" {joiner} {format_number(fields.duration_minutes)} minutes"
        return phrase
    if isinstance(fields, StrengthFields):
        name = "lifted weights" if fields.activity_name == DEFAULT_STRENGTH_ACTIVITY else fields.activity_name
        phrase = f"{name} {_strength_detail(fields)}".strip()
        if fields.duration_minutes is not None:
            phrase += f" for {format_number(fields.duration_minutes)} minutes"
        return phrase
    if isinstance(fields, SleepFields):
        if fields.hours is None:
            return f"slept {fields.quality}" if fields.quality else "sleep"
        phrase = f"slept {format_number(fields.hours)} hours"
        return f"{phrase} {fields.quality}" if fields.quality else phrase
    if isinstance(fields, WaterFields):
        return f"drank {format_number(fields.amount)} {fields.unit} water"
    if isinstance(fields, MoodFields):
        return f"feeling {fields.mood}"
    if isinstance(fields, EnergyFields):
        return f"energy {fields.level}/10"
    return activity.raw_text


def confirmation_message(activity: ParsedActivity) -> str:
    """Confirmation text for a logged activity, hedged when confidence is lower."""
    if activity.confidence >= 90:
        prefix = "Got it!"
    elif activity.confidence >= 70:
        prefix = "Logged!"
    else:
        prefix = "Recorded (let me know if I misunderstood)"
    return f"{prefix} {summarize(activity)}."
