"""Cardio and strength extraction."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from fitparse.core.constants import (
    CARDIO_ACTIVITIES,
    DEFAULT_CARDIO_ACTIVITY,
    DEFAULT_STRENGTH_ACTIVITY,
    EXERCISE_FILLER_WORDS,
    STRENGTH_EXERCISES,
)
from fitparse.core.models import CardioFields, Extraction, StrengthFields, StrengthSet
from fitparse.core.patterns import SetMatch, match_cardio_distance, match_rpe, match_set_count, match_sets
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary, find_word
from fitparse.utils.parsing import (
    normalize_weight_unit,
    parse_distance,
    parse_duration_minutes,
    pounds_to_kg,
)

_NAME_CLEAN_RE = re.compile(r"[^\w\s-]")


def find_cardio_activity(text: str) -> Optional[str]:
    """Return the canonical activity for the earliest cardio verb in text."""
    best: Optional[Tuple[int, str]] = None
    for verbs, name in CARDIO_ACTIVITIES:
        match = find_word(text, verbs)
        if match and (best is None or match.start() < best[0]):
            best = (match.start(), name)
    return best[1] if best else None


def extract_cardio(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    activity = find_cardio_activity(text)

    distance: Optional[Tuple[float, str]] = None
    paired = match_cardio_distance(text)
    if paired:
        distance = (paired.value, paired.unit)
    else:
        distance = parse_distance(text)
    duration = parse_duration_minutes(text)

    if activity is None and distance is None and duration is None:
        if not vocabulary.matches("workout", text):
            return None
        return Extraction(
            fields=CardioFields(activity_name=DEFAULT_CARDIO_ACTIVITY),
            band="keyword_only",
            reasoning="workout keyword without details",
        )

    pace = None
    if distance and duration and distance[0] > 0:
        pace = round(duration / distance[0], 2)

    fields = CardioFields(
        activity_name=activity or DEFAULT_CARDIO_ACTIVITY,
        distance=distance[0] if distance else None,
        distance_unit=distance[1] if distance else None,
        duration_minutes=duration,
        pace=pace,
    )
    if distance and duration:
        band, reasoning = "structured_full", "distance and duration"
    elif distance:
        band, reasoning = "structured", "distance"
    elif duration:
        band, reasoning = "keyword_full", "duration only"
    else:
        band, reasoning = "keyword_only", "activity verb only"
    return Extraction(fields=fields, band=band, reasoning=reasoning)


def exercise_name(prefix: str) -> str:
    """Turn the text before a set pattern into an exercise name."""
    words = _NAME_CLEAN_RE.sub(" ", prefix).split()
    while words and words[0] in EXERCISE_FILLER_WORDS:
        words.pop(0)
    return " ".join(words) or DEFAULT_STRENGTH_ACTIVITY


def _activity_name(text: str, start: int) -> str:
    name = exercise_name(text[:start])
    if name == DEFAULT_STRENGTH_ACTIVITY:
        named = find_word(text, STRENGTH_EXERCISES)
        if named:
            return named.group(0)
    return name


def _set_weight_kg(match: SetMatch) -> Optional[float]:
    if match.weight is None:
        return None
    # A weight without a unit is read as pounds.
    if normalize_weight_unit(match.unit) == "kg":
        return match.weight
    return pounds_to_kg(match.weight)


def extract_strength(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    duration = parse_duration_minutes(text)
    rpe = match_rpe(text)

    sets = match_sets(text)
    if sets:
        weight = _set_weight_kg(sets)
        record = StrengthSet(reps=sets.reps, weight=weight, rpe=rpe)
        fields = StrengthFields(
            activity_name=_activity_name(text, sets.start),
            sets=(record,) * sets.sets,
            duration_minutes=duration,
        )
        if weight is not None:
            return Extraction(fields, "structured_full", f"{sets.sets}x{sets.reps} with weight")
        return Extraction(fields, "structured", f"{sets.sets}x{sets.reps}")

    count = match_set_count(text)
    if count:
        fields = StrengthFields(
            activity_name=_activity_name(text, count.start),
            sets=(StrengthSet(rpe=rpe),) * count.sets,
            duration_minutes=duration,
        )
        return Extraction(fields, "keyword_default", f"{count.sets} sets without reps")

    if not (vocabulary.matches("strength", text) or vocabulary.matches("workout", text)):
        return None

    named = find_word(text, STRENGTH_EXERCISES)
    fields = StrengthFields(
        activity_name=named.group(0) if named else DEFAULT_STRENGTH_ACTIVITY,
        duration_minutes=duration,
    )
    if duration is not None:
        return Extraction(fields, "keyword_partial", "strength keyword with a duration")
    if named:
        return Extraction(fields, "keyword_only", "named exercise without sets")
    return Extraction(fields, "keyword_only", "strength keyword only")
