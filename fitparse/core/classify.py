"""Activity type classification for normalized text segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Tuple

from fitparse.core.constants import OVERRIDE_ALIASES, SOURCE_CAPS
from fitparse.core.history import CommonLog, dominant_category
from fitparse.core.models import ActivityType, Classification
from fitparse.core.patterns import (
    match_bare_number,
    match_cardio_distance,
    match_energy,
    match_sets,
    match_sleep,
    match_water,
    match_weight,
)
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

# Evaluated in order; the first detector that matches fixes the type.
STRUCTURED_DETECTORS: List[Tuple[ActivityType, Callable[[str], object]]] = [
    (ActivityType.WEIGHT, match_weight),
    (ActivityType.SLEEP, match_sleep),
    (ActivityType.ENERGY, match_energy),
    (ActivityType.WATER, match_water),
    (ActivityType.STRENGTH, match_sets),
    (ActivityType.CARDIO, match_cardio_distance),
]

# Keyword sets checked after food/workout, highest priority first.
_SECONDARY_KEYWORDS = [
    ("weight", ActivityType.WEIGHT),
    ("sleep", ActivityType.SLEEP),
    ("energy", ActivityType.ENERGY),
    ("water", ActivityType.WATER),
    ("mood", ActivityType.MOOD),
]


@dataclass(frozen=True)
class KeywordHits:
    food: bool
    workout: bool
    strength: bool
    weight: bool
    sleep: bool
    water: bool
    mood: bool
    energy: bool
    feeling: bool

    @property
    def any_workout(self) -> bool:
        return self.workout or self.strength


def keyword_hits(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> KeywordHits:
    return KeywordHits(
        food=vocabulary.mentions_food(text),
        workout=vocabulary.matches("workout", text),
        strength=vocabulary.matches("strength", text),
        weight=vocabulary.matches("weight", text),
        sleep=vocabulary.matches("sleep", text),
        water=vocabulary.matches("water", text),
        mood=vocabulary.matches("mood", text),
        energy=vocabulary.matches("energy", text),
        feeling=vocabulary.matches("feeling", text),
    )


def detect_structured(text: str) -> Optional[ActivityType]:
    """Return the type of the first structured pattern that matches."""
    for activity_type, detector in STRUCTURED_DETECTORS:
        if detector(text) is not None:
            return activity_type
    return None


def _conflict() -> Classification:
    return Classification(
        ActivityType.UNKNOWN,
        "conflict",
        "both food and workout words present; please log them separately",
    )


def _classify_by_keywords(hits: KeywordHits) -> Classification:
    if hits.food:
        return Classification(ActivityType.NUTRITION, "keyword", "food words")
    if hits.any_workout:
        if hits.strength:
            return Classification(ActivityType.STRENGTH, "keyword", "strength words")
        return Classification(ActivityType.CARDIO, "keyword", "workout words")

    for name, activity_type in _SECONDARY_KEYWORDS:
        if getattr(hits, name):
            return Classification(activity_type, "keyword", f"{name} words")

    if hits.feeling:
        return Classification(ActivityType.MOOD, "fallback", "feeling word without other keywords")
    return Classification(ActivityType.UNKNOWN, "none", "no known keywords")


def auto_classify(
    text: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    history: Optional[Sequence[CommonLog]] = None,
) -> Classification:
    """Classify with structured patterns first, then keyword sets.

    Food and workout words together are a conflict even when one of them
    also forms a structured pattern.
    """
    hits = keyword_hits(text, vocabulary)
    if hits.food and hits.any_workout:
        return _conflict()

    structured = detect_structured(text)
    if structured is not None:
        return Classification(structured, "pattern", f"{structured.value} pattern")

    if match_bare_number(text) is not None:
        if history and dominant_category(history) == ActivityType.WEIGHT.value:
            return Classification(ActivityType.WEIGHT, "history", "bare number; recent logs are mostly weight")
        return Classification(ActivityType.WEIGHT, "fallback", "bare number read as weight")

    return _classify_by_keywords(hits)


def resolve_override_name(name: str, text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[ActivityType]:
    """Map an override string or alias to an activity type."""
    key = name.strip().lower()
    key = OVERRIDE_ALIASES.get(key, key)
    if key == "workout":
        return ActivityType.STRENGTH if vocabulary.matches("strength", text) else ActivityType.CARDIO
    try:
        return ActivityType(key)
    except ValueError:
        return None


def validate_override(
    text: str,
    type_override: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> Tuple[Optional[ActivityType], Optional[str]]:
    """Check an override against the text.

    Returns ``(type, None)`` when the override is usable and
    ``(None, reason)`` when it must be discarded.
    """
    requested = resolve_override_name(type_override, text, vocabulary)
    if requested is None or requested is ActivityType.UNKNOWN:
        return None, f"{type_override!r} is not a known activity type"

    structured = detect_structured(text)
    if structured is not None and structured is not requested:
        return None, f"text matches a {structured.value} pattern"

    hits = keyword_hits(text, vocabulary)
    bare = match_bare_number(text) is not None

    if requested is ActivityType.WEIGHT:
        if hits.food and not bare and "weight" not in text:
            return None, "text names food"
    elif requested is ActivityType.NUTRITION:
        if bare or match_weight(text) is not None:
            return None, "text is a weight expression"
        if hits.any_workout and not hits.food:
            return None, "text only describes a workout"
    elif requested in (ActivityType.CARDIO, ActivityType.STRENGTH):
        if hits.food and not hits.any_workout:
            return None, "text only describes food"
    return requested, None


def classify(
    text: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    type_override: Optional[str] = None,
    history: Optional[Sequence[CommonLog]] = None,
) -> Classification:
    """Choose one activity type, honoring a valid override."""
    detected = auto_classify(text, vocabulary, history)
    if type_override is None or not type_override.strip():
        logger.debug("classified %r as %s (%s)", text, detected.type.value, detected.source)
        return detected

    requested, reason = validate_override(text, type_override, vocabulary)
    if requested is None:
        warning = f"ignored type override {type_override!r}: {reason}"
        logger.warning(warning)
        return replace(detected, warnings=detected.warnings + (warning,))

    # Detection already agrees and is at least as trustworthy as an override.
    if requested is detected.type and SOURCE_CAPS[detected.source] >= SOURCE_CAPS["override"]:
        return detected

    logger.debug("classified %r as %s (override)", text, requested.value)
    return Classification(requested, "override", f"type override {type_override!r}")
