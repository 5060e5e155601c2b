"""Confidence scoring on the canonical 0-100 scale."""

from __future__ import annotations

from fitparse.core.constants import CONFIDENCE_BANDS, SOURCE_CAPS, UNKNOWN_CONFIDENCE_CAP
from fitparse.core.models import ActivityType


def score_confidence(band: str, source: str, activity_type: ActivityType) -> int:
    """Look up the band score and cap it by how the type was chosen."""
    if band not in CONFIDENCE_BANDS:
        raise KeyError(f"unknown confidence band: {band}")
    if source == "conflict":
        return CONFIDENCE_BANDS["conflict"]

    score = min(CONFIDENCE_BANDS[band], SOURCE_CAPS.get(source, SOURCE_CAPS["none"]))
    if activity_type is ActivityType.UNKNOWN:
        score = min(score, UNKNOWN_CONFIDENCE_CAP)
    return int(score)


def to_fraction(confidence: int) -> float:
    """Convert a 0-100 confidence to the 0-1 scale."""
    if not 0 <= confidence <= 100:
        raise ValueError(f"confidence must be within 0-100, got {confidence}")
    return round(confidence / 100.0, 2)


def from_fraction(value: float) -> int:
    """Convert a 0-1 confidence to the 0-100 scale."""
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"confidence fraction must be within 0-1, got {value}")
    return int(round(value * 100))
