"""Structured pattern matchers shared by the classifier and the extractors.

Every matcher takes normalized (lowercase, trimmed) text and returns the
parsed values, or None when the pattern does not match or when one of its
numbers is malformed. A malformed number never leaks out as a value; the
pattern simply counts as not matching.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from fitparse.core.constants import MAX_SET_COUNT
from fitparse.utils.parsing import (
    NUMBER,
    normalize_distance_unit,
    normalize_water_unit,
    normalize_weight_unit,
    parse_number,
)

WEIGHT_UNIT = r"kilograms?|kilos?|kgs?|pounds?|lbs?"
DISTANCE_UNIT = r"kilometers?|kilometres?|km|k|miles?|mi|meters?|metres?|m"
# Reps followed by a distance or time unit are intervals ("6x400m"), not sets.
_NOT_INTERVAL = rf"(?![\d.])(?!\s*(?:{DISTANCE_UNIT}|minutes?|mins?|seconds?|secs?)\b)"

_WEIGHT_RE = re.compile(
    r"^(?P<prefix>(?:my\s+)?(?:body\s*)?weight(?:\s+(?:is|was|today))?|i\s+weigh(?:ed)?|weigh(?:ed|s)?)?"
    rf"\s*:?\s*(?P<value>{NUMBER})\s*(?P<unit>{WEIGHT_UNIT})?$"
)
_BARE_NUMBER_RE = re.compile(rf"^(?P<value>{NUMBER})$")

_SLEEP_RES = [
    re.compile(
        r"\b(?:slept|sleep)\s+(?:for\s+)?(?:about\s+|around\s+|like\s+)?"
        rf"(?P<value>{NUMBER})\s*(?P<unit>hours?|hrs?|h|minutes?|mins?)?(?![\w.])"
    ),
    re.compile(
        rf"(?P<value>{NUMBER})\s*(?P<unit>hours?|hrs?|h)\s+(?:of\s+)?(?:sleep|slept)\b"
    ),
]

_ENERGY_RE = re.compile(
    rf"\benergy(?:\s+level)?(?:\s+(?:is|was|at))?\s*[:=]?\s*(?P<value>{NUMBER})(?P<scale>\s*/\s*10)?"
)

_WATER_RE = re.compile(
    rf"(?P<value>{NUMBER})\s*(?P<unit>ounces?|oz|milliliters?|millilitres?|ml|cups?|glass(?:es)?|liters?|litres?|l)\b"
)
_WATER_WORD_RE = re.compile(r"\bwater\b")

_SET_RES = [
    re.compile(
        r"(?P<sets>\d+)\s*[x×]\s*(?P<reps>\d+)"
        rf"{_NOT_INTERVAL}(?:\s*reps?)?"
        rf"(?:\s*(?:@|at|with)\s*(?P<weight>{NUMBER})\s*(?P<unit>{WEIGHT_UNIT})?)?"
    ),
    re.compile(
        r"(?P<sets>\d+)\s+sets?\s+(?:of\s+)?(?P<reps>\d+)"
        rf"{_NOT_INTERVAL}(?:\s*reps?)?"
        rf"(?:\s*(?:@|at|with)\s*(?P<weight>{NUMBER})\s*(?P<unit>{WEIGHT_UNIT})?)?"
    ),
]
_SETS_ONLY_RE = re.compile(r"(?P<sets>\d+)\s+sets?\b")
_RPE_RE = re.compile(rf"\b(?:@\s*)?rpe\s*(?P<value>{NUMBER})")

CARDIO_VERB = (
    r"ran|run|running|jogged|jog|jogging|walked|walk|walking|cycled|cycling|biked|bike|biking|"
    r"rode|swam|swim|swimming|hiked|hike|hiking|rowed|rowing"
)

_CARDIO_DISTANCE_RES = [
    re.compile(
        rf"\b(?P<verb>{CARDIO_VERB})\b(?:\s+\w+){{0,3}}?\s+(?P<value>{NUMBER})\s*(?P<unit>{DISTANCE_UNIT})\b"
    ),
    re.compile(
        rf"(?P<value>{NUMBER})\s*(?P<unit>{DISTANCE_UNIT})\s+(?P<verb>{CARDIO_VERB}|ride|row)\b"
    ),
]


@dataclass(frozen=True)
class WeightMatch:
    value: float
    unit: str
    explicit_unit: bool
    prefixed: bool


@dataclass(frozen=True)
class SleepMatch:
    hours: float
    explicit_unit: bool


@dataclass(frozen=True)
class EnergyMatch:
    level: int
    scaled: bool


@dataclass(frozen=True)
class WaterMatch:
    amount: float
    unit: str


@dataclass(frozen=True)
class SetMatch:
    sets: int
    reps: Optional[int]
    weight: Optional[float]
    unit: Optional[str]
    start: int


@dataclass(frozen=True)
class DistanceMatch:
    verb: str
    value: float
    unit: str


def match_weight(text: str) -> Optional[WeightMatch]:
    """Match a whole-segment weight expression such as 'weight 175' or '80 kg'.

    A bare number is not a weight expression; see ``match_bare_number``.
    """
    match = _WEIGHT_RE.match(text)
    if not match or not (match.group("prefix") or match.group("unit")):
        return None
    value = parse_number(match.group("value"))
    if value is None:
        return None
    unit_token = match.group("unit")
    return WeightMatch(
        value=value,
        unit=normalize_weight_unit(unit_token),
        explicit_unit=unit_token is not None,
        prefixed=match.group("prefix") is not None,
    )


def match_bare_number(text: str) -> Optional[float]:
    match = _BARE_NUMBER_RE.match(text)
    if not match:
        return None
    return parse_number(match.group("value"))


def match_sleep(text: str) -> Optional[SleepMatch]:
    for pattern in _SLEEP_RES:
        for match in pattern.finditer(text):
            value = parse_number(match.group("value"))
            if value is None:
                continue
            unit = match.group("unit") or ""
            hours = round(value / 60.0, 2) if unit.startswith("min") else value
            return SleepMatch(hours=hours, explicit_unit=bool(unit))
    return None


def match_energy(text: str) -> Optional[EnergyMatch]:
    for match in _ENERGY_RE.finditer(text):
        value = parse_number(match.group("value"))
        if value is None:
            continue
        return EnergyMatch(level=int(round(value)), scaled=match.group("scale") is not None)
    return None


def mentions_water(text: str) -> bool:
    return _WATER_WORD_RE.search(text) is not None


def match_water(text: str) -> Optional[WaterMatch]:
    """Match '<number> <unit>' only when the segment also mentions water."""
    if not mentions_water(text):
        return None
    for match in _WATER_RE.finditer(text):
        value = parse_number(match.group("value"))
        if value is None:
            continue
        return WaterMatch(amount=value, unit=normalize_water_unit(match.group("unit")))
    return None


def match_sets(text: str) -> Optional[SetMatch]:
    """Match SxR, 'SxR @ W unit' or 'S sets of R reps at W unit'."""
    candidates = []
    for pattern in _SET_RES:
        match = pattern.search(text)
        if match:
            candidates.append(match)
    if not candidates:
        return None

    match = min(candidates, key=lambda item: item.start())
    sets = int(match.group("sets"))
    if sets < 1 or sets > MAX_SET_COUNT:
        return None

    weight = None
    if match.group("weight") is not None:
        weight = parse_number(match.group("weight"))
        if weight is None:
            return None
    return SetMatch(
        sets=sets,
        reps=int(match.group("reps")),
        weight=weight,
        unit=match.group("unit"),
        start=match.start(),
    )


def match_set_count(text: str) -> Optional[SetMatch]:
    """Match a bare 'N sets' without reps."""
    match = _SETS_ONLY_RE.search(text)
    if not match:
        return None
    sets = int(match.group("sets"))
    if sets < 1 or sets > MAX_SET_COUNT:
        return None
    return SetMatch(sets=sets, reps=None, weight=None, unit=None, start=match.start())


def match_rpe(text: str) -> Optional[float]:
    match = _RPE_RE.search(text)
    if not match:
        return None
    return parse_number(match.group("value"))


def match_cardio_distance(text: str) -> Optional[DistanceMatch]:
    """Match a cardio verb paired with a distance ('ran 5k', '3 miles walk')."""
    for pattern in _CARDIO_DISTANCE_RES:
        for match in pattern.finditer(text):
            value = parse_number(match.group("value"))
            if value is None:
                continue
            return DistanceMatch(
                verb=match.group("verb"),
                value=value,
                unit=normalize_distance_unit(match.group("unit")),
            )
    return None
